# ===================================================================================
# ==                 Gate evaluator tests                                          ==
# ===================================================================================

import pytest

from ttfb_gate.config import GateMode
from ttfb_gate.gate import GateEvaluator, GateState, evaluate_gate


class TestEnforceMode:
    """p95 vs threshold with enforcement on"""

    def test_above_threshold_fails(self):
        decision = evaluate_gate(1200.0, 1000.0, GateMode.ENFORCE)
        assert decision.triggered is True
        assert decision.passed is False
        assert decision.exit_code == 1
        assert decision.state is GateState.FAILED

    def test_below_threshold_passes(self):
        decision = evaluate_gate(800.0, 1000.0, GateMode.ENFORCE)
        assert decision.triggered is False
        assert decision.passed is True
        assert decision.exit_code == 0
        assert decision.state is GateState.PASSED

    def test_equal_threshold_passes(self):
        """Comparison is strict greater-than"""
        decision = evaluate_gate(1000.0, 1000.0, GateMode.ENFORCE)
        assert decision.passed is True
        assert decision.exit_code == 0


class TestNonEnforcingModes:
    """off and warn never change the exit code"""

    @pytest.mark.parametrize("mode", [GateMode.OFF, GateMode.WARN])
    @pytest.mark.parametrize("p95", [0.0, 800.0, 1000.0, 1200.0, 1e9])
    def test_always_exit_zero(self, mode, p95):
        decision = evaluate_gate(p95, 1000.0, mode)
        assert decision.exit_code == 0
        assert decision.passed is True
        assert decision.state is GateState.PASSED

    def test_warn_still_reports_trigger(self):
        decision = evaluate_gate(1200.0, 1000.0, GateMode.WARN)
        assert decision.triggered is True
        assert decision.exit_code == 0

    def test_mode_accepts_string(self):
        assert evaluate_gate(1200.0, 1000.0, "warn").mode is GateMode.WARN


class TestStateMachine:
    """PENDING -> PASSED/FAILED, terminal"""

    def test_starts_pending(self):
        assert GateEvaluator(1000.0).state is GateState.PENDING

    def test_default_mode_enforces(self):
        gate = GateEvaluator(1000.0)
        assert gate.evaluate(1500.0).exit_code == 1
        assert gate.state is GateState.FAILED

    def test_second_evaluation_rejected(self):
        gate = GateEvaluator(1000.0, GateMode.ENFORCE)
        gate.evaluate(500.0)
        with pytest.raises(RuntimeError):
            gate.evaluate(1500.0)
        assert gate.state is GateState.PASSED

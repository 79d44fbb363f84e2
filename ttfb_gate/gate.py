# gate.py
from dataclasses import dataclass
from enum import Enum

from .config import GateMode


class GateState(str, Enum):
    PENDING = "pending"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class GateDecision:
    mode: GateMode
    threshold_ms: float
    p95_ms: float
    triggered: bool     # p95 strictly above the threshold
    passed: bool
    exit_code: int
    state: GateState


class GateEvaluator:
    """
    Single-shot p95 gate.

    Starts PENDING; evaluate() moves it to PASSED or FAILED and both are final.
    Only ENFORCE mode can fail; OFF and WARN always pass with exit code 0.
    """

    def __init__(self, threshold_ms: float, mode: GateMode = GateMode.ENFORCE):
        self.threshold_ms = threshold_ms
        self.mode = GateMode(mode)
        self.state = GateState.PENDING

    def evaluate(self, p95_ms: float) -> GateDecision:
        if self.state is not GateState.PENDING:
            raise RuntimeError(f"gate already evaluated ({self.state.value})")

        triggered = p95_ms > self.threshold_ms  # equal passes
        passed = not (triggered and self.mode is GateMode.ENFORCE)
        self.state = GateState.PASSED if passed else GateState.FAILED

        return GateDecision(
            mode=self.mode,
            threshold_ms=self.threshold_ms,
            p95_ms=p95_ms,
            triggered=triggered,
            passed=passed,
            exit_code=0 if passed else 1,
            state=self.state,
        )


def evaluate_gate(p95_ms: float, threshold_ms: float, mode: GateMode = GateMode.ENFORCE) -> GateDecision:
    return GateEvaluator(threshold_ms, mode).evaluate(p95_ms)

# ===================================================================================
# ==                 Report / plot tests                                           ==
# ===================================================================================

import json

from ttfb_gate.config import GateMode
from ttfb_gate.gate import evaluate_gate
from ttfb_gate.plot import save_plots
from ttfb_gate.report import build_payload, gate_lines, header_lines, summary_lines, write_json_report
from ttfb_gate.sampler import Sample
from ttfb_gate.stats import summarize

SAMPLES = [Sample(i, 10.0 * i, 200) for i in range(1, 101)]
SUMMARY = summarize([s.latency_ms for s in SAMPLES])


class TestConsoleLines:
    """Fixed textual report"""

    def test_header_silent(self):
        assert header_lines("http://svc", 5, verbose=False) == [
            ">> Running 5 tests on http://svc",
            ">> Silent mode enabled. Please wait...",
        ]

    def test_header_verbose(self):
        assert header_lines("http://svc", 5, verbose=True) == [">> Running 5 tests on http://svc"]

    def test_summary_block(self):
        lines = summary_lines("http://svc", 100, SUMMARY)
        assert lines == [
            ">> Results for 100 tests on http://svc",
            "---",
            "Max (Slowest): 1000.00ms",
            "95th percentile: 950.00ms",
            "Median: 510.00ms",
            "---",
            "99th percentile: 990.00ms",
            "Mean: 505.00ms",
            "Min: 10.00ms",
            "---",
        ]

    def test_gate_enforce_fail(self):
        lines = gate_lines(evaluate_gate(1200.0, 1000.0, GateMode.ENFORCE))
        assert lines == [
            "⚠️ 95th percentile is above the threshold of 1000.00ms",
            "💀 Exiting with error code 1",
        ]

    def test_gate_enforce_pass(self):
        lines = gate_lines(evaluate_gate(800.0, 1000.0, GateMode.ENFORCE))
        assert lines == ["👍 95th percentile is below the threshold of 1000.00ms"]

    def test_gate_warn(self):
        assert gate_lines(evaluate_gate(1200.0, 1000.0, GateMode.WARN)) == [
            "⚠️ 95th percentile is above the threshold of 1000.00ms"
        ]
        assert gate_lines(evaluate_gate(800.0, 1000.0, GateMode.WARN)) == []

    def test_gate_off_is_silent(self):
        assert gate_lines(evaluate_gate(1200.0, 1000.0, GateMode.OFF)) == []


class TestJsonReport:
    def test_payload_written(self, tmp_path):
        decision = evaluate_gate(SUMMARY.p95, 900.0, GateMode.ENFORCE)
        out = write_json_report(
            tmp_path / "reports" / "ttfb.json", build_payload("http://svc", SAMPLES, SUMMARY, decision)
        )

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["url"] == "http://svc"
        assert data["count"] == 100
        assert data["summary"]["p95"] == 950.0
        assert data["samples"][0] == {"index": 1, "latency_ms": 10.0, "status_code": 200}
        assert data["gate"]["mode"] == "enforce"
        assert data["gate"]["state"] == "failed"
        assert data["gate"]["exit_code"] == 1

    def test_payload_without_gate(self):
        assert "gate" not in build_payload("http://svc", SAMPLES, SUMMARY)


def test_save_plots_writes_png(tmp_path):
    out = save_plots([s.latency_ms for s in SAMPLES], SUMMARY, tmp_path / "plots" / "ttfb.png")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

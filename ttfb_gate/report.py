# report.py
import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .config import GateMode
from .gate import GateDecision
from .sampler import Sample
from .stats import StatisticsSummary


def fmt_ms(value: float) -> str:
    return f"{value:.2f}ms"


def header_lines(url: str, count: int, verbose: bool) -> List[str]:
    lines = [f">> Running {count} tests on {url}"]
    if not verbose:
        lines.append(">> Silent mode enabled. Please wait...")
    return lines


def summary_lines(url: str, count: int, summary: StatisticsSummary) -> List[str]:
    return [
        f">> Results for {count} tests on {url}",
        "---",
        f"Max (Slowest): {fmt_ms(summary.max)}",
        f"95th percentile: {fmt_ms(summary.p95)}",
        f"Median: {fmt_ms(summary.median)}",
        "---",
        f"99th percentile: {fmt_ms(summary.p99)}",
        f"Mean: {fmt_ms(summary.mean)}",
        f"Min: {fmt_ms(summary.min)}",
        "---",
    ]


def gate_lines(decision: GateDecision) -> List[str]:
    threshold = fmt_ms(decision.threshold_ms)
    if decision.mode is GateMode.OFF:
        return []
    if decision.triggered:
        lines = [f"⚠️ 95th percentile is above the threshold of {threshold}"]
        if not decision.passed:
            lines.append(f"💀 Exiting with error code {decision.exit_code}")
        return lines
    if decision.mode is GateMode.ENFORCE:
        return [f"👍 95th percentile is below the threshold of {threshold}"]
    return []


def build_payload(
    url: str,
    samples: List[Sample],
    summary: StatisticsSummary,
    decision: Optional[GateDecision] = None,
) -> dict:
    payload = {
        "url": url,
        "count": len(samples),
        "summary": asdict(summary),
        "samples": [asdict(s) for s in samples],
    }
    if decision is not None:
        gate = asdict(decision)
        gate["mode"] = decision.mode.value
        gate["state"] = decision.state.value
        payload["gate"] = gate
    return payload


def write_json_report(path, payload: dict) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return out

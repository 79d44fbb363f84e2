"""Sequential TTFB sampling with a p95 pass/fail gate."""
from .config import GateMode, Settings
from .errors import EmptySampleError, TransportError, TtfbGateError
from .gate import GateDecision, GateEvaluator, GateState, evaluate_gate
from .load import LoadResult, emulate_load, run_load
from .sampler import Sample, latencies, sample_latency
from .stats import StatisticsSummary, quantile, summarize

__version__ = "0.1.0"

__all__ = [
    "EmptySampleError",
    "GateDecision",
    "GateEvaluator",
    "GateMode",
    "GateState",
    "LoadResult",
    "Sample",
    "Settings",
    "StatisticsSummary",
    "TransportError",
    "TtfbGateError",
    "emulate_load",
    "evaluate_gate",
    "latencies",
    "quantile",
    "run_load",
    "sample_latency",
    "summarize",
]

# stats.py
"""
Latency summary statistics.

Quantiles use the nearest-rank rule on the sorted non-NaN values:

    rank  = q * (m - 1)
    index = floor(rank + 0.5)     # ties go to the higher element

So for [10, 20, ..., 1000] the median is 510 (rank 49.5 -> index 50),
p95 is 950 and p99 is 990. NaN values are skipped everywhere.
"""
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import EmptySampleError

QUANTILES = {"median": 0.5, "p95": 0.95, "p99": 0.99}


@dataclass(frozen=True)
class StatisticsSummary:
    count: int
    min: float
    max: float
    mean: float
    median: float
    p95: float
    p99: float


def _valid(latencies: Sequence[float]) -> np.ndarray:
    lat = np.asarray(latencies, dtype=float).ravel()
    lat = lat[~np.isnan(lat)]
    if lat.size == 0:
        raise EmptySampleError("no valid latency values to summarize")
    return lat


def nearest_rank_index(q: float, m: int) -> int:
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"quantile must be in [0, 1], got {q}")
    return int(np.floor(q * (m - 1) + 0.5))


def _quantile_sorted(lat_sorted: np.ndarray, q: float) -> float:
    return float(lat_sorted[nearest_rank_index(q, lat_sorted.size)])


def quantile(latencies: Sequence[float], q: float) -> float:
    lat_sorted = np.sort(_valid(latencies))
    return _quantile_sorted(lat_sorted, q)


def summarize(latencies: Sequence[float]) -> StatisticsSummary:
    """Raises EmptySampleError if there is nothing but NaN (or nothing at all)."""
    lat = _valid(latencies)
    lat_sorted = np.sort(lat)

    lo = float(lat_sorted[0])
    hi = float(lat_sorted[-1])
    # sum in sorted order so the mean depends only on the multiset;
    # clip so rounding can never push it outside [min, max]
    mean = float(np.clip(lat_sorted.mean(), lo, hi))

    return StatisticsSummary(
        count=int(lat.size),
        min=lo,
        max=hi,
        mean=mean,
        **{name: _quantile_sorted(lat_sorted, q) for name, q in QUANTILES.items()},
    )

# plot.py
# Histogram + ECDF of the sampled latencies, saved to a PNG (no display needed).
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from .stats import StatisticsSummary  # noqa: E402


def save_plots(latencies: Sequence[float], summary: StatisticsSummary, path) -> Path:
    lat = np.asarray(latencies, dtype=float)
    lat = lat[~np.isnan(lat)]
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_hist, ax_ecdf) = plt.subplots(1, 2, figsize=(11, 4))

    # 1) Histogram of latencies
    ax_hist.hist(lat, bins="auto")
    ax_hist.set_xlabel("TTFB (ms)")
    ax_hist.set_ylabel("Count")
    ax_hist.set_title("TTFB Distribution (Histogram)")
    ymax = ax_hist.get_ylim()[1]
    for val, label in [(summary.median, "p50"), (summary.p95, "p95"), (summary.p99, "p99")]:
        ax_hist.axvline(val, linestyle="--")
        ax_hist.text(val, ymax * 0.9, label, rotation=90, va="top", ha="right")

    # 2) Empirical CDF (tail percentiles)
    lat_sorted = np.sort(lat)
    ecdf = np.arange(1, lat_sorted.size + 1) / lat_sorted.size
    ax_ecdf.plot(lat_sorted, ecdf)
    ax_ecdf.set_xlabel("TTFB (ms)")
    ax_ecdf.set_ylabel("ECDF")
    ax_ecdf.set_title("TTFB ECDF (Cumulative)")
    for val, label in [(summary.p95, "p95"), (summary.p99, "p99")]:
        ax_ecdf.axvline(val, linestyle="--")
        ax_ecdf.text(val, 0.02, label, rotation=90, va="bottom", ha="right")

    for ax in (ax_hist, ax_ecdf):
        ax.grid(True, linewidth=0.3)
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out

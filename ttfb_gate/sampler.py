# sampler.py
# Sequential TTFB sampling: one fresh session per request, one request at a time.
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import requests

from .config import MAX_TIMEOUT_S
from .errors import TransportError


@dataclass(frozen=True)
class Sample:
    index: int          # 1-based, issuance order
    latency_ms: float
    status_code: int


def one_call(session: requests.Session, url: str, timeout: Optional[float] = None):
    """
    Time a single GET until the status line and headers are parsed.

    stream=True makes get() return before the body is read, so the elapsed
    time approximates time to first byte. It is not a byte-level probe.
    """
    t0 = time.perf_counter()
    resp = session.get(url, stream=True, timeout=timeout)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    resp.close()
    return elapsed_ms, resp.status_code


def sample_latency(
    url: str,
    count: int,
    *,
    verbose: bool = False,
    timeout: Optional[float] = None,
    session_factory: Callable[[], requests.Session] = requests.Session,
    echo: Callable[[str], None] = print,
) -> List[Sample]:
    """
    Issue `count` sequential GETs against `url` and return one Sample per request.

    Any transport error aborts the whole run with TransportError; no partial
    sample set is ever returned.
    """
    if not url:
        raise ValueError("url must be a non-empty string")
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    if timeout is not None and not 0 < timeout <= MAX_TIMEOUT_S:
        raise ValueError(f"timeout must be in (0, {MAX_TIMEOUT_S}] seconds, got {timeout}")

    samples = []
    for i in range(1, count + 1):
        # new session per sample so keep-alive from the previous request can't bias this one
        with session_factory() as session:
            try:
                ms, status = one_call(session, url, timeout=timeout)
            except requests.RequestException as e:
                raise TransportError(i, count, url, e) from e

        samples.append(Sample(index=i, latency_ms=ms, status_code=status))
        if verbose:
            echo(f"Run {i}/{count}: TTFB: {ms:.2f}ms, Status: {status}")

    return samples


def latencies(samples: List[Sample]) -> List[float]:
    return [s.latency_ms for s in samples]

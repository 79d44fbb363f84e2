# load.py
# Background load before sampling: fire k GETs concurrently and throw the responses away.
import asyncio
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class LoadResult:
    requested: int
    completed: int
    failed: int


async def hit_server(client: httpx.AsyncClient, url: str, sem: asyncio.Semaphore) -> bool:
    async with sem:
        try:
            resp = await client.get(url)
            await resp.aread()
            return True
        except httpx.HTTPError:
            return False


async def emulate_load(
    url: str,
    requests_count: int,
    *,
    concurrency: Optional[int] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> LoadResult:
    """
    Issue `requests_count` GETs against `url`, at most `concurrency` in flight
    (all of them if not set). Failures are counted, never raised.
    """
    if requests_count <= 0:
        raise ValueError(f"requests_count must be positive, got {requests_count}")
    if concurrency is not None and concurrency <= 0:
        raise ValueError(f"concurrency must be positive, got {concurrency}")

    sem = asyncio.Semaphore(concurrency or requests_count)
    limits = httpx.Limits(max_connections=concurrency)
    async with httpx.AsyncClient(timeout=timeout, limits=limits, transport=transport) as client:
        tasks = [hit_server(client, url, sem) for _ in range(requests_count)]
        results = await asyncio.gather(*tasks)

    completed = sum(1 for ok in results if ok)
    return LoadResult(requested=requests_count, completed=completed, failed=requests_count - completed)


def run_load(url: str, requests_count: int, **kwargs) -> LoadResult:
    """Blocking wrapper: runs the emulator on its own event loop and returns when it is done."""
    return asyncio.run(emulate_load(url, requests_count, **kwargs))

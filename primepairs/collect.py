# primepairs/collect.py
# Range collector: fan the primality oracle out over [start, end].

from __future__ import annotations
import concurrent.futures
import time
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from . import config
from .primality import check_u64, is_prime

def iter_spans(start: int, end: int, chunk_size: int) -> Iterator[Tuple[int, int]]:
    """Yield inclusive (lo, hi) spans covering [start, end] in ascending order."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    lo = start
    while lo <= end:
        hi = min(end, lo + chunk_size - 1)
        yield lo, hi
        lo = hi + 1

def scan_span(span: Tuple[int, int]) -> List[int]:
    """Primes in one inclusive span, ascending. Runs inside pool workers."""
    lo, hi = span
    return [n for n in range(lo, hi + 1) if is_prime(n)]

def collect_primes(start: int, end: int,
                   workers: Optional[int] = None,
                   chunk_size: Optional[int] = None) -> List[int]:
    """
    Every prime in the inclusive range [start, end], ascending.
    An inverted range (start > end) yields [].
    """
    check_u64(start, "start")
    check_u64(end, "end")
    chunk_size = chunk_size if chunk_size is not None else config.CHUNK_SIZE
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    if start > end:
        return []

    t0 = time.perf_counter()
    workers = config.resolve_workers(workers)
    spans = list(iter_spans(start, end, chunk_size))
    size = end - start + 1

    if workers == 1 or len(spans) == 1 or size < config.PARALLEL_THRESHOLD:
        parts = map(scan_span, spans)
        mode = "inline"
    else:
        workers = min(workers, len(spans))
        # map() hands results back in submission order, not completion order
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            parts = list(executor.map(scan_span, spans))
        mode = f"pool[{workers}]"

    primes: List[int] = []
    for part in parts:
        primes.extend(part)

    logger.debug("collect_primes [{}, {}] {} spans via {} -> {} primes in {:.1f} ms",
                 start, end, len(spans), mode, len(primes), (time.perf_counter() - t0) * 1000)
    return primes

# primepairs/pairs.py
# Pair factorizer: every unordered pair of distinct primes with its product.
# - canonical form (a*b, a, b) with a < b
# - uint64 products, wrapping modulo 2**64 like fixed-width hardware ints
# - row-parallel over a process pool, merged into one set

from __future__ import annotations
import concurrent.futures
import itertools
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np
from loguru import logger

from . import config
from .collect import collect_primes
from .primality import check_u64

FactorTriple = Tuple[int, int, int]

# ---------- Worker side ----------

# read-only copy of the primes, installed once per worker by the pool initializer
_PRIMES: Optional[np.ndarray] = None

def _init_worker(primes: np.ndarray) -> None:
    global _PRIMES
    _PRIMES = primes

def _row_triples(arr: np.ndarray, lo: int, hi: int) -> List[FactorTriple]:
    out: List[FactorTriple] = []
    for i in range(lo, hi):
        a = arr[i]
        bs = arr[arr > a]
        if not bs.size:
            continue
        products = bs * a  # wraps silently on overflow
        out.extend(zip(products.tolist(), itertools.repeat(int(a)), bs.tolist()))
    return out

def factor_rows(span: Tuple[int, int]) -> List[FactorTriple]:
    """Triples for rows [lo, hi) of the primes held by this worker."""
    lo, hi = span
    return _row_triples(_PRIMES, lo, hi)

# ---------- Driver ----------

def _as_u64_array(primes: Iterable[int]) -> np.ndarray:
    values = []
    for i, p in enumerate(primes):
        if isinstance(p, np.integer):
            p = int(p)
        values.append(check_u64(p, f"primes[{i}]"))
    return np.array(values, dtype=np.uint64)

def _row_spans(rows: int, chunk: int) -> List[Tuple[int, int]]:
    return [(lo, min(rows, lo + chunk)) for lo in range(0, rows, chunk)]

def factorize(primes: Sequence[int],
              workers: Optional[int] = None,
              chunk_size: Optional[int] = None) -> Set[FactorTriple]:
    """
    Set of (a*b, a, b) for every a, b in `primes` with a < b.
    For p distinct inputs the result holds exactly p*(p-1)/2 triples.
    Iteration order of the returned set is unspecified; see sorted_triples().
    """
    t0 = time.perf_counter()
    arr = _as_u64_array(primes)
    rows = int(arr.size)
    pairs = pair_count(rows)
    workers = config.resolve_workers(workers)
    chunk_size = chunk_size if chunk_size is not None else config.PAIR_CHUNK
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    spans = _row_spans(rows, chunk_size)

    triples: Set[FactorTriple] = set()
    if workers == 1 or len(spans) <= 1 or pairs < config.PARALLEL_THRESHOLD:
        for lo, hi in spans:
            triples.update(_row_triples(arr, lo, hi))
        mode = "inline"
    else:
        workers = min(workers, len(spans))
        with concurrent.futures.ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(arr,),
        ) as executor:
            for part in executor.map(factor_rows, spans):
                triples.update(part)
        mode = f"pool[{workers}]"

    logger.debug("factorize {} primes, {} row spans via {} -> {} triples in {:.1f} ms",
                 rows, len(spans), mode, len(triples), (time.perf_counter() - t0) * 1000)
    return triples

def pair_count(n_primes: int) -> int:
    """Size of factorize() output for n_primes distinct values, without building it."""
    return n_primes * (n_primes - 1) // 2 if n_primes > 1 else 0

def sorted_triples(triples: Iterable[FactorTriple]) -> List[FactorTriple]:
    """Deterministic order: by product, then lesser factor, then greater factor."""
    return sorted(triples)

# ---------- Orchestration ----------

@dataclass
class PipelineResult:
    start: int
    end: int
    primes: List[int]
    triples: Set[FactorTriple] = field(repr=False)
    elapsed_ms: int

    @property
    def count(self) -> int:
        return len(self.triples)

def run_pipeline(start: int, end: int, workers: Optional[int] = None) -> PipelineResult:
    """collect_primes then factorize; each stage completes before the next starts."""
    t0 = time.perf_counter()
    primes = collect_primes(start, end, workers=workers)
    triples = factorize(primes, workers=workers)
    ms = int((time.perf_counter() - t0) * 1000)
    logger.info("range [{}, {}]: {} primes, {} pairs in {} ms", start, end, len(primes), len(triples), ms)
    return PipelineResult(start=start, end=end, primes=primes, triples=triples, elapsed_ms=ms)

# primepairs/config.py
# Runtime knobs, read once from the environment.

import os

WORKERS            = int(os.getenv("PRIMEPAIRS_WORKERS", "0"))          # 0 => os.cpu_count()
CHUNK_SIZE         = int(os.getenv("PRIMEPAIRS_CHUNK_SIZE", "4096"))    # integers per collector span
PAIR_CHUNK         = int(os.getenv("PRIMEPAIRS_PAIR_CHUNK", "64"))      # prime rows per factorizer span
PARALLEL_THRESHOLD = int(os.getenv("PRIMEPAIRS_PARALLEL_THRESHOLD", "20000"))
MAX_API_SPAN       = int(os.getenv("PRIMEPAIRS_MAX_API_SPAN", "1000000"))  # 0 => unlimited
MAX_API_PAIRS      = int(os.getenv("PRIMEPAIRS_MAX_API_PAIRS", "5000000"))  # triples one /api/pairs listing may build; 0 => unlimited
LOG_LEVEL          = (os.getenv("PRIMEPAIRS_LOG_LEVEL", "INFO") or "INFO").upper()

def resolve_workers(workers=None) -> int:
    """Explicit value wins, then PRIMEPAIRS_WORKERS, then the CPU count."""
    if workers is None or workers <= 0:
        workers = WORKERS
    if workers <= 0:
        workers = os.cpu_count() or 1
    return max(1, int(workers))

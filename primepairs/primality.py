# primepairs/primality.py
# Deterministic trial-division primality for unsigned 64-bit integers.
# - exact integer square root bound
# - 6k±1 wheel after peeling 2 and 3

from __future__ import annotations
import math

U64_MAX = (1 << 64) - 1

# ---------- Bounds ----------

def check_u64(value, name: str = "value") -> int:
    """Return `value` unchanged if it is an int in [0, 2**64-1], else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    return value

def isqrt_u64(n: int) -> int:
    """floor(sqrt(n)) computed without floating point."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return math.isqrt(n)

# ---------- Oracle ----------

def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    # every prime > 3 is 6k±1, so test i=6k-1 and i+2=6k+1
    limit = isqrt_u64(n)
    i = 5
    while i <= limit:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True

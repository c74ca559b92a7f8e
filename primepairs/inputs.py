# primepairs/inputs.py
# Turning untrusted text into validated u64 bounds. The numeric core never
# sees raw strings; callers catch RangeInputError and report it their own way.

from __future__ import annotations
from typing import Tuple

from .primality import U64_MAX

class RangeInputError(ValueError):
    pass

def parse_u64(text, name: str) -> int:
    s = str(text if text is not None else "").strip()
    if not s:
        raise RangeInputError(f"missing {name}")
    if not (s.isascii() and s.isdigit()):
        raise RangeInputError(f"{name} must be a non-negative integer, got {s!r}")
    n = int(s)
    if n > U64_MAX:
        raise RangeInputError(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    return n

def parse_bounds(start_text, end_text) -> Tuple[int, int]:
    return parse_u64(start_text, "start"), parse_u64(end_text, "end")

def parse_range_line(line: str) -> Tuple[int, int]:
    """'START END' -> (start, end). Exactly two whitespace-separated tokens."""
    parts = (line or "").split()
    if len(parts) != 2:
        raise RangeInputError("2 inputs needed: 'start' and 'end'")
    return parse_bounds(parts[0], parts[1])

def check_span(start: int, end: int, max_span: int) -> None:
    if max_span > 0 and end >= start and (end - start + 1) > max_span:
        raise RangeInputError(f"range too wide; cap is {max_span:,} integers")

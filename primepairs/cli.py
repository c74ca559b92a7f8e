# primepairs/cli.py
# Console caller: python -m primepairs.cli START END [--show] [--json]
# With no bounds on the command line, prompts for "START END" on stdin.

from __future__ import annotations
import argparse
import json
import sys

from loguru import logger

from .inputs import RangeInputError, parse_bounds, parse_range_line
from .log import LEVELS, configure_logging
from .pairs import run_pipeline, sorted_triples

PROMPT = "Enter range [u64 u64]:"

def read_range(stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(PROMPT, file=stdout, flush=True)
    line = stdin.readline()
    if not line:
        raise RangeInputError("Unable to read input")
    return parse_range_line(line.strip())

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="primepairs",
        description="Count products of distinct prime pairs drawn from an inclusive range.",
    )
    ap.add_argument("bounds", nargs="*", metavar="BOUND", help="START END (prompted for when omitted)")
    ap.add_argument("--workers", type=int, default=None, help="worker processes (default: PRIMEPAIRS_WORKERS or CPU count)")
    ap.add_argument("--show", action="store_true", help="also print every (product, p, q) triple, sorted")
    ap.add_argument("--json", action="store_true", help="emit JSON instead of text")
    ap.add_argument("--log-level", default=None, type=str.upper, choices=LEVELS, help="loguru level (default: PRIMEPAIRS_LOG_LEVEL or INFO)")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:  # bad PRIMEPAIRS_LOG_LEVEL
        print(e, file=sys.stderr)
        return 1

    try:
        if not args.bounds:
            start, end = read_range()
        elif len(args.bounds) == 2:
            start, end = parse_bounds(*args.bounds)
        else:
            raise RangeInputError("2 inputs needed: 'start' and 'end'")
    except RangeInputError as e:
        print(e, file=sys.stderr)
        return 1

    res = run_pipeline(start, end, workers=args.workers)
    logger.debug("pipeline done: {}", res)

    if args.json:
        out = {"start": start, "end": end, "primes": len(res.primes),
               "pairs": res.count, "elapsed_ms": res.elapsed_ms}
        if args.show:
            out["triples"] = [list(t) for t in sorted_triples(res.triples)]
        print(json.dumps(out))
        return 0

    print(res.count)
    if args.show:
        # one write for the whole listing; per-line print() is the bottleneck
        sys.stdout.write("".join(f"{t}\n" for t in sorted_triples(res.triples)))
        sys.stdout.flush()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

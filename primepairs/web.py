# primepairs/web.py
# HTTP caller for the prime/pair pipeline.
#   GET /healthz
#   GET /api/primes?start=0&end=100
#   GET /api/pairs?start=0&end=100&list=1

from __future__ import annotations
import time

from flask import Flask, jsonify, request
from loguru import logger
from werkzeug.exceptions import BadRequest, HTTPException

from . import config
from .collect import collect_primes
from .inputs import RangeInputError, check_span, parse_bounds
from .pairs import factorize, pair_count, sorted_triples

def _bounds_from_query():
    try:
        start, end = parse_bounds(request.args.get("start"), request.args.get("end"))
        check_span(start, end, config.MAX_API_SPAN)
    except RangeInputError as e:
        raise BadRequest(str(e))
    return start, end

def _flag(name: str) -> bool:
    return request.args.get(name, "").strip().lower() in ("1", "true", "yes", "on")

def create_app() -> Flask:
    app = Flask(__name__)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"ok": False, "error": e.description}), e.code

    @app.get("/healthz")
    def healthz():
        return jsonify({"ok": True})

    @app.get("/api/primes")
    def api_primes():
        start, end = _bounds_from_query()
        t0 = time.perf_counter()
        primes = collect_primes(start, end)
        dt_ms = int((time.perf_counter() - t0) * 1000)
        return jsonify({"ok": True, "start": str(start), "end": str(end), "count": len(primes),
                        "primes": [str(p) for p in primes], "duration_ms": dt_ms})

    @app.get("/api/pairs")
    def api_pairs():
        start, end = _bounds_from_query()
        t0 = time.perf_counter()
        primes = collect_primes(start, end)
        # collect_primes yields distinct values, so the count needs no triples
        count = pair_count(len(primes))
        listing = _flag("list")
        if listing:
            if 0 < config.MAX_API_PAIRS < count:
                raise BadRequest(f"too many pairs to list ({count:,}); cap is {config.MAX_API_PAIRS:,}")
            triples = sorted_triples(factorize(primes))
        dt_ms = int((time.perf_counter() - t0) * 1000)
        logger.info("/api/pairs [{}, {}] -> {} pairs in {} ms", start, end, count, dt_ms)
        out = {"ok": True, "start": str(start), "end": str(end), "primes": len(primes),
               "count": count, "duration_ms": dt_ms}
        if listing:
            out["triples"] = [[str(x) for x in t] for t in triples]
        return jsonify(out)

    return app

app = create_app()

if __name__ == "__main__":
    from .log import configure_logging
    configure_logging()
    app.run(host="0.0.0.0", port=8080)

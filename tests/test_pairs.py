import itertools

import pytest

from primepairs import config
from primepairs.collect import collect_primes
from primepairs.pairs import PipelineResult, factorize, pair_count, run_pipeline, sorted_triples


EXPECTED_2357 = {
    (6, 2, 3),
    (10, 2, 5),
    (14, 2, 7),
    (15, 3, 5),
    (21, 3, 7),
    (35, 5, 7),
}


def test_factorize_small_set():
    assert factorize([2, 3, 5, 7], workers=1) == EXPECTED_2357


def test_lesser_factor_first():
    for product, a, b in factorize([2, 3, 5, 7, 11, 13], workers=1):
        assert a < b
        assert product == a * b


def test_each_unordered_pair_once():
    triples = factorize(collect_primes(0, 200), workers=1)
    for product, a, b in triples:
        assert (product, b, a) not in triples
    pairs = {(a, b) for _, a, b in triples}
    assert len(pairs) == len(triples)


@pytest.mark.parametrize("p", [0, 1, 2, 3, 10, 46])
def test_size_is_p_choose_2(p):
    primes = collect_primes(0, 200)[:p]
    assert len(primes) == p
    assert len(factorize(primes, workers=1)) == p * (p - 1) // 2


def test_empty_and_single():
    assert factorize([]) == set()
    assert factorize([13]) == set()


def test_unsorted_input_is_canonicalized():
    assert factorize([7, 2, 5, 3], workers=1) == EXPECTED_2357


def test_duplicates_collapse():
    assert factorize([2, 3, 3, 2], workers=1) == {(6, 2, 3)}


def test_products_wrap_modulo_2_64():
    assert factorize([2, 1 << 63], workers=1) == {(0, 2, 1 << 63)}
    big = (1 << 32) + 15
    assert factorize([big, big + 2], workers=1) == {((big * (big + 2)) % (1 << 64), big, big + 2)}


def test_rejects_values_outside_u64():
    with pytest.raises(ValueError):
        factorize([2, -3])
    with pytest.raises(ValueError):
        factorize([2, 1 << 64])


def test_parallel_matches_inline(monkeypatch):
    monkeypatch.setattr(config, "PARALLEL_THRESHOLD", 0)
    primes = collect_primes(0, 1_000)
    parallel = factorize(primes, workers=2, chunk_size=16)
    inline = factorize(primes, workers=1)
    assert parallel == inline
    expected = {(a * b, a, b) for a, b in itertools.combinations(primes, 2)}
    assert parallel == expected


def test_sorted_triples_orders_by_product():
    ordered = sorted_triples(factorize([7, 5, 3, 2], workers=1))
    assert ordered == [(6, 2, 3), (10, 2, 5), (14, 2, 7), (15, 3, 5), (21, 3, 7), (35, 5, 7)]


def test_run_pipeline():
    res = run_pipeline(0, 10, workers=1)
    assert isinstance(res, PipelineResult)
    assert res.primes == [2, 3, 5, 7]
    assert res.triples == EXPECTED_2357
    assert res.count == 6
    assert res.elapsed_ms >= 0


def test_run_pipeline_zero_to_hundred_count():
    assert run_pipeline(0, 100, workers=1).count == 300


def test_run_pipeline_inverted_range():
    res = run_pipeline(50, 10)
    assert res.primes == []
    assert res.count == 0


@pytest.mark.parametrize("chunk", [0, -1])
def test_rejects_non_positive_chunk_size(chunk):
    with pytest.raises(ValueError, match="chunk_size must be >= 1"):
        factorize([2, 3, 5, 7], workers=1, chunk_size=chunk)


def test_rejects_non_positive_configured_chunk(monkeypatch):
    monkeypatch.setattr(config, "PAIR_CHUNK", -64)
    with pytest.raises(ValueError, match="chunk_size must be >= 1"):
        factorize([2, 3, 5, 7], workers=1)


def test_pair_count_matches_factorize():
    for p in (0, 1, 2, 4, 25):
        primes = collect_primes(0, 100)[:p]
        assert pair_count(p) == len(factorize(primes, workers=1))
    assert pair_count(78_498) == 3_080_928_753

from .collect import collect_primes
from .pairs import PipelineResult, factorize, pair_count, run_pipeline, sorted_triples
from .primality import U64_MAX, is_prime, isqrt_u64
__all__ = ["collect_primes", "factorize", "is_prime", "isqrt_u64", "run_pipeline",
           "pair_count", "sorted_triples", "PipelineResult", "U64_MAX"]

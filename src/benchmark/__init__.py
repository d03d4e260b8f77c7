from src.benchmark.distributions import DISTRIBUTION_TYPES, generate_array
from src.benchmark.runner import (
    benchmark_build_heap,
    benchmark_extract_max,
    benchmark_increase_key,
    benchmark_insert,
    run_benchmark,
)

from src.metrics.performance_tracker import (
    MetricSnapshot,
    NullTracker,
    PerformanceTracker,
)
from src.max_heap.max_heap import MaxHeap
from src.max_heap.topk import get_topk
from src.benchmark.distributions import generate_array
from src.benchmark.runner import run_benchmark

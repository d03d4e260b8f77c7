import logging
from typing import Iterable, Optional

import numpy as np

from src.benchmark.distributions import DISTRIBUTION_TYPES, generate_array
from src.max_heap.max_heap import MaxHeap
from src.metrics.performance_tracker import MetricSnapshot, PerformanceTracker

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (100, 1000, 10000, 100000)
DEFAULT_SEED = 42
MAX_INCREASE_KEY_OPS = 100
INCREASE_KEY_UPPER = 1_000_000


def _report(phase: str, distribution: str, size: int, tracker: PerformanceTracker) -> None:
    logger.info(
        "%s [%s, n=%d]: %.3f ms, %d comparisons",
        phase, distribution, size, tracker.execution_time_ms, tracker.comparisons
    )


def benchmark_build_heap(
    tracker: PerformanceTracker,
    array: np.ndarray,
    distribution: str
) -> MetricSnapshot:
    """Time bulk construction of a heap from `array`."""
    tracker.reset()
    tracker.start_timing()
    MaxHeap.from_array(array, tracker)
    tracker.stop_timing()

    snapshot = tracker.record_snapshot(len(array), f"build-heap-{distribution}")
    _report("Build-heap", distribution, len(array), tracker)
    return snapshot


def benchmark_insert(
    tracker: PerformanceTracker,
    array: np.ndarray,
    distribution: str
) -> MetricSnapshot:
    """Time inserting every key of `array` into an empty heap."""
    heap = MaxHeap(max(1, 2 * len(array)), tracker)

    tracker.reset()
    tracker.start_timing()
    for value in array:
        heap.insert(value)
    tracker.stop_timing()

    snapshot = tracker.record_snapshot(len(array), f"insert-{distribution}")
    _report("Insert ops", distribution, len(array), tracker)
    return snapshot


def benchmark_extract_max(
    tracker: PerformanceTracker,
    array: np.ndarray,
    distribution: str
) -> MetricSnapshot:
    """Time extracting half of the keys of a heap built from `array`."""
    heap = MaxHeap.from_array(array, tracker)

    tracker.reset()
    tracker.start_timing()
    for _ in range(len(array) // 2):
        heap.extract_max()
    tracker.stop_timing()

    snapshot = tracker.record_snapshot(len(array), f"extract-max-{distribution}")
    _report("Extract-max", distribution, len(array), tracker)
    return snapshot


def benchmark_increase_key(
    tracker: PerformanceTracker,
    array: np.ndarray,
    distribution: str,
    rng: np.random.Generator
) -> MetricSnapshot:
    """
    Time random key increases on a heap built from `array`.

    Random targets that would lower a key are rejected by the heap; those
    rejections are expected and skipped.
    """
    heap = MaxHeap.from_array(array, tracker)

    tracker.reset()
    tracker.start_timing()
    operations = min(MAX_INCREASE_KEY_OPS, len(array) // 10)
    for _ in range(operations):
        index = int(rng.integers(0, len(heap)))
        new_value = int(rng.integers(0, INCREASE_KEY_UPPER))
        try:
            heap.increase_key(index, new_value)
        except ValueError as e:
            logger.debug("increase_key(%d, %d) rejected: %s", index, new_value, e)
    tracker.stop_timing()

    snapshot = tracker.record_snapshot(len(array), f"increase-key-{distribution}")
    _report("Increase-key", distribution, len(array), tracker)
    return snapshot


def run_benchmark(
    sizes: Iterable[int] = DEFAULT_SIZES,
    distributions: Iterable[str] = DISTRIBUTION_TYPES,
    tracker: Optional[PerformanceTracker] = None,
    seed: int = DEFAULT_SEED,
    include_increase_key: bool = True
) -> PerformanceTracker:
    """
    Run every benchmark phase for each size and distribution.

    Parameters
    ----------
    sizes : Iterable[int]
        Input sizes to measure.
    distributions : Iterable[str]
        Names accepted by `generate_array`.
    tracker : PerformanceTracker | None
        Tracker collecting the snapshots, by default a new one.
    seed : int
        Seed of the random generator, by default 42.
    include_increase_key : bool
        Also run the increase-key phase, by default True.

    Returns
    -------
    PerformanceTracker
        The tracker holding one snapshot per phase run.
    """
    if tracker is None:
        tracker = PerformanceTracker()
    rng = np.random.default_rng(seed)
    distributions = list(distributions)

    for size in sizes:
        for distribution in distributions:
            logger.info("Testing size %d with %s distribution", size, distribution)
            benchmark_build_heap(tracker, generate_array(size, distribution, rng), distribution)
            benchmark_insert(tracker, generate_array(size, distribution, rng), distribution)
            benchmark_extract_max(tracker, generate_array(size, distribution, rng), distribution)
            if include_increase_key:
                benchmark_increase_key(
                    tracker, generate_array(size, distribution, rng), distribution, rng
                )
    return tracker

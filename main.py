import logging

from src import MaxHeap, PerformanceTracker, get_topk, run_benchmark

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

keys = [3, 1, 4, 1, 5, 9, 2, 6]

# Build a heap in linear time and look at it
print("Creating max heap...")
tracker = PerformanceTracker()
heap = MaxHeap.from_array(keys, tracker)
print(f"Heap size: {len(heap)}")
print(f"Max key: {heap.peek()}")
print(f"Valid: {heap.is_valid_max_heap()}")
print(f"Top 3: {get_topk(heap, 3)}")
print(tracker.summary())

# Quick benchmark over small inputs
tracker = run_benchmark(sizes=(100, 1000, 10000), distributions=("random", "sorted", "reverse"))
print(tracker.snapshot_table())
tracker.export_to_csv("quick_benchmark.csv")

import csv
import logging
import time
from pathlib import Path
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

REPORTS_DIR = Path("docs/performance-plots")
CSV_HEADER = [
    "InputSize",
    "InputType",
    "Comparisons",
    "Swaps",
    "ArrayAccesses",
    "ExecutionTimeMs",
]


class MetricSnapshot(NamedTuple):
    """Counter values and elapsed time captured at one point of a run."""
    input_size: int
    comparisons: int
    swaps: int
    array_accesses: int
    memory_allocations: int
    execution_time_ms: float
    input_type: str


class NullTracker:
    """Tracker that discards every count. Used when no tracker is attached."""

    def increment_comparisons(self, count: int = 1) -> None:
        pass

    def increment_swaps(self, count: int = 1) -> None:
        pass

    def increment_array_accesses(self, count: int = 1) -> None:
        pass

    def increment_memory_allocations(self) -> None:
        pass


class PerformanceTracker:
    """
    Accumulates operation counters and wall-clock timings for heap runs.

    The tracker knows nothing about the heap it is attached to; the heap
    calls the `increment_*` methods as it compares, swaps and reads
    elements. A tracker may be shared by several heaps, but it is not
    thread-safe.

    Parameters
    ----------
    reports_dir : str | Path | None
        Directory CSV exports are written to, by default
        `docs/performance-plots`.
    """

    def __init__(self, reports_dir: Optional[Path] = None) -> None:
        self.reports_dir = Path(reports_dir) if reports_dir is not None else REPORTS_DIR
        self._snapshots: list[MetricSnapshot] = []
        self.reset()

    def reset(self) -> None:
        """Zero the counters and timing marks. Snapshots are kept."""
        self.comparisons = 0
        self.swaps = 0
        self.array_accesses = 0
        self.memory_allocations = 0
        self._start_ns: Optional[int] = None
        self._end_ns: Optional[int] = None

    def start_timing(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def stop_timing(self) -> None:
        self._end_ns = time.perf_counter_ns()

    def increment_comparisons(self, count: int = 1) -> None:
        if count > 0:
            self.comparisons += count

    def increment_swaps(self, count: int = 1) -> None:
        if count > 0:
            self.swaps += count

    def increment_array_accesses(self, count: int = 1) -> None:
        if count > 0:
            self.array_accesses += count

    def increment_memory_allocations(self) -> None:
        self.memory_allocations += 1

    @property
    def execution_time_ns(self) -> int:
        """Elapsed time between the marks, 0 if unset or out of order."""
        if self._start_ns is None or self._end_ns is None:
            return 0
        if self._end_ns < self._start_ns:
            return 0
        return self._end_ns - self._start_ns

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time_ns / 1_000_000.0

    def get_counters(self) -> dict[str, int]:
        return {
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "array_accesses": self.array_accesses,
            "memory_allocations": self.memory_allocations,
        }

    def record_snapshot(self, input_size: int, input_type: str) -> MetricSnapshot:
        """
        Capture the current counters and elapsed time.

        Parameters
        ----------
        input_size : int
            Size of the input the measured run worked on.
        input_type : str
            Free-form label, e.g. `"insert-random"`.

        Returns
        -------
        MetricSnapshot
            The snapshot that was appended.
        """
        snapshot = MetricSnapshot(
            input_size=input_size,
            comparisons=self.comparisons,
            swaps=self.swaps,
            array_accesses=self.array_accesses,
            memory_allocations=self.memory_allocations,
            execution_time_ms=self.execution_time_ms,
            input_type="" if input_type is None else str(input_type),
        )
        self._snapshots.append(snapshot)
        return snapshot

    def get_snapshots(self) -> list[MetricSnapshot]:
        return list(self._snapshots)

    def export_to_csv(self, filename: str) -> Path:
        """
        Write all snapshots to `reports_dir / filename` as CSV.

        An existing file is appended to without repeating the header; a new
        file gets the header first.

        Parameters
        ----------
        filename : str
            Bare file name. Path separators and NUL characters are rejected.

        Returns
        -------
        Path
            The file that was written.
        """
        if filename is None or not str(filename).strip():
            raise ValueError("filename must not be None or blank")
        if any(c in filename for c in ("/", "\\", "\0")):
            raise ValueError(
                "filename must not contain path separators or null characters"
            )

        self.reports_dir.mkdir(parents=True, exist_ok=True)
        target = self.reports_dir / filename
        file_exists = target.exists()

        with target.open("a", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            if not file_exists:
                writer.writerow(CSV_HEADER)
            for snapshot in self._snapshots:
                writer.writerow([
                    snapshot.input_size,
                    snapshot.input_type,
                    snapshot.comparisons,
                    snapshot.swaps,
                    snapshot.array_accesses,
                    f"{snapshot.execution_time_ms:.3f}",
                ])

        logger.info(
            "Data %s: %s", "appended to" if file_exists else "written to", target
        )
        return target

    def summary(self) -> str:
        """Human-readable report of the live counters."""
        return "\n".join([
            "=== Performance Metrics ===",
            f"Comparisons: {self.comparisons:,}",
            f"Swaps: {self.swaps:,}",
            f"Array Accesses: {self.array_accesses:,}",
            f"Memory Allocations: {self.memory_allocations:,}",
            f"Execution Time: {self.execution_time_ms:.3f} ms",
            "===========================",
        ])

    def snapshot_table(self) -> str:
        """Fixed-width table of every recorded snapshot."""
        lines = [
            "=== All Performance Snapshots ===",
            f"{'Size':<10} {'Type':<24} {'Comparisons':>20} {'Swaps':>15} "
            f"{'Accesses':>20} {'Time (ms)':>15}",
            "-" * 109,
        ]
        for s in self._snapshots:
            lines.append(
                f"{s.input_size:<10d} {s.input_type:<24} {s.comparisons:>20,d} "
                f"{s.swaps:>15,d} {s.array_accesses:>20,d} "
                f"{s.execution_time_ms:>15.3f}"
            )
        lines.append("=================================")
        return "\n".join(lines)

from src.metrics.performance_tracker import (
    CSV_HEADER,
    REPORTS_DIR,
    MetricSnapshot,
    NullTracker,
    PerformanceTracker,
)

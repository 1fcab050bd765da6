"""
Metrics collection for LinguaBridge.
Tracks remote provider outcomes, fallback usage, and call latency.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone
import time
from collections import defaultdict
import threading


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Metric:
    """Single metric value with timestamp."""
    name: str
    value: float
    timestamp: datetime = field(default_factory=_utcnow)
    tags: Dict[str, str] = field(default_factory=dict)


class MetricsCollector:
    """Thread-safe metrics collector."""

    def __init__(self, max_samples: int = 10000):
        self._metrics: List[Metric] = []
        self._counters: Dict[str, int] = defaultdict(int)
        self._timers: Dict[str, List[float]] = defaultdict(list)
        self._lock = threading.Lock()
        self.max_samples = max_samples

    def _append(self, metric: Metric):
        self._metrics.append(metric)
        if len(self._metrics) > self.max_samples:
            del self._metrics[: len(self._metrics) - self.max_samples]

    def increment(self, name: str, value: int = 1, tags: Optional[Dict[str, str]] = None):
        """Increment a counter metric."""
        with self._lock:
            self._counters[name] += value
            self._append(Metric(name=name, value=float(value), tags=tags or {}))

    def record_timing(self, name: str, duration: float, tags: Optional[Dict[str, str]] = None):
        """Record a timing metric."""
        with self._lock:
            self._timers[name].append(duration)
            self._append(Metric(name=name, value=duration, tags=tags or {}))

    def get_counter(self, name: str) -> int:
        """Get current counter value."""
        with self._lock:
            return self._counters.get(name, 0)

    def get_timing_stats(self, name: str) -> Optional[Dict[str, float]]:
        """Get timing statistics (mean, min, max, count)."""
        with self._lock:
            return self._timing_stats(name)

    def _timing_stats(self, name: str) -> Optional[Dict[str, float]]:
        timings = self._timers.get(name, [])
        if not timings:
            return None
        return {
            "count": len(timings),
            "mean": sum(timings) / len(timings),
            "min": min(timings),
            "max": max(timings),
            "sum": sum(timings)
        }

    def get_all_metrics(self, limit: int = 1000) -> List[Metric]:
        """Get recent metrics."""
        with self._lock:
            return self._metrics[-limit:]

    def clear(self):
        """Clear all metrics."""
        with self._lock:
            self._metrics.clear()
            self._counters.clear()
            self._timers.clear()

    def get_summary(self) -> Dict:
        """Get summary of all metrics."""
        with self._lock:
            summary = {
                "counters": dict(self._counters),
                "timers": {}
            }
            for name in self._timers:
                stats = self._timing_stats(name)
                if stats:
                    summary["timers"][name] = stats
            return summary


# Global metrics collector
_global_metrics = MetricsCollector()


def get_metrics() -> MetricsCollector:
    """Get global metrics collector."""
    return _global_metrics


class Timer:
    """Context manager for timing operations (sync or async)."""

    def __init__(self, name: str, tags: Optional[Dict[str, str]] = None):
        self.name = name
        self.tags = tags
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            duration = time.perf_counter() - self.start_time
            _global_metrics.record_timing(self.name, duration, self.tags)

    async def __aenter__(self):
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.__exit__(exc_type, exc_val, exc_tb)

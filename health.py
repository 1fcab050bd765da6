"""
Health check utilities for LinguaBridge.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from datetime import datetime, timezone
from metrics import MetricsCollector, get_metrics
from phrases import get_dictionary


@dataclass
class HealthCheck:
    """Single health check result."""
    name: str
    status: str  # "healthy", "degraded", "unhealthy"
    message: str
    timestamp: datetime
    details: Optional[Dict] = None


class HealthChecker:
    """Health check manager."""

    def __init__(self, metrics: Optional[MetricsCollector] = None):
        self.metrics = metrics or get_metrics()
        self.checks: List[HealthCheck] = []
        self.last_check_time: Optional[datetime] = None

    def check_all(self) -> Dict:
        """
        Run all health checks.

        Returns:
            Dictionary with overall status and individual checks
        """
        self.checks.clear()
        self.last_check_time = datetime.now(timezone.utc)

        self._check_dictionary()
        self._check_remote()

        if any(c.status == "unhealthy" for c in self.checks):
            overall_status = "unhealthy"
        elif any(c.status == "degraded" for c in self.checks):
            overall_status = "degraded"
        else:
            overall_status = "healthy"

        return {
            "status": overall_status,
            "timestamp": self.last_check_time.isoformat().replace("+00:00", "Z"),
            "checks": [
                {
                    "name": c.name,
                    "status": c.status,
                    "message": c.message,
                    "details": c.details
                }
                for c in self.checks
            ]
        }

    def _add(self, name: str, status: str, message: str, details: Optional[Dict] = None):
        self.checks.append(HealthCheck(
            name=name,
            status=status,
            message=message,
            timestamp=datetime.now(timezone.utc),
            details=details
        ))

    def _check_dictionary(self):
        size = len(get_dictionary())
        if size == 0:
            self._add("phrase_dictionary", "unhealthy", "Phrase dictionary is empty")
        else:
            self._add("phrase_dictionary", "healthy", f"{size} phrases loaded", {"entries": size})

    def _check_remote(self):
        """Remote failures degrade quality but never availability."""
        summary = self.metrics.get_summary()

        error_count = summary["counters"].get("remote_errors", 0)
        success_count = summary["counters"].get("remote_success", 0)
        total = error_count + success_count

        if total == 0:
            self._add("remote_error_rate", "healthy", "No remote calls yet")
        else:
            error_rate = error_count / total
            details = {"error_rate": error_rate, "total_requests": total}
            if error_rate > 0.5:
                self._add(
                    "remote_error_rate", "degraded",
                    f"High remote error rate: {error_rate:.1%}, serving offline fallback",
                    details
                )
            else:
                self._add("remote_error_rate", "healthy", f"Error rate acceptable: {error_rate:.1%}", details)

        stats = summary["timers"].get("remote_translate", {})
        if stats:
            avg_time = stats.get("mean", 0)
            if avg_time > 5.0:
                self._add("remote_latency", "degraded", f"Slow remote provider: {avg_time:.1f}s average", stats)
            else:
                self._add("remote_latency", "healthy", f"Remote latency acceptable: {avg_time:.2f}s average", stats)


# Global health checker
_global_health = HealthChecker()


def get_health() -> Dict:
    """Get health status."""
    return _global_health.check_all()

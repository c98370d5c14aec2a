"""Metrics service for the recommendation endpoint.

Singleton service tracking recommendation calls, outcomes and latency.
"""

import threading
from typing import Dict


class RecommendationMetrics:
    """Singleton service for tracking recommendation metrics.

    Thread-safe counters, since sync handlers run in a threadpool.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """Create singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._lock = threading.Lock()
        self._reset_counters()
        self._initialized = True

    def _reset_counters(self) -> None:
        self._request_count = 0
        self._empty_count = 0
        self._failure_count = 0
        self._total_latency_ms = 0.0
        self._max_latency_ms = 0.0

    def record_request(self, latency_ms: float, num_results: int) -> None:
        """Record a successful recommendation request.

        Args:
            latency_ms: Latency in milliseconds
            num_results: Number of products returned
        """
        with self._lock:
            self._request_count += 1
            self._total_latency_ms += latency_ms
            self._max_latency_ms = max(self._max_latency_ms, latency_ms)
            if num_results == 0:
                self._empty_count += 1

    def record_failure(self) -> None:
        with self._lock:
            self._failure_count += 1

    def get_metrics(self) -> Dict:
        """Get current metrics.

        Returns:
            Dictionary with request_count, empty_count, failure_count,
            average_latency_ms and max_latency_ms.
        """
        with self._lock:
            avg_latency = (
                self._total_latency_ms / self._request_count
                if self._request_count > 0
                else 0.0
            )
            return {
                "request_count": self._request_count,
                "empty_count": self._empty_count,
                "failure_count": self._failure_count,
                "average_latency_ms": round(avg_latency, 2),
                "max_latency_ms": round(self._max_latency_ms, 2),
            }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._reset_counters()


# Global singleton instance
metrics_service = RecommendationMetrics()

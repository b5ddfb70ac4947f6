"""
Shared metrics configuration for the Actions Gateway.
"""

from typing import Dict, Any, Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, Info


class MetricsCollector:
    """Centralized metrics collector for a service.

    Each collector owns its ``CollectorRegistry`` unless one is supplied, so
    several app instances (e.g. in tests) can coexist in one process.
    """

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up common metrics for the service."""

        # Service info
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })

        # HTTP metrics
        self._metrics["http_requests_total"] = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["http_request_duration_seconds"] = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry
        )

        # Tool metrics
        self._metrics["tool_executions_total"] = Counter(
            "tool_executions_total",
            "Total tool executions",
            ["tool", "outcome"],
            registry=self.registry
        )

        self._metrics["tool_execution_duration_seconds"] = Histogram(
            "tool_execution_duration_seconds",
            "Tool execution duration in seconds",
            ["tool"],
            registry=self.registry
        )

        self._metrics["translation_cache_events_total"] = Counter(
            "translation_cache_events_total",
            "Translation cache lookups",
            ["result"],
            registry=self.registry
        )

    def record_http_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        self._metrics["http_requests_total"].labels(
            method=method,
            endpoint=endpoint,
            status_code=str(status_code)
        ).inc()

        self._metrics["http_request_duration_seconds"].labels(
            method=method,
            endpoint=endpoint
        ).observe(duration)

    def record_tool_execution(self, tool: str, outcome: str, duration: float):
        """Record the outcome and duration of a tool execution."""
        self._metrics["tool_executions_total"].labels(tool=tool, outcome=outcome).inc()
        self._metrics["tool_execution_duration_seconds"].labels(tool=tool).observe(duration)

    def record_cache_event(self, result: str):
        """Record a translation cache hit or miss."""
        self._metrics["translation_cache_events_total"].labels(result=result).inc()

    def sample(self, name: str, labels: Optional[Dict[str, str]] = None) -> Optional[float]:
        """Read a sample value back from the registry."""
        return self.registry.get_sample_value(name, labels or {})


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)

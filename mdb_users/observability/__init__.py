"""
Observability components.

Provides contextual logging, in-process operation metrics and health checks.
"""

from .health import (
    HealthChecker,
    HealthCheckResult,
    HealthStatus,
    check_mongodb_health,
)
from .logging import (
    ContextualLoggerAdapter,
    clear_correlation_id,
    clear_request_context,
    configure_logging,
    get_correlation_id,
    get_logger,
    get_logging_context,
    set_correlation_id,
    set_request_context,
)
from .metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
    record_operation,
    timed_operation,
)

__all__ = [
    # Metrics
    "MetricsCollector",
    "OperationMetrics",
    "get_metrics_collector",
    "record_operation",
    "timed_operation",
    # Logging
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "set_request_context",
    "clear_request_context",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
    "configure_logging",
    # Health
    "HealthStatus",
    "HealthCheckResult",
    "HealthChecker",
    "check_mongodb_health",
]

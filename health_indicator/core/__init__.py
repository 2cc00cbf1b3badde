"""Core components for health indicators."""

from health_indicator.core.indicator import HealthIndicator
from health_indicator.core.packages import check_packages
from health_indicator.core.result import (
    HealthIndicatorDetail,
    HealthIndicatorResult,
    HealthIndicatorService,
    HealthIndicatorSession,
    HealthIndicatorStatus,
)
from health_indicator.core.timeout import promise_timeout

__all__ = [
    "HealthIndicator",
    "HealthIndicatorDetail",
    "HealthIndicatorResult",
    "HealthIndicatorService",
    "HealthIndicatorSession",
    "HealthIndicatorStatus",
    "check_packages",
    "promise_timeout",
]

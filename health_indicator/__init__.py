"""Health indicators that report keyed up/down status for service dependencies."""

from health_indicator.config import HealthIndicatorConfig
from health_indicator.core import (
    HealthIndicator,
    HealthIndicatorResult,
    HealthIndicatorService,
    HealthIndicatorSession,
    check_packages,
    promise_timeout,
)
from health_indicator.database import (
    AsyncpgConnection,
    BackendKind,
    Connection,
    ConnectionProvider,
    ConnectionRegistry,
    DatabaseHealthIndicator,
    MongoConnection,
    PingCheckSettings,
    SQLAlchemyConnection,
)
from health_indicator.errors import (
    ConfigurationError,
    ConnectionNotFoundError,
    HealthCheckError,
    MissingPackagesError,
    MongoConnectionError,
    ProbeTimeoutError,
)

__all__ = [
    # Results
    "HealthIndicator",
    "HealthIndicatorResult",
    "HealthIndicatorService",
    "HealthIndicatorSession",
    # Config
    "HealthIndicatorConfig",
    # Database
    "DatabaseHealthIndicator",
    "PingCheckSettings",
    "BackendKind",
    "Connection",
    "ConnectionProvider",
    "ConnectionRegistry",
    "AsyncpgConnection",
    "SQLAlchemyConnection",
    "MongoConnection",
    # Utilities
    "check_packages",
    "promise_timeout",
    # Errors
    "HealthCheckError",
    "ConfigurationError",
    "MissingPackagesError",
    "ConnectionNotFoundError",
    "ProbeTimeoutError",
    "MongoConnectionError",
]

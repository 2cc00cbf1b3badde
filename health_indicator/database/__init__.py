"""Database health indicators and connection handles."""

from health_indicator.database.connections import (
    AsyncpgConnection,
    BackendKind,
    Connection,
    ConnectionProvider,
    ConnectionRegistry,
    MongoConnection,
    SQLAlchemyConnection,
)
from health_indicator.database.ping import DatabaseHealthIndicator, PingCheckSettings

__all__ = [
    "AsyncpgConnection",
    "BackendKind",
    "Connection",
    "ConnectionProvider",
    "ConnectionRegistry",
    "DatabaseHealthIndicator",
    "MongoConnection",
    "PingCheckSettings",
    "SQLAlchemyConnection",
]

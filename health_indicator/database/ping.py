"""Database ping health indicator."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Mapping, Optional, Union

from health_indicator.config import HealthIndicatorConfig
from health_indicator.core.indicator import HealthIndicator
from health_indicator.core.result import HealthIndicatorResult, HealthIndicatorService
from health_indicator.core.timeout import promise_timeout
from health_indicator.database.connections import BackendKind, Connection, ConnectionProvider
from health_indicator.errors import (
    ConnectionNotFoundError,
    MongoConnectionError,
    ProbeTimeoutError,
)

logger = logging.getLogger(__name__)

CONNECTION_NOT_FOUND_MESSAGE = "Connection provider not found in application context"

DEFAULT_LIVENESS_QUERY = "SELECT 1"

# Backends whose liveness statement differs from SELECT 1
LIVENESS_QUERIES: dict[BackendKind, str] = {
    BackendKind.ORACLE: "SELECT 1 FROM DUAL",
    BackendKind.SAP: "SELECT now() FROM dummy",
}


@dataclass
class PingCheckSettings:
    """Options for a single ping check."""

    connection: Optional[Connection] = None  # falls back to the provider's default
    timeout: Optional[int] = None  # milliseconds


class DatabaseHealthIndicator(HealthIndicator):
    """Checks that a database connection answers within a time budget.

    Example:
        indicator = DatabaseHealthIndicator(registry)
        await indicator.ping_check("database", PingCheckSettings(timeout=1500))
    """

    dependant_packages = ("pymongo",)

    def __init__(
        self,
        provider: Optional[ConnectionProvider] = None,
        *,
        service: Optional[HealthIndicatorService] = None,
        config: Optional[HealthIndicatorConfig] = None,
    ) -> None:
        super().__init__(service=service, config=config)
        self._provider = provider

    def _get_context_connection(self) -> Optional[Connection]:
        if self._provider is None:
            return None
        try:
            return self._provider.get_connection(self.config.default_connection)
        except ConnectionNotFoundError:
            return None
        except Exception:
            logger.warning("Connection provider failed to resolve a connection", exc_info=True)
            return None

    async def _check_mongodb_connection(self, connection: Connection) -> None:
        from pymongo import AsyncMongoClient

        url = connection.url or connection.build_connection_url()
        client = None
        try:
            client = AsyncMongoClient(url, **connection.build_connection_options())
            await client.admin.command("ping")
        except Exception as e:
            raise MongoConnectionError(str(e)) from e
        finally:
            if client is not None:
                await _close_quietly(client)

    def _liveness_check(self, connection: Connection) -> Awaitable[Any]:
        if connection.kind == BackendKind.MONGODB:
            return self._check_mongodb_connection(connection)
        return connection.query(LIVENESS_QUERIES.get(connection.kind, DEFAULT_LIVENESS_QUERY))

    async def _ping_db(self, connection: Connection, timeout: int) -> Any:
        logger.debug("Pinging %s connection (timeout %sms)", connection.kind, timeout)
        return await promise_timeout(timeout, self._liveness_check(connection))

    async def ping_check(
        self,
        key: str,
        settings: Union[PingCheckSettings, Mapping[str, Any], None] = None,
    ) -> HealthIndicatorResult:
        """
        Check that the connection responds within the timeout (default 1000ms).

        Args:
            key: Key of the returned result
            settings: Connection and timeout to use

        Returns:
            ``{key: {"status": "up"}}``, or a down result with a message

        Raises:
            MissingPackagesError: If a required driver package is not installed
        """
        check = self._service.check(key)
        self.check_dependant_packages()

        if settings is None:
            settings = PingCheckSettings()
        elif isinstance(settings, Mapping):
            # Unknown keys are ignored
            settings = PingCheckSettings(
                connection=settings.get("connection"),
                timeout=settings.get("timeout"),
            )

        connection = settings.connection
        if connection is None:
            connection = self._get_context_connection()
        timeout = settings.timeout or self.config.default_timeout_ms

        if connection is None:
            return check.down(CONNECTION_NOT_FOUND_MESSAGE)

        try:
            await self._ping_db(connection, timeout)
        except ProbeTimeoutError:
            logger.warning("Ping check %r timed out after %sms", key, timeout)
            return check.down(f"timeout of {timeout}ms exceeded")
        except MongoConnectionError as e:
            logger.warning("Ping check %r could not connect to MongoDB: %s", key, e)
            return check.down(str(e))
        except Exception:
            logger.warning("Ping check %r failed", key, exc_info=True)
            return check.down(f"{key} is not available")

        return check.up()


async def _close_quietly(client: Any) -> None:
    # Closing an already closed client is not a failure
    try:
        await client.close()
    except Exception:
        logger.debug("Ignoring error while closing MongoDB client", exc_info=True)

"""Connection handles probed by the database health indicator."""

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol, Union, runtime_checkable
from urllib.parse import quote_plus

from health_indicator.core.packages import check_packages
from health_indicator.errors import ConfigurationError, ConnectionNotFoundError

if TYPE_CHECKING:
    import asyncpg
    from sqlalchemy.ext.asyncio import AsyncEngine


class BackendKind(str, Enum):
    """Database backends a connection can point at."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    SQLITE = "sqlite"
    MSSQL = "mssql"
    ORACLE = "oracle"
    SAP = "sap"
    MONGODB = "mongodb"
    OTHER = "other"


@runtime_checkable
class Connection(Protocol):
    """A live connection owned by the application, not by the indicator."""

    @property
    def kind(self) -> Union[BackendKind, str]:
        """Backend discriminator used to pick the liveness query."""
        ...

    @property
    def url(self) -> Optional[str]:
        """Configured connection URL, if any."""
        ...

    @property
    def options(self) -> Mapping[str, Any]:
        """Structured connection options."""
        ...

    async def query(self, sql: str) -> Any:
        """Execute a statement and return its result."""
        ...

    def build_connection_url(self) -> str:
        """Build a URL from the structured options."""
        ...

    def build_connection_options(self) -> dict[str, Any]:
        """Keyword arguments for a native client to the same target."""
        ...


class ConnectionProvider(Protocol):
    """Looks up the connection for the current application context."""

    def get_connection(self, name: Optional[str] = None) -> Connection:
        """Return the named connection, or the default one.

        Raises:
            ConnectionNotFoundError: If no such connection is registered
        """
        ...


class ConnectionRegistry:
    """In-memory connection provider keyed by name."""

    def __init__(self, default_name: str = "default") -> None:
        self._default_name = default_name
        self._connections: dict[str, Connection] = {}

    def register(self, connection: Connection, name: Optional[str] = None) -> None:
        self._connections[name or self._default_name] = connection

    def unregister(self, name: Optional[str] = None) -> None:
        self._connections.pop(name or self._default_name, None)

    def get_connection(self, name: Optional[str] = None) -> Connection:
        name = name or self._default_name
        try:
            return self._connections[name]
        except KeyError:
            raise ConnectionNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._connections)


class AsyncpgConnection:
    """Postgres connection backed by an asyncpg pool."""

    kind = BackendKind.POSTGRES

    def __init__(self, pool: "asyncpg.Pool", dsn: Optional[str] = None) -> None:
        check_packages(["asyncpg"], type(self).__name__)
        self._pool = pool
        self._dsn = dsn

    @property
    def url(self) -> Optional[str]:
        return self._dsn

    @property
    def options(self) -> Mapping[str, Any]:
        return {}

    async def query(self, sql: str) -> Any:
        return await self._pool.fetchval(sql)

    def build_connection_url(self) -> str:
        if not self._dsn:
            raise ConfigurationError("asyncpg connection has no DSN configured")
        return self._dsn

    def build_connection_options(self) -> dict[str, Any]:
        return {}


# SQLAlchemy dialect name -> backend kind
_DIALECT_KINDS: dict[str, BackendKind] = {
    "postgresql": BackendKind.POSTGRES,
    "mysql": BackendKind.MYSQL,
    "mariadb": BackendKind.MARIADB,
    "sqlite": BackendKind.SQLITE,
    "mssql": BackendKind.MSSQL,
    "oracle": BackendKind.ORACLE,
    "hana": BackendKind.SAP,
    "sap": BackendKind.SAP,
}


class SQLAlchemyConnection:
    """Connection backed by a SQLAlchemy async engine."""

    def __init__(self, engine: "AsyncEngine") -> None:
        check_packages(["sqlalchemy"], type(self).__name__)
        self._engine = engine

    @property
    def kind(self) -> BackendKind:
        return _DIALECT_KINDS.get(self._engine.dialect.name, BackendKind.OTHER)

    @property
    def url(self) -> Optional[str]:
        return self._engine.url.render_as_string(hide_password=False)

    @property
    def options(self) -> Mapping[str, Any]:
        return dict(self._engine.url.query)

    async def query(self, sql: str) -> Any:
        from sqlalchemy import text

        async with self._engine.connect() as conn:
            result = await conn.execute(text(sql))
            return result.scalar()

    def build_connection_url(self) -> str:
        return self._engine.url.render_as_string(hide_password=False)

    def build_connection_options(self) -> dict[str, Any]:
        return dict(self.options)


class MongoConnection:
    """MongoDB target described by a URL or by host/port/credentials."""

    kind = BackendKind.MONGODB

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        host: str = "localhost",
        port: int = 27017,
        database: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._url = url
        self.host = host
        self.port = port
        self.database = database
        self.username = username
        self.password = password
        self._options = dict(options or {})

    @property
    def url(self) -> Optional[str]:
        return self._url

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    async def query(self, sql: str) -> Any:
        raise NotImplementedError("MongoDB connections do not run SQL statements")

    def build_connection_url(self) -> str:
        credentials = ""
        if self.username:
            credentials = quote_plus(self.username)
            if self.password:
                credentials += f":{quote_plus(self.password)}"
            credentials += "@"

        url = f"mongodb://{credentials}{self.host}:{self.port}"
        if self.database:
            url += f"/{self.database}"
        return url

    def build_connection_options(self) -> dict[str, Any]:
        return dict(self._options)

"""Exceptions raised by health indicators."""

from typing import Optional, Sequence


class HealthCheckError(Exception):
    """Base class for health indicator errors."""


class ConfigurationError(HealthCheckError):
    """Indicator cannot run because of how it was set up."""


class MissingPackagesError(ConfigurationError):
    """Optional driver packages required by an indicator are not installed."""

    def __init__(self, caller: str, packages: Sequence[str]) -> None:
        self.caller = caller
        self.packages = list(packages)
        names = ", ".join(self.packages)
        super().__init__(
            f"{caller} requires the following packages which are not installed: "
            f"{names}. Install them with: pip install {' '.join(self.packages)}"
        )


class ConnectionNotFoundError(ConfigurationError):
    """No connection is registered under the requested name."""

    def __init__(self, name: Optional[str]) -> None:
        self.name = name
        super().__init__(f"Connection {name!r} not found")


class ProbeTimeoutError(HealthCheckError):
    """A check did not complete within its time budget."""

    def __init__(self, timeout: int) -> None:
        self.timeout = timeout
        super().__init__(f"timeout of {timeout}ms exceeded")


class MongoConnectionError(HealthCheckError):
    """Opening a native MongoDB client connection failed."""

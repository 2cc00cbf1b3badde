"""Base class for health indicators."""

from typing import Optional

from health_indicator.config import HealthIndicatorConfig
from health_indicator.core.packages import check_packages
from health_indicator.core.result import HealthIndicatorService


class HealthIndicator:
    """Shared setup for indicators: result service, config and driver checks.

    Subclasses list the optional packages they need in ``dependant_packages``;
    they are verified when the indicator is created.
    """

    dependant_packages: tuple[str, ...] = ()

    def __init__(
        self,
        *,
        service: Optional[HealthIndicatorService] = None,
        config: Optional[HealthIndicatorConfig] = None,
    ) -> None:
        self._service = service or HealthIndicatorService()
        self._config = config or HealthIndicatorConfig()
        self.check_dependant_packages()

    @property
    def config(self) -> HealthIndicatorConfig:
        return self._config

    def check_dependant_packages(self) -> None:
        """Raise MissingPackagesError if a required package is not installed."""
        check_packages(self.dependant_packages, type(self).__name__)

"""Configuration dataclasses for health indicators."""

from dataclasses import dataclass


@dataclass
class HealthIndicatorConfig:
    """Defaults shared by health indicators."""

    default_timeout_ms: int = 1000
    default_connection: str = "default"  # registry name used when none is given

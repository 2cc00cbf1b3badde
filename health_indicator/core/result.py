"""Health indicator result types and the session used to build them."""

from typing import Any, Literal, Mapping, Union

HealthIndicatorStatus = Literal["up", "down"]

# {"status": "up" | "down", **additional data}
HealthIndicatorDetail = dict[str, Any]

# {key: detail}, always exactly one entry
HealthIndicatorResult = dict[str, HealthIndicatorDetail]

AdditionalData = Union[Mapping[str, Any], str, None]


def _normalize(data: AdditionalData) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, str):
        return {"message": data}
    if isinstance(data, Mapping):
        return data
    raise TypeError(
        f"Additional data must be a mapping or a string, got {type(data).__name__}"
    )


class HealthIndicatorSession:
    """Builds results for a single, fixed key."""

    def __init__(self, key: str) -> None:
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def _result(self, status: HealthIndicatorStatus, data: AdditionalData) -> HealthIndicatorResult:
        detail: HealthIndicatorDetail = {"status": status}
        for name, value in _normalize(data).items():
            # The status tag always wins over caller data
            if name != "status":
                detail[name] = value
        return {self._key: detail}

    def up(self, data: AdditionalData = None) -> HealthIndicatorResult:
        """Mark the indicator as up.

        Args:
            data: Extra fields for the result detail, or a message string

        Returns:
            ``{key: {"status": "up", **data}}``
        """
        return self._result("up", data)

    def down(self, data: AdditionalData = None) -> HealthIndicatorResult:
        """Mark the indicator as down.

        Args:
            data: Extra fields for the result detail, or a message string

        Returns:
            ``{key: {"status": "down", **data}}``
        """
        return self._result("down", data)


class HealthIndicatorService:
    """Entry point for building health indicator results."""

    def check(self, key: str) -> HealthIndicatorSession:
        return HealthIndicatorSession(key)

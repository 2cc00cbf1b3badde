"""Tests for optional package checks."""

import pytest

from health_indicator.core.indicator import HealthIndicator
from health_indicator.core.packages import check_packages
from health_indicator.errors import ConfigurationError, MissingPackagesError


def test_installed_packages_pass():
    check_packages(["json", "asyncio"], "SomeIndicator")


def test_missing_packages_raise():
    with pytest.raises(MissingPackagesError) as exc_info:
        check_packages(["json", "not_a_real_package_xyz"], "SomeIndicator")

    err = exc_info.value
    assert err.caller == "SomeIndicator"
    assert err.packages == ["not_a_real_package_xyz"]
    assert "SomeIndicator" in str(err)
    assert "not_a_real_package_xyz" in str(err)
    assert isinstance(err, ConfigurationError)


def test_missing_parent_of_dotted_name():
    with pytest.raises(MissingPackagesError):
        check_packages(["not_a_real_package_xyz.sub"], "SomeIndicator")


def test_indicator_checks_packages_on_construction():
    class NeedsDriver(HealthIndicator):
        dependant_packages = ("not_a_real_driver_xyz",)

    with pytest.raises(MissingPackagesError, match="NeedsDriver"):
        NeedsDriver()

"""Presence checks for optional driver packages."""

import importlib.util
from typing import Sequence

from health_indicator.errors import MissingPackagesError


def _is_installed(name: str) -> bool:
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        # find_spec imports parent packages for dotted names
        return False


def check_packages(packages: Sequence[str], caller: str) -> None:
    """
    Verify that every package in ``packages`` can be imported.

    Args:
        packages: Top-level or dotted module names
        caller: Name reported in the error, usually the indicator class

    Raises:
        MissingPackagesError: If any package cannot be resolved
    """
    missing = [name for name in packages if not _is_installed(name)]
    if missing:
        raise MissingPackagesError(caller, missing)

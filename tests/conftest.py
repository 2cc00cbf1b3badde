"""Pytest configuration and shared fixtures."""

import importlib.util
from contextlib import contextmanager
from unittest.mock import patch

import pytest

from tests.fakes import HangingConnection, RecordingConnection


@pytest.fixture
def healthy_connection() -> RecordingConnection:
    return RecordingConnection()


@pytest.fixture
def hanging_connection() -> HangingConnection:
    return HangingConnection()


@pytest.fixture
def uninstalled():
    """Make the named packages look uninstalled while the context is active."""
    real_find_spec = importlib.util.find_spec

    @contextmanager
    def _uninstalled(*names: str):
        def find_spec(name, *args, **kwargs):
            if name.split(".")[0] in names:
                return None
            return real_find_spec(name, *args, **kwargs)

        with patch("importlib.util.find_spec", side_effect=find_spec):
            yield

    return _uninstalled

"""Shared test fixtures for the loader and container test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from module_helpers import dynamic_modules, static_modules

from modwire.container import Container


@pytest.fixture
def container() -> Container:
    """An empty reference container."""
    return Container()


@pytest.fixture
def container_spy() -> MagicMock:
    """A stand-in container recording register() calls."""
    return MagicMock(spec=["register", "has_registration", "resolve"])


@pytest.fixture
def static_mapping() -> dict[str, Any]:
    """Mapping of paths to already-loaded module values."""
    return static_modules()


@pytest.fixture
def dynamic_mapping() -> dict[str, Any]:
    """Mapping of paths to async factories returning module values."""
    return dynamic_modules()

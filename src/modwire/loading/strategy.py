"""Construction-strategy selection for resolved artifacts."""

from __future__ import annotations

import inspect
from typing import Any, Callable

from modwire.loading.types import RegistrationStrategy

__all__ = ["is_class", "select_strategy"]


def is_class(value: Any) -> bool:
    """Default detection predicate: True for anything defined as a class."""
    return inspect.isclass(value)


def select_strategy(
    value: Any,
    override: RegistrationStrategy | None = None,
    detect: Callable[[Any], bool] | None = None,
) -> RegistrationStrategy:
    """Choose class-style or function-style registration for ``value``.

    An explicit override always wins. Otherwise ``detect`` (``is_class`` by
    default) classifies the artifact.
    """
    if override is not None:
        return RegistrationStrategy(override)
    predicate = detect if detect is not None else is_class
    return RegistrationStrategy.CLASS if predicate(value) else RegistrationStrategy.FUNCTION

"""Resolver marker: tags a named export as an eligible DI provider."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable

__all__ = ["TaggedProvider", "provider", "is_tagged"]


@dataclass(frozen=True)
class TaggedProvider:
    """Wrapper marking ``value`` as registrable when exported under a name.

    ``options`` are resolver options attached to this provider; the loader
    merges them over the call-wide resolver options. ``module`` is the name
    of the module that created the tag, so a provider imported into another
    module is not mistaken for one of that module's own exports.
    """

    value: Any
    options: dict[str, Any] = field(default_factory=dict)
    module: str | None = field(default=None, compare=False)


def _caller_module() -> str | None:
    # Two frames up: the module-level code calling provider().
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        return caller.f_globals.get("__name__") if caller is not None else None
    finally:
        del frame


def provider(value: Callable | None = None, **options: Any) -> Any:
    """Tag a class or function as a DI provider.

    Usable directly or as a decorator::

        FooBar = provider(FooBarImpl)

        @provider(lifetime="singleton")
        class Cache:
            ...

    In both forms the result is a TaggedProvider, not the original callable.
    """
    module = _caller_module()
    if value is not None:
        return TaggedProvider(value=value, options=dict(options), module=module)

    def decorator(target: Callable) -> TaggedProvider:
        return TaggedProvider(value=target, options=dict(options), module=module)

    return decorator


def is_tagged(value: Any) -> bool:
    """Return True if value carries the resolver marker."""
    return isinstance(value, TaggedProvider)

"""Module values and artifacts shared by the loader tests."""

from __future__ import annotations

from typing import Any

from modwire.provider import provider


class Foo:
    """Plain class used as a default export."""


def Bar() -> str:
    return "bar"


def NamedExport() -> str:
    return "named"


class _FooBarImpl:
    """Class exported under a tagged name."""


FooBar = provider(_FooBarImpl)


def static_modules() -> dict[str, Any]:
    """Paths mapped to already-loaded module values."""
    return {
        "./dir/foo.js": {"default": Foo},
        "./dir/bar.js": {"default": Bar, "namedExport": NamedExport},
        "./dir/fooBar.index.js": {"FooBar": FooBar},
    }


def lazy(value: Any) -> Any:
    """Wrap a module value in an async zero-argument factory."""

    async def factory() -> Any:
        return value

    return factory


def dynamic_modules() -> dict[str, Any]:
    """Paths mapped to async factories returning module values."""
    return {path: lazy(value) for path, value in static_modules().items()}

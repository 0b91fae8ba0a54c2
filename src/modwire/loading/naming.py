"""Registration name derivation from module paths."""

from __future__ import annotations

from typing import Callable

__all__ = ["extract_base_name", "format_name", "lower_first"]


def extract_base_name(path: str) -> str:
    """Return the file name of ``path`` up to its first dot.

    Both ``/`` and ``\\`` separators are accepted, so ``C:\\svc\\fooBar.index.js``
    and ``./svc/fooBar.index.js`` both yield ``fooBar``.
    """
    file_name = path.replace("\\", "/").split("/")[-1]
    return file_name.split(".")[0]


def lower_first(name: str) -> str:
    """Lower-case the first character only; the rest is left untouched."""
    return name[:1].lower() + name[1:]


def format_name(name: str, formatter: Callable[[str], str] | None = None) -> str:
    """Map a chosen artifact name to its registration key."""
    if formatter is not None:
        return formatter(name)
    return lower_first(name)

"""Artifact selection: pick the one export of a module to register."""

from __future__ import annotations

import logging
import types
from typing import Any, Mapping

from modwire.errors import ResolutionError
from modwire.loading.naming import extract_base_name
from modwire.loading.types import ArtifactKind, ResolvedArtifact
from modwire.provider import is_tagged

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_EXPORT", "module_exports", "select_artifact"]

DEFAULT_EXPORT = "default"


def module_exports(module_value: Any) -> dict[str, Any]:
    """Return the exports of a module value as an ordered dict.

    Mappings are taken as-is. For imported Python modules, ``__all__`` is
    honoured when present; otherwise every public attribute is an export, in
    definition order, except providers tagged in some other module.

    Raises:
        AttributeError: If ``__all__`` names a missing attribute.
        TypeError: If the value is neither a mapping nor a module.
    """
    if isinstance(module_value, Mapping):
        return dict(module_value)
    if isinstance(module_value, types.ModuleType):
        names = getattr(module_value, "__all__", None)
        if names is not None:
            return {name: getattr(module_value, name) for name in names}
        own_name = module_value.__name__
        return {
            name: value
            for name, value in vars(module_value).items()
            if not name.startswith("_") and not _is_imported_provider(value, own_name)
        }
    raise TypeError(f"Unsupported module value of type {type(module_value).__name__}")


def _is_imported_provider(value: Any, module_name: str) -> bool:
    return is_tagged(value) and value.module is not None and value.module != module_name


def select_artifact(path: str, module_value: Any) -> ResolvedArtifact:
    """Select the registrable artifact of the module loaded from ``path``.

    A callable ``default`` export wins and is named after the file. Otherwise
    the first named export tagged as a provider wins and keeps its own key.

    Raises:
        ResolutionError: If neither kind of export exists.
    """
    try:
        exports = module_exports(module_value)
    except (TypeError, AttributeError) as exc:
        raise ResolutionError(path=path, cause=exc) from exc

    default = exports.get(DEFAULT_EXPORT)
    if is_tagged(default) and callable(default.value):
        return ResolvedArtifact(
            kind=ArtifactKind.DEFAULT,
            name=extract_base_name(path),
            value=default.value,
            options=dict(default.options),
        )
    if default is not None and callable(default):
        return ResolvedArtifact(kind=ArtifactKind.DEFAULT, name=extract_base_name(path), value=default)

    for key, value in exports.items():
        if key == DEFAULT_EXPORT:
            continue
        if is_tagged(value) and callable(value.value):
            return ResolvedArtifact(
                kind=ArtifactKind.NAMED_EXPORT,
                name=key,
                value=value.value,
                options=dict(value.options),
            )

    logger.debug("No default or tagged export in %s (exports: %s)", path, list(exports))
    raise ResolutionError(path=path)

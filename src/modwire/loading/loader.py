"""Loader entry points: resolve module mappings and register their artifacts."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Mapping

from modwire.errors import EagerModeViolationError
from modwire.loading.artifact import select_artifact
from modwire.loading.naming import format_name
from modwire.loading.options import LoadOptions, coerce_options, descriptor_options
from modwire.loading.strategy import select_strategy
from modwire.loading.types import ModuleSource, RegistrationDescriptor

logger = logging.getLogger(__name__)

__all__ = ["load_modules", "load_modules_eager", "plan_registrations"]


async def load_modules(
    container: Any,
    modules: Mapping[str, ModuleSource],
    options: LoadOptions | Mapping[str, Any] | None = None,
) -> None:
    """Register every module of ``modules`` into ``container``.

    Sources may be module values or zero-argument factories returning an
    awaitable module value. All factories run concurrently; nothing is
    registered until every one of them has resolved. Registration follows
    the key order of ``modules``.

    Raises:
        ResolutionError: If a module has no registrable export.
        ConfigError: If ``options`` are invalid.
    """
    opts = coerce_options(options)
    entries = list(modules.items())
    logger.debug("Resolving %d module sources", len(entries))
    loaded = await asyncio.gather(*(_resolve_source(source) for _, source in entries))
    resolved = [(path, module_value) for (path, _), module_value in zip(entries, loaded)]
    _register_all(container, resolved, opts)


def load_modules_eager(
    container: Any,
    modules: Mapping[str, ModuleSource],
    options: LoadOptions | Mapping[str, Any] | None = None,
) -> None:
    """Synchronously register already-loaded modules into ``container``.

    Raises:
        EagerModeViolationError: If any source is a lazy factory. Raised
            before the container is touched.
        ResolutionError: If a module has no registrable export.
        ConfigError: If ``options`` are invalid.
    """
    opts = coerce_options(options)
    lazy_paths = [path for path, source in modules.items() if callable(source)]
    if lazy_paths:
        raise EagerModeViolationError(paths=lazy_paths)
    _register_all(container, list(modules.items()), opts)


def plan_registrations(
    resolved: list[tuple[str, Any]],
    options: LoadOptions | Mapping[str, Any] | None = None,
) -> list[tuple[str, RegistrationDescriptor]]:
    """Compute (registration name, descriptor) for each loaded module, in order."""
    opts = coerce_options(options)
    plan: list[tuple[str, RegistrationDescriptor]] = []
    for path, module_value in resolved:
        artifact = select_artifact(path, module_value)
        name = format_name(artifact.name, opts.format_name)
        strategy = select_strategy(artifact.value, override=opts.strategy_override, detect=opts.is_class)
        descriptor = RegistrationDescriptor(
            strategy=strategy,
            value=artifact.value,
            options=descriptor_options(opts, artifact),
        )
        logger.debug("Resolved %s -> '%s' (%s, %s)", path, name, artifact.kind.value, strategy.value)
        plan.append((name, descriptor))
    return plan


def _register_all(container: Any, resolved: list[tuple[str, Any]], options: LoadOptions) -> None:
    plan = plan_registrations(resolved, options)
    for name, descriptor in plan:
        container.register(name, descriptor)
    logger.info("Registered %d modules", len(plan))


async def _resolve_source(source: ModuleSource) -> Any:
    if not callable(source):
        return source
    result = source()
    if inspect.isawaitable(result):
        result = await result
    return result

"""Module loading pipeline: naming, artifact selection, strategy, registration.

Usage::

    from modwire import Container
    from modwire.loading import load_modules

    container = Container()
    await load_modules(container, {"./services/mailer.py": mailer_module})
"""

from __future__ import annotations

from modwire.loading.artifact import module_exports, select_artifact
from modwire.loading.loader import load_modules, load_modules_eager, plan_registrations
from modwire.loading.naming import extract_base_name, format_name, lower_first
from modwire.loading.options import LoadOptions, ResolverOptions
from modwire.loading.strategy import is_class, select_strategy
from modwire.loading.types import (
    ArtifactKind,
    Lifetime,
    RegistrationDescriptor,
    RegistrationStrategy,
    ResolvedArtifact,
)

__all__ = [
    "ArtifactKind",
    "Lifetime",
    "LoadOptions",
    "RegistrationDescriptor",
    "RegistrationStrategy",
    "ResolvedArtifact",
    "ResolverOptions",
    "extract_base_name",
    "format_name",
    "is_class",
    "load_modules",
    "load_modules_eager",
    "lower_first",
    "module_exports",
    "plan_registrations",
    "select_artifact",
    "select_strategy",
]

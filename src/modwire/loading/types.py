"""Loading types: strategies, lifetimes, resolved artifacts and descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Union

__all__ = [
    "ArtifactKind",
    "RegistrationStrategy",
    "Lifetime",
    "ResolvedArtifact",
    "RegistrationDescriptor",
    "ModuleSource",
    "LazyModuleFactory",
]

LazyModuleFactory = Callable[[], Awaitable[Any]]
ModuleSource = Union[Mapping[str, Any], Any, LazyModuleFactory]


class ArtifactKind(str, Enum):
    """Which export shape produced an artifact."""

    DEFAULT = "default"
    NAMED_EXPORT = "named_export"


class RegistrationStrategy(str, Enum):
    """How the container instantiates a registered artifact."""

    CLASS = "class"
    FUNCTION = "function"


class Lifetime(str, Enum):
    """Caching policy applied by the reference container."""

    TRANSIENT = "transient"
    SINGLETON = "singleton"


@dataclass(frozen=True)
class ResolvedArtifact:
    """The single artifact selected from a module, with its registration name."""

    kind: ArtifactKind
    name: str
    value: Any
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RegistrationDescriptor:
    """What the loader hands to ``container.register`` for one artifact."""

    strategy: RegistrationStrategy
    value: Any
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def lifetime(self) -> Lifetime:
        return Lifetime(self.options.get("lifetime", Lifetime.TRANSIENT))

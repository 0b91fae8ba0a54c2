"""Loader options: pydantic models for resolver and load configuration."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modwire.config import Config
from modwire.errors import ConfigError
from modwire.loading.types import Lifetime, RegistrationStrategy, ResolvedArtifact

__all__ = ["ResolverOptions", "LoadOptions", "coerce_options", "descriptor_options"]


class ResolverOptions(BaseModel):
    """Options forwarded to every registration descriptor.

    ``register`` forces one strategy for the whole call; every other key,
    known or not, is passed through to the container untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    strategy: RegistrationStrategy | None = Field(default=None, alias="register")
    lifetime: Lifetime = Lifetime.TRANSIENT

    def passthrough(self) -> dict[str, Any]:
        """Options for the descriptor, without the strategy override."""
        return self.model_dump(exclude={"strategy"})


class LoadOptions(BaseModel):
    """Options for a single ``load_modules`` / ``load_modules_eager`` call."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    resolver_options: ResolverOptions | None = None
    format_name: Callable[[str], str] | None = None
    is_class: Callable[[Any], bool] | None = None

    @property
    def strategy_override(self) -> RegistrationStrategy | None:
        if self.resolver_options is None:
            return None
        return self.resolver_options.strategy

    @classmethod
    def from_config(cls, config: Config) -> LoadOptions:
        """Build options from the ``loader`` section of a Config.

        Recognised keys: ``loader.register``, ``loader.lifetime`` and any
        mapping under ``loader.resolver_options``.
        """
        section = config.get("loader.resolver_options") or {}
        if not isinstance(section, Mapping):
            raise ConfigError(
                message=f"loader.resolver_options must be a mapping, got {type(section).__name__}"
            )
        resolver: dict[str, Any] = dict(section)
        register = config.get("loader.register")
        if register is not None:
            resolver["register"] = register
        lifetime = config.get("loader.lifetime")
        if lifetime is not None:
            resolver["lifetime"] = lifetime
        return coerce_options({"resolver_options": resolver} if resolver else {})


def coerce_options(options: LoadOptions | Mapping[str, Any] | None) -> LoadOptions:
    """Normalise the ``options`` argument of the loader entry points.

    Raises:
        ConfigError: If the options do not validate.
    """
    if options is None:
        return LoadOptions()
    if isinstance(options, LoadOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigError(message=f"Loader options must be a mapping, got {type(options).__name__}")
    try:
        return LoadOptions.model_validate(dict(options))
    except ValidationError as e:
        raise ConfigError(message=f"Invalid loader options: {e}", cause=e) from e


def descriptor_options(options: LoadOptions, artifact: ResolvedArtifact) -> dict[str, Any]:
    """Merge call-wide resolver options with the artifact's own marker options."""
    merged: dict[str, Any] = options.resolver_options.passthrough() if options.resolver_options else {}
    merged.update(artifact.options)
    merged.pop("register", None)
    return merged

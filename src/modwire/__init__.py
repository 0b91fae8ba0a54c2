"""modwire - Convention-based module auto-registration for DI containers."""

from __future__ import annotations

# Loading
from modwire.loading import (
    ArtifactKind,
    Lifetime,
    LoadOptions,
    RegistrationDescriptor,
    RegistrationStrategy,
    ResolvedArtifact,
    ResolverOptions,
    extract_base_name,
    format_name,
    load_modules,
    load_modules_eager,
    select_artifact,
    select_strategy,
)

# Resolver marker
from modwire.provider import TaggedProvider, provider

# Container
from modwire.container import Container, ContainerProtocol

# Config
from modwire.config import Config

# Errors
from modwire.errors import (
    CircularResolutionError,
    ConfigError,
    ConfigNotFoundError,
    ContainerError,
    EagerModeViolationError,
    ErrorCodes,
    InvalidRegistrationError,
    ModwireError,
    RegistrationNotFoundError,
    ResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    # Loading
    "load_modules",
    "load_modules_eager",
    "extract_base_name",
    "format_name",
    "select_artifact",
    "select_strategy",
    "LoadOptions",
    "ResolverOptions",
    # Types
    "ArtifactKind",
    "Lifetime",
    "RegistrationDescriptor",
    "RegistrationStrategy",
    "ResolvedArtifact",
    # Resolver marker
    "TaggedProvider",
    "provider",
    # Container
    "Container",
    "ContainerProtocol",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ModwireError",
    "ConfigError",
    "ConfigNotFoundError",
    "ResolutionError",
    "EagerModeViolationError",
    "ContainerError",
    "InvalidRegistrationError",
    "RegistrationNotFoundError",
    "CircularResolutionError",
]

"""Reference DI container accepted by the loader, plus its protocol."""

from __future__ import annotations

import inspect
import logging
import threading
from typing import Any, Callable, Protocol, runtime_checkable

from modwire.errors import (
    CircularResolutionError,
    InvalidRegistrationError,
    RegistrationNotFoundError,
)
from modwire.loading.types import Lifetime, RegistrationDescriptor

logger = logging.getLogger(__name__)

__all__ = ["ContainerProtocol", "Container"]


@runtime_checkable
class ContainerProtocol(Protocol):
    """What the loader needs from a container. Only ``register`` is called."""

    def register(self, name: str, descriptor: RegistrationDescriptor) -> None: ...

    def has_registration(self, name: str) -> bool: ...

    def resolve(self, name: str) -> Any: ...


class Container:
    """Name-keyed container of registration descriptors.

    Registering an existing name overwrites it. Resolution calls the
    registered class or function, passing registered dependencies for any
    parameter whose name matches a registration. Singletons are built once.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, RegistrationDescriptor] = {}
        self._singletons: dict[str, Any] = {}
        self._lock = threading.RLock()

    # ----- Registration -----

    def register(self, name: str, descriptor: RegistrationDescriptor) -> None:
        """Register ``descriptor`` under ``name``, replacing any previous one.

        Raises:
            InvalidRegistrationError: If name is empty or descriptor is not a
                RegistrationDescriptor around a callable.
        """
        if not name or not isinstance(name, str):
            raise InvalidRegistrationError(message="Registration name must be a non-empty string")
        if not isinstance(descriptor, RegistrationDescriptor):
            raise InvalidRegistrationError(
                message=f"Expected a RegistrationDescriptor for '{name}', got {type(descriptor).__name__}"
            )
        if not callable(descriptor.value):
            raise InvalidRegistrationError(message=f"Registered value for '{name}' is not callable")

        with self._lock:
            if name in self._registrations:
                logger.warning("Overwriting existing registration '%s'", name)
            self._registrations[name] = descriptor
            self._singletons.pop(name, None)

    # ----- Query Methods -----

    def has_registration(self, name: str) -> bool:
        with self._lock:
            return name in self._registrations

    @property
    def registrations(self) -> list[str]:
        """Sorted list of registered names."""
        with self._lock:
            return sorted(self._registrations)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._registrations)

    # ----- Resolution -----

    def resolve(self, name: str) -> Any:
        """Build (or fetch, for singletons) the value registered under ``name``.

        Raises:
            RegistrationNotFoundError: If name is not registered.
            CircularResolutionError: If the registration depends on itself.
        """
        return self._resolve(name, [])

    def _resolve(self, name: str, chain: list[str]) -> Any:
        if name in chain:
            raise CircularResolutionError(chain=[*chain, name])

        with self._lock:
            descriptor = self._registrations.get(name)
            if descriptor is None:
                raise RegistrationNotFoundError(name=name)
            if name in self._singletons:
                return self._singletons[name]

        kwargs = self._dependencies_for(descriptor.value, [*chain, name])
        instance = descriptor.value(**kwargs)

        if descriptor.lifetime is Lifetime.SINGLETON:
            with self._lock:
                instance = self._singletons.setdefault(name, instance)
        return instance

    def _dependencies_for(self, target: Callable[..., Any], chain: list[str]) -> dict[str, Any]:
        try:
            sig = inspect.signature(target)
        except (TypeError, ValueError):
            return {}

        kwargs: dict[str, Any] = {}
        for param_name, param in sig.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.kind == inspect.Parameter.POSITIONAL_ONLY:
                continue
            if self.has_registration(param_name):
                kwargs[param_name] = self._resolve(param_name, chain)
        return kwargs

"""Error hierarchy for the modwire loader and reference container."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ModwireError",
    "ConfigNotFoundError",
    "ConfigError",
    "ResolutionError",
    "EagerModeViolationError",
    "ContainerError",
    "InvalidRegistrationError",
    "RegistrationNotFoundError",
    "CircularResolutionError",
    "ErrorCodes",
]


class ModwireError(Exception):
    """Base error for all modwire errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ModwireError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ModwireError):
    """Raised when loader options or configuration are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ResolutionError(ModwireError):
    """Raised when no registrable artifact can be found in a module."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_RESOLUTION_FAILED",
            message=f'Failed to get name and module from path "{path}"',
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path of the module that could not be resolved."""
        return self.details["path"]


class EagerModeViolationError(ModwireError):
    """Raised by the eager-only loader when a lazy module factory is supplied."""

    def __init__(self, paths: list[str], **kwargs: Any) -> None:
        listed = ", ".join(f'"{p}"' for p in paths)
        super().__init__(
            code="EAGER_MODE_VIOLATION",
            message=(
                f"Lazy module factories are not allowed in eager mode: {listed}. "
                "Pass pre-resolved modules, or use load_modules() to await them."
            ),
            details={"paths": list(paths)},
            **kwargs,
        )

    @property
    def paths(self) -> list[str]:
        """Paths whose sources were lazy factories."""
        return self.details["paths"]


class ContainerError(ModwireError):
    """Base error raised by the reference container."""

    def __init__(self, message: str, code: str = "CONTAINER_ERROR", **kwargs: Any) -> None:
        super().__init__(code=code, message=message, **kwargs)


class InvalidRegistrationError(ContainerError):
    """Raised when a registration name or descriptor is rejected."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, code="INVALID_REGISTRATION", **kwargs)


class RegistrationNotFoundError(ContainerError):
    """Raised when resolving a name that has not been registered."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            message=f"Registration not found: {name}",
            code="REGISTRATION_NOT_FOUND",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The name that could not be resolved."""
        return self.details["name"]


class CircularResolutionError(ContainerError):
    """Raised when resolving a registration requires itself."""

    def __init__(self, chain: list[str], **kwargs: Any) -> None:
        super().__init__(
            message=f"Circular resolution detected: {' -> '.join(chain)}",
            code="CIRCULAR_RESOLUTION",
            details={"chain": chain},
            **kwargs,
        )


class ErrorCodes:
    """All modwire error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_RESOLUTION_FAILED:
            handle_unresolvable(error.path)
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MODULE_RESOLUTION_FAILED = "MODULE_RESOLUTION_FAILED"
    EAGER_MODE_VIOLATION = "EAGER_MODE_VIOLATION"
    CONTAINER_ERROR = "CONTAINER_ERROR"
    INVALID_REGISTRATION = "INVALID_REGISTRATION"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    CIRCULAR_RESOLUTION = "CIRCULAR_RESOLUTION"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

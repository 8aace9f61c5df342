"""Argument guards shared by the public operations."""

from __future__ import annotations

from typing import Any

from treeconf.config import Configuration
from treeconf.errors import InvalidArgumentError

__all__ = ["require_configuration", "require_non_empty", "require_positive"]


def require_configuration(configuration: Any, name: str = "configuration") -> Configuration:
    """Reject ``None`` and objects that do not expose the configuration surface.

    Args:
        configuration: The object passed by the caller.
        name: Argument name used in the error.

    Returns:
        The configuration, unchanged.

    Raises:
        InvalidArgumentError: If the argument is ``None`` or not a configuration.
    """
    if configuration is None:
        raise InvalidArgumentError(name, "must not be None")
    if not isinstance(configuration, Configuration):
        raise InvalidArgumentError(name, f"expected a configuration, got {type(configuration).__name__}")
    return configuration


def require_non_empty(value: Any, name: str) -> str:
    """Reject anything but a non-empty string."""
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(name, "must be a non-empty string")
    return value


def require_positive(value: Any, name: str) -> int:
    """Reject anything but an integer greater than zero."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(name, "must be an integer greater than zero")
    return value

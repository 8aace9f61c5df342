"""Error hierarchy for the treeconf library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "TreeConfError",
    "InvalidArgumentError",
    "ParserRegistrationError",
    "ErrorCodes",
]


class TreeConfError(Exception):
    """Base error for all treeconf errors."""

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


class InvalidArgumentError(TreeConfError):
    """Raised when a caller passes an argument that breaks an operation's contract.

    Covers a missing configuration object, an empty key or file path, and
    a non-positive indent level. Malformed configuration *data* never
    raises; it is reported through a failed ``ParseResult``.
    """

    def __init__(self, argument: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_ARGUMENT",
            message=f"Invalid argument '{argument}': {reason}",
            details={"argument": argument, "reason": reason},
            **kwargs,
        )

    @property
    def argument(self) -> str:
        """The name of the offending argument."""
        return self.details["argument"]

    @property
    def reason(self) -> str:
        """Why the argument was rejected."""
        return self.details["reason"]


class ParserRegistrationError(TreeConfError):
    """Raised when a parser cannot be registered for a type descriptor."""

    def __init__(self, type_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="PARSER_REGISTRATION_ERROR",
            message=f"Cannot register parser for '{type_name}': {reason}",
            details={"type_name": type_name, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All treeconf error codes as constants.

    Instances refuse attribute assignment; the class attributes themselves
    are not protected.

    Example:
        if error.code == ErrorCodes.INVALID_ARGUMENT:
            handle_bad_call()
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    PARSER_REGISTRATION_ERROR = "PARSER_REGISTRATION_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

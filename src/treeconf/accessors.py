"""Typed accessors: read a configuration key as a requested type without raising on bad data.

Every accessor reports malformed or missing data through a
:class:`~treeconf.types.ParseResult` (or by returning the caller's
default); only contract violations such as a ``None`` configuration or an
empty key raise :class:`~treeconf.errors.InvalidArgumentError`.

Note that the generic conversion used for types without a registered
parser cannot tell a configured zero value (for example ``"0"``) from an
absent key; use :func:`probe` when that difference matters.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, TypeVar
from uuid import UUID

from treeconf.config import Configuration, combine_path
from treeconf.errors import InvalidArgumentError
from treeconf.parsers import ParserRegistry, default_registry, type_name
from treeconf.types import (
    Char,
    DateTimeOffset,
    Float32,
    Int32,
    Int64,
    ParseResult,
    ProbeResult,
    UInt8,
    UInt32,
    UInt64,
)
from treeconf.utils.guard import require_configuration, require_non_empty

__all__ = [
    "try_get_as",
    "get_as",
    "try_get_as_list",
    "probe",
    "try_get_as_bool",
    "try_get_as_char",
    "try_get_as_timedelta",
    "try_get_as_datetime",
    "try_get_as_datetime_offset",
    "try_get_as_date",
    "try_get_as_time",
    "try_get_as_int",
    "try_get_as_uint",
    "try_get_as_long",
    "try_get_as_ulong",
    "try_get_as_byte",
    "try_get_as_float",
    "try_get_as_double",
    "try_get_as_decimal",
    "try_get_as_uuid",
    "get_as_bool",
    "get_as_char",
    "get_as_timedelta",
    "get_as_datetime",
    "get_as_datetime_offset",
    "get_as_date",
    "get_as_time",
    "get_as_int",
    "get_as_uint",
    "get_as_long",
    "get_as_ulong",
    "get_as_byte",
    "get_as_float",
    "get_as_double",
    "get_as_decimal",
    "get_as_uuid",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def try_get_as(
    configuration: Configuration,
    key: str,
    type_: Any = str,
    registry: ParserRegistry | None = None,
) -> ParseResult[Any]:
    """Read ``key`` and parse it as ``type_``.

    Args:
        configuration: The tree (or section) to read from.
        key: ``:``-delimited path relative to ``configuration``.
        type_: Requested type descriptor, e.g. ``int``, ``Int32``, ``UUID``,
            an ``Enum`` subclass, or any type pydantic can validate.
        registry: Parse table to use; defaults to ``default_registry``.

    Returns:
        ``ParseResult(True, value)`` when a non-empty value exists and
        parses, otherwise ``ParseResult(False, zero_value)``.

    Raises:
        InvalidArgumentError: If ``configuration`` is missing or ``key`` is empty.
    """
    require_configuration(configuration)
    require_non_empty(key, "key")
    registry = registry if registry is not None else default_registry
    return registry.parse(type_, configuration.get(key))


def get_as(
    configuration: Configuration,
    key: str,
    default: T,
    type_: Any = None,
    registry: ParserRegistry | None = None,
) -> T:
    """Read ``key`` as ``type_``, returning ``default`` unchanged when it is missing or malformed.

    When ``type_`` is omitted it is taken from ``type(default)``.
    """
    require_configuration(configuration)
    require_non_empty(key, "key")
    if type_ is None:
        if default is None:
            raise InvalidArgumentError("type_", "required when default is None")
        type_ = type(default)

    found, value = try_get_as(configuration, key, type_, registry)
    return value if found else default


def try_get_as_list(
    configuration: Configuration,
    key: str,
    type_: Any = str,
    registry: ParserRegistry | None = None,
) -> ParseResult[list[Any]]:
    """Read the array at ``key`` (``key:0``, ``key:1``, ...) as a list of ``type_``.

    Reading stops at the first index that is missing or does not parse,
    so the result is the contiguous prefix that parsed. An array whose
    index 0 is missing yields nothing even if later indices exist.
    """
    require_configuration(configuration)
    require_non_empty(key, "key")

    values: list[Any] = []
    index = 0
    while True:
        found, item = try_get_as(configuration, combine_path(key, str(index)), type_, registry)
        if not found:
            break
        values.append(item)
        index += 1

    if values and configuration.get(combine_path(key, str(index))) is not None:
        logger.debug(f"Stopped reading '{key}' at index {index}: not a valid {type_name(type_)}")
    return ParseResult(bool(values), values)


def probe(
    configuration: Configuration,
    key: str,
    type_: Any = str,
    registry: ParserRegistry | None = None,
) -> ProbeResult[Any]:
    """Report presence and parse success for ``key`` separately.

    Unlike :func:`try_get_as`, a value that converts to the type's zero
    value counts as parsed.
    """
    require_configuration(configuration)
    require_non_empty(key, "key")
    registry = registry if registry is not None else default_registry

    raw = configuration.get(key)
    found, value = registry.parse(type_, raw, reject_zero=False)
    return ProbeResult(present=bool(raw), parsed=found, value=value)


# === Per-type shortcuts ===


def try_get_as_bool(configuration: Configuration, key: str) -> ParseResult[bool]:
    return try_get_as(configuration, key, bool)


def try_get_as_char(configuration: Configuration, key: str) -> ParseResult[str]:
    """Succeeds only when the value is exactly one character."""
    return try_get_as(configuration, key, Char)


def try_get_as_timedelta(configuration: Configuration, key: str) -> ParseResult[timedelta]:
    return try_get_as(configuration, key, timedelta)


def try_get_as_datetime(configuration: Configuration, key: str) -> ParseResult[datetime]:
    return try_get_as(configuration, key, datetime)


def try_get_as_datetime_offset(configuration: Configuration, key: str) -> ParseResult[datetime]:
    """Like :func:`try_get_as_datetime` but the literal must carry a UTC offset."""
    return try_get_as(configuration, key, DateTimeOffset)


def try_get_as_date(configuration: Configuration, key: str) -> ParseResult[date]:
    return try_get_as(configuration, key, date)


def try_get_as_time(configuration: Configuration, key: str) -> ParseResult[time]:
    return try_get_as(configuration, key, time)


def try_get_as_int(configuration: Configuration, key: str) -> ParseResult[int]:
    """Signed 32-bit integer."""
    return try_get_as(configuration, key, Int32)


def try_get_as_uint(configuration: Configuration, key: str) -> ParseResult[int]:
    """Unsigned 32-bit integer."""
    return try_get_as(configuration, key, UInt32)


def try_get_as_long(configuration: Configuration, key: str) -> ParseResult[int]:
    """Signed 64-bit integer."""
    return try_get_as(configuration, key, Int64)


def try_get_as_ulong(configuration: Configuration, key: str) -> ParseResult[int]:
    """Unsigned 64-bit integer."""
    return try_get_as(configuration, key, UInt64)


def try_get_as_byte(configuration: Configuration, key: str) -> ParseResult[int]:
    """Unsigned 8-bit integer."""
    return try_get_as(configuration, key, UInt8)


def try_get_as_float(configuration: Configuration, key: str) -> ParseResult[float]:
    """Single-precision float; values beyond its range fail."""
    return try_get_as(configuration, key, Float32)


def try_get_as_double(configuration: Configuration, key: str) -> ParseResult[float]:
    return try_get_as(configuration, key, float)


def try_get_as_decimal(configuration: Configuration, key: str) -> ParseResult[Decimal]:
    return try_get_as(configuration, key, Decimal)


def try_get_as_uuid(configuration: Configuration, key: str) -> ParseResult[UUID]:
    return try_get_as(configuration, key, UUID)


def get_as_bool(configuration: Configuration, key: str, default: bool) -> bool:
    return get_as(configuration, key, default, bool)


def get_as_char(configuration: Configuration, key: str, default: str) -> str:
    return get_as(configuration, key, default, Char)


def get_as_timedelta(configuration: Configuration, key: str, default: timedelta) -> timedelta:
    return get_as(configuration, key, default, timedelta)


def get_as_datetime(configuration: Configuration, key: str, default: datetime) -> datetime:
    return get_as(configuration, key, default, datetime)


def get_as_datetime_offset(configuration: Configuration, key: str, default: datetime) -> datetime:
    return get_as(configuration, key, default, DateTimeOffset)


def get_as_date(configuration: Configuration, key: str, default: date) -> date:
    return get_as(configuration, key, default, date)


def get_as_time(configuration: Configuration, key: str, default: time) -> time:
    return get_as(configuration, key, default, time)


def get_as_int(configuration: Configuration, key: str, default: int) -> int:
    return get_as(configuration, key, default, Int32)


def get_as_uint(configuration: Configuration, key: str, default: int) -> int:
    return get_as(configuration, key, default, UInt32)


def get_as_long(configuration: Configuration, key: str, default: int) -> int:
    return get_as(configuration, key, default, Int64)


def get_as_ulong(configuration: Configuration, key: str, default: int) -> int:
    return get_as(configuration, key, default, UInt64)


def get_as_byte(configuration: Configuration, key: str, default: int) -> int:
    return get_as(configuration, key, default, UInt8)


def get_as_float(configuration: Configuration, key: str, default: float) -> float:
    return get_as(configuration, key, default, Float32)


def get_as_double(configuration: Configuration, key: str, default: float) -> float:
    return get_as(configuration, key, default, float)


def get_as_decimal(configuration: Configuration, key: str, default: Decimal) -> Decimal:
    return get_as(configuration, key, default, Decimal)


def get_as_uuid(configuration: Configuration, key: str, default: UUID) -> UUID:
    return get_as(configuration, key, default, UUID)

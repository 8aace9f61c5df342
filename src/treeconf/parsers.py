"""ParserRegistry -- maps a requested type to the rule that parses a raw setting."""

from __future__ import annotations

import functools
import logging
import re
import threading
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable
from uuid import UUID

from pydantic import TypeAdapter

from treeconf.errors import ParserRegistrationError
from treeconf.types import (
    Char,
    DateTimeOffset,
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    ParseResult,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = ["Parser", "ParserRegistry", "default_registry", "type_name"]

logger = logging.getLogger(__name__)

Parser = Callable[[str], Any]

# Everything a parser may raise for malformed input. pydantic's
# ValidationError is a ValueError; schema generation errors are TypeErrors.
_PARSE_ERRORS = (ValueError, TypeError, ArithmeticError)

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*\Z")
_NUMBER = re.compile(r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:inf|infinity|nan))\s*\Z")
# Bare numbers would otherwise be read by pydantic as Unix timestamps.
_NUMERIC_ONLY = re.compile(r"\s*[+-]?[0-9]*\.?[0-9]+\s*\Z")
_ISO_DURATION = re.compile(r"\s*[+-]?P", re.IGNORECASE)
_DAYS_ONLY = re.compile(r"\s*(?P<sign>-)?(?P<days>[0-9]+)\s*\Z")
_CLOCK = re.compile(
    r"\s*(?P<sign>-)?(?:(?P<days>[0-9]+)\.)?(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{1,2})"
    r"(?::(?P<seconds>[0-9]{1,2})(?:\.(?P<fraction>[0-9]{1,7}))?)?\s*\Z"
)


def type_name(type_: Any) -> str:
    """Readable name of a type descriptor for messages."""
    return getattr(type_, "__name__", None) or repr(type_)


@dataclass(frozen=True)
class _Entry:
    parser: Parser
    zero_value: Any
    rejects_zero: bool = False


# === Built-in parse rules ===


def _parse_str(raw: str) -> str:
    if not raw:
        raise ValueError("empty string")
    return raw


def _parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"'{raw}' is not a boolean literal")


def _parse_int(raw: str) -> int:
    if not _INTEGER.match(raw):
        raise ValueError(f"'{raw}' is not a base-10 integer")
    return int(raw)


def _bounded_int(width: Any) -> Parser:
    adapter = TypeAdapter(width)

    def parse(raw: str) -> int:
        return adapter.validate_python(_parse_int(raw))

    return parse


def _parse_timedelta(raw: str) -> timedelta:
    """Parse ``[-]d``, ``[-][d.]hh:mm[:ss[.fffffff]]``, or an ISO-8601 duration."""
    match = _DAYS_ONLY.match(raw)
    if match:
        days = timedelta(days=int(match["days"]))
        return -days if match["sign"] else days

    match = _CLOCK.match(raw)
    if match is None:
        if not _ISO_DURATION.match(raw):
            raise ValueError(f"'{raw}' is not a duration literal")
        return _TIMEDELTA.validate_python(raw.strip())

    hours, minutes = int(match["hours"]), int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"'{raw}' has a component out of range")
    # Fractions are in ticks of 100ns; timedelta stops at microseconds.
    ticks = int((match["fraction"] or "").ljust(7, "0"))
    value = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=ticks // 10,
    )
    return -value if match["sign"] else value


def _enum_entry(enum_type: type[Enum]) -> _Entry:
    def parse(raw: str) -> Enum:
        try:
            return enum_type.__members__[raw]
        except KeyError:
            raise ValueError(f"'{raw}' is not a member of {enum_type.__name__}") from None

    return _Entry(parser=parse, zero_value=None)


_TIMEDELTA: TypeAdapter[timedelta] = TypeAdapter(timedelta)


@functools.lru_cache(maxsize=256)
def _cached_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _adapter_for(type_: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(type_)
    except TypeError:
        # Unhashable descriptor, or pydantic cannot build a schema for it.
        # The second case raises again here and is reported as a parse failure.
        return TypeAdapter(type_)


def _zero_value_of(type_: Any) -> Any:
    if isinstance(type_, type):
        try:
            return type_()
        except (TypeError, ValueError):
            return None
    return None


def _fallback_entry(type_: Any) -> _Entry:
    def parse(raw: str) -> Any:
        return _adapter_for(type_).validate_python(raw)

    return _Entry(parser=parse, zero_value=_zero_value_of(type_), rejects_zero=True)


def _validator(type_: Any) -> Parser:
    return TypeAdapter(type_).validate_python


def _numeric_validator(type_: Any) -> Parser:
    """Accept only ASCII decimal or scientific literals before pydantic sees them."""
    validate = TypeAdapter(type_).validate_python

    def parse(raw: str) -> Any:
        if not _NUMBER.match(raw):
            raise ValueError(f"'{raw}' is not a decimal literal")
        return validate(raw.strip())

    return parse


def _temporal_validator(type_: Any) -> Parser:
    """Reject bare numbers so only ISO-8601 text reaches pydantic."""
    validate = TypeAdapter(type_).validate_python

    def parse(raw: str) -> Any:
        if _NUMERIC_ONLY.match(raw):
            raise ValueError(f"'{raw}' is not an ISO-8601 literal")
        return validate(raw)

    return parse


def _default_entries() -> dict[Any, _Entry]:
    entries: dict[Any, _Entry] = {
        str: _Entry(_parse_str, ""),
        bool: _Entry(_parse_bool, False),
        int: _Entry(_parse_int, 0),
        float: _Entry(_numeric_validator(float), 0.0),
        Float32: _Entry(_numeric_validator(Float32), 0.0),
        Decimal: _Entry(_numeric_validator(Decimal), Decimal(0)),
        datetime: _Entry(_temporal_validator(datetime), datetime.min),
        DateTimeOffset: _Entry(_temporal_validator(DateTimeOffset), datetime.min.replace(tzinfo=timezone.utc)),
        date: _Entry(_temporal_validator(date), date.min),
        time: _Entry(_temporal_validator(time), time()),
        timedelta: _Entry(_parse_timedelta, timedelta(0)),
        Char: _Entry(_validator(Char), "\x00"),
        UUID: _Entry(_validator(UUID), UUID(int=0)),
    }
    for width in (Int8, UInt8, Int16, UInt16, Int32, UInt32, Int64, UInt64):
        entries[width] = _Entry(_bounded_int(width), 0)
    return entries


class ParserRegistry:
    """Registry of per-type parse rules used by the typed accessors.

    Lookup order for a requested type: an exactly registered descriptor,
    then any ``Enum`` subclass (matched by member name), then a generic
    pydantic conversion of the raw string. The generic conversion treats
    a result equal to the type's zero value as a failure.

    Example::

        registry = ParserRegistry()
        registry.register(Path, Path, zero_value=None)
        registry.parse(Path, "/var/log")   # ParseResult(found=True, value=PosixPath('/var/log'))
    """

    def __init__(self, include_defaults: bool = True) -> None:
        self._entries: dict[Any, _Entry] = _default_entries() if include_defaults else {}
        self._lock = threading.RLock()

    def register(self, type_: Any, parser: Parser, zero_value: Any = None) -> None:
        """Add or replace the parser for ``type_``.

        Args:
            type_: Type descriptor callers will request.
            parser: Callable taking the raw string. It must raise ``ValueError``,
                ``TypeError`` or ``ArithmeticError`` for malformed input.
            zero_value: Value reported alongside a failed lookup.

        Raises:
            ParserRegistrationError: If the parser is not callable or the
                descriptor cannot be used as a registry key.
        """
        name = type_name(type_)
        if not callable(parser):
            raise ParserRegistrationError(name, "parser is not callable")
        try:
            hash(type_)
        except TypeError as e:
            raise ParserRegistrationError(name, "type descriptor is not hashable", cause=e) from e

        with self._lock:
            if type_ in self._entries:
                logger.warning(f"Replacing parser registered for '{name}'")
            self._entries[type_] = _Entry(parser=parser, zero_value=zero_value)

    def unregister(self, type_: Any) -> bool:
        """Remove the parser for ``type_``. Returns True if one was registered."""
        with self._lock:
            return self._entries.pop(type_, None) is not None

    def __contains__(self, type_: object) -> bool:
        try:
            return type_ in self._entries
        except TypeError:
            return False

    def _resolve(self, type_: Any) -> _Entry:
        try:
            entry = self._entries.get(type_)
        except TypeError:
            entry = None
        if entry is not None:
            return entry
        if isinstance(type_, type) and issubclass(type_, Enum):
            return _enum_entry(type_)
        return _fallback_entry(type_)

    def zero_value(self, type_: Any) -> Any:
        """The value reported for ``type_`` when a lookup fails."""
        return self._resolve(type_).zero_value

    def parse(self, type_: Any, raw: str | None, reject_zero: bool = True) -> ParseResult[Any]:
        """Parse ``raw`` as ``type_`` without raising for malformed input.

        Args:
            type_: The requested type descriptor.
            raw: The raw setting. ``None`` and ``""`` always fail.
            reject_zero: Whether the generic conversion counts a zero result
                as a failure. Registered parsers ignore this flag.

        Returns:
            ``ParseResult(True, value)`` on success, otherwise
            ``ParseResult(False, zero_value)``.
        """
        entry = self._resolve(type_)
        if not raw:
            return ParseResult(False, entry.zero_value)

        try:
            value = entry.parser(raw)
        except _PARSE_ERRORS as e:
            logger.debug(f"Cannot parse {raw!r} as {type_name(type_)}: {e}")
            return ParseResult(False, entry.zero_value)

        if entry.rejects_zero and reject_zero and value == entry.zero_value:
            logger.debug(f"Converted {raw!r} to the zero value of {type_name(type_)}; reporting not found")
            return ParseResult(False, entry.zero_value)
        return ParseResult(True, value)


default_registry = ParserRegistry()

"""Result containers and type descriptors for typed configuration lookups."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Iterator, TypeVar

from annotated_types import Interval
from pydantic import AfterValidator, AwareDatetime, StringConstraints

__all__ = [
    "ParseResult",
    "ProbeResult",
    "Int8",
    "UInt8",
    "Byte",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "Char",
    "DateTimeOffset",
]

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a typed lookup.

    ``found`` is False when the key is absent, the value is empty, or the
    value does not parse; ``value`` then holds the type's zero value.
    Unpacks as ``found, value`` and is truthy only when ``found``.
    """

    found: bool
    value: T

    def __iter__(self) -> Iterator[Any]:
        yield self.found
        yield self.value

    def __bool__(self) -> bool:
        return self.found


@dataclass(frozen=True)
class ProbeResult(Generic[T]):
    """Outcome of :func:`treeconf.accessors.probe`.

    Separates "a non-empty value exists at the key" from "that value
    parsed", so a configured zero is distinguishable from an absent key.
    """

    present: bool
    parsed: bool
    value: T


def _single_precision(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as e:
        raise ValueError("value is out of range for single precision") from e


Int8 = Annotated[int, Interval(ge=-(2**7), le=2**7 - 1)]
UInt8 = Annotated[int, Interval(ge=0, le=2**8 - 1)]
Byte = UInt8
Int16 = Annotated[int, Interval(ge=-(2**15), le=2**15 - 1)]
UInt16 = Annotated[int, Interval(ge=0, le=2**16 - 1)]
Int32 = Annotated[int, Interval(ge=-(2**31), le=2**31 - 1)]
UInt32 = Annotated[int, Interval(ge=0, le=2**32 - 1)]
Int64 = Annotated[int, Interval(ge=-(2**63), le=2**63 - 1)]
UInt64 = Annotated[int, Interval(ge=0, le=2**64 - 1)]

Float32 = Annotated[float, AfterValidator(_single_precision)]

Char = Annotated[str, StringConstraints(min_length=1, max_length=1)]

# Offset-aware date/time; naive literals are rejected.
DateTimeOffset = AwareDatetime

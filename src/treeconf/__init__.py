"""treeconf - typed access, navigation, and JSON export for hierarchical configuration."""

from __future__ import annotations

# Tree
from treeconf.config import (
    KEY_DELIMITER,
    Configuration,
    ConfigurationRoot,
    ConfigurationSection,
    combine_path,
)

# Types
from treeconf.types import (
    Byte,
    Char,
    DateTimeOffset,
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    ParseResult,
    ProbeResult,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

# Parsers
from treeconf.parsers import Parser, ParserRegistry, default_registry

# Typed accessors
from treeconf.accessors import (
    get_as,
    get_as_bool,
    get_as_byte,
    get_as_char,
    get_as_date,
    get_as_datetime,
    get_as_datetime_offset,
    get_as_decimal,
    get_as_double,
    get_as_float,
    get_as_int,
    get_as_long,
    get_as_time,
    get_as_timedelta,
    get_as_uint,
    get_as_ulong,
    get_as_uuid,
    probe,
    try_get_as,
    try_get_as_bool,
    try_get_as_byte,
    try_get_as_char,
    try_get_as_date,
    try_get_as_datetime,
    try_get_as_datetime_offset,
    try_get_as_decimal,
    try_get_as_double,
    try_get_as_float,
    try_get_as_int,
    try_get_as_list,
    try_get_as_long,
    try_get_as_time,
    try_get_as_timedelta,
    try_get_as_uint,
    try_get_as_ulong,
    try_get_as_uuid,
)

# Navigation
from treeconf.navigation import (
    field_is_array,
    field_is_missing,
    get_parent_section,
    get_path,
    get_root,
    get_value,
    has_children,
)

# Export
from treeconf.export import to_json, write_as_json, write_as_json_async

# Errors
from treeconf.errors import (
    ErrorCodes,
    InvalidArgumentError,
    ParserRegistrationError,
    TreeConfError,
)

__version__ = "0.1.0"

__all__ = [
    # Tree
    "KEY_DELIMITER",
    "Configuration",
    "ConfigurationRoot",
    "ConfigurationSection",
    "combine_path",
    # Types
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
    # Parsers
    "Parser",
    "ParserRegistry",
    "default_registry",
    # Typed accessors
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
    # Navigation
    "field_is_missing",
    "field_is_array",
    "has_children",
    "get_parent_section",
    "get_root",
    "get_path",
    "get_value",
    # Export
    "to_json",
    "write_as_json",
    "write_as_json_async",
    # Errors
    "ErrorCodes",
    "TreeConfError",
    "InvalidArgumentError",
    "ParserRegistrationError",
]

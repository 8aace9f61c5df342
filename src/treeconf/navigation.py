"""Shape queries and navigation over a configuration tree."""

from __future__ import annotations

from treeconf.config import KEY_DELIMITER, Configuration, combine_path
from treeconf.utils.guard import require_configuration, require_non_empty

__all__ = [
    "field_is_missing",
    "field_is_array",
    "has_children",
    "get_parent_section",
    "get_root",
    "get_path",
    "get_value",
]


def field_is_missing(configuration: Configuration, key: str) -> bool:
    """True if neither a scalar at ``key`` nor an array element ``key:0`` exists.

    A section that only holds named children has no scalar and no ``0``
    element, so it counts as missing too.
    """
    require_configuration(configuration)
    require_non_empty(key, "key")
    return configuration.get(key) is None and configuration.get(combine_path(key, "0")) is None


def field_is_array(configuration: Configuration, key: str) -> bool:
    """True if ``key:0`` holds a value."""
    require_configuration(configuration)
    require_non_empty(key, "key")
    return configuration.get(combine_path(key, "0")) is not None


def has_children(configuration: Configuration) -> bool:
    require_configuration(configuration)
    return len(configuration.get_children()) > 0


def get_parent_section(configuration: Configuration) -> Configuration | None:
    """Return the node one level up; the root for top-level sections, ``None`` for the root.

    A top-level section reports the root as its parent, never itself. Callers
    that walk upward stop when this returns ``None``.
    """
    require_configuration(configuration)
    return configuration.parent


def get_root(configuration: Configuration) -> Configuration:
    require_configuration(configuration)
    return configuration.root


def get_path(configuration: Configuration) -> str:
    """Full path of the node without a trailing delimiter; ``""`` for the root."""
    require_configuration(configuration)
    return configuration.path.rstrip(KEY_DELIMITER)


def get_value(configuration: Configuration) -> str:
    """The node's own scalar value, or ``""`` when it has none."""
    require_configuration(configuration)
    return configuration.value or ""

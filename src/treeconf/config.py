"""In-memory hierarchical configuration tree with ``:``-delimited key paths."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from treeconf.errors import InvalidArgumentError

__all__ = [
    "KEY_DELIMITER",
    "Configuration",
    "ConfigurationRoot",
    "ConfigurationSection",
    "combine_path",
    "get_section_key",
    "get_parent_path",
]

KEY_DELIMITER = ":"


def combine_path(*segments: str) -> str:
    """Join path segments with the key delimiter, skipping empty ones."""
    return KEY_DELIMITER.join(s for s in segments if s)


def get_section_key(path: str) -> str:
    """Return the last segment of a path."""
    if not path:
        return path
    return path.rsplit(KEY_DELIMITER, 1)[-1]


def get_parent_path(path: str) -> str | None:
    """Return the path one level up, ``""`` for a top-level path, ``None`` for the root."""
    if not path:
        return None
    if KEY_DELIMITER not in path:
        return ""
    return path.rsplit(KEY_DELIMITER, 1)[0]


@runtime_checkable
class Configuration(Protocol):
    """The read surface every configuration node exposes.

    Both :class:`ConfigurationRoot` and :class:`ConfigurationSection`
    satisfy it; any other tree implementing these members can be passed
    to the treeconf functions as well.
    """

    @property
    def path(self) -> str: ...

    @property
    def value(self) -> str | None: ...

    @property
    def root(self) -> Configuration: ...

    @property
    def parent(self) -> Configuration | None: ...

    def get(self, key: str) -> str | None: ...

    def __getitem__(self, key: str) -> str | None: ...

    def get_section(self, key: str) -> ConfigurationSection: ...

    def get_children(self) -> list[ConfigurationSection]: ...


def _render(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigurationRoot:
    """Root of a configuration tree.

    Nested mappings become sections, lists and tuples become sections
    whose children are named ``0``, ``1``, ...; scalars are stored as
    strings. Every value lives in one flat ``path -> value`` table, so
    sections are cheap views over it.

    Example::

        root = ConfigurationRoot({"db": {"host": "x", "ports": [5432, 5433]}})
        root["db:host"]        # 'x'
        root["db:ports:1"]     # '5433'
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, str | None] = {}
        self._lock = threading.RLock()
        if data:
            self._flatten("", data)

    def _flatten(self, prefix: str, data: Any) -> None:
        if isinstance(data, Mapping):
            items = [(str(k), v) for k, v in data.items()]
        elif isinstance(data, (list, tuple)):
            items = [(str(i), v) for i, v in enumerate(data)]
        else:
            self._values[prefix] = _render(data)
            return
        if not items and prefix:
            # Keep empty containers visible as childless sections.
            self._values[prefix] = None
        for key, child in items:
            if not key:
                raise InvalidArgumentError("data", f"empty key under '{prefix or '<root>'}'")
            self._flatten(combine_path(prefix, key), child)

    @property
    def path(self) -> str:
        return ""

    @property
    def value(self) -> str | None:
        return None

    @property
    def root(self) -> ConfigurationRoot:
        return self

    @property
    def parent(self) -> None:
        return None

    def get(self, key: str) -> str | None:
        """Return the scalar stored at ``key``, or ``None`` when absent."""
        return self._values.get(key)

    def __getitem__(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a single scalar at ``key``; ``None`` clears the value but keeps the key."""
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("key", "must be a non-empty string")
        with self._lock:
            self._values[key] = _render(value)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get_section(self, key: str) -> ConfigurationSection:
        """Return the section at ``key``; missing paths yield an empty section."""
        return ConfigurationSection(self, key)

    def get_children(self) -> list[ConfigurationSection]:
        return self._children_of("")

    def _children_of(self, path: str) -> list[ConfigurationSection]:
        prefix = path + KEY_DELIMITER if path else ""
        with self._lock:
            keys = list(self._values)
        seen: dict[str, None] = {}
        for full_key in keys:
            if not full_key.startswith(prefix) or full_key == path:
                continue
            segment = full_key[len(prefix):].split(KEY_DELIMITER, 1)[0]
            seen.setdefault(segment, None)
        return [ConfigurationSection(self, combine_path(path, segment)) for segment in seen]

    def __repr__(self) -> str:
        return f"ConfigurationRoot(entries={len(self._values)})"


class ConfigurationSection:
    """A view of one node of a :class:`ConfigurationRoot`."""

    def __init__(self, root: ConfigurationRoot, path: str) -> None:
        self._root = root
        self._path = path

    @property
    def key(self) -> str:
        """The last segment of this section's path."""
        return get_section_key(self._path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def value(self) -> str | None:
        return self._root.get(self._path)

    @property
    def root(self) -> ConfigurationRoot:
        return self._root

    @property
    def parent(self) -> ConfigurationSection | ConfigurationRoot:
        parent_path = get_parent_path(self._path)
        if not parent_path:
            return self._root
        return ConfigurationSection(self._root, parent_path)

    def get(self, key: str) -> str | None:
        return self._root.get(combine_path(self._path, key))

    def __getitem__(self, key: str) -> str | None:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._root.set(combine_path(self._path, key), value)

    def get_section(self, key: str) -> ConfigurationSection:
        return ConfigurationSection(self._root, combine_path(self._path, key))

    def get_children(self) -> list[ConfigurationSection]:
        return self._root._children_of(self._path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationSection):
            return NotImplemented
        return self._root is other._root and self._path == other._path

    def __hash__(self) -> int:
        return hash((id(self._root), self._path))

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self._path!r}, value={self.value!r})"

"""JSON export of a configuration tree."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from treeconf.config import Configuration
from treeconf.utils.guard import require_configuration, require_non_empty, require_positive

__all__ = ["to_json", "write_as_json", "write_as_json_async"]

logger = logging.getLogger(__name__)


def _to_mapping(configuration: Configuration) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for child in configuration.get_children():
        if child.get_children():
            data[child.key] = _to_mapping(child)
        else:
            data[child.key] = child.value or ""
    return data


def to_json(configuration: Configuration, indent_level: int = 1) -> str:
    """Render the tree below ``configuration`` as a tab-indented JSON object.

    Sections become nested objects and every leaf becomes a string,
    whatever it would parse as. Arrays stay objects keyed ``"0"``,
    ``"1"``, ... because that is how the tree stores them.

    Args:
        configuration: Root or section to render.
        indent_level: Nesting depth the object starts at. Every line after
            the first is shifted right by ``indent_level - 1`` tabs so the
            text can be embedded at that depth.

    Returns:
        The JSON text.

    Raises:
        InvalidArgumentError: If ``configuration`` is missing or
            ``indent_level`` is not positive.
    """
    require_configuration(configuration)
    require_positive(indent_level, "indent_level")

    text = json.dumps(_to_mapping(configuration), indent="\t", ensure_ascii=False)
    if indent_level == 1:
        return text
    pad = "\t" * (indent_level - 1)
    first, *rest = text.split("\n")
    return "\n".join([first, *(pad + line for line in rest)])


def write_as_json(configuration: Configuration, file_path: str | Path) -> None:
    """Write :func:`to_json` output to ``file_path``, replacing any existing file."""
    require_configuration(configuration)
    require_non_empty(str(file_path) if isinstance(file_path, Path) else file_path, "file_path")

    text = to_json(configuration)
    Path(file_path).write_text(text, encoding="utf-8")
    logger.info(f"Wrote configuration JSON to {file_path}")


async def write_as_json_async(configuration: Configuration, file_path: str | Path) -> None:
    """Async variant of :func:`write_as_json`; the file write runs in a worker thread."""
    require_configuration(configuration)
    require_non_empty(str(file_path) if isinstance(file_path, Path) else file_path, "file_path")

    await asyncio.to_thread(write_as_json, configuration, file_path)

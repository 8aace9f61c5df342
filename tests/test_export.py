"""Tests for JSON export."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from treeconf.config import ConfigurationRoot
from treeconf.errors import InvalidArgumentError
from treeconf.export import to_json, write_as_json, write_as_json_async


@pytest.fixture
def db_tree() -> ConfigurationRoot:
    return ConfigurationRoot({"db": {"host": "x", "port": 5}})


class TestToJson:
    def test_nested_object_with_string_leaves(self, db_tree: ConfigurationRoot) -> None:
        assert json.loads(to_json(db_tree)) == {"db": {"host": "x", "port": "5"}}

    def test_tab_indentation(self, db_tree: ConfigurationRoot) -> None:
        lines = to_json(db_tree).split("\n")
        assert lines[0] == "{"
        assert lines[1] == '\t"db": {'
        assert lines[2] == '\t\t"host": "x",'
        assert lines[-1] == "}"

    def test_indent_level_shifts_following_lines(self, db_tree: ConfigurationRoot) -> None:
        lines = to_json(db_tree, indent_level=3).split("\n")
        assert lines[0] == "{"
        assert lines[1] == '\t\t\t"db": {'
        assert lines[-1] == "\t\t}"

    def test_arrays_render_as_indexed_objects(self) -> None:
        root = ConfigurationRoot({"ports": [80, 443]})
        assert json.loads(to_json(root)) == {"ports": {"0": "80", "1": "443"}}

    def test_absent_leaf_renders_empty_string(self) -> None:
        root = ConfigurationRoot({"a": None, "b": {}})
        assert json.loads(to_json(root)) == {"a": "", "b": ""}

    def test_section_renders_its_subtree(self, db_tree: ConfigurationRoot) -> None:
        assert json.loads(to_json(db_tree.get_section("db"))) == {"host": "x", "port": "5"}

    def test_empty_tree(self) -> None:
        assert to_json(ConfigurationRoot()) == "{}"

    def test_escaping(self) -> None:
        root = ConfigurationRoot({"msg": 'say "hi"\n'})
        assert json.loads(to_json(root)) == {"msg": 'say "hi"\n'}

    @pytest.mark.parametrize("level", [0, -1])
    def test_non_positive_indent_rejected(self, db_tree: ConfigurationRoot, level: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_json(db_tree, indent_level=level)
        assert exc_info.value.argument == "indent_level"


class TestWriteAsJson:
    def test_writes_file(self, db_tree: ConfigurationRoot, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        write_as_json(db_tree, str(target))
        assert json.loads(target.read_text(encoding="utf-8")) == {"db": {"host": "x", "port": "5"}}

    def test_overwrites_existing_file(self, db_tree: ConfigurationRoot, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        target.write_text("old contents that are much longer than the new ones" * 10)
        write_as_json(db_tree, target)
        assert target.read_text(encoding="utf-8") == to_json(db_tree)

    def test_empty_path_rejected(self, db_tree: ConfigurationRoot) -> None:
        with pytest.raises(InvalidArgumentError):
            write_as_json(db_tree, "")

    def test_missing_directory_propagates(self, db_tree: ConfigurationRoot, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_as_json(db_tree, tmp_path / "missing" / "settings.json")

    @pytest.mark.asyncio
    async def test_async_writes_file(self, db_tree: ConfigurationRoot, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        await write_as_json_async(db_tree, target)
        assert target.read_text(encoding="utf-8") == to_json(db_tree)

    @pytest.mark.asyncio
    async def test_async_rejects_missing_configuration(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidArgumentError):
            await write_as_json_async(None, tmp_path / "x.json")  # type: ignore[arg-type]

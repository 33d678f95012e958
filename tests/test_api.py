"""Unit tests for the public API: parse, to_plain, to_text, find_by_id, move."""

from __future__ import annotations

import json

import pytest

from json_tree_model import (
    InputError,
    NodeType,
    TreeConfig,
    TreeNode,
    find_by_id,
    move,
    parse,
    to_plain,
    to_text,
)


class TestParse:
    def test_returns_root_node(self) -> None:
        root = parse('{"a": 1}')
        assert isinstance(root, TreeNode)
        assert root.type == NodeType.OBJECT
        assert root.key == "root"

    def test_config_passthrough(self) -> None:
        assert parse("[]", config=TreeConfig(root_key="doc")).key == "doc"

    def test_rejections(self) -> None:
        with pytest.raises(InputError):
            parse("")
        with pytest.raises(InputError):
            parse("   ")
        with pytest.raises(json.JSONDecodeError):
            parse("{name:}")


class TestSerialize:
    def test_to_plain(self) -> None:
        assert to_plain(parse('{"a": [1, true, null]}')) == {"a": [1, True, None]}

    def test_to_text_default_indent(self) -> None:
        assert to_text(parse('{"a": 1}')) == '{\n  "a": 1\n}'

    def test_to_text_indent_from_config(self) -> None:
        text = to_text(parse('{"a": 1}'), config=TreeConfig(indent=4))
        assert text == '{\n    "a": 1\n}'

    def test_to_text_compact_config(self) -> None:
        assert to_text(parse('{"a": 1}'), config=TreeConfig(indent=None)) == '{"a": 1}'

    def test_to_text_explicit_indent_wins(self) -> None:
        root = parse('{"a": 1}')
        assert to_text(root, indent=None, config=TreeConfig(indent=4)) == '{"a": 1}'
        assert to_text(root, indent=1, config=TreeConfig(indent=4)) == '{\n "a": 1\n}'

    def test_to_text_ensure_ascii_from_config(self) -> None:
        text = to_text(parse('"é"'), config=TreeConfig(ensure_ascii=True))
        assert text == '"\\u00e9"'


class TestFindAndMove:
    def test_find_by_id(self) -> None:
        root = parse('{"a": 1}')
        a = root.children[0]
        assert find_by_id(root, a.id) is a
        assert find_by_id(root, "nope") is None

    def test_move_into_object(self) -> None:
        root = parse('{"a":1,"b":{"x":2},"arr":[10,20]}')
        a, b = root.children[0], root.children[1]
        assert move(root, a.id, b.id) is True
        assert to_plain(root) == {"b": {"x": 2, "a": 1}, "arr": [10, 20]}

    def test_move_rejected_returns_false(self) -> None:
        root = parse('{"b": {"x": 2}}')
        b = root.children[0]
        assert move(root, b.id, b.children[0].id) is False
        assert to_plain(root) == {"b": {"x": 2}}

    def test_move_config_passthrough(self) -> None:
        root = parse('{"x": 1, "o": {"x": 2}}')
        x, o = root.children
        assert move(root, x.id, o.id, config=TreeConfig(key_separator="."))
        assert list(to_plain(root)["o"]) == ["x", "x.1"]

    def test_no_state_between_parses(self) -> None:
        r1 = parse('{"a": 1}')
        r2 = parse('{"a": 1}')
        assert [n.id for n in (r1, *r1.children)] == [n.id for n in (r2, *r2.children)]

"""Tests for the glyph and qualifier tables."""

from __future__ import annotations

from scngen.models import CodeNode
from scngen.symbols import (
    CONTAINER_SYMBOL,
    UNKNOWN_SYMBOL,
    format_css_intents,
    qualifiers_for,
    symbol_for,
)


def _node(**overrides: object) -> CodeNode:
    values: dict[str, object] = {"id": "n", "file_path": "a.ts", "type": "function", "name": "fn"}
    values.update(overrides)
    return CodeNode(**values)  # type: ignore[arg-type]


def test_symbol_table_covers_function_like_types() -> None:
    for node_type in ("function", "method", "arrow-function", "constructor"):
        assert symbol_for(_node(type=node_type)) == "~"


def test_types_without_glyph_use_placeholder() -> None:
    for node_type in ("trait", "impl", "static", "union", "template", "file", "mystery"):
        assert symbol_for(_node(type=node_type)) == UNKNOWN_SYMBOL


def test_uppercase_containers_only_affect_variables_and_constants() -> None:
    assert symbol_for(_node(type="constant", name="Config"), uppercase_containers=True) == CONTAINER_SYMBOL
    assert symbol_for(_node(type="property", name="Config"), uppercase_containers=True) == "@"
    assert symbol_for(_node(type="variable", name="config"), uppercase_containers=True) == "@"


def test_qualifiers_follow_fixed_order() -> None:
    node = _node(visibility="private", is_async=True, can_throw=True, is_pure=True)
    assert qualifiers_for(node) == ["-", "...", "!", "o"]


def test_qualifiers_empty_when_no_flags_set() -> None:
    assert qualifiers_for(_node()) == []
    assert qualifiers_for(_node(visibility="internal")) == []


def test_format_css_intents_uses_canonical_order() -> None:
    assert format_css_intents(["appearance", "typography", "layout"]) == "{ 📐 ✍ 💧 }"
    assert format_css_intents({"typography"}) == "{ ✍ }"


def test_format_css_intents_empty_and_unknown() -> None:
    assert format_css_intents([]) == ""
    assert format_css_intents(["animation"]) == ""

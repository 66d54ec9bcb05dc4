"""Glyph tables for the SCN wire format."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping

from .models import CodeNode, CssIntent, NodeType, Visibility

FILE_SYMBOL = "§"
UNKNOWN_SYMBOL = "?"
CONTAINER_SYMBOL = "◇"
DEPENDENCY_ARROW = "->"
CALLER_ARROW = "<-"

ENTITY_TYPE_TO_SYMBOL: Mapping[str, str] = MappingProxyType(
    {
        NodeType.CLASS.value: CONTAINER_SYMBOL,
        NodeType.NAMESPACE.value: CONTAINER_SYMBOL,
        NodeType.STRUCT.value: CONTAINER_SYMBOL,
        NodeType.FUNCTION.value: "~",
        NodeType.METHOD.value: "~",
        NodeType.ARROW_FUNCTION.value: "~",
        NodeType.CONSTRUCTOR.value: "~",
        NodeType.INTERFACE.value: "{}",
        NodeType.ENUM.value: "☰",
        NodeType.TYPE_ALIAS.value: "=:",
        NodeType.HTML_ELEMENT.value: "⛶",
        NodeType.CSS_RULE.value: "¶",
        NodeType.PROPERTY.value: "@",
        NodeType.FIELD.value: "@",
        NodeType.VARIABLE.value: "@",
        NodeType.CONSTANT.value: "@",
    }
)

VISIBILITY_TO_SYMBOL: Mapping[str, str] = MappingProxyType(
    {
        Visibility.PUBLIC.value: "+",
        Visibility.PRIVATE.value: "-",
    }
)

ASYNC_SYMBOL = "..."
THROWS_SYMBOL = "!"
PURE_SYMBOL = "o"

# Iteration order is the canonical emission order.
CSS_INTENT_TO_SYMBOL: Mapping[str, str] = MappingProxyType(
    {
        CssIntent.LAYOUT.value: "📐",
        CssIntent.TYPOGRAPHY.value: "✍",
        CssIntent.APPEARANCE.value: "💧",
    }
)

_CONTAINER_CANDIDATES = frozenset({NodeType.VARIABLE.value, NodeType.CONSTANT.value})


def symbol_for(node: CodeNode, *, uppercase_containers: bool = False) -> str:
    """Return the glyph for ``node``; unmapped types fall back to ``?``."""
    if (
        uppercase_containers
        and node.type in _CONTAINER_CANDIDATES
        and node.name[:1].isupper()
    ):
        return CONTAINER_SYMBOL
    return ENTITY_TYPE_TO_SYMBOL.get(node.type, UNKNOWN_SYMBOL)


def qualifiers_for(node: CodeNode) -> List[str]:
    """Qualifier tokens in wire order: visibility, async, throws, purity."""
    qualifiers: List[str] = []
    visibility = VISIBILITY_TO_SYMBOL.get(node.visibility or "")
    if visibility:
        qualifiers.append(visibility)
    if node.is_async:
        qualifiers.append(ASYNC_SYMBOL)
    if node.can_throw:
        qualifiers.append(THROWS_SYMBOL)
    if node.is_pure:
        qualifiers.append(PURE_SYMBOL)
    return qualifiers


def format_css_intents(intents: Iterable[str]) -> str:
    """Render intents as ``{ a b }`` in canonical order, or ``""`` when none apply."""
    present = set(intents)
    symbols = [symbol for intent, symbol in CSS_INTENT_TO_SYMBOL.items() if intent in present]
    if not symbols:
        return ""
    return "{ " + " ".join(symbols) + " }"


__all__ = [
    "ASYNC_SYMBOL",
    "CALLER_ARROW",
    "CSS_INTENT_TO_SYMBOL",
    "DEPENDENCY_ARROW",
    "ENTITY_TYPE_TO_SYMBOL",
    "FILE_SYMBOL",
    "PURE_SYMBOL",
    "THROWS_SYMBOL",
    "UNKNOWN_SYMBOL",
    "VISIBILITY_TO_SYMBOL",
    "format_css_intents",
    "qualifiers_for",
    "symbol_for",
]

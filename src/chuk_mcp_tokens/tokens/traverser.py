"""
Tree traverser - walks a nested token tree and visits every token.

A node is a token when it holds `$value`; any other mapping is a group
and is recursed into. Keys starting with `$` are metadata and are
never visited or recursed into.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.constants import METADATA_PREFIX, VALUE_KEY, Layer

Visitor = Callable[[tuple[str, ...], dict[str, Any], Layer], None]
StrayVisitor = Callable[[tuple[str, ...], Any, Layer], None]


@dataclass
class TokenCounter:
    """Running token counts, filled in as a by-product of traversal."""

    total: int = 0
    primitive: int = 0
    semantic: int = 0

    def record(self, layer: Layer) -> None:
        self.total += 1
        if layer == Layer.PRIMITIVE:
            self.primitive += 1
        elif layer == Layer.SEMANTIC:
            self.semantic += 1


def is_metadata_key(key: Any) -> bool:
    """Return True for reserved `$`-prefixed keys."""
    return str(key).startswith(METADATA_PREFIX)


def is_token_node(node: Any) -> bool:
    """Return True if a node holds the value field."""
    return isinstance(node, dict) and VALUE_KEY in node


def traverse(
    tree: dict[str, Any],
    visit: Visitor,
    path_prefix: tuple[str, ...] = (),
    layer: Layer = Layer.PRIMITIVE,
    counter: TokenCounter | None = None,
    on_stray: StrayVisitor | None = None,
) -> int:
    """
    Visit every token under a tree.

    Args:
        tree: Mapping of keys to groups or tokens
        visit: Called with (path, node, layer) for each token
        path_prefix: Segments leading to this tree
        layer: Layer the tree belongs to
        counter: Optional running counts to increment
        on_stray: Called for non-metadata values that are neither
            a group nor a token

    Returns:
        Number of tokens visited
    """
    visited = 0
    for key, node in tree.items():
        if is_metadata_key(key):
            continue

        path = (*path_prefix, str(key))
        if is_token_node(node):
            visit(path, node, layer)
            visited += 1
            if counter is not None:
                counter.record(layer)
        elif isinstance(node, dict):
            visited += traverse(node, visit, path, layer, counter, on_stray)
        elif on_stray is not None:
            on_stray(path, node, layer)

    return visited

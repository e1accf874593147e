"""
Token corpus - both layers parsed once, with flat path indexes.

The corpus is read-only and rebuilt from scratch for every audit run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_tokens.constants import ErrorMessages, Layer
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.tokens.traverser import TokenCounter, traverse


@dataclass(frozen=True)
class StrayNode:
    """A non-metadata value that is neither a group nor a token."""

    path: tuple[str, ...]
    layer: Layer
    type_name: str


@dataclass
class TokenCorpus:
    """Parsed tokens of both layers plus corpus-wide statistics."""

    primitive: list[Token] = field(default_factory=list)
    semantic: list[Token] = field(default_factory=list)
    counter: TokenCounter = field(default_factory=TokenCounter)
    stray: list[StrayNode] = field(default_factory=list)

    @classmethod
    def from_trees(cls, primitive: dict[str, Any], semantic: dict[str, Any]) -> TokenCorpus:
        """Traverse both trees once and parse every token."""
        corpus = cls()
        corpus._collect(primitive, Layer.PRIMITIVE, corpus.primitive)
        corpus._collect(semantic, Layer.SEMANTIC, corpus.semantic)
        return corpus

    def _collect(self, tree: dict[str, Any], layer: Layer, into: list[Token]) -> None:
        def visit(path: tuple[str, ...], node: dict[str, Any], node_layer: Layer) -> None:
            into.append(Token.from_node(path, node, node_layer))

        def stray(path: tuple[str, ...], node: Any, node_layer: Layer) -> None:
            self.stray.append(StrayNode(path, node_layer, type(node).__name__))

        traverse(tree, visit, layer=layer, counter=self.counter, on_stray=stray)

    def tokens(self, layer: Layer | str | None = None) -> list[Token]:
        """
        Tokens of one layer, or of both layers in load order.

        Raises:
            ValueError: If the layer name is unknown
        """
        if layer is None:
            return [*self.primitive, *self.semantic]
        try:
            layer = Layer(layer)
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_LAYER.format(layer=layer)) from e
        return self.primitive if layer == Layer.PRIMITIVE else self.semantic

    def index(self, layer: Layer | str) -> set[str]:
        """Dot-joined paths of every token in a layer."""
        return {token.dotted for token in self.tokens(layer)}

    @property
    def primitive_index(self) -> set[str]:
        return self.index(Layer.PRIMITIVE)

    @property
    def semantic_index(self) -> set[str]:
        return self.index(Layer.SEMANTIC)

    def find(self, dotted: str) -> list[Token]:
        """All tokens, in either layer, whose path equals `dotted`."""
        return [token for token in self.tokens() if token.dotted == dotted]

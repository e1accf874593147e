"""
Token trees - traversal, loading and the parsed corpus.

Primitive tokens are raw values; semantic tokens reference them.
Both are walked with the same traverser.
"""

from chuk_mcp_tokens.tokens.corpus import StrayNode, TokenCorpus
from chuk_mcp_tokens.tokens.loader import TokenLoader, TokenLoadError, ensure_tree, parse_tree
from chuk_mcp_tokens.tokens.traverser import TokenCounter, is_metadata_key, is_token_node, traverse

__all__ = [
    "StrayNode",
    "TokenCorpus",
    "TokenCounter",
    "TokenLoadError",
    "TokenLoader",
    "ensure_tree",
    "is_metadata_key",
    "is_token_node",
    "parse_tree",
    "traverse",
]

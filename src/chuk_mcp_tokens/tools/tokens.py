"""
Token tools - MCP tools for browsing token documents.

Documents are reloaded on every call; nothing is cached between runs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.tokens import TokenLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_tools(mcp: ChukMCPServer, loader: TokenLoader) -> dict[str, Any]:
    """
    Register token browsing tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: Loader for the primitive and semantic documents

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list(layer: str, prefix: str | None = None) -> str:
        """
        List token paths in a layer.

        Args:
            layer: 'primitive' or 'semantic'
            prefix: Optional dotted path prefix to filter by

        Returns:
            JSON string with paths and declared types

        Example:
            tokens_list(layer="primitive", prefix="color.primary")
        """
        try:
            corpus = loader.load()
            tokens = [
                t
                for t in corpus.tokens(layer)
                if prefix is None or t.dotted.startswith(prefix)
            ]
            return json.dumps(
                {
                    "status": "success",
                    "layer": layer,
                    "tokens": [{"path": t.dotted, "type": t.declared_type} for t in tokens],
                    "count": len(tokens),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list"] = tokens_list

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe(path: str) -> str:
        """
        Describe a token by its dotted path.

        Returns the token's kind, layer, description, raw value and the
        references it holds. A path defined in both layers returns
        both entries.

        Args:
            path: Dotted token path (e.g. 'color.primary.600')

        Returns:
            JSON string with token details

        Example:
            tokens_describe(path="color.text.neutral.base.default")
        """
        try:
            corpus = loader.load()
            matches = corpus.find(path)
            if not matches:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_NOT_FOUND.format(path=path)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "tokens": [
                        {
                            "path": t.dotted,
                            "layer": t.layer.value,
                            "type": t.declared_type,
                            "description": t.description,
                            "value": t.value.raw,
                            "variant": t.value.variant,
                            "references": [r.path for r in t.references()],
                            "extensions": t.extensions,
                        }
                        for t in matches
                    ],
                },
                default=str,
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe"] = tokens_describe

    return tools

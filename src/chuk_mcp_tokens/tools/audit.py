"""
Audit tools - MCP tools for running token audits.

Tools for auditing token documents on disk or passed inline, and for
checking a single value against its kind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.audit import TokenAuditor
from chuk_mcp_tokens.constants import TokenKind
from chuk_mcp_tokens.models import AuditConfig, CheckResult, parse_value
from chuk_mcp_tokens.tokens import parse_tree
from chuk_mcp_tokens.validators import validate_value

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_audit_tools(
    mcp: ChukMCPServer,
    base_path: Path,
    config: AuditConfig | None = None,
) -> dict[str, Any]:
    """
    Register audit tools with the MCP server.

    Args:
        mcp: The MCP server instance
        base_path: Directory token paths are resolved against
        config: Default audit rules

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve(path: str) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else base_path / candidate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_audit(
        primitive_path: str | None = None,
        semantic_path: str | None = None,
        config_path: str | None = None,
    ) -> str:
        """
        Audit primitive and semantic token documents.

        Runs every check (value formats, references, structure,
        completeness, quality) and returns the full report.

        Args:
            primitive_path: Primitive document (default: tokens/primitive.json)
            semantic_path: Semantic document (default: tokens/semantic.json)
            config_path: Optional YAML file with audit rules

        Returns:
            JSON string with score, verdict, statistics and findings

        Example:
            tokens_audit(primitive_path="tokens/primitive.json")
        """
        try:
            audit_config = config
            if config_path:
                audit_config = AuditConfig.from_yaml(resolve(config_path))

            auditor = TokenAuditor(audit_config)
            report = auditor.audit_files(
                resolve(primitive_path or "tokens/primitive.json"),
                resolve(semantic_path or "tokens/semantic.json"),
            )
            return json.dumps({"status": "success", "report": report.to_dict()})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to audit tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_audit"] = tokens_audit

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_audit_inline(primitive_json: str, semantic_json: str) -> str:
        """
        Audit token documents passed as JSON strings.

        Args:
            primitive_json: Primitive token tree as JSON
            semantic_json: Semantic token tree as JSON

        Returns:
            JSON string with score, verdict, statistics and findings

        Example:
            tokens_audit_inline(primitive_json='{"color": {...}}', semantic_json='{}')
        """
        try:
            primitive = parse_tree(primitive_json, "primitive")
            semantic = parse_tree(semantic_json, "semantic")
            report = TokenAuditor(config).audit_trees(primitive, semantic)
            return json.dumps({"status": "success", "report": report.to_dict()})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to audit inline tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_audit_inline"] = tokens_audit_inline

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate_value(kind: str, value_json: str, path: str = "value") -> str:
        """
        Validate a single value against a token kind.

        References are accepted as-is; kinds without a validator
        always pass.

        Args:
            kind: Token kind ('color', 'dimension', 'number', ...)
            value_json: The value as JSON
            path: Token path used in messages (and for number ranges)

        Returns:
            JSON string with validity and findings

        Example:
            tokens_validate_value(kind="dimension", value_json='{"value": 16, "unit": "px"}')
        """
        try:
            raw = json.loads(value_json)
            token_kind = TokenKind.from_declared(kind)
            result = CheckResult("value")
            valid = validate_value(
                parse_value(raw, token_kind), token_kind, path, result, config
            )
            return json.dumps(
                {
                    "status": "success",
                    "valid": valid,
                    "kind": token_kind.value,
                    "findings": [f.to_dict() for f in result.findings],
                }
            )
        except json.JSONDecodeError as e:
            return json.dumps({"status": "error", "message": f"Invalid JSON value: {e}"})
        except Exception as e:
            logger.exception("Failed to validate value")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate_value"] = tokens_validate_value

    return tools


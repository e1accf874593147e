"""
MCP tool implementations.

Tools are organized by domain:
- audit - Running audits and validating single values
- tokens - Browsing token documents
"""

from chuk_mcp_tokens.tools.audit import register_audit_tools
from chuk_mcp_tokens.tools.tokens import register_token_tools

__all__ = [
    "register_audit_tools",
    "register_token_tools",
]

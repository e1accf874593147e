"""
chuk-mcp-tokens - design token audits over MCP.

Walks a primitive and a semantic token tree, validates every value
against its kind, resolves references across both layers and scores
production readiness.
"""

from chuk_mcp_tokens.audit import TokenAuditor, audit_tokens, render_text
from chuk_mcp_tokens.models import AuditConfig, AuditReport, Severity, Verdict
from chuk_mcp_tokens.tokens import TokenCorpus, TokenLoader, TokenLoadError

__all__ = [
    "AuditConfig",
    "AuditReport",
    "Severity",
    "TokenAuditor",
    "TokenCorpus",
    "TokenLoadError",
    "TokenLoader",
    "Verdict",
    "audit_tokens",
    "render_text",
]

"""
Pydantic models for the token audit system.

This module provides:
- Token: A leaf node with path, layer, kind and value
- LiteralValue / ReferenceValue / CompositeValue: Tagged token values
- AuditConfig: Tunable audit rules
- Finding / CheckResult / AuditReport: Audit findings and their aggregate
"""

from chuk_mcp_tokens.models.config import AuditConfig, NumberRange, StateDepthPolicy
from chuk_mcp_tokens.models.report import (
    AuditReport,
    AuditStats,
    CheckResult,
    Finding,
    Severity,
    Verdict,
)
from chuk_mcp_tokens.models.token import (
    CompositeValue,
    LiteralValue,
    ReferenceValue,
    Token,
    TokenValue,
    is_reference,
    join_path,
    parse_value,
)

__all__ = [
    "AuditConfig",
    "AuditReport",
    "AuditStats",
    "CheckResult",
    "CompositeValue",
    "Finding",
    "LiteralValue",
    "NumberRange",
    "ReferenceValue",
    "Severity",
    "StateDepthPolicy",
    "Token",
    "TokenValue",
    "Verdict",
    "is_reference",
    "join_path",
    "parse_value",
]

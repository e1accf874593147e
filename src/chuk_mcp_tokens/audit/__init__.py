"""
Token audit - structural and semantic checks on design token trees.

This module provides:
- TokenAuditor: Runs every checker and aggregates an AuditReport
- ReferenceResolver: Reference integrity and cycle search
- StructureChecker, CompletenessChecker, QualityChecker, ComplianceChecker
- ReportRenderer: Plain-text report output
"""

from chuk_mcp_tokens.audit.auditor import TokenAuditor, audit_tokens
from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.audit.completeness import CompletenessChecker
from chuk_mcp_tokens.audit.compliance import ComplianceChecker
from chuk_mcp_tokens.audit.quality import QualityChecker
from chuk_mcp_tokens.audit.references import ReferenceResolver, find_cycles, is_layer_qualified
from chuk_mcp_tokens.audit.renderer import ReportRenderer, render_text
from chuk_mcp_tokens.audit.structure import StructureChecker

__all__ = [
    "Checker",
    "CompletenessChecker",
    "ComplianceChecker",
    "QualityChecker",
    "ReferenceResolver",
    "ReportRenderer",
    "StructureChecker",
    "TokenAuditor",
    "audit_tokens",
    "find_cycles",
    "is_layer_qualified",
    "render_text",
]

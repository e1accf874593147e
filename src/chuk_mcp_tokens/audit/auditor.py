"""
Token auditor - runs every checker and aggregates the report.

Checkers run one after another in a fixed order so the report is
reproducible run to run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.audit.completeness import CompletenessChecker
from chuk_mcp_tokens.audit.compliance import ComplianceChecker
from chuk_mcp_tokens.audit.quality import QualityChecker
from chuk_mcp_tokens.audit.references import ReferenceResolver
from chuk_mcp_tokens.audit.structure import StructureChecker
from chuk_mcp_tokens.models.config import AuditConfig
from chuk_mcp_tokens.models.report import AuditReport, AuditStats
from chuk_mcp_tokens.tokens.corpus import TokenCorpus
from chuk_mcp_tokens.tokens.loader import TokenLoader, ensure_tree

logger = logging.getLogger(__name__)


class TokenAuditor:
    """Audits a token corpus against an AuditConfig."""

    def __init__(self, config: AuditConfig | None = None):
        """
        Initialize the auditor.

        Args:
            config: Audit rules (defaults apply when omitted)
        """
        self.config = config or AuditConfig()
        self.checkers: list[Checker] = [
            ComplianceChecker(self.config),
            ReferenceResolver(self.config),
            StructureChecker(self.config),
            CompletenessChecker(self.config),
            QualityChecker(self.config),
        ]

    def audit(self, corpus: TokenCorpus) -> AuditReport:
        """
        Audit a corpus.

        Args:
            corpus: Parsed tokens of both layers

        Returns:
            AuditReport with every checker's findings
        """
        report = AuditReport(
            stats=AuditStats(
                total_tokens=corpus.counter.total,
                primitive_tokens=corpus.counter.primitive,
                semantic_tokens=corpus.counter.semantic,
            )
        )

        for checker in self.checkers:
            report.merge(checker.check(corpus))

        logger.info(
            f"Audit finished: score {report.score}, "
            f"{len(report.criticals)} critical, {len(report.warnings)} warnings"
        )
        return report

    def audit_trees(self, primitive: Any, semantic: Any) -> AuditReport:
        """
        Audit two already-parsed token trees.

        Raises:
            TokenLoadError: If either tree is not a mapping
        """
        corpus = TokenCorpus.from_trees(
            ensure_tree(primitive, "primitive"),
            ensure_tree(semantic, "semantic"),
        )
        return self.audit(corpus)

    def audit_files(self, primitive_path: Path, semantic_path: Path) -> AuditReport:
        """
        Load and audit two token documents.

        Raises:
            TokenLoadError: If either document cannot be loaded
        """
        loader = TokenLoader(primitive_path=primitive_path, semantic_path=semantic_path)
        return self.audit(loader.load())


def audit_tokens(
    primitive: dict[str, Any],
    semantic: dict[str, Any],
    config: AuditConfig | None = None,
) -> AuditReport:
    """
    Convenience function to audit two token trees.

    Args:
        primitive: Primitive token tree
        semantic: Semantic token tree
        config: Optional audit rules

    Returns:
        AuditReport with every finding
    """
    auditor = TokenAuditor(config)
    return auditor.audit_trees(primitive, semantic)

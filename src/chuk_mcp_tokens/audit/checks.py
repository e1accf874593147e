"""
Checker base - shared plumbing for every audit check.

A checker reads a corpus and returns its own CheckResult. It never
touches another checker's findings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from chuk_mcp_tokens.models.config import AuditConfig
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.tokens.corpus import TokenCorpus

logger = logging.getLogger(__name__)


class Checker:
    """Base class for audit checks."""

    name = "audit"

    def __init__(self, config: AuditConfig | None = None):
        """
        Initialize the checker.

        Args:
            config: Audit rules (defaults apply when omitted)
        """
        self.config = config or AuditConfig()

    def check(self, corpus: TokenCorpus) -> CheckResult:
        """
        Run the check against a corpus.

        Args:
            corpus: Parsed tokens of both layers

        Returns:
            CheckResult with this checker's findings
        """
        result = CheckResult(self.name)
        with result.guard():
            self.run(corpus, result)

        logger.debug(
            f"{self.name}: {len(result.passes)} pass, "
            f"{len(result.warnings)} warning, {len(result.criticals)} critical"
        )
        return result

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        raise NotImplementedError

    @staticmethod
    def each_token(
        tokens: Iterable[Token],
        result: CheckResult,
        visit: Callable[[Token], None],
    ) -> None:
        """Visit tokens one by one, isolating failures per token."""
        for token in tokens:
            with result.guard(token.dotted):
                visit(token)

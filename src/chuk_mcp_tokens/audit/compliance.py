"""
Compliance checker - declared types and value formats.

Every token must declare `$type`, and every literal value must match
the shape of its kind.
"""

from __future__ import annotations

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.tokens.corpus import TokenCorpus
from chuk_mcp_tokens.validators.values import validate_value


class ComplianceChecker(Checker):
    """Checks type declarations and validates values by kind."""

    name = "compliance"

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        tokens = corpus.tokens()
        self._check_types(tokens, result)
        self._check_values(tokens, result)

    def _check_types(self, tokens: list[Token], result: CheckResult) -> None:
        missing = 0

        def visit(token: Token) -> None:
            nonlocal missing
            if token.declared_type is None:
                result.add_critical("MISSING_TYPE", "Missing required $type property", token.dotted)
                result.count("missing_type")
                missing += 1

        self.each_token(tokens, result, visit)

        if missing == 0:
            result.add_pass("TYPES_DECLARED", "All tokens have $type declarations")

    def _check_values(self, tokens: list[Token], result: CheckResult) -> None:
        issues = 0
        criticals_before = len(result.criticals)

        def visit(token: Token) -> None:
            nonlocal issues
            if token.declared_type is None:
                return
            if not validate_value(token.value, token.kind, token.dotted, result, self.config):
                issues += 1

        self.each_token(tokens, result, visit)

        if issues == 0 and len(result.criticals) == criticals_before:
            result.add_pass("VALUE_FORMATS", "All token values use correct format for their type")

"""
Quality checker - heuristics on human-authored metadata.

Checks:
- Descriptions are present, long enough and not generic
- Each top-level primitive group declares a single kind
- Semantic tokens carry contrast metadata somewhere
"""

from __future__ import annotations

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.tokens.corpus import TokenCorpus


class QualityChecker(Checker):
    """Checks documentation, type homogeneity and accessibility metadata."""

    name = "quality"

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        self._check_descriptions(corpus.tokens(), result)
        self._check_type_homogeneity(corpus.primitive, result)
        self._check_accessibility(corpus.semantic, result)

    def is_generic(self, description: str) -> bool:
        """True for a short description that is, or starts with, a generic word."""
        text = description.lower()
        if len(text) >= self.config.generic_description_max_length:
            return False
        return any(
            text == word or text.startswith(f"{word} ") or text.startswith(f"{word}.")
            for word in self.config.generic_description_words
        )

    def _check_descriptions(self, tokens: list[Token], result: CheckResult) -> None:
        min_length = self.config.min_description_length
        missing = 0
        unclear = 0

        def visit(token: Token) -> None:
            nonlocal missing, unclear
            description = token.description
            if description is None or description == "":
                result.add_warning(
                    "MISSING_DESCRIPTION", "Missing $description property", token.dotted
                )
                result.count("missing_description")
                missing += 1
                return

            if not isinstance(description, str):
                result.add_warning(
                    "DESCRIPTION_TYPE",
                    f"$description must be a string, got {type(description).__name__}",
                    token.dotted,
                )
                result.count("missing_description")
                missing += 1
                return

            if len(description) < min_length:
                result.add_warning(
                    "SHORT_DESCRIPTION",
                    f"Description too short ({len(description)} chars). Should be descriptive.",
                    token.dotted,
                )
                unclear += 1

            if self.is_generic(description):
                result.add_warning(
                    "GENERIC_DESCRIPTION",
                    f'Description may be too generic: "{description}"',
                    token.dotted,
                )
                unclear += 1

        self.each_token(tokens, result, visit)

        if missing == 0:
            result.add_pass("DESCRIPTIONS_PRESENT", "All tokens have $description")
        if unclear == 0:
            result.add_pass("DESCRIPTIONS_SPECIFIC", "All descriptions are clear and specific")

    def _check_type_homogeneity(self, tokens: list[Token], result: CheckResult) -> None:
        kinds_by_group: dict[str, list[str]] = {}
        for token in tokens:
            kinds = kinds_by_group.setdefault(token.path[0], [])
            if token.declared_type is not None and token.declared_type not in kinds:
                kinds.append(token.declared_type)

        mixed = 0
        for group, kinds in kinds_by_group.items():
            if len(kinds) > 1:
                result.add_warning(
                    "MIXED_TYPES",
                    f'Category "{group}" has multiple types: {", ".join(kinds)}. '
                    "Should be consistent.",
                )
                mixed += 1

        if mixed == 0:
            result.add_pass(
                "CONSISTENT_TYPES",
                "All token categories use consistent $type declarations",
            )

    def _check_accessibility(self, tokens: list[Token], result: CheckResult) -> None:
        if not self.config.require_contrast_metadata:
            return

        key = self.config.contrast_key
        if any(token.has_extension(key) for token in tokens):
            result.add_pass(
                "ACCESSIBILITY_METADATA",
                f"Accessibility information ({key}) included in $extensions",
            )
        else:
            result.add_warning(
                "NO_ACCESSIBILITY_METADATA",
                f"Consider adding {key} information to text color tokens for WCAG compliance",
            )

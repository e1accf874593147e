"""
Completeness checker - are the expected tokens all there?

Checks:
- Essential semantic token patterns
- Full color scales per category
- Interactive states
- Anchor primitives (pure white and black)

Missing items are warnings; an empty list in the config disables
the corresponding check.
"""

from __future__ import annotations

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.tokens.corpus import TokenCorpus


class CompletenessChecker(Checker):
    """Checks the presence of essential tokens, scales, states and anchors."""

    name = "completeness"

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        self._check_essentials(corpus, result)
        self._check_scales(corpus, result)
        self._check_states(corpus, result)
        self._check_anchors(corpus, result)

    def _check_essentials(self, corpus: TokenCorpus, result: CheckResult) -> None:
        patterns = self.config.essential_patterns
        if not patterns:
            return

        semantic_paths = corpus.semantic_index
        missing = 0
        for pattern in patterns:
            if not any(path.startswith(pattern) for path in semantic_paths):
                result.add_warning(
                    "MISSING_ESSENTIAL",
                    f"Missing essential semantic token pattern: {pattern}",
                )
                missing += 1

        if missing == 0:
            result.add_pass(
                "ESSENTIALS_PRESENT",
                f"All {len(patterns)} essential semantic token patterns are present",
            )

    def scale_steps(self, corpus: TokenCorpus, category: str) -> set[str]:
        """Scale segments found directly under `<scale_root>.<category>` in primitives."""
        root = self.config.scale_root
        return {
            token.path[2]
            for token in corpus.primitive
            if len(token.path) >= 3 and token.path[0] == root and token.path[1] == category
        }

    def _check_scales(self, corpus: TokenCorpus, result: CheckResult) -> None:
        expected = self.config.expected_scale
        root = self.config.scale_root

        for category in self.config.scale_categories:
            found = self.scale_steps(corpus, category)
            missing = [step for step in expected if step not in found]
            if missing:
                result.add_warning(
                    "INCOMPLETE_SCALE",
                    f"Missing scale values: {', '.join(missing)}",
                    f"{root}.{category}",
                )
            else:
                result.add_pass(
                    "COMPLETE_SCALE",
                    f"Complete {len(expected)}-step scale ({expected[0]}-{expected[-1]})",
                    f"{root}.{category}",
                )

    def _check_states(self, corpus: TokenCorpus, result: CheckResult) -> None:
        required = self.config.required_states
        if not required:
            return

        if any(token.last_segment in required for token in corpus.semantic):
            result.add_pass(
                "STATES_PRESENT",
                f"Interactive states ({', '.join(required)}) are defined",
            )
        else:
            result.add_warning(
                "NO_INTERACTIVE_STATES",
                f"No interactive states found. Consider adding {', '.join(required)} states.",
            )

    def _check_anchors(self, corpus: TokenCorpus, result: CheckResult) -> None:
        primitive_paths = corpus.primitive_index
        for anchor in self.config.anchor_tokens:
            if anchor in primitive_paths:
                result.add_pass("ANCHOR_PRESENT", f"{anchor} is defined")
            else:
                result.add_warning("MISSING_ANCHOR", f"Missing {anchor} primitive token")

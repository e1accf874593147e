"""
Structural checker - path depth, naming and collisions.

Depth and state-suffix rules are style guidelines (warnings). Layer
prefixes, ambiguous segments and path collisions break references and
are critical.
"""

from __future__ import annotations

from collections import Counter

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.constants import LAYER_NAMES, PATH_SEPARATOR, Layer
from chuk_mcp_tokens.models.config import StateDepthPolicy
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.tokens.corpus import TokenCorpus


class StructureChecker(Checker):
    """Checks path shape and naming across both layers."""

    name = "structure"

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        self._check_paths(corpus.tokens(), result)
        self._check_state_suffixes(corpus.semantic, result)
        self._check_collisions(corpus, result)
        self._check_stray_nodes(corpus, result)

    def _check_paths(self, tokens: list[Token], result: CheckResult) -> None:
        prefixed = 0
        too_deep = 0

        def visit(token: Token) -> None:
            nonlocal prefixed, too_deep
            if token.path[0] in LAYER_NAMES:
                result.add_critical(
                    "LAYER_PREFIX",
                    "Token path includes layer prefix. Remove it",
                    token.dotted,
                )
                prefixed += 1

            if any(PATH_SEPARATOR in segment for segment in token.path):
                result.add_critical(
                    "SEPARATOR_IN_SEGMENT",
                    f"Path segment contains '{PATH_SEPARATOR}', "
                    "so the dotted path is ambiguous",
                    token.dotted,
                )

            if not self.check_depth(token, result):
                too_deep += 1

            if token.child_keys:
                result.add_warning(
                    "TOKEN_HAS_CHILDREN",
                    f"Token also contains child nodes ({', '.join(token.child_keys)}), "
                    "which are ignored",
                    token.dotted,
                )

        self.each_token(tokens, result, visit)

        if prefixed == 0:
            result.add_pass("NO_LAYER_PREFIXES", "No layer prefixes found in token paths")
        if too_deep == 0:
            result.add_pass(
                "DEPTH_WITHIN_LIMIT",
                f"All token paths are within the max depth of {self.config.max_depth}",
            )

    def check_depth(self, token: Token, result: CheckResult) -> bool:
        """
        Apply the depth rule to one token.

        Returns:
            False if a depth warning was recorded
        """
        depth = token.depth
        max_depth = self.config.max_depth
        if depth <= max_depth:
            return True

        is_state = token.last_segment in self.config.state_names
        if is_state and depth <= self.config.extended_depth:
            if self.config.state_depth_policy == StateDepthPolicy.ADVISORY:
                result.add_warning(
                    "DEPTH_STATE_TOLERANCE",
                    f"Nesting depth {depth} exceeds max of {max_depth}; "
                    f'tolerated for state "{token.last_segment}"',
                    token.dotted,
                )
                return False
            return True

        result.add_warning(
            "DEPTH_EXCEEDED",
            f"Nesting depth {depth} exceeds recommended max of {max_depth}",
            token.dotted,
        )
        return False

    def _check_state_suffixes(self, tokens: list[Token], result: CheckResult) -> None:
        expected = self.config.state_path_length
        mismatched = 0

        def visit(token: Token) -> None:
            nonlocal mismatched
            if token.last_segment in self.config.state_names and token.depth != expected:
                result.add_warning(
                    "STATE_PATH_LENGTH",
                    f'Token with state "{token.last_segment}" should have {expected} levels',
                    token.dotted,
                )
                mismatched += 1

        self.each_token(tokens, result, visit)

        if mismatched == 0:
            result.add_pass(
                "NAMING_CONVENTION",
                "Token naming follows {type}.{category}.{scale}.{state?} convention",
            )

    def _check_collisions(self, corpus: TokenCorpus, result: CheckResult) -> None:
        for layer in Layer:
            counts = Counter(token.dotted for token in corpus.tokens(layer))
            for dotted, count in counts.items():
                if count > 1:
                    result.add_critical(
                        "PATH_COLLISION",
                        f"{count} {layer.value} tokens share this path",
                        dotted,
                    )

        for dotted in sorted(corpus.primitive_index & corpus.semantic_index):
            result.add_warning(
                "CROSS_LAYER_COLLISION",
                "Path is defined in both layers, so references to it are ambiguous",
                dotted,
            )

    def _check_stray_nodes(self, corpus: TokenCorpus, result: CheckResult) -> None:
        for node in corpus.stray:
            result.add_critical(
                "STRAY_NODE",
                f"{node.layer.value} node of type {node.type_name} is neither a group "
                "nor a token (no $value)",
                PATH_SEPARATOR.join(node.path),
            )

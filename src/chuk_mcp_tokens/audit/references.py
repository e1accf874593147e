"""
Reference resolver - verifies every `{path}` reference in the corpus.

Checks:
- Each reference resolves to a token path in either layer
- No reference spells out a layer name (`{primitive.color...}`)
- Primitive tokens hold literal values only
- The reference graph has no cycles
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from chuk_mcp_tokens.audit.checks import Checker
from chuk_mcp_tokens.constants import LAYER_NAMES
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import ReferenceValue, Token
from chuk_mcp_tokens.tokens.corpus import TokenCorpus

logger = logging.getLogger(__name__)


class _Mark(Enum):
    """DFS node colors."""

    WHITE = 0  # Not visited
    GRAY = 1  # On the current path
    BLACK = 2  # Fully explored


@dataclass
class ReferenceScan:
    """What a reference pass observed."""

    references: set[str] = field(default_factory=set)
    invalid: int = 0
    graph: dict[str, list[str]] = field(default_factory=dict)

    def add_edge(self, source: str, target: str) -> None:
        targets = self.graph.setdefault(source, [])
        if target not in targets:
            targets.append(target)


def is_layer_qualified(ref: ReferenceValue) -> bool:
    """Return True if a reference starts with a layer name segment."""
    segments = ref.segments
    return len(segments) > 1 and segments[0] in LAYER_NAMES


def find_cycles(graph: dict[str, list[str]]) -> list[list[str]]:
    """
    Find reference cycles with a white/gray/black depth-first search.

    Iterative, so deep chains cannot exhaust the call stack.

    Args:
        graph: Adjacency list of token path to referenced paths

    Returns:
        One path per back edge, closing on its first node
        (e.g. ['a', 'b', 'a'])
    """
    marks: dict[str, _Mark] = {}
    cycles: list[list[str]] = []

    for start in graph:
        if marks.get(start, _Mark.WHITE) != _Mark.WHITE:
            continue

        marks[start] = _Mark.GRAY
        trail = [start]
        stack = [iter(graph.get(start, ()))]

        while stack:
            for target in stack[-1]:
                mark = marks.get(target, _Mark.WHITE)
                if mark == _Mark.GRAY:
                    cycles.append([*trail[trail.index(target) :], target])
                elif mark == _Mark.WHITE:
                    marks[target] = _Mark.GRAY
                    trail.append(target)
                    stack.append(iter(graph.get(target, ())))
                    break
            else:
                marks[trail.pop()] = _Mark.BLACK
                stack.pop()

    return cycles


class ReferenceResolver(Checker):
    """Resolves references across both layers and searches for cycles."""

    name = "references"

    def run(self, corpus: TokenCorpus, result: CheckResult) -> None:
        scan = self.check_references(
            corpus.semantic,
            corpus.primitive_index,
            corpus.semantic_index,
            result,
        )
        self._check_primitive_literals(corpus.primitive, result)
        self._check_cycles(scan, result)

    def check_references(
        self,
        semantic_tokens: list[Token],
        primitive_index: set[str],
        semantic_index: set[str],
        result: CheckResult,
    ) -> ReferenceScan:
        """
        Verify every reference held by semantic tokens.

        Values are walked into composite fields, and the `$extensions`
        side-channel is walked the same way.

        Args:
            semantic_tokens: Tokens whose references are checked
            primitive_index: Dot-joined primitive token paths
            semantic_index: Dot-joined semantic token paths
            result: Where findings go

        Returns:
            ReferenceScan with distinct references and the resolved graph
        """
        scan = ReferenceScan()

        def visit(token: Token) -> None:
            for ref in token.references():
                scan.references.add(ref.path)

                if is_layer_qualified(ref):
                    result.add_critical(
                        "LAYER_QUALIFIED_REFERENCE",
                        f'Reference "{ref.raw}" includes layer prefix. '
                        f'Use "{{{ref.path.split(".", 1)[1]}}}" not "{ref.raw}"',
                        token.dotted,
                    )
                    scan.invalid += 1
                elif ref.path not in primitive_index and ref.path not in semantic_index:
                    result.add_critical(
                        "DANGLING_REFERENCE",
                        f'Reference "{ref.raw}" points to non-existent token',
                        token.dotted,
                    )
                    scan.invalid += 1
                else:
                    scan.add_edge(token.dotted, ref.path)

        self.each_token(semantic_tokens, result, visit)

        result.count("references", len(scan.references))
        result.count("invalid_references", scan.invalid)
        if scan.invalid == 0:
            result.add_pass(
                "REFERENCES_VALID",
                f"All {len(scan.references)} token references are valid",
            )

        logger.debug(f"Resolved {len(scan.references)} distinct references")
        return scan

    def _check_primitive_literals(self, primitive_tokens: list[Token], result: CheckResult) -> None:
        def visit(token: Token) -> None:
            refs = list(token.value.references())
            if refs:
                result.add_critical(
                    "PRIMITIVE_REFERENCE",
                    f"Primitive token references {', '.join(r.raw for r in refs)}. "
                    "Primitives must hold literal values",
                    token.dotted,
                )

        self.each_token(primitive_tokens, result, visit)

    def _check_cycles(self, scan: ReferenceScan, result: CheckResult) -> None:
        cycles = find_cycles(scan.graph)
        for cycle in cycles:
            result.add_critical(
                "REFERENCE_CYCLE",
                f"Circular reference: {' -> '.join(cycle)}",
                cycle[0],
            )

        if not cycles:
            result.add_pass("NO_CYCLES", "No circular references detected")

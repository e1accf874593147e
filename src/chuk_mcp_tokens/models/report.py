"""
Audit report - findings, per-checker results and the aggregated report.

Each checker fills its own CheckResult; the auditor merges them, in
order, into one AuditReport. The report is only read once every
checker has finished.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from chuk_mcp_tokens.constants import GRADE_EXCELLENT, GRADE_GOOD, Grade

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Classification of a finding."""

    PASS = "pass"  # A check whose domain is clean
    WARNING = "warning"  # Advisory, never blocks a build
    CRITICAL = "critical"  # Violates a hard contract


class Verdict(str, Enum):
    """Production readiness of an audited token set."""

    READY = "ready"
    READY_WITH_WARNINGS = "ready_with_warnings"
    NOT_READY = "not_ready"

    @property
    def label(self) -> str:
        return {
            Verdict.READY: "PRODUCTION READY",
            Verdict.READY_WITH_WARNINGS: "PRODUCTION READY WITH WARNINGS",
            Verdict.NOT_READY: "NOT PRODUCTION READY",
        }[self]


@dataclass(frozen=True)
class Finding:
    """A single audit finding."""

    severity: Severity
    code: str
    message: str
    path: str | None = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "path": self.path,
        }


class CheckResult:
    """Findings and counters produced by one checker."""

    def __init__(self, checker: str = "audit") -> None:
        self.checker = checker
        self.findings: list[Finding] = []
        self.counts: Counter[str] = Counter()

    def add_pass(self, code: str, message: str, path: str | None = None) -> None:
        """Add a pass finding."""
        self.findings.append(Finding(Severity.PASS, code, message, path))

    def add_warning(self, code: str, message: str, path: str | None = None) -> None:
        """Add a warning finding."""
        self.findings.append(Finding(Severity.WARNING, code, message, path))

    def add_critical(self, code: str, message: str, path: str | None = None) -> None:
        """Add a critical finding."""
        self.findings.append(Finding(Severity.CRITICAL, code, message, path))

    def count(self, name: str, amount: int = 1) -> None:
        """Increment a named statistic."""
        self.counts[name] += amount

    @contextmanager
    def guard(self, path: str | None = None) -> Iterator[None]:
        """
        Downgrade an unexpected failure on one token to a critical finding.

        The run carries on with the next token. Without a path the
        failure is attributed to the checker as a whole.
        """
        try:
            yield
        except Exception as e:
            logger.exception(f"{self.checker} check failed on {path or 'corpus'}")
            self.add_critical(
                "CHECK_FAILED",
                f"{self.checker} check failed on unexpected token shape: {e}",
                path,
            )

    def of(self, severity: Severity) -> list[Finding]:
        return [f for f in self.findings if f.severity == severity]

    @property
    def passes(self) -> list[Finding]:
        return self.of(Severity.PASS)

    @property
    def warnings(self) -> list[Finding]:
        return self.of(Severity.WARNING)

    @property
    def criticals(self) -> list[Finding]:
        return self.of(Severity.CRITICAL)

    @property
    def is_valid(self) -> bool:
        """Return True if no critical findings."""
        return not self.criticals

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.findings:
            return f"{self.checker}: no findings"
        return "\n".join(f"[{f.severity.value.upper()}] {f}" for f in self.findings)


@dataclass
class AuditStats:
    """Corpus statistics gathered during an audit."""

    total_tokens: int = 0
    primitive_tokens: int = 0
    semantic_tokens: int = 0
    missing_type: int = 0
    missing_description: int = 0
    invalid_references: int = 0
    references: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_tokens": self.total_tokens,
            "primitive_tokens": self.primitive_tokens,
            "semantic_tokens": self.semantic_tokens,
            "missing_type": self.missing_type,
            "missing_description": self.missing_description,
            "invalid_references": self.invalid_references,
            "references": self.references,
        }


@dataclass
class AuditReport:
    """
    Aggregated result of an audit run.

    Three append-only buckets plus statistics. Score and verdict are
    derived on read.
    """

    passes: list[Finding] = field(default_factory=list)
    warnings: list[Finding] = field(default_factory=list)
    criticals: list[Finding] = field(default_factory=list)
    stats: AuditStats = field(default_factory=AuditStats)

    def merge(self, result: CheckResult) -> None:
        """Append a checker's findings in order and fold in its counters."""
        buckets = {
            Severity.PASS: self.passes,
            Severity.WARNING: self.warnings,
            Severity.CRITICAL: self.criticals,
        }
        for finding in result.findings:
            buckets[finding.severity].append(finding)

        for name, amount in result.counts.items():
            if not hasattr(self.stats, name):
                raise ValueError(f"Unknown statistic: {name}")
            setattr(self.stats, name, getattr(self.stats, name) + amount)

    @property
    def total_checks(self) -> int:
        return len(self.passes) + len(self.warnings) + len(self.criticals)

    @property
    def score(self) -> int:
        """round(100 * passes / all findings); 0 for an empty report."""
        if self.total_checks == 0:
            return 0
        # Half-up rounding; round() would send 0.5 to the even neighbour
        return int(100 * len(self.passes) / self.total_checks + 0.5)

    @property
    def grade(self) -> Grade:
        if self.score >= GRADE_EXCELLENT:
            return "EXCELLENT"
        if self.score >= GRADE_GOOD:
            return "GOOD"
        return "NEEDS WORK"

    @property
    def verdict(self) -> Verdict:
        if self.criticals:
            return Verdict.NOT_READY
        if self.warnings:
            return Verdict.READY_WITH_WARNINGS
        return Verdict.READY

    @property
    def exit_code(self) -> int:
        """0 without critical findings; warnings never affect it."""
        return 1 if self.criticals else 0

    def messages(self, severity: Severity) -> list[str]:
        """Human-readable strings of one bucket."""
        bucket = {
            Severity.PASS: self.passes,
            Severity.WARNING: self.warnings,
            Severity.CRITICAL: self.criticals,
        }[severity]
        return [str(f) for f in bucket]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "grade": self.grade,
            "verdict": self.verdict.value,
            "stats": self.stats.to_dict(),
            "critical": [f.to_dict() for f in self.criticals],
            "warnings": [f.to_dict() for f in self.warnings],
            "pass": [f.to_dict() for f in self.passes],
        }

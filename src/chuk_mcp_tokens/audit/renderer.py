"""
Report renderer - plain-text view of an audit report.

Grouped findings, a statistics block, a score line and a verdict.
ANSI colors are optional.
"""

from __future__ import annotations

from chuk_mcp_tokens.models.report import AuditReport, Verdict

RULE = "=" * 80

ANSI = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
}

GRADE_COLORS = {"EXCELLENT": "green", "GOOD": "yellow", "NEEDS WORK": "red"}
VERDICT_COLORS = {
    Verdict.READY: "green",
    Verdict.READY_WITH_WARNINGS: "yellow",
    Verdict.NOT_READY: "red",
}


class ReportRenderer:
    """Renders an AuditReport as text."""

    def __init__(self, color: bool = False, max_warnings: int = 20):
        """
        Initialize the renderer.

        Args:
            color: Emit ANSI escape codes
            max_warnings: Warnings listed before the rest are summarised
        """
        self.color = color
        self.max_warnings = max_warnings

    def _c(self, text: str, *styles: str) -> str:
        if not self.color:
            return text
        prefix = "".join(ANSI[s] for s in styles)
        return f"{prefix}{text}{ANSI['reset']}"

    def render(self, report: AuditReport) -> str:
        lines: list[str] = [RULE, self._c("AUDIT SUMMARY", "bright", "blue"), RULE, ""]

        stats = report.stats
        lines += [
            self._c("Statistics:", "cyan"),
            f"  Total tokens: {stats.total_tokens}",
            f"  Primitive tokens: {stats.primitive_tokens}",
            f"  Semantic tokens: {stats.semantic_tokens}",
            f"  References: {stats.references}",
            f"  Invalid references: {stats.invalid_references}",
            f"  Missing $type: {stats.missing_type}",
            f"  Missing $description: {stats.missing_description}",
            "",
        ]

        if report.criticals:
            heading = f"✖ CRITICAL ISSUES ({len(report.criticals)}):"
            lines.append(self._c(heading, "red", "bright"))
            lines += [f"  {self._c('✖', 'red')} {f}" for f in report.criticals]
            lines.append("")

        if report.warnings:
            lines.append(self._c(f"⚠ WARNINGS ({len(report.warnings)}):", "yellow", "bright"))
            shown = report.warnings[: self.max_warnings]
            lines += [f"  {self._c('⚠', 'yellow')} {f}" for f in shown]
            hidden = len(report.warnings) - len(shown)
            if hidden > 0:
                lines.append(self._c(f"  ... and {hidden} more warnings", "yellow"))
            lines.append("")

        if report.passes:
            lines.append(self._c(f"✓ PASSING CHECKS ({len(report.passes)}):", "green", "bright"))
            lines += [f"  {self._c('✓', 'green')} {f}" for f in report.passes]
            lines.append("")

        lines += [RULE, self._c("PRODUCTION READINESS SCORE", "bright", "blue"), RULE, ""]
        score_line = f"Score: {report.score}% - {report.grade}"
        lines.append(self._c(score_line, GRADE_COLORS[report.grade], "bright"))
        lines.append("")

        verdict = report.verdict
        lines.append(self._c(verdict.label, VERDICT_COLORS[verdict], "bright"))
        lines.append(f"  {self._explain(report)}")
        lines += ["", RULE]
        return "\n".join(lines)

    @staticmethod
    def _explain(report: AuditReport) -> str:
        if report.verdict == Verdict.READY:
            return "All checks passed! This design token system is ready for production use."
        if report.verdict == Verdict.READY_WITH_WARNINGS:
            return f"No critical issues, but {len(report.warnings)} warnings should be addressed."
        return (
            f"{len(report.criticals)} critical issue(s) must be fixed "
            "before production deployment."
        )


def render_text(report: AuditReport, color: bool = False, max_warnings: int = 20) -> str:
    """Convenience function to render a report."""
    return ReportRenderer(color=color, max_warnings=max_warnings).render(report)

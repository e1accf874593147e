"""
Tests for the auditor, the report and the command line.

Tests cover:
- End-to-end audits of small token sets
- Score, grade and verdict
- Failure isolation per token
- Text rendering
- CLI exit codes
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_tokens.audit import Checker, TokenAuditor, audit_tokens, render_text
from chuk_mcp_tokens.cli import main
from chuk_mcp_tokens.constants import Layer
from chuk_mcp_tokens.models import (
    AuditReport,
    CheckResult,
    Finding,
    Severity,
    Verdict,
)
from chuk_mcp_tokens.tokens import TokenCorpus, TokenLoadError


def codes(findings):
    return [f.code for f in findings]


def report_with(passes: int, warnings: int = 0, criticals: int = 0) -> AuditReport:
    """Build a report holding the given number of findings."""
    result = CheckResult()
    for i in range(passes):
        result.add_pass("P", f"pass {i}")
    for i in range(warnings):
        result.add_warning("W", f"warning {i}")
    for i in range(criticals):
        result.add_critical("C", f"critical {i}")
    report = AuditReport()
    report.merge(result)
    return report


class TestAuditScenarios:
    """End-to-end audits."""

    def test_clean_token_set(self, brand_trees, bare_config):
        """One primitive and one semantic token referencing it."""
        report = audit_tokens(*brand_trees, config=bare_config)

        assert report.criticals == []
        assert report.warnings == []
        assert report.score == 100
        assert report.grade == "EXCELLENT"
        assert report.verdict == Verdict.READY
        assert report.exit_code == 0

    def test_layer_qualified_reference(self, brand_trees, bare_config, token):
        """Exactly one critical and a failing exit code."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["primary"] = token(
            "{primitive.color.brand.600}",
            description="Fill color for primary action buttons",
        )

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert codes(report.criticals) == ["LAYER_QUALIFIED_REFERENCE"]
        assert report.verdict == Verdict.NOT_READY
        assert report.exit_code == 1
        assert report.stats.invalid_references == 1

    def test_string_dimension(self, brand_trees, bare_config, token):
        """A string-formatted dimension is exactly one critical."""
        primitive, semantic = brand_trees
        primitive["spacing"] = {"md": token("16px", type_="dimension")}

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert codes(report.criticals) == ["DIMENSION_STRING_FORMAT"]
        assert report.criticals[0].path == "spacing.md"
        assert "VALUE_FORMATS" not in codes(report.passes)

    def test_font_weight_token(self, brand_trees, bare_config, token):
        """A fontWeight token off the 100 step is a warning wherever it lives."""
        primitive, semantic = brand_trees
        primitive["typeface"] = {"medium": token(450, type_="fontWeight")}

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert report.criticals == []
        assert "NUMBER_RANGE" in codes(report.warnings)

    def test_reference_with_trailing_newline(self, brand_trees, bare_config, token):
        """A reference followed by a newline is a literal string, not a reference."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["primary"] = token("{color.brand.600}\n")

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert "COLOR_STRING_FORMAT" in codes(report.criticals)
        assert "DANGLING_REFERENCE" not in codes(report.criticals)

    def test_missing_type(self, brand_trees, bare_config, token):
        """A token without $type is critical and its value is not validated."""
        primitive, semantic = brand_trees
        primitive["spacing"] = {"md": token({"value": 16, "unit": "px"}, type_=None)}

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert codes(report.criticals) == ["MISSING_TYPE"]
        assert report.stats.missing_type == 1
        assert "VALUE_FORMATS" in codes(report.passes)

    def test_warnings_only(self, brand_trees, bare_config):
        """Warnings alone leave the set production ready."""
        config = bare_config.model_copy(update={"anchor_tokens": ["color.white"]})
        report = audit_tokens(*brand_trees, config=config)

        assert report.criticals == []
        assert codes(report.warnings) == ["MISSING_ANCHOR"]
        assert report.verdict == Verdict.READY_WITH_WARNINGS
        assert report.exit_code == 0

    def test_stats(self, brand_trees, bare_config, token):
        """Statistics are gathered across both layers."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["secondary"] = token("{color.brand.600}", description=None)

        report = audit_tokens(primitive, semantic, config=bare_config)
        assert report.stats.total_tokens == 3
        assert report.stats.primitive_tokens == 1
        assert report.stats.semantic_tokens == 2
        assert report.stats.references == 1
        assert report.stats.missing_description == 1

    def test_idempotent(self, brand_trees):
        """Auditing the same input twice gives the same report."""
        auditor = TokenAuditor()
        first = auditor.audit_trees(*brand_trees)
        second = auditor.audit_trees(*brand_trees)
        assert first.to_dict() == second.to_dict()

    def test_checker_order(self, brand_trees, bare_config):
        """Findings keep checker order within each bucket."""
        report = audit_tokens(*brand_trees, config=bare_config)
        assert codes(report.passes)[:4] == [
            "TYPES_DECLARED",
            "VALUE_FORMATS",
            "REFERENCES_VALID",
            "NO_CYCLES",
        ]

    def test_default_config_flags_gaps(self, brand_trees):
        """The house defaults expect a much larger token set."""
        report = TokenAuditor().audit_trees(*brand_trees)
        assert "MISSING_ESSENTIAL" in codes(report.warnings)
        assert "INCOMPLETE_SCALE" in codes(report.warnings)
        assert "MISSING_ANCHOR" in codes(report.warnings)
        assert report.criticals == []

    def test_trees_must_be_mappings(self):
        """Parsed documents must have a mapping at the root."""
        with pytest.raises(TokenLoadError):
            TokenAuditor().audit_trees([], {})

    def test_audit_files(self, write_json, brand_trees, bare_config):
        """Documents are loaded from explicit paths."""
        primitive = write_json("primitive.json", brand_trees[0])
        semantic = write_json("semantic.json", brand_trees[1])
        report = TokenAuditor(bare_config).audit_files(primitive, semantic)
        assert report.score == 100


class TestScore:
    """Tests for score, grade and verdict."""

    def test_empty_report(self):
        """A report with no findings scores zero."""
        report = AuditReport()
        assert report.score == 0
        assert report.verdict == Verdict.READY

    @pytest.mark.parametrize(
        "passes,warnings,score",
        [(1, 1, 50), (2, 1, 67), (1, 2, 33), (1, 7, 13), (3, 5, 38), (0, 3, 0)],
    )
    def test_rounding(self, passes, warnings, score):
        """Halves round up."""
        assert report_with(passes, warnings).score == score

    @pytest.mark.parametrize(
        "passes,warnings,grade",
        [(17, 3, "EXCELLENT"), (84, 16, "GOOD"), (7, 3, "GOOD"), (69, 31, "NEEDS WORK")],
    )
    def test_grade(self, passes, warnings, grade):
        """Grades follow the score thresholds."""
        assert report_with(passes, warnings).grade == grade

    def test_criticals_decide_verdict(self):
        """Any critical finding makes the set not ready."""
        report = report_with(99, 0, 1)
        assert report.score == 99
        assert report.verdict == Verdict.NOT_READY
        assert report.verdict.label == "NOT PRODUCTION READY"

    def test_merge_unknown_statistic(self):
        """Counters without a matching statistic are rejected."""
        result = CheckResult()
        result.count("bogus")
        with pytest.raises(ValueError, match="Unknown statistic"):
            AuditReport().merge(result)

    def test_messages(self):
        """Messages are prefixed with the token path when there is one."""
        report = AuditReport()
        result = CheckResult()
        result.add_warning("W", "Missing $description property", "color.white")
        result.add_warning("W", "No interactive states found.")
        report.merge(result)
        assert report.messages(Severity.WARNING) == [
            "color.white: Missing $description property",
            "No interactive states found.",
        ]

    def test_to_dict(self):
        """The JSON form carries score, verdict and findings."""
        data = report_with(1, 1).to_dict()
        assert data["score"] == 50
        assert data["verdict"] == "ready_with_warnings"
        assert data["warnings"][0]["severity"] == "warning"


class TestFailureIsolation:
    """An unexpected failure on one token does not stop the run."""

    class Fragile(Checker):
        name = "fragile"

        def run(self, corpus, result):
            def visit(token):
                if token.layer == Layer.PRIMITIVE:
                    raise KeyError("boom")
                result.add_pass("VISITED", "visited", token.dotted)

            self.each_token(corpus.tokens(), result, visit)

    def test_per_token_guard(self, brand_trees):
        """A failing token becomes a critical and the rest are still visited."""
        result = self.Fragile().check(TokenCorpus.from_trees(*brand_trees))

        assert codes(result.criticals) == ["CHECK_FAILED"]
        assert result.criticals[0].path == "color.brand.600"
        assert [f.path for f in result.passes] == ["color.action.primary"]

    def test_whole_checker_guard(self, brand_trees):
        """A failing checker becomes a single critical without a path."""
        class Broken(Checker):
            name = "broken"

            def run(self, corpus, result):
                raise RuntimeError("unexpected")

        result = Broken().check(TokenCorpus.from_trees(*brand_trees))
        assert codes(result.criticals) == ["CHECK_FAILED"]
        assert result.criticals[0].path is None
        assert "broken check failed" in result.criticals[0].message

    def test_finding_str(self):
        """Findings render as path and message."""
        assert str(Finding(Severity.CRITICAL, "X", "Broken", "a.b")) == "a.b: Broken"
        assert str(Finding(Severity.PASS, "X", "Fine")) == "Fine"


class TestRenderer:
    """Tests for text output."""

    def test_ready(self, brand_trees, bare_config):
        """A clean report shows the full score and a ready verdict."""
        text = render_text(audit_tokens(*brand_trees, config=bare_config))
        assert "Score: 100% - EXCELLENT" in text
        assert "PRODUCTION READY" in text
        assert "All checks passed!" in text
        assert "\x1b[" not in text

    def test_not_ready(self):
        """Critical findings are listed with a not-ready verdict."""
        text = render_text(report_with(1, 0, 2))
        assert "✖ CRITICAL ISSUES (2):" in text
        assert "NOT PRODUCTION READY" in text
        assert "2 critical issue(s) must be fixed" in text

    def test_warnings_truncated(self):
        """Warnings beyond the limit are summarised."""
        text = render_text(report_with(1, 5), max_warnings=2)
        assert "⚠ WARNINGS (5):" in text
        assert "... and 3 more warnings" in text
        assert "warning 2" not in text

    def test_color(self):
        """ANSI codes are emitted when color is on."""
        assert "\x1b[" in render_text(report_with(1), color=True)


class TestCli:
    """Tests for the command-line entry point."""

    @pytest.fixture
    def config_file(self, temp_dir: Path, bare_config) -> Path:
        path = temp_dir / "tokens-audit.yaml"
        path.write_text(bare_config.to_yaml())
        return path

    def run(self, primitive: Path, semantic: Path, *extra: str) -> int:
        return main(["--primitive", str(primitive), "--semantic", str(semantic), *extra])

    def test_clean_exits_zero(self, write_json, brand_trees, config_file, capsys):
        """A clean audit exits with 0."""
        primitive = write_json("primitive.json", brand_trees[0])
        semantic = write_json("semantic.json", brand_trees[1])

        assert self.run(primitive, semantic, "--config", str(config_file), "--no-color") == 0
        assert "Score: 100%" in capsys.readouterr().out

    def test_criticals_exit_one(self, write_json, brand_trees, config_file, token):
        """Critical findings exit with 1."""
        primitive, semantic = brand_trees
        primitive["spacing"] = {"md": token("16px", type_="dimension")}

        assert (
            self.run(
                write_json("primitive.json", primitive),
                write_json("semantic.json", semantic),
                "--config",
                str(config_file),
            )
            == 1
        )

    def test_warnings_exit_zero(self, write_json, brand_trees):
        """Default rules raise warnings only for this set."""
        primitive = write_json("primitive.json", brand_trees[0])
        semantic = write_json("semantic.json", brand_trees[1])
        assert self.run(primitive, semantic) == 0

    def test_missing_file_exits_two(self, temp_dir: Path, capsys):
        """A missing document exits with 2."""
        code = self.run(temp_dir / "missing.json", temp_dir / "semantic.json")
        assert code == 2
        assert "Failed to load token files" in capsys.readouterr().err

    def test_bad_config_exits_two(self, write_json, brand_trees, temp_dir: Path):
        """An invalid config exits with 2."""
        primitive = write_json("primitive.json", brand_trees[0])
        semantic = write_json("semantic.json", brand_trees[1])
        bad = temp_dir / "bad.yaml"
        bad.write_text("max_depth: 0\n")
        assert self.run(primitive, semantic, "--config", str(bad)) == 2

    def test_json_output(self, write_json, brand_trees, config_file, capsys):
        """--json prints the report as JSON."""
        primitive = write_json("primitive.json", brand_trees[0])
        semantic = write_json("semantic.json", brand_trees[1])

        self.run(primitive, semantic, "--config", str(config_file), "--json")
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 100
        assert data["verdict"] == "ready"
        assert data["stats"]["total_tokens"] == 2

"""
Tests for the quality checker.
"""

import pytest

from chuk_mcp_tokens.audit import QualityChecker
from chuk_mcp_tokens.tokens import TokenCorpus


def codes(findings):
    return [f.code for f in findings]


@pytest.fixture
def check(bare_config):
    """Run the quality checker with config overrides."""

    def run(primitive, semantic=None, **overrides):
        config = bare_config.model_copy(update=overrides)
        corpus = TokenCorpus.from_trees(primitive, semantic or {})
        return QualityChecker(config).check(corpus)

    return run


class TestDescriptions:
    """Tests for $description heuristics."""

    def test_clean(self, check, brand_trees):
        """Specific descriptions and one type per group pass."""
        result = check(*brand_trees)
        assert result.warnings == []
        assert codes(result.passes) == [
            "DESCRIPTIONS_PRESENT",
            "DESCRIPTIONS_SPECIFIC",
            "CONSISTENT_TYPES",
        ]

    def test_missing(self, check, token):
        """A token without $description is a warning."""
        result = check({"color": {"white": token(1, description=None)}})
        assert codes(result.warnings) == ["MISSING_DESCRIPTION"]
        assert result.counts["missing_description"] == 1

    def test_empty_counts_as_missing(self, check, token):
        """An empty string is treated as missing."""
        result = check({"color": {"white": token(1, description="")}})
        assert codes(result.warnings) == ["MISSING_DESCRIPTION"]

    def test_not_a_string(self, check, token):
        """A non-string description is a warning and counts as missing."""
        result = check({"color": {"white": token(1, description=["Pure", "white"])}})
        assert codes(result.warnings) == ["DESCRIPTION_TYPE"]
        assert result.counts["missing_description"] == 1

    def test_short(self, check, token):
        """Descriptions under the minimum length are a warning."""
        result = check({"color": {"white": token(1, description="White")}})
        assert codes(result.warnings) == ["SHORT_DESCRIPTION"]
        assert "DESCRIPTIONS_PRESENT" in codes(result.passes)

    def test_generic(self, check, token):
        """Descriptions starting with a generic word are a warning."""
        result = check({"color": {"white": token(1, description="Color for text")}})
        assert codes(result.warnings) == ["GENERIC_DESCRIPTION"]

    def test_short_and_generic(self, check, token):
        """A description can be both short and generic."""
        result = check({"color": {"white": token(1, description="token")}})
        assert codes(result.warnings) == ["SHORT_DESCRIPTION", "GENERIC_DESCRIPTION"]

    @pytest.mark.parametrize(
        "description,generic",
        [
            ("Color", True),
            ("color. white", True),
            ("Value of gap", True),
            ("Colorful accent", False),
            ("Color used for every primary action", False),
        ],
    )
    def test_is_generic(self, bare_config, description, generic):
        """Generic wording is only flagged in short descriptions."""
        assert QualityChecker(bare_config).is_generic(description) is generic


class TestTypeHomogeneity:
    """Tests for per-group type consistency."""

    def test_mixed_types(self, check, token):
        """Two kinds in one primitive group are a warning."""
        primitive = {
            "spacing": {
                "sm": token({"value": 4, "unit": "px"}, type_="dimension"),
                "md": token(8, type_="number"),
            }
        }
        result = check(primitive)
        assert codes(result.warnings) == ["MIXED_TYPES"]
        assert "dimension, number" in result.warnings[0].message

    def test_missing_types_ignored(self, check, token):
        """Tokens without $type do not count as a kind."""
        primitive = {"spacing": {"sm": token(4, type_="number"), "md": token(8, type_=None)}}
        result = check(primitive)
        assert "CONSISTENT_TYPES" in codes(result.passes)

    def test_semantic_layer_not_checked(self, check, brand_trees, token):
        """Only primitive groups are checked."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["size"] = token(
            "{spacing.md}", type_="dimension", description="Size of action affordances"
        )
        result = check(primitive, semantic)
        assert result.warnings == []


class TestAccessibility:
    """Tests for contrast metadata."""

    def test_present(self, check, brand_trees, token):
        """Contrast metadata on any semantic token passes."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["primary"] = token(
            "{color.brand.600}",
            description="Fill color for primary action buttons",
            extensions={"contrast": {"ratio": 4.8}},
        )
        result = check(primitive, semantic, require_contrast_metadata=True)
        assert "ACCESSIBILITY_METADATA" in codes(result.passes)

    def test_absent(self, check, brand_trees):
        """No contrast metadata is a warning."""
        result = check(*brand_trees, require_contrast_metadata=True)
        assert codes(result.warnings) == ["NO_ACCESSIBILITY_METADATA"]

    def test_custom_key(self, check, brand_trees, token):
        """The extensions key is configurable."""
        primitive, semantic = brand_trees
        semantic["color"]["action"]["primary"] = token(
            "{color.brand.600}",
            description="Fill color for primary action buttons",
            extensions={"wcag": {"level": "AA"}},
        )
        result = check(primitive, semantic, require_contrast_metadata=True, contrast_key="wcag")
        assert codes(result.warnings) == []

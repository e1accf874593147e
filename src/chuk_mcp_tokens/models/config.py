"""
Audit configuration - the tunable rules of an audit run.

Defaults reproduce the house conventions: four-level paths, twelve-step
color ramps, HSL colors and px/em dimensions. Any field can be
overridden from a YAML file.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from chuk_mcp_tokens.constants import (
    DEFAULT_ANCHOR_TOKENS,
    DEFAULT_ESSENTIAL_PATTERNS,
    DEFAULT_REQUIRED_STATES,
    DEFAULT_SCALE,
    DEFAULT_SCALE_CATEGORIES,
    STATE_NAMES,
)


class StateDepthPolicy(str, Enum):
    """How paths ending in a state name are treated by the depth rule."""

    ALLOW = "allow"  # No depth warning within the tolerance
    ADVISORY = "advisory"  # Softer, distinct warning within the tolerance
    STRICT = "strict"  # No tolerance at all


class NumberRange(BaseModel):
    """Plausible range for numbers under one top-level group."""

    minimum: float = Field(..., description="Inclusive lower bound")
    maximum: float = Field(..., description="Inclusive upper bound")
    step: float | None = Field(None, description="Values must be multiples of this")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> NumberRange:
        """Ensure bounds are ordered."""
        if self.minimum > self.maximum:
            raise ValueError(f"minimum {self.minimum} exceeds maximum {self.maximum}")
        return self

    def contains(self, value: float) -> bool:
        """Check a value against the bounds and the step."""
        if not self.minimum <= value <= self.maximum:
            return False
        if self.step:
            return value % self.step == 0
        return True

    def describe(self) -> str:
        span = f"{self.minimum:g}-{self.maximum:g}"
        return f"{span} in increments of {self.step:g}" if self.step else span


def _default_number_ranges() -> dict[str, NumberRange]:
    return {
        "opacity": NumberRange(minimum=0, maximum=1),
        "lineHeight": NumberRange(minimum=0.5, maximum=3),
        "fontWeight": NumberRange(minimum=100, maximum=900, step=100),
    }


class AuditConfig(BaseModel):
    """Rules applied by every checker of an audit run."""

    # Structure
    max_depth: int = Field(4, ge=1, description="Maximum path length")
    state_depth_tolerance: int = Field(
        1, ge=0, description="Extra segments allowed for state-suffixed paths"
    )
    state_depth_policy: StateDepthPolicy = Field(StateDepthPolicy.ALLOW)
    state_names: list[str] = Field(default_factory=lambda: list(STATE_NAMES))
    state_path_length: int = Field(4, ge=1, description="Expected length of state-suffixed paths")

    # Values
    recommended_units: list[str] = Field(default_factory=lambda: ["px", "em"])
    number_ranges: dict[str, NumberRange] = Field(default_factory=_default_number_ranges)
    typography_recommended: list[str] = Field(
        default_factory=lambda: [
            "fontFamily",
            "fontSize",
            "fontWeight",
            "lineHeight",
        ]
    )
    shadow_required: list[str] = Field(
        default_factory=lambda: ["offsetX", "offsetY", "blur", "color"]
    )

    # Quality
    min_description_length: int = Field(10, ge=0)
    generic_description_words: list[str] = Field(
        default_factory=lambda: ["color", "token", "value", "style"]
    )
    generic_description_max_length: int = Field(20, ge=0)
    require_contrast_metadata: bool = True
    contrast_key: str = "contrast"

    # Completeness
    essential_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_ESSENTIAL_PATTERNS))
    scale_root: str = "color"
    scale_categories: list[str] = Field(default_factory=lambda: list(DEFAULT_SCALE_CATEGORIES))
    expected_scale: list[str] = Field(default_factory=lambda: list(DEFAULT_SCALE))
    required_states: list[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_STATES))
    anchor_tokens: list[str] = Field(default_factory=lambda: list(DEFAULT_ANCHOR_TOKENS))

    model_config = {"frozen": True}

    @property
    def extended_depth(self) -> int:
        """Depth allowed for state-suffixed paths."""
        if self.state_depth_policy == StateDepthPolicy.STRICT:
            return self.max_depth
        return self.max_depth + self.state_depth_tolerance

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AuditConfig:
        """
        Build a config from a plain mapping.

        Raises:
            ValueError: If the mapping has invalid fields
        """
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ValueError(f"Invalid audit configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: Path) -> AuditConfig:
        """
        Load a config from a YAML file.

        Raises:
            ValueError: If the file is missing or malformed
        """
        if not path.exists():
            raise ValueError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse config file {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)

    def to_yaml(self) -> str:
        """Serialize to YAML."""
        return yaml.dump(self.model_dump(mode="json"), default_flow_style=False, sort_keys=False)

"""
Constants and enums for the token audit system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Layer(str, Enum):
    """
    The two token layers.

    A token's layer comes from the document it was loaded from,
    never from its path.
    """

    PRIMITIVE = "primitive"  # Raw values, no references
    SEMANTIC = "semantic"  # Values that reference other tokens


class TokenKind(str, Enum):
    """Declared value kinds ($type) known to the validators."""

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    NUMBER = "number"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER = "border"
    TRANSITION = "transition"
    GRADIENT = "gradient"
    UNKNOWN = "unknown"  # Pass-through for kinds without a validator

    @classmethod
    def from_declared(cls, declared: str | None) -> "TokenKind":
        """Map a declared $type string to a kind, UNKNOWN if unrecognised."""
        for kind in cls:
            if kind.value == declared and kind is not cls.UNKNOWN:
                return kind
        return cls.UNKNOWN


# Reserved field prefix and the value-holding field
METADATA_PREFIX = "$"
VALUE_KEY = "$value"
TYPE_KEY = "$type"
DESCRIPTION_KEY = "$description"
EXTENSIONS_KEY = "$extensions"

# Reference delimiters and path separator
REFERENCE_OPEN = "{"
REFERENCE_CLOSE = "}"
PATH_SEPARATOR = "."

LAYER_NAMES: tuple[str, ...] = tuple(layer.value for layer in Layer)

# Interactive state names recognised at the end of a path
STATE_NAMES: tuple[str, ...] = (
    "default",
    "hover",
    "pressed",
    "active",
    "focus",
    "disabled",
    "visited",
    "selected",
)

# Twelve-step color ramp
DEFAULT_SCALE: tuple[str, ...] = (
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "1000",
    "1100",
    "1200",
)

DEFAULT_SCALE_CATEGORIES: tuple[str, ...] = (
    "primary",
    "secondary",
    "neutral",
    "success",
    "warning",
    "error",
)

DEFAULT_ESSENTIAL_PATTERNS: tuple[str, ...] = (
    "color.text.neutral.base.default",
    "color.background.neutral.base.default",
    "color.border.neutral.base.default",
    "typography.body.md.default",
    "typography.heading",
)

DEFAULT_ANCHOR_TOKENS: tuple[str, ...] = ("color.white", "color.black")

DEFAULT_REQUIRED_STATES: tuple[str, ...] = ("default", "hover", "pressed")

# Score grade thresholds
GRADE_EXCELLENT = 85
GRADE_GOOD = 70

Grade = Literal["EXCELLENT", "GOOD", "NEEDS WORK"]


class ErrorMessages:
    """Standardized error messages."""

    FILE_NOT_FOUND = "Token file not found: {path}"
    PARSE_FAILED = "Failed to parse token file {path}: {error}"
    ROOT_NOT_MAPPING = "Token file {path} must contain a mapping at its root, got {type_name}"
    UNSUPPORTED_FORMAT = "Unsupported token file format: {suffix}"
    INVALID_LAYER = "Invalid layer: '{layer}'. Expected 'primitive' or 'semantic'."
    TOKEN_NOT_FOUND = "Token '{path}' not found."

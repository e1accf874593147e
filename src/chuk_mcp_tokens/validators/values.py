"""
Value validators - one shape check per token kind.

Each validator takes the raw (non-reference) value, the dotted token
path for messages, the result to append findings to, and the audit
config. It returns True when the value is well-formed.

Kinds without a registered validator pass through unexamined.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from chuk_mcp_tokens.constants import PATH_SEPARATOR, TokenKind
from chuk_mcp_tokens.models.config import AuditConfig
from chuk_mcp_tokens.models.report import CheckResult
from chuk_mcp_tokens.models.token import CompositeValue, LiteralValue, ReferenceValue

ValueValidator = Callable[[Any, str, CheckResult, AuditConfig], bool]

HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")
COLOR_REQUIRED = ("colorSpace", "components", "alpha", "hex")
COLOR_SPACE = "hsl"

# (name, lower, upper) for each HSL component
HSL_RANGES = (("Hue", 0, 360), ("Saturation", 0, 100), ("Lightness", 0, 100))


def is_number(value: Any) -> bool:
    """Finite numeric literal; booleans don't count."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def validate_color(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Color must be an HSL object with components, alpha and hex."""
    if isinstance(value, str):
        result.add_critical(
            "COLOR_STRING_FORMAT",
            f'Color uses string format ("{value}"). Must use HSL object format',
            path,
        )
        return False

    if not isinstance(value, dict):
        result.add_critical("INVALID_COLOR", "Invalid color value format", path)
        return False

    missing = [prop for prop in COLOR_REQUIRED if prop not in value]
    if missing:
        result.add_critical(
            "COLOR_MISSING_PROPERTIES",
            f"Missing required color properties: {', '.join(missing)}",
            path,
        )
        return False

    if value["colorSpace"] != COLOR_SPACE:
        result.add_critical(
            "COLOR_SPACE",
            f'colorSpace must be "{COLOR_SPACE}", got "{value["colorSpace"]}"',
            path,
        )
        return False

    components = value["components"]
    if not isinstance(components, list) or len(components) != 3:
        result.add_critical(
            "COLOR_COMPONENTS",
            "components must be array of 3 numbers [H, S, L]",
            path,
        )
        return False

    if not all(is_number(c) for c in components):
        result.add_critical("COLOR_COMPONENTS", "components must all be numbers", path)
        return False

    for component, (name, lower, upper) in zip(components, HSL_RANGES):
        if not lower <= component <= upper:
            result.add_warning(
                "COLOR_COMPONENT_RANGE",
                f"{name} value {component} outside expected range {lower}-{upper}",
                path,
            )

    alpha = value["alpha"]
    if not is_number(alpha) or not 0 <= alpha <= 1:
        result.add_critical(
            "COLOR_ALPHA",
            f"alpha must be number between 0 and 1, got {alpha}",
            path,
        )
        return False

    hex_value = value["hex"]
    if not isinstance(hex_value, str) or not HEX_PATTERN.fullmatch(hex_value):
        result.add_critical(
            "COLOR_HEX",
            f'hex must be valid 6-digit hex color, got "{hex_value}"',
            path,
        )
        return False

    return True


def validate_dimension(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Dimension must be a {value, unit} object."""
    if isinstance(value, str):
        result.add_critical(
            "DIMENSION_STRING_FORMAT",
            f'Dimension uses string format ("{value}"). Must use {{value, unit}} object',
            path,
        )
        return False

    if not isinstance(value, dict):
        result.add_critical("INVALID_DIMENSION", "Invalid dimension value format", path)
        return False

    if "value" not in value or "unit" not in value:
        result.add_critical(
            "DIMENSION_MISSING_PROPERTIES",
            "Dimension must have both 'value' and 'unit' properties",
            path,
        )
        return False

    if not is_number(value["value"]):
        result.add_critical(
            "DIMENSION_VALUE",
            f"Dimension 'value' must be a number, got {type(value['value']).__name__}",
            path,
        )
        return False

    unit = value["unit"]
    if not isinstance(unit, str):
        result.add_critical(
            "DIMENSION_UNIT",
            f"Dimension 'unit' must be a string, got {type(unit).__name__}",
            path,
        )
        return False

    if unit not in config.recommended_units:
        result.add_warning(
            "DIMENSION_UNIT_UNEXPECTED",
            f'Unexpected unit "{unit}". Expected one of: {", ".join(config.recommended_units)}',
            path,
        )

    return True


def validate_font_family(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Font family must be an ordered list of font names."""
    if not isinstance(value, list):
        result.add_critical("FONT_FAMILY_FORMAT", "fontFamily must be an array of font names", path)
        return False

    if not all(isinstance(name, str) for name in value):
        result.add_critical("FONT_FAMILY_FORMAT", "fontFamily entries must be strings", path)
        return False

    return True


def _describe(value: Any) -> str:
    return repr(value) if isinstance(value, float) else type(value).__name__


def _check_range(
    value: float, group: str, path: str, result: CheckResult, config: AuditConfig
) -> None:
    number_range = config.number_ranges.get(group)
    if number_range is not None and not number_range.contains(value):
        result.add_warning(
            "NUMBER_RANGE",
            f"{group} should be {number_range.describe()}, got {value}",
            path,
        )


def validate_number(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Number must be numeric; some groups also have a plausible range."""
    if not is_number(value):
        result.add_critical(
            "NUMBER_FORMAT",
            f"Type is 'number' but value is {_describe(value)}",
            path,
        )
        return False

    _check_range(value, path.split(PATH_SEPARATOR, 1)[0], path, result, config)
    return True


def validate_font_weight(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Font weight must be numeric and within the fontWeight range, wherever it lives."""
    if not is_number(value):
        result.add_critical(
            "FONT_WEIGHT_FORMAT",
            f"fontWeight must be a number, got {_describe(value)}",
            path,
        )
        return False

    _check_range(value, TokenKind.FONT_WEIGHT.value, path, result, config)
    return True


def validate_typography(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Typography must be an object; recommended sub-properties are advisory."""
    if not isinstance(value, dict):
        result.add_critical("TYPOGRAPHY_FORMAT", "Typography value must be an object", path)
        return False

    missing = [prop for prop in config.typography_recommended if prop not in value]
    if missing:
        result.add_warning(
            "TYPOGRAPHY_INCOMPLETE",
            f"Typography missing recommended properties: {', '.join(missing)}",
            path,
        )

    return True


def validate_shadow(value: Any, path: str, result: CheckResult, config: AuditConfig) -> bool:
    """Shadow must be an object or a list of objects with offsets, blur and color."""
    if not isinstance(value, (dict, list)):
        result.add_critical("SHADOW_FORMAT", "Shadow value must be an object", path)
        return False

    shadows = value if isinstance(value, list) else [value]
    if not shadows:
        result.add_critical("SHADOW_FORMAT", "Shadow list must not be empty", path)
        return False

    for index, shadow in enumerate(shadows):
        if not isinstance(shadow, dict):
            result.add_critical("SHADOW_FORMAT", f"Shadow layer {index} must be an object", path)
            return False

        missing = [prop for prop in config.shadow_required if prop not in shadow]
        if missing:
            result.add_critical(
                "SHADOW_MISSING_PROPERTIES",
                f"Shadow missing required properties: {', '.join(missing)}",
                path,
            )
            return False

    return True


VALUE_VALIDATORS: dict[TokenKind, ValueValidator] = {
    TokenKind.COLOR: validate_color,
    TokenKind.DIMENSION: validate_dimension,
    TokenKind.FONT_FAMILY: validate_font_family,
    TokenKind.FONT_WEIGHT: validate_font_weight,
    TokenKind.NUMBER: validate_number,
    TokenKind.TYPOGRAPHY: validate_typography,
    TokenKind.SHADOW: validate_shadow,
}


def validate_value(
    value: LiteralValue | ReferenceValue | CompositeValue,
    kind: TokenKind,
    path: str,
    result: CheckResult,
    config: AuditConfig | None = None,
) -> bool:
    """
    Validate a parsed token value against its kind.

    References are left to the reference resolver and unknown kinds
    pass through.

    Returns:
        True if the value is well-formed or not examined
    """
    if isinstance(value, ReferenceValue):
        return True

    validator = VALUE_VALIDATORS.get(kind)
    if validator is None:
        return True

    return validator(value.raw, path, result, config or AuditConfig())

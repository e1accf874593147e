"""
Value validators - per-kind shape checks for token values.
"""

from chuk_mcp_tokens.validators.values import (
    VALUE_VALIDATORS,
    ValueValidator,
    is_number,
    validate_color,
    validate_dimension,
    validate_font_family,
    validate_font_weight,
    validate_number,
    validate_shadow,
    validate_typography,
    validate_value,
)

__all__ = [
    "VALUE_VALIDATORS",
    "ValueValidator",
    "is_number",
    "validate_color",
    "validate_dimension",
    "validate_font_family",
    "validate_font_weight",
    "validate_number",
    "validate_shadow",
    "validate_typography",
    "validate_value",
]

#!/usr/bin/env python3
"""
Example: Audit a small design token set.

Builds a primitive and a semantic token tree in memory, audits them
and prints the report.

Usage:
    python examples/audit_tokens.py

The token set deliberately contains two problems:
1. A reference that spells out its layer (`{primitive.color.blue.700}`)
2. A dimension written as a string ("16px")
"""

from chuk_mcp_tokens import AuditConfig, audit_tokens, render_text


def color(h: float, s: float, lightness: float, hex_value: str) -> dict:
    return {
        "$type": "color",
        "$value": {
            "colorSpace": "hsl",
            "components": [h, s, lightness],
            "alpha": 1,
            "hex": hex_value,
        },
        "$description": f"HSL {h} {s}% {lightness}% swatch",
    }


PRIMITIVE = {
    "color": {
        "white": color(0, 0, 100, "#FFFFFF"),
        "black": color(0, 0, 0, "#000000"),
        "blue": {
            "600": color(214, 82, 51, "#1A73E8"),
            "700": color(214, 82, 43, "#1558B0"),
        },
    },
    "spacing": {
        "md": {
            "$type": "dimension",
            "$value": "16px",
            "$description": "Default gap between related controls",
        }
    },
}

SEMANTIC = {
    "color": {
        "action": {
            "primary": {
                "default": {
                    "$type": "color",
                    "$value": "{color.blue.600}",
                    "$description": "Fill of primary buttons at rest",
                    "$extensions": {"contrast": {"background": "{color.white}", "ratio": 4.8}},
                },
                "hover": {
                    "$type": "color",
                    "$value": "{primitive.color.blue.700}",
                    "$description": "Fill of primary buttons under the pointer",
                },
            }
        }
    }
}


def main() -> None:
    """Audit the in-memory token set."""
    config = AuditConfig(scale_categories=[], essential_patterns=["color.action.primary"])
    report = audit_tokens(PRIMITIVE, SEMANTIC, config=config)

    print(render_text(report, max_warnings=10))
    print()
    print(f"Exit code: {report.exit_code}")


if __name__ == "__main__":
    main()

"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.models import AuditConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def color_value() -> Callable[..., dict[str, Any]]:
    """Factory for a well-formed HSL color value."""

    def make(
        h: float = 210,
        s: float = 80,
        lightness: float = 50,
        alpha: float = 1,
        hex_value: str = "#1A73E8",
    ) -> dict[str, Any]:
        return {
            "colorSpace": "hsl",
            "components": [h, s, lightness],
            "alpha": alpha,
            "hex": hex_value,
        }

    return make


@pytest.fixture
def token() -> Callable[..., dict[str, Any]]:
    """Factory for a token node."""

    def make(
        value: Any,
        type_: str | None = "color",
        description: str | None = "Brand blue used for primary actions",
        extensions: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        node: dict[str, Any] = {"$value": value}
        if type_ is not None:
            node["$type"] = type_
        if description is not None:
            node["$description"] = description
        if extensions is not None:
            node["$extensions"] = extensions
        return node

    return make


@pytest.fixture
def bare_config() -> AuditConfig:
    """Config with every completeness and accessibility requirement disabled."""
    return AuditConfig(
        essential_patterns=[],
        scale_categories=[],
        required_states=[],
        anchor_tokens=[],
        require_contrast_metadata=False,
    )


@pytest.fixture
def brand_trees(token, color_value) -> tuple[dict[str, Any], dict[str, Any]]:
    """One primitive brand color and one semantic token referencing it."""
    primitive = {"color": {"brand": {"600": token(color_value())}}}
    semantic = {
        "color": {
            "action": {
                "primary": token(
                    "{color.brand.600}",
                    description="Fill color for primary action buttons",
                )
            }
        }
    }
    return primitive, semantic


@pytest.fixture
def write_json(temp_dir: Path) -> Callable[[str, Any], Path]:
    """Write data as JSON under the temp dir and return its path."""

    def write(name: str, data: Any) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path

    return write

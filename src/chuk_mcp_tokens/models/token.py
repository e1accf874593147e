"""
Token model - the atomic entity of a token tree.

A Token carries:
- Its path (non-metadata key segments from the tree root)
- The layer it was loaded from
- Its declared kind ($type), description and extensions
- Its value, decided once at parse time as a tagged variant:
  LiteralValue | ReferenceValue | CompositeValue

Downstream checkers switch on the variant and never re-sniff strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tokens.constants import (
    DESCRIPTION_KEY,
    EXTENSIONS_KEY,
    METADATA_PREFIX,
    PATH_SEPARATOR,
    REFERENCE_CLOSE,
    REFERENCE_OPEN,
    TYPE_KEY,
    VALUE_KEY,
    Layer,
    TokenKind,
)

REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")

# Kinds whose object values are made of named sub-values
COMPOSITE_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.TYPOGRAPHY,
        TokenKind.SHADOW,
        TokenKind.BORDER,
        TokenKind.TRANSITION,
        TokenKind.GRADIENT,
    }
)


def is_reference(raw: Any) -> bool:
    """Return True if a raw value is a delimited reference string."""
    return isinstance(raw, str) and REFERENCE_PATTERN.fullmatch(raw) is not None


def join_path(segments: tuple[str, ...] | list[str]) -> str:
    """Join path segments into the canonical dotted form."""
    return PATH_SEPARATOR.join(segments)


class LiteralValue(BaseModel):
    """A plain value whose shape depends on the token kind."""

    variant: Literal["literal"] = "literal"
    raw: Any = None

    model_config = {"frozen": True}

    def references(self) -> Iterator[ReferenceValue]:
        """Literals hold no references."""
        return iter(())


class ReferenceValue(BaseModel):
    """A `{path}` pointer to another token."""

    variant: Literal["reference"] = "reference"
    path: str = Field(..., description="Target path without delimiters")

    model_config = {"frozen": True}

    @property
    def raw(self) -> str:
        """The reference as written in the document."""
        return f"{REFERENCE_OPEN}{self.path}{REFERENCE_CLOSE}"

    @property
    def segments(self) -> tuple[str, ...]:
        """Target path split on the separator."""
        return tuple(self.path.split(PATH_SEPARATOR))

    def references(self) -> Iterator[ReferenceValue]:
        yield self


class CompositeValue(BaseModel):
    """
    An object (or sequence) of named sub-values.

    Sequence members are keyed by their index so shadow layers
    can be walked the same way as typography fields.
    """

    variant: Literal["composite"] = "composite"
    raw: Any = None
    fields: dict[str, TokenValue] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def references(self) -> Iterator[ReferenceValue]:
        """Depth-first walk of every sub-value's references."""
        for sub in self.fields.values():
            yield from sub.references()


TokenValue = Annotated[
    LiteralValue | ReferenceValue | CompositeValue,
    Field(discriminator="variant"),
]

CompositeValue.model_rebuild()


def parse_value(
    raw: Any, kind: TokenKind = TokenKind.UNKNOWN
) -> LiteralValue | ReferenceValue | CompositeValue:
    """
    Decide the variant of a raw value.

    Args:
        raw: Value as loaded from the document
        kind: Declared kind of the owning token

    Returns:
        ReferenceValue for a delimited string, CompositeValue for an
        object of a composite kind or any object embedding references,
        LiteralValue otherwise
    """
    match = REFERENCE_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match:
        return ReferenceValue(path=match.group(1))

    if isinstance(raw, dict):
        items = [(str(key), sub) for key, sub in raw.items()]
    elif isinstance(raw, list):
        items = [(str(index), sub) for index, sub in enumerate(raw)]
    else:
        return LiteralValue(raw=raw)

    fields = {key: parse_value(sub) for key, sub in items}
    embeds_reference = any(not isinstance(sub, LiteralValue) for sub in fields.values())
    if kind in COMPOSITE_KINDS or embeds_reference:
        return CompositeValue(raw=raw, fields=fields)
    return LiteralValue(raw=raw)


class Token(BaseModel):
    """
    A leaf node of a token tree.

    A node is a token solely because it holds `$value`.
    """

    path: tuple[str, ...] = Field(..., description="Key segments from the tree root")
    layer: Layer = Field(..., description="Layer the token was loaded from")
    declared_type: str | None = Field(None, description="Raw $type, None if absent")
    value: TokenValue = Field(default_factory=LiteralValue)
    description: Any = Field(None, description="Raw $description")
    extensions: Any = Field(None, description="Raw $extensions")
    extension_value: TokenValue | None = Field(None, description="Parsed $extensions")
    child_keys: tuple[str, ...] = Field(
        default=(), description="Non-metadata keys found beside $value"
    )

    model_config = {"frozen": True}

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """A token path is never empty."""
        if not v:
            raise ValueError("Token path must not be empty")
        return v

    @classmethod
    def from_node(cls, path: tuple[str, ...], node: dict[str, Any], layer: Layer) -> Token:
        """Build a token from a `$value`-holding mapping."""
        declared = node.get(TYPE_KEY)
        declared_type = None if declared is None or declared == "" else str(declared)
        kind = TokenKind.from_declared(declared_type)
        extensions = node.get(EXTENSIONS_KEY)

        return cls(
            path=path,
            layer=layer,
            declared_type=declared_type,
            value=parse_value(node[VALUE_KEY], kind),
            description=node.get(DESCRIPTION_KEY),
            extensions=extensions,
            extension_value=parse_value(extensions) if extensions is not None else None,
            child_keys=tuple(
                str(key) for key in node if not str(key).startswith(METADATA_PREFIX)
            ),
        )

    @property
    def dotted(self) -> str:
        """Canonical dot-joined path."""
        return join_path(self.path)

    @property
    def kind(self) -> TokenKind:
        """Declared kind, UNKNOWN when absent or unrecognised."""
        return TokenKind.from_declared(self.declared_type)

    @property
    def last_segment(self) -> str:
        return self.path[-1]

    @property
    def depth(self) -> int:
        return len(self.path)

    def has_extension(self, key: str) -> bool:
        """Return True if $extensions carries the given sub-block."""
        return isinstance(self.extensions, dict) and key in self.extensions

    def references(self) -> list[ReferenceValue]:
        """References in the value, then in the extensions side-channel."""
        refs = list(self.value.references())
        if self.extension_value is not None:
            refs.extend(self.extension_value.references())
        return refs

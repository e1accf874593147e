"""
Token loader - reads token documents from disk.

Documents are JSON by convention; YAML is accepted too. Any failure
here is fatal: the audit never runs on a document it cannot read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.tokens.corpus import TokenCorpus

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


class TokenLoadError(ValueError):
    """A token document could not be interpreted as a token tree."""


class TokenLoader:
    """
    Loads primitive and semantic token documents.

    Paths default to `tokens/primitive.json` and `tokens/semantic.json`
    under the base directory.
    """

    def __init__(
        self,
        base_path: Path | None = None,
        primitive_path: Path | None = None,
        semantic_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            base_path: Directory the default paths are relative to
            primitive_path: Explicit primitive document path
            semantic_path: Explicit semantic document path
        """
        base = base_path or Path.cwd()
        self.primitive_path = primitive_path or (base / "tokens" / "primitive.json")
        self.semantic_path = semantic_path or (base / "tokens" / "semantic.json")

    def load(self) -> TokenCorpus:
        """
        Load both documents into a corpus.

        Raises:
            TokenLoadError: If either document cannot be loaded
        """
        primitive = self.load_tree(self.primitive_path)
        semantic = self.load_tree(self.semantic_path)
        corpus = TokenCorpus.from_trees(primitive, semantic)
        logger.info(
            f"Loaded {corpus.counter.primitive} primitive and "
            f"{corpus.counter.semantic} semantic tokens"
        )
        return corpus

    @staticmethod
    def load_tree(path: Path) -> dict[str, Any]:
        """
        Load one token document.

        Raises:
            TokenLoadError: If the file is missing, unparseable, or not a mapping
        """
        if not path.exists():
            raise TokenLoadError(ErrorMessages.FILE_NOT_FOUND.format(path=path))

        suffix = path.suffix.lower()
        try:
            text = path.read_text(encoding="utf-8")
            if suffix in JSON_SUFFIXES:
                data = json.loads(text)
            elif suffix in YAML_SUFFIXES:
                data = yaml.safe_load(text)
            else:
                raise TokenLoadError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=suffix))
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            raise TokenLoadError(ErrorMessages.PARSE_FAILED.format(path=path, error=e)) from e

        return ensure_tree(data, str(path))


def ensure_tree(data: Any, source: str = "<inline>") -> dict[str, Any]:
    """
    Check that parsed data can serve as a token tree.

    Raises:
        TokenLoadError: If the root is not a mapping
    """
    if not isinstance(data, dict):
        raise TokenLoadError(
            ErrorMessages.ROOT_NOT_MAPPING.format(path=source, type_name=type(data).__name__)
        )
    return data


def parse_tree(text: str, source: str = "<inline>") -> dict[str, Any]:
    """
    Parse a JSON document passed as a string.

    Raises:
        TokenLoadError: If the text is not a JSON mapping
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TokenLoadError(ErrorMessages.PARSE_FAILED.format(path=source, error=e)) from e
    return ensure_tree(data, source)

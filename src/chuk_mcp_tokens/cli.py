#!/usr/bin/env python3
"""
Command-line audit of a token project.

Exit codes:
- 0: no critical findings (warnings allowed)
- 1: critical findings
- 2: a token document or the config could not be loaded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from chuk_mcp_tokens.audit import TokenAuditor, render_text
from chuk_mcp_tokens.models import AuditConfig

logger = logging.getLogger(__name__)

EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Audit primitive and semantic design token documents"
    )
    parser.add_argument(
        "--primitive",
        type=Path,
        default=Path("tokens/primitive.json"),
        help="Primitive token document (default: tokens/primitive.json)",
    )
    parser.add_argument(
        "--semantic",
        type=Path,
        default=Path("tokens/semantic.json"),
        help="Semantic token document (default: tokens/semantic.json)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with audit rules",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument(
        "--max-warnings",
        type=int,
        default=20,
        help="Warnings listed before the rest are summarised (default: 20)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run an audit and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = AuditConfig.from_yaml(args.config) if args.config else AuditConfig()
        report = TokenAuditor(config).audit_files(args.primitive, args.semantic)
    except ValueError as e:
        print(f"✖ Failed to load token files: {e}", file=sys.stderr)
        return EXIT_FATAL

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        color = not args.no_color and sys.stdout.isatty()
        print(render_text(report, color=color, max_warnings=args.max_warnings))

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

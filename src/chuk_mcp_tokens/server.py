#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

Serves the audit tools over stdio or http. The token directory and
audit config are passed to the server module through the environment,
since it builds its tools at import time.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--project",
        type=Path,
        help="Project directory holding tokens/ (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with audit rules (default: <project>/tokens-audit.yaml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.project:
        os.environ["CHUK_TOKENS_PROJECT"] = str(args.project.resolve())
    if args.config:
        os.environ["CHUK_TOKENS_CONFIG"] = str(args.config.resolve())

    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for auditing design token documents.
Tokens live in two layers: primitives hold raw values, semantics
reference them.

The server provides tools for:
- Auditing token documents (formats, references, structure, completeness, quality)
- Validating a single value against its kind
- Listing and describing tokens
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.models import AuditConfig
from chuk_mcp_tokens.tokens import TokenLoader
from chuk_mcp_tokens.tools import register_audit_tools, register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - use standard project structure
BASE_PATH = Path(os.environ.get("CHUK_TOKENS_PROJECT", Path.cwd()))
TOKENS_DIR = BASE_PATH / "tokens"
CONFIG_PATH = Path(os.environ.get("CHUK_TOKENS_CONFIG", BASE_PATH / "tokens-audit.yaml"))

# Audit rules - project config overrides defaults
audit_config = AuditConfig.from_yaml(CONFIG_PATH) if CONFIG_PATH.exists() else AuditConfig()
token_loader = TokenLoader(base_path=BASE_PATH)

# Register all tools
audit_tools = register_audit_tools(mcp, BASE_PATH, audit_config)
token_tools = register_token_tools(mcp, token_loader)

# Export tool functions for direct access
tokens_audit = audit_tools["tokens_audit"]
tokens_audit_inline = audit_tools["tokens_audit_inline"]
tokens_validate_value = audit_tools["tokens_validate_value"]

tokens_list = token_tools["tokens_list"]
tokens_describe = token_tools["tokens_describe"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Tokens dir: {TOKENS_DIR}")
logger.info(f"  Audit config: {CONFIG_PATH if CONFIG_PATH.exists() else 'defaults'}")

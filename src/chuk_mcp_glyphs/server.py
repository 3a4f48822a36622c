#!/usr/bin/env python3
"""
Entry point for the CHUK Glyphs MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging

from chuk_mcp_glyphs.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options; defaults come from Settings."""
    parser = argparse.ArgumentParser(description="CHUK Glyphs MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help=f"HTTP port (only for http transport, default: {settings.PORT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    # Building the server loads the catalog, so wait until options are parsed
    from chuk_mcp_glyphs.async_server import mcp

    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())
    if args.debug or settings.DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.transport == "stdio":
        logger.info("Starting CHUK Glyphs MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Glyphs MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()

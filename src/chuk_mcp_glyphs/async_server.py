#!/usr/bin/env python3
"""
Async Glyphs MCP Server using chuk-mcp-server

This server provides MCP tools for restyling text with Unicode glyph
variants (monospace, bold, italic, doublestruck, circled, squared) and
for chaining variants across chat turns without session storage: the
state travels inside the rendered message.

The server provides tools for:
- Listing variants and transcoding text
- Starting and continuing a styling chain (envelope + keyboard)
- Forwarding command text to a configured webhook
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_glyphs.catalog import CatalogLoader
from chuk_mcp_glyphs.config import settings
from chuk_mcp_glyphs.core.transcoder import Transcoder
from chuk_mcp_glyphs.relay import WebhookRelay
from chuk_mcp_glyphs.tools import (
    register_envelope_tools,
    register_relay_tools,
    register_variant_tools,
)

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-glyphs")

# Build the catalog once; it is immutable and shared by every tool
catalog = CatalogLoader(project_path=settings.catalog_path).load()
transcoder = Transcoder(catalog)
relay = WebhookRelay(settings)

# Register all tools
variant_tools = register_variant_tools(mcp, catalog, transcoder)
envelope_tools = register_envelope_tools(mcp, catalog, transcoder)
relay_tools = register_relay_tools(mcp, relay)

# Export tool functions for direct access
glyphs_list_variants = variant_tools["glyphs_list_variants"]
glyphs_transcode = variant_tools["glyphs_transcode"]

glyphs_start = envelope_tools["glyphs_start"]
glyphs_select = envelope_tools["glyphs_select"]
glyphs_parse_envelope = envelope_tools["glyphs_parse_envelope"]
glyphs_render_envelope = envelope_tools["glyphs_render_envelope"]

glyphs_send_webhook = relay_tools["glyphs_send_webhook"]

logger.info("CHUK Glyphs MCP Server initialized")
logger.info(f"  Variants: {', '.join(c.value for c in catalog.codes)}")
logger.info(f"  Webhook URL: {settings.WEBHOOK_URL}")

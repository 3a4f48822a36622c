"""
MCP tool implementations.

Tools are organized by domain:
- variants - Variant discovery and transcoding
- envelope - Message-embedded state (start, select, parse, render)
- relay - Webhook forwarding
"""

from chuk_mcp_glyphs.tools.envelope import register_envelope_tools
from chuk_mcp_glyphs.tools.keyboard import keyboard_rows
from chuk_mcp_glyphs.tools.relay import register_relay_tools
from chuk_mcp_glyphs.tools.variants import register_variant_tools

__all__ = [
    "keyboard_rows",
    "register_envelope_tools",
    "register_relay_tools",
    "register_variant_tools",
]

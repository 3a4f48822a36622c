"""
Pydantic models for the glyph system.

This module provides:
- Variant: A styling variant as shown to users
- VariantDefinition: The data a glyph map is built from
- GlyphRun: A contiguous run of target code points
- Envelope: The original/modified pair embedded in a message
"""

from chuk_mcp_glyphs.models.envelope import Envelope
from chuk_mcp_glyphs.models.variant import GlyphRun, Variant, VariantDefinition

__all__ = [
    "Envelope",
    "GlyphRun",
    "Variant",
    "VariantDefinition",
]

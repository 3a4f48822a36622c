"""
Variant catalog - the registry of styling variants.

This module provides:
- VariantCatalog: Immutable ordered registry of variants and glyph maps
- GlyphMap: Per-variant source character -> glyph table
- CatalogLoader: YAML library and project override loading
- default_catalog: The shipped catalog, loaded once
"""

from chuk_mcp_glyphs.catalog.catalog import CatalogError, VariantCatalog, default_catalog
from chuk_mcp_glyphs.catalog.glyph_map import GlyphMap
from chuk_mcp_glyphs.catalog.loader import CatalogLoader

__all__ = [
    "CatalogError",
    "CatalogLoader",
    "GlyphMap",
    "VariantCatalog",
    "default_catalog",
]

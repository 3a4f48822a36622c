"""
Variant tools - MCP tools for variant discovery and transcoding.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_glyphs.catalog import VariantCatalog
from chuk_mcp_glyphs.core.codepoints import scalar_length, utf16_length
from chuk_mcp_glyphs.core.transcoder import Transcoder

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_variant_tools(
    mcp: ChukMCPServer,
    catalog: VariantCatalog,
    transcoder: Transcoder,
) -> dict[str, Any]:
    """
    Register variant tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The variant catalog
        transcoder: Transcoder over the same catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_list_variants() -> str:
        """
        List available styling variants.

        Returns:
            JSON string with variants in display order

        Example:
            glyphs_list_variants()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "variants": [
                        {
                            "code": definition.code.value,
                            "label": definition.label,
                            "description": definition.description,
                            "digits": definition.has_digits,
                        }
                        for definition in catalog.definitions
                    ],
                    "count": len(catalog),
                }
            )
        except Exception as e:
            logger.exception("Failed to list variants")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_list_variants"] = glyphs_list_variants

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_transcode(text: str, variant: str) -> str:
        """
        Restyle text with one variant.

        Letters (and digits, for variants with digit glyphs) are replaced;
        everything else passes through. An unknown variant returns the
        text unchanged.

        Args:
            text: Text to restyle
            variant: Variant code ('b') or label ('Bold')

        Returns:
            JSON string with the styled text

        Example:
            glyphs_transcode(text="Hello World", variant="w")
        """
        try:
            code = catalog.resolve(variant)
            styled = transcoder.apply(text, code)
            return json.dumps(
                {
                    "status": "success",
                    "text": styled,
                    "applied": code.value if code else None,
                    "scalar_length": scalar_length(styled),
                    "utf16_length": utf16_length(styled),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to transcode text")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_transcode"] = glyphs_transcode

    return tools

"""
Envelope tools - MCP tools for the message-embedded state protocol.

A chat surface calls `glyphs_start` when a user first sends text, shows
the returned message with the keyboard, and calls `glyphs_select` with
the message text and the pressed button's code on every later turn.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_glyphs.catalog import VariantCatalog
from chuk_mcp_glyphs.core.transcoder import Transcoder
from chuk_mcp_glyphs.envelope import (
    MalformedEnvelopeError,
    Selection,
    parse_envelope,
    render_envelope,
    select_variant,
    start_selection,
)
from chuk_mcp_glyphs.tools.keyboard import keyboard_rows

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _selection_payload(selection: Selection) -> dict[str, Any]:
    return {
        "status": "success",
        "message": selection.text,
        "original": selection.envelope.original,
        "modified": selection.envelope.modified,
        "applied": selection.applied.value if selection.applied else None,
        "offered": [v.code.value for v in selection.offered],
        "keyboard": keyboard_rows(selection.offered),
    }


def register_envelope_tools(
    mcp: ChukMCPServer,
    catalog: VariantCatalog,
    transcoder: Transcoder,
) -> dict[str, Any]:
    """
    Register envelope tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The variant catalog
        transcoder: Transcoder over the same catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_start(text: str) -> str:
        """
        Start a styling chain for a piece of text.

        Returns the message to display (only the Original line) and a
        keyboard offering every variant.

        Args:
            text: The user's text

        Returns:
            JSON string with message, offered codes and keyboard rows

        Example:
            glyphs_start(text="Hello")
        """
        try:
            selection = start_selection(text, catalog)
            return json.dumps(_selection_payload(selection), ensure_ascii=False)
        except Exception as e:
            logger.exception("Failed to start selection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_start"] = glyphs_start

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_select(message: str, variant: str) -> str:
        """
        Apply a chosen variant to the original text of a rendered message.

        The modified text is always derived from the Original line, never
        from the previous Modified line. Every variant except the one
        just applied is offered again.

        Args:
            message: Text of the previously rendered message
            variant: Chosen variant code or label

        Returns:
            JSON string with the new message, offered codes and keyboard rows

        Example:
            glyphs_select(message="Original: Hello", variant="b")
        """
        try:
            selection = select_variant(message, variant, catalog, transcoder)
            return json.dumps(_selection_payload(selection), ensure_ascii=False)
        except MalformedEnvelopeError as e:
            logger.warning(f"Cannot select variant: {e}")
            return json.dumps({"status": "error", "message": str(e), "code": "malformed_envelope"})
        except Exception as e:
            logger.exception("Failed to select variant")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_select"] = glyphs_select

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_parse_envelope(message: str) -> str:
        """
        Extract the original and modified text from a rendered message.

        Args:
            message: Text of a rendered message

        Returns:
            JSON string with original and modified (null when absent)

        Example:
            glyphs_parse_envelope(message="Original: Hi")
        """
        try:
            envelope = parse_envelope(message)
            return json.dumps(
                {
                    "status": "success",
                    "original": envelope.original,
                    "modified": envelope.modified,
                },
                ensure_ascii=False,
            )
        except MalformedEnvelopeError as e:
            return json.dumps({"status": "error", "message": str(e), "code": "malformed_envelope"})
        except Exception as e:
            logger.exception("Failed to parse envelope")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_parse_envelope"] = glyphs_parse_envelope

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_render_envelope(original: str, modified: str | None = None) -> str:
        """
        Render an original/modified pair as a message block.

        Args:
            original: Untransformed text
            modified: Styled text (optional)

        Returns:
            JSON string with the rendered message

        Example:
            glyphs_render_envelope(original="Hello", modified="𝐇𝐞𝐥𝐥𝐨")
        """
        try:
            return json.dumps(
                {"status": "success", "message": render_envelope(original, modified)},
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to render envelope")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_render_envelope"] = glyphs_render_envelope

    return tools

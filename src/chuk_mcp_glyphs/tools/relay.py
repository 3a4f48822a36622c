"""
Relay tools - MCP tool for forwarding command text to the webhook.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_glyphs.relay import WebhookRelay

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_relay_tools(mcp: ChukMCPServer, relay: WebhookRelay) -> dict[str, Any]:
    """
    Register relay tools with the MCP server.

    Args:
        mcp: The MCP server instance
        relay: The configured webhook relay

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def glyphs_send_webhook(data: str) -> str:
        """
        Forward text to the configured webhook endpoint.

        The reply field is ready to send back to the chat as MarkdownV2.

        Args:
            data: Raw command argument text

        Returns:
            JSON string with outcome, HTTP status and reply

        Example:
            glyphs_send_webhook(data="deploy staging")
        """
        try:
            result = await asyncio.to_thread(relay.send, data)
            return json.dumps(
                {
                    "status": "success" if result.success else "error",
                    "outcome": result.outcome,
                    "http_status": result.status_code,
                    "reply": result.reply,
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to relay webhook data")
            return json.dumps({"status": "error", "message": str(e)})

    tools["glyphs_send_webhook"] = glyphs_send_webhook

    return tools

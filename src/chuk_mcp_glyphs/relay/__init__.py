"""
Webhook relay - forwards command text to an external endpoint.
"""

from chuk_mcp_glyphs.relay.webhook import RelayResult, WebhookRelay, format_reply

__all__ = [
    "RelayResult",
    "WebhookRelay",
    "format_reply",
]

"""
Message-embedded state - the envelope and the selection protocol.

This module provides:
- render_envelope / parse_envelope: The two-line Original/Modified codec
- EnvelopeError / MalformedEnvelopeError: Codec failures
- Selection / start_selection / select_variant / offered_variants:
  The per-turn narrowing state machine
"""

from chuk_mcp_glyphs.envelope.envelope import (
    EnvelopeError,
    MalformedEnvelopeError,
    parse_envelope,
    render_envelope,
)
from chuk_mcp_glyphs.envelope.selection import (
    Selection,
    offered_variants,
    select_variant,
    start_selection,
)

__all__ = [
    "EnvelopeError",
    "MalformedEnvelopeError",
    "Selection",
    "offered_variants",
    "parse_envelope",
    "render_envelope",
    "select_variant",
    "start_selection",
]

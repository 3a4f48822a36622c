"""
Envelope model - the original/modified pair carried inside a message.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """
    State embedded in a rendered message.

    `original` is the untransformed text the user started the chain
    with. It is never overwritten by a later transform; only `modified`
    changes from turn to turn.
    """

    original: str = Field(..., description="Untransformed source text")
    modified: str | None = Field(default=None, description="Currently applied variant output")

    model_config = {"frozen": True}

    @property
    def is_modified(self) -> bool:
        """True when a variant has been applied."""
        return self.modified is not None

    def render(self) -> str:
        """Serialize to the two-line block."""
        from chuk_mcp_glyphs.envelope.envelope import render_envelope

        return render_envelope(self.original, self.modified)

    @classmethod
    def parse(cls, block: str) -> Envelope:
        """Parse a rendered block."""
        from chuk_mcp_glyphs.envelope.envelope import parse_envelope

        return parse_envelope(block)

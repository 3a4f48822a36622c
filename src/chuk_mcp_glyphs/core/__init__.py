"""
Core text primitives.

- Glyph: One styled output character with an explicit UTF-16 form
- iter_scalars / scalar_length / utf16_length: Scalar-value iteration
- to_surrogate_pair / from_surrogate_pair / utf16_units: Code unit arithmetic
- Transcoder / transcode: Apply a variant to text
"""

from chuk_mcp_glyphs.core.codepoints import (
    Glyph,
    from_surrogate_pair,
    is_scalar_value,
    iter_scalars,
    scalar_length,
    to_surrogate_pair,
    utf16_length,
    utf16_units,
)


def __getattr__(name: str):
    """Lazy imports for the transcoder to avoid circular dependencies."""
    if name in ("Transcoder", "transcode"):
        from chuk_mcp_glyphs.core.transcoder import Transcoder, transcode

        return {"Transcoder": Transcoder, "transcode": transcode}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Glyph",
    "Transcoder",
    "from_surrogate_pair",
    "is_scalar_value",
    "iter_scalars",
    "scalar_length",
    "to_surrogate_pair",
    "transcode",
    "utf16_length",
    "utf16_units",
]

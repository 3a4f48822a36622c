"""
Transcoder - applies one variant to a string.

A small font-substitution codec: walk the input by scalar value, look
each one up in the variant's glyph map, emit the glyph or the original
segment. The mapping is strictly 1:1 in scalar values.
"""

from __future__ import annotations

import logging

from chuk_mcp_glyphs.catalog.catalog import VariantCatalog, default_catalog
from chuk_mcp_glyphs.constants import VariantCode
from chuk_mcp_glyphs.core.codepoints import iter_scalars

logger = logging.getLogger(__name__)


class Transcoder:
    """
    Applies variants from a catalog to text.

    Stateless apart from the (immutable) catalog, so one instance can be
    shared across concurrent requests.
    """

    def __init__(self, catalog: VariantCatalog | None = None):
        """
        Initialize the transcoder.

        Args:
            catalog: Variant catalog (defaults to the shipped catalog)
        """
        self.catalog = catalog if catalog is not None else default_catalog()

    def apply(self, text: str, variant: VariantCode | str | None) -> str:
        """
        Restyle text with a variant.

        Letters (and digits, where the variant has digit glyphs) are
        replaced by their styled counterparts. Everything else - spaces,
        punctuation, non-Latin text, already-styled glyphs - is kept as is.

        Args:
            text: Input text
            variant: Variant code; unknown codes and None are a no-op.
                Labels are resolved by callers via VariantCatalog.resolve.

        Returns:
            Styled text with the same number of scalar values

        Example:
            Transcoder().apply("Hi 5", "b") -> "𝐇𝐢 𝟓"
        """
        glyph_map = self.catalog.get_glyph_map(variant)
        if glyph_map is None:
            if variant is not None:
                logger.debug(f"Unknown variant {variant!r}, returning text unchanged")
            return text

        out: list[str] = []
        for _, segment in iter_scalars(text):
            glyph = glyph_map.get(segment)
            out.append(glyph.text if glyph is not None else segment)
        return "".join(out)


def transcode(
    text: str,
    variant: VariantCode | str | None,
    catalog: VariantCatalog | None = None,
) -> str:
    """Convenience wrapper: apply a variant code using the given or default catalog."""
    return Transcoder(catalog).apply(text, variant)

"""
Selection - the narrowing protocol across interaction turns.

Each turn offers every variant except the one just applied. The offered
set is always recomputed from the full catalog, so a variant removed on
one turn comes back as soon as a different one is chosen.

Styles never compose: the modified text is always re-derived from the
original line of the envelope. Bold then Italic gives italic plain
text, not italic-of-bold (styled glyphs are outside every variant's
input domain anyway).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_mcp_glyphs.catalog.catalog import VariantCatalog
from chuk_mcp_glyphs.constants import VariantCode
from chuk_mcp_glyphs.core.transcoder import Transcoder
from chuk_mcp_glyphs.envelope.envelope import parse_envelope
from chuk_mcp_glyphs.models.envelope import Envelope
from chuk_mcp_glyphs.models.variant import Variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Outcome of one turn: the envelope to show and the variants to offer."""

    envelope: Envelope
    applied: VariantCode | None
    offered: tuple[Variant, ...]

    @property
    def text(self) -> str:
        """Rendered envelope block."""
        return self.envelope.render()

    @property
    def offered_codes(self) -> tuple[VariantCode, ...]:
        """Codes of the offered variants."""
        return tuple(v.code for v in self.offered)


def offered_variants(
    catalog: VariantCatalog,
    last_applied: VariantCode | str | None = None,
) -> tuple[Variant, ...]:
    """All variants in catalog order, minus the one just applied."""
    excluded = catalog.resolve(last_applied)
    return tuple(v for v in catalog.variants if v.code != excluded)


def start_selection(text: str, catalog: VariantCatalog) -> Selection:
    """
    Initial state: only the original, every variant offered.

    Raises:
        EnvelopeError: If the text cannot be carried in an envelope
    """
    envelope = Envelope(original=text)
    # Render once so unrepresentable text fails here rather than on a later turn
    envelope.render()
    return Selection(envelope=envelope, applied=None, offered=offered_variants(catalog))


def select_variant(
    block: str,
    variant: VariantCode | str | None,
    catalog: VariantCatalog,
    transcoder: Transcoder | None = None,
) -> Selection:
    """
    Apply a newly chosen variant to the original text in a rendered block.

    An unknown variant means no transformation was requested: the result
    carries only the original and offers every variant again.

    Args:
        block: Text of the previously rendered message
        variant: Chosen variant code or label
        catalog: Variant catalog
        transcoder: Transcoder to use (defaults to one over `catalog`)

    Raises:
        MalformedEnvelopeError: If the block has no Original line
    """
    previous = parse_envelope(block)
    code = catalog.resolve(variant)

    if code is None:
        logger.debug(f"No transformation for variant {variant!r}")
        return start_selection(previous.original, catalog)

    transcoder = transcoder or Transcoder(catalog)
    modified = transcoder.apply(previous.original, code)
    envelope = Envelope(original=previous.original, modified=modified)
    envelope.render()

    return Selection(
        envelope=envelope,
        applied=code,
        offered=offered_variants(catalog, code),
    )

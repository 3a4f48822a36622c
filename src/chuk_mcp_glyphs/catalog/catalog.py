"""
Variant Catalog - the registry of every supported styling variant.

The catalog is the single source of truth for which variants exist.
It is immutable once built and is passed explicitly to whatever needs
it, so tests can hand in a reduced catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from chuk_mcp_glyphs.catalog.glyph_map import GlyphMap
from chuk_mcp_glyphs.constants import VariantCode
from chuk_mcp_glyphs.models.variant import Variant, VariantDefinition

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data cannot be turned into a catalog."""


class VariantCatalog:
    """
    Ordered, immutable set of variants and their glyph maps.

    Lookups for unknown codes or labels return None. Absence means
    "no transformation requested", never an error.
    """

    __slots__ = ("_definitions", "_variants", "_glyph_maps", "_labels")

    def __init__(self, definitions: Iterable[VariantDefinition]):
        """
        Build the catalog.

        Args:
            definitions: Variant definitions, in display order

        Raises:
            CatalogError: On duplicate codes or labels
        """
        ordered = tuple(definitions)
        glyph_maps: dict[VariantCode, GlyphMap] = {}
        labels: dict[str, VariantCode] = {}

        for definition in ordered:
            if definition.code in glyph_maps:
                raise CatalogError(f"Duplicate variant code: {definition.code.value}")
            label_key = _label_key(definition.label)
            if label_key in labels:
                raise CatalogError(f"Duplicate variant label: {definition.label}")
            glyph_maps[definition.code] = GlyphMap.from_definition(definition)
            labels[label_key] = definition.code

        self._definitions = ordered
        self._variants = tuple(d.to_variant() for d in ordered)
        self._glyph_maps = MappingProxyType(glyph_maps)
        self._labels = MappingProxyType(labels)

    @property
    def variants(self) -> tuple[Variant, ...]:
        """All variants, in display order."""
        return self._variants

    @property
    def codes(self) -> tuple[VariantCode, ...]:
        """All variant codes, in display order."""
        return tuple(v.code for v in self._variants)

    @property
    def definitions(self) -> tuple[VariantDefinition, ...]:
        """The definitions the catalog was built from."""
        return self._definitions

    def get_variant(self, code: VariantCode | str | None) -> Variant | None:
        """
        Get a variant by code.

        Args:
            code: Variant code ('b') or VariantCode

        Returns:
            Variant if in the catalog, None otherwise
        """
        resolved = _coerce_code(code)
        if resolved is None:
            return None
        for variant in self._variants:
            if variant.code == resolved:
                return variant
        return None

    def get_glyph_map(self, code: VariantCode | str | None) -> GlyphMap | None:
        """Get the glyph map for a variant code, or None if not in the catalog."""
        resolved = _coerce_code(code)
        if resolved is None:
            return None
        return self._glyph_maps.get(resolved)

    def find_by_label(self, label: str | None) -> VariantCode | None:
        """
        Look up a variant code by its label.

        Matching is case-insensitive and ignores surrounding whitespace,
        so 'bold', 'Bold' and ' BOLD ' all resolve.
        """
        if not label:
            return None
        return self._labels.get(_label_key(label))

    def resolve(self, value: VariantCode | str | None) -> VariantCode | None:
        """Resolve a code or a label to a code in this catalog."""
        variant = self.get_variant(value)
        if variant is not None:
            return variant.code
        if isinstance(value, str):
            return self.find_by_label(value)
        return None

    def subset(self, codes: Iterable[VariantCode | str]) -> VariantCatalog:
        """
        A reduced catalog holding only the given codes.

        Order follows this catalog, not the argument. Unknown codes are
        ignored.
        """
        wanted = {c for c in (_coerce_code(code) for code in codes) if c is not None}
        return VariantCatalog(d for d in self._definitions if d.code in wanted)

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        return self.get_variant(code) is not None

    def __repr__(self) -> str:
        return f"VariantCatalog({', '.join(c.value for c in self.codes)})"


def _label_key(label: str) -> str:
    return label.strip().casefold()


def _coerce_code(code: VariantCode | str | None) -> VariantCode | None:
    """Turn a raw code into a VariantCode, or None if it is not one."""
    if code is None:
        return None
    if isinstance(code, VariantCode):
        return code
    try:
        return VariantCode(code.strip())
    except (ValueError, AttributeError):
        return None


@lru_cache(maxsize=1)
def default_catalog() -> VariantCatalog:
    """
    The shipped catalog, loaded once from the packaged library.

    Raises:
        CatalogError: If the packaged library is missing or malformed
    """
    from chuk_mcp_glyphs.catalog.loader import CatalogLoader

    catalog = CatalogLoader().load()
    logger.debug(f"Loaded default catalog: {catalog!r}")
    return catalog

"""
Glyph maps - per-variant character tables.

A glyph map is a total function over its source domain (A-Z, a-z and,
for some variants, 0-9). Characters outside the domain have no entry
and are passed through by the transcoder.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from chuk_mcp_glyphs.constants import ALPHABETS, CharacterClass, VariantCode
from chuk_mcp_glyphs.core.codepoints import Glyph
from chuk_mcp_glyphs.models.variant import GlyphRun, VariantDefinition


class GlyphMap(Mapping[str, Glyph]):
    """
    Read-only table from source character to styled glyph.

    Built once from a VariantDefinition. Behaves as a Mapping, so
    `glyph_map.get(ch)` returns None for unmapped characters.
    """

    __slots__ = ("_code", "_table", "_classes")

    def __init__(self, code: VariantCode, table: dict[str, Glyph], classes: frozenset[CharacterClass]):
        self._code = code
        self._table = MappingProxyType(dict(table))
        self._classes = classes

    @classmethod
    def from_definition(cls, definition: VariantDefinition) -> GlyphMap:
        """
        Build the table from contiguous runs, then apply exceptions.

        Each alphabet lands on `run.start + index`; exceptions replace
        the slots that fall on reserved code points in the target block.
        """
        runs: dict[CharacterClass, GlyphRun] = {
            CharacterClass.UPPER: definition.upper,
            CharacterClass.LOWER: definition.lower,
        }
        if definition.digits is not None:
            runs[CharacterClass.DIGIT] = definition.digits

        table: dict[str, Glyph] = {}
        for char_class, run in runs.items():
            for index, char in enumerate(ALPHABETS[char_class]):
                table[char] = Glyph(run.code_point(index))

        for char, target in definition.exceptions.items():
            if char not in table:
                # A digit exception on a variant without digits stays unmapped
                continue
            table[char] = Glyph(target)

        return cls(definition.code, table, frozenset(runs))

    @property
    def code(self) -> VariantCode:
        """Variant this map belongs to."""
        return self._code

    @property
    def maps_digits(self) -> bool:
        """Whether digits are restyled."""
        return CharacterClass.DIGIT in self._classes

    def covers(self, char_class: CharacterClass) -> bool:
        """Whether a whole character class is in the domain."""
        return char_class in self._classes

    def __getitem__(self, char: str) -> Glyph:
        return self._table[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"GlyphMap(code={self._code.value!r}, size={len(self._table)})"

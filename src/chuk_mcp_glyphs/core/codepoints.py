"""
Code point primitives - scalar values and UTF-16 code units.

Python strings are sequences of code points, so most of the time a
scalar value is simply one character. Chat platforms, however, count
and transmit text in UTF-16 code units, and text that went through a
careless UTF-16 round trip can arrive with a surrogate pair split into
two separate code points. Everything here makes the scalar / code unit
relationship explicit so it can be tested on its own.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chuk_mcp_glyphs.constants import (
    BMP_LIMIT,
    HIGH_SURROGATE_END,
    HIGH_SURROGATE_START,
    LOW_SURROGATE_END,
    LOW_SURROGATE_START,
    MAX_SCALAR,
    SUPPLEMENTARY_BASE,
)


def is_high_surrogate(value: int) -> bool:
    """True for a UTF-16 leading surrogate code unit."""
    return HIGH_SURROGATE_START <= value <= HIGH_SURROGATE_END


def is_low_surrogate(value: int) -> bool:
    """True for a UTF-16 trailing surrogate code unit."""
    return LOW_SURROGATE_START <= value <= LOW_SURROGATE_END


def is_scalar_value(value: int) -> bool:
    """True for any code point except the surrogate range."""
    return 0 <= value <= MAX_SCALAR and not (HIGH_SURROGATE_START <= value <= LOW_SURROGATE_END)


def to_surrogate_pair(scalar: int) -> tuple[int, int]:
    """
    Split a supplementary-plane scalar into its UTF-16 surrogate pair.

    U+1D677 -> (0xD835, 0xDE77)

    Raises:
        ValueError: If the scalar is inside the BMP or not a scalar value
    """
    if not is_scalar_value(scalar) or scalar <= BMP_LIMIT:
        raise ValueError(f"Not a supplementary scalar value: U+{scalar:04X}")
    offset = scalar - SUPPLEMENTARY_BASE
    high = HIGH_SURROGATE_START + (offset >> 10)
    low = LOW_SURROGATE_START + (offset & 0x3FF)
    return high, low


def from_surrogate_pair(high: int, low: int) -> int:
    """
    Join a UTF-16 surrogate pair back into one scalar value.

    Raises:
        ValueError: If the units are not a leading/trailing pair
    """
    if not is_high_surrogate(high) or not is_low_surrogate(low):
        raise ValueError(f"Not a surrogate pair: 0x{high:04X} 0x{low:04X}")
    return SUPPLEMENTARY_BASE + ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)


def utf16_units(scalar: int) -> tuple[int, ...]:
    """
    Encode one scalar value as UTF-16 code units.

    BMP scalars are a single unit, everything above is a surrogate pair.
    """
    if not is_scalar_value(scalar):
        raise ValueError(f"Not a scalar value: U+{scalar:04X}")
    if scalar <= BMP_LIMIT:
        return (scalar,)
    return to_surrogate_pair(scalar)


def iter_scalars(text: str) -> Iterator[tuple[int, str]]:
    """
    Iterate text by scalar value.

    Yields (scalar, segment) where segment is the exact slice of the
    input that carries the scalar. A surrogate pair that arrived as two
    separate code points is joined into one scalar and its two-character
    segment is kept intact. Lone surrogates are yielded as themselves.
    """
    i = 0
    n = len(text)
    while i < n:
        cp = ord(text[i])
        if is_high_surrogate(cp) and i + 1 < n and is_low_surrogate(ord(text[i + 1])):
            yield from_surrogate_pair(cp, ord(text[i + 1])), text[i : i + 2]
            i += 2
            continue
        yield cp, text[i]
        i += 1


def scalar_length(text: str) -> int:
    """Length of text in scalar values."""
    return sum(1 for _ in iter_scalars(text))


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units (what chat platforms count)."""
    return sum(len(utf16_units(scalar)) if is_scalar_value(scalar) else 1 for scalar, _ in iter_scalars(text))


@dataclass(frozen=True)
class Glyph:
    """
    One styled output character.

    Carries the target scalar value and derives both its UTF-16 form
    and its Python string form from it, so the encoding step is explicit.
    """

    scalar: int

    def __post_init__(self) -> None:
        if not is_scalar_value(self.scalar):
            raise ValueError(f"Not a scalar value: U+{self.scalar:04X}")

    @property
    def units(self) -> tuple[int, ...]:
        """UTF-16 code units: one unit in the BMP, a surrogate pair above it."""
        return utf16_units(self.scalar)

    @property
    def is_supplementary(self) -> bool:
        """True when the glyph needs a surrogate pair."""
        return len(self.units) == 2

    @property
    def text(self) -> str:
        """The glyph as a Python string (always exactly one code point)."""
        units = self.units
        if len(units) == 1:
            return chr(units[0])
        return chr(from_surrogate_pair(*units))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Glyph(U+{self.scalar:04X})"

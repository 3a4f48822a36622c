"""
Constants and enums for the glyph system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class VariantCode(str, Enum):
    """
    The closed set of styling variants.

    The single-letter codes are what travels in button callback data,
    so they stay short. Labels live in the catalog.
    """

    MONOSPACE = "w"
    BOLD = "b"
    ITALIC = "i"
    DOUBLESTRUCK = "d"
    CIRCLED = "o"
    SQUARED = "q"


class CharacterClass(str, Enum):
    """Source character classes a glyph map can cover."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"


# Source alphabets, each contiguous in ASCII
UPPER_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
DIGIT_ALPHABET = "0123456789"

ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPER: UPPER_ALPHABET,
    CharacterClass.LOWER: LOWER_ALPHABET,
    CharacterClass.DIGIT: DIGIT_ALPHABET,
}

# Envelope grammar
ORIGINAL_LABEL = "Original"
MODIFIED_LABEL = "Modified"
LABEL_SEPARATOR = ": "

# Keyboard layout
KEYBOARD_ROW_SIZE = 3

# Unicode / UTF-16 limits
MAX_SCALAR = 0x10FFFF
BMP_LIMIT = 0xFFFF
SUPPLEMENTARY_BASE = 0x10000
HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

# Webhook relay
RELAY_CONTENT_TYPE = "text/plain"
# Postman's agent string; some CDNs reject the requests default with a 403
RELAY_USER_AGENT = "PostmanRuntime/7.36.0"
RELAY_UNPROCESSABLE_STATUS = 422

RelayOutcome = Literal["sent", "rejected", "failed", "error"]

SCHEMA_CATALOG_V1 = "catalog/v1"

"""
Variant models - the styling variants and the data their glyph maps are built from.

A variant is one named stylistic transformation (bold, monospace, ...).
Its definition describes where each source alphabet lands in Unicode:
a start code point per character class, plus exceptions for the few
letters whose natural slot is a reserved hole in the target block.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_glyphs.constants import (
    DIGIT_ALPHABET,
    LOWER_ALPHABET,
    UPPER_ALPHABET,
    VariantCode,
)
from chuk_mcp_glyphs.core.codepoints import is_scalar_value


class GlyphRun(BaseModel):
    """A contiguous run of target code points for one source alphabet."""

    start: int = Field(..., description="Code point the first source character maps to")

    model_config = {"frozen": True}

    @field_validator("start")
    @classmethod
    def validate_start(cls, v: int) -> int:
        """Start must be a scalar value."""
        if not is_scalar_value(v):
            raise ValueError(f"Run start is not a scalar value: {v:#x}")
        return v

    def code_point(self, index: int) -> int:
        """Code point for the source character at index in its alphabet."""
        return self.start + index

    def is_valid_for(self, length: int) -> bool:
        """Whether every code point of a run over an alphabet of this length is a scalar value."""
        return all(is_scalar_value(self.code_point(i)) for i in range(length))


class Variant(BaseModel):
    """A styling variant as shown to users."""

    code: VariantCode = Field(..., description="Short code, used in callback data")
    label: str = Field(..., min_length=1, description="Human-readable label")
    description: str = Field("", description="What the variant looks like")

    model_config = {"frozen": True}


class VariantDefinition(BaseModel):
    """
    Everything needed to build a variant's glyph map.

    Uppercase and lowercase runs are required. Digits are optional since
    not every target block has digit glyphs; a variant without a digit
    run passes digits through verbatim.
    """

    code: VariantCode
    label: str = Field(..., min_length=1)
    description: str = Field("")
    upper: GlyphRun
    lower: GlyphRun
    digits: GlyphRun | None = None
    exceptions: dict[str, int] = Field(
        default_factory=dict,
        description="Source character -> code point, for holes in the target run",
    )

    model_config = {"frozen": True}

    @field_validator("exceptions")
    @classmethod
    def validate_exceptions(cls, v: dict[str, int]) -> dict[str, int]:
        """Exceptions may only remap source characters, to scalar values."""
        domain = UPPER_ALPHABET + LOWER_ALPHABET + DIGIT_ALPHABET
        for char, target in v.items():
            if len(char) != 1 or char not in domain:
                raise ValueError(f"Exception key must be one of A-Z, a-z, 0-9: {char!r}")
            if not is_scalar_value(target):
                raise ValueError(f"Exception target is not a scalar value: {target:#x}")
        return v

    @model_validator(mode="after")
    def validate_runs(self) -> VariantDefinition:
        """Each run must stay on scalar values over its whole alphabet."""
        runs = [("upper", self.upper, UPPER_ALPHABET), ("lower", self.lower, LOWER_ALPHABET)]
        if self.digits is not None:
            runs.append(("digits", self.digits, DIGIT_ALPHABET))
        for name, run, alphabet in runs:
            if not run.is_valid_for(len(alphabet)):
                last = run.code_point(len(alphabet) - 1)
                raise ValueError(f"{name} run {run.start:#x}..{last:#x} leaves the scalar values")
        return self

    @property
    def has_digits(self) -> bool:
        """Whether this variant restyles digits."""
        return self.digits is not None

    def to_variant(self) -> Variant:
        """The user-facing part of the definition."""
        return Variant(code=self.code, label=self.label, description=self.description)

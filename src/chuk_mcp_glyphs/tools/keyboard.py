"""
Keyboard layout - offered variants as rows of buttons.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_glyphs.constants import KEYBOARD_ROW_SIZE
from chuk_mcp_glyphs.models.variant import Variant


def keyboard_rows(
    variants: Sequence[Variant],
    row_size: int = KEYBOARD_ROW_SIZE,
) -> list[list[dict[str, str]]]:
    """
    Chunk variants into button rows, preserving order.

    Each button carries the label as text and the code as callback data.
    """
    if row_size < 1:
        raise ValueError(f"Row size must be positive: {row_size}")
    buttons = [{"text": v.label, "callback_data": v.code.value} for v in variants]
    return [buttons[i : i + row_size] for i in range(0, len(buttons), row_size)]

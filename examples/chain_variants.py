#!/usr/bin/env python3
"""
Example: Chaining variants through the message envelope.

This demonstrates how a chat surface keeps styling state in the message
itself. Each turn parses the previous message, re-derives the styled
text from the Original line and offers every variant except the one
just applied.

Usage:
    python examples/chain_variants.py "Hello World"
"""

import sys

from chuk_mcp_glyphs.catalog import default_catalog
from chuk_mcp_glyphs.core import Transcoder, scalar_length, utf16_length
from chuk_mcp_glyphs.envelope import select_variant, start_selection
from chuk_mcp_glyphs.tools import keyboard_rows


def show_keyboard(selection) -> None:
    """Print the keyboard rows for a selection."""
    for row in keyboard_rows(selection.offered):
        print("    " + "  ".join(f"[{b['text']}]" for b in row))


def main() -> None:
    """Demonstrate the selection protocol."""
    text = sys.argv[1] if len(sys.argv) > 1 else "Hello World"

    print("CHUK Glyphs Variant Chain Demo")
    print("=" * 40)
    print()

    catalog = default_catalog()
    transcoder = Transcoder(catalog)

    # Every variant, side by side
    print("Variants:")
    for variant in catalog:
        styled = transcoder.apply(text, variant.code)
        print(f"  {variant.code.value}  {variant.label:<13} {styled}")
    print()

    # Turn 0: the user sends text
    selection = start_selection(text, catalog)
    print("Turn 0:")
    print("  " + selection.text.replace("\n", "\n  "))
    show_keyboard(selection)
    print()

    # Later turns: the user taps buttons; only the message text comes back
    for turn, code in enumerate(["b", "i", "b", "o"], start=1):
        selection = select_variant(selection.text, code, catalog, transcoder)
        modified = selection.envelope.modified or ""
        print(f"Turn {turn}: pressed '{code}'")
        print("  " + selection.text.replace("\n", "\n  "))
        print(f"  scalars={scalar_length(modified)} utf16_units={utf16_length(modified)}")
        show_keyboard(selection)
        print()


if __name__ == "__main__":
    main()

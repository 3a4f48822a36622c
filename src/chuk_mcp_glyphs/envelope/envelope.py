"""
Envelope codec - the original/modified pair as two labeled lines.

    Original: Hello
    Modified: 𝐇𝐞𝐥𝐥𝐨

The block is the only state the interaction has; it lives in the text
of the chat message. Parsing is anchored on the labels, not on line
positions, so other lines around the block are ignored.
"""

from __future__ import annotations

from chuk_mcp_glyphs.constants import LABEL_SEPARATOR, MODIFIED_LABEL, ORIGINAL_LABEL
from chuk_mcp_glyphs.models.envelope import Envelope

_LINE_BREAKS = ("\n", "\r")


class EnvelopeError(ValueError):
    """Raised when an envelope cannot be rendered or parsed."""


class MalformedEnvelopeError(EnvelopeError):
    """Raised when a block has no Original line."""


def render_envelope(original: str, modified: str | None = None) -> str:
    """
    Render the two-line block.

    Only the Original line is emitted when `modified` is None.

    Raises:
        EnvelopeError: If a value contains a line break (it would not
            survive the line-based grammar)
    """
    _check_single_line(ORIGINAL_LABEL, original)
    lines = [f"{ORIGINAL_LABEL}{LABEL_SEPARATOR}{original}"]
    if modified is not None:
        _check_single_line(MODIFIED_LABEL, modified)
        lines.append(f"{MODIFIED_LABEL}{LABEL_SEPARATOR}{modified}")
    return "\n".join(lines)


def parse_envelope(block: str) -> Envelope:
    """
    Extract the original/modified pair from a rendered block.

    The first line starting with "Original:" gives the original text,
    the first line starting with "Modified:" gives the modified text.
    One space after the colon belongs to the label; anything after it
    is the value, verbatim.

    Raises:
        MalformedEnvelopeError: If there is no Original line. A default
            original is never guessed.
    """
    original: str | None = None
    modified: str | None = None

    for line in block.split("\n"):
        line = line.removesuffix("\r")
        if original is None:
            value = _label_value(line, ORIGINAL_LABEL)
            if value is not None:
                original = value
                continue
        if modified is None:
            value = _label_value(line, MODIFIED_LABEL)
            if value is not None:
                modified = value

    if original is None:
        raise MalformedEnvelopeError(f"No '{ORIGINAL_LABEL}' line in message")

    return Envelope(original=original, modified=modified)


def _label_value(line: str, label: str) -> str | None:
    """Value after `label:` at the start of the line, or None."""
    prefix = f"{label}:"
    if not line.startswith(prefix):
        return None
    value = line[len(prefix) :]
    return value[1:] if value.startswith(" ") else value


def _check_single_line(label: str, value: str) -> None:
    if any(brk in value for brk in _LINE_BREAKS):
        raise EnvelopeError(f"{label} text must be a single line")

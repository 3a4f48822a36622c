"""
Tests for the message-embedded state.

Tests cover:
- render_envelope / parse_envelope and the Envelope model
- Label-anchored parsing and malformed input
- The selection state machine (start, select, narrowing, re-derivation)
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_glyphs.catalog import VariantCatalog
from chuk_mcp_glyphs.constants import VariantCode
from chuk_mcp_glyphs.core import Transcoder
from chuk_mcp_glyphs.envelope import (
    EnvelopeError,
    MalformedEnvelopeError,
    offered_variants,
    parse_envelope,
    render_envelope,
    select_variant,
    start_selection,
)
from chuk_mcp_glyphs.models import Envelope


class TestRender:
    """Tests for render_envelope."""

    def test_original_and_modified(self):
        """Two labeled lines."""
        assert render_envelope("Hello", "Ｈｅｌｌｏ") == "Original: Hello\nModified: Ｈｅｌｌｏ"

    def test_original_only(self):
        """No Modified line when modified is absent."""
        assert render_envelope("Hello") == "Original: Hello"
        assert render_envelope("Hello", None) == "Original: Hello"

    def test_empty_modified_is_present(self):
        """An empty modified string still gets its line."""
        assert render_envelope("", "") == "Original: \nModified: "

    def test_line_break_rejected(self):
        """Values must be single lines."""
        with pytest.raises(EnvelopeError):
            render_envelope("two\nlines")
        with pytest.raises(EnvelopeError):
            render_envelope("ok", "carriage\rreturn")


class TestParse:
    """Tests for parse_envelope."""

    def test_both_lines(self):
        """Parses original and modified."""
        envelope = parse_envelope("Original: Hello\nModified: Ｈｅｌｌｏ")
        assert envelope.original == "Hello"
        assert envelope.modified == "Ｈｅｌｌｏ"

    def test_original_only(self):
        """Modified is None without a Modified line."""
        envelope = parse_envelope("Original: Hi")
        assert envelope == Envelope(original="Hi", modified=None)
        assert envelope.is_modified is False

    def test_missing_original(self):
        """No Original line is malformed."""
        with pytest.raises(MalformedEnvelopeError):
            parse_envelope("Modified: 𝐇𝐢")
        with pytest.raises(MalformedEnvelopeError):
            parse_envelope("")
        with pytest.raises(MalformedEnvelopeError):
            parse_envelope("Hello there")

    def test_malformed_is_value_error(self):
        """Callers catching ValueError also catch malformed envelopes."""
        with pytest.raises(ValueError):
            parse_envelope("nothing here")

    def test_label_must_start_line(self):
        """A label in the middle of a line does not count."""
        with pytest.raises(MalformedEnvelopeError):
            parse_envelope("Text Original: Hello")

    def test_lines_in_any_order(self):
        """Parsing is anchored on labels, not positions."""
        envelope = parse_envelope("Modified: 𝐇𝐢\nOriginal: Hi")
        assert envelope.original == "Hi"
        assert envelope.modified == "𝐇𝐢"

    def test_surrounding_lines_ignored(self):
        """Other lines around the block are ignored."""
        block = "Pick a style:\nOriginal: Hi\nModified: 𝐇𝐢\n(tap a button)"
        assert parse_envelope(block) == Envelope(original="Hi", modified="𝐇𝐢")

    def test_crlf(self):
        """Windows line endings are accepted."""
        assert parse_envelope("Original: Hi\r\nModified: 𝐇𝐢\r\n") == Envelope(original="Hi", modified="𝐇𝐢")

    def test_label_without_space(self):
        """The space after the colon is optional."""
        assert parse_envelope("Original:Hi").original == "Hi"

    def test_first_label_wins(self):
        """Repeated labels use the first occurrence."""
        envelope = parse_envelope("Original: one\nOriginal: two")
        assert envelope.original == "one"

    def test_value_containing_label_text(self):
        """Label text inside a value is part of the value."""
        envelope = parse_envelope("Original: say Modified: no")
        assert envelope.original == "say Modified: no"
        assert envelope.modified is None


class TestRoundTrip:
    """parse(render(x)) == x."""

    @pytest.mark.parametrize(
        "original,modified",
        [
            ("Hello", "Ｈｅｌｌｏ"),
            ("Hello", None),
            ("", None),
            ("", ""),
            ("  padded  ", " x "),
            ("Original: nested", "Modified: nested"),
            ("東京 😀", "𝐀𝐁"),
            ("a:b", None),
        ],
    )
    def test_round_trip(self, original, modified):
        """Values come back verbatim."""
        envelope = parse_envelope(render_envelope(original, modified))
        assert envelope.original == original
        assert envelope.modified == modified

    def test_model_methods(self):
        """Envelope.render / Envelope.parse mirror the functions."""
        envelope = Envelope(original="Hi", modified="𝐇𝐢")
        assert Envelope.parse(envelope.render()) == envelope

    def test_model_is_frozen(self):
        """The original cannot be overwritten."""
        envelope = Envelope(original="Hi")
        with pytest.raises(ValidationError):
            envelope.original = "Bye"


class TestOfferedVariants:
    """Tests for offered_variants."""

    def test_initial(self, catalog: VariantCatalog):
        """Nothing applied offers everything."""
        assert offered_variants(catalog) == catalog.variants

    def test_excludes_last_applied(self, catalog: VariantCatalog):
        """Only the just-applied variant is removed."""
        codes = [v.code for v in offered_variants(catalog, "b")]
        assert codes == [c for c in catalog.codes if c != VariantCode.BOLD]

    def test_unknown_last_applied(self, catalog: VariantCatalog):
        """An unknown last-applied code removes nothing."""
        assert offered_variants(catalog, "z") == catalog.variants


class TestSelection:
    """Tests for the selection state machine."""

    def test_start(self, catalog: VariantCatalog):
        """Initial state: original only, everything offered."""
        selection = start_selection("Hello", catalog)
        assert selection.text == "Original: Hello"
        assert selection.applied is None
        assert selection.offered_codes == catalog.codes

    def test_start_rejects_multiline(self, catalog: VariantCatalog):
        """Text that cannot be carried is rejected up front."""
        with pytest.raises(EnvelopeError):
            start_selection("a\nb", catalog)

    def test_select(self, catalog: VariantCatalog):
        """Selecting applies the variant to the original."""
        selection = select_variant("Original: Hello", "b", catalog)
        assert selection.envelope.original == "Hello"
        assert selection.envelope.modified == "𝐇𝐞𝐥𝐥𝐨"
        assert selection.applied == VariantCode.BOLD
        assert selection.text == "Original: Hello\nModified: 𝐇𝐞𝐥𝐥𝐨"
        assert VariantCode.BOLD not in selection.offered_codes
        assert len(selection.offered) == len(catalog) - 1

    def test_rederives_from_original(self, catalog: VariantCatalog):
        """Bold then italic gives italic of the plain text."""
        transcoder = Transcoder(catalog)
        first = select_variant("Original: Hello", "b", catalog, transcoder)
        second = select_variant(first.text, "i", catalog, transcoder)
        assert second.envelope.original == "Hello"
        assert second.envelope.modified == transcoder.apply("Hello", "i")
        assert second.envelope.modified != transcoder.apply(first.envelope.modified, "i")

    def test_narrowing_is_recomputed(self, catalog: VariantCatalog):
        """A removed variant comes back once another is chosen."""
        first = select_variant("Original: Hi", "w", catalog)
        assert VariantCode.MONOSPACE not in first.offered_codes
        second = select_variant(first.text, "d", catalog)
        assert VariantCode.MONOSPACE in second.offered_codes
        assert VariantCode.DOUBLESTRUCK not in second.offered_codes
        assert second.offered_codes == tuple(c for c in catalog.codes if c != VariantCode.DOUBLESTRUCK)

    def test_reselect_same_variant(self, catalog: VariantCatalog):
        """There is no terminal state; the same variant can be applied again."""
        first = select_variant("Original: Hi", "o", catalog)
        second = select_variant(first.text, "o", catalog)
        assert second.envelope == first.envelope
        assert second.offered_codes == first.offered_codes

    def test_long_chain(self, catalog: VariantCatalog):
        """Any number of turns keeps the original intact."""
        text = "Original: Chain 42"
        for code in list(catalog.codes) * 3:
            selection = select_variant(text, code, catalog)
            assert selection.envelope.original == "Chain 42"
            text = selection.text

    def test_select_by_label(self, catalog: VariantCatalog):
        """Labels select too."""
        selection = select_variant("Original: Hi", "Squared", catalog)
        assert selection.applied == VariantCode.SQUARED

    def test_unknown_variant_is_no_transformation(self, catalog: VariantCatalog):
        """Unknown variant: original only, everything offered."""
        selection = select_variant("Original: Hi\nModified: 𝐇𝐢", "zz", catalog)
        assert selection.envelope == Envelope(original="Hi")
        assert selection.applied is None
        assert selection.offered_codes == catalog.codes

    def test_malformed_block(self, catalog: VariantCatalog):
        """A block without an Original line is surfaced to the caller."""
        with pytest.raises(MalformedEnvelopeError):
            select_variant("Modified: 𝐇𝐢", "b", catalog)

    def test_reduced_catalog(self, small_catalog: VariantCatalog):
        """Narrowing works over an injected catalog."""
        selection = select_variant("Original: Hi", "b", small_catalog)
        assert selection.offered_codes == (VariantCode.ITALIC,)
        selection = select_variant(selection.text, "w", small_catalog)
        assert selection.applied is None
        assert selection.offered_codes == (VariantCode.BOLD, VariantCode.ITALIC)

"""Unit tests for the token printer and its spacing table."""

import pytest

from tree_outline.models.options import Decorate
from tree_outline.printer import SPACED_PAIRS, Printer, TokenKind


class TestSpacingTable:
    """Tests for the adjacency rules between token kinds."""

    @pytest.mark.parametrize(
        "previous,following",
        [
            (TokenKind.TAG, TokenKind.PROPERTY),
            (TokenKind.PROPERTY, TokenKind.VALUE),
            (TokenKind.PROPERTY, TokenKind.TAG),
            (TokenKind.INDEX, TokenKind.TAG),
            (TokenKind.INDEX, TokenKind.VALUE),
            (TokenKind.OUTLINE, TokenKind.TAG),
            (TokenKind.OUTLINE, TokenKind.PROPERTY),
        ],
    )
    def test_spaced_pairs(self, previous, following):
        """Test every listed pair is separated by one space."""
        assert Printer.spacing(previous, following) == " "

    @pytest.mark.parametrize(
        "previous,following",
        [
            (TokenKind.NONE, TokenKind.TAG),
            (TokenKind.OUTLINE, TokenKind.INDEX),
            (TokenKind.PROPERTY, TokenKind.PROPERTY),
            (TokenKind.VALUE, TokenKind.VALUE),
            (TokenKind.NEWLINE, TokenKind.TAG),
            (TokenKind.VALUE, TokenKind.NEWLINE),
        ],
    )
    def test_unlisted_pairs_have_no_space(self, previous, following):
        """Test pairs outside the table are concatenated."""
        assert Printer.spacing(previous, following) == ""

    def test_table_is_asymmetric(self):
        """Test that reversing a spaced pair does not keep the space."""
        assert (TokenKind.PROPERTY, TokenKind.TAG) in SPACED_PAIRS
        assert (TokenKind.TAG, TokenKind.PROPERTY) in SPACED_PAIRS
        assert (TokenKind.VALUE, TokenKind.PROPERTY) not in SPACED_PAIRS
        assert Printer.spacing(TokenKind.TAG, TokenKind.INDEX) == ""


class TestPrinter:
    """Tests for emitting tokens."""

    def test_starts_empty(self):
        """Test a fresh printer emits nothing."""
        printer = Printer()
        assert printer.emit() == ""
        assert printer.previous is TokenKind.NONE

    def test_property_appends_colon(self):
        """Test property names are followed by a colon."""
        printer = Printer()
        printer.tag("Num")
        printer.property("value")
        printer.value("1")
        assert printer.emit() == "Num value: 1"

    def test_outline_then_index_is_not_spaced(self):
        """Test list indexes sit directly after the connector."""
        printer = Printer()
        printer.outline("├─")
        printer.index(0)
        printer.tag("Num")
        assert printer.emit() == "├─[0] Num"

    def test_empty_outline_is_noop(self):
        """Test an empty prefix neither prints nor changes state."""
        printer = Printer()
        printer.tag("Wrap")
        printer.outline("")
        assert printer.previous is TokenKind.TAG
        printer.property("expr")
        assert printer.emit() == "Wrap expr:"

    def test_newline_resets_spacing(self):
        """Test a token after a newline is not preceded by a space."""
        printer = Printer()
        printer.value('"x"')
        printer.newline()
        printer.tag("Next")
        assert printer.emit() == '"x"\nNext'

    def test_adjacent_values_are_concatenated(self):
        """Test value after value gets no separator."""
        printer = Printer()
        printer.value("a")
        printer.value("b")
        assert printer.emit() == "ab"


class TestPrinterDecoration:
    """Tests for decoration hooks."""

    def test_hooks_transform_each_kind(self):
        """Test each token kind goes through its own hook."""
        decorate = Decorate(
            tag=lambda text: f"<{text}>",
            index=lambda text: f"#{text}",
            property=str.upper,
            colon=lambda text: " =",
            value=lambda text: f"'{text}'",
            outline=lambda text: text.replace("─", "-"),
        )
        printer = Printer(decorate)
        printer.outline("├─")
        printer.index(2)
        printer.tag("Obj")
        printer.property("name")
        printer.value("x")
        assert printer.emit() == "├-#[2] <Obj> NAME = 'x'"

    def test_spacing_ignores_decorated_text(self):
        """Test escape codes added by hooks do not change spacing."""
        decorate = Decorate(tag=lambda text: f"\x1b[1m{text}\x1b[0m")
        printer = Printer(decorate)
        printer.tag("A")
        printer.property("b")
        assert printer.emit() == "\x1b[1mA\x1b[0m b:"

    def test_colon_decorated_once(self):
        """Test the colon hook runs once per printer, not per property."""
        calls = []

        def colon(text):
            calls.append(text)
            return text

        printer = Printer(Decorate(colon=colon))
        printer.property("a")
        printer.newline()
        printer.property("b")
        assert calls == [":"]
        assert printer.emit() == "a:\nb:"

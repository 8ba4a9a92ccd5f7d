"""Unit tests for backslash escape decoding."""

from promptgacha.core.escapes import ITEM_ESCAPES, SEPARATOR_ESCAPES, unescape


class TestStandardEscapes:
    """Tests for sequences understood in every context."""

    def test_plain_text_unchanged(self):
        """Text without backslashes is returned as-is."""
        assert unescape("a knight, at dawn", ITEM_ESCAPES) == "a knight, at dawn"

    def test_empty_string(self):
        """Empty input gives empty output."""
        assert unescape("", ITEM_ESCAPES) == ""

    def test_escaped_backslash(self):
        """Double backslash decodes to a single backslash."""
        assert unescape(r"a\\b", ITEM_ESCAPES) == "a\\b"

    def test_newline_tab_carriage_return(self):
        """\\n, \\t and \\r decode to control characters."""
        assert unescape(r"a\nb\tc\rd", SEPARATOR_ESCAPES) == "a\nb\tc\rd"

    def test_escaped_backslash_before_n(self):
        """An escaped backslash is consumed before the following n."""
        assert unescape(r"\\n", ITEM_ESCAPES) == "\\n"


class TestCustomEscapes:
    """Tests for context-specific escapes."""

    def test_item_escapes(self):
        """Braces and commas decode in items."""
        assert unescape(r"\{a\,b\}", ITEM_ESCAPES) == "{a,b}"

    def test_separator_escapes(self):
        """Parentheses and quotes decode in separators."""
        assert unescape(r"\(\)\'\"", SEPARATOR_ESCAPES) == "()'\""

    def test_separator_escape_not_allowed_in_items(self):
        """A parenthesis escape is unknown in item context."""
        assert unescape(r"\(", ITEM_ESCAPES) == r"\("

    def test_item_escape_not_allowed_in_separators(self):
        """A brace escape is unknown in separator context."""
        assert unescape(r"\{", SEPARATOR_ESCAPES) == r"\{"


class TestUnknownEscapes:
    """Tests for the unknown-escape fallback."""

    def test_unknown_escape_keeps_backslash(self):
        """An unknown escape keeps both characters."""
        assert unescape(r"a\qb", ITEM_ESCAPES) == r"a\qb"

    def test_backslash_before_escapable_is_reread(self):
        """After an unknown escape the next character is read normally."""
        # "\x" is unknown, so "x" is plain; the following "\{" still decodes.
        assert unescape(r"\x\{", ITEM_ESCAPES) == r"\x{"

    def test_trailing_backslash(self):
        """A lone trailing backslash is kept."""
        assert unescape("abc\\", ITEM_ESCAPES) == "abc\\"

    def test_round_trip_of_escaped_forms(self):
        """Literal text built from escaped forms decodes to the intended text."""
        pieces = [("x", "x"), (r"\{", "{"), (r"\}", "}"), (r"\,", ","), (r"\\", "\\"), (r"\n", "\n")]
        order = [0, 1, 4, 2, 3, 5, 0, 4, 4, 1]
        encoded = "".join(pieces[i][0] for i in order)
        expected = "".join(pieces[i][1] for i in order)
        assert unescape(encoded, ITEM_ESCAPES) == expected

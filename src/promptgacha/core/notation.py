"""Token matching and item splitting for gacha notation.

Gacha notation embeds alternative-lists in free-form prompt text::

    a portrait of {{a knight, a wizard, a thief}}(1) at dawn
    {{red, blue, green}}(2, ", ")

Multi-line content is allowed; whitespace around each item is trimmed::

    {{
      castle ruins,
      misty forest,
      harbour town
    }}(1)

Grammar
-------
A token is the de facto wire format
``\\{\\{CONTENT\\}\\}\\(COUNT(,\\s*['"]SEP['"])?\\)``:

- ``CONTENT`` is any text without an unescaped ``{`` or ``}``.  Escaped
  braces (``\\{``, ``\\}``) are allowed.  Content is lazy: the block ends at
  the first ``}}`` that is followed by a valid count clause.
- ``COUNT`` is one or more ASCII digits.
- ``SEP`` is an optional quoted separator.  Either ``'`` or ``"`` opens and
  closes it, and the body may contain ``\\'`` and ``\\"``.

Blocks do not nest.  Text that does not match the grammar at a position is
left untouched and scanning resumes at the next character.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from promptgacha.core.escapes import ITEM_ESCAPES, unescape

logger = logging.getLogger(__name__)

_OPEN = "{{"
_CLOSE = "}}"
_BRACES = "{}"
_QUOTES = "'\""
_DIGITS = "0123456789"
# Whitespace trimmed around items and allowed before a separator quote.
# Control characters \x1c-\x1f are not whitespace here.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
# Counts are clamped against the item count, so longer digit runs saturate.
_MAX_COUNT_DIGITS = 18


@dataclass(frozen=True)
class Token:
    """A located occurrence of gacha notation in source text.

    Attributes:
        start: Offset of the opening ``{{``.
        end: Offset one past the closing ``)``.
        content: Raw text between ``{{`` and ``}}``, escapes untouched.
        count: Number of items to pick (non-negative).
        separator: Raw separator body, or ``None`` when not given.
    """

    start: int
    end: int
    content: str
    count: int
    separator: str | None = None


def _content_limit(text: str, pos: int) -> int:
    """Return the furthest offset the content may reach from *pos*.

    Content may run up to (and end at) the first brace that is not directly
    preceded by a backslash inside the content.
    """
    i = pos
    length = len(text)
    while i < length:
        if text[i] in _BRACES and not (i > pos and text[i - 1] == "\\"):
            return i
        i += 1
    return length


def _separator_limit(text: str, pos: int) -> int:
    """Return the furthest offset a quoted separator body may reach from *pos*."""
    i = pos
    length = len(text)
    while i < length:
        if text[i] in _QUOTES and not (i > pos and text[i - 1] == "\\"):
            return i
        i += 1
    return length


def _match_separator(text: str, pos: int) -> tuple[str, int] | None:
    """Match ``,\\s*['"]SEP['"])`` at *pos*.

    Returns:
        ``(raw_separator, end)`` where *end* is one past the closing ``)``,
        or ``None`` when the clause does not match.
    """
    length = len(text)
    if pos >= length or text[pos] != ",":
        return None
    i = pos + 1
    while i < length and text[i] in _WHITESPACE:
        i += 1
    if i >= length or text[i] not in _QUOTES:
        return None
    body_start = i + 1
    limit = _separator_limit(text, body_start)
    # Shortest body first: the body ends at the first quote followed by ")".
    for close in range(body_start, min(limit, length - 1) + 1):
        if text[close] in _QUOTES and close + 1 < length and text[close + 1] == ")":
            return text[body_start:close], close + 2
    return None


def _match_count_clause(text: str, pos: int) -> tuple[int, str | None, int] | None:
    """Match ``(COUNT[, 'SEP'])`` at *pos*.

    Returns:
        ``(count, raw_separator, end)`` or ``None`` when the clause does not
        match.
    """
    length = len(text)
    if pos >= length or text[pos] != "(":
        return None
    i = pos + 1
    while i < length and text[i] in _DIGITS:
        i += 1
    if i == pos + 1:
        return None
    digits = text[pos + 1 : i].lstrip("0")
    count = int(digits or "0") if len(digits) <= _MAX_COUNT_DIGITS else sys.maxsize

    separator = _match_separator(text, i)
    if separator is not None:
        raw, end = separator
        return count, raw, end

    if i < length and text[i] == ")":
        return count, None, i + 1
    return None


def match_token(text: str, pos: int) -> Token | None:
    """Try to match a single token starting exactly at *pos*.

    Args:
        text: Source text.
        pos: Offset at which the opening ``{{`` must start.

    Returns:
        The matched :class:`Token`, or ``None`` if the grammar does not
        match at this position.
    """
    if not text.startswith(_OPEN, pos):
        return None
    content_start = pos + len(_OPEN)
    limit = _content_limit(text, content_start)
    for close in range(content_start, limit + 1):
        if not text.startswith(_CLOSE, close):
            continue
        clause = _match_count_clause(text, close + len(_CLOSE))
        if clause is not None:
            count, separator, end = clause
            return Token(
                start=pos,
                end=end,
                content=text[content_start:close],
                count=count,
                separator=separator,
            )
    return None


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield non-overlapping tokens in *text*, left to right."""
    pos = text.find(_OPEN)
    while pos != -1:
        token = match_token(text, pos)
        if token is None:
            pos = text.find(_OPEN, pos + 1)
            continue
        yield token
        pos = text.find(_OPEN, token.end)


def find_tokens(text: str) -> list[Token]:
    """Return all tokens in *text* in source order."""
    tokens = list(iter_tokens(text))
    logger.debug(f"Found {len(tokens)} gacha token(s)")
    return tokens


def split_items(content: str) -> list[str]:
    """Split raw token content into resolved items.

    Items are separated by unescaped commas.  Escapes for ``,``, ``{`` and
    ``}`` are kept raw while splitting and decoded afterwards, together with
    the standard escapes.  Each item is trimmed of surrounding whitespace
    (interior whitespace and newlines are kept) and empty items are dropped.

    Args:
        content: Raw token content as found between ``{{`` and ``}}``.

    Returns:
        Resolved items in declaration order.  May be empty.

    Examples:
        >>> split_items(" a , b\\\\,c ,, ")
        ['a', 'b,c']
    """
    raw_items: list[str] = []
    current: list[str] = []
    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        if char == "\\" and i + 1 < length and content[i + 1] in ITEM_ESCAPES:
            current.append(content[i : i + 2])
            i += 2
        elif char == ",":
            raw_items.append("".join(current))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1
    if current:
        raw_items.append("".join(current))

    items = (unescape(raw.strip(_WHITESPACE), ITEM_ESCAPES) for raw in raw_items)
    return [item for item in items if item]

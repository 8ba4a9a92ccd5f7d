"""Backslash escape decoding for gacha notation.

Both item text and custom separators may carry backslash escapes.  The
standard sequences are always understood:

    ``\\\\``  backslash
    ``\\n``   newline
    ``\\t``   tab
    ``\\r``   carriage return

On top of these, each caller passes the set of characters that may be
escaped literally in its context:

- Items allow ``\\{``, ``\\}`` and ``\\,`` (see :data:`ITEM_ESCAPES`).
- Separators allow ``\\(``, ``\\)``, ``\\'`` and ``\\"``
  (see :data:`SEPARATOR_ESCAPES`).

An unknown escape such as ``\\x`` keeps its backslash and the following
character is read again as ordinary text, so decoding never fails.
"""

from __future__ import annotations

from collections.abc import Container

ITEM_ESCAPES: frozenset[str] = frozenset("{},")
SEPARATOR_ESCAPES: frozenset[str] = frozenset("()'\"")

_STANDARD_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def unescape(text: str, allowed_escapes: Container[str]) -> str:
    """Decode backslash escapes in *text*.

    Args:
        text: Raw text possibly containing backslash escapes.
        allowed_escapes: Characters that may follow a backslash and be
            emitted literally, in addition to the standard sequences.

    Returns:
        The decoded string.  A trailing lone backslash is kept as-is.

    Examples:
        >>> unescape(r"\\{a\\}", ITEM_ESCAPES)
        '{a}'
        >>> unescape(r"a\\qb", ITEM_ESCAPES)
        'a\\\\qb'
    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\" and i + 1 < length:
            following = text[i + 1]
            if following in _STANDARD_ESCAPES:
                out.append(_STANDARD_ESCAPES[following])
                i += 2
                continue
            if following in allowed_escapes:
                out.append(following)
                i += 2
                continue
        # Plain character, unknown escape, or trailing backslash.
        out.append(char)
        i += 1
    return "".join(out)

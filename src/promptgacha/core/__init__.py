"""Core functionality for gacha notation.

This module provides the building blocks of the notation expander:

- **escapes.py**: Backslash escape decoding shared by items and separators
- **notation.py**: Token matcher and item splitter
- **selection.py**: Random and deterministic-preview selection strategies
- **expander.py**: Single-pass rendering, ``expand``/``preview`` entry points
- **config.py**: Configuration management using Pydantic Settings

Architecture Overview
---------------------
``expand`` and ``preview`` share one rendering routine,
:class:`NotationExpander`, parameterized by a selection strategy:

1. **Token Matcher** finds ``{{content}}(count[, 'sep'])`` occurrences.
2. **Item Splitter** divides content on unescaped commas, trims and
   decodes each item.
3. **Selection Strategy** picks which items appear.
4. The expander joins them with the decoded separator and splices the
   result into the original text.

Usage Example
-------------
    from promptgacha.core import expand, preview

    preview("{{knight,wizard}}(1) in armour")   # 'knight in armour'
    expand("{{knight,wizard}}(1) in armour")    # random choice
"""

from promptgacha.core.config import GachaConfig, config
from promptgacha.core.escapes import ITEM_ESCAPES, SEPARATOR_ESCAPES, unescape
from promptgacha.core.expander import (
    ExpansionResult,
    NotationExpander,
    expand,
    expand_batch,
    has_notation,
    preview,
)
from promptgacha.core.notation import Token, find_tokens, split_items
from promptgacha.core.selection import PreviewSelection, RandomSelection, SelectionStrategy

__all__ = [
    "ExpansionResult",
    "GachaConfig",
    "ITEM_ESCAPES",
    "NotationExpander",
    "PreviewSelection",
    "RandomSelection",
    "SEPARATOR_ESCAPES",
    "SelectionStrategy",
    "Token",
    "config",
    "expand",
    "expand_batch",
    "find_tokens",
    "has_notation",
    "preview",
    "split_items",
    "unescape",
]

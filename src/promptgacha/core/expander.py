"""Expansion of gacha notation in prompt text.

This module ties the token matcher, item splitter, separator decoding and a
selection strategy together into a single rendering pass.

Rendering
---------
For each token found in the source text, left to right:

1. Split the content into resolved items.  If none remain, the token's
   original text is kept unchanged.
2. Decode the separator (default: ``config.default_separator``).
3. Let the selection strategy pick items and join them.

All substitutions use offsets into the original text, and substituted text
is never scanned again, so an item that itself looks like notation is
emitted literally.

Usage Example
-------------
    >>> from promptgacha.core.expander import expand, expand_batch, preview
    >>> preview('{{a,b,c}}(2, ", ")')
    'a, b'
    >>> expand("{{red,blue}}(1) hat")  # doctest: +SKIP
    'blue hat'

Batch expansion mirrors generating several images from one prompt: each
entry re-runs the notation independently and records both the original and
the resolved prompt::

    >>> results = expand_batch("{{a,b,c}}(1)", 3, seed=42)
    >>> [r.seed for r in results]
    [42, 43, 44]
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from promptgacha.core.config import config
from promptgacha.core.escapes import SEPARATOR_ESCAPES, unescape
from promptgacha.core.notation import Token, find_tokens, iter_tokens, split_items
from promptgacha.core.selection import PreviewSelection, RandomSelection, SelectionStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpansionResult:
    """One expansion of a prompt.

    Attributes:
        original: Prompt text as authored, notation included.
        resolved: Prompt text after expansion.
        seed: Seed used for this expansion, or ``None`` if unseeded.
    """

    original: str
    resolved: str
    seed: int | None = None

    @property
    def changed(self) -> bool:
        """Whether any notation was substituted."""
        return self.original != self.resolved


class NotationExpander:
    """Render gacha notation with a given selection strategy.

    Args:
        strategy: Callable choosing items from a token's candidates.
        default_separator: Join text for tokens without a separator clause.
            Defaults to ``config.default_separator``.
    """

    def __init__(self, strategy: SelectionStrategy, default_separator: str | None = None):
        self.strategy = strategy
        self.default_separator = (
            default_separator if default_separator is not None else config.default_separator
        )

    def resolve_separator(self, token: Token) -> str:
        if token.separator is None:
            return self.default_separator
        return unescape(token.separator, SEPARATOR_ESCAPES)

    def render_token(self, text: str, token: Token) -> str:
        """Return the replacement text for a single token."""
        candidates = split_items(token.content)
        if not candidates:
            logger.debug(f"Token at {token.start} has no items, leaving it unchanged")
            return text[token.start : token.end]
        chosen = self.strategy(candidates, min(token.count, len(candidates)))
        return self.resolve_separator(token).join(chosen)

    def render(self, text: str) -> str:
        """Replace every token in *text* in a single pass."""
        parts: list[str] = []
        last = 0
        for token in find_tokens(text):
            parts.append(text[last : token.start])
            parts.append(self.render_token(text, token))
            last = token.end
        parts.append(text[last:])
        return "".join(parts)


def expand(text: str, rng: random.Random | None = None) -> str:
    """Resolve gacha notation with random selection.

    Repeated calls on the same text generally give different results.

    Args:
        text: Prompt text containing gacha notation.
        rng: Random source.  Defaults to a process-wide generator.

    Returns:
        Prompt text with every token replaced.
    """
    return NotationExpander(RandomSelection(rng)).render(text)


def preview(text: str) -> str:
    """Resolve gacha notation deterministically for display.

    Each token shows its first ``count`` items in declaration order.  No
    randomness is consumed.
    """
    return NotationExpander(PreviewSelection()).render(text)


def has_notation(text: str) -> bool:
    """Return True if *text* contains at least one gacha token."""
    return next(iter_tokens(text), None) is not None


def expand_batch(text: str, batch_size: int, seed: int | None = None) -> list[ExpansionResult]:
    """Expand *text* independently *batch_size* times.

    Args:
        text: Prompt text containing gacha notation.
        batch_size: Number of expansions (at least 1).
        seed: Base seed.  Expansion ``i`` uses ``seed + i`` so a batch can be
            reproduced.  ``None`` draws from the process-wide generator.

    Returns:
        One :class:`ExpansionResult` per expansion, in order.

    Raises:
        ValueError: If *batch_size* is less than 1.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")

    results = []
    for i in range(batch_size):
        item_seed = seed + i if seed is not None else None
        rng = random.Random(item_seed) if item_seed is not None else None
        results.append(ExpansionResult(original=text, resolved=expand(text, rng), seed=item_seed))

    logger.debug(f"Expanded batch of {batch_size} (base seed: {seed})")
    return results

"""Selection strategies for resolving gacha tokens.

A selection strategy decides which of a token's candidate items appear in
the output.  Two strategies exist:

- :class:`RandomSelection` draws a uniformly random permutation of the
  candidates (Fisher-Yates shuffle) and keeps the first ``count`` of it.
  This is what actual generation uses.
- :class:`PreviewSelection` keeps the first ``count`` candidates in
  declaration order.  It never consumes randomness, so live previews stay
  stable while a prompt is being edited.

Both return ``min(count, len(candidates))`` items and an empty list for a
count of zero.  The random source is injected so tests can pass a seeded
``random.Random``.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

# Process-level generator used when no random source is injected.
_default_rng = random.Random()


class SelectionStrategy(Protocol):
    """Callable picking items from a token's candidates."""

    def __call__(self, candidates: Sequence[str], count: int) -> list[str]: ...


class RandomSelection:
    """Pick ``count`` distinct candidates in random order.

    Args:
        rng: Random source.  Defaults to a process-wide ``random.Random``
            seeded from system entropy.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else _default_rng

    def __call__(self, candidates: Sequence[str], count: int) -> list[str]:
        if count <= 0:
            return []
        # random.shuffle is an in-place Fisher-Yates shuffle.
        shuffled = list(candidates)
        self.rng.shuffle(shuffled)
        return shuffled[:count]


class PreviewSelection:
    """Pick the first ``count`` candidates in declaration order."""

    def __call__(self, candidates: Sequence[str], count: int) -> list[str]:
        if count <= 0:
            return []
        return list(candidates[:count])

"""Prompt Gacha - gacha notation expansion for image generation prompts."""

__version__ = "0.1.0"

from promptgacha.core.config import GachaConfig, config
from promptgacha.core.escapes import unescape
from promptgacha.core.expander import (
    ExpansionResult,
    NotationExpander,
    expand,
    expand_batch,
    has_notation,
    preview,
)

__all__ = [
    "ExpansionResult",
    "GachaConfig",
    "NotationExpander",
    "config",
    "expand",
    "expand_batch",
    "has_notation",
    "preview",
    "unescape",
]

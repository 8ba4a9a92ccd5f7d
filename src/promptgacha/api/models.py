"""Pydantic request and response models for the Prompt Gacha API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
PreviewRequest
    Payload for ``POST /api/notation/preview``.
ExpandRequest
    Payload for ``POST /api/notation/expand``: the prompt plus batch size
    and an optional base seed.
ExpandedPrompt
    One resolved prompt within an expand response.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PreviewRequest(BaseModel):
    """Request body for the ``POST /api/notation/preview`` endpoint.

    Attributes:
        text: Prompt text possibly containing gacha notation.
    """

    text: str = Field(
        ...,
        description="Prompt text possibly containing gacha notation.",
    )


class ExpandRequest(BaseModel):
    """Request body for the ``POST /api/notation/expand`` endpoint.

    Attributes:
        text: Prompt text possibly containing gacha notation.
        batch_size: Number of independent expansions.  Checked against
            ``config.max_batch_size`` by the endpoint.
        seed: Base seed.  ``None`` means the server picks a random seed.
    """

    text: str = Field(
        ...,
        description="Prompt text possibly containing gacha notation.",
    )
    batch_size: int = Field(
        default=1,
        description="Number of independent expansions.",
    )
    seed: int | None = Field(
        default=None,
        description="Base seed.  None = server picks a random seed.",
    )


class ExpandedPrompt(BaseModel):
    """One resolved prompt within a batch.

    Attributes:
        resolved: Prompt text after expansion.
        changed: Whether any notation was substituted.
        seed: Seed used for this expansion.
    """

    resolved: str
    changed: bool
    seed: int

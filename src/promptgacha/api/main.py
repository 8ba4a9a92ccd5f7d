"""Prompt Gacha: FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes and the
``main()`` CLI function that launches the uvicorn server.

The API is a thin wrapper over :mod:`promptgacha.core.expander`; it keeps
no state between requests.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/health``               Liveness check and version
POST      ``/api/notation/preview``     Deterministic preview of a prompt
POST      ``/api/notation/expand``      Random expansion, optionally batched
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    promptgacha

Direct invocation::

    python -m promptgacha.api.main
"""

from __future__ import annotations

import logging
import random

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from promptgacha import __version__
from promptgacha.api.models import ExpandedPrompt, ExpandRequest, PreviewRequest
from promptgacha.core.config import config
from promptgacha.core.expander import expand_batch, has_notation, preview

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Prompt Gacha",
    description="Gacha notation preview and expansion for image generation prompts.",
    version=__version__,
)

# Allow cross-origin requests so a prompt editor served from another port
# can call the API during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/health")
async def health() -> dict:
    """Return service status and version."""
    return {"status": "ok", "version": __version__}


@app.post("/api/notation/preview")
async def preview_notation(req: PreviewRequest) -> dict:
    """Render a deterministic preview of a prompt.

    Each token shows its first ``count`` items in declaration order, so
    repeated calls while the user types give the same result.

    Args:
        req: Validated :class:`PreviewRequest` payload.

    Returns:
        Dictionary with ``original``, ``preview`` and ``has_notation``.
    """
    return {
        "original": req.text,
        "preview": preview(req.text),
        "has_notation": has_notation(req.text),
    }


@app.post("/api/notation/expand")
async def expand_notation(req: ExpandRequest) -> dict:
    """Expand a prompt's notation one or more times.

    Each prompt in the batch resolves the notation independently with seed
    ``batch_seed + index``, so a batch can be reproduced by sending the
    returned ``batch_seed`` back.

    Args:
        req: Validated :class:`ExpandRequest` payload.

    Returns:
        Dictionary with ``original``, ``batch_seed`` and ``results``.

    Raises:
        HTTPException: 400 if ``batch_size`` is outside
            ``1..config.max_batch_size``.
    """
    if req.batch_size < 1 or req.batch_size > config.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"batch_size must be between 1 and {config.max_batch_size}",
        )

    base_seed = req.seed if req.seed is not None else random.randint(0, 2**32 - 1)
    results = expand_batch(req.text, req.batch_size, seed=base_seed)
    logger.info(f"Expanded prompt {req.batch_size} time(s) with base seed {base_seed}")

    return {
        "original": req.text,
        "batch_seed": base_seed,
        "results": [
            ExpandedPrompt(resolved=r.resolved, changed=r.changed, seed=r.seed).model_dump()
            for r in results
        ],
    }


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~promptgacha.core.config.config` (which
    loads from ``PROMPTGACHA_SERVER_HOST`` and ``PROMPTGACHA_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``promptgacha`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "promptgacha.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()

"""Shared pytest fixtures for Prompt Gacha tests."""

import random

import pytest
from fastapi.testclient import TestClient

from promptgacha.api.main import app
from promptgacha.core.config import GachaConfig


@pytest.fixture
def seeded_rng() -> random.Random:
    """Create a fixed-seed random source for reproducible shuffles.

    Returns:
        random.Random seeded with 1234
    """
    return random.Random(1234)


@pytest.fixture
def test_config(monkeypatch) -> GachaConfig:
    """Create a configuration isolated from the environment and .env files.

    Returns:
        GachaConfig instance with default values
    """
    for name in ("DEFAULT_SEPARATOR", "MAX_BATCH_SIZE", "SERVER_HOST", "SERVER_PORT"):
        monkeypatch.delenv(f"PROMPTGACHA_{name}", raising=False)
    return GachaConfig(_env_file=None)


@pytest.fixture
def test_client() -> TestClient:
    """Create a FastAPI test client for the API app.

    Returns:
        TestClient bound to promptgacha.api.main.app
    """
    return TestClient(app)


@pytest.fixture
def sample_prompts() -> list[str]:
    """Sample prompts mixing notation and plain text.

    Returns:
        List of test prompts
    """
    return [
        "A simple prompt",
        "a {{knight,wizard,thief}}(1) at dawn",
        '{{red,blue,green}}(2, ", ") hat',
        "{{\n  castle ruins,\n  misty forest\n}}(1), cinematic",
        "{{unfinished,notation}} stays as is",
    ]

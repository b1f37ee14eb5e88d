"""Shared pytest fixtures for all test layers."""

import os
from unittest.mock import AsyncMock

import pytest

# Pin the model before app.services is imported, otherwise load_dotenv() may
# pick up a developer's .env.
os.environ.setdefault("GEMINI_MODEL", "gemini-1.5-flash")
os.environ.pop("GEMINI_HTTP_TIMEOUT_MS", None)

from tests.helpers import make_workbook  # noqa: E402


@pytest.fixture
def two_sheet_workbook() -> bytes:
    return make_workbook(
        {
            "Jan": [["Item", "Qty"], ["Pen", 5]],
            "Feb": [["Item", "Qty"], ["Pad", 3]],
        }
    )


@pytest.fixture
def fake_generator() -> AsyncMock:
    """A generator stub whose generate() returns canned text."""
    generator = AsyncMock()
    generator.generate = AsyncMock(return_value="Generated insights")
    return generator

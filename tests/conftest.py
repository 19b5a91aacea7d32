"""Session-wide test configuration."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Keep a logger configured by one test from writing to another test's streams."""
    yield
    structlog.reset_defaults()

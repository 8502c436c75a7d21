"""Pytest configuration and fixtures.

Doubles live in tests/_doubles.py; the fixtures here hand out fresh
instances and patch the default stderr sink.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tests._doubles import SpyLogger, SpyTransform

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def spy_logger() -> SpyLogger:
    return SpyLogger()


@pytest.fixture
def default_sink(monkeypatch: pytest.MonkeyPatch) -> SpyLogger:
    """Replace the default stderr sink used by safe_async()."""
    spy = SpyLogger()
    monkeypatch.setattr("safe_async._wrap.default_logger", spy)
    return spy


@pytest.fixture
def make_transform() -> Callable[[Exception | None], SpyTransform]:
    return SpyTransform

"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def short_parts() -> list[str]:
    """Many small fragments, like CSV cells or SQL column names."""
    return [f"col_{i}" for i in range(1000)]


@pytest.fixture
def long_parts() -> list[str]:
    """Fewer large fragments (~100KB total)."""
    return [f"paragraph {i} " * 100 for i in range(80)]

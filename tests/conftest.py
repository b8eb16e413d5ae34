# tests/conftest.py
from __future__ import annotations

import struct
from collections.abc import Callable, Generator, Sequence

import prometheus_client as prom
import pytest

from pg_replicate.config.settings import get_settings

PackNumeric = Callable[..., bytes]


def _pack_numeric(
    digits: Sequence[int] = (),
    *,
    weight: int = 0,
    sign: int = 0x0000,
    scale: int = 0,
    ndigits: int | None = None,
) -> bytes:
    """Build a binary NUMERIC value.

    ``ndigits`` overrides the header count so tests can declare more groups
    than are actually present.
    """
    count = len(digits) if ndigits is None else ndigits
    header = struct.pack(">HhHH", count, weight, sign, scale)
    return header + struct.pack(f">{len(digits)}H", *digits)


@pytest.fixture
def pack_numeric() -> PackNumeric:
    """Return the binary NUMERIC builder."""
    return _pack_numeric


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against fresh settings in the TEST environment."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry(monkeypatch: pytest.MonkeyPatch) -> prom.CollectorRegistry:
    """Swap in an empty default Prometheus registry for the test."""
    fresh = prom.CollectorRegistry()
    monkeypatch.setattr(prom, "REGISTRY", fresh)
    return fresh

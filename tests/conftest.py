"""Shared pytest fixtures and test helpers for optval tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest

from optval.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from ``OPTVAL_*`` env vars and cached settings."""
    for name in ("OPTVAL_COPY_MODE", "OPTVAL_VERBOSE", "OPTVAL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class ReleaseRecorder:
    """Instrumented ``on_release`` hook that records every released payload."""

    def __init__(self) -> None:
        self.released: list[Any] = []

    def __call__(self, payload: Any) -> None:
        self.released.append(payload)

    @property
    def count(self) -> int:
        return len(self.released)


@pytest.fixture
def recorder() -> ReleaseRecorder:
    """Provide a fresh release recorder."""
    return ReleaseRecorder()


class Tracked:
    """Payload type whose instances can be weakly referenced."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tracked) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Tracked({self.name!r})"

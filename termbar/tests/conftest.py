#!/usr/bin/env python3
"""
Ensure the project root (containing the 'termbar' package) is on sys.path
so tests can import without requiring an installed/editable package.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# tests/ -> termbar/ -> project_root/
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeClock:
    """Settable time source in seconds."""

    def __init__(self, t: float = 1000.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _clean_termbar_env(monkeypatch):
    for key in ("TERMBAR_MININTERVAL", "TERMBAR_WIDTH", "TERMBAR_DISABLE"):
        monkeypatch.delenv(key, raising=False)

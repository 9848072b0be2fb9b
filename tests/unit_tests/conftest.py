"""Fixtures replacing the process layer for unit tests."""

from __future__ import annotations

import pytest
from fakes import FakeRunner

from wslpath2 import process


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WSLPATH2_EXECUTABLE", "WSLPATH2_TOOL", "WSLPATH2_DISTRO"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """Install a ``FakeRunner`` in place of ``process.run_command``."""
    runner = FakeRunner()
    monkeypatch.setattr(process, "run_command", runner)
    return runner

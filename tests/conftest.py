"""Suite markers and WSL availability gating."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from wslpath2.config import get_config

SUITE_MARKERS = {
    "e2e_tests": "e2e",
    "integration_tests": "integration",
    "unit_tests": "unit",
}


def wsl_available() -> bool:
    """Return ``True`` when the configured front-end resolves on ``PATH``."""
    return shutil.which(get_config().executable) is not None


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items by suite directory and skip integration tests without WSL."""
    del config
    skip_no_wsl = pytest.mark.skip(
        reason=f"{get_config().executable} is not available"
    )
    has_wsl = wsl_available()
    for item in items:
        parts = Path(str(item.fspath)).parts
        suite = next((SUITE_MARKERS[part] for part in parts if part in SUITE_MARKERS), None)
        if suite is None:
            continue
        item.add_marker(getattr(pytest.mark, suite))
        if suite == "integration" and not has_wsl:
            item.add_marker(skip_no_wsl)

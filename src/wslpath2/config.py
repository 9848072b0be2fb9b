"""Runtime configuration for path conversion."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_EXECUTABLE = "wsl.exe"
DEFAULT_TOOL = "wslpath"


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class WslPathConfig:
    """Settings controlling how ``wslpath`` is invoked.

    Parameters
    ----------
    executable : str, default="wsl.exe"
        Front-end executable launched as the child process.
    tool : str, default="wslpath"
        Conversion tool executed inside the distribution via ``-e``.
    default_distro : str | None, default=None
        Distribution used when a call does not name one.
    """

    executable: str = DEFAULT_EXECUTABLE
    tool: str = DEFAULT_TOOL
    default_distro: str | None = None


def get_config() -> WslPathConfig:
    """Load converter config from environment variables."""
    return WslPathConfig(
        executable=_env_str("WSLPATH2_EXECUTABLE", DEFAULT_EXECUTABLE),
        tool=_env_str("WSLPATH2_TOOL", DEFAULT_TOOL),
        default_distro=_env_optional("WSLPATH2_DISTRO"),
    )

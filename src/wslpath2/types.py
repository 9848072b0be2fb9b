"""Shared type aliases and the conversion mode enumeration."""

from __future__ import annotations

from enum import Enum
from typing import Literal, TypeAlias

ConversionFlag: TypeAlias = Literal["-u", "-w", "-m"]


class Conversion(str, Enum):
    """Type of conversion performed by ``wslpath``."""

    WINDOWS_TO_WSL = "windows-to-wsl"
    """Convert a Windows path to a WSL path."""

    WSL_TO_WINDOWS = "wsl-to-windows"
    """Convert a WSL path to a Windows path."""

    WSL_TO_WINDOWS_LINUX_STYLE = "wsl-to-windows-linux-style"
    """Convert a WSL path to a Windows path using forward slashes."""

    @property
    def flag(self) -> ConversionFlag:
        """Return the ``wslpath`` flag selecting this conversion."""
        return _FLAGS[self]


_FLAGS: dict[Conversion, ConversionFlag] = {
    Conversion.WINDOWS_TO_WSL: "-u",
    Conversion.WSL_TO_WINDOWS: "-w",
    Conversion.WSL_TO_WINDOWS_LINUX_STYLE: "-m",
}

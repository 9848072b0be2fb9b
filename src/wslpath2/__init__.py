"""Convert Windows paths to WSL paths and vice versa.

Conversion is delegated to ``wslpath`` running inside a WSL distribution,
reached through the ``wsl.exe`` front-end.

Examples
--------
>>> from wslpath2 import Conversion, convert
>>> convert("/mnt/c", None, Conversion.WSL_TO_WINDOWS)  # doctest: +SKIP
'C:\\\\'
"""

from __future__ import annotations

from wslpath2.config import WslPathConfig, get_config
from wslpath2.converter import convert, convert_request, to_windows, to_wsl
from wslpath2.errors import ExitStatusError, LaunchError, OutputDecodeError, WslPathError
from wslpath2.schemas import ConversionRequest
from wslpath2.types import Conversion

__version__ = "0.1.0"

__all__ = [
    "Conversion",
    "ConversionRequest",
    "ExitStatusError",
    "LaunchError",
    "OutputDecodeError",
    "WslPathConfig",
    "WslPathError",
    "convert",
    "convert_request",
    "get_config",
    "to_windows",
    "to_wsl",
]

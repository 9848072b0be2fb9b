"""Error hierarchy raised by path conversion."""

from __future__ import annotations


class WslPathError(RuntimeError):
    """Base class for every failure surfaced by the converter.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI should use when reporting this error.
    """

    exit_code: int = 1


class LaunchError(WslPathError):
    """The ``wsl.exe`` front-end could not be started."""


class ExitStatusError(WslPathError):
    """``wslpath`` ran but exited with a non-zero (or unobtainable) status."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"Error getting wslpath: {returncode}")
        self.returncode = returncode
        if returncode > 0:
            self.exit_code = returncode


class OutputDecodeError(WslPathError):
    """``wslpath`` output was not valid UTF-8 text."""

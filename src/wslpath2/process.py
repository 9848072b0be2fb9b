"""Child-process launch helpers."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)

# https://learn.microsoft.com/en-us/windows/win32/procthread/process-creation-flags
CREATE_NO_WINDOW = 0x08000000


def supports_creation_flags() -> bool:
    """Return ``True`` when the host accepts process-creation flags."""
    return os.name == "nt"


def creation_flags() -> int:
    """Return the flags suppressing a console window, or ``0`` when unsupported."""
    if not supports_creation_flags():
        return 0
    return CREATE_NO_WINDOW


def run_command(argv: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    """Run ``argv`` to completion and capture its output.

    Parameters
    ----------
    argv : Sequence[str]
        Executable followed by its arguments.

    Returns
    -------
    subprocess.CompletedProcess[bytes]
        Finished process with raw ``stdout``/``stderr`` bytes.

    Raises
    ------
    OSError
        If the executable cannot be started.

    Notes
    -----
    On Windows the child is created without a console window so callers
    running inside GUI applications do not see a terminal flash.
    """
    kwargs: dict[str, object] = {
        "stdout": subprocess.PIPE,
        "stderr": subprocess.PIPE,
        "check": False,
    }
    if supports_creation_flags():
        kwargs["creationflags"] = creation_flags()

    logger.debug("running %s", subprocess.list2cmdline(list(argv)))
    return subprocess.run(list(argv), **kwargs)  # type: ignore[call-overload]

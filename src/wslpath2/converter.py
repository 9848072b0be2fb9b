"""Path conversion through ``wsl.exe -e wslpath``."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wslpath2 import process
from wslpath2.config import WslPathConfig, get_config
from wslpath2.errors import ExitStatusError, LaunchError, OutputDecodeError, WslPathError
from wslpath2.schemas import ConversionRequest
from wslpath2.types import Conversion

logger = logging.getLogger(__name__)

UNKNOWN_EXIT_CODE = -1


def escape_path(path: str) -> str:
    """Double every backslash so ``wsl.exe`` passes it through literally."""
    return path.replace("\\", "\\\\")


def build_arguments(
    path: str,
    distro: str | None,
    conversion: Conversion,
    force_absolute_path: bool = False,
    *,
    tool: str = "wslpath",
) -> list[str]:
    """Assemble ``wsl.exe`` arguments for one conversion.

    Parameters
    ----------
    path : str
        Path to convert; backslashes are escaped.
    distro : str | None
        Distribution performing the conversion, or ``None`` for the default.
    conversion : Conversion
        Conversion direction and style.
    force_absolute_path : bool, default=False
        Ask ``wslpath`` to resolve the result to an absolute path.
    tool : str, default="wslpath"
        Name of the conversion tool executed inside the distribution.

    Returns
    -------
    list[str]
        Arguments in the order ``[-d distro] -e tool flag [-a] path``.
    """
    args: list[str] = []
    if distro is not None:
        args.extend(["-d", distro])
    args.extend(["-e", tool])
    args.append(conversion.flag)
    if force_absolute_path:
        args.append("-a")
    args.append(escape_path(path))
    return args


def parse_output(returncode: int | None, stdout: bytes) -> str:
    """Interpret a finished ``wslpath`` process.

    Raises
    ------
    ExitStatusError
        If the exit code is non-zero or could not be obtained.
    OutputDecodeError
        If standard output is not valid UTF-8.
    """
    # Negative codes mean the child was killed by a signal.
    code = UNKNOWN_EXIT_CODE if returncode is None or returncode < 0 else returncode
    if code != 0:
        raise ExitStatusError(code)

    try:
        text = stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeError(f"wslpath output is not valid UTF-8: {exc}") from exc
    return text.strip()


def convert_request(
    request: ConversionRequest,
    *,
    config: WslPathConfig | None = None,
) -> str:
    """Run ``wslpath`` for a validated request and return the converted path."""
    config = config or get_config()
    distro = request.distro if request.distro is not None else config.default_distro
    argv = [
        config.executable,
        *build_arguments(
            request.path,
            distro,
            request.conversion,
            request.force_absolute_path,
            tool=config.tool,
        ),
    ]

    try:
        completed = process.run_command(argv)
    except (OSError, ValueError) as exc:
        # ValueError: arguments containing NUL cannot be passed to a process.
        logger.debug("failed to launch %s: %s", config.executable, exc)
        raise LaunchError(f"Could not run {config.executable}: {exc}") from exc

    if completed.returncode != 0:
        logger.debug(
            "wslpath exited with %s: %s",
            completed.returncode,
            (completed.stderr or b"").decode("utf-8", errors="replace").strip(),
        )
    return parse_output(completed.returncode, completed.stdout)


def convert(
    path: str,
    distro: str | None,
    conversion: Conversion,
    force_absolute_path: bool = False,
    *,
    config: WslPathConfig | None = None,
) -> str:
    """Convert paths using ``wslpath``.

    Parameters
    ----------
    path : str
        The path to convert.
    distro : str | None
        The distribution to use for conversion when calling from Windows.
    conversion : Conversion
        The type of conversion to perform.
    force_absolute_path : bool, default=False
        Force the result to be an absolute path.
    config : WslPathConfig | None, default=None
        Invocation settings; loaded from the environment when omitted.

    Returns
    -------
    str
        Converted path with surrounding whitespace removed.

    Raises
    ------
    WslPathError
        If the request is invalid, ``wsl.exe`` cannot be started, exits
        unsuccessfully, or prints undecodable output.

    Examples
    --------
    >>> convert("/mnt/c", None, Conversion.WSL_TO_WINDOWS)  # doctest: +SKIP
    'C:\\\\'
    """
    try:
        request = ConversionRequest(
            path=path,
            distro=distro,
            conversion=conversion,
            force_absolute_path=force_absolute_path,
        )
    except ValidationError as exc:
        raise WslPathError(f"Invalid conversion request: {exc}") from exc
    return convert_request(request, config=config)


def to_windows(
    path: str,
    distro: str | None = None,
    *,
    forward_slashes: bool = False,
    force_absolute_path: bool = False,
    config: WslPathConfig | None = None,
) -> str:
    """Convert a WSL path to its Windows form."""
    conversion = (
        Conversion.WSL_TO_WINDOWS_LINUX_STYLE if forward_slashes else Conversion.WSL_TO_WINDOWS
    )
    return convert(path, distro, conversion, force_absolute_path, config=config)


def to_wsl(
    path: str,
    distro: str | None = None,
    *,
    force_absolute_path: bool = False,
    config: WslPathConfig | None = None,
) -> str:
    """Convert a Windows path to its WSL form."""
    return convert(
        path, distro, Conversion.WINDOWS_TO_WSL, force_absolute_path, config=config
    )

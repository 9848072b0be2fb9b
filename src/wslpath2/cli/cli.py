#!/usr/bin/env python3
"""
wslpath2.cli.cli

Typer-based CLI for converting paths between WSL and Windows.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Convert a WSL path to a Windows path:

    wslpath2 to-windows /mnt/c/Users

Convert a Windows path to a WSL path in a specific distribution:

    wslpath2 to-wsl 'C:\\Users' --distro Ubuntu
"""

from __future__ import annotations

import logging
import platform
import sys
import traceback

import typer

from wslpath2.errors import WslPathError
from wslpath2.types import Conversion

app = typer.Typer(
    name="wslpath2",
    help="Convert paths between WSL and Windows using wslpath.",
    no_args_is_help=True,
)

DISTRO_HELP = "WSL distribution performing the conversion (default distribution if omitted)."
ABSOLUTE_HELP = "Force the result to be an absolute path."


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _run(
    ctx: typer.Context,
    path: str,
    distro: str | None,
    conversion: Conversion,
    absolute: bool,
) -> None:
    """Convert ``path`` and echo the result, mapping failures to exit codes."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from wslpath2.converter import convert

        typer.echo(convert(path, distro, conversion, absolute))
    except WslPathError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging on error."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    ctx.obj = {"debug": debug}
    if debug:
        logging.basicConfig(level=logging.DEBUG)


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to convert."),
    mode: Conversion = typer.Option(
        Conversion.WSL_TO_WINDOWS, "--mode", help="Conversion to perform."
    ),
    distro: str | None = typer.Option(None, "--distro", "-d", help=DISTRO_HELP),
    absolute: bool = typer.Option(False, "--absolute", "-a", help=ABSOLUTE_HELP),
) -> None:
    """Convert a path with an explicit conversion mode."""
    _run(ctx, path, distro, mode, absolute)


@app.command("to-windows")
def to_windows_cmd(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="WSL path to convert."),
    distro: str | None = typer.Option(None, "--distro", "-d", help=DISTRO_HELP),
    forward_slashes: bool = typer.Option(
        False, "--forward-slashes", "-m", help="Use '/' separators in the Windows path."
    ),
    absolute: bool = typer.Option(False, "--absolute", "-a", help=ABSOLUTE_HELP),
) -> None:
    """Convert a WSL path to a Windows path.

    Notes
    -----
    - ``--forward-slashes`` maps to ``wslpath -m``; otherwise ``wslpath -w``.
    """
    conversion = (
        Conversion.WSL_TO_WINDOWS_LINUX_STYLE if forward_slashes else Conversion.WSL_TO_WINDOWS
    )
    _run(ctx, path, distro, conversion, absolute)


@app.command("to-wsl")
def to_wsl_cmd(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Windows path to convert."),
    distro: str | None = typer.Option(None, "--distro", "-d", help=DISTRO_HELP),
    absolute: bool = typer.Option(False, "--absolute", "-a", help=ABSOLUTE_HELP),
) -> None:
    """Convert a Windows path to a WSL path."""
    _run(ctx, path, distro, Conversion.WINDOWS_TO_WSL, absolute)


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed versions and the effective invocation settings."""
    import importlib.metadata as metadata

    from wslpath2 import process
    from wslpath2.config import get_config

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"Platform: {platform.system()} {platform.release()}")
    for module in ("wslpath2", "pydantic", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    config = get_config()
    typer.echo(f"executable: {config.executable}")
    typer.echo(f"tool: {config.tool}")
    typer.echo(f"default distro: {config.default_distro or '<default>'}")
    typer.echo(f"creation flags: {process.creation_flags():#x}")


if __name__ == "__main__":
    app()

"""Unit tests for child-process launch configuration."""

from __future__ import annotations

import subprocess

import pytest

from wslpath2 import process


def _capture_run(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    seen: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        seen["argv"] = argv
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(argv, 0, b"C:\\\n", b"")

    monkeypatch.setattr(process.subprocess, "run", fake_run)
    return seen


def test_no_creation_flags_off_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Omit creationflags entirely when the host does not support them."""
    monkeypatch.setattr(process, "supports_creation_flags", lambda: False)
    seen = _capture_run(monkeypatch)

    completed = process.run_command(["wsl.exe", "-e", "wslpath", "-w", "/mnt/c"])

    assert completed.stdout == b"C:\\\n"
    assert seen["argv"] == ["wsl.exe", "-e", "wslpath", "-w", "/mnt/c"]
    kwargs = seen["kwargs"]
    assert isinstance(kwargs, dict)
    assert "creationflags" not in kwargs
    assert kwargs["stdout"] is subprocess.PIPE
    assert kwargs["stderr"] is subprocess.PIPE
    assert kwargs["check"] is False
    assert process.creation_flags() == 0


def test_hides_console_window_on_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pass CREATE_NO_WINDOW when creation flags are supported."""
    monkeypatch.setattr(process, "supports_creation_flags", lambda: True)
    seen = _capture_run(monkeypatch)

    process.run_command(["wsl.exe"])

    kwargs = seen["kwargs"]
    assert isinstance(kwargs, dict)
    assert kwargs["creationflags"] == 0x08000000
    assert process.creation_flags() == process.CREATE_NO_WINDOW


def test_supports_creation_flags_follows_os_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Report support only for Windows hosts."""
    monkeypatch.setattr(process.os, "name", "posix")
    assert process.supports_creation_flags() is False
    monkeypatch.setattr(process.os, "name", "nt")
    assert process.supports_creation_flags() is True


def test_launch_failure_propagates_oserror() -> None:
    """Surface a missing executable as the original OSError."""
    with pytest.raises(OSError):
        process.run_command(["definitely-not-a-real-wsl-front-end.exe"])

"""Running commands and clearing the console."""

from __future__ import annotations

import subprocess
import sys


def run(command: str, *args: str) -> bytes:
    """Run ``command`` with ``args`` and return its combined stdout and stderr.

    Raises ``subprocess.CalledProcessError`` (carrying the output) on a
    non-zero exit, and ``OSError`` when the command cannot be started.
    """
    completed = subprocess.run(
        [command, *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
    )
    if completed.returncode != 0:
        raise subprocess.CalledProcessError(
            completed.returncode, completed.args, output=completed.stdout
        )
    return completed.stdout


def clear() -> None:
    """Clear the console screen on Windows and macOS."""
    platform = sys.platform
    if platform == "win32":
        run("cls")
    elif platform == "darwin":
        run("clear")
"""Terminal output for the generator.

Warnings and the abort notice go to stderr; progress and next-step
instructions go to stdout.
"""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.markup import escape


def launched_from_cmd() -> bool:
    """Return True when running under the Windows command interpreter.

    POSIX-like shells on Windows (Git Bash, MSYS) export ``_``; cmd.exe
    does not.
    """
    return sys.platform == "win32" and "_" not in os.environ


def print_warning(message: str, console: Console) -> None:
    """Print a multi-line warning, one ``warning:`` prefix per line."""
    console.print()
    for line in message.split("\n"):
        console.print(f"  warning: {escape(line)}", soft_wrap=True)
    console.print()


def next_steps_lines(app_name: str, windows_cmd: bool) -> list[str]:
    """Return the install/run instructions for the generated app.

    The wording depends only on the shell: cmd.exe needs
    ``SET VAR=val & cmd`` where POSIX shells take ``VAR=val cmd``.
    """
    prompt = ">" if windows_cmd else "$"
    if windows_cmd:
        run = f"{prompt} SET DEBUG={app_name}:* & npm start"
    else:
        run = f"{prompt} DEBUG={app_name}:* npm start"
    return [
        "",
        "   install dependencies:",
        f"     {prompt} npm install",
        "",
        "   run the app:",
        f"     {run}",
        "",
    ]


def print_next_steps(app_name: str, console: Console, windows_cmd: bool | None = None) -> None:
    if windows_cmd is None:
        windows_cmd = launched_from_cmd()
    for line in next_steps_lines(app_name, windows_cmd):
        console.print(escape(line), highlight=False, soft_wrap=True)

"""Session commands: help, about, history, scripts, and the small one-liners.

``bub`` runs a ``.bub`` script: a text file holding one command per
line.  Each line goes back through the shell's dispatcher exactly as if
it had been typed, so it is recorded in history and reports its own
errors.  Blank lines and lines starting with ``#`` are skipped.
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import TYPE_CHECKING

from bubble_os.commands.common import require, target
from bubble_os.commands.files import read_text
from bubble_os.errors import ErrorKind, ShellError

if TYPE_CHECKING:
    from bubble_os.shell import Shell

SCRIPT_EXTENSION = ".bub"

# Scripts may run other scripts, but not without limit.
MAX_SCRIPT_DEPTH = 16

_LICENSE = """\
    MIT License

    Copyright (c) {year} {name}

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in all
    copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
    SOFTWARE."""


def cmd_exit(shell: Shell, _args: list[str]) -> str:
    """Ask the front-end to end the session."""
    return shell.EXIT_SENTINEL


def cmd_help(shell: Shell, args: list[str]) -> str:
    """List every command, or show the usage of one."""
    if args:
        name = args[0]
        command = next((c for c in shell.commands if c.prefix == name), None)
        if command is None:
            raise ShellError(ErrorKind.UNRECOGNIZED_COMMAND, name)
        return f"{command.prefix}: {command.summary}\nUsage: {command.usage}"

    width = max(len(c.prefix) for c in shell.commands)
    lines = ["Available commands:"]
    lines.extend(f"  {c.prefix:<{width}}  {c.summary}" for c in shell.commands)
    lines.append("\nType 'help <command>' for more information about a command.")
    return "\n".join(lines)


def cmd_cls(shell: Shell, _args: list[str]) -> str:
    """Clear the terminal screen."""
    shell.terminal.clear()
    return ""


def cmd_about(shell: Shell, args: list[str]) -> str:
    """Show the shell's name, version and author; ``-l`` adds the licence."""
    settings = shell.settings
    lines = [
        f"About {settings.name}",
        "",
        f"{settings.name}, v{settings.version} (build {settings.build})",
        f"Made by {settings.author}!",
    ]
    if "-l" in args:
        lines.extend(["", _LICENSE.format(year=datetime.now().year, name=settings.name)])
    return "\n".join(lines)


def cmd_print(_shell: Shell, args: list[str]) -> str:
    """Echo text back to the terminal."""
    require(args, "some text to print", "print Hello world!")
    return " ".join(args)


def cmd_history(shell: Shell, args: list[str]) -> str:
    """Show command history, one entry by number, or entries containing text."""
    history = shell.history
    if not len(history):
        return "No history."

    if not args:
        return "\n".join(f"  {i}  {entry}" for i, entry in enumerate(history, start=1))

    query = " ".join(args)
    if query.isdigit():
        try:
            return history.get(int(query))
        except IndexError:
            raise ShellError(ErrorKind.UNKNOWN, "find the history entry", query) from None

    matches = history.filter(query)
    if not matches:
        return f"No history entries contain '{query}'."
    return "\n".join(f"  {i}  {entry}" for i, entry in matches)


def cmd_bub(shell: Shell, args: list[str]) -> str:
    """Run every command in a ``.bub`` script file."""
    (raw,) = require(args, "a script file", "bub script.bub")
    path = target(raw)
    if os.path.splitext(path)[1].lower() != SCRIPT_EXTENSION:
        raise ShellError(ErrorKind.INVALID_EXTENSION, SCRIPT_EXTENSION)

    script = read_text(shell, path)
    if shell.script_depth >= MAX_SCRIPT_DEPTH:
        raise ShellError(ErrorKind.UNKNOWN, "run scripts nested this deeply, such as", path)

    shell.script_depth += 1
    try:
        for line in script.splitlines():
            line = line.strip()  # noqa: PLW2901
            if not line or line.startswith("#"):
                continue
            shell.trace(f"Running script line '{line}'...")
            result = shell.execute(line)
            if result == shell.EXIT_SENTINEL:
                return result
            if result:
                shell.terminal.write(result)
    finally:
        shell.script_depth -= 1
    return ""

"""Directory commands: cd, ls, mkdir, cwd."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from bubble_os.classifier import CHANGE_DIR, LIST_DIR, MAKE_DIR, guard
from bubble_os.commands.common import SILENT, require, split_flags, target
from bubble_os.errors import ErrorKind, ShellError

if TYPE_CHECKING:
    from bubble_os.shell import Shell


def cmd_cd(shell: Shell, args: list[str]) -> str:
    """Change the shell's working directory."""
    (raw,) = require(args, "a directory", "cd ..")
    path = target(raw)
    shell.trace(f"Changing directory to '{path}'...")
    with guard(CHANGE_DIR, path):
        os.chdir(path)
    return ""


def cmd_ls(shell: Shell, args: list[str]) -> str:
    """List a directory: subdirectories first, then files.

    ``-s`` prints the names on one line instead of one per line.
    """
    args, flags = split_flags(args, "-s")
    path = target(require(args, "a directory", "ls documents")[0]) if args else os.getcwd()

    shell.trace(f"Reading the entries of '{path}'...")
    with guard(LIST_DIR, path), os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name.lower())

    dirs = [e.name for e in entries if e.is_dir()]
    files = [e.name for e in entries if not e.is_dir()]
    if not dirs and not files:
        return "This directory is empty."

    if "-s" in flags:
        return "  ".join([*(f"{d}/" for d in dirs), *files])
    lines = [f"<DIR>  {d}" for d in dirs]
    lines.extend(f"       {f}" for f in files)
    return "\n".join(lines)


def cmd_mkdir(shell: Shell, args: list[str]) -> str:
    """Create a new directory."""
    args, flags = split_flags(args, SILENT)
    (raw,) = require(args, "a directory", "mkdir test")
    path = target(raw)

    if os.path.exists(path):
        raise ShellError(ErrorKind.PATH_EXISTS, "directory", path)

    shell.trace(f"Making the directory '{path}'...")
    with guard(MAKE_DIR, path):
        os.mkdir(path)

    if SILENT in flags:
        return ""
    return f"Successfully made the directory {path}."


def cmd_cwd(_shell: Shell, _args: list[str]) -> str:
    """Print the current working directory."""
    return os.getcwd()

"""File commands: create, read, copy, delete, rename, measure, search.

Each handler follows the same shape:

1. Pull its arguments and flags apart.
2. Validate them (presence, UNC, existence, file vs. directory).
3. Ask for confirmation if the action destroys or overwrites data.
4. Make one OS call inside ``guard()`` so failures are classified.
5. Return a one-line confirmation (empty when silenced with ``-s``).
"""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING

from bubble_os.classifier import (
    COPY,
    DELETE_DIR,
    DELETE_FILE,
    MAKE_FILE,
    READ_FILE,
    RENAME,
    STAT_FILE,
    WRITE_FILE,
    guard,
)
from bubble_os.commands.common import ABORTED, SILENT, existing_file, require, split_flags, target
from bubble_os.commands.editor import ContentEditor
from bubble_os.errors import ErrorKind, ShellError

if TYPE_CHECKING:
    from bubble_os.shell import Shell

# Unit flag → (label, divisor).
_SIZE_UNITS: dict[str, tuple[str, int]] = {
    "-b": ("bytes", 1),
    "-kb": ("KB", 1024),
    "-mb": ("MB", 1024**2),
    "-gb": ("GB", 1024**3),
}


def read_text(shell: Shell, path: str) -> str:
    """Read an existing file as text in the configured encoding."""
    existing_file(path)
    with guard(READ_FILE, path), open(path, "rb") as f:
        data = f.read()
    try:
        return data.decode(shell.settings.encoding)
    except UnicodeDecodeError:
        raise ShellError(ErrorKind.INVALID_ENCODING, shell.settings.encoding.upper()) from None


def cmd_mkfile(shell: Shell, args: list[str]) -> str:
    """Create a file, collecting its content with the line editor."""
    args, flags = split_flags(args, SILENT)
    (raw,) = require(args, "a file", "mkfile test.txt")
    path = target(raw)

    shell.trace(f"Checking if '{path}' already exists...")
    existed = os.path.exists(path)
    if existed:
        if os.path.isdir(path):
            raise ShellError(ErrorKind.PATH_IS_DIR, path)
        question = (
            f"The file, '{os.path.basename(path)}', already exists. "
            "Would you like to overwrite it?"
        )
        if not shell.terminal.confirm(question):
            return ABORTED

    parent = os.path.dirname(path)
    if not os.path.exists(parent):
        raise ShellError(ErrorKind.NON_EXISTENT, "directory", parent)
    if not os.path.isdir(parent):
        raise ShellError(ErrorKind.PATH_IS_NOT_DIR, parent)

    contents = ContentEditor(shell.terminal).run()
    if contents is None:
        return "Edits discarded and process aborted."

    shell.trace("Saving file with provided file contents...")
    with (
        guard(WRITE_FILE if existed else MAKE_FILE, path),
        open(path, "w", encoding=shell.settings.encoding, newline="") as f,
    ):
        f.write("\n".join(contents))

    if SILENT in flags:
        return ""
    return f"Successfully made the file {path}."


def cmd_readfile(shell: Shell, args: list[str]) -> str:
    """Print the contents of a text file."""
    (raw,) = require(args, "a file", "readfile test.txt")
    return read_text(shell, target(raw))


def _existing_targets(source: str, dest: str) -> list[str]:
    """Return the files under *dest* that copying the tree *source* would replace."""
    clashes: list[str] = []
    for root, _dirs, names in os.walk(source):
        relative = os.path.relpath(root, source)
        for name in names:
            candidate = os.path.normpath(os.path.join(dest, relative, name))
            if os.path.exists(candidate):
                clashes.append(candidate)
    return clashes


def cmd_copyfile(shell: Shell, args: list[str]) -> str:
    """Copy a file, or a directory tree, to a new location."""
    args, flags = split_flags(args, SILENT)
    raw_source, raw_dest = require(
        args, "a file and a destination", 'copyfile test.txt "new folder"', count=2
    )
    source = target(raw_source)
    dest = target(raw_dest)

    if not os.path.exists(source):
        raise ShellError(ErrorKind.NON_EXISTENT, "file or directory", source)

    if os.path.isdir(source):
        if os.path.isfile(dest):
            raise ShellError(ErrorKind.COPY_DIR_TO_NON_DIR)
        if os.path.commonpath([source, dest]) == source:
            raise ShellError(ErrorKind.UNKNOWN, "copy a directory into itself", dest)
        clashes = _existing_targets(source, dest)
        if clashes:
            question = (
                f"{len(clashes)} file(s) in '{os.path.basename(dest)}' would be overwritten. "
                "Would you like to overwrite them?"
            )
            if not shell.terminal.confirm(question):
                return ABORTED
        shell.trace(f"Copying the directory tree '{source}'...")
        with guard(COPY, dest):
            shutil.copytree(source, dest, dirs_exist_ok=True)
    else:
        if os.path.isdir(dest):
            dest = os.path.join(dest, os.path.basename(source))
        if os.path.exists(dest):
            if os.path.samefile(source, dest):
                raise ShellError(ErrorKind.PATH_EXISTS, "file", dest)
            question = (
                f"The file, '{os.path.basename(dest)}', already exists. "
                "Would you like to overwrite it?"
            )
            if not shell.terminal.confirm(question):
                return ABORTED
        shell.trace(f"Copying the file '{source}'...")
        with guard(COPY, dest):
            shutil.copy2(source, dest)

    if SILENT in flags:
        return ""
    return f"Successfully copied {source} to {dest}."


def cmd_del(shell: Shell, args: list[str]) -> str:
    """Permanently delete a file or directory tree."""
    args, flags = split_flags(args, SILENT, "-y")
    (raw,) = require(args, "a file or directory", "del test.txt")
    path = target(raw)

    if not os.path.lexists(path):
        raise ShellError(ErrorKind.NON_EXISTENT, "file or directory", path)

    is_dir = os.path.isdir(path) and not os.path.islink(path)
    if "-y" not in flags:
        question = f"Are you sure you want to permanently delete '{os.path.basename(path)}'?"
        if not shell.terminal.confirm(question):
            return ABORTED

    if is_dir:
        with guard(DELETE_DIR, path):
            shutil.rmtree(path)
    else:
        with guard(DELETE_FILE, path):
            os.remove(path)

    if SILENT in flags:
        return ""
    return f"Successfully deleted {path}."


def cmd_rename(shell: Shell, args: list[str]) -> str:
    """Rename (or move) a file or directory to a path that does not exist yet."""
    args, flags = split_flags(args, SILENT)
    raw_old, raw_new = require(
        args, "the old and new names", "rename old.txt new.txt", count=2
    )
    old = target(raw_old)
    new = target(raw_new)

    if not os.path.exists(old):
        raise ShellError(ErrorKind.NON_EXISTENT, "file or directory", old)
    if os.path.exists(new):
        raise ShellError(ErrorKind.PATH_EXISTS, "file or directory", new)
    parent = os.path.dirname(new)
    if not os.path.isdir(parent):
        raise ShellError(ErrorKind.NON_EXISTENT, "directory", parent)

    shell.trace(f"Renaming '{old}' to '{new}'...")
    with guard(RENAME, old):
        os.rename(old, new)

    if SILENT in flags:
        return ""
    return f"Successfully renamed {old} to {new}."


def cmd_size(shell: Shell, args: list[str]) -> str:
    """Show the size of a file, optionally in KB, MB or GB."""
    units = [arg for arg in args if arg.startswith("-")]
    positional = [arg for arg in args if not arg.startswith("-")]
    (raw,) = require(positional, "a file", "size test.txt -kb")
    unit = units[0].lower() if units else "-b"
    if unit not in _SIZE_UNITS:
        raise ShellError(ErrorKind.UNKNOWN, "convert a size to the unit", units[0])

    path = existing_file(target(raw))
    with guard(STAT_FILE, path):
        size = os.path.getsize(path)

    label, divisor = _SIZE_UNITS[unit]
    shell.trace(f"Converting {size} bytes to {label}...")
    if divisor == 1:
        return f"The file, '{os.path.basename(path)}', is {size:,} bytes."
    return f"The file, '{os.path.basename(path)}', is {size / divisor:,.2f} {label}."


def cmd_wcount(shell: Shell, args: list[str]) -> str:
    """Count the lines, words and characters in a text file."""
    (raw,) = require(args, "a file", "wcount test.txt")
    text = read_text(shell, target(raw))

    lines = len(text.splitlines())
    words = len(text.split())
    characters = len(text)
    without_spaces = sum(1 for ch in text if not ch.isspace())
    return "\n".join(
        [
            f"Lines: {lines:,}",
            f"Words: {words:,}",
            f"Characters (with spaces): {characters:,}",
            f"Characters (without spaces): {without_spaces:,}",
        ]
    )


def cmd_fif(shell: Shell, args: list[str]) -> str:
    """Find every occurrence of a phrase in a text file.

    Every argument after the file name is part of the phrase, so quoting
    is only needed to keep runs of spaces.
    """
    example = 'fif test.txt "hello world"'
    raw, _ = require(args, "a file and a phrase", example, count=2)
    phrase = " ".join(args[1:])
    path = target(raw)
    text = read_text(shell, path)

    shell.trace(f"Searching for '{phrase}'...")
    hits: list[str] = []
    for number, line in enumerate(text.splitlines(), start=1):
        column = line.find(phrase)
        while column != -1:
            hits.append(f"  Line {number}, column {column + 1}")
            column = line.find(phrase, column + 1)

    if not hits:
        return f"No occurrences of '{phrase}' were found in {path}."
    noun = "occurrence" if len(hits) == 1 else "occurrences"
    return "\n".join([f"Found {len(hits)} {noun} of '{phrase}' in {path}:", *hits])

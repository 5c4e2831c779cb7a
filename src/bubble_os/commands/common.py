"""Argument helpers shared by the command handlers."""

import os

from bubble_os import paths
from bubble_os.errors import ErrorKind, ShellError

ABORTED = "Process aborted."

SILENT = "-s"


def split_flags(args: list[str], *known: str) -> tuple[list[str], set[str]]:
    """Separate *known* flags from positional arguments.

    Unknown dash-prefixed words stay positional so commands can report
    them themselves.
    """
    flags = {arg for arg in args if arg in known}
    positional = [arg for arg in args if arg not in known]
    return positional, flags


def require(args: list[str], what: str, example: str, *, count: int = 1) -> list[str]:
    """Return the first *count* arguments, or raise NO_PARAMS_ENTERED.

    Blank arguments (an empty pair of quotes) count as missing.

    Args:
        args: Positional arguments given to the command.
        what: What the user should have entered (e.g. "a file").
        example: A complete example command line.
        count: How many arguments are required.

    """
    if len(args) < count or not all(arg.strip() for arg in args[:count]):
        raise ShellError(ErrorKind.NO_PARAMS_ENTERED, what, example)
    return args[:count]


def target(raw: str) -> str:
    """Validate and normalise a path argument.

    UNC paths are rejected here, before any OS call is attempted.
    """
    if paths.is_unc(raw):
        raise ShellError(ErrorKind.INVALID_UNC_PATH)
    return paths.resolve(raw)


def existing_file(path: str) -> str:
    """Return *path* if it is an existing file; raise otherwise."""
    if not os.path.exists(path):
        raise ShellError(ErrorKind.NON_EXISTENT, "file", path)
    if os.path.isdir(path):
        raise ShellError(ErrorKind.PATH_IS_DIR, path)
    return path

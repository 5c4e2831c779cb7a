"""Path normalisation for command arguments.

Commands accept relative or absolute paths.  Before any OS call the
argument is turned into an absolute path and, on Windows, corrected to
the casing actually stored on disk so messages show the real name.

UNC paths (``\\\\server\\share``) are rejected up front: callers check
``is_unc()`` on the raw argument before resolving it.
"""

import os
import platform


def is_unc(raw: str) -> bool:
    """Return True if *raw* is a network (UNC) path."""
    return raw.startswith(("\\\\", "//"))


def is_windows(system: str | None = None) -> bool:
    """Return True when running on (or asked about) Windows."""
    return (system or platform.system()) == "Windows"


def correct_case(path: str) -> str:
    """Return *path* with each existing component in its on-disk casing.

    Components that do not exist are left as typed.
    """
    drive, rest = os.path.splitdrive(path)
    current = drive.upper() + os.sep if drive else os.sep
    parts = [p for p in rest.replace("/", os.sep).split(os.sep) if p]
    for index, part in enumerate(parts):
        try:
            entries = os.listdir(current)
        except OSError:
            return os.path.join(current, *parts[index:])
        match = next((e for e in entries if e.lower() == part.lower()), part)
        current = os.path.join(current, match)
    return current


def resolve(raw: str, *, system: str | None = None) -> str:
    """Convert a user-supplied path to an absolute, correctly cased path.

    Args:
        raw: The path as typed (quotes already stripped).
        system: Platform name override, mainly for tests.

    """
    absolute = os.path.abspath(raw)
    if is_windows(system):
        return correct_case(absolute)
    return absolute

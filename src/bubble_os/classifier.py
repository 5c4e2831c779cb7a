"""OS-error classifier: translate platform errors into user-facing errors.

Every filesystem call a command makes can fail with an ``OSError``
whose ``errno`` names the reason (``ENOENT``, ``EPERM``, ...).  The
classifier turns that code, plus a description of what was being
attempted, into exactly one ``ErrorKind``.

The mapping is parameterised by an ``Operation`` rather than duplicated
per command.  The operation supplies the wording ("delete the file",
"rename the directory") and the set of codes it knows how to explain.
A code outside that set is not guessed at: it becomes a ``FatalError``
that surfaces the raw platform message.

Path-too-long quirk:
    POSIX systems report an overlong path as ``ENAMETOOLONG``.  Windows
    reports the same failure as ``EINVAL``, which it also uses for
    invalid characters.  ``EINVAL`` is therefore reported as "path too
    long" when the path is actually overlong, and as "invalid
    characters" otherwise.
"""

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from bubble_os.errors import ErrorKind, FatalError, ShellError

# Windows MAX_PATH, and the per-component limit shared by NTFS and ext4.
MAX_PATH_LENGTH = 260
MAX_NAME_LENGTH = 255

_ALL_CODES: frozenset[str] = frozenset(
    {
        "ENOENT",
        "EPERM",
        "EACCES",
        "EBUSY",
        "EEXIST",
        "ENOTEMPTY",
        "EISDIR",
        "ENOTDIR",
        "ENAMETOOLONG",
        "EINVAL",
    }
)

_PATH_CODES: frozenset[str] = frozenset(
    {"ENOENT", "EPERM", "EACCES", "ENOTDIR", "ENAMETOOLONG", "EINVAL"}
)


@dataclass(frozen=True)
class Operation:
    """What a command was attempting when an OS call failed.

    Attributes:
        action: Verb phrase for permission errors (e.g. "delete the file").
        noun: What the path refers to (e.g. "file", "directory").
        codes: Platform error codes this operation can explain.

    """

    action: str
    noun: str
    codes: frozenset[str] = _ALL_CODES


MAKE_FILE = Operation("make the file", "file")
WRITE_FILE = Operation("write to the file", "file", _PATH_CODES | {"EBUSY", "EISDIR"})
MAKE_DIR = Operation("make the directory", "directory")
READ_FILE = Operation("read the file", "file", _PATH_CODES | {"EBUSY", "EISDIR"})
COPY = Operation("copy", "file or directory")
DELETE_FILE = Operation("delete the file", "file", _PATH_CODES | {"EBUSY", "EISDIR"})
DELETE_DIR = Operation("delete the directory", "directory", _PATH_CODES | {"EBUSY", "ENOTEMPTY"})
RENAME = Operation("rename", "file or directory")
CHANGE_DIR = Operation("change into the directory", "directory", _PATH_CODES)
LIST_DIR = Operation("list the contents of", "directory", _PATH_CODES)
STAT_FILE = Operation("get the size of", "file", _PATH_CODES)
EXEC_FILE = Operation("execute the file", "file", _PATH_CODES | {"EBUSY"})


def error_code(exc: BaseException) -> str | None:
    """Return the symbolic errno name of *exc* (e.g. ``"ENOENT"``), if any."""
    if not isinstance(exc, OSError) or exc.errno is None:
        return None
    return errno.errorcode.get(exc.errno)


def is_overlong(path: str) -> bool:
    """Return True if *path* exceeds the path or path-component limits."""
    if len(path) >= MAX_PATH_LENGTH:
        return True
    parts = path.replace("\\", "/").split("/")
    return any(len(part) > MAX_NAME_LENGTH for part in parts)


def classify(exc: BaseException, operation: Operation, path: str) -> ShellError | FatalError:
    """Map a caught platform error to the matching user-facing error.

    Args:
        exc: The exception raised by the OS call.
        operation: What was being attempted.
        path: The path the user supplied (after normalisation).

    Returns:
        A ``ShellError`` for a known code, otherwise a ``FatalError``
        wrapping *exc*.

    """
    code = error_code(exc)
    if code is None or code not in operation.codes:
        return FatalError(exc)

    match code:
        case "ENOENT":
            return ShellError(ErrorKind.NON_EXISTENT, operation.noun, path)
        case "EPERM" | "EACCES":
            return ShellError(ErrorKind.INVALID_PERMS, operation.action, path)
        case "EBUSY":
            return ShellError(ErrorKind.PATH_BUSY, operation.noun, path)
        case "EEXIST" | "ENOTEMPTY":
            return ShellError(ErrorKind.PATH_EXISTS, operation.noun, path)
        case "EISDIR":
            return ShellError(ErrorKind.PATH_IS_DIR, path)
        case "ENOTDIR":
            return ShellError(ErrorKind.PATH_IS_NOT_DIR, path)
        case "ENAMETOOLONG":
            return ShellError(ErrorKind.PATH_TOO_LONG, path)
        case "EINVAL" if is_overlong(path):
            return ShellError(ErrorKind.PATH_TOO_LONG, path)
        case "EINVAL":
            return ShellError(
                ErrorKind.INVALID_CHARS,
                f"{operation.noun} name",
                "valid path characters",
                "characters such as '?' or ':' (Windows only)",
                path,
            )
        case _:
            return FatalError(exc)


@contextmanager
def guard(operation: Operation, path: str) -> Iterator[None]:
    """Convert any ``OSError`` raised in the block via ``classify()``.

    Usage::

        with guard(DELETE_FILE, path):
            os.remove(path)
    """
    try:
        yield
    except OSError as exc:
        raise classify(exc, operation, path) from exc

"""User-facing error catalog for the shell.

Every failure the shell reports is one of sixteen fixed error kinds.
Each kind has:

- a stable numeric **code** (1-16) used as a cross-reference, never as
  a process exit status;
- a machine-readable **tag** (the member name, e.g. ``NON_EXISTENT``);
- an ordered list of **fields** interpolated into its message template.

Handlers never format error text themselves.  They raise a
``ShellError`` naming the kind and its field values, and the shell
renders it in one place.  Anything that cannot be classified becomes a
``FatalError``, which surfaces the raw underlying message instead.

Adding a failure mode means adding a member, never reusing a code.
"""

from enum import Enum

SHELL_NAME = "BubbleOS Lite"


class ErrorKind(Enum):
    """The fixed catalog of user-facing error kinds.

    Each member's value is ``(code, fields, template)``.  The tag shown
    to the user is the member name.
    """

    UNRECOGNIZED_COMMAND = (
        1,
        ("command",),
        "The command, '{command}', is unrecognized. "
        "Type 'help' for a list of available commands.",
    )
    NO_PARAMS_ENTERED = (
        2,
        ("type", "example"),
        "You must enter {type}, for example, like so: '{example}'.",
    )
    NON_EXISTENT = (3, ("type", "variable"), "The {type}, '{variable}', does not exist.")
    INVALID_PERMS = (
        4,
        ("todo", "variable"),
        "Invalid permissions to {todo} '{variable}'. You need elevated privileges.",
    )
    PATH_BUSY = (5, ("type", "variable"), "The {type}, '{variable}', is currently being used.")
    PATH_EXISTS = (6, ("type", "variable"), "The {type}, '{variable}', already exists.")
    PATH_IS_DIR = (7, ("variable",), "Expected a file, but got a directory ('{variable}') instead.")
    PATH_IS_NOT_DIR = (
        8,
        ("variable",),
        "Expected a directory, but got a file ('{variable}') instead.",
    )
    INVALID_OS = (9, ("os",), "This command can only run on {os}.")
    INVALID_ENCODING = (10, ("encoding",), "This command can only read {encoding} files.")
    INVALID_EXTENSION = (
        11,
        ("extension",),
        "Only files ending with the '{extension}' extension can be used.",
    )
    INVALID_CHARS = (
        12,
        ("type", "supposed_to", "not_contain", "variable"),
        "The {type} can only contain {supposed_to} and not contain {not_contain} "
        "(received '{variable}').",
    )
    PATH_TOO_LONG = (
        13,
        ("path",),
        "The path ('{path}') is too long. Please choose a shorter path.",
    )
    COPY_DIR_TO_NON_DIR = (14, (), "Cannot overwrite a directory with a non-directory.")
    INVALID_UNC_PATH = (15, (), "UNC paths are currently unsupported by {name}.")
    UNKNOWN = (16, ("todo", "variable"), "{name} does not know how to {todo} '{variable}'.")

    def __init__(self, code: int, fields: tuple[str, ...], template: str) -> None:
        """Unpack the member value into named attributes."""
        self.code = code
        self.fields = fields
        self.template = template

    @property
    def tag(self) -> str:
        """Return the machine-readable tag (the member name)."""
        return self.name

    def render(self, *values: str) -> str:
        """Format this error kind with its field values.

        Args:
            *values: One value per entry in ``fields``, in order.

        Returns:
            A line like ``[3] The file, 'a.txt', does not exist. (NON_EXISTENT)``.

        Raises:
            ValueError: If the number of values does not match the fields.

        """
        if len(values) != len(self.fields):
            msg = f"{self.name} takes {len(self.fields)} field(s), got {len(values)}"
            raise ValueError(msg)
        message = self.template.format(name=SHELL_NAME, **dict(zip(self.fields, values)))
        return f"[{self.code}] {message} ({self.tag})"

    @classmethod
    def from_code(cls, code: int) -> "ErrorKind":
        """Look up a kind by its numeric code.

        Raises:
            KeyError: If no kind has this code.

        """
        for kind in cls:
            if kind.code == code:
                return kind
        msg = f"no error kind with code {code}"
        raise KeyError(msg)


class ShellError(Exception):
    """A classified, user-facing command failure."""

    def __init__(self, kind: ErrorKind, *values: str) -> None:
        """Create an error of *kind* with its template field values.

        Raises:
            ValueError: If the number of values does not match the kind.

        """
        self.kind = kind
        self.values = values
        self._message = kind.render(*values)
        super().__init__(self._message)

    @property
    def tag(self) -> str:
        """Return the tag of this error's kind."""
        return self.kind.tag

    def render(self) -> str:
        """Return the formatted message."""
        return self._message


class FatalError(Exception):
    """An unclassified failure, reported with its raw message."""

    tag = "FATAL_ERROR"

    def __init__(self, cause: BaseException) -> None:
        """Wrap the unexpected exception *cause*."""
        self.cause = cause
        super().__init__(str(cause))

    def render(self) -> str:
        """Return the fatal report including the raw platform message."""
        detail = str(self.cause) or "no further details"
        return (
            f"[FATAL] {SHELL_NAME} ran into an unexpected error: "
            f"{type(self.cause).__name__}: {detail} ({self.tag})"
        )

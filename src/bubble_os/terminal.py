"""Terminal I/O for interactive prompts.

Most commands never talk to the user mid-flight: they return a string
and the REPL prints it.  A few do need to ask something before they
finish: a yes/no confirmation before deleting, a line number while
editing, the lines of a new file.  Those commands go through a
``Terminal`` so the same code runs against a real console, a scripted
test, or the web front-end.

Every read blocks until a line arrives; there are no timeouts.
"""

from collections import deque
from collections.abc import Iterable

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})

# ANSI: erase display, then move the cursor home.
_CLEAR_SEQUENCE = "\033[2J\033[H"


class Terminal:
    """Line-oriented terminal interface.

    Subclasses provide ``write`` and ``read_line``; the prompt helpers
    are built on top of those two.
    """

    def write(self, text: str = "") -> None:
        """Display *text* followed by a newline."""
        raise NotImplementedError

    def read_line(self, prompt: str = "") -> str:
        """Show *prompt* and return the next line (without its newline).

        Raises:
            EOFError: If the input stream is closed.

        """
        raise NotImplementedError

    def confirm(self, question: str) -> bool:
        """Ask a yes/no *question* until a valid answer is given."""
        while True:
            answer = self.read_line(f"{question} [y/n] ").strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self.write("Please answer 'y' or 'n'.")

    def read_int(self, prompt: str) -> int | None:
        """Read a line and return it as an integer, or None if it is not one."""
        raw = self.read_line(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def clear(self) -> None:
        """Clear the screen."""
        self.write(_CLEAR_SEQUENCE)


class ConsoleTerminal(Terminal):
    """Terminal backed by ``input()`` and ``print()``."""

    def write(self, text: str = "") -> None:
        """Print *text* to standard output."""
        print(text)  # noqa: T201

    def read_line(self, prompt: str = "") -> str:
        """Read a line from standard input."""
        return input(prompt)

    def clear(self) -> None:
        """Clear the console without a trailing newline."""
        print(_CLEAR_SEQUENCE, end="", flush=True)  # noqa: T201


class ScriptedTerminal(Terminal):
    """Terminal that replays prepared input and records all output.

    Used by the test suite and the web front-end, where the input for
    any prompts is known before the command runs.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        """Create a terminal that will answer prompts with *lines*, in order."""
        self._pending: deque[str] = deque(lines)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def feed(self, *lines: str) -> None:
        """Queue more input lines."""
        self._pending.extend(lines)

    @property
    def remaining(self) -> int:
        """Return how many queued input lines have not been read."""
        return len(self._pending)

    def write(self, text: str = "") -> None:
        """Record *text* as output."""
        self.output.append(text)

    def read_line(self, prompt: str = "") -> str:
        """Return the next queued line.

        Raises:
            EOFError: If no input is left.

        """
        self.prompts.append(prompt)
        if not self._pending:
            msg = "no more scripted input"
            raise EOFError(msg)
        return self._pending.popleft()

    @property
    def transcript(self) -> str:
        """Return everything written so far, newline-joined."""
        return "\n".join(self.output)

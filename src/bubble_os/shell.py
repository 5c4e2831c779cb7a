"""The shell: command interpreter and dispatcher.

The shell reads one line, finds the command it names, extracts the
arguments, runs the handler, and returns a string result.

Dispatch works on **prefixes**, not tokens:

1. An empty or whitespace-only line does nothing and is not recorded.
2. The command table is walked in declaration order; the first command
   whose prefix begins the line is selected (case-sensitive, no word
   boundary).
3. The rest of the line is split into arguments on whitespace.  One
   pair of double quotes groups the text between them (spaces and all)
   into a single argument.  Commands marked ``raw`` get no arguments.
4. The handler runs and returns its output.
5. If nothing matched, the "unrecognized command" error is reported.
6. Every non-empty line is appended to history, whatever the outcome.

Design choices:
    - **Returns strings, not prints.**  Only interactive prompts go
      through the terminal; the caller decides how to show results.
    - **One place renders errors.**  Handlers raise ``ShellError`` (or
      let ``guard()`` classify an ``OSError``); the shell turns them
      into text.  Anything unexpected is reported as fatal with its raw
      message, never swallowed.
"""

from bubble_os.commands import Command, build_command_table
from bubble_os.config import Settings
from bubble_os.errors import ErrorKind, FatalError, ShellError
from bubble_os.history import History
from bubble_os.logging import Logger, LogLevel
from bubble_os.terminal import ConsoleTerminal, Terminal

_QUOTE = '"'


def extract_args(text: str) -> list[str]:
    """Split *text* into arguments, honouring one pair of double quotes.

    An unterminated quote runs to the end of the line.  There is no
    escaping and no nesting.

    Examples:
        >>> extract_args('a.txt "my folder" -s')
        ['a.txt', 'my folder', '-s']

    """
    start = text.find(_QUOTE)
    if start == -1:
        return text.split()

    end = text.find(_QUOTE, start + 1)
    if end == -1:
        end = len(text)
    return [*text[:start].split(), text[start + 1 : end], *text[end + 1 :].split()]


class Shell:
    """Prefix-matching command dispatcher with an append-only history."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(
        self,
        *,
        terminal: Terminal | None = None,
        settings: Settings | None = None,
        commands: list[Command] | None = None,
        logger: Logger | None = None,
        history: History | None = None,
    ) -> None:
        """Create a shell.

        Args:
            terminal: Where prompts and confirmations are shown.
            settings: Shell configuration (defaults to the environment).
            commands: Command table in match-priority order.
            logger: Activity log shared with the caller.
            history: History log shared with the caller.

        """
        self._terminal = terminal if terminal is not None else ConsoleTerminal()
        self._settings = settings if settings is not None else Settings.from_environ()
        self._commands = list(commands) if commands is not None else build_command_table()
        self._logger = logger if logger is not None else Logger()
        self._history = history if history is not None else History()
        self._source = "shell"
        self.script_depth = 0

    @property
    def terminal(self) -> Terminal:
        """Return the terminal used for interactive prompts."""
        return self._terminal

    @terminal.setter
    def terminal(self, terminal: Terminal) -> None:
        """Swap the terminal (the web front-end does this per request)."""
        self._terminal = terminal

    @property
    def settings(self) -> Settings:
        """Return the shell configuration."""
        return self._settings

    @property
    def logger(self) -> Logger:
        """Return the activity log."""
        return self._logger

    @property
    def history(self) -> History:
        """Return the command history."""
        return self._history

    @property
    def commands(self) -> tuple[Command, ...]:
        """Return the command table in match-priority order."""
        return tuple(self._commands)

    @property
    def command_names(self) -> list[str]:
        """Return every command prefix, sorted."""
        return sorted(c.prefix for c in self._commands)

    def find(self, line: str) -> Command | None:
        """Return the first command whose prefix begins *line*."""
        return next((c for c in self._commands if line.startswith(c.prefix)), None)

    def trace(self, message: str) -> None:
        """Record a step-by-step trace, echoing it in verbose mode."""
        self._logger.log(LogLevel.DEBUG, message, source=self._source)
        if self._settings.verbose:
            self._terminal.write(f"[VERBOSE] {message}")

    def execute(self, line: str) -> str:
        """Dispatch one input line and return its output.

        Args:
            line: The raw line as typed (e.g. ``'copyfile a.txt "b c"'``).

        Returns:
            The command output, a rendered error, ``""`` for an empty
            line, or ``EXIT_SENTINEL``.

        Raises:
            EOFError: If the input stream closes while a command is
                waiting for input.

        """
        stripped = line.strip()
        if not stripped:
            return ""
        try:
            return self._dispatch(stripped)
        finally:
            self._history.append(stripped)

    def _dispatch(self, line: str) -> str:
        """Match, extract arguments, and run a handler."""
        command = self.find(line)
        if command is None:
            return self._failed(ShellError(ErrorKind.UNRECOGNIZED_COMMAND, line))

        args = [] if command.raw else extract_args(line[len(command.prefix) :])
        outer_source, self._source = self._source, command.prefix
        try:
            self.trace(f"Running '{command.prefix}' with arguments {args}")
            output = command.handler(self, args)
        except EOFError:
            raise
        except (ShellError, FatalError) as exc:
            return self._failed(exc)
        except Exception as exc:  # noqa: BLE001
            return self._failed(FatalError(exc))
        finally:
            self._source = outer_source

        self._logger.log(LogLevel.INFO, "completed", source=command.prefix)
        return output

    def _failed(self, error: ShellError | FatalError) -> str:
        """Log and render a failure."""
        rendered = error.render()
        self._logger.log(LogLevel.ERROR, rendered, source=self._source, tag=error.tag)
        return rendered

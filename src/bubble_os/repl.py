"""Interactive REPL (Read-Eval-Print Loop) for the shell.

The REPL is the terminal interface:

    1. **Read**: display a prompt and read user input.
    2. **Eval**: pass the line to ``shell.execute()``.
    3. **Print**: display the result.
    4. **Loop**: repeat until the shell returns the exit sentinel.

This module keeps the I/O loop separate from the shell logic.  The
shell is fully testable (returns strings); the REPL is the thin I/O
wrapper that connects it to ``stdin``/``stdout``.

The helper functions (``build_prompt``, ``format_banner``) are pure
and testable.  The ``run()`` function is the I/O entrypoint.
"""

import os
import readline
from datetime import datetime

from bubble_os.completer import Completer
from bubble_os.config import Settings
from bubble_os.shell import Shell
from bubble_os.terminal import ConsoleTerminal


def format_banner(settings: Settings, *, year: int | None = None) -> str:
    """Format the start-up banner.

    Args:
        settings: Shell configuration (name and version).
        year: Copyright year; defaults to the current year.

    Returns:
        A formatted string suitable for printing to the console.

    """
    year = year if year is not None else datetime.now().year
    return "\n".join(
        [
            f"{settings.name}, {year} (v{settings.version})",
            f"Copyright (c) {year} {settings.author}. All rights reserved.",
            "",
            "For help on some available commands, type 'help'.",
            "For more information about a command, type 'help <command>'.",
            "",
            f"To exit the {settings.name} shell, type 'exit'.",
            "",
        ]
    )


def build_prompt(settings: Settings, cwd: str | None = None) -> str:
    """Build the shell prompt string.

    Args:
        settings: Shell configuration (a custom prompt wins).
        cwd: Working directory to show; defaults to ``os.getcwd()``.

    Returns:
        A prompt string like ``/home/alice $ ``.

    """
    if settings.prompt:
        return settings.prompt
    return f"{cwd if cwd is not None else os.getcwd()} $ "


def run() -> None:
    """Start the shell and run the interactive REPL.

    This is the main entrypoint.  It handles:
    - Banner and tab completion.
    - The read-eval-print loop.
    - Graceful handling of Ctrl+C and Ctrl+D.
    """
    settings = Settings.from_environ()
    shell = Shell(terminal=ConsoleTerminal(), settings=settings)

    # Wire up tab completion via readline.
    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t\"")
    readline.parse_and_bind("tab: complete")

    print(format_banner(settings))  # noqa: T201

    try:
        while True:
            try:
                line = input(build_prompt(settings))
                result = shell.execute(line)
            except EOFError:
                # Ctrl+D: graceful exit
                print()  # noqa: T201
                break

            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result, end="\n\n")  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C: graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        print("System halted.")  # noqa: T201

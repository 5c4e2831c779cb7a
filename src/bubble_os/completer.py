"""Tab completer for the shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)`` which completes command names
for the first word and filesystem paths after that.
"""

from __future__ import annotations

import os
import readline
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bubble_os.shell import Shell


class Completer:
    """Context-aware tab completer for the shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance."""
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback: return the *state*-th candidate for *text*.

        Args:
            text: The partial word being completed.
            state: Index into the candidate list (0, 1, 2, …).

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return completion candidates based on context.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        Returns:
            Sorted list of matching candidates.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return self._complete_commands(text)

        command = self._shell.find(line.lstrip())
        if command is None or command.raw:
            return []
        return self._complete_paths(text)

    def _complete_commands(self, text: str) -> list[str]:
        """Complete command names from the shell's command table."""
        return [name for name in self._shell.command_names if name.startswith(text)]

    @staticmethod
    def _complete_paths(text: str) -> list[str]:
        """Complete paths relative to the working directory.

        Split the partial path into a directory and a name prefix, list
        the directory, and filter by prefix.  Directories get a trailing
        separator.
        """
        directory, prefix = os.path.split(text)
        try:
            entries = os.listdir(directory or os.curdir)
        except OSError:
            return []

        candidates: list[str] = []
        for entry in entries:
            if entry.startswith(prefix):
                full = os.path.join(directory, entry) if directory else entry
                if os.path.isdir(full):
                    full += os.sep
                candidates.append(full)
        return sorted(candidates)

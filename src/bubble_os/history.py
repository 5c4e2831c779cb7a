"""Command history: an append-only log of what the user typed.

The dispatcher records the raw text of every non-empty line it is
given, whether or not the line named a real command and whether or not
that command succeeded.  Entries are never edited or removed; the log
lives as long as the shell does.

The ``History`` object is owned by the shell and handed to anything
that needs to read it (the ``history`` command, the web front-end).
"""

from collections.abc import Iterator


class History:
    """Append-only, arrival-ordered log of raw command lines."""

    def __init__(self) -> None:
        """Create an empty history."""
        self._entries: list[str] = []

    def append(self, line: str) -> None:
        """Record *line* at the end of the log."""
        self._entries.append(line)

    @property
    def entries(self) -> list[str]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def get(self, number: int) -> str:
        """Return the entry with 1-based *number*.

        Raises:
            IndexError: If *number* is outside ``1..len(self)``.

        """
        if not 1 <= number <= len(self._entries):
            msg = f"history entry {number} out of range"
            raise IndexError(msg)
        return self._entries[number - 1]

    def filter(self, text: str) -> list[tuple[int, str]]:
        """Return ``(number, entry)`` pairs whose entry contains *text*."""
        return [(i, entry) for i, entry in enumerate(self._entries, start=1) if text in entry]

    def __len__(self) -> int:
        """Return the number of recorded lines."""
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        """Iterate over a snapshot of the entries, oldest first."""
        return iter(list(self._entries))

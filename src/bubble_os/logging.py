"""Shell activity log.

The logger records structured entries for what the shell did: every
dispatch, every success, every failure, and the step-by-step traces
that verbose mode shows the user.  Failures carry the tag of the error
they rendered (``NON_EXISTENT``, ``FATAL_ERROR``, ...) so a session can
be summarised by what went wrong, not just by how often.

- **LogLevel**: severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry**: a single structured record (level, message, source, tag).
- **Logger**: an append-only log with filtering, per-tag counts and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries**: log records should be immutable.
    - **Filter returns a list, not a generator**: the log is small and
      callers usually want to iterate multiple times.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The command prefix, or ``shell`` for the dispatcher.
        tag: The error tag for failures; None otherwise.

    """

    level: LogLevel
    message: str
    source: str
    tag: str | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``, with ``{TAG}`` for failures."""
        text = f"[{self.level.name}] {self.source}: {self.message}"
        return f"{text} {{{self.tag}}}" if self.tag else text


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self, level: LogLevel, message: str, *, source: str, tag: str | None = None
    ) -> LogEntry:
        """Append a new entry to the log and return it.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Command or subsystem that generated the event.
            tag: Error tag, for failures.

        """
        entry = LogEntry(level=level, message=message, source=source, tag=tag)
        self._entries.append(entry)
        return entry

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        tag: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.
            tag: If set, only return failures with this error tag.

        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level)
            and (source is None or e.source == source)
            and (tag is None or e.tag == tag)
        ]

    def failures(self) -> Counter[str]:
        """Count logged failures by error tag."""
        return Counter(e.tag for e in self._entries if e.tag is not None)

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

"""Tests for command history.

The shell records the raw text of every non-empty line, in arrival
order, whether or not the line named a real command or succeeded.
"""

import pytest

from bubble_os.config import Settings
from bubble_os.history import History
from bubble_os.shell import Shell
from bubble_os.terminal import ScriptedTerminal


def _shell() -> Shell:
    """Create a shell with a scripted terminal for testing."""
    return Shell(terminal=ScriptedTerminal(), settings=Settings())


class TestHistoryLog:
    """Verify the History object on its own."""

    def test_starts_empty(self) -> None:
        """A new history should have no entries."""
        assert len(History()) == 0

    def test_append_preserves_order(self) -> None:
        """Entries should come back in arrival order."""
        history = History()
        for line in ("A", "B", "C"):
            history.append(line)
        assert history.entries == ["A", "B", "C"]
        assert list(history) == ["A", "B", "C"]

    def test_get_is_one_based(self) -> None:
        """get() should use 1-based numbering."""
        history = History()
        history.append("first")
        history.append("second")
        assert history.get(1) == "first"
        assert history.get(2) == "second"

    @pytest.mark.parametrize("number", [0, 3, -1])
    def test_get_out_of_range(self, number: int) -> None:
        """Numbers outside the log should raise IndexError."""
        history = History()
        history.append("a")
        history.append("b")
        with pytest.raises(IndexError):
            history.get(number)

    def test_filter_keeps_numbers(self) -> None:
        """filter() should return matching entries with their numbers."""
        history = History()
        for line in ("ls", "mkdir a", "ls a"):
            history.append(line)
        assert history.filter("ls") == [(1, "ls"), (3, "ls a")]

    def test_entries_is_a_copy(self) -> None:
        """Mutating the returned list must not change the log."""
        history = History()
        history.append("x")
        history.entries.append("y")
        assert history.entries == ["x"]


class TestDispatcherHistory:
    """Verify how the dispatcher records history."""

    def test_lines_recorded_in_order_regardless_of_outcome(self) -> None:
        """Known, unknown and failing commands are all recorded, in order."""
        shell = _shell()
        shell.execute("print A")
        shell.execute("bogus B")
        shell.execute("readfile definitely-missing.txt")
        assert shell.history.entries == ["print A", "bogus B", "readfile definitely-missing.txt"]

    def test_empty_lines_not_recorded(self) -> None:
        """Empty and whitespace-only lines should not be recorded."""
        shell = _shell()
        shell.execute("")
        shell.execute("   \t ")
        assert len(shell.history) == 0

    def test_raw_line_is_recorded(self) -> None:
        """The raw (trimmed) line is recorded, not the parsed command."""
        shell = _shell()
        shell.execute('  print "hello   world"  ')
        assert shell.history.entries == ['print "hello   world"']

    def test_history_command_lists_earlier_lines(self) -> None:
        """The history command should show previously entered lines, numbered."""
        shell = _shell()
        shell.execute("print one")
        shell.execute("print two")
        result = shell.execute("history")
        assert "1  print one" in result
        assert "2  print two" in result
        assert result.index("print one") < result.index("print two")

    def test_history_command_recorded_afterwards(self) -> None:
        """The history command is recorded once it has run."""
        shell = _shell()
        shell.execute("print one")
        shell.execute("history")
        assert shell.history.entries[-1] == "history"

    def test_shared_history_object(self) -> None:
        """A history passed in should be the one the shell appends to."""
        history = History()
        shell = Shell(terminal=ScriptedTerminal(), settings=Settings(), history=history)
        shell.execute("cwd")
        assert history.entries == ["cwd"]

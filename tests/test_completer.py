"""Tests for the tab-completion engine.

The Completer provides context-aware completion for the shell.  Its
logic is pure (no readline) so it is tested directly through
``completions(text, line)``.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bubble_os.completer import Completer
from bubble_os.config import Settings
from bubble_os.shell import Shell
from bubble_os.terminal import ScriptedTerminal


def _completer() -> tuple[Shell, Completer]:
    """Create a shell and a completer attached to it."""
    shell = Shell(terminal=ScriptedTerminal(), settings=Settings())
    return shell, Completer(shell)


class TestCommandCompletion:
    """Verify completion of command names (first word on the line)."""

    def test_empty_line_returns_all_commands(self) -> None:
        """Pressing Tab on a blank line should list every command."""
        shell, completer = _completer()
        assert completer.completions("", "") == shell.command_names

    def test_partial_match(self) -> None:
        """A partial prefix should return only matching commands."""
        _shell, completer = _completer()
        assert completer.completions("mk", "mk") == ["mkdir", "mkfile"]

    def test_unique_prefix(self) -> None:
        """A prefix matching exactly one command should return just that."""
        _shell, completer = _completer()
        assert completer.completions("hel", "hel") == ["help"]

    def test_no_match_returns_empty(self) -> None:
        """An unrecognised prefix should return no candidates."""
        _shell, completer = _completer()
        assert completer.completions("zzz", "zzz") == []


class TestPathCompletion:
    """Verify completion of paths after the command name."""

    @pytest.fixture(autouse=True)
    def _in_tmp(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Run every test inside a small directory tree."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "novel.md").write_text("x")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "inner.txt").write_text("x")

    def test_files_in_cwd(self) -> None:
        """Names in the working directory should complete."""
        _shell, completer = _completer()
        assert completer.completions("no", "readfile no") == ["notes.txt", "novel.md"]

    def test_directories_get_separator(self) -> None:
        """Directories should complete with a trailing separator."""
        _shell, completer = _completer()
        assert completer.completions("nes", "cd nes") == [f"nested{os.sep}"]

    def test_inside_subdirectory(self) -> None:
        """A partial path should complete inside its directory."""
        _shell, completer = _completer()
        text = os.path.join("nested", "in")
        assert completer.completions(text, f"readfile {text}") == [
            os.path.join("nested", "inner.txt")
        ]

    def test_empty_word_lists_everything(self) -> None:
        """Tab after a space should list the whole directory."""
        _shell, completer = _completer()
        assert len(completer.completions("", "readfile ")) == 3

    def test_raw_command_has_no_arguments(self) -> None:
        """Commands that take no arguments complete nothing."""
        _shell, completer = _completer()
        assert completer.completions("no", "cwd no") == []

    def test_unknown_command_has_no_arguments(self) -> None:
        """Unknown commands complete nothing."""
        _shell, completer = _completer()
        assert completer.completions("no", "frob no") == []

    def test_missing_directory(self) -> None:
        """A partial path in a missing directory completes nothing."""
        _shell, completer = _completer()
        text = os.path.join("ghost", "x")
        assert completer.completions(text, f"readfile {text}") == []


class TestReadlineCallback:
    """Verify the readline ``complete(text, state)`` protocol."""

    def test_iterates_candidates(self) -> None:
        """Successive states should walk the candidate list, then None."""
        _shell, completer = _completer()
        with patch("bubble_os.completer.readline.get_line_buffer", return_value="mk"):
            assert completer.complete("mk", 0) == "mkdir"
            assert completer.complete("mk", 1) == "mkfile"
            assert completer.complete("mk", 2) is None

"""Built-in commands and the default command table.

A ``Command`` pairs a literal prefix with a handler.  The shell tries
commands in the order they appear in the table and picks the first
whose prefix starts the input line.  No word boundary is enforced, so
``catch`` would match a ``cat`` command: a prefix that begins with
another command's prefix must be declared before it.

Every handler has the same signature: it receives the shell and the
extracted arguments and returns the text to show.  Failures are raised
as ``ShellError``/``FatalError`` and rendered by the shell.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from bubble_os.commands import directories, files, session, system

if TYPE_CHECKING:
    from bubble_os.shell import Shell

# Type alias for a command handler: takes the shell and args, returns output.
Handler: TypeAlias = "Callable[[Shell, list[str]], str]"


@dataclass(frozen=True)
class Command:
    """One entry in the command table.

    Attributes:
        prefix: Literal text the input line must start with.
        handler: Function run when the prefix matches.
        summary: One-line description for ``help``.
        usage: Example invocation for ``help <command>``.
        raw: If True, the handler takes no arguments and the rest of
            the line is ignored.

    """

    prefix: str
    handler: Handler
    summary: str = ""
    usage: str = ""
    raw: bool = False


def build_command_table() -> list[Command]:
    """Return the built-in commands in match-priority order."""
    return [
        Command("exit", session.cmd_exit, "Exit the shell.", "exit", raw=True),
        Command("help", session.cmd_help, "Show help for commands.", "help [command]"),
        Command("cd", directories.cmd_cd, "Change the working directory.", "cd <dir>"),
        Command("ls", directories.cmd_ls, "List the contents of a directory.", "ls [dir] [-s]"),
        Command("sysinfo", system.cmd_sysinfo, "Show system information.", "sysinfo [-a]"),
        Command(
            "taskkill",
            system.cmd_taskkill,
            "Terminate a process by name or PID.",
            "taskkill <name|pid>",
        ),
        Command("cls", session.cmd_cls, "Clear the screen.", "cls", raw=True),
        Command("mkdir", directories.cmd_mkdir, "Make a new directory.", "mkdir <dir> [-s]"),
        Command(
            "exec", system.cmd_exec, "Open a file with its default application.", "exec <file>"
        ),
        Command("about", session.cmd_about, "Show information about the shell.", "about [-l]"),
        Command(
            "mkfile",
            files.cmd_mkfile,
            "Make a new file and enter its content.",
            "mkfile <file> [-s]",
        ),
        Command("readfile", files.cmd_readfile, "Print the contents of a file.", "readfile <file>"),
        Command(
            "copyfile",
            files.cmd_copyfile,
            "Copy a file or directory.",
            "copyfile <source> <destination> [-s]",
        ),
        Command("print", session.cmd_print, "Print text to the screen.", "print <text>"),
        Command(
            "userinfo",
            system.cmd_userinfo,
            "Show information about the user.",
            "userinfo",
            raw=True,
        ),
        Command(
            "wcount",
            files.cmd_wcount,
            "Count the lines, words and characters in a file.",
            "wcount <file>",
        ),
        Command("del", files.cmd_del, "Delete a file or directory.", "del <path> [-y] [-s]"),
        Command(
            "size", files.cmd_size, "Show the size of a file.", "size <file> [-b|-kb|-mb|-gb]"
        ),
        Command("rename", files.cmd_rename, "Rename a file or directory.", "rename <old> <new> [-s]"),
        Command("time", system.cmd_time, "Show the current time.", "time", raw=True),
        Command("history", session.cmd_history, "Show command history.", "history [number|text]"),
        Command("fif", files.cmd_fif, "Find a phrase in a file.", "fif <file> <phrase>"),
        Command("cwd", directories.cmd_cwd, "Show the current directory.", "cwd", raw=True),
        Command("date", system.cmd_date, "Show the current date.", "date", raw=True),
        Command("bub", session.cmd_bub, "Run the commands in a .bub script.", "bub <file.bub>"),
    ]


__all__ = ["Command", "Handler", "build_command_table"]

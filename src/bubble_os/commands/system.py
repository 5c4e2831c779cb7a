"""System commands: platform and user information, processes, clocks.

Process lookup and termination go through ``psutil`` so ``taskkill``
works the same way on Windows, macOS and Linux.
"""

from __future__ import annotations

import getpass
import os
import platform
import shutil
import subprocess
from datetime import datetime
from typing import TYPE_CHECKING

import psutil

from bubble_os.classifier import EXEC_FILE, guard
from bubble_os.commands.common import ABORTED, existing_file, require, target
from bubble_os.errors import ErrorKind, ShellError

if TYPE_CHECKING:
    from bubble_os.shell import Shell

_GIB = 1024**3

# platform.system() → command that opens a file with its default application.
_OPENERS: dict[str, str] = {"Darwin": "open", "Linux": "xdg-open"}


def cmd_sysinfo(_shell: Shell, args: list[str]) -> str:
    """Show information about the computer; ``-a`` adds hardware details."""
    uname = platform.uname()
    lines = [
        f"Computer name: {uname.node}",
        f"Operating system: {uname.system} {uname.release}",
        f"Version: {uname.version}",
        f"Architecture: {uname.machine}",
        f"Python: {platform.python_version()}",
    ]
    if "-a" in args:
        memory = psutil.virtual_memory()
        boot = datetime.fromtimestamp(psutil.boot_time())
        lines.extend(
            [
                f"Processor: {uname.processor or 'unknown'}",
                f"CPU cores: {psutil.cpu_count(logical=False) or '?'} physical, "
                f"{psutil.cpu_count(logical=True) or '?'} logical",
                f"Memory: {memory.available / _GIB:.2f} GB free of {memory.total / _GIB:.2f} GB",
                f"Booted: {boot:%Y-%m-%d %H:%M:%S}",
            ]
        )
    return "\n".join(lines)


def cmd_userinfo(_shell: Shell, _args: list[str]) -> str:
    """Show information about the current user."""
    lines = [
        f"Username: {getpass.getuser()}",
        f"Home directory: {os.path.expanduser('~')}",
    ]
    if hasattr(os, "getuid"):
        lines.append(f"UID: {os.getuid()}")
        lines.append(f"GID: {os.getgid()}")
    login_shell = os.environ.get("SHELL") or os.environ.get("COMSPEC")
    if login_shell:
        lines.append(f"Shell: {login_shell}")
    return "\n".join(lines)


def _find_processes(name_or_pid: str) -> list[psutil.Process]:
    """Return the processes matching a PID or an executable name."""
    if name_or_pid.isdigit():
        try:
            return [psutil.Process(int(name_or_pid))]
        except psutil.NoSuchProcess:
            return []
    return [
        proc
        for proc in psutil.process_iter(["name"])
        if (proc.info.get("name") or "").lower() == name_or_pid.lower()
    ]


def cmd_taskkill(shell: Shell, args: list[str]) -> str:
    """Terminate processes by PID or by name, after confirmation."""
    (name_or_pid,) = require(args, "a process name or PID", "taskkill notepad.exe")

    processes = _find_processes(name_or_pid)
    if not processes:
        raise ShellError(ErrorKind.NON_EXISTENT, "process", name_or_pid)
    if any(proc.pid == os.getpid() for proc in processes):
        raise ShellError(ErrorKind.UNKNOWN, "terminate its own process", name_or_pid)

    if not shell.terminal.confirm(f"Are you sure you want to terminate '{name_or_pid}'?"):
        return ABORTED

    terminated = 0
    for proc in processes:
        shell.trace(f"Terminating process {proc.pid}...")
        try:
            proc.terminate()
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied:
            raise ShellError(
                ErrorKind.INVALID_PERMS, "terminate the process", name_or_pid
            ) from None
        terminated += 1

    noun = "process" if terminated == 1 else "processes"
    return f"Successfully terminated {terminated} {noun} matching '{name_or_pid}'."


def cmd_exec(shell: Shell, args: list[str]) -> str:
    """Open a file with the operating system's default application."""
    (raw,) = require(args, "a file", "exec test.txt")
    path = existing_file(target(raw))

    system = platform.system()
    shell.trace(f"Opening '{path}' on {system}...")
    if system == "Windows":
        with guard(EXEC_FILE, path):
            os.startfile(path)  # type: ignore[attr-defined]  # noqa: S606
        return f"Successfully opened {path}."

    opener = _OPENERS.get(system)
    if opener is None:
        raise ShellError(ErrorKind.INVALID_OS, "Windows, macOS and Linux")
    if shutil.which(opener) is None:
        raise ShellError(ErrorKind.UNKNOWN, "open the file", path)
    with guard(EXEC_FILE, path):
        subprocess.Popen([opener, path], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)  # noqa: S603
    return f"Successfully opened {path}."


def cmd_time(_shell: Shell, _args: list[str]) -> str:
    """Print the current local time."""
    return f"{datetime.now():%H:%M:%S}"


def cmd_date(_shell: Shell, _args: list[str]) -> str:
    """Print the current local date."""
    return f"{datetime.now():%A, %d %B %Y}"

"""Line-by-line content editor used by ``mkfile``.

The editor reads one line at a time into an ordered buffer.  Three
sentinel lines (matched case-insensitively) control it:

- ``!SAVE``: stop and hand back the buffer for writing.
- ``!CANCEL``: stop and discard the buffer.
- ``!EDIT``: ask for a 1-based line number, then its new content.

Any other line is appended verbatim, including empty lines.  The
editor never touches the filesystem; the caller writes the result.
"""

from bubble_os.terminal import Terminal

SAVE = "!SAVE"
CANCEL = "!CANCEL"
EDIT = "!EDIT"

INSTRUCTIONS = (
    f"Add the content of the new file. Type '{SAVE}' to save changes, "
    f"'{CANCEL}' to discard, or '{EDIT}' to modify previous input:\n"
)


class ContentEditor:
    """Blocking, single-buffer line editor."""

    def __init__(self, terminal: Terminal) -> None:
        """Create an editor that reads from *terminal*."""
        self._terminal = terminal
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Return a copy of the current buffer."""
        return list(self._lines)

    def run(self) -> list[str] | None:
        """Collect lines until saved or cancelled.

        Returns:
            The buffer on ``!SAVE``, or None on ``!CANCEL``.

        """
        self._terminal.write(INSTRUCTIONS)
        while True:
            line = self._terminal.read_line("> ")
            command = line.strip().upper()
            if command == SAVE:
                return self.lines
            if command == CANCEL:
                return None
            if command == EDIT:
                self._edit()
            else:
                self._lines.append(line)

    def _edit(self) -> None:
        """Replace one previously entered line."""
        if not self._lines:
            self._terminal.write("No previous input to edit.\n")
            return

        number = self._terminal.read_int(f"Choose a line number to edit (1-{len(self._lines)}): ")
        if number is None or not 1 <= number <= len(self._lines):
            self._terminal.write("Invalid line number.\n")
            return

        self._lines[number - 1] = self._terminal.read_line(f"Edit line {number}: ")
        self._terminal.write(f"Line {number} has been updated.\n")

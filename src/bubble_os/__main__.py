"""Allow ``python -m bubble_os`` to start the REPL."""

from bubble_os.repl import run

run()

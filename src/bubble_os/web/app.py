"""Flask application factory for the shell's web front-end.

The ``create_app`` function creates a shell and returns a Flask app
with four endpoints:

- ``GET /``: render the terminal page with the start-up banner.
- ``POST /api/execute``: execute a command line and return JSON.
- ``GET /api/history``: return the command history.
- ``GET /api/status``: return the shell's name, version and cwd.

A browser cannot answer prompts mid-request, so any input a command
will ask for (confirmations, file content) is sent up front in the
``input`` list and replayed through a ``ScriptedTerminal``.
"""

from __future__ import annotations

import os

from flask import Flask, Response, jsonify, render_template, request

from bubble_os.config import Settings
from bubble_os.repl import format_banner
from bubble_os.shell import Shell
from bubble_os.terminal import ScriptedTerminal

_HTTP_BAD_REQUEST = 400


def create_app(settings: Settings | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Shell configuration; defaults to the environment.

    Returns:
        A configured Flask application ready to serve.

    """
    shell = Shell(terminal=ScriptedTerminal(), settings=settings)
    state = {"halted": False}

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the terminal HTML page."""
        return render_template(
            "index.html",
            name=shell.settings.name,
            banner=format_banner(shell.settings),
            cwd=os.getcwd(),
        )

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a command line and return JSON output.

        Expects JSON body: ``{"command": "...", "input": ["...", ...]}``

        Returns:
            JSON with ``output``, ``transcript`` and ``halted`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        if state["halted"]:
            return jsonify({"output": "System halted.", "transcript": [], "halted": True})

        terminal = ScriptedTerminal(str(line) for line in data.get("input") or [])
        shell.terminal = terminal
        try:
            result = shell.execute(str(data["command"]))
        except EOFError:
            return (
                jsonify(
                    {
                        "error": "The command needs more input than was provided",
                        "transcript": terminal.output,
                    }
                ),
                _HTTP_BAD_REQUEST,
            )

        if result == Shell.EXIT_SENTINEL:
            state["halted"] = True
            return jsonify({"output": "System halted.", "transcript": terminal.output, "halted": True})

        return jsonify({"output": result, "transcript": terminal.output, "halted": False})

    @app.route("/api/history")
    def history() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the command history, oldest first."""
        return jsonify({"history": shell.history.entries})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return shell status for polling.

        Returns:
            JSON with ``name``, ``version``, ``cwd``, ``running`` and
            ``failures`` (error tag to count) fields.

        """
        return jsonify(
            {
                "name": shell.settings.name,
                "version": shell.settings.version,
                "cwd": os.getcwd(),
                "running": not state["halted"],
                "failures": dict(shell.logger.failures()),
            }
        )

    return app

"""Tests for the browser front-end.

The web app exposes the shell over HTTP.  Tests use
``pytest.importorskip`` so they are skipped gracefully when Flask is
not installed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

flask = pytest.importorskip("flask")

from bubble_os.config import Settings  # noqa: E402
from bubble_os.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


def _create_client() -> Any:
    """Create a test client from a fresh app."""
    app = create_app(Settings())
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every request inside its own temporary directory."""
    monkeypatch.chdir(tmp_path)


class TestAppCreation:
    """Verify the app factory and landing page."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(Settings()), flask.Flask)

    def test_index_returns_html(self) -> None:
        """GET / should return the terminal page with the banner."""
        response = _create_client().get("/")
        assert response.status_code == HTTP_OK
        assert "text/html" in response.content_type
        assert b"BubbleOS Lite" in response.data


class TestExecuteEndpoint:
    """Verify the /api/execute POST endpoint."""

    def test_print_returns_output(self) -> None:
        """A simple command should return its output."""
        response = _create_client().post("/api/execute", json={"command": "print hello"})
        assert response.status_code == HTTP_OK
        data = response.get_json()
        assert data["output"] == "hello"
        assert data["halted"] is False

    def test_error_is_output(self) -> None:
        """Command errors are normal output, not HTTP errors."""
        response = _create_client().post("/api/execute", json={"command": "frobnicate"})
        assert response.status_code == HTTP_OK
        assert response.get_json()["output"].startswith("[1]")

    def test_missing_command(self) -> None:
        """A body without a command should be rejected."""
        response = _create_client().post("/api/execute", json={})
        assert response.status_code == HTTP_BAD_REQUEST
        assert response.get_json()["error"] == "Missing 'command' field"

    @pytest.mark.parametrize("body", [["command"], "command", 42])
    def test_body_not_an_object(self, body: object) -> None:
        """A JSON body that is not an object should be rejected, not crash."""
        response = _create_client().post("/api/execute", json=body)
        assert response.status_code == HTTP_BAD_REQUEST
        assert response.get_json()["error"] == "Missing 'command' field"

    def test_scripted_input(self, tmp_path: Path) -> None:
        """Prompt answers come from the input list."""
        response = _create_client().post(
            "/api/execute",
            json={"command": "mkfile a.txt", "input": ["one", "two", "!SAVE"]},
        )
        data = response.get_json()
        assert data["output"].startswith("Successfully made the file")
        assert "Add the content of the new file" in data["transcript"][0]
        assert (tmp_path / "a.txt").read_text() == "one\ntwo"

    def test_not_enough_input(self, tmp_path: Path) -> None:
        """A command that runs out of input should be rejected."""
        (tmp_path / "a.txt").write_text("x")
        response = _create_client().post("/api/execute", json={"command": "del a.txt"})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "more input" in response.get_json()["error"]
        assert (tmp_path / "a.txt").exists()

    def test_exit_halts(self) -> None:
        """exit should halt the session for later requests too."""
        client = _create_client()
        data = client.post("/api/execute", json={"command": "exit"}).get_json()
        assert data["halted"] is True
        later = client.post("/api/execute", json={"command": "print x"}).get_json()
        assert later == {"output": "System halted.", "transcript": [], "halted": True}


class TestHistoryAndStatus:
    """Verify the read-only endpoints."""

    def test_history(self) -> None:
        """History should list executed lines in order."""
        client = _create_client()
        client.post("/api/execute", json={"command": "print a"})
        client.post("/api/execute", json={"command": "cwd"})
        assert client.get("/api/history").get_json() == {"history": ["print a", "cwd"]}

    def test_status(self, tmp_path: Path) -> None:
        """Status should report the shell and working directory."""
        data = _create_client().get("/api/status").get_json()
        assert data == {
            "name": "BubbleOS Lite",
            "version": "1.0.0",
            "cwd": str(tmp_path),
            "running": True,
            "failures": {},
        }

    def test_status_counts_failures(self) -> None:
        """Status should count failures by error tag."""
        client = _create_client()
        client.post("/api/execute", json={"command": "frobnicate"})
        client.post("/api/execute", json={"command": "readfile missing.txt"})
        client.post("/api/execute", json={"command": "readfile other.txt"})
        data = client.get("/api/status").get_json()
        assert data["failures"] == {"UNRECOGNIZED_COMMAND": 1, "NON_EXISTENT": 2}

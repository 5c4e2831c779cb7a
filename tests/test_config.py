"""Tests for shell settings read from environment variables."""

import pytest

from bubble_os.config import AUTHOR, VERSION, Settings
from bubble_os.errors import SHELL_NAME


class TestDefaults:
    """Verify default settings."""

    def test_metadata(self) -> None:
        """Defaults should carry the package metadata."""
        settings = Settings()
        assert settings.name == SHELL_NAME
        assert settings.version == VERSION
        assert settings.author == AUTHOR

    def test_behaviour_defaults(self) -> None:
        """Verbose is off, no custom prompt, UTF-8 encoding."""
        settings = Settings()
        assert settings.verbose is False
        assert settings.prompt is None
        assert settings.encoding == "utf-8"

    def test_empty_environment(self) -> None:
        """An empty environment should give the defaults."""
        assert Settings.from_environ({}) == Settings()


class TestFromEnviron:
    """Verify environment parsing."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_verbose_truthy(self, value: str) -> None:
        """Common truthy spellings should enable verbose mode."""
        assert Settings.from_environ({"BUBBLE_VERBOSE": value}).verbose is True

    @pytest.mark.parametrize("value", ["0", "false", "", "maybe"])
    def test_verbose_falsy(self, value: str) -> None:
        """Anything else should leave verbose mode off."""
        assert Settings.from_environ({"BUBBLE_VERBOSE": value}).verbose is False

    def test_prompt(self) -> None:
        """BUBBLE_PROMPT should replace the prompt."""
        assert Settings.from_environ({"BUBBLE_PROMPT": "> "}).prompt == "> "

    def test_empty_prompt_ignored(self) -> None:
        """An empty BUBBLE_PROMPT should keep the default."""
        assert Settings.from_environ({"BUBBLE_PROMPT": ""}).prompt is None

    def test_encoding(self) -> None:
        """BUBBLE_ENCODING should set the file encoding."""
        assert Settings.from_environ({"BUBBLE_ENCODING": "latin-1"}).encoding == "latin-1"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit mapping, os.environ should be used."""
        monkeypatch.setenv("BUBBLE_VERBOSE", "1")
        assert Settings.from_environ().verbose is True

    def test_settings_are_frozen(self) -> None:
        """Settings should be immutable."""
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.verbose = True  # type: ignore[misc]

"""Tests for the command line and settings."""

import os
import tempfile

import pytest

from ircminutes.__main__ import build_parser, main
from ircminutes.config import MinutesSettings

LOG = "10:00:00 <bob> Meeting: CLI call\n10:00:01 <bob> Topic: Only topic\n"


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


class TestCommandLine:
    """Test cases for the ircminutes command."""

    def test_default_is_serve(self):
        """Test that no arguments means running the server."""
        assert build_parser().parse_args([]).command is None

    def test_convert_to_file(self, temp_dir):
        """Test converting a log into a markdown file."""
        log_path = os.path.join(temp_dir, "log.txt")
        out_path = os.path.join(temp_dir, "minutes.md")
        with open(log_path, "w") as f:
            f.write(LOG)

        main(["convert", log_path, "--reference", "https://example.org/log", "-o", out_path])

        with open(out_path, encoding="utf-8") as f:
            minutes = f.read()
        assert "# Meeting: CLI call" in minutes
        assert "### [1. Only topic](id:section1)" in minutes
        assert "[IRC Log](https://example.org/log)" in minutes

    def test_convert_to_stdout(self, temp_dir, capsys):
        """Test converting a log to standard output."""
        log_path = os.path.join(temp_dir, "log.txt")
        with open(log_path, "w") as f:
            f.write(LOG)

        main(["convert", log_path])

        assert "# Meeting: CLI call" in capsys.readouterr().out

    def test_convert_missing_file(self):
        """Test that a missing log is reported."""
        with pytest.raises(FileNotFoundError):
            main(["convert", "/nonexistent/log.txt"])


class TestSettings:
    """Test cases for MinutesSettings."""

    def test_defaults(self, monkeypatch):
        """Test the default settings."""
        monkeypatch.delenv("IRCMINUTES_LOGO_URL", raising=False)
        settings = MinutesSettings(_env_file=None)

        assert settings.logo_url == "https://www.w3.org/Icons/w3c_home"
        assert settings.transcript_pattern == "*.txt"

    def test_environment(self, monkeypatch):
        """Test that settings come from IRCMINUTES_ variables."""
        monkeypatch.setenv("IRCMINUTES_LOGO_ALT", "Our logo")
        monkeypatch.setenv("IRCMINUTES_TRANSCRIPT_PATTERN", "*-irc.txt")
        settings = MinutesSettings(_env_file=None)

        assert settings.logo_alt == "Our logo"
        assert settings.transcript_pattern == "*-irc.txt"

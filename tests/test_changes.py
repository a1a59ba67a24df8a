"""Tests for s/old/new/ corrections."""

import pytest

from ircminutes.changes import ChangeApplier, parse_change_request
from ircminutes.transcript import LogLine


def make_lines(*contents, nick="alice"):
    return [LogLine(nick=nick, content=content) for content in contents]


def contents(lines):
    return [line.content for line in lines]


@pytest.fixture
def applier():
    """Create a ChangeApplier instance for testing."""
    return ChangeApplier()


class TestParseChangeRequest:
    """Test cases for recognizing substitution commands."""

    def test_slash_form(self):
        """Test the usual s/old/new/ syntax."""
        request = parse_change_request("s/foo bar/baz/", 3)

        assert request.position == 3
        assert request.old == "foo bar"
        assert request.new == "baz"
        assert not request.global_forward
        assert not request.global_any

    def test_pipe_form_and_flags(self):
        """Test the s|old|new| syntax with both flags."""
        assert parse_change_request("s|foo|bar|g", 0).global_forward
        assert parse_change_request("s/foo/bar/G", 0).global_any

    def test_empty_replacement(self):
        """Test that the replacement may be empty."""
        assert parse_change_request("s/foo//", 0).new == ""

    @pytest.mark.parametrize("content", ["s/foo.bar/baz/", "say s/foo/bar/", "s//bar/", "see/foo/bar"])
    def test_not_a_command(self, content):
        """Test that malformed commands are ordinary text."""
        assert parse_change_request(content, 0) is None


class TestChangeApplier:
    """Test cases for ChangeApplier."""

    def test_one_shot_changes_nearest_earlier_line(self, applier):
        """Test that a plain command fixes only the closest earlier match."""
        lines = applier.apply(make_lines("bob said foo", "X said foo", "s/foo/bar/"))

        assert contents(lines) == ["bob said foo", "X said bar"]

    def test_global_forward_changes_all_earlier_lines(self, applier):
        """Test that the g flag fixes every earlier match."""
        lines = applier.apply(make_lines("foo one", "foo two", "s/foo/bar/g", "foo three"))

        assert contents(lines) == ["bar one", "bar two", "foo three"]

    def test_global_any_changes_every_line(self, applier):
        """Test that the G flag also reaches lines said after the command."""
        lines = applier.apply(make_lines("foo one", "s/foo/bar/G", "foo two"))

        assert contents(lines) == ["bar one", "bar two"]

    def test_later_lines_are_untouched_without_global_any(self, applier):
        """Test that a plain command ignores later matches and still fires on earlier ones."""
        lines = applier.apply(make_lines("foo early", "s/foo/bar/", "foo late"))

        assert contents(lines) == ["bar early", "foo late"]

    def test_only_first_occurrence_in_a_line(self, applier):
        """Test that a line is changed once per command."""
        lines = applier.apply(make_lines("foo foo", "s/foo/bar/"))

        assert contents(lines) == ["bar foo"]

    def test_unmatched_command_is_inert(self, applier):
        """Test that a command with nothing to change just disappears."""
        lines = applier.apply(make_lines("hello", "s/nothing/here/"))

        assert contents(lines) == ["hello"]

    def test_replacement_is_not_rescanned(self, applier):
        """Test that replaced text never becomes a new command."""
        lines = applier.apply(make_lines("x marks", "s/x marks/s/"))

        assert contents(lines) == ["s"]

    def test_lines_keep_identity_and_nick(self, applier):
        """Test that corrected lines are the same objects with their nick unchanged."""
        source = [LogLine("bob", "teh plan"), LogLine("alice", "s/teh/the/")]
        lines = applier.apply(source)

        assert lines[0] is source[0]
        assert lines[0].nick == "bob"
        assert lines[0].content == "the plan"

    def test_commands_apply_in_discovery_order(self, applier):
        """Test that the most recent command is tried first."""
        lines = applier.apply(make_lines("abc", "s/abc/xyz/", "s/abc/def/"))

        assert contents(lines) == ["def"]

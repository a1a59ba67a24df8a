"""Helpers for the ``label: content`` convention used on IRC."""

import re
from typing import NamedTuple

from .transcript import LogLine

LABEL_PATTERN = re.compile(r"^(\w+|\.\.\.):(.*)$")

# URL-like prefixes, not directives
NON_LABELS = {"http", "https", "email", "ftp"}


class Labelled(NamedTuple):
    label: str | None
    content: str


def get_label(content: str) -> Labelled:
    """
    Split a leading ``word:`` label off a line's content.

    Args:
        content: Line content

    Returns:
        The label (or None) and the remaining content
    """
    match = LABEL_PATTERN.match(content.strip())
    if match is None:
        return Labelled(None, content)

    label, rest = match.group(1).strip(), match.group(2).strip()
    if label in NON_LABELS:
        return Labelled(None, content)
    if label == "...":
        # Scribes often type "...:" for a continuation
        return Labelled(None, "... " + rest)
    return Labelled(label, rest)


def get_labelled_item(label: str, line: LogLine) -> str | None:
    """Value of a ``label:`` line (case-insensitive), or None if it carries another label."""
    if line.content_lower.startswith(label + ":"):
        return line.content[len(label) + 1 :].strip()
    return None


def get_scribe(line: LogLine) -> str | None:
    """Nick named by a ``scribenick:`` or ``scribe:`` line; empty when no name is given."""
    name = get_labelled_item("scribenick", line)
    if name is None:
        name = get_labelled_item("scribe", line)
    return name

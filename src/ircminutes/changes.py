"""Retroactive ``s/old/new/`` corrections typed into the channel."""

import logging
import re
from dataclasses import dataclass

from .transcript import LogLine

logger = logging.getLogger(__name__)

CHANGE_PATTERNS = (
    re.compile(r"^s/([\w ]+)/([\w ]*)/?(g|G)?"),
    re.compile(r"^s\|([\w ]+)\|([\w ]*)\|?(g|G)?"),
)

# Placeholder for consumed command lines, so indices stay stable until the end
SENTINEL = "\x00change-request\x00"


@dataclass
class ChangeRequest:
    """
    A substitution command.

    ``position`` is the index of the command in the most-recent-first view of
    the log; lines with a higher index were said before the command.
    """

    position: int
    old: str
    new: str
    global_forward: bool = False
    global_any: bool = False
    active: bool = True

    @property
    def persistent(self) -> bool:
        return self.global_forward or self.global_any

    def applies_to(self, index: int) -> bool:
        return self.global_any or index >= self.position


def parse_change_request(content: str, position: int) -> ChangeRequest | None:
    """Parse ``s/old/new/[g|G]`` (or with ``|`` delimiters); None if it is not a command."""
    for pattern in CHANGE_PATTERNS:
        match = pattern.match(content)
        if match:
            old, new, flag = match.groups()
            return ChangeRequest(
                position=position,
                old=old,
                new=new,
                global_forward=flag == "g",
                global_any=flag == "G",
            )
    return None


class ChangeApplier:
    """Applies substitution commands to the lines they refer to."""

    def apply(self, lines: list[LogLine]) -> list[LogLine]:
        """
        Execute and remove all substitution commands.

        Line contents are rewritten in place.

        Args:
            lines: Log lines in chronological order

        Returns:
            The corrected lines in chronological order, without command lines
        """
        reversed_lines = list(reversed(lines))

        requests = []
        for index, line in enumerate(reversed_lines):
            request = parse_change_request(line.content, index)
            if request is not None:
                logger.debug("Change request from %s: %s", line.nick, request)
                requests.append(request)
                line.content = SENTINEL

        for index, line in enumerate(reversed_lines):
            if line.content == SENTINEL:
                continue
            for request in requests:
                if not request.active or request.old not in line.content:
                    continue
                if not request.applies_to(index):
                    continue
                line.content = line.content.replace(request.old, request.new, 1)
                if not request.persistent:
                    request.active = False

        corrected = [line for line in reversed_lines if line.content != SENTINEL]
        corrected.reverse()
        return corrected

"""IRC log normalization and transcript inspection."""

import logging
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

BOT_NICKS = {"RRSAgent", "Zakim"}

CONTROL_PREFIXES = (
    "q+",
    "q-",
    "q?",
    "ack",
    "agenda+",
    "agenda?",
    "trackbot,",
    "zakim,",
    "rrsagent,",
)

NOTICE_PATTERNS = (
    re.compile(r"^\w+ has joined #\w+"),
    re.compile(r"^\w+ has left #\w+"),
)


@dataclass(eq=False)
class LogLine:
    """One spoken line of the log: who said it and what they said."""

    nick: str
    content: str

    @property
    def content_lower(self) -> str:
        return self.content.lower()


def split_line(line: str) -> LogLine:
    """
    Split a timestamped log line into nick and content.

    Args:
        line: Raw line of the form ``"<timestamp> <nick> content"``

    Returns:
        The parsed line; malformed input is sliced positionally
    """
    # Drop the timestamp
    line = line[line.find(" ") + 1 :]

    close = line.find(">")
    if line.startswith("<") and close != -1:
        return LogLine(nick=line[1:close], content=line[close + 1 :].strip())

    space = line.find(" ")
    return LogLine(nick=line[1 : space - 1], content=line[space + 1 :].strip())


def is_noise(line: LogLine) -> bool:
    """Bot chatter, floor control commands and join/leave notices."""
    if line.nick in BOT_NICKS:
        return True
    if line.content_lower.startswith(CONTROL_PREFIXES):
        return True
    return any(pattern.match(line.content) for pattern in NOTICE_PATTERNS)


class TranscriptProcessor:
    """Turns raw chat-log text into an ordered list of log lines."""

    def normalize(self, text: str) -> list[LogLine]:
        """
        Normalize a raw transcript.

        Args:
            text: Raw multi-line IRC log

        Returns:
            Log lines in chronological order, with noise removed
        """
        lines = []
        dropped = 0

        for raw in text.split("\n"):
            raw = raw.rstrip("\r")
            if not raw:
                continue
            line = split_line(raw)
            if is_noise(line):
                dropped += 1
                continue
            lines.append(line)

        logger.debug("Normalized %d lines, dropped %d", len(lines), dropped)
        return lines

    def extract_metadata(self, text: str) -> dict[str, Any]:
        """
        Extract structured information from a transcript.

        Args:
            text: Raw transcript content

        Returns:
            Speakers in order of first appearance and line counts
        """
        lines = self.normalize(text)
        speakers = []
        for line in lines:
            if line.nick not in speakers:
                speakers.append(line.nick)

        return {
            "speakers": speakers,
            "speaker_count": len(speakers),
            "total_lines": len(lines),
            "raw_lines": sum(1 for raw in text.split("\n") if raw.rstrip("\r")),
        }

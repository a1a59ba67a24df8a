"""Meeting metadata extraction from directive lines."""

import logging
from dataclasses import dataclass, field, replace

from .labels import get_labelled_item, get_scribe
from .transcript import LogLine

logger = logging.getLogger(__name__)

PEOPLE_CATEGORIES = ("present", "regrets", "guests")
SINGLE_ITEMS = ("chair", "agenda", "meeting", "date")


def union(names: list[str], new_names: list[str]) -> list[str]:
    """Ordered union of two name lists; names are trimmed and blanks dropped."""
    result = list(names)
    for name in new_names:
        name = name.strip()
        if name and name not in result:
            result.append(name)
    return result


@dataclass
class MeetingHeaders:
    """Metadata of a meeting, as announced on the channel."""

    present: list[str] = field(default_factory=list)
    regrets: list[str] = field(default_factory=list)
    guests: list[str] = field(default_factory=list)
    chair: str = ""
    agenda: str = ""
    meeting: str = ""
    date: str = ""
    scribe: list[str] = field(default_factory=list)

    def copy(self) -> "MeetingHeaders":
        return replace(
            self,
            present=list(self.present),
            regrets=list(self.regrets),
            guests=list(self.guests),
            scribe=list(self.scribe),
        )

    def serialize(self) -> dict[str, str]:
        """Flatten the name lists into comma-separated strings."""
        return {
            "present": ", ".join(self.present),
            "regrets": ", ".join(self.regrets),
            "guests": ", ".join(self.guests),
            "chair": self.chair,
            "agenda": self.agenda,
            "meeting": self.meeting,
            "date": self.date,
            "scribe": ", ".join(self.scribe),
        }


class HeaderExtractor:
    """Folds directive lines (present+, chair:, scribenick:, ...) into MeetingHeaders."""

    def extract(
        self, lines: list[LogLine], headers: MeetingHeaders | None = None
    ) -> tuple[MeetingHeaders, list[LogLine]]:
        """
        Pull meeting metadata out of the log.

        Args:
            lines: Normalized log lines
            headers: Headers to continue from; left untouched

        Returns:
            The accumulated headers and the lines that remain content.
            Scribe lines stay in the residual list.
        """
        headers = headers.copy() if headers is not None else MeetingHeaders()
        residual = []

        for line in lines:
            if self.fold(headers, line):
                continue
            if line.nick == "trackbot":
                continue
            residual.append(line)

        logger.debug("Extracted headers %s, %d lines remain", headers, len(residual))
        return headers, residual

    def fold(self, headers: MeetingHeaders, line: LogLine) -> bool:
        """Fold one line into the headers; True if the line is consumed."""
        for category in PEOPLE_CATEGORIES:
            if self._people(headers, category, line):
                return True

        for category in SINGLE_ITEMS:
            item = get_labelled_item(category, line)
            if item is not None:
                setattr(headers, category, item)
                return True

        scribe = get_scribe(line)
        if scribe is not None:
            headers.scribe = union(headers.scribe, [scribe])
        return False

    def _people(self, headers: MeetingHeaders, category: str, line: LogLine) -> bool:
        lower = line.content_lower.strip()
        if not lower.startswith(category):
            return False

        names = line.content[len(category) + 1 :].strip().split(",")
        if lower.startswith(category + "+"):
            if names == [""]:
                names = [line.nick]
            setattr(headers, category, union(getattr(headers, category), names))
        elif lower.startswith(category + ":"):
            setattr(headers, category, union([], names))
        else:
            # e.g. "presentation: ..."
            return False
        return True

"""Markdown rendering of the minutes: header block, TOC, body and resolutions."""

from dataclasses import dataclass, field
from enum import Enum

from .headers import MeetingHeaders
from .labels import get_label, get_scribe
from .transcript import LogLine

DEFAULT_LOGO_URL = "https://www.w3.org/Icons/w3c_home"
DEFAULT_LOGO_ALT = "W3C Logo"

HEADER_TEMPLATE = """![{logo_alt}]({logo_url})
# Meeting: {meeting}
**Date:** {date}

See also the [Agenda]({agenda}) and the [IRC Log]({source_reference})
## Attendees
**Present:** {present}

**Regrets:** {regrets}

**Guests:** {guests}

**Chair:** {chair}

**Scribe(s):** {scribe}
"""

SECTION_LABELS = {"topic": 1, "subtopic": 2}
PROPOSAL_LABELS = {"proposed", "proposal"}
RESOLUTION_LABELS = {"resolved", "resolution"}
CONTINUATION_MARKERS = ("...", "…")


class LineKind(Enum):
    SCRIBE_CHANGE = "scribe_change"
    SECTION_HEADER = "section_header"
    PROPOSAL_MARKER = "proposal_marker"
    RESOLUTION_MARKER = "resolution_marker"
    SCRIBE_TURN = "scribe_turn"
    CONTINUATION_LINE = "continuation_line"
    NON_SCRIBE_QUOTE = "non_scribe_quote"
    SUPPRESSED = "suppressed"


@dataclass
class RenderEvent:
    kind: LineKind
    line: LogLine
    label: str | None = None
    content: str = ""
    level: int = 0


@dataclass
class TocEntry:
    numbering: str
    title: str
    anchor: str
    level: int = 1


@dataclass
class Resolution:
    index: int
    text: str
    anchor: str


@dataclass
class RenderedContent:
    markdown: str
    toc: list[TocEntry] = field(default_factory=list)
    resolutions: list[Resolution] = field(default_factory=list)


def render_header(
    headers: MeetingHeaders,
    source_reference: str,
    logo_url: str = DEFAULT_LOGO_URL,
    logo_alt: str = DEFAULT_LOGO_ALT,
) -> str:
    """
    Fill the fixed header template.

    Args:
        headers: Extracted meeting metadata
        source_reference: Link to the IRC log, inserted verbatim
        logo_url: Logo image URL
        logo_alt: Logo alt text

    Returns:
        The markdown header block; missing fields are left empty
    """
    return HEADER_TEMPLATE.format(
        logo_url=logo_url,
        logo_alt=logo_alt,
        source_reference=source_reference,
        **headers.serialize(),
    )


def strip_continuation(content: str) -> str | None:
    """Text of a continuation line without its leading dots, or None."""
    for marker in CONTINUATION_MARKERS:
        if content.startswith(marker):
            return content[len(marker) :].strip()
    return None


class ContentRenderer:
    """
    Renders the body of the minutes in a single pass over the log.

    Only the current scribe's lines become prose: labelled lines start a new
    speaker turn and continuation lines extend it. Everybody else is quoted.
    Topics and subtopics become numbered, anchored sections listed in the
    table of contents; resolutions are numbered and indexed at the end.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.current_scribe: str | None = None
        self.within_paragraph = False
        self.level1 = 0
        self.level2 = 0
        self.anchor_counter = 0
        self.toc: list[TocEntry] = []
        self.resolutions: list[Resolution] = []
        self._body: list[str] = ["\n---\n"]

    def classify(self, line: LogLine) -> RenderEvent:
        """Decide what a line becomes in the minutes, given the current scribe."""
        scribe = get_scribe(line)
        if scribe is not None:
            return RenderEvent(LineKind.SCRIBE_CHANGE, line, content=scribe)

        label, content = get_label(line.content)
        key = label.lower() if label is not None else None

        if key in SECTION_LABELS:
            return RenderEvent(LineKind.SECTION_HEADER, line, label, content, SECTION_LABELS[key])
        if key in PROPOSAL_LABELS:
            return RenderEvent(LineKind.PROPOSAL_MARKER, line, label, content)
        if key in RESOLUTION_LABELS:
            return RenderEvent(LineKind.RESOLUTION_MARKER, line, label, content)

        if line.nick.lower() != self.current_scribe:
            return RenderEvent(LineKind.NON_SCRIBE_QUOTE, line, content=line.content)
        if label is not None:
            return RenderEvent(LineKind.SCRIBE_TURN, line, label, content)

        text = strip_continuation(content)
        if text is not None:
            return RenderEvent(LineKind.CONTINUATION_LINE, line, content=text)
        return RenderEvent(LineKind.SUPPRESSED, line, content=content)

    def render(self, lines: list[LogLine]) -> RenderedContent:
        """
        Render the TOC and body of the minutes.

        Args:
            lines: Corrected log lines, scribe lines included

        Returns:
            The markdown (TOC, body and, if any, the resolutions section)
            together with the TOC entries and resolutions it contains
        """
        self._reset()

        for line in lines:
            event = self.classify(line)
            kind = event.kind

            if kind is LineKind.SCRIBE_CHANGE:
                # A bare "scribe:" leaves nobody scribing
                self.current_scribe = event.content.lower() or None
            elif kind is LineKind.SECTION_HEADER:
                self.within_paragraph = False
                self._add_section(event.content, event.level)
            elif kind is LineKind.PROPOSAL_MARKER:
                self.within_paragraph = False
                self._body.append(f"\n\n*({line.nick})* **Proposed resolution: {event.content}**")
            elif kind is LineKind.RESOLUTION_MARKER:
                self.within_paragraph = False
                self._add_resolution(event.content)
            elif kind is LineKind.SCRIBE_TURN:
                self.within_paragraph = True
                self._body.append(f"\n\n**{event.label}:** {event.content}")
            elif kind is LineKind.CONTINUATION_LINE:
                if not event.content:
                    continue
                if self.within_paragraph:
                    self._body.append(f" {event.content}")
                else:
                    # Something interrupted the speaker; resume in a new paragraph
                    self._body.append(f"\n\n{event.content}")
                    self.within_paragraph = True
            elif kind is LineKind.NON_SCRIBE_QUOTE:
                self.within_paragraph = False
                self._body.append(f"\n\n> *{line.nick}*: {event.content}")
            elif kind is LineKind.SUPPRESSED:
                pass

        return RenderedContent(
            markdown=self._assemble(),
            toc=list(self.toc),
            resolutions=list(self.resolutions),
        )

    def _add_section(self, title: str, level: int) -> None:
        if level == 1:
            self.level1 += 1
            self.level2 = 0
            numbering = str(self.level1)
            heading = "###"
        else:
            self.level2 += 1
            numbering = f"{self.level1}.{self.level2}"
            heading = "####"

        self.anchor_counter += 1
        anchor = f"section{self.anchor_counter}"
        self.toc.append(TocEntry(numbering, title, anchor, level))
        self._body.append(f"\n\n{heading} [{numbering}. {title}](id:{anchor})")

    def _add_resolution(self, text: str) -> None:
        index = len(self.resolutions) + 1
        resolution = Resolution(index, text, f"resolution{index}")
        self.resolutions.append(resolution)
        self._body.append(f"\n\n> [***Resolution #{index}: {text}***](id:{resolution.anchor})")

    def _assemble(self) -> str:
        toc = ["## Content:\n"]
        for entry in self.toc:
            indent = "    " if entry.level == 2 else ""
            toc.append(f"{indent}* [{entry.numbering}. {entry.title}](#{entry.anchor})\n")

        tail = []
        if self.resolutions:
            number = self.level1 + 1
            toc.append(f"* [{number}. Resolutions](#res)\n")
            tail.append(f"\n---\n### [{number}. Resolutions](id:res)")
            for resolution in self.resolutions:
                tail.append(f"\n* [Resolution #{resolution.index}: {resolution.text}](#{resolution.anchor})")

        return "".join(toc) + "".join(self._body) + "".join(tail)

"""The IRC log to markdown minutes pipeline."""

from dataclasses import dataclass, field

from .changes import ChangeApplier
from .headers import HeaderExtractor, MeetingHeaders
from .renderer import (
    DEFAULT_LOGO_ALT,
    DEFAULT_LOGO_URL,
    ContentRenderer,
    Resolution,
    TocEntry,
    render_header,
)
from .transcript import TranscriptProcessor


@dataclass
class Minutes:
    markdown: str
    headers: MeetingHeaders
    toc: list[TocEntry] = field(default_factory=list)
    resolutions: list[Resolution] = field(default_factory=list)


def build_minutes(
    source_reference: str,
    transcript: str,
    logo_url: str = DEFAULT_LOGO_URL,
    logo_alt: str = DEFAULT_LOGO_ALT,
) -> Minutes:
    """
    Convert an IRC log into minutes.

    Args:
        source_reference: Where the log lives (e.g. its URL), linked from the header
        transcript: Raw IRC log text
        logo_url: Logo image URL for the header
        logo_alt: Logo alt text

    Returns:
        The markdown minutes with the metadata, TOC and resolutions found
    """
    # 1. drop bot chatter and split nick from content
    lines = TranscriptProcessor().normalize(transcript)
    # 2. present/chair/date/... go to the header
    headers, lines = HeaderExtractor().extract(lines)
    # 3. execute s/old/new/ corrections
    lines = ChangeApplier().apply(lines)
    # 4. header block, then TOC, body and resolutions
    content = ContentRenderer().render(lines)
    header = render_header(headers, source_reference, logo_url=logo_url, logo_alt=logo_alt)

    return Minutes(
        markdown=header + content.markdown,
        headers=headers,
        toc=content.toc,
        resolutions=content.resolutions,
    )


def to_markdown(source_reference: str, transcript: str) -> str:
    """Convert an IRC log into markdown minutes."""
    return build_minutes(source_reference, transcript).markdown

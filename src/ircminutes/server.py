"""IRC Minutes MCP Server - meeting minutes from IRC logs using FastMCP."""

from typing import Any

from markitdown import MarkItDown
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel

from .config import get_settings
from .converter import MinutesConverter
from .transcript import TranscriptProcessor
from .utils import get_file_info, validate_source, validate_transcript_file


class MinutesContent(BaseModel):
    type: str = "minutes"
    source: str
    filename: str
    text: str
    status: str


class ConversionMeta(BaseModel):
    total_files: int
    successful: int
    failed: int


class ConversionResult(BaseModel):
    content: list[MinutesContent]
    meta: ConversionMeta


class TextConversionResult(BaseModel):
    text: str
    source_reference: str
    word_count: int
    headers: dict[str, str]
    topics: list[str]
    resolutions: list[str]


# Initialize FastMCP server
mcp = FastMCP("IRC Minutes")
markitdown = MarkItDown()
converter = MinutesConverter(markitdown, get_settings())
transcript_processor = TranscriptProcessor()


def _conversion_result(results: dict[str, Any]) -> ConversionResult:
    return ConversionResult(
        content=[MinutesContent(**doc) for doc in results["content"]], meta=ConversionMeta(**results["meta"])
    )


@mcp.tool()
def convert_transcript(source: str, source_reference: str | None = None) -> ConversionResult:
    """
    Convert an IRC log file or URL into markdown minutes.

    Args:
        source: Path or http(s) URL of the IRC log
        source_reference: Link to the log shown in the minutes (defaults to source)

    Returns:
        Single conversion result with content array and meta information
    """
    validate_source(source)
    return _conversion_result(converter.convert_file(source, source_reference))


@mcp.tool()
def convert_text(transcript: str, source_reference: str = "") -> TextConversionResult:
    """
    Convert raw IRC log text into markdown minutes.

    Args:
        transcript: Raw log, one "<timestamp> <nick> content" line per message
        source_reference: Link to the log shown in the minutes

    Returns:
        The minutes with the meeting metadata, topics and resolutions found
    """
    result = converter.convert_text(transcript, source_reference)
    return TextConversionResult(
        text=result["content"],
        source_reference=result["source_reference"],
        word_count=result["word_count"],
        headers=result["headers"],
        topics=result["topics"],
        resolutions=result["resolutions"],
    )


@mcp.tool()
def batch_convert(directory: str, pattern: str | None = None, recursive: bool = False) -> ConversionResult:
    """
    Convert all IRC logs in a directory.

    Args:
        directory: Directory containing logs
        pattern: File pattern to match (e.g., "*.txt")
        recursive: Search subdirectories

    Returns:
        Summary of batch conversion results with content included
    """
    validate_source(directory)
    return _conversion_result(converter.batch_convert(directory=directory, pattern=pattern, recursive=recursive))


@mcp.tool()
def get_transcript_info(file_path: str) -> dict[str, Any]:
    """
    Get information about an IRC log without converting it.

    Args:
        file_path: Path to the log

    Returns:
        File information plus speakers and line counts
    """
    validate_transcript_file(file_path)
    info = get_file_info(file_path)
    info.update(transcript_processor.extract_metadata(converter.load_transcript(file_path)))
    return info


if __name__ == "__main__":
    mcp.run()

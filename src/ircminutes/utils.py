"""Minimal utilities for locating transcripts."""

from pathlib import Path
from typing import Any


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def validate_source(source: str) -> None:
    """
    Validate a transcript source: an http(s) URL or an existing local path.

    Args:
        source: URL, file or directory path to validate

    Raises:
        FileNotFoundError: If a local path doesn't exist
        ValueError: If the source is empty or unsafe
    """
    if not source or not isinstance(source, str):
        raise ValueError("Invalid transcript source")

    if is_url(source):
        return

    path = Path(source)

    # Basic security: prevent directory traversal
    if ".." in path.parts:
        raise ValueError("Directory traversal not allowed")

    if not path.exists():
        raise FileNotFoundError(f"File not found: {source}")

    if not (path.is_file() or path.is_dir()):
        raise ValueError("Path must point to a file or directory")


def validate_transcript_file(file_path: str) -> None:
    """
    Validate that a source is a single local transcript file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the source is a URL, a directory or unsafe
    """
    if isinstance(file_path, str) and is_url(file_path):
        raise ValueError("Expected a local file, got a URL")

    validate_source(file_path)

    if not Path(file_path).is_file():
        raise ValueError("Path must point to a file")


def get_file_info(file_path: str) -> dict[str, Any]:
    """
    Get basic information about a transcript file.

    Args:
        file_path: Path to the transcript

    Returns:
        File metadata
    """
    path = Path(file_path)
    stat = path.stat()

    return {
        "filename": path.name,
        "extension": path.suffix.lower(),
        "size_bytes": stat.st_size,
        "modified": stat.st_mtime,
        "absolute_path": str(path.absolute()),
        "is_file": path.is_file(),
    }

"""Transcript converter: loads IRC logs with markitdown and renders minutes."""

import glob
import logging
import os
from pathlib import Path
from typing import Any

from markitdown import MarkItDown

from .config import MinutesSettings, get_settings
from .minutes import Minutes, build_minutes

logger = logging.getLogger(__name__)


class MinutesConverter:
    """Turns IRC logs, local or remote, into markdown minutes."""

    def __init__(self, markitdown: MarkItDown, settings: MinutesSettings | None = None):
        self.markitdown = markitdown
        self.settings = settings or get_settings()
        self.supported_extensions = {".txt"}

    def load_transcript(self, source: str) -> str:
        """Read the raw log from a file path or an http(s) URL."""
        result = self.markitdown.convert(source)
        return result.text_content

    def convert(self, source: str, source_reference: str | None = None) -> dict[str, Any]:
        """
        Convert a transcript file or URL into minutes.

        Args:
            source: Path or URL of the IRC log
            source_reference: Link to the log shown in the minutes (defaults to source)

        Returns:
            Conversion results
        """
        transcript = self.load_transcript(source)
        return self.convert_text(transcript, source_reference or source)

    def convert_text(self, transcript: str, source_reference: str = "") -> dict[str, Any]:
        """
        Convert raw log text into minutes.

        Args:
            transcript: Raw IRC log
            source_reference: Link to the log shown in the minutes

        Returns:
            Conversion results
        """
        minutes = build_minutes(
            source_reference,
            transcript,
            logo_url=self.settings.logo_url,
            logo_alt=self.settings.logo_alt,
        )
        return self._result(minutes, source_reference)

    def convert_file(self, file_path: str, source_reference: str | None = None) -> dict[str, Any]:
        """
        Convert a single transcript with the same output format as batch_convert.

        Args:
            file_path: Path to the IRC log
            source_reference: Link to the log shown in the minutes (defaults to file_path)

        Returns:
            Single file conversion result in the same format as batch_convert
        """
        entry = self._convert_entry(file_path, source_reference)
        successful = 1 if entry["status"] == "success" else 0
        return {
            "content": [entry],
            "meta": {"total_files": 1, "successful": successful, "failed": 1 - successful},
        }

    def batch_convert(
        self,
        directory: str,
        pattern: str | None = None,
        recursive: bool = False,
    ) -> dict[str, Any]:
        """
        Convert all transcripts in a directory.

        Args:
            directory: Directory to search
            pattern: File pattern to match (defaults to the configured transcript pattern)
            recursive: Search subdirectories

        Returns:
            Batch conversion results with content included
        """
        pattern = pattern or self.settings.transcript_pattern
        search_pattern = os.path.join(directory, "**" if recursive else "", pattern)
        files = sorted(glob.glob(search_pattern, recursive=recursive))

        # Filter to supported formats
        files = [f for f in files if Path(f).suffix.lower() in self.supported_extensions]

        results = [self._convert_entry(file_path) for file_path in files]
        successful = sum(1 for entry in results if entry["status"] == "success")

        return {
            "content": results,
            "meta": {"total_files": len(files), "successful": successful, "failed": len(files) - successful},
        }

    def _convert_entry(self, file_path: str, source_reference: str | None = None) -> dict[str, Any]:
        try:
            result = self.convert(file_path, source_reference)
        except Exception:
            logger.exception("Failed to convert %s", file_path)
            return {
                "type": "minutes",
                "source": file_path,
                "filename": Path(file_path).name,
                "text": "",
                "status": "failed",
            }

        return {
            "type": "minutes",
            "source": file_path,
            "filename": Path(file_path).name,
            "text": result["content"],
            "status": "success",
        }

    def _result(self, minutes: Minutes, source_reference: str) -> dict[str, Any]:
        return {
            "content": minutes.markdown,
            "source_reference": source_reference,
            "format": "markdown",
            "word_count": len(minutes.markdown.split()),
            "headers": minutes.headers.serialize(),
            "topics": [entry.title for entry in minutes.toc if entry.level == 1],
            "resolutions": [resolution.text for resolution in minutes.resolutions],
        }

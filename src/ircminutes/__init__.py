"""Markdown meeting minutes from IRC logs."""

from .minutes import Minutes, build_minutes, to_markdown

__all__ = ["Minutes", "build_minutes", "to_markdown"]

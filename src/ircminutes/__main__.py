"""Main entry point for IRC Minutes: MCP server or one-shot conversion."""

import argparse
import logging
import sys

from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ircminutes", description="Markdown minutes from IRC logs.")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("serve", help="Run the MCP server over stdio (default)")

    convert = subparsers.add_parser("convert", help="Convert one IRC log")
    convert.add_argument("source", help="Path or http(s) URL of the IRC log")
    convert.add_argument("--reference", help="Link to the log shown in the minutes (defaults to source)")
    convert.add_argument("-o", "--output", help="Write the minutes here instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the IRC Minutes server and command line."""
    args = build_parser().parse_args(argv)

    # stdout carries the MCP protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "convert":
        from markitdown import MarkItDown

        from .converter import MinutesConverter
        from .utils import validate_source

        validate_source(args.source)
        result = MinutesConverter(MarkItDown()).convert(args.source, args.reference)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result["content"])
        else:
            sys.stdout.write(result["content"])
        return

    from .server import mcp

    mcp.run()


if __name__ == "__main__":
    main()

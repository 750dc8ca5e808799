"""Main CLI entry point for the escapist command-line tool.

Escapes or unescapes text from the command line, a file or standard input for
any supported context, writing the result through the streaming API.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from escapist import __version__
from escapist.api import escape_to, unescape_to
from escapist.shared.config import (
    CONFIG_CLASSES,
    EscapeContext,
    HtmlEscapeConfig,
    XmlVersion,
    config_from_dict,
)
from escapist.shared.errors import EscapeError
from escapist.shared.logging import configure_logging, get_logger

logger = get_logger(__name__, None, "cli")


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.escape_config: Any = HtmlEscapeConfig.html5()
        self.encoding = "utf-8"

    @property
    def context(self) -> EscapeContext:
        return self.escape_config.context

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load an escape profile from a JSON file.

        The file holds a configuration dict as produced by ``to_dict()``,
        optionally with an ``io_encoding`` key for reading and writing files.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON
            ConfigValidationError: If the profile holds invalid values
        """
        config = cls()
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
        config.encoding = data.pop("io_encoding", config.encoding)
        config.escape_config = config_from_dict(data)
        return config

    def apply_overrides(self, args: argparse.Namespace) -> None:
        """Apply command-line options on top of the loaded profile."""
        data: Dict[str, Any]
        if args.context and args.context != self.context.value:
            data = CONFIG_CLASSES[EscapeContext(args.context)]().to_dict()
        else:
            data = self.escape_config.to_dict()

        if args.type is not None:
            data["escape_type"] = args.type.upper()
        if args.level is not None:
            data["level"] = args.level
        if args.encoding is not None:
            data["encoding"] = args.encoding
        if args.role is not None:
            data["role"] = args.role.upper()
        if args.xml_version is not None:
            data["version"] = XmlVersion(args.xml_version).name

        self.escape_config = config_from_dict(data)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="escapist",
        description=(
            "Escape and unescape text for HTML, XML, URIs, .properties, JSON, JavaScript and CSV"
        ),
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command, help_text in (
        ("escape", "Escape text for a context"),
        ("unescape", "Unescape text from a context"),
    ):
        command_parser = subparsers.add_parser(command, help=help_text)
        command_parser.add_argument(
            "text",
            nargs="?",
            help="Text to process (default: --input file or stdin)",
        )
        command_parser.add_argument(
            "--context", "-x",
            choices=[context.value for context in EscapeContext],
            help="Escape context (default: html, or the --config profile's)",
        )
        command_parser.add_argument(
            "--type", "-t",
            help="Escape type member name, e.g. html4_named_references_default_to_hexa",
        )
        command_parser.add_argument(
            "--level", "-l",
            type=int,
            help="Escape level",
        )
        command_parser.add_argument(
            "--encoding", "-e",
            help="Text encoding for URI percent-encoding (default: UTF-8)",
        )
        command_parser.add_argument(
            "--role",
            choices=["key", "value"],
            help="Whether .properties text is a key or a value",
        )
        command_parser.add_argument(
            "--xml-version",
            choices=[version.value for version in XmlVersion],
            help="XML version the text is escaped for (default: 1.0)",
        )
        command_parser.add_argument(
            "--config", "-c",
            type=Path,
            help="JSON escape profile",
        )
        command_parser.add_argument(
            "--input", "-i",
            type=Path,
            help="Input file (default: stdin)",
        )
        command_parser.add_argument(
            "--output", "-o",
            type=Path,
            help="Output file (default: stdout)",
        )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output",
    )

    return parser


def read_input(args: argparse.Namespace, encoding: str) -> Optional[str]:
    """Return the text to process, or None if no input was provided."""
    if args.text is not None:
        return args.text
    if args.input is not None:
        return args.input.read_text(encoding=encoding)
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.read()


def _run(args: argparse.Namespace, writer: TextIO, text: str, config: CLIConfig) -> None:
    operation = escape_to if args.command == "escape" else unescape_to
    operation(text, 0, len(text), writer, config.escape_config)
    if args.text is not None and args.output is None:
        writer.write("\n")


def cmd_transform(args: argparse.Namespace) -> int:
    """Handle the escape and unescape commands."""
    try:
        config = CLIConfig.from_file(args.config) if args.config else CLIConfig()
        config.apply_overrides(args)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    try:
        text = read_input(args, config.encoding)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1
    if text is None:
        print("No input provided", file=sys.stderr)
        return 1

    logger.debug(
        f"Running {args.command} for context '{config.context.value}'",
        extra={"config": config.escape_config.to_dict(), "input_length": len(text)},
    )

    try:
        if args.output:
            with args.output.open("w", encoding=config.encoding) as f:
                _run(args, f, text, config)
            logger.info(f"Results written to {args.output}")
        else:
            _run(args, sys.stdout, text, config)
    except EscapeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        return cmd_transform(args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())

"""Main CLI entry point for the xml-tree-formatter command-line tool.

Provides the code view (canonical formatted text), the tree view (node tree as
JSON) and the raw result envelope for XML read from files or stdin.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Union

from xml_tree_formatter import XmlTreeFormatter
from xml_tree_formatter.examples import EXAMPLE_XML
from xml_tree_formatter.shared.config import Config, ConfigError
from xml_tree_formatter.shared.logging import configure_logging, get_logger
from xml_tree_formatter.shared.result import ParsingResult

EXIT_OK = 0
EXIT_PARSE_FAILURE = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT

STDIN_PATH = "-"

logger = get_logger(__name__, None, "cli")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-tree-formatter",
        description="Pretty-print XML and render it as a node tree",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    format_parser = subparsers.add_parser(
        "format", help="Print the canonical indented XML"
    )
    tree_parser = subparsers.add_parser(
        "tree", help="Print the node tree as JSON"
    )
    tree_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )
    result_parser = subparsers.add_parser(
        "result", help="Print the complete parsing result as JSON"
    )

    for sub in (format_parser, tree_parser, result_parser):
        sub.add_argument(
            "path",
            nargs="?",
            default=STDIN_PATH,
            help="XML file to read (default: stdin)"
        )
        sub.add_argument(
            "--example",
            action="store_true",
            help="Use the built-in example document instead of reading input"
        )
        sub.add_argument(
            "--config", "-c",
            type=Path,
            help="Configuration file path (JSON)"
        )
        sub.add_argument(
            "--recover",
            action="store_true",
            help="Use the recovering parser engine"
        )
        sub.add_argument(
            "--output", "-o",
            type=Path,
            help="Output file (default: stdout)"
        )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from ``--config`` and command-line overrides."""
    config = Config.from_file(args.config) if args.config else Config()
    if args.recover:
        config = config.override(engine__recover=True)
    return config


def read_input(args: argparse.Namespace) -> Union[str, bytes]:
    """Read the XML document selected by the command-line arguments.

    Files are read as bytes so the parser can honour their encoding
    declaration; stdin is read as text.
    """
    if args.example:
        return EXAMPLE_XML
    if args.path == STDIN_PATH:
        return sys.stdin.read()
    return Path(args.path).read_bytes()


def render_output(command: str, result: ParsingResult, args: argparse.Namespace) -> str:
    """Render a successful result for the selected command."""
    if command == "format":
        return result.formatted_xml
    if command == "tree":
        return json.dumps(result.root_node.to_dict(), indent=args.indent, ensure_ascii=False)
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def write_output(text: str, output: Optional[Path]) -> None:
    """Write ``text`` to ``output`` or stdout."""
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        print(f"Output written to {output}", file=sys.stderr)
    else:
        print(text)


def run_command(args: argparse.Namespace) -> int:
    """Handle the format, tree and result commands."""
    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    if not (args.verbose or args.quiet):
        configure_logging(config.global_.logging_level)

    try:
        xml_input = read_input(args)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    result = XmlTreeFormatter(config).parse(xml_input)

    if args.command == "result":
        # The envelope is printed for failures too.
        exit_code = EXIT_OK if result.success else EXIT_PARSE_FAILURE
    elif not result.success:
        print(result.error, file=sys.stderr)
        return EXIT_PARSE_FAILURE
    else:
        exit_code = EXIT_OK

    try:
        write_output(render_output(args.command, result, args), args.output)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE_ERROR

    # Set up logging verbosity; otherwise the configured level applies
    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")

    logger.debug("Running command", extra={"command": args.command})

    try:
        return run_command(args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())

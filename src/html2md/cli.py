"""Command-line interface for html2md."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion.converter import Converter
from .conversion.parsing import parse_html
from .errors import Html2MdError
from .logging_config import setup_logging
from .models.config import ConverterConfig

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="html2md",
        description="Convert an HTML document to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print Markdown for a local page
  html2md page.html

  # Write to a file instead of stdout
  html2md page.html -o page.md

  # Read from stdin with a different parser
  curl -s https://example.com | html2md - --parser lxml
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="HTML file to convert, or '-' for stdin",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write Markdown to this file (default: stdout)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Input file encoding (default: utf-8)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Conversion settings
    convert_group = parser.add_argument_group("conversion settings")
    convert_group.add_argument(
        "--parser",
        choices=["html.parser", "lxml", "html5lib"],
        default=None,
        help="HTML parser (default: html.parser)",
    )
    convert_group.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Refuse documents nested deeper than this",
    )
    convert_group.add_argument(
        "--skip-tags",
        nargs="+",
        metavar="TAG",
        help="Tags to drop together with their content",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--debug",
        action="store_true",
        help="Trace every rule dispatch",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def build_config(args: argparse.Namespace) -> ConverterConfig:
    """Merge the optional config file with command-line overrides."""
    config_kwargs: dict[str, Any] = {}
    if args.config:
        config_kwargs = ConverterConfig.from_yaml_file(args.config).model_dump(exclude_unset=True)

    if args.parser:
        config_kwargs["parser"] = args.parser
    if args.max_depth is not None:
        config_kwargs["max_depth"] = args.max_depth
    if args.skip_tags:
        config_kwargs["skip_tags"] = args.skip_tags
    if args.debug:
        config_kwargs["debug"] = True

    # Log level
    if args.debug or args.verbose:
        config_kwargs["log_level"] = "DEBUG"
    elif args.quiet:
        config_kwargs["log_level"] = "ERROR"

    return ConverterConfig(**config_kwargs)


def read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding=encoding)


def run_converter(args: argparse.Namespace) -> int:
    """Run a conversion with given arguments."""
    console = Console(stderr=True)

    if not args.input:
        console.print("[red]Error:[/red] Please provide an HTML file to convert")
        create_parser().print_usage(sys.stderr)
        return 1

    try:
        config = build_config(args)
    except (OSError, ValidationError, ValueError, Html2MdError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )

    try:
        markup = read_input(args.input, args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    try:
        soup = parse_html(markup, config.parser)
        document = Converter(config=config).convert_document(soup)
        markdown = document.render()
    except Html2MdError as e:
        console.print(f"[red]Conversion failed:[/red] {escape(str(e))}")
        if args.verbose:
            console.print_exception()
        return 1

    text = markdown + "\n" if markdown else ""
    if args.output:
        try:
            args.output.write_text(text, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            return 1
        if not args.quiet:
            console.print(f"[green]Wrote[/green] {len(document)} blocks to {args.output}")
    else:
        sys.stdout.write(text)

    logger.info(f"Converted {args.input} into {len(document)} top-level elements")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())

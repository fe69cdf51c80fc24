#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for md2fxml.

Converts a markdown file (or stdin) to FXML markup written to a file or
stdout. Options not given on the command line come from a configuration
file: ``--config``, then the ``MD2FXML_CONFIG`` environment variable, then
the first ``.md2fxml.toml``/``.yaml``/``.yml``/``.json`` or
``pyproject.toml`` with a ``[tool.md2fxml]`` section found upward from the
working directory.

Examples
--------
Basic conversion::

    $ md2fxml README.md

Specify output file::

    $ md2fxml README.md -o readme.fxml

Read from stdin, omit the prologue and verify the result loads::

    $ cat notes.md | md2fxml - --no-header --check

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from md2fxml import __version__
from md2fxml.constants import CONFIG_ENV_VAR
from md2fxml.exceptions import (
    DependencyError,
    MarkupLoadError,
    Md2FxmlError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2fxml.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, (RenderingError, MarkupLoadError)):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the md2fxml command."""
    parser = argparse.ArgumentParser(
        prog="md2fxml",
        description="Convert markdown to JavaFX FXML markup.",
    )
    parser.add_argument("input", help="Markdown file to convert, or '-' for stdin")
    parser.add_argument("-o", "--out", dest="out", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    renderer_group = parser.add_argument_group("renderer options")
    renderer_group.add_argument(
        "--no-header", dest="include_header", action="store_const", const=False, help="Omit the XML prologue"
    )
    renderer_group.add_argument("--bullet-prefix", help="Prefix of bullet list items")
    renderer_group.add_argument("--image-prefix", help="Prefix of rendered image alt text")
    renderer_group.add_argument("--width-precision", type=int, help="Decimal places of column width fractions")

    parser_group = parser.add_argument_group("parser options")
    parser_group.add_argument(
        "--no-tables", dest="parse_tables", action="store_const", const=False, help="Do not parse tables"
    )
    parser_group.add_argument(
        "--no-strikethrough",
        dest="parse_strikethrough",
        action="store_const",
        const=False,
        help="Do not parse ~~strikethrough~~",
    )
    parser_group.add_argument(
        "--no-autolink", dest="autolink_urls", action="store_const", const=False, help="Do not link bare URLs"
    )

    parser.add_argument("--check", action="store_true", help="Load the generated markup to verify it")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace or (parsed_args.verbose and parsed_args.log_level == "WARNING"):
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _collect_overrides(parsed_args: argparse.Namespace, names: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(parsed_args, name) for name in names if getattr(parsed_args, name) is not None}


def _read_input(input_arg: str) -> bytes:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    path = Path(input_arg)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_arg}")
    return path.read_bytes()


def _convert(parsed_args: argparse.Namespace) -> int:
    from md2fxml.api import ast_to_fxml, load_fxml, to_ast
    from md2fxml.cli.config import load_config_with_priority, options_from_config
    from md2fxml.controller import DocumentController

    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    parser_options, renderer_options = options_from_config(config)
    try:
        parser_options = parser_options.create_updated(
            **_collect_overrides(parsed_args, ("parse_tables", "parse_strikethrough", "autolink_urls"))
        )
        renderer_options = renderer_options.create_updated(
            **_collect_overrides(
                parsed_args, ("include_header", "bullet_prefix", "image_prefix", "width_precision")
            )
        )
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e

    document = to_ast(_read_input(parsed_args.input), parser_options=parser_options)
    markup = ast_to_fxml(document, renderer_options=renderer_options)
    assert markup is not None

    if parsed_args.check:
        load_fxml(markup, DocumentController(hyperlink_handler=renderer_options.hyperlink_handler))
        logger.info("Generated markup loaded successfully")

    if parsed_args.out:
        Path(parsed_args.out).write_text(markup, encoding="utf-8")
        logger.info(f"Wrote {parsed_args.out}")
    else:
        sys.stdout.write(markup)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the md2fxml command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        return _convert(parsed_args)
    except (Md2FxmlError, argparse.ArgumentTypeError, OSError) as e:
        exit_code = get_exit_code_for_exception(e)
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code


if __name__ == "__main__":
    sys.exit(main())

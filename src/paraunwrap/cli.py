#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/cli.py
"""Command-line interface for the paraunwrap JSON filter.

The filter reads one JSON document tree, unwraps matching paragraphs and
writes the tree back out. With no arguments it reads stdin and writes
stdout, so it can be used directly as a Pandoc JSON filter.

Examples
--------
Use as a filter in a pipeline::

    $ pandoc -t json input.md | paraunwrap | pandoc -f json -t html

Read and write files::

    $ paraunwrap doc.json -o unwrapped.json

Only unwrap images, and log what happens::

    $ paraunwrap --no-angle --log-level DEBUG < doc.json > out.json

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Optional, TextIO

from paraunwrap import __version__
from paraunwrap.constants import (
    DEFAULT_RAW_FORMAT,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from paraunwrap.dependencies import check_rich_available, require_package
from paraunwrap.exceptions import (
    DependencyError,
    FileError,
    ParaUnwrapError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from paraunwrap.options import PandocJsonParserOptions, PandocJsonRendererOptions, UnwrapOptions
from paraunwrap.parsers.pandoc_json import PandocJsonParser
from paraunwrap.renderers.pandoc_json import PandocJsonRenderer
from paraunwrap.transforms.unwrap import UnwrapTransform

logger = logging.getLogger(__name__)

STDIO_MARKER = "-"

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the filter."""
    parser = argparse.ArgumentParser(
        prog="paraunwrap",
        description="Unwrap raw-markup and single-image paragraphs in a Pandoc JSON document.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIO_MARKER,
        help="Input JSON file (default: read from stdin)",
    )
    parser.add_argument(
        "-o",
        "--out",
        dest="output",
        default=STDIO_MARKER,
        help="Output JSON file (default: write to stdout)",
    )
    parser.add_argument(
        "--no-angle",
        dest="unwrap_angle_paragraphs",
        action="store_false",
        help="Do not unwrap paragraphs starting with '<'",
    )
    parser.add_argument(
        "--no-images",
        dest="unwrap_image_paragraphs",
        action="store_false",
        help="Do not unwrap single-image paragraphs",
    )
    parser.add_argument(
        "--require-space",
        dest="require_space_after_angle",
        action="store_true",
        help="Only unwrap '< ' paragraphs (angle followed by a space)",
    )
    parser.add_argument(
        "--raw-format",
        default=DEFAULT_RAW_FORMAT,
        help=f"Format tag for generated raw blocks (default: {DEFAULT_RAW_FORMAT})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent output JSON by this many spaces (default: compact)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--rich", action="store_true", help="Use rich formatting for error messages")
    parser.add_argument(
        "--force-rich", action="store_true", help="Use rich formatting even when stderr is not a terminal"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


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

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def setup_logging(args: argparse.Namespace) -> None:
    """Send diagnostics to stderr, and to ``--log-file`` when one is given.

    stdout carries the document, so no handler ever writes there. Any
    handlers already on the root logger are replaced.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments providing ``log_level``, ``log_file`` and ``trace``

    Raises
    ------
    FileError
        If the log file cannot be opened for appending

    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if args.log_file:
        try:
            handlers.append(logging.FileHandler(args.log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            raise FileError(
                f"Cannot open log file {args.log_file}: {e}", file_path=args.log_file, original_error=e
            ) from e

    formatter = logging.Formatter(TRACE_LOG_FORMAT if args.trace else LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(args.log_level)


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used for diagnostics.

    Rich output is used when ``--rich`` is set, the ``rich`` package is
    installed, and either ``--force-rich`` is set or the stream is a TTY.
    """
    if not args.rich:
        return False

    if not check_rich_available():
        logger.debug("--rich requested but rich is not installed; using plain output")
        return False

    if args.force_rich:
        return True

    target = stream or sys.stderr
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def report_error(message: str, use_rich: bool, stream: Optional[TextIO] = None) -> None:
    """Print an error message to stderr.

    Raises
    ------
    DependencyError
        If ``use_rich`` is set but rich is not installed

    """
    target = stream or sys.stderr
    if use_rich:
        require_package("rich", feature_name="Rich error output")
        from rich.console import Console
        from rich.markup import escape

        Console(file=target, force_terminal=True).print(f"[bold red]Error:[/bold red] {escape(message)}")
    else:
        print(f"Error: {message}", file=target)


def _build_options(args: argparse.Namespace) -> tuple[UnwrapOptions, PandocJsonRendererOptions]:
    unwrap_options = UnwrapOptions(
        unwrap_angle_paragraphs=args.unwrap_angle_paragraphs,
        unwrap_image_paragraphs=args.unwrap_image_paragraphs,
        require_space_after_angle=args.require_space_after_angle,
        raw_format=args.raw_format,
    )
    renderer_options = PandocJsonRendererOptions(indent=args.indent)
    return unwrap_options, renderer_options


def run_filter(
    args: argparse.Namespace,
    stdin: Optional[IO[bytes]] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Run decode, unwrap and encode for parsed arguments.

    Raises
    ------
    ParaUnwrapError
        On any failure; nothing is written to the output in that case

    """
    unwrap_options, renderer_options = _build_options(args)

    parser = PandocJsonParser(PandocJsonParserOptions())
    if args.input == STDIO_MARKER:
        document = parser.parse(stdin if stdin is not None else sys.stdin.buffer)
    else:
        document = parser.parse(Path(args.input))

    transform = UnwrapTransform(unwrap_options)
    transform.transform_document(document)
    logger.info(
        "Unwrapped %d angle paragraph(s) and %d image paragraph(s)",
        transform.angle_rewrites,
        transform.image_rewrites,
    )

    renderer = PandocJsonRenderer(renderer_options)
    if args.output == STDIO_MARKER:
        target = stdout if stdout is not None else sys.stdout
        renderer.render(document, target)
        target.flush()
    else:
        renderer.render(document, Path(args.output))


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    use_rich = should_use_rich_output(parsed_args)

    try:
        setup_logging(parsed_args)
        run_filter(parsed_args)
    except ParaUnwrapError as e:
        report_error(e.message, use_rich)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        report_error(f"Unexpected error: {e}", use_rich)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

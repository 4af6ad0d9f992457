"""
Command-Line Interface (CLI) setup for the Video Processor.

Option values are validated right after parsing: an invalid extension or a
directory that does not exist stops the program with a usage error before any
file is looked at.
"""
import argparse
from pathlib import Path
from typing import Optional, Sequence

from .config.common import LOG_LEVELS
from .config.video import DEFAULT_SOURCE_EXTENSIONS, DEFAULT_TARGET_EXTENSION
from .domain.exceptions import ConfigurationException
from .domain.extensions import normalize, parse_list
from .domain.models import SourceSpec, validate_directory


def build_parser() -> argparse.ArgumentParser:
    source_default = ",".join(DEFAULT_SOURCE_EXTENSIONS)
    parser = argparse.ArgumentParser(
        description="Transcode every video of a directory with HandBrakeCLI, keeping modification times."
    )
    parser.add_argument(
        "--dir", type=str, required=True, help="Directory to search for videos."
    )
    parser.add_argument(
        "--source-extensions",
        type=str,
        default=source_default,
        help=f"Comma-separated extensions used by video files to process. Defaults to: {source_default}",
    )
    parser.add_argument(
        "--target-extension",
        type=str,
        default=DEFAULT_TARGET_EXTENSION,
        help=f"Extension for processed videos. Defaults to: {DEFAULT_TARGET_EXTENSION}",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=LOG_LEVELS,
        help="Set the logging level. Progress lines are INFO; failures and the no-files notice are WARNING.",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Shortcut for --log-level DEBUG."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill an encode that runs longer than this many seconds. Waits forever by default.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Write failures to error.txt and successes to success_log.yaml in this directory.",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 if any file failed. By default the exit status is 0 once processing started.",
    )
    parser.add_argument(
        "--skip-check", action="store_true", help="Do not run 'HandBrakeCLI --version' at startup."
    )
    return parser


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses and validates command-line arguments.

    Returns:
        argparse.Namespace with `dir` as an absolute Path, `source_extensions`
        as a tuple of normalized extensions and `target_extension` as a
        normalized extension.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.dir = validate_directory(args.dir)
        args.source_extensions = parse_list(args.source_extensions)
        args.target_extension = normalize(args.target_extension)
    except ConfigurationException as e:
        parser.error(str(e))

    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds.")

    return args


def build_source_spec(args: argparse.Namespace) -> SourceSpec:
    return SourceSpec(
        root_dir=args.dir,
        source_extensions=args.source_extensions,
        target_extension=args.target_extension,
    )

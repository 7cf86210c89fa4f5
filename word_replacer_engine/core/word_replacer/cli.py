"""
Command-line entry point.

Usage:
    word-replacer <input text file> <word replacements file> <bst|rbt|hash> [--strict] [--log-level LEVEL]

Prints the substituted text to stdout and exits 0. Any error prints a single
diagnostic line to stderr and exits 1 without printing any text.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .backends import parse_backend
from .config import WordReplacerConfig, configure_logging, load_config
from .exceptions import USAGE_MESSAGE, UsageError, WordReplacerError
from .file_loader import ensure_readable
from .models import ReplacementResult
from .pipeline import WordReplacementPipeline

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str):
        logger.debug("Argument error: %s", message)
        raise UsageError(USAGE_MESSAGE)


def build_parser() -> argparse.ArgumentParser:
    """
    Parser for the options only.

    The three positional arguments are file paths and a selector, any of which
    may start with "-", so they are taken from the leftovers of
    parse_known_args rather than declared here. See parse_arguments.
    """
    parser = _ArgumentParser(
        prog="word-replacer",
        description="Replace words in a text file using transitively resolved replacement rules.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject rule lines without a ' ->' separator",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from WORD_REPLACER_LOG_LEVEL)")
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Split argv into the options and exactly three positional arguments.

    Raises:
        UsageError: if anything other than three positional arguments remains
    """
    args, positionals = build_parser().parse_known_args(argv)
    if len(positionals) != 3:
        logger.debug("Expected 3 positional arguments, got %d: %s", len(positionals), positionals)
        raise UsageError(USAGE_MESSAGE)
    args.input_file, args.rules_file, args.data_structure = positionals
    return args


def run(args: argparse.Namespace, config: WordReplacerConfig) -> ReplacementResult:
    """
    Validate the arguments and run the pipeline.

    Checks happen in a fixed order: input file, rules file, backend selector.
    The input text is read only after the rules resolve, so a cyclic rule set
    is reported even when the input file later fails to read.
    """
    ensure_readable(args.input_file, config.encoding)
    ensure_readable(args.rules_file, config.encoding)
    backend = parse_backend(args.data_structure)

    strict = config.strict_rules if args.strict is None else args.strict
    pipeline = WordReplacementPipeline(backend=backend, strict_rules=strict)

    pipeline.load_rules_from_file(args.rules_file, config.encoding)
    pipeline.step_1_parse_rules()
    pipeline.step_2_resolve_rules()

    pipeline.load_input_text_from_file(args.input_file, config.encoding)
    result = pipeline.step_3_substitute()
    logger.info("Run summary: %s", pipeline.get_summary())
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Run the word replacer and return the process exit status."""
    config = load_config()

    try:
        args = parse_arguments(argv)
        configure_logging(args.log_level or config.log_level)
        result = run(args, config)
    except WordReplacerError as e:
        logger.debug("Run aborted (%s): %s", type(e).__name__, e.message)
        print(e.message, file=sys.stderr)
        return e.exit_code

    sys.stdout.write(result.output_text)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

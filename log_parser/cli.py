"""simple-log-parser — parse NDJSON log lines from stdin and count results."""

import logging
import sys
from argparse import ArgumentParser
from dataclasses import replace
from typing import BinaryIO, TextIO

from log_parser.config import load_config
from log_parser.models import RunSummary
from log_parser.parser import LogParseError, parse_json_log
from log_parser.reader import read_lines

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="simple-log-parser",
        description="Parse newline-delimited JSON log lines from standard input.",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (default: $LOG_PARSER_CONFIG)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the startup banner",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Level for diagnostic logging on stderr (default: WARNING)",
    )
    return parser


def print_banner(out: TextIO) -> None:
    print("Simple Log Parser Example", file=out)
    print("Enter JSON logs (one per line, Ctrl+D to end):\n", file=out)


def print_summary(summary: RunSummary, out: TextIO) -> None:
    print("\n--- Summary ---", file=out)
    print(f"Successful: {summary.successful}", file=out)
    print(f"Failed: {summary.failed}", file=out)


def run(stream: BinaryIO | TextIO, out: TextIO, err: TextIO) -> RunSummary:
    """Parse every line of *stream*, reporting each result as it goes.

    Parse failures are counted and processing continues. A failure to read
    the next line ends the loop; the lines after it are never seen.
    """
    summary = RunSummary()
    lines = read_lines(stream)

    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, ValueError) as e:
            logger.info("Input read failed after %d lines: %s", summary.total, e)
            print(f"✗ Read error: {e}", file=err)
            break

        try:
            event = parse_json_log(line)
        except LogParseError as e:
            print(f"✗ Parse error: {e}", file=err)
            summary.failed += 1
            continue

        print(f"✓ Parsed: {event.level} - {event.message}", file=out)
        summary.successful += 1

    print_summary(summary, out)
    return summary


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.no_banner:
        config = replace(config, show_banner=False)
    if args.log_level:
        config = replace(config, log_level=args.log_level)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Config: %s", config)

    if config.show_banner:
        print_banner(sys.stdout)

    summary = run(getattr(sys.stdin, "buffer", sys.stdin), sys.stdout, sys.stderr)
    logger.info("Finished: %d parsed, %d failed", summary.successful, summary.failed)
    return 0


def entry_point() -> None:
    """Console-script wrapper around main()."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)

#!/usr/bin/env python3
"""CLI wrapper that loads a text file, bins its letters and prints the chart.

Uses:
- text_loader.load_text
- frequency_counter.count_letters
- histogram_renderer.render_histogram
- config_manager for defaults and optional JSON config files

Exit codes: 0 on success or --help, 1 on a missing input file, a missing or
invalid flag argument, or an unusable config file.
"""

import argparse
import sys
import traceback
from typing import List, Optional, Sequence, TextIO

from histogrammer.core.config_manager import HistogramConfig, load_config
from histogrammer.core.frequency_counter import count_letters
from histogrammer.core.histogram_renderer import render_histogram, tick_digits
from histogrammer.core.text_loader import load_text


NO_ARGS_MESSAGE = (
    "Please provide a path to a text file as an argument, --help for more details"
)

# Flags are parsed as unsigned 64-bit values
MAX_FLAG_VALUE = 2**64 - 1

SIZE_FLAGS = (("-r", "rows"), ("-s", "tick_stride"))


# === Output helpers ===


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


def _print_info(message: str) -> None:
    print(message)


def _print_debug(message: str, debug_enabled: bool) -> None:
    if debug_enabled:
        print(f"DEBUG: {message}", file=sys.stderr)


def _append_debug_hint(message: str, debug_enabled: bool) -> str:
    if debug_enabled:
        return message
    return f"{message} (Re-run with --debug for details)"


def _maybe_print_debug(exc: BaseException, debug_enabled: bool) -> None:
    """Print the traceback of ``exc`` to stderr when debug output is on."""
    if not debug_enabled:
        return
    details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    print(f"DEBUG: {details}", file=sys.stderr, end="")


def write_lines(lines: List[str], stream: Optional[TextIO] = None) -> None:
    """Write rendered chart lines, one per line."""
    out = stream if stream is not None else sys.stdout
    for line in lines:
        out.write(f"{line}\n")


# === Argument parsing ===


class HistogramArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class KeepFirstAction(argparse.Action):
    """Store only the first occurrence of a repeated option."""

    def __call__(self, parser, namespace, values, option_string=None):
        if not hasattr(namespace, self.dest):
            setattr(namespace, self.dest, values)


def build_parser() -> HistogramArgumentParser:
    parser = HistogramArgumentParser(
        prog="histogrammer",
        usage="%(prog)s input_file_path [OPTIONS]",
        description="Prints histogram of characters in text file at input_file_path",
        epilog="Arguments must be positive integers",
        allow_abbrev=False,
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        metavar="input_file_path",
        help="Path to the text file to analyse",
    )

    # nargs="?" with const=None lets a flag given without a value be told
    # apart from a flag that was not given at all (attribute suppressed).
    # A repeated flag keeps its first value.
    parser.add_argument(
        "-r",
        dest="rows",
        nargs="?",
        const=None,
        default=argparse.SUPPRESS,
        action=KeepFirstAction,
        metavar="row_count",
        help="override row_count, program draws row_count rows of text-based histogram, default = 10",
    )
    parser.add_argument(
        "-s",
        dest="tick_stride",
        nargs="?",
        const=None,
        default=argparse.SUPPRESS,
        action=KeepFirstAction,
        metavar="tick_stride",
        help="override tick_stride, program draws a tick every tick_stride rows, default = 3",
    )

    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="FILE",
        help="JSON configuration file (render, glyphs, output sections)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print diagnostic information to stderr",
    )

    return parser


def parse_flag_value(flag: str, raw: Optional[str]) -> int:
    """Parse the value of a size flag as a positive integer.

    Only plain ASCII digits are accepted, so signs, whitespace, decimal points
    and trailing garbage are all rejected.

    Raises:
        ValueError: If the value is missing, malformed, zero or out of range
    """
    if raw is None:
        raise ValueError(f"Missing argument for flag {flag}")
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"Invalid argument for flag {flag}")
    value = int(raw)
    if value < 1 or value > MAX_FLAG_VALUE:
        raise ValueError(f"Invalid argument for flag {flag}")
    return value


# === Configuration ===


def resolve_base_config(config_file: Optional[str]) -> HistogramConfig:
    """Load and validate ``config_file``, or return defaults when not given.

    Raises:
        ValueError: If the file is missing, unreadable or fails validation
    """
    if not config_file:
        return HistogramConfig()

    config = load_config(config_file=config_file)
    is_valid, errors = config.validate()
    if not is_valid:
        raise ValueError(
            "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    return config


def apply_flag_overrides(config: HistogramConfig, args: argparse.Namespace) -> None:
    """Override render settings with -r / -s values that were given."""
    for flag, dest in SIZE_FLAGS:
        if hasattr(args, dest):
            setattr(config.render, dest, parse_flag_value(flag, getattr(args, dest)))


# === Main Entry Point ===


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the histogrammer CLI and return the process exit code.

    Usage errors and --help are reported by argparse; their exit status is
    returned rather than raised.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        _print_info(NO_ARGS_MESSAGE)
        return 0

    parser = build_parser()
    try:
        # Unrecognised arguments are ignored
        args, extras = parser.parse_known_args(argv)
        if args.input_file is None:
            parser.error("input_file_path is required")
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    debug = args.debug
    _print_debug(f"ignored arguments: {extras}", debug and bool(extras))

    # The input file is checked before any flag
    try:
        text = load_text(args.input_file)
    except FileNotFoundError as exc:
        _print_error(str(exc))
        _maybe_print_debug(exc, debug)
        return 1

    try:
        config = resolve_base_config(args.config_file)
    except (OSError, ValueError) as exc:
        _print_error(_append_debug_hint(str(exc), debug))
        _maybe_print_debug(exc, debug)
        return 1

    try:
        apply_flag_overrides(config, args)
    except ValueError as exc:
        _print_error(str(exc))
        return 1

    debug = debug or config.output.debug
    _print_debug(f"effective config: {config.to_dict()}", debug)

    histogram = count_letters(text)
    _print_debug(
        f"letters={histogram.total} peak={histogram.peak} "
        f"digits={tick_digits(histogram.peak)}",
        debug,
    )

    write_lines(render_histogram(histogram, config.render, config.glyphs))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

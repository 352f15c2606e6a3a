import argparse
from typing import Optional

from .durations import MAX_INPUT_LENGTH


def max_length_arg(value: str) -> Optional[int]:
    """argparse type for ``--max-length``; ``0`` disables the limit."""
    try:
        limit = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}") from exc
    if limit < 0:
        raise argparse.ArgumentTypeError("length must be >= 0")
    return limit or None


def add_limit_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-length",
        type=max_length_arg,
        default=MAX_INPUT_LENGTH,
        help=f"Longest accepted input in characters, 0 for no limit (default: {MAX_INPUT_LENGTH})",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msc", description="Convert human-readable durations to milliseconds and back"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Convert durations to milliseconds")
    parse.add_argument(
        "durations",
        nargs="+",
        help="Duration expressions (e.g. 1d, 2.5 hrs); put -- before values like -1d",
    )
    parse.add_argument(
        "--timedelta",
        action="store_true",
        help="Print a timedelta instead of milliseconds (negative values are rejected)",
    )
    add_limit_argument(parse)

    fmt = subparsers.add_parser("format", help="Render milliseconds as a duration")
    fmt.add_argument("milliseconds", type=int, help="Millisecond count")
    style = fmt.add_mutually_exclusive_group()
    style.add_argument("--suffix", help="Unit suffix to render with (e.g. 'h', ' hours')")
    style.add_argument(
        "--long", action="store_true", help="Use spelled-out unit names (e.g. 7 days)"
    )

    batch = subparsers.add_parser("batch", help="Convert a file of durations to CSV")
    batch.add_argument("input", help="File with one duration per line, '-' for stdin")
    batch.add_argument(
        "--output", help="CSV output path (default: <input>.csv, stdout for '-')"
    )
    add_limit_argument(batch)

    serve = subparsers.add_parser("serve", help="Run the HTTP conversion API")
    serve.add_argument("--host", default="127.0.0.1", help="Host interface for the API")
    serve.add_argument(
        "--port", type=int, default=8000, help="Port to bind the HTTP server"
    )
    serve.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Log level for the server and request logger",
    )
    add_limit_argument(serve)

    return parser


def parse_args(argv):
    parser = create_parser()
    return parser.parse_args(argv)

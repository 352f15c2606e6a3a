import asyncio
import csv
import logging
import os
import sys
from contextlib import ExitStack
from typing import Dict, Iterable, Iterator, List, Optional

import uvicorn

from .cli import parse_args
from .durations import (
    MAX_INPUT_LENGTH,
    format_duration,
    format_duration_auto,
    format_duration_auto_long,
    parse_duration,
    parse_timedelta,
)
from .errors import DurationError
from .logging_async import get_logger, log_worker, release_logger
from .webapp import create_app

CSV_FIELDS = ["input", "milliseconds", "human", "error"]


def parse_values(
    values: Iterable[str],
    as_timedelta: bool = False,
    max_length: Optional[int] = MAX_INPUT_LENGTH,
) -> List[str]:
    results = []
    for value in values:
        if as_timedelta:
            results.append(str(parse_timedelta(value, max_length=max_length)))
        else:
            results.append(str(parse_duration(value, max_length=max_length)))
    return results


def format_value(
    milliseconds: int, suffix: Optional[str] = None, long: bool = False
) -> str:
    if suffix is not None:
        return format_duration(milliseconds, suffix)
    if long:
        return format_duration_auto_long(milliseconds)
    return format_duration_auto(milliseconds)


def convert_lines(
    lines: Iterable[str], max_length: Optional[int] = MAX_INPUT_LENGTH
) -> Iterator[Dict[str, object]]:
    """Convert one duration per line; blank lines are skipped."""
    for line in lines:
        text = line.strip()
        if not text:
            continue
        try:
            milliseconds = parse_duration(text, max_length=max_length)
        except DurationError as exc:
            yield {"input": text, "milliseconds": "", "human": "", "error": exc.message}
            continue
        yield {
            "input": text,
            "milliseconds": milliseconds,
            "human": format_duration_auto(milliseconds),
            "error": "",
        }


def _same_file(first: str, second: str) -> bool:
    if os.path.exists(first) and os.path.exists(second):
        return os.path.samefile(first, second)
    return os.path.abspath(first) == os.path.abspath(second)


def resolve_output_path(input_path: str, output: Optional[str]) -> str:
    if output:
        target = os.path.expanduser(output)
        if input_path != "-" and _same_file(os.path.expanduser(input_path), target):
            raise ValueError(f"Output would overwrite the input: {output}")
        return target
    if input_path == "-":
        return "-"
    source = os.path.expanduser(input_path)
    base, _ = os.path.splitext(source)
    target = f"{base}.csv"
    if _same_file(source, target):
        target = f"{base}.out.csv"
    return target


def batch_convert(
    input_path: str,
    output: Optional[str] = None,
    max_length: Optional[int] = MAX_INPUT_LENGTH,
    logger: Optional[logging.Logger] = None,
) -> dict:
    if input_path != "-" and not os.path.isfile(os.path.expanduser(input_path)):
        raise FileNotFoundError(f"Input not found: {input_path}")
    target = resolve_output_path(input_path, output)

    total = rejected = 0
    with ExitStack() as stack:
        if input_path == "-":
            source = sys.stdin
        else:
            source = stack.enter_context(
                open(os.path.expanduser(input_path), encoding="utf-8")
            )
        if target == "-":
            sink = sys.stdout
        else:
            sink = stack.enter_context(open(target, "w", newline="", encoding="utf-8"))
        writer = csv.DictWriter(sink, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in convert_lines(source, max_length=max_length):
            total += 1
            if row["error"]:
                rejected += 1
                if logger is not None:
                    logger.warning(f"[reject] {row['input']!r}: {row['error']}")
            writer.writerow(row)
    return {
        "total": total,
        "converted": total - rejected,
        "rejected": rejected,
        "output": target,
    }


async def batch_async(params) -> dict:
    log_queue = asyncio.Queue()
    stop_event = asyncio.Event()
    log_task = asyncio.create_task(log_worker(log_queue, stop_event, stream=sys.stderr))
    logger = get_logger(log_queue)
    try:
        summary = batch_convert(
            params.input, params.output, params.max_length, logger=logger
        )
        logger.info(
            f"[batch] {summary['converted']} converted, {summary['rejected']} rejected"
        )
        return summary
    finally:
        stop_event.set()
        await log_queue.join()
        await log_task
        release_logger()


async def serve_async(params):
    host = getattr(params, "host", "127.0.0.1")
    port = getattr(params, "port", 8000)
    log_level = getattr(params, "log_level", "info")
    level = getattr(logging, log_level.upper())

    log_queue = asyncio.Queue()
    stop_event = asyncio.Event()
    log_task = asyncio.create_task(log_worker(log_queue, stop_event, level=level))
    logger = get_logger(log_queue, level=level)

    app = create_app(
        max_length=getattr(params, "max_length", MAX_INPUT_LENGTH), logger=logger
    )
    config = uvicorn.Config(app, host=host, port=port, loop="asyncio", log_level=log_level)
    server = uvicorn.Server(config)

    logger.info(f"[serve] ms-converter API on http://{host}:{port}")
    try:
        await server.serve()
    finally:
        stop_event.set()
        await log_queue.join()
        await log_task
        release_logger()


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv or sys.argv[1:])
    try:
        if params.command == "parse":
            for line in parse_values(params.durations, params.timedelta, params.max_length):
                print(line)
        elif params.command == "format":
            print(format_value(params.milliseconds, params.suffix, params.long))
        elif params.command == "batch":
            summary = asyncio.run(batch_async(params))
            if summary["output"] != "-":
                print(f"[batch] wrote {summary['output']}")
            if summary["rejected"]:
                sys.exit(1)
        elif params.command == "serve":
            try:
                asyncio.run(serve_async(params))
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except (ValueError, OSError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])

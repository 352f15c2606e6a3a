#!/usr/bin/env python3
"""Micro-benchmark for parse_duration.

Usage (from repo root, after ``pip install -e .``):

  python3 benchmarks/bench_parse.py
  BENCH_NUMBER=500000 python3 benchmarks/bench_parse.py
"""

from __future__ import annotations

import os
import timeit

from msconverter import parse_duration

INPUTS = ["1d", "1.1d", "100000000ms", "100000000.1231412ms"]


def bench_once(value: str, number: int) -> float:
    elapsed = timeit.timeit(lambda: parse_duration(value), number=number)
    return elapsed / number


def main() -> None:
    number = int(os.getenv("BENCH_NUMBER", "100000"))
    print(f"BENCH_NUMBER={number}")
    for value in INPUTS:
        per_call = bench_once(value, number)
        print(f"{value:>22}: {per_call * 1e9:8.1f} ns/call")


if __name__ == "__main__":
    main()

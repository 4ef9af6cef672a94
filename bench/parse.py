"""
Parse throughput for valid and rejected inputs.

Run this:  python bench/parse.py
"""

from __future__ import annotations

import time

from isin import parse, parse_strict

CASES = (
    ("valid", "US0378331005"),
    ("letters in basic code", "US09739D1000"),
    ("wrong check digit", "US0378331004"),
    ("bad character", "U50378331005"),
    ("wrong length", "US037833100"),
)


def run_benchmarks(iterations: int = 100_000) -> None:
    print("=" * 60)
    print(f"Parse throughput ({iterations} iterations each)")
    print("=" * 60)
    for name, candidate in CASES:
        for label, fn in (("parse", parse), ("parse_strict", parse_strict)):
            start = time.perf_counter()
            for _ in range(iterations):
                fn(candidate)
            total = time.perf_counter() - start
            print(f"  {name:24} {label:13} {iterations / total:12.0f} parses/second")
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()

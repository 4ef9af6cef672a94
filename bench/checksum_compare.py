"""
Compare the table-driven and functional checksum implementations.

Run this:  python bench/checksum_compare.py
"""

from __future__ import annotations

import statistics
import time
from collections.abc import Callable

from isin.core.checksum import checksum_functional, checksum_table

PAYLOADS = (
    "AA000000000",  # least digit expansion
    "US037833100",  # Apple, a typical payload
    "ZZZZZZZZZZZ",  # most digit expansion
)


def benchmark(func: Callable[[], object], iterations: int = 20_000) -> tuple[float, float, float]:
    """Return (mean_us, min_us, max_us) per call."""
    times: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        times.append((time.perf_counter() - start) * 1e6)
    return statistics.mean(times), min(times), max(times)


def run_benchmarks() -> None:
    print("=" * 60)
    print("Checksum: table vs functional")
    print("=" * 60)
    for payload in PAYLOADS:
        for name, impl in (("table", checksum_table), ("functional", checksum_functional)):
            mean, lo, hi = benchmark(lambda p=payload, f=impl: f(p))
            print(f"  {payload} {name:10} {mean:8.3f}us avg ({lo:.3f}-{hi:.3f})")
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()

#!/usr/bin/env python3
"""Benchmark script for moenster matching performance.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of moenster package."""
    start = time.perf_counter()
    import moenster  # noqa: F401

    return time.perf_counter() - start


def benchmark_compile() -> float:
    """Measure compilation of distinct patterns (bypasses cache)."""
    from moenster.application.compiler import compile_directives

    start = time.perf_counter()
    for i in range(10000):
        compile_directives(b"src/[a-z]*_" + str(i).encode() + b"?.py")
    return time.perf_counter() - start


def benchmark_match() -> float:
    """Measure matching of one compiled pattern against many subjects."""
    from moenster import compile_pattern

    pattern = compile_pattern(b"*[0-9]*.log")
    start = time.perf_counter()
    for i in range(10000):
        pattern.match(b"service-" + str(i).encode() + b".log")
    return time.perf_counter() - start


def benchmark_adversarial() -> float:
    """Measure many-star pattern against a long non-matching subject."""
    from moenster import matches

    start = time.perf_counter()
    matches(b"a*" * 40 + b"b", b"a" * 5000)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run moenster benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Compile (10k patterns)", "unit": "seconds", "value": benchmark_compile()},
        {"name": "Match (10k subjects)", "unit": "seconds", "value": benchmark_match()},
        {"name": "Adversarial Stars", "unit": "seconds", "value": benchmark_adversarial()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

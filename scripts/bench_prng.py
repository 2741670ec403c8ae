#!/usr/bin/env python3
"""Benchmark PCG32 operations.

Usage (from the repository root):
    python scripts/bench_prng.py              # default: 5 iterations, 100000 calls
    python scripts/bench_prng.py -n 10        # 10 iterations
    python scripts/bench_prng.py -c 20000     # 20000 calls per iteration
    python scripts/bench_prng.py --seed 7 --seq 3
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add the repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrand.prng import PCG32  # noqa: E402
from pcgrand.stats import (  # noqa: E402
    CHI2_CRITICAL_999,
    bounded_counts,
    chi_square,
)


def time_op(name, op, iterations, calls):
    """Run ``op`` ``calls`` times per iteration and print ns/call stats."""
    per_call_ns = []
    for _ in range(iterations):
        start = time.perf_counter()
        for _ in range(calls):
            op()
        elapsed = time.perf_counter() - start
        per_call_ns.append(elapsed * 1e9 / calls)

    median = statistics.median(per_call_ns)
    mean = statistics.mean(per_call_ns)
    line = f"  {name:<14} median {median:8.1f} ns  mean {mean:8.1f} ns"
    if len(per_call_ns) > 1:
        line += f"  stdev {statistics.stdev(per_call_ns):6.1f} ns"
    print(line)


def main():
    parser = argparse.ArgumentParser(description="Benchmark PCG32")
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=5,
        help="Number of iterations (default: 5)",
    )
    parser.add_argument(
        "-c",
        "--calls",
        type=int,
        default=100_000,
        help="Calls per iteration (default: 100000)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed (default: 42)")
    parser.add_argument(
        "--seq", type=int, default=54, help="Stream selector (default: 54)"
    )
    args = parser.parse_args()

    rng = PCG32(args.seed, args.seq)
    print(
        f"Benchmark: PCG32 seed={args.seed} seq={args.seq}, "
        f"{args.calls} calls x {args.iterations} iterations"
    )
    print()

    time_op("next_u32", rng.next_u32, args.iterations, args.calls)
    time_op(
        "bounded_int(6)",
        lambda: rng.bounded_int(6),
        args.iterations,
        args.calls,
    )
    time_op("unit_float", rng.unit_float, args.iterations, args.calls)
    time_op(
        "advance(2^40)",
        lambda: rng.advance(1 << 40),
        args.iterations,
        args.calls,
    )

    print()
    counts = bounded_counts(PCG32(args.seed, args.seq), 6, args.calls)
    stat = chi_square(counts)
    critical = CHI2_CRITICAL_999[5]
    verdict = "ok" if stat < critical else "SUSPICIOUS"
    print(f"bounded_int(6) counts: {counts.tolist()}")
    print(f"chi-square (df=5): {stat:.3f} (p=0.001 critical {critical}) {verdict}")
    if stat >= critical:
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Uniformity checks for PCG32 streams.

Draws go through the generator one value at a time (the stream must match
the scalar API exactly); numpy is only used to hold and reduce the samples.

Used by:
  - ``prng_test.py`` / ``stats_test.py``: chi-square uniformity tests.
  - ``scripts/bench_prng.py``: sanity check printed after the timings.
"""

from __future__ import annotations

import numpy as np

from .prng import PCG32

# Chi-square critical values at p = 0.001, keyed by degrees of freedom.
CHI2_CRITICAL_999: dict[int, float] = {
    1: 10.828,
    2: 13.816,
    3: 16.266,
    4: 18.467,
    5: 20.515,
    6: 22.458,
    7: 24.322,
    8: 26.124,
    9: 27.877,
    10: 29.588,
    15: 37.697,
}


def draw_u32(rng: PCG32, n: int) -> np.ndarray:
    """Return the next ``n`` outputs of ``rng.next_u32()`` as uint32."""
    return np.fromiter(
        (rng.next_u32() for _ in range(n)), dtype=np.uint32, count=n
    )


def draw_floats(rng: PCG32, n: int) -> np.ndarray:
    """Return the next ``n`` outputs of ``rng.unit_float()`` as float64."""
    return np.fromiter(
        (rng.unit_float() for _ in range(n)), dtype=np.float64, count=n
    )


def bounded_counts(rng: PCG32, bound: int, n: int) -> np.ndarray:
    """Histogram of ``n`` draws of ``rng.bounded_int(bound)``.

    Returns an int64 array of length ``bound``; entry ``i`` counts how often
    ``i`` was drawn. Meant for small bounds; the array has ``bound`` entries.
    """
    values = np.fromiter(
        (rng.bounded_int(bound) for _ in range(n)), dtype=np.int64, count=n
    )
    return np.bincount(values, minlength=bound).astype(np.int64)


def chi_square(counts: np.ndarray) -> float:
    """Pearson chi-square statistic of ``counts`` against a flat histogram."""
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if counts.size == 0 or total == 0:
        raise ValueError("chi_square needs a non-empty histogram")
    expected = total / counts.size
    return float(np.sum((counts - expected) ** 2) / expected)

"""PCG32 pseudorandom number generator.

Implements the PCG-XSH-RR variant (32-bit output, 64-bit state).
Reference: https://www.pcg-random.org/

Python integers are unbounded, so every arithmetic result is masked back to
64 (state) or 32 (output) bits. Products of two 64-bit values are computed
exactly before masking.
"""

from __future__ import annotations

import operator

from .errors import BoundTooLarge, EmptySampleSpace

MULTIPLIER = 6364136223846793005
MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


class PCG32:
    """One PCG32 stream: a 64-bit LCG state plus an odd increment.

    ``seed`` picks the starting point, ``seq`` picks which of the 2^63
    streams is used. Both are reduced modulo 2^64. Not thread safe; use one
    generator per thread (different ``seq`` values give independent streams).
    """

    __slots__ = ("_state", "_inc")

    def __init__(self, seed: int, seq: int = 0) -> None:
        seed = operator.index(seed)
        seq = operator.index(seq)
        self._state: int = 0
        self._inc: int = ((seq << 1) | 1) & MASK64
        self.next_u32()
        self._state = (self._state + seed) & MASK64
        self.next_u32()

    @classmethod
    def from_state(cls, state: int, inc: int) -> PCG32:
        """Rebuild a generator from raw ``state``/``inc`` without warm-up."""
        rng = cls.__new__(cls)
        rng._state = operator.index(state) & MASK64
        rng._inc = (operator.index(inc) | 1) & MASK64
        return rng

    @property
    def state(self) -> int:
        return self._state

    @property
    def inc(self) -> int:
        return self._inc

    def clone(self) -> PCG32:
        return PCG32.from_state(self._state, self._inc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PCG32):
            return NotImplemented
        return self._state == other._state and self._inc == other._inc

    def __repr__(self) -> str:
        return f"PCG32(state=0x{self._state:016x}, inc=0x{self._inc:016x})"

    def next_u32(self) -> int:
        """Step the LCG once and return a uniform 32-bit unsigned integer."""
        old = self._state
        self._state = (old * MULTIPLIER + self._inc) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        # (-rot) & 31 is 0 when rot is 0, so the rotate degrades to a no-op
        return (
            (xorshifted >> rot) | (xorshifted << ((-rot) & 31))
        ) & MASK32

    def advance(self, delta: int) -> None:
        """Jump ``delta`` steps ahead (or back, if negative) in O(log delta).

        Composes ``delta`` applications of ``x -> x * MULTIPLIER + inc`` into
        a single affine map by square-and-multiply. The period is 2^64, so a
        negative delta is the same as moving forward by ``2^64 + delta``.
        """
        delta = operator.index(delta) & MASK64

        mult_acc = 1
        plus_acc = 0
        mult_cur = MULTIPLIER
        plus_cur = self._inc

        while delta > 0:
            if delta & 1:
                mult_acc = (mult_acc * mult_cur) & MASK64
                plus_acc = (plus_acc * mult_cur + plus_cur) & MASK64
            plus_cur = ((mult_cur + 1) * plus_cur) & MASK64
            mult_cur = (mult_cur * mult_cur) & MASK64
            delta >>= 1

        self._state = (mult_acc * self._state + plus_acc) & MASK64

    def bounded_int(self, bound: int) -> int:
        """Uniform integer r with 0 <= r < bound.

        For a half-open range ``[low, high)`` use
        ``low + rng.bounded_int(high - low)``.

        Raises:
            EmptySampleSpace: ``bound <= 0``.
            BoundTooLarge: ``bound > 2^32 - 1``.
        """
        bound = operator.index(bound)
        if bound > MASK32:
            raise BoundTooLarge(bound)
        if bound <= 0:
            raise EmptySampleSpace(bound)

        # Outputs below threshold are rejected so that the accepted range is
        # an exact multiple of bound.
        threshold = ((MASK32 + 1) - bound) % bound
        while True:
            r = self.next_u32()
            if r >= threshold:
                return r % bound

    def unit_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_u32() / (MASK32 + 1)

    def next_float(self) -> float:
        return self.unit_float()

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        return lo + self.bounded_int(hi - lo + 1)

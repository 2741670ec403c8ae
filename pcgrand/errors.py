"""Errors raised by ``PCG32.bounded_int`` (and ``next_int``)."""

from __future__ import annotations


class InvalidBound(ValueError):
    """``bound`` cannot be sampled from a 32-bit source."""

    def __init__(self, bound: int, message: str) -> None:
        super().__init__(message)
        self.bound = bound


class EmptySampleSpace(InvalidBound):
    def __init__(self, bound: int) -> None:
        super().__init__(bound, f"Empty sample space for r: 0 <= r < {bound}")


class BoundTooLarge(InvalidBound):
    def __init__(self, bound: int) -> None:
        super().__init__(bound, f"Bound too large: {bound}")

"""Deterministic PCG32 (PCG-XSH-RR 64/32) random number generator."""

from .errors import BoundTooLarge, EmptySampleSpace, InvalidBound
from .prng import MASK32, MASK64, MULTIPLIER, PCG32

__all__ = [
    "PCG32",
    "InvalidBound",
    "EmptySampleSpace",
    "BoundTooLarge",
    "MULTIPLIER",
    "MASK32",
    "MASK64",
]

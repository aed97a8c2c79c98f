"""Random draws — pure math, no I/O.

Everything goes through the module-level ``random`` generator so that a single
``random.seed()`` call makes a whole simulation run reproducible.
"""
from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def roll_chance(probability: float) -> bool:
    """Return True with the given probability (0.0 never, 1.0 always)."""
    return random.random() < probability


def weighted_choice(entries: Sequence[tuple[T, float]]) -> T:
    """Pick a key from ``(key, weight)`` pairs with a cumulative-weight draw."""
    if not entries:
        raise ValueError("Cannot choose from an empty weight table")
    total = sum(weight for _, weight in entries)
    if total <= 0:
        raise ValueError(f"Weight table must have a positive total, got {total}")

    r = random.random() * total
    for key, weight in entries:
        r -= weight
        if r < 0:
            return key
    # Float rounding can leave r at exactly 0 after the last entry.
    return entries[-1][0]

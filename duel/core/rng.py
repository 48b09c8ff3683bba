"""
Random sources.

Combat logic never draws randomness on its own; it takes an ``Rng``,
a callable of no arguments returning a float in [0, 1).
"""

from __future__ import annotations

from itertools import cycle
from random import Random
from typing import Callable, Iterable

Rng = Callable[[], float]


def seeded_rng(seed: int) -> Rng:
    """Return a reproducible uniform source bound to its own Random."""
    return Random(seed).random


def scripted_rng(values: Iterable[float]) -> Rng:
    """
    Return a source that replays a fixed sequence forever.

    Args:
        values: Non-empty sequence of floats in [0, 1)

    Raises:
        ValueError: If the sequence is empty or a value is out of range
    """
    sequence = list(values)
    if not sequence:
        raise ValueError("Cannot script an empty sequence.")
    for value in sequence:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Scripted value out of range [0, 1): {value}")

    source = cycle(sequence)
    return lambda: next(source)

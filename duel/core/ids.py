"""
Effect id generation.
"""

from __future__ import annotations


class EffectIdGenerator:
    """
    Monotonic counter minting unique Active Effect ids.

    The counter is an explicit value, never process-wide state: the round
    executor seeds one from ``BattleState.effect_counter`` and stores
    ``last`` back into the next state.
    """

    PREFIX = "effect"

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"Counter start must be non-negative: {start}")
        self._last = start

    @property
    def last(self) -> int:
        """Last number handed out (0 if none)."""
        return self._last

    def next_id(self) -> str:
        """Mint the next id."""
        self._last += 1
        return f"{self.PREFIX}-{self._last}"

    def reset(self, start: int = 0) -> None:
        """Reset the counter."""
        self._last = start

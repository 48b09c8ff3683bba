"""
Component base class for data-only values.

Components are pure data containers with NO logic that changes them.
Every combat transform returns new components instead of mutating
existing ones. This makes:
- Replaying a battle trivial
- Serialization trivial
- Testing easier

Usage:
    class Stats(Component):
        hp: int
        mp: int

    hurt = stats.evolve(hp=stats.hp - 10)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all battle values.

    Components are frozen Pydantic models providing:
    - Automatic validation
    - JSON serialization
    - Type hints
    - Default values

    IMPORTANT: Do NOT add methods that modify state.
    Transforms build new values with evolve().
    """

    model_config = ConfigDict(
        # Values are never mutated in place
        frozen=True,
        # Reject unknown fields so serialized states stay exact
        extra='forbid',
        # Allow field aliases (e.g. "def") and field names alike
        populate_by_name=True,
    )

    def evolve(self, **changes: Any) -> Component:
        """Create a copy with some fields replaced."""
        return self.model_copy(update=changes)

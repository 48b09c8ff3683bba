"""
Combat components - timed stat modifiers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from duel.core.component import Component


class EffectType(Enum):
    """Direction of a timed stat modifier."""
    BUFF = "buff"
    DEBUFF = "debuff"


class TargetStat(Enum):
    """Stats a buff or debuff may change. Speed is never a target."""
    ATK = "atk"
    DEF = "def"

    @property
    def label(self) -> str:
        """Upper-case display label (e.g. "ATK")."""
        return self.value.upper()


class ActiveEffect(Component):
    """
    A timed buff or debuff attached to a character.

    Attributes:
        id: Unique id minted by an EffectIdGenerator
        effect_type: Buff or debuff
        target_stat: Stat being modified
        amount: Size of the modifier
        remaining_turns: Rounds left before the effect vanishes
        source_name: Name of the skill that applied it (for log text)
    """
    id: str
    effect_type: EffectType
    target_stat: TargetStat
    amount: int = Field(ge=0)
    remaining_turns: int = Field(ge=1)
    source_name: str

    @property
    def signed_amount(self) -> int:
        """Amount as it applies to the stat (negative for debuffs)."""
        return self.amount if self.effect_type == EffectType.BUFF else -self.amount

    @property
    def modifier_text(self) -> str:
        """Short text such as "ATK +3" or "DEF -5"."""
        sign = "+" if self.effect_type == EffectType.BUFF else "-"
        return f"{self.target_stat.label} {sign}{self.amount}"

"""
Skill components - the tagged union of everything a character can do.

Skill = AttackSkill | DefendSkill | HealSkill | BuffSkill | DebuffSkill

The ``kind`` field is the discriminator, so a skill list round-trips
through JSON without losing which variant each entry is.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from duel.core.component import Component
from duel.components.combat import TargetStat


class SkillKind(Enum):
    """Skill variants."""
    ATTACK = "attack"
    DEFEND = "defend"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"


class BaseSkill(Component):
    """
    Fields shared by every skill.

    Attributes:
        id: Unique id within a character's skill list
        name: Display name
        mp_cost: MP spent on use
        is_default: Marks the zero-cost basic attack / defend
    """
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    mp_cost: int = Field(default=0, ge=0)
    is_default: bool = False

    @property
    def skill_kind(self) -> SkillKind:
        """Variant as an enum member."""
        return SkillKind(self.kind)


class AttackSkill(BaseSkill):
    """Deals damage scaled by ``multiplier``."""
    kind: Literal["attack"] = "attack"
    multiplier: float = Field(default=1.0, ge=1.0, le=3.0)


class DefendSkill(BaseSkill):
    """Halves incoming damage for the round it is declared."""
    kind: Literal["defend"] = "defend"


class HealSkill(BaseSkill):
    """Restores HP to the user, never above max."""
    kind: Literal["heal"] = "heal"
    amount: int = Field(ge=10, le=50)


class StatusSkill(BaseSkill):
    """Shared shape of buff and debuff skills."""
    target_stat: TargetStat
    amount: int = Field(ge=1, le=10)
    duration: int = Field(ge=1, le=5)


class BuffSkill(StatusSkill):
    """Raises one of the user's stats for a few rounds."""
    kind: Literal["buff"] = "buff"


class DebuffSkill(StatusSkill):
    """Lowers one of the opponent's stats for a few rounds."""
    kind: Literal["debuff"] = "debuff"


Skill = Annotated[
    Union[AttackSkill, DefendSkill, HealSkill, BuffSkill, DebuffSkill],
    Field(discriminator="kind"),
]


DEFAULT_ATTACK_SKILL = AttackSkill(
    id="default-attack",
    name="Attack",
    mp_cost=0,
    multiplier=1.0,
    is_default=True,
)

DEFAULT_DEFEND_SKILL = DefendSkill(
    id="default-defend",
    name="Defend",
    mp_cost=0,
    is_default=True,
)

DEFAULT_SKILLS: tuple[AttackSkill | DefendSkill, ...] = (
    DEFAULT_ATTACK_SKILL,
    DEFAULT_DEFEND_SKILL,
)

"""
Character components - stat blocks and battle participants.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import Field, model_validator

from duel.core.component import Component
from duel.components.combat import ActiveEffect, TargetStat
from duel.components.skills import AttackSkill, DefendSkill, Skill


class StatBlock(Component):
    """
    Base character statistics.

    These are the permanent ceilings that define a character. Current
    HP/MP live on the Character; buffs and debuffs never touch this block.

    Attributes:
        hp: Maximum HP
        mp: Maximum MP
        atk: Attack power
        def_: Defense (serialized as "def")
        spd: Speed, decides who acts first
    """
    hp: int = Field(ge=0)
    mp: int = Field(ge=0)
    atk: int = Field(ge=0)
    def_: int = Field(ge=0, alias="def")
    spd: int = Field(ge=0)

    def get(self, stat: TargetStat) -> int:
        """Base value for a buffable stat."""
        if stat == TargetStat.ATK:
            return self.atk
        return self.def_


class Character(Component):
    """
    A participant in battle.

    Attributes:
        name: Display name
        base_stats: Stat ceilings
        current_hp: HP in [0, base_stats.hp]
        current_mp: MP in [0, base_stats.mp]
        skills: Ordered skill list, defaults included
        active_effects: Timed buffs/debuffs currently applied
    """
    name: str = Field(min_length=1)
    base_stats: StatBlock
    current_hp: int = Field(ge=0)
    current_mp: int = Field(ge=0)
    skills: tuple[Skill, ...] = ()
    active_effects: tuple[ActiveEffect, ...] = ()

    @model_validator(mode="after")
    def _check_pools(self) -> Character:
        if self.current_hp > self.base_stats.hp:
            raise ValueError(
                f"current_hp {self.current_hp} exceeds max hp {self.base_stats.hp}"
            )
        if self.current_mp > self.base_stats.mp:
            raise ValueError(
                f"current_mp {self.current_mp} exceeds max mp {self.base_stats.mp}"
            )
        return self

    @classmethod
    def create(
        cls,
        name: str,
        stats: StatBlock,
        skills: Sequence[Skill],
    ) -> Character:
        """Create a character at full HP and MP with no effects."""
        return cls(
            name=name,
            base_stats=stats,
            current_hp=stats.hp,
            current_mp=stats.mp,
            skills=tuple(skills),
        )

    @property
    def max_hp(self) -> int:
        """Get max HP."""
        return self.base_stats.hp

    @property
    def max_mp(self) -> int:
        """Get max MP."""
        return self.base_stats.mp

    @property
    def hp_ratio(self) -> float:
        """Get HP as a fraction of max (0-1)."""
        if self.max_hp <= 0:
            return 0.0
        return self.current_hp / self.max_hp

    @property
    def is_alive(self) -> bool:
        """Check if character is alive."""
        return self.current_hp > 0

    @property
    def default_attack(self) -> Optional[AttackSkill]:
        """The basic attack, if the character has one."""
        for skill in self.skills:
            if isinstance(skill, AttackSkill) and skill.is_default:
                return skill
        return None

    @property
    def defend_skill(self) -> Optional[DefendSkill]:
        """The defend skill, if the character has one."""
        for skill in self.skills:
            if isinstance(skill, DefendSkill):
                return skill
        return None

    def find_skill(self, skill_id: str) -> Optional[Skill]:
        """Look up a skill by id."""
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def can_afford(self, skill: Skill) -> bool:
        """Check if current MP covers the skill's cost."""
        return self.current_mp >= skill.mp_cost

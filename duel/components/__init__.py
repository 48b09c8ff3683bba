"""
Duel components - data-only value definitions.

All components are frozen Pydantic models containing only data.
Combat logic lives in duel.battle, not in components.
"""

from duel.components.combat import ActiveEffect, EffectType, TargetStat
from duel.components.skills import (
    SkillKind,
    BaseSkill,
    AttackSkill,
    DefendSkill,
    HealSkill,
    StatusSkill,
    BuffSkill,
    DebuffSkill,
    Skill,
    DEFAULT_ATTACK_SKILL,
    DEFAULT_DEFEND_SKILL,
    DEFAULT_SKILLS,
)
from duel.components.character import StatBlock, Character

__all__ = [
    # Combat
    "ActiveEffect",
    "EffectType",
    "TargetStat",
    # Skills
    "SkillKind",
    "BaseSkill",
    "AttackSkill",
    "DefendSkill",
    "HealSkill",
    "StatusSkill",
    "BuffSkill",
    "DebuffSkill",
    "Skill",
    "DEFAULT_ATTACK_SKILL",
    "DEFAULT_DEFEND_SKILL",
    "DEFAULT_SKILLS",
    # Character
    "StatBlock",
    "Character",
]

"""
Battle actions - what a side asks to do, and the skill that answers it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import model_validator

from duel.core.component import Component
from duel.components.character import Character
from duel.components.skills import Skill


class ActionType(Enum):
    """Types of battle actions."""
    ATTACK = "attack"
    DEFEND = "defend"
    SKILL = "skill"


class BattleAction(Component):
    """
    A requested battle action.

    ``skill_id`` is required for SKILL and must be absent otherwise. An
    empty id is accepted here and simply never resolves to a skill.
    """
    action_type: ActionType
    skill_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_skill_id(self) -> BattleAction:
        if self.action_type == ActionType.SKILL and self.skill_id is None:
            raise ValueError("skill actions need a skill_id")
        if self.action_type != ActionType.SKILL and self.skill_id is not None:
            raise ValueError(f"{self.action_type.value} actions take no skill_id")
        return self

    @classmethod
    def attack(cls) -> BattleAction:
        """Basic attack."""
        return cls(action_type=ActionType.ATTACK)

    @classmethod
    def defend(cls) -> BattleAction:
        """Defend this round."""
        return cls(action_type=ActionType.DEFEND)

    @classmethod
    def use_skill(cls, skill_id: str) -> BattleAction:
        """Use a named skill."""
        return cls(action_type=ActionType.SKILL, skill_id=skill_id)


def resolve_skill(character: Character, action: BattleAction) -> Optional[Skill]:
    """
    Map an action to the concrete skill it uses.

    Returns:
        The skill, or None when the character lacks it or cannot afford
        it. Callers must treat None as "this round cannot proceed".
    """
    if action.action_type == ActionType.ATTACK:
        return character.default_attack

    if action.action_type == ActionType.DEFEND:
        return character.defend_skill

    if not action.skill_id:
        return None

    skill = character.find_skill(action.skill_id)
    if skill is not None and character.can_afford(skill):
        return skill
    return None

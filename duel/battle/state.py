"""
Battle state - the full, serializable value of a duel in progress.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from duel.core.component import Component
from duel.core.rng import Rng
from duel.components.character import Character
from duel.components.skills import SkillKind
from duel.battle.phases import BattlePhase
from duel.battle.turn import BattleResult, Side, determine_first_mover


class TurnLogEntry(Component):
    """
    One line of the battle log. Entries are only ever appended.

    Attributes:
        round: Round the entry belongs to
        actor: Side that acted (or whose effect expired)
        actor_name: Name of that side's character
        skill_type: Kind of skill used (buff/debuff for expiries)
        action: Narrative text
        target_name: Character on the receiving end, where relevant
        damage: Damage dealt, for attacks
        heal: HP restored, for heals
        effect: Modifier text such as "ATK +3", for buffs and debuffs
        expired: True for an effect-expiry notice rather than an action
    """
    round: int = Field(ge=1)
    actor: Side
    actor_name: str
    skill_type: SkillKind
    action: str
    target_name: Optional[str] = None
    damage: Optional[int] = None
    heal: Optional[int] = None
    effect: Optional[str] = None
    expired: bool = False


class BattleState(Component):
    """
    State of a duel.

    Once ``result`` is set the state is terminal. ``effect_counter`` is
    the last effect id number handed out in this battle.
    """
    round: int = Field(default=1, ge=1)
    player: Character
    enemy: Character
    is_player_first: bool = True
    phase: BattlePhase = BattlePhase.ROUND_START
    log: tuple[TurnLogEntry, ...] = ()
    result: Optional[BattleResult] = None
    effect_counter: int = Field(default=0, ge=0)

    @property
    def is_over(self) -> bool:
        """Check if the battle has a result."""
        return self.result is not None

    def character(self, side: Side) -> Character:
        """Get the character on a side."""
        return self.player if side == Side.PLAYER else self.enemy

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> BattleState:
        """Restore a state serialized with to_json()."""
        return cls.model_validate_json(data)


def create_battle(player: Character, enemy: Character, rng: Rng) -> BattleState:
    """
    Create the opening state of a battle.

    Speed is never buffed or debuffed, so base speeds decide the
    first mover.
    """
    first = determine_first_mover(player.base_stats.spd, enemy.base_stats.spd, rng)
    return BattleState(
        round=1,
        player=player,
        enemy=enemy,
        is_player_first=first == Side.PLAYER,
        phase=BattlePhase.ROUND_START,
    )

"""
Battle phase state machine.

Transition diagram:

    round-start   -> (is_player_first ? player-action : enemy-action)
    player-action -> (target_dead ? battle-end : next mover action)
    enemy-action  -> (target_dead ? battle-end : next mover action)
    round-end     -> (round_exceeded ? battle-end : round-start)
    battle-end    -> battle-end (terminal)

    next mover action:
        first action of the round -> the other side's action
        otherwise                 -> round-end
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BattlePhase(Enum):
    """Position in the round cycle."""
    ROUND_START = "round-start"
    PLAYER_ACTION = "player-action"
    ENEMY_ACTION = "enemy-action"
    ROUND_END = "round-end"
    BATTLE_END = "battle-end"


@dataclass(frozen=True)
class TransitionContext:
    """Facts the transition depends on."""
    is_player_first: bool = True
    is_first_action: bool = False   # the action just taken opened the round
    target_dead: bool = False       # the action's target dropped to 0 HP
    round_exceeded: bool = False    # round counter passed the cap


def next_phase(current: BattlePhase, ctx: TransitionContext) -> BattlePhase:
    """Get the phase that follows ``current``."""
    if current == BattlePhase.ROUND_START:
        if ctx.is_player_first:
            return BattlePhase.PLAYER_ACTION
        return BattlePhase.ENEMY_ACTION

    if current == BattlePhase.PLAYER_ACTION:
        if ctx.target_dead:
            return BattlePhase.BATTLE_END
        if ctx.is_first_action:
            return BattlePhase.ENEMY_ACTION
        return BattlePhase.ROUND_END

    if current == BattlePhase.ENEMY_ACTION:
        if ctx.target_dead:
            return BattlePhase.BATTLE_END
        if ctx.is_first_action:
            return BattlePhase.PLAYER_ACTION
        return BattlePhase.ROUND_END

    if current == BattlePhase.ROUND_END:
        if ctx.round_exceeded:
            return BattlePhase.BATTLE_END
        return BattlePhase.ROUND_START

    return BattlePhase.BATTLE_END

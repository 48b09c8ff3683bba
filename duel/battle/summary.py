"""
Battle summary - statistics computed from the battle log.
"""

from __future__ import annotations

from typing import Optional

from duel.core.component import Component
from duel.battle.state import BattleState
from duel.battle.turn import BattleResult, Side


class BattleSummary(Component):
    """
    Totals for a battle, per side.

    Attributes:
        result: Outcome, or None if the battle is still running
        total_rounds: Rounds fought so far
        damage_dealt: Damage each side dealt
        healing_done: HP each side restored
        actions_taken: Skills each side used (expiry notices not counted)
    """
    result: Optional[BattleResult] = None
    total_rounds: int
    damage_dealt: dict[Side, int]
    healing_done: dict[Side, int]
    actions_taken: dict[Side, int]


def summarize_battle(state: BattleState) -> BattleSummary:
    """Total up the log of a battle."""
    damage = {side: 0 for side in Side}
    healing = {side: 0 for side in Side}
    actions = {side: 0 for side in Side}

    for entry in state.log:
        if entry.expired:
            continue
        damage[entry.actor] += entry.damage or 0
        healing[entry.actor] += entry.heal or 0
        actions[entry.actor] += 1

    # A finished battle keeps the number of its last round
    completed = state.round if state.is_over else state.round - 1
    return BattleSummary(
        result=state.result,
        total_rounds=completed,
        damage_dealt=damage,
        healing_done=healing,
        actions_taken=actions,
    )

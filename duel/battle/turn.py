"""
Turn order and battle termination.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from duel.core.config import MAX_ROUNDS
from duel.core.rng import Rng


class Side(Enum):
    """The two sides of a duel."""
    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Side:
        """The other side."""
        return Side.ENEMY if self == Side.PLAYER else Side.PLAYER


class BattleResult(Enum):
    """Outcome of a finished battle, from the player's point of view."""
    VICTORY = "victory"
    DEFEAT = "defeat"
    DRAW = "draw"


def determine_first_mover(player_spd: int, enemy_spd: int, rng: Rng) -> Side:
    """
    Decide who acts first this round.

    Higher speed wins. On a tie ``rng() < 0.5`` goes to the player,
    so 0.5 itself goes to the enemy.
    """
    if player_spd > enemy_spd:
        return Side.PLAYER
    if enemy_spd > player_spd:
        return Side.ENEMY
    return Side.PLAYER if rng() < 0.5 else Side.ENEMY


def check_battle_end(
    player_hp: int,
    enemy_hp: int,
    round_number: int,
    max_rounds: int = MAX_ROUNDS,
) -> Optional[BattleResult]:
    """
    Check whether the battle is over.

    Checked in fixed priority order:
    - player HP <= 0 -> defeat
    - enemy HP <= 0 -> victory
    - round > max_rounds -> draw

    When both sides drop to zero in the same round the player HP is
    checked first, so a double knockout is a defeat.

    Returns:
        The result, or None while the battle continues
    """
    if player_hp <= 0:
        return BattleResult.DEFEAT
    if enemy_hp <= 0:
        return BattleResult.VICTORY
    if round_number > max_rounds:
        return BattleResult.DRAW
    return None

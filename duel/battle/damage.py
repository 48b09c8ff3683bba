"""
Damage formula.

    damage = (ATK x multiplier - DEF x 0.5) x (0.5 if defending else 1.0)

floored, with a minimum of 1. ATK and DEF are effective stats, i.e.
after buffs and debuffs.
"""

from __future__ import annotations

import math
from typing import Optional

from duel.core.config import BattleConfig, DEFAULT_CONFIG


def calculate_damage(
    attacker_atk: int,
    multiplier: float,
    defender_def: int,
    is_defending: bool,
    config: Optional[BattleConfig] = None,
) -> int:
    """
    Calculate damage for one hit.

    Args:
        attacker_atk: Attacker's effective attack
        multiplier: Skill multiplier
        defender_def: Defender's effective defense
        is_defending: Whether the defender declared Defend this round
        config: Combat constants (defaults to DEFAULT_CONFIG)

    Returns:
        Damage dealt, never below config.min_damage
    """
    config = config or DEFAULT_CONFIG

    raw = attacker_atk * multiplier - defender_def * config.def_multiplier
    if is_defending:
        raw *= config.defend_damage_reduction

    return max(config.min_damage, math.floor(raw))

"""
Effect ledger - timed stat modifiers.

All functions are pure: they take an effect tuple and return a new one.
"""

from __future__ import annotations

from typing import Iterable

from duel.core.ids import EffectIdGenerator
from duel.components.combat import ActiveEffect, EffectType, TargetStat


def get_effective_stat(
    base_stat: int,
    stat: TargetStat,
    effects: Iterable[ActiveEffect],
) -> int:
    """
    Effective stat: base + buffs - debuffs on that stat, floored at 0.
    """
    modifier = sum(e.signed_amount for e in effects if e.target_stat == stat)
    return max(0, base_stat + modifier)


def find_expiring_effects(effects: Iterable[ActiveEffect]) -> tuple[ActiveEffect, ...]:
    """Effects that the next tick will remove (remaining_turns == 1)."""
    return tuple(e for e in effects if e.remaining_turns == 1)


def tick_effects(effects: Iterable[ActiveEffect]) -> tuple[ActiveEffect, ...]:
    """
    Count every effect down by one round.

    Effects reaching 0 are dropped.
    """
    return tuple(
        e.evolve(remaining_turns=e.remaining_turns - 1)
        for e in effects
        if e.remaining_turns > 1
    )


def has_effect(
    effects: Iterable[ActiveEffect],
    effect_type: EffectType,
    target_stat: TargetStat,
) -> bool:
    """Check for an effect of the given type on the given stat."""
    return any(
        e.effect_type == effect_type and e.target_stat == target_stat
        for e in effects
    )


def add_effect(
    effects: Iterable[ActiveEffect],
    effect_type: EffectType,
    target_stat: TargetStat,
    amount: int,
    duration: int,
    source_name: str,
    ids: EffectIdGenerator,
) -> tuple[ActiveEffect, ...]:
    """
    Add an effect, replacing any with the same type and stat.

    Re-applying a buff refreshes it instead of stacking, so a character
    never holds two effects for one (type, stat) pair.

    Args:
        effects: Current effects
        effect_type: Buff or debuff
        target_stat: Stat to modify
        amount: Modifier size
        duration: Rounds the effect lasts
        source_name: Skill name, kept for log text
        ids: Generator for the new effect's id

    Returns:
        New effect tuple with the new effect last
    """
    new_effect = ActiveEffect(
        id=ids.next_id(),
        effect_type=effect_type,
        target_stat=target_stat,
        amount=amount,
        remaining_turns=duration,
        source_name=source_name,
    )
    kept = tuple(
        e for e in effects
        if not (e.effect_type == effect_type and e.target_stat == target_stat)
    )
    return kept + (new_effect,)

"""
Enemy AI - per-difficulty decision policies.

Strategies:
    easy:   Simple. Mostly basic attacks, some smashes, rare defends.
    normal: Reads its own HP. Defensive when hurt, uses heals.
    hard:   Strategic. Keeps the opponent's DEF debuffed, survives
            when low, finishes with a smash.

Policies only ever pick skills the enemy can pay for; an unaffordable
option is skipped, never an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from duel.core.rng import Rng
from duel.components.character import Character
from duel.components.combat import EffectType, TargetStat
from duel.components.skills import AttackSkill, DebuffSkill, HealSkill, Skill
from duel.battle.actions import BattleAction
from duel.battle.effects import has_effect


class Difficulty(Enum):
    """Opponent difficulty tiers."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


def decide_enemy_action(
    enemy: Character,
    opponent: Character,
    difficulty: Difficulty,
    rng: Rng,
) -> BattleAction:
    """
    Choose the enemy's action for this round.

    Args:
        enemy: The AI-controlled character
        opponent: The player character
        difficulty: Policy to use
        rng: Random source; easy and normal draw once per call, hard
            draws only when no scripted priority applies
    """
    if difficulty == Difficulty.EASY:
        return _decide_easy(enemy, rng)
    if difficulty == Difficulty.NORMAL:
        return _decide_normal(enemy, rng)
    return _decide_hard(enemy, opponent, rng)


def _use(skill: Skill) -> BattleAction:
    return BattleAction.use_skill(skill.id)


def _find_smash(character: Character) -> Optional[AttackSkill]:
    """First affordable attack skill that is not the basic attack."""
    for skill in character.skills:
        if isinstance(skill, AttackSkill) and not skill.is_default and character.can_afford(skill):
            return skill
    return None


def _find_heal(character: Character) -> Optional[HealSkill]:
    """First affordable heal."""
    for skill in character.skills:
        if isinstance(skill, HealSkill) and character.can_afford(skill):
            return skill
    return None


def _find_weaken(character: Character) -> Optional[DebuffSkill]:
    """First affordable DEF debuff."""
    for skill in character.skills:
        if (
            isinstance(skill, DebuffSkill)
            and skill.target_stat == TargetStat.DEF
            and character.can_afford(skill)
        ):
            return skill
    return None


def _decide_easy(enemy: Character, rng: Rng) -> BattleAction:
    roll = rng()
    smash = _find_smash(enemy)

    if roll < 0.1:
        return BattleAction.defend()
    if roll < 0.3 and smash:
        return _use(smash)
    return BattleAction.attack()


def _decide_normal(enemy: Character, rng: Rng) -> BattleAction:
    hp_ratio = enemy.hp_ratio
    heal = _find_heal(enemy)
    smash = _find_smash(enemy)
    roll = rng()

    # Hurt: defensive stance
    if hp_ratio <= 0.5:
        if heal and hp_ratio <= 0.7 and roll < 0.4:
            return _use(heal)
        if roll < 0.6:
            return BattleAction.defend()
        if smash and roll < 0.8:
            return _use(smash)
        return BattleAction.attack()

    # Healthy: aggressive stance
    if smash and roll < 0.3:
        return _use(smash)
    if heal and hp_ratio <= 0.7 and roll < 0.4:
        return _use(heal)
    if roll < 0.9:
        return BattleAction.attack()
    return BattleAction.defend()


def _decide_hard(enemy: Character, opponent: Character, rng: Rng) -> BattleAction:
    hp_ratio = enemy.hp_ratio
    heal = _find_heal(enemy)
    smash = _find_smash(enemy)
    weaken = _find_weaken(enemy)

    # Survival first
    if hp_ratio <= 0.3:
        if heal:
            return _use(heal)
        return BattleAction.defend()

    if weaken and not has_effect(opponent.active_effects, EffectType.DEBUFF, TargetStat.DEF):
        return _use(weaken)

    # Finishing blow
    if opponent.hp_ratio <= 0.3 and smash:
        return _use(smash)

    roll = rng()
    if smash and roll < 0.5:
        return _use(smash)
    if heal and hp_ratio <= 0.6 and roll < 0.7:
        return _use(heal)
    return BattleAction.attack()

"""
Skill executor - applies one skill and reports what changed.

Skill behavior:
    attack  -> damage from effective stats, target loses HP
    defend  -> defending flag for this round
    heal    -> user regains HP (never above max)
    buff    -> effect added to the user
    debuff  -> effect added to the opponent

Nothing is applied here: the caller adds the deltas and clamps.
"""

from __future__ import annotations

from typing import Optional

from duel.core.component import Component
from duel.core.config import BattleConfig
from duel.core.ids import EffectIdGenerator
from duel.components.character import Character
from duel.components.combat import ActiveEffect, EffectType, TargetStat
from duel.components.skills import (
    AttackSkill,
    BuffSkill,
    DebuffSkill,
    DefendSkill,
    HealSkill,
    Skill,
    SkillKind,
)
from duel.battle.damage import calculate_damage
from duel.battle.effects import add_effect, get_effective_stat
from duel.battle.state import TurnLogEntry
from duel.battle.turn import Side


class ExecutionResult(Component):
    """
    Outcome of one skill use.

    Attributes:
        target_hp_change: Negative for damage
        actor_hp_change: Positive for healing (already capped at max)
        actor_mp_change: Negative for MP spent, 0 for free skills
        new_actor_effects: Actor's effects after the skill
        new_target_effects: Target's effects after the skill
        is_defending: True if the skill was Defend
        log_entry: Narrative entry for the battle log
    """
    target_hp_change: int = 0
    actor_hp_change: int = 0
    actor_mp_change: int = 0
    new_actor_effects: tuple[ActiveEffect, ...] = ()
    new_target_effects: tuple[ActiveEffect, ...] = ()
    is_defending: bool = False
    log_entry: TurnLogEntry


def execute_skill(
    actor: Character,
    target: Character,
    skill: Skill,
    round_number: int,
    actor_side: Side,
    is_target_defending: bool,
    ids: EffectIdGenerator,
    config: Optional[BattleConfig] = None,
) -> ExecutionResult:
    """
    Work out the result of ``actor`` using ``skill`` on ``target``.

    Args:
        actor: Character using the skill
        target: Opposing character
        skill: Resolved skill
        round_number: Current round, for the log entry
        actor_side: Side of the actor
        is_target_defending: Whether the target declared Defend this round
        ids: Generator for new effect ids (buff/debuff only)
        config: Combat constants

    Raises:
        TypeError: For a skill variant this executor does not know
    """
    if isinstance(skill, AttackSkill):
        return _execute_attack(actor, target, skill, round_number, actor_side,
                               is_target_defending, config)
    if isinstance(skill, DefendSkill):
        return _execute_defend(actor, target, skill, round_number, actor_side)
    if isinstance(skill, HealSkill):
        return _execute_heal(actor, target, skill, round_number, actor_side)
    if isinstance(skill, BuffSkill):
        return _execute_buff(actor, target, skill, round_number, actor_side, ids)
    if isinstance(skill, DebuffSkill):
        return _execute_debuff(actor, target, skill, round_number, actor_side, ids)
    raise TypeError(f"Unknown skill type: {type(skill).__name__}")


def _effective(character: Character, stat: TargetStat) -> int:
    return get_effective_stat(character.base_stats.get(stat), stat, character.active_effects)


def _execute_attack(
    actor: Character,
    target: Character,
    skill: AttackSkill,
    round_number: int,
    actor_side: Side,
    is_target_defending: bool,
    config: Optional[BattleConfig],
) -> ExecutionResult:
    effective_atk = _effective(actor, TargetStat.ATK)
    effective_def = _effective(target, TargetStat.DEF)
    damage = calculate_damage(effective_atk, skill.multiplier, effective_def,
                              is_target_defending, config)

    if skill.is_default:
        text = f"{actor.name} attacks! {target.name} takes {damage} damage"
    else:
        text = f"{actor.name} uses {skill.name}! {target.name} takes {damage} damage"

    return ExecutionResult(
        target_hp_change=-damage,
        actor_mp_change=-skill.mp_cost,
        new_actor_effects=actor.active_effects,
        new_target_effects=target.active_effects,
        log_entry=TurnLogEntry(
            round=round_number,
            actor=actor_side,
            actor_name=actor.name,
            skill_type=SkillKind.ATTACK,
            action=text,
            target_name=target.name,
            damage=damage,
        ),
    )


def _execute_defend(
    actor: Character,
    target: Character,
    skill: DefendSkill,
    round_number: int,
    actor_side: Side,
) -> ExecutionResult:
    return ExecutionResult(
        new_actor_effects=actor.active_effects,
        new_target_effects=target.active_effects,
        is_defending=True,
        log_entry=TurnLogEntry(
            round=round_number,
            actor=actor_side,
            actor_name=actor.name,
            skill_type=SkillKind.DEFEND,
            action=f"{actor.name} takes a defensive stance!",
        ),
    )


def _execute_heal(
    actor: Character,
    target: Character,
    skill: HealSkill,
    round_number: int,
    actor_side: Side,
) -> ExecutionResult:
    actual_heal = max(0, min(skill.amount, actor.max_hp - actor.current_hp))

    return ExecutionResult(
        actor_hp_change=actual_heal,
        actor_mp_change=-skill.mp_cost,
        new_actor_effects=actor.active_effects,
        new_target_effects=target.active_effects,
        log_entry=TurnLogEntry(
            round=round_number,
            actor=actor_side,
            actor_name=actor.name,
            skill_type=SkillKind.HEAL,
            action=f"{actor.name} uses {skill.name}! Restored {actual_heal} HP",
            heal=actual_heal,
        ),
    )


def _execute_buff(
    actor: Character,
    target: Character,
    skill: BuffSkill,
    round_number: int,
    actor_side: Side,
    ids: EffectIdGenerator,
) -> ExecutionResult:
    new_effects = add_effect(
        actor.active_effects,
        EffectType.BUFF,
        skill.target_stat,
        skill.amount,
        skill.duration,
        skill.name,
        ids,
    )
    modifier = f"{skill.target_stat.label} +{skill.amount}"

    return ExecutionResult(
        actor_mp_change=-skill.mp_cost,
        new_actor_effects=new_effects,
        new_target_effects=target.active_effects,
        log_entry=TurnLogEntry(
            round=round_number,
            actor=actor_side,
            actor_name=actor.name,
            skill_type=SkillKind.BUFF,
            action=f"{actor.name} uses {skill.name}! {modifier} ({skill.duration} turns)",
            effect=modifier,
        ),
    )


def _execute_debuff(
    actor: Character,
    target: Character,
    skill: DebuffSkill,
    round_number: int,
    actor_side: Side,
    ids: EffectIdGenerator,
) -> ExecutionResult:
    new_effects = add_effect(
        target.active_effects,
        EffectType.DEBUFF,
        skill.target_stat,
        skill.amount,
        skill.duration,
        skill.name,
        ids,
    )
    modifier = f"{skill.target_stat.label} -{skill.amount}"

    return ExecutionResult(
        actor_mp_change=-skill.mp_cost,
        new_actor_effects=actor.active_effects,
        new_target_effects=new_effects,
        log_entry=TurnLogEntry(
            round=round_number,
            actor=actor_side,
            actor_name=actor.name,
            skill_type=SkillKind.DEBUFF,
            action=(
                f"{actor.name} uses {skill.name}! "
                f"{target.name}'s {modifier} ({skill.duration} turns)"
            ),
            target_name=target.name,
            effect=modifier,
        ),
    )

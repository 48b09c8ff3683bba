"""
Round executor - resolves one full round as a pure transform.

Flow:

    execute_round(state, player_action, difficulty)
      |- resolve_skill(player, player_action)        -> player skill
      |- decide_enemy_action -> resolve_skill        -> enemy skill
      |- defend declarations for both sides (simultaneous)
      |
      |- first mover: execute_skill -> clamp -> log + queue item
      |- check_battle_end -> early return on a knockout
      |
      |- second mover: execute_skill -> clamp -> log + queue item
      |- check_battle_end -> early return on a knockout
      |
      |- expiry notices, then tick_effects (both sides)
      |- round + 1, next first mover, round cap check
      <- RoundResult(battle_state, action_queue)

A rejected round returns None and the caller keeps its previous state.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from duel.core.component import Component
from duel.core.config import BattleConfig, DEFAULT_CONFIG
from duel.core.ids import EffectIdGenerator
from duel.core.rng import Rng
from duel.components.character import Character
from duel.components.combat import ActiveEffect
from duel.components.skills import DefendSkill, Skill, SkillKind
from duel.battle.actions import BattleAction, resolve_skill
from duel.battle.ai import Difficulty, decide_enemy_action
from duel.battle.effects import find_expiring_effects, tick_effects
from duel.battle.executor import ExecutionResult, execute_skill
from duel.battle.phases import BattlePhase, TransitionContext, next_phase
from duel.battle.queue import ActionQueue, ActionQueueItem, QueueItemKind
from duel.battle.state import BattleState, TurnLogEntry
from duel.battle.turn import BattleResult, Side, check_battle_end, determine_first_mover

logger = logging.getLogger(__name__)


class RejectReason(Enum):
    """Why a round could not be executed."""
    BATTLE_OVER = "battle-over"
    INVALID_ACTION = "invalid-action"
    MALFORMED_CHARACTER = "malformed-character"


class RoundResult(Component):
    """New state plus the events to present, in order."""
    battle_state: BattleState
    action_queue: ActionQueue


_QUEUE_KINDS = {
    SkillKind.ATTACK: QueueItemKind.DAMAGE,
    SkillKind.HEAL: QueueItemKind.HEAL,
    SkillKind.DEFEND: QueueItemKind.DEFEND,
    SkillKind.BUFF: QueueItemKind.BUFF,
    SkillKind.DEBUFF: QueueItemKind.DEBUFF,
}


@dataclass(frozen=True)
class _Combatants:
    """Both characters partway through a round."""
    player: Character
    enemy: Character

    def get(self, side: Side) -> Character:
        return self.player if side == Side.PLAYER else self.enemy

    def replace(self, side: Side, character: Character) -> _Combatants:
        if side == Side.PLAYER:
            return _Combatants(player=character, enemy=self.enemy)
        return _Combatants(player=self.player, enemy=character)


def execute_round(
    state: BattleState,
    player_action: BattleAction,
    difficulty: Difficulty,
    rng: Optional[Rng] = None,
    config: Optional[BattleConfig] = None,
) -> Optional[RoundResult]:
    """
    Resolve one round.

    Args:
        state: Current battle state (never modified)
        player_action: What the player chose
        difficulty: Enemy AI policy
        rng: Random source for the AI and speed tie-breaks
            (defaults to random.random)
        config: Combat constants

    Returns:
        RoundResult, or None if the round was rejected: the battle is
        already over, the player's action cannot be resolved, or the
        enemy has no usable skill at all
    """
    if state.result is not None:
        _reject(RejectReason.BATTLE_OVER, f"battle already ended in {state.result.value}")
        return None

    rng = rng or random.random
    config = config or DEFAULT_CONFIG
    player, enemy = state.player, state.enemy

    player_skill = resolve_skill(player, player_action)
    if player_skill is None:
        _reject(RejectReason.INVALID_ACTION, f"{player.name} cannot use {_describe(player_action)}")
        return None

    enemy_action = decide_enemy_action(enemy, player, difficulty, rng)
    enemy_skill = resolve_skill(enemy, enemy_action) or enemy.default_attack
    if enemy_skill is None:
        _reject(RejectReason.MALFORMED_CHARACTER, f"{enemy.name} has no basic attack")
        return None

    skills = {Side.PLAYER: player_skill, Side.ENEMY: enemy_skill}
    first_side = Side.PLAYER if state.is_player_first else Side.ENEMY
    order = (first_side, first_side.opponent)

    # Both sides declare at once, so a defender acting second still
    # softens the first mover's hit.
    defending = {side: isinstance(skill, DefendSkill) for side, skill in skills.items()}

    ids = EffectIdGenerator(state.effect_counter)
    fighters = _Combatants(player=player, enemy=enemy)
    entries: list[TurnLogEntry] = []
    queue = ActionQueue.create()

    logger.debug(
        f"Round {state.round}: {player.name} uses {player_skill.name}, "
        f"{enemy.name} uses {enemy_skill.name}, {first_side.value} moves first"
    )

    for side in order:
        fighters, entry = _execute_mover(
            fighters, side, skills[side], state.round, defending[side.opponent], ids, config,
        )
        entries.append(entry)
        queue = queue.enqueue(_to_queue_item(entry, side, fighters))

        result = check_battle_end(
            fighters.player.current_hp,
            fighters.enemy.current_hp,
            state.round,
            config.max_rounds,
        )
        if result is not None:
            return RoundResult(
                battle_state=_finish(state, fighters, entries, result, ids),
                action_queue=queue,
            )

    # Round end: announce what is about to wear off, then count down
    expiring = {side: find_expiring_effects(fighters.get(side).active_effects) for side in Side}
    for side in Side:
        character = fighters.get(side)
        fighters = fighters.replace(
            side, character.evolve(active_effects=tick_effects(character.active_effects))
        )

    for side in Side:
        for effect in expiring[side]:
            entry = _expire_entry(effect, side, fighters.get(side).name, state.round)
            entries.append(entry)
            queue = queue.enqueue(_to_expire_item(entry, effect, side, fighters))

    next_round = state.round + 1
    first_next = determine_first_mover(
        fighters.player.base_stats.spd,
        fighters.enemy.base_stats.spd,
        rng,
    )
    result = check_battle_end(
        fighters.player.current_hp,
        fighters.enemy.current_hp,
        next_round,
        config.max_rounds,
    )
    phase = next_phase(
        BattlePhase.ROUND_END,
        TransitionContext(
            is_player_first=first_next == Side.PLAYER,
            round_exceeded=result is not None,
        ),
    )

    if result is not None:
        logger.info(f"Battle ended in a {result.value} after {state.round} rounds")

    new_state = BattleState(
        # A drawn battle keeps the number of the last round fought
        round=state.round if result is not None else next_round,
        player=fighters.player,
        enemy=fighters.enemy,
        is_player_first=first_next == Side.PLAYER,
        phase=phase,
        log=state.log + tuple(entries),
        result=result,
        effect_counter=ids.last,
    )
    return RoundResult(battle_state=new_state, action_queue=queue)


def _reject(reason: RejectReason, detail: str) -> None:
    logger.info(f"Round rejected ({reason.value}): {detail}")


def _describe(action: BattleAction) -> str:
    if action.skill_id is not None:
        return f"skill '{action.skill_id}'"
    return action.action_type.value


def _execute_mover(
    fighters: _Combatants,
    side: Side,
    skill: Skill,
    round_number: int,
    target_defending: bool,
    ids: EffectIdGenerator,
    config: BattleConfig,
) -> tuple[_Combatants, TurnLogEntry]:
    """Run one side's skill and apply the clamped result to both characters."""
    actor = fighters.get(side)
    target = fighters.get(side.opponent)

    result = execute_skill(actor, target, skill, round_number, side, target_defending, ids, config)

    fighters = fighters.replace(side, _apply_to_actor(actor, result))
    fighters = fighters.replace(side.opponent, _apply_to_target(target, result))
    return fighters, result.log_entry


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


def _apply_to_actor(actor: Character, result: ExecutionResult) -> Character:
    return actor.evolve(
        current_hp=_clamp(actor.current_hp + result.actor_hp_change, actor.max_hp),
        current_mp=_clamp(actor.current_mp + result.actor_mp_change, actor.max_mp),
        active_effects=result.new_actor_effects,
    )


def _apply_to_target(target: Character, result: ExecutionResult) -> Character:
    return target.evolve(
        current_hp=_clamp(target.current_hp + result.target_hp_change, target.max_hp),
        active_effects=result.new_target_effects,
    )


def _to_queue_item(entry: TurnLogEntry, side: Side, fighters: _Combatants) -> ActionQueueItem:
    if entry.skill_type == SkillKind.ATTACK:
        value = entry.damage
    elif entry.skill_type == SkillKind.HEAL:
        value = entry.heal
    else:
        value = None

    return ActionQueueItem(
        kind=_QUEUE_KINDS[entry.skill_type],
        actor=side,
        actor_name=entry.actor_name,
        description=entry.action,
        value=value,
        log_entry=entry,
        player_snapshot=fighters.player,
        enemy_snapshot=fighters.enemy,
    )


def _expire_entry(effect: ActiveEffect, side: Side, name: str, round_number: int) -> TurnLogEntry:
    return TurnLogEntry(
        round=round_number,
        actor=side,
        actor_name=name,
        skill_type=SkillKind(effect.effect_type.value),
        action=f"{name}'s {effect.source_name} effect ({effect.modifier_text}) wore off",
        effect=effect.modifier_text,
        expired=True,
    )


def _to_expire_item(
    entry: TurnLogEntry,
    effect: ActiveEffect,
    side: Side,
    fighters: _Combatants,
) -> ActionQueueItem:
    return ActionQueueItem(
        kind=QueueItemKind.EFFECT_EXPIRE,
        actor=side,
        actor_name=entry.actor_name,
        description=entry.action,
        value=effect.amount,
        target_stat=effect.target_stat,
        log_entry=entry,
        player_snapshot=fighters.player,
        enemy_snapshot=fighters.enemy,
    )


def _finish(
    state: BattleState,
    fighters: _Combatants,
    entries: list[TurnLogEntry],
    result: BattleResult,
    ids: EffectIdGenerator,
) -> BattleState:
    """Terminal state after a knockout mid-round."""
    logger.info(f"Battle ended in a {result.value} in round {state.round}")
    return state.evolve(
        player=fighters.player,
        enemy=fighters.enemy,
        phase=BattlePhase.BATTLE_END,
        log=state.log + tuple(entries),
        result=result,
        effect_counter=ids.last,
    )

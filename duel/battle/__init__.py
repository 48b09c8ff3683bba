"""
Battle module - deterministic two-side combat resolution.

Provides:
- Damage formula and effect ledger
- Skill resolution and execution
- Turn order and win/lose/draw conditions
- Enemy AI per difficulty
- Phase state machine
- Round execution and the action queue it produces
- Post-battle summaries
"""

from duel.battle.damage import calculate_damage
from duel.battle.effects import (
    get_effective_stat,
    find_expiring_effects,
    tick_effects,
    add_effect,
    has_effect,
)
from duel.battle.actions import ActionType, BattleAction, resolve_skill
from duel.battle.executor import ExecutionResult, execute_skill
from duel.battle.turn import (
    Side,
    BattleResult,
    determine_first_mover,
    check_battle_end,
)
from duel.battle.ai import Difficulty, decide_enemy_action
from duel.battle.phases import BattlePhase, TransitionContext, next_phase
from duel.battle.state import TurnLogEntry, BattleState, create_battle
from duel.battle.queue import ActionQueue, ActionQueueItem, QueueItemKind
from duel.battle.round import RoundResult, RejectReason, execute_round
from duel.battle.summary import BattleSummary, summarize_battle

__all__ = [
    # Damage / effects
    "calculate_damage",
    "get_effective_stat",
    "find_expiring_effects",
    "tick_effects",
    "add_effect",
    "has_effect",
    # Actions
    "ActionType",
    "BattleAction",
    "resolve_skill",
    "ExecutionResult",
    "execute_skill",
    # Turn order
    "Side",
    "BattleResult",
    "determine_first_mover",
    "check_battle_end",
    # AI
    "Difficulty",
    "decide_enemy_action",
    # Phases
    "BattlePhase",
    "TransitionContext",
    "next_phase",
    # State
    "TurnLogEntry",
    "BattleState",
    "create_battle",
    # Queue
    "ActionQueue",
    "ActionQueueItem",
    "QueueItemKind",
    # Round
    "RoundResult",
    "RejectReason",
    "execute_round",
    # Summary
    "BattleSummary",
    "summarize_battle",
]

"""
Auto Battle Demo: duel engine

Demonstrates:
- Loading an opponent from the bundled tables
- Creating a battle with a seeded random source
- Resolving rounds until the battle ends
- Draining each round's action queue in order
- Summarizing the finished battle

Usage:
    python demos/auto_battle.py [easy|normal|hard] [seed]
"""

import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from duel.core import seeded_rng
from duel.components import (
    BuffSkill,
    Character,
    HealSkill,
    StatBlock,
    TargetStat,
    DEFAULT_SKILLS,
)
from duel.battle import (
    BattleAction,
    Difficulty,
    QueueItemKind,
    create_battle,
    execute_round,
    summarize_battle,
)
from duel.resources import OpponentDatabase


def build_hero() -> Character:
    """A balanced 200-point hero with two custom skills."""
    stats = StatBlock(hp=70, mp=40, atk=30, def_=30, spd=30)
    skills = DEFAULT_SKILLS + (
        BuffSkill(id="focus", name="Focus", mp_cost=8,
                  target_stat=TargetStat.ATK, amount=5, duration=2),
        HealSkill(id="mend", name="Mend", mp_cost=10, amount=25),
    )
    return Character.create("Hero", stats, skills)


def choose_action(hero: Character) -> BattleAction:
    """Heal when hurt, keep Focus up, otherwise attack."""
    mend = hero.find_skill("mend")
    focus = hero.find_skill("focus")

    if hero.hp_ratio < 0.4 and hero.can_afford(mend):
        return BattleAction.use_skill(mend.id)
    if not hero.active_effects and hero.can_afford(focus):
        return BattleAction.use_skill(focus.id)
    return BattleAction.attack()


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger = logging.getLogger("AutoBattle")

    difficulty = Difficulty(sys.argv[1]) if len(sys.argv) > 1 else Difficulty.NORMAL
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 7
    rng = seeded_rng(seed)

    db = OpponentDatabase()
    db.load_all()

    state = create_battle(build_hero(), db.create_opponent(difficulty), rng)
    logger.info(f"{state.player.name} vs {state.enemy.name} ({difficulty.value})")

    while not state.is_over:
        outcome = execute_round(state, choose_action(state.player), difficulty, rng)
        if outcome is None:
            logger.error("Round rejected; stopping.")
            break

        queue = outcome.action_queue
        while not queue.is_empty:
            item, queue = queue.dequeue()
            hp = f"[{item.player_snapshot.current_hp} / {item.enemy_snapshot.current_hp}]"
            marker = "~" if item.kind == QueueItemKind.EFFECT_EXPIRE else "-"
            logger.info(f"  {marker} {item.description} {hp}")

        state = outcome.battle_state

    summary = summarize_battle(state)
    logger.info(
        f"Result: {summary.result.value if summary.result else 'unfinished'} "
        f"after {summary.total_rounds} rounds"
    )
    for side, dealt in summary.damage_dealt.items():
        logger.info(f"  {side.value}: {dealt} damage, {summary.healing_done[side]} healed")


if __name__ == "__main__":
    main()

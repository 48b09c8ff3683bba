import pytest
from duel.components import (
    ActiveEffect,
    AttackSkill,
    DebuffSkill,
    EffectType,
    HealSkill,
    TargetStat,
    DEFAULT_SKILLS,
)
from duel.battle.actions import BattleAction
from duel.battle.ai import Difficulty, decide_enemy_action

SMASH = AttackSkill(id="smash", name="Smash", mp_cost=10, multiplier=1.5)
HEAL = HealSkill(id="heal", name="Heal", mp_cost=10, amount=20)
WEAKEN = DebuffSkill(id="weaken", name="Weaken", mp_cost=10,
                     target_stat=TargetStat.DEF, amount=5, duration=3)

ATTACK = BattleAction.attack()
DEFEND = BattleAction.defend()

def use(skill):
    return BattleAction.use_skill(skill.id)

@pytest.fixture
def enemy(make_character):
    def _make(hp=100, mp=50, skills=(SMASH, HEAL, WEAKEN)):
        return make_character("Enemy", skills=DEFAULT_SKILLS + tuple(skills),
                              current_hp=hp, current_mp=mp)
    return _make

@pytest.fixture
def player(make_character):
    return make_character("Hero")

def test_easy(enemy, player, scripted):
    slime = enemy(skills=[SMASH])
    assert decide_enemy_action(slime, player, Difficulty.EASY, scripted(0.05)) == DEFEND
    assert decide_enemy_action(slime, player, Difficulty.EASY, scripted(0.2)) == use(SMASH)
    assert decide_enemy_action(slime, player, Difficulty.EASY, scripted(0.3)) == ATTACK
    assert decide_enemy_action(slime, player, Difficulty.EASY, scripted(0.95)) == ATTACK

def test_easy_without_mp(enemy, player, scripted):
    slime = enemy(mp=9, skills=[SMASH])
    assert decide_enemy_action(slime, player, Difficulty.EASY, scripted(0.2)) == ATTACK

def test_normal_aggressive(enemy, player, scripted):
    orc = enemy(hp=100)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.1)) == use(SMASH)
    # Healthy enough that heal is skipped
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.35)) == ATTACK
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.95)) == DEFEND

def test_normal_aggressive_heals_when_scratched(enemy, player, scripted):
    orc = enemy(hp=65)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.35)) == use(HEAL)

def test_normal_defensive(enemy, player, scripted):
    orc = enemy(hp=50)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.3)) == use(HEAL)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.5)) == DEFEND
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.7)) == use(SMASH)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.9)) == ATTACK

def test_normal_defensive_without_mp(enemy, player, scripted):
    orc = enemy(hp=50, mp=0)
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.3)) == DEFEND
    assert decide_enemy_action(orc, player, Difficulty.NORMAL, scripted(0.7)) == ATTACK

def test_hard_survival_ignores_rng(enemy, player):
    def exploding():
        raise AssertionError("rng should not be called")

    knight = enemy(hp=30)
    assert decide_enemy_action(knight, player, Difficulty.HARD, exploding) == use(HEAL)

    broke = enemy(hp=30, mp=0)
    assert decide_enemy_action(broke, player, Difficulty.HARD, exploding) == DEFEND

def test_hard_opens_with_weaken(enemy, player, scripted):
    knight = enemy()
    assert decide_enemy_action(knight, player, Difficulty.HARD, scripted(0.0)) == use(WEAKEN)

def test_hard_finisher(enemy, make_character, scripted):
    debuffed = make_character("Hero", current_hp=30, active_effects=[
        ActiveEffect(id="e1", effect_type=EffectType.DEBUFF, target_stat=TargetStat.DEF,
                     amount=5, remaining_turns=2, source_name="Weaken"),
    ])
    knight = enemy()
    assert decide_enemy_action(knight, debuffed, Difficulty.HARD, scripted(0.99)) == use(SMASH)

def test_hard_steady_state(enemy, make_character, scripted):
    debuffed = make_character("Hero", active_effects=[
        ActiveEffect(id="e1", effect_type=EffectType.DEBUFF, target_stat=TargetStat.DEF,
                     amount=5, remaining_turns=2, source_name="Weaken"),
    ])
    assert decide_enemy_action(enemy(), debuffed, Difficulty.HARD, scripted(0.4)) == use(SMASH)
    assert decide_enemy_action(enemy(), debuffed, Difficulty.HARD, scripted(0.6)) == ATTACK
    assert decide_enemy_action(enemy(hp=60), debuffed, Difficulty.HARD, scripted(0.6)) == use(HEAL)
    assert decide_enemy_action(enemy(hp=60), debuffed, Difficulty.HARD, scripted(0.8)) == ATTACK

def test_hard_without_weaken_mp(enemy, player, scripted):
    knight = enemy(mp=9)
    assert decide_enemy_action(knight, player, Difficulty.HARD, scripted(0.1)) == ATTACK

@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("roll", [0.0, 0.15, 0.35, 0.55, 0.75, 0.95])
@pytest.mark.parametrize("hp", [10, 40, 60, 100])
def test_never_picks_unaffordable(enemy, player, scripted, difficulty, roll, hp):
    broke = enemy(hp=hp, mp=5)
    action = decide_enemy_action(broke, player, difficulty, scripted(roll))
    assert action.skill_id is None

import pytest
from duel.components import (
    ActiveEffect,
    AttackSkill,
    BuffSkill,
    DebuffSkill,
    EffectType,
    HealSkill,
    SkillKind,
    TargetStat,
    DEFAULT_ATTACK_SKILL,
    DEFAULT_DEFEND_SKILL,
)
from duel.battle.executor import execute_skill
from duel.battle.turn import Side

SMASH = AttackSkill(id="smash", name="Smash", mp_cost=10, multiplier=1.5)
MEND = HealSkill(id="mend", name="Mend", mp_cost=10, amount=20)
FOCUS = BuffSkill(id="focus", name="Focus", mp_cost=5, target_stat=TargetStat.ATK, amount=4, duration=2)
WEAKEN = DebuffSkill(id="weaken", name="Weaken", mp_cost=10, target_stat=TargetStat.DEF, amount=5, duration=3)

@pytest.fixture
def duelists(make_character):
    hero = make_character("Hero", atk=20, def_=10)
    orc = make_character("Orc", atk=15, def_=10)
    return hero, orc

def test_basic_attack(duelists, ids):
    hero, orc = duelists
    result = execute_skill(hero, orc, DEFAULT_ATTACK_SKILL, 1, Side.PLAYER, False, ids)

    assert result.target_hp_change == -15
    assert result.actor_hp_change == 0
    assert result.actor_mp_change == 0
    assert not result.is_defending
    assert result.log_entry.damage == 15
    assert result.log_entry.skill_type == SkillKind.ATTACK
    assert result.log_entry.target_name == "Orc"
    assert "Hero attacks" in result.log_entry.action

def test_attack_into_defender(duelists, ids):
    hero, orc = duelists
    result = execute_skill(hero, orc, DEFAULT_ATTACK_SKILL, 1, Side.PLAYER, True, ids)
    assert result.target_hp_change == -7

def test_skill_attack_costs_mp(duelists, ids):
    hero, orc = duelists
    result = execute_skill(hero, orc, SMASH, 2, Side.PLAYER, False, ids)

    assert result.target_hp_change == -25
    assert result.actor_mp_change == -10
    assert "Smash" in result.log_entry.action
    assert result.log_entry.round == 2

def test_attack_uses_effective_stats(make_character, ids):
    buffed = make_character("Hero", atk=20, active_effects=[
        ActiveEffect(id="e1", effect_type=EffectType.BUFF, target_stat=TargetStat.ATK,
                     amount=4, remaining_turns=2, source_name="Focus"),
    ])
    weakened = make_character("Orc", def_=10, active_effects=[
        ActiveEffect(id="e2", effect_type=EffectType.DEBUFF, target_stat=TargetStat.DEF,
                     amount=6, remaining_turns=2, source_name="Weaken"),
    ])
    result = execute_skill(buffed, weakened, DEFAULT_ATTACK_SKILL, 1, Side.PLAYER, False, ids)

    # 24 - 4 * 0.5
    assert result.target_hp_change == -22

def test_defend(duelists, ids):
    hero, orc = duelists
    result = execute_skill(hero, orc, DEFAULT_DEFEND_SKILL, 1, Side.PLAYER, False, ids)

    assert result.is_defending
    assert result.target_hp_change == 0
    assert result.actor_hp_change == 0
    assert result.actor_mp_change == 0
    assert result.log_entry.skill_type == SkillKind.DEFEND


def test_heal_full_amount(make_character, ids):
    hero = make_character("Hero", current_hp=50, skills=[MEND])
    orc = make_character("Orc")
    result = execute_skill(hero, orc, MEND, 1, Side.PLAYER, False, ids)

    assert result.actor_hp_change == 20
    assert result.actor_mp_change == -10
    assert result.log_entry.heal == 20

def test_heal_cannot_overheal(make_character, ids):
    hero = make_character("Hero", current_hp=92, skills=[MEND])
    orc = make_character("Orc")
    result = execute_skill(hero, orc, MEND, 1, Side.PLAYER, False, ids)

    assert result.actor_hp_change == 8
    assert result.log_entry.heal == 8

def test_heal_at_full_hp(make_character, ids):
    hero = make_character("Hero", skills=[MEND])
    orc = make_character("Orc")
    result = execute_skill(hero, orc, MEND, 1, Side.PLAYER, False, ids)

    assert result.actor_hp_change == 0
    assert result.actor_mp_change == -10

def test_buff_applies_to_actor(duelists, ids):
    hero, orc = duelists
    result = execute_skill(hero, orc, FOCUS, 1, Side.PLAYER, False, ids)

    assert len(result.new_actor_effects) == 1
    buff = result.new_actor_effects[0]
    assert buff.effect_type == EffectType.BUFF
    assert buff.target_stat == TargetStat.ATK
    assert buff.amount == 4
    assert buff.remaining_turns == 2
    assert buff.source_name == "Focus"
    assert buff.id == "effect-1"
    assert result.new_target_effects == orc.active_effects
    assert result.actor_mp_change == -5
    assert result.log_entry.effect == "ATK +4"

def test_debuff_applies_to_target(duelists, ids):
    hero, orc = duelists
    result = execute_skill(orc, hero, WEAKEN, 3, Side.ENEMY, False, ids)

    assert result.new_actor_effects == orc.active_effects
    assert len(result.new_target_effects) == 1
    debuff = result.new_target_effects[0]
    assert debuff.effect_type == EffectType.DEBUFF
    assert debuff.target_stat == TargetStat.DEF
    assert result.log_entry.actor.value == "enemy"
    assert result.log_entry.target_name == "Hero"
    assert result.log_entry.effect == "DEF -5"
    assert "Hero's DEF -5" in result.log_entry.action

def test_inputs_not_mutated(duelists, ids):
    hero, orc = duelists
    before = (hero.model_dump(), orc.model_dump())
    execute_skill(hero, orc, WEAKEN, 1, Side.PLAYER, False, ids)
    execute_skill(hero, orc, FOCUS, 1, Side.PLAYER, False, ids)
    assert (hero.model_dump(), orc.model_dump()) == before

import pytest
from pydantic import ValidationError
from duel.components import HealSkill, DEFAULT_ATTACK_SKILL, DEFAULT_DEFEND_SKILL, DEFAULT_SKILLS
from duel.battle.actions import ActionType, BattleAction, resolve_skill

HEAL = HealSkill(id="mend", name="Mend", mp_cost=10, amount=20)

def test_action_constructors():
    assert BattleAction.attack().action_type == ActionType.ATTACK
    assert BattleAction.defend().skill_id is None
    assert BattleAction.use_skill("mend").skill_id == "mend"

def test_skill_action_requires_id():
    with pytest.raises(ValidationError):
        BattleAction(action_type=ActionType.SKILL)
    with pytest.raises(ValidationError):
        BattleAction(action_type=ActionType.ATTACK, skill_id="mend")

def test_resolve_defaults(make_character):
    hero = make_character()
    assert resolve_skill(hero, BattleAction.attack()) == DEFAULT_ATTACK_SKILL
    assert resolve_skill(hero, BattleAction.defend()) == DEFAULT_DEFEND_SKILL

def test_resolve_missing_defaults(make_character):
    bare = make_character(skills=[HEAL])
    assert resolve_skill(bare, BattleAction.attack()) is None
    assert resolve_skill(bare, BattleAction.defend()) is None

def test_resolve_named_skill(make_character):
    hero = make_character(skills=DEFAULT_SKILLS + (HEAL,))
    assert resolve_skill(hero, BattleAction.use_skill("mend")) == HEAL

def test_resolve_unknown_skill(make_character):
    hero = make_character()
    assert resolve_skill(hero, BattleAction.use_skill("fireball")) is None

def test_resolve_unaffordable_skill(make_character):
    hero = make_character(skills=DEFAULT_SKILLS + (HEAL,), current_mp=9)
    assert resolve_skill(hero, BattleAction.use_skill("mend")) is None

def test_empty_skill_id_never_resolves(make_character):
    action = BattleAction.use_skill("")
    assert action.action_type == ActionType.SKILL
    assert resolve_skill(make_character(), action) is None

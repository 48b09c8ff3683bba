from duel.core.config import BattleConfig, DEFAULT_CONFIG, MAX_ROUNDS

def test_default_config():
    assert DEFAULT_CONFIG.max_rounds == MAX_ROUNDS == 20
    assert DEFAULT_CONFIG.defend_damage_reduction == 0.5
    assert DEFAULT_CONFIG.def_multiplier == 0.5
    assert DEFAULT_CONFIG.min_damage == 1

def test_custom_config():
    config = BattleConfig(max_rounds=5)
    assert config.max_rounds == 5
    assert config.min_damage == 1

def test_config_repr():
    assert "max_rounds=3" in repr(BattleConfig(max_rounds=3))

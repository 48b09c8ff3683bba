import os
import sys
import pytest

# Ensure duel can be imported without installing
sys.path.append(os.getcwd())

from duel.core.ids import EffectIdGenerator
from duel.core.rng import scripted_rng
from duel.components import Character, StatBlock, DEFAULT_SKILLS


@pytest.fixture
def ids():
    """Fresh effect id generator for each test."""
    return EffectIdGenerator()


@pytest.fixture
def scripted():
    """Factory for fixed random sequences: scripted(0.2, 0.7)."""
    def _make(*values):
        return scripted_rng(values)
    return _make


@pytest.fixture
def make_character():
    """
    Factory for characters at full HP/MP with the default skills.

    Keyword overrides: any stat (hp, mp, atk, def_, spd), skills,
    current_hp, current_mp, active_effects.
    """
    def _make(name="Hero", skills=None, current_hp=None, current_mp=None,
              active_effects=(), **stats):
        block = StatBlock(**{"hp": 100, "mp": 50, "atk": 20, "def_": 10, "spd": 10, **stats})
        return Character(
            name=name,
            base_stats=block,
            current_hp=block.hp if current_hp is None else current_hp,
            current_mp=block.mp if current_mp is None else current_mp,
            skills=DEFAULT_SKILLS if skills is None else tuple(skills),
            active_effects=tuple(active_effects),
        )
    return _make

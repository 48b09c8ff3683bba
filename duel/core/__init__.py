"""
Core module.

Exports:
- Component: Frozen data-only model base
- BattleConfig, DEFAULT_CONFIG: Numeric combat constants
- Rng, seeded_rng, scripted_rng: Random source seam
- EffectIdGenerator: Explicit effect id counter
"""

from duel.core.component import Component
from duel.core.config import (
    BattleConfig,
    DEFAULT_CONFIG,
    MAX_ROUNDS,
    DEFEND_DAMAGE_REDUCTION,
    DEF_MULTIPLIER,
    MIN_DAMAGE,
)
from duel.core.rng import Rng, seeded_rng, scripted_rng
from duel.core.ids import EffectIdGenerator

__all__ = [
    # Models
    "Component",
    # Config
    "BattleConfig",
    "DEFAULT_CONFIG",
    "MAX_ROUNDS",
    "DEFEND_DAMAGE_REDUCTION",
    "DEF_MULTIPLIER",
    "MIN_DAMAGE",
    # Randomness
    "Rng",
    "seeded_rng",
    "scripted_rng",
    # Ids
    "EffectIdGenerator",
]

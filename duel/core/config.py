"""
Battle configuration.

Numeric combat constants and the config object that carries them.
"""

MAX_ROUNDS = 20
DEFEND_DAMAGE_REDUCTION = 0.5
DEF_MULTIPLIER = 0.5
MIN_DAMAGE = 1


class BattleConfig:
    """Configuration for combat resolution."""

    def __init__(
        self,
        max_rounds: int = MAX_ROUNDS,
        defend_damage_reduction: float = DEFEND_DAMAGE_REDUCTION,
        def_multiplier: float = DEF_MULTIPLIER,
        min_damage: int = MIN_DAMAGE,
    ):
        self.max_rounds = max_rounds
        self.defend_damage_reduction = defend_damage_reduction
        self.def_multiplier = def_multiplier
        self.min_damage = min_damage

    def __repr__(self) -> str:
        return (
            f"BattleConfig(max_rounds={self.max_rounds}, "
            f"defend_damage_reduction={self.defend_damage_reduction}, "
            f"def_multiplier={self.def_multiplier}, "
            f"min_damage={self.min_damage})"
        )


DEFAULT_CONFIG = BattleConfig()

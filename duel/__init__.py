"""
Duel engine.

Deterministic turn-based combat resolution for a two-participant battle:
- Core (component base, configuration, random sources, effect ids)
- Components (stats, characters, skills, active effects)
- Battle (damage, effects, enemy AI, phases, round execution)
- Resources (opponent lookup tables)
"""

__version__ = "0.1.0"

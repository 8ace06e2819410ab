"""
Hero state and resources.
"""

from hexquest.heroes.hero_state import Hero, MAX_CRYSTALS_PER_COLOR

__all__ = [
    "Hero",
    "MAX_CRYSTALS_PER_COLOR",
]

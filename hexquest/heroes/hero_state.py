"""
Hero state for HexQuest.

Holds the resources that site interactions read and mutate: movement
points, fame, the crystal inventory and learned skills.
"""

import logging
from dataclasses import dataclass, field
from typing import Union

from hexquest.data_models import CRYSTAL_PALETTE, CrystalColor, Skill, SkillKind

logger = logging.getLogger(__name__)


MAX_CRYSTALS_PER_COLOR = 3

# Passive skills that modify hero stats when learned
_ARMOR_SKILLS = {"dragon_scales": 1}


def _empty_crystals() -> dict[CrystalColor, int]:
    return {color: 0 for color in CRYSTAL_PALETTE}


@dataclass
class Hero:
    """
    A player-controlled hero.

    Site handlers only ever add crystals and spend movement. Movement
    points never drop below zero.
    """
    hero_class: str
    movement_points: int = 0
    fame: int = 0
    armor: int = 2

    crystals: dict[CrystalColor, int] = field(default_factory=_empty_crystals)
    skills: list[Skill] = field(default_factory=list)
    used_skills: set[str] = field(default_factory=set)

    # =========================================================================
    # CRYSTALS
    # =========================================================================

    def gain_crystal(self, color: Union[CrystalColor, str]) -> bool:
        """
        Add one crystal of the given colour.

        Returns:
            False if the colour is already at MAX_CRYSTALS_PER_COLOR

        Raises:
            ValueError: If color is not part of the crystal palette
        """
        color = CrystalColor(color)
        if self.crystals[color] >= MAX_CRYSTALS_PER_COLOR:
            logger.debug(f"{self.hero_class}: {color.value} crystals at cap")
            return False
        self.crystals[color] += 1
        return True

    def use_crystal(self, color: Union[CrystalColor, str]) -> bool:
        """Spend one crystal. Returns False if none are left."""
        color = CrystalColor(color)
        if self.crystals[color] <= 0:
            return False
        self.crystals[color] -= 1
        return True

    def get_crystals(self) -> dict[CrystalColor, int]:
        return dict(self.crystals)

    def total_crystals(self) -> int:
        return sum(self.crystals.values())

    # =========================================================================
    # MOVEMENT AND FAME
    # =========================================================================

    def spend_movement(self, points: int = 1) -> bool:
        """Spend movement points if enough remain."""
        if points < 0 or self.movement_points < points:
            return False
        self.movement_points -= points
        return True

    def gain_fame(self, amount: int) -> int:
        """Add fame and return the new total."""
        self.fame += max(0, amount)
        return self.fame

    # =========================================================================
    # SKILLS
    # =========================================================================

    def has_skill(self, skill_id: str) -> bool:
        return any(s.skill_id == skill_id for s in self.skills)

    def add_skill(self, skill: Skill) -> None:
        """Learn a skill, applying passive stat bonuses immediately."""
        self.skills.append(skill)
        self.armor += _ARMOR_SKILLS.get(skill.skill_id, 0)
        logger.info(f"{self.hero_class} learned skill: {skill.name}")

    def can_use_skill(self, skill_id: str) -> bool:
        """Active skills can be used once until reset_used_skills()."""
        skill = next((s for s in self.skills if s.skill_id == skill_id), None)
        if skill is None or skill.kind != SkillKind.ACTIVE:
            return False
        return skill_id not in self.used_skills

    def use_skill(self, skill_id: str) -> bool:
        if not self.can_use_skill(skill_id):
            return False
        self.used_skills.add(skill_id)
        return True

    def reset_used_skills(self) -> None:
        self.used_skills.clear()

    def get_skill_ids(self) -> set[str]:
        return {s.skill_id for s in self.skills}

"""
Skill catalog for HexQuest hero classes.

Provides a registry of learnable skills per hero class and the random
level-up offer used when a hero picks new skills.
"""

import logging
from typing import Iterable, Optional, Union

from hexquest.data_models import DiceRoller, Skill, SkillKind, get_dice_roller

logger = logging.getLogger(__name__)


DEFAULT_SKILL_OFFER = 2


# =============================================================================
# SKILL DEFINITIONS
# =============================================================================

GOLDYX_SKILLS: tuple[Skill, ...] = (
    Skill("flight", "Flug", SkillKind.ACTIVE, "🦅",
          "Bewege dich 2 Felder weit und ignoriere Geländekosten."),
    Skill("motivation", "Motivation", SkillKind.ACTIVE, "🚩",
          "+2 Karten, +1 Weißes Mana"),
    Skill("dragon_scales", "Drachenschuppen", SkillKind.PASSIVE, "🛡️",
          "+1 Rüstung."),
    Skill("freezing_breath", "Eis-Atem", SkillKind.ACTIVE, "❄️",
          "Friere Feinde ein"),
    Skill("crystal_mastery", "Kristall-Meisterschaft", SkillKind.PASSIVE, "💎",
          "Erhalte zu Beginn jeder Runde 1 Grünen Kristall."),
    Skill("glittering_fortune", "Glitzerndes Glück", SkillKind.PASSIVE, "✨",
          "Runden-Kristall"),
    Skill("siege_mastery", "Belagerungs-Meister", SkillKind.PASSIVE, "🏹",
          "+2 Belagerung"),
    Skill("essence_flow", "Essenz-Fluss", SkillKind.PASSIVE, "🌊",
          "Karte + Mana"),
)

NOROWAS_SKILLS: tuple[Skill, ...] = (
    Skill("motivation", "Motivation", SkillKind.ACTIVE, "🚩",
          "Mache eine verbrauchte Einheit wieder bereit."),
    Skill("forward_march", "Vorwärts Marsch", SkillKind.PASSIVE, "🥾",
          "Bewegungskosten -1."),
    Skill("healing_touch", "Heilende Hände", SkillKind.ACTIVE, "✨",
          "Heile 2 Schaden."),
    Skill("noble_manners", "Edle Manieren", SkillKind.PASSIVE, "👑",
          "+2 Einfluss."),
)


# =============================================================================
# SKILL CATALOG
# =============================================================================

class SkillCatalog:
    """
    Registry of skills keyed by hero class.

    Class ids are case-insensitive. Looking up an unknown class returns
    an empty tuple rather than raising.
    """

    def __init__(self, load_defaults: bool = True) -> None:
        self._skills: dict[str, tuple[Skill, ...]] = {}
        if load_defaults:
            self.register("GOLDYX", GOLDYX_SKILLS)
            self.register("NOROWAS", NOROWAS_SKILLS)

    @staticmethod
    def _normalize(class_id: str) -> str:
        return class_id.strip().upper()

    def register(self, class_id: str, skills: Iterable[Skill]) -> None:
        """Register (or replace) the skill list for a hero class."""
        skills = tuple(skills)
        ids = [s.skill_id for s in skills]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate skill ids for class {class_id}")
        self._skills[self._normalize(class_id)] = skills
        logger.debug(f"Registered {len(skills)} skills for {self._normalize(class_id)}")

    def class_ids(self) -> list[str]:
        return list(self._skills)

    def get_skills(self, class_id: str) -> tuple[Skill, ...]:
        """Get all skills for a class, in catalog order."""
        return self._skills.get(self._normalize(class_id), ())

    def get_skill(self, class_id: str, skill_id: str) -> Optional[Skill]:
        return next(
            (s for s in self.get_skills(class_id) if s.skill_id == skill_id),
            None,
        )

    def get_random_skills(
        self,
        class_id: str,
        selector: Union[int, Iterable[str], None] = DEFAULT_SKILL_OFFER,
        count_if_excluded: int = DEFAULT_SKILL_OFFER,
        dice: Optional[DiceRoller] = None,
    ) -> list[Skill]:
        """
        Draw a random offer of distinct skills for a class.

        Args:
            class_id: Hero class (case-insensitive)
            selector: Either the number of skills to draw, or a collection
                of skill ids to exclude before drawing. None draws the
                default offer size
            count_if_excluded: Number of skills to draw when selector is an
                exclusion collection
            dice: Random source (shared roller if None)

        Returns:
            Up to the requested number of skills. Fewer are returned when
            not enough eligible skills remain.
        """
        skills = self.get_skills(class_id)
        if not skills:
            return []

        if selector is None:
            excluded: frozenset[str] = frozenset()
            count = DEFAULT_SKILL_OFFER
        elif isinstance(selector, int):
            excluded = frozenset()
            count = selector
        elif isinstance(selector, str):
            excluded = frozenset({selector})
            count = count_if_excluded
        else:
            excluded = frozenset(selector)
            count = count_if_excluded

        eligible = [s for s in skills if s.skill_id not in excluded]
        dice = dice or get_dice_roller()
        return dice.sample(eligible, count, f"skill offer {self._normalize(class_id)}")


# Singleton access
_skill_catalog: Optional[SkillCatalog] = None


def get_skill_catalog() -> SkillCatalog:
    """Get the global SkillCatalog instance."""
    global _skill_catalog
    if _skill_catalog is None:
        _skill_catalog = SkillCatalog()
    return _skill_catalog


def get_random_skills(
    class_id: str,
    selector: Union[int, Iterable[str], None] = DEFAULT_SKILL_OFFER,
    count_if_excluded: int = DEFAULT_SKILL_OFFER,
    dice: Optional[DiceRoller] = None,
) -> list[Skill]:
    """Draw a random skill offer from the global catalog."""
    return get_skill_catalog().get_random_skills(
        class_id, selector, count_if_excluded, dice
    )

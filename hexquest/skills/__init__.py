"""
Hero skill system.

Provides the per-class skill catalog and random skill offers:
- Goldyx: Dragon hero (8 skills)
- Norowas: Elf noble (4 skills)
"""

from hexquest.skills.skill_catalog import (
    DEFAULT_SKILL_OFFER,
    GOLDYX_SKILLS,
    NOROWAS_SKILLS,
    SkillCatalog,
    get_random_skills,
    get_skill_catalog,
)

__all__ = [
    "DEFAULT_SKILL_OFFER",
    "GOLDYX_SKILLS",
    "NOROWAS_SKILLS",
    "SkillCatalog",
    "get_random_skills",
    "get_skill_catalog",
]

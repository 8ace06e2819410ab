"""
Tests for hero resources: crystals, movement, fame and skills.
"""

import pytest

from hexquest.data_models import CrystalColor, Skill, SkillKind
from hexquest.heroes.hero_state import Hero, MAX_CRYSTALS_PER_COLOR
from hexquest.skills.skill_catalog import get_skill_catalog


class TestCrystals:
    """Tests for the crystal inventory."""

    def test_starts_empty_with_full_palette(self, hero):
        assert hero.get_crystals() == {c: 0 for c in CrystalColor}

    def test_gain_crystal_accepts_string(self, hero):
        assert hero.gain_crystal("green") is True
        assert hero.crystals[CrystalColor.GREEN] == 1

    def test_gain_crystal_cap(self, hero):
        for _ in range(MAX_CRYSTALS_PER_COLOR):
            assert hero.gain_crystal(CrystalColor.BLUE) is True
        assert hero.gain_crystal(CrystalColor.BLUE) is False
        assert hero.crystals[CrystalColor.BLUE] == MAX_CRYSTALS_PER_COLOR

    def test_unknown_color_rejected(self, hero):
        with pytest.raises(ValueError):
            hero.gain_crystal("gold")

    def test_use_crystal(self, hero):
        assert hero.use_crystal(CrystalColor.RED) is False
        hero.gain_crystal(CrystalColor.RED)
        assert hero.use_crystal("red") is True
        assert hero.crystals[CrystalColor.RED] == 0

    def test_get_crystals_is_a_copy(self, hero):
        hero.get_crystals()[CrystalColor.RED] = 3
        assert hero.crystals[CrystalColor.RED] == 0


class TestMovementAndFame:

    def test_spend_movement(self, hero):
        assert hero.spend_movement(2) is True
        assert hero.movement_points == 3

    def test_spend_movement_never_negative(self, hero):
        assert hero.spend_movement(6) is False
        assert hero.movement_points == 5

    def test_spend_negative_rejected(self, hero):
        assert hero.spend_movement(-1) is False
        assert hero.movement_points == 5

    def test_gain_fame(self, hero):
        assert hero.gain_fame(5) == 5
        assert hero.gain_fame(-3) == 5


class TestSkills:
    """Tests for learning and using skills."""

    @pytest.fixture
    def goldyx(self):
        return Hero(hero_class="GOLDYX")

    def test_dragon_scales_adds_armor(self, goldyx):
        armor = goldyx.armor
        goldyx.add_skill(get_skill_catalog().get_skill("GOLDYX", "dragon_scales"))
        assert goldyx.armor == armor + 1
        assert goldyx.has_skill("dragon_scales")

    def test_other_skills_keep_armor(self, goldyx):
        armor = goldyx.armor
        goldyx.add_skill(get_skill_catalog().get_skill("GOLDYX", "flight"))
        assert goldyx.armor == armor

    def test_active_skill_once_per_round(self, goldyx):
        goldyx.add_skill(get_skill_catalog().get_skill("GOLDYX", "flight"))

        assert goldyx.use_skill("flight") is True
        assert goldyx.can_use_skill("flight") is False
        assert goldyx.use_skill("flight") is False

        goldyx.reset_used_skills()
        assert goldyx.can_use_skill("flight") is True

    def test_passive_skill_cannot_be_used(self, goldyx):
        goldyx.add_skill(Skill("calm", "Ruhe", SkillKind.PASSIVE, "?", ""))
        assert goldyx.can_use_skill("calm") is False

    def test_unknown_skill_cannot_be_used(self, goldyx):
        assert goldyx.can_use_skill("flight") is False

    def test_skill_ids(self, goldyx):
        for skill in get_skill_catalog().get_skills("GOLDYX")[:3]:
            goldyx.add_skill(skill)
        assert goldyx.get_skill_ids() == {"flight", "motivation", "dragon_scales"}

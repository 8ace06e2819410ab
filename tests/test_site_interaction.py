"""
Tests for the site model, handler registry, conquest transitions and
the visit/select interaction flow.
"""

import pytest

from hexquest.data_models import HexCoord
from hexquest.encounter.encounter_tables import CRYSTAL_GUARDIAN, MINE_OVERSEER
from hexquest.observability.game_log import EntryKind, LogLevel
from hexquest.sites import (
    ActionResult,
    CombatOutcome,
    MineHandler,
    Site,
    SiteHandler,
    SiteHandlerRegistry,
    SiteInteractionManager,
    SiteOption,
    SiteType,
)


@pytest.fixture
def interaction(registry, conquest):
    return SiteInteractionManager(registry, conquest)


# =============================================================================
# SITE MODEL
# =============================================================================


class TestSite:

    def test_defaults(self):
        site = Site(SiteType.MINE)
        assert site.conquered is False
        assert site.name == "Mine"
        assert site.site_id.startswith("mine_")

    def test_accepts_string_type(self):
        assert Site("tomb").site_type == SiteType.TOMB

    def test_conquer_is_monotonic(self):
        site = Site(SiteType.MINE)
        assert site.conquer() is True
        assert site.conquer() is False
        assert site.conquered is True

    def test_conquered_is_read_only(self):
        site = Site(SiteType.MINE)
        with pytest.raises(AttributeError):
            site.conquered = True

    def test_cannot_be_created_conquered(self):
        with pytest.raises(TypeError):
            Site(SiteType.MINE, _conquered=True)

    def test_unique_ids(self):
        assert Site(SiteType.MINE).site_id != Site(SiteType.MINE).site_id


class TestSiteOption:

    def test_disabled_option_does_not_run(self):
        calls = []
        option = SiteOption(
            id="x", label="X",
            action=lambda: calls.append(1) or ActionResult(True, "ok"),
            enabled=False,
        )
        assert option.execute().success is False
        assert calls == []

    def test_action_result_to_dict(self):
        result = ActionResult(True, "ok", {"color": "red"})
        assert result.to_dict() == {"success": True, "message": "ok", "color": "red"}


# =============================================================================
# REGISTRY
# =============================================================================


class TestSiteHandlerRegistry:

    def test_default_registry_types(self, registry):
        assert set(registry.site_types()) == {
            SiteType.MINE,
            SiteType.DUNGEON,
            SiteType.RUINS,
            SiteType.TOMB,
            SiteType.LABYRINTH,
            SiteType.SPAWNING_GROUNDS,
        }

    def test_handlers_satisfy_protocol(self, registry):
        for site_type in registry.site_types():
            assert isinstance(registry.get(site_type), SiteHandler)

    def test_dispatch_to_mine(self, registry, mine):
        assert isinstance(registry.get(SiteType.MINE), MineHandler)
        assert [o.id for o in registry.get_options(mine)] == ["conquer_mine"]

    def test_unhandled_site_type(self, registry):
        keep = Site(SiteType.KEEP)
        assert registry.get_options(keep) == []
        result = registry.execute(keep, "attack")
        assert result.success is False

    def test_unknown_option(self, registry, mine):
        result = registry.execute(mine, "nonsense")
        assert result.success is False
        assert "nonsense" in result.message

    def test_register_subset(self, context):
        registry = SiteHandlerRegistry()
        registry.register(MineHandler(context), (SiteType.MINE,))
        assert registry.site_types() == [SiteType.MINE]


# =============================================================================
# CONQUEST
# =============================================================================


class TestConquestTracker:

    def test_victory_conquers_current_site(self, conquest, mine, hero, game_log):
        conquest.set_current_site(mine)

        changed = conquest.on_combat_end(CombatOutcome(True, [MINE_OVERSEER]))

        assert changed is True
        assert mine.conquered is True
        assert hero.fame == MINE_OVERSEER.fame
        transitions = game_log.get_entries(kind=EntryKind.TRANSITION)
        assert len(transitions) == 1
        assert transitions[0].context["to_state"] == "conquered"

    def test_defeat_leaves_site(self, conquest, mine, hero):
        conquest.set_current_site(mine)

        assert conquest.on_combat_end(CombatOutcome(False, [CRYSTAL_GUARDIAN])) is False
        assert mine.conquered is False
        assert hero.fame == 0

    def test_second_victory_does_not_transition_again(self, conquest, mine, game_log):
        conquest.on_combat_end(CombatOutcome(True, [CRYSTAL_GUARDIAN]), site=mine)
        assert conquest.on_combat_end(CombatOutcome(True, [CRYSTAL_GUARDIAN]), site=mine) is False

        assert mine.conquered is True
        assert len(game_log.get_entries(kind=EntryKind.TRANSITION)) == 1

    def test_victory_without_site(self, conquest, hero):
        assert conquest.on_combat_end(CombatOutcome(True, [CRYSTAL_GUARDIAN])) is False
        assert hero.fame == CRYSTAL_GUARDIAN.fame

    def test_outcome_fame_sums_enemies(self):
        assert CombatOutcome(True, [MINE_OVERSEER, CRYSTAL_GUARDIAN]).fame == 8


# =============================================================================
# INTERACTION FLOW
# =============================================================================


class TestSiteInteractionManager:

    def test_full_mine_cycle(self, interaction, mine, combat, hero, game_log):
        hex_pos = HexCoord(2, -1)

        visit = interaction.visit_site(mine, hex_pos)
        assert [o.id for o in visit.options] == ["conquer_mine"]
        assert interaction.select_option("conquer_mine").success is True

        enemy = combat.initiate_combat.call_args[0][0]
        interaction.conquest.on_combat_end(CombatOutcome(True, [enemy]))
        assert mine.conquered is True

        visit = interaction.visit_site(mine, hex_pos)
        assert [o.id for o in visit.options] == ["collect_crystal"]
        result = interaction.select_option("collect_crystal")

        assert result.success is True
        assert hero.movement_points == 4
        assert hero.total_crystals() == 1
        assert game_log.get_entries(level=LogLevel.SUCCESS)

    def test_select_without_visit(self, interaction):
        result = interaction.select_option("conquer_mine")
        assert result.success is False

    def test_snapshot_used_once(self, interaction, mine, combat):
        interaction.visit_site(mine)
        interaction.select_option("conquer_mine")

        assert interaction.current_visit is None
        assert interaction.select_option("conquer_mine").success is False
        assert combat.initiate_combat.call_count == 1

    def test_unknown_id_keeps_visit(self, interaction, mine, combat):
        interaction.visit_site(mine)

        result = interaction.select_option("conquer_mien")

        assert result.success is False
        assert "conquer_mien" in result.message
        assert interaction.current_visit is not None
        assert interaction.select_option("conquer_mine").success is True
        combat.initiate_combat.assert_called_once()

    def test_disabled_collect_reports_movement(self, interaction, conquered_mine, hero):
        hero.movement_points = 0
        interaction.visit_site(conquered_mine)

        result = interaction.select_option("collect_crystal")

        assert result.message == "Zu wenig Bewegung."

    def test_disabled_option_leaves_state(self, interaction, conquered_mine, hero):
        hero.movement_points = 0
        visit = interaction.visit_site(conquered_mine)

        assert visit.options[0].enabled is False
        assert interaction.select_option("collect_crystal").success is False
        assert hero.total_crystals() == 0

    def test_visit_sets_current_site(self, interaction, mine):
        interaction.visit_site(mine)
        assert interaction.conquest.current_site is mine

        interaction.leave_site()
        assert interaction.conquest.current_site is None
        assert interaction.current_visit is None

    def test_visit_to_dict(self, interaction, mine):
        data = interaction.visit_site(mine, HexCoord(1, 2)).to_dict()

        assert data["type"] == "mine"
        assert data["hex"] == [1, 2]
        assert data["options"] == [
            {"id": "conquer_mine", "label": "Mine erobern (Wächter besiegen)", "enabled": True}
        ]

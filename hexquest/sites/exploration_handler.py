"""
Exploration site handler.

Dungeons, ruins, tombs, labyrinths and spawning grounds are one-shot
sites: while unconquered they offer a single fight, afterwards they are
looted and offer nothing.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from hexquest.data_models import HexCoord
from hexquest.encounter.encounter_tables import (
    DUNGEON_TABLE,
    LABYRINTH_TABLES,
    RUINS_TABLE,
    SPAWNING_TABLES,
    TOMB_TABLE,
    EncounterTable,
    roll_encounter_group,
)
from hexquest.observability.game_log import LogLevel
from hexquest.sites.site_context import SiteContext
from hexquest.sites.site_handler import execute_option
from hexquest.sites.site_models import ActionResult, Site, SiteOption, SiteType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExplorationSpec:
    """How one exploration site type is presented and rolled."""
    option_id: str
    label: str
    looted_label: str
    tables: tuple[EncounterTable, ...]
    narration: str  # formatted with {enemy} or {count}
    result_message: str


EXPLORATION_SPECS: dict[SiteType, ExplorationSpec] = {
    SiteType.DUNGEON: ExplorationSpec(
        option_id="explore_dungeon",
        label="Verlies erkunden (Gefährlicher Kampf)",
        looted_label="Verlies bereits geplündert",
        tables=(DUNGEON_TABLE,),
        narration="Du betrittst das Dunkel... {enemy} greift an!",
        result_message="Verlies betreten!",
    ),
    SiteType.RUINS: ExplorationSpec(
        option_id="explore_ruin",
        label="Ruine erkunden (Herausfordernder Kampf)",
        looted_label="Ruine bereits geplündert",
        tables=(RUINS_TABLE,),
        narration="Du untersuchst die Trümmer... {enemy} erscheint!",
        result_message="Ruine betreten!",
    ),
    SiteType.TOMB: ExplorationSpec(
        option_id="explore_tomb",
        label="Grabstätte erkunden (Untote Gegner)",
        looted_label="Grabstätte bereits geplündert",
        tables=(TOMB_TABLE,),
        narration="Die Krypta öffnet sich... {enemy} erhebt sich!",
        result_message="Grabstätte betreten!",
    ),
    SiteType.LABYRINTH: ExplorationSpec(
        option_id="explore_labyrinth",
        label="Labyrinth betreten (Mehrere Kämpfe)",
        looted_label="Labyrinth bereits durchquert",
        tables=LABYRINTH_TABLES,
        narration="Du betrittst das Labyrinth... {count} Feinde blockieren den Weg!",
        result_message="Labyrinth betreten!",
    ),
    SiteType.SPAWNING_GROUNDS: ExplorationSpec(
        option_id="explore_spawning",
        label="Brutstätte angreifen (Monsterwellen)",
        looted_label="Brutstätte bereits gesäubert",
        tables=SPAWNING_TABLES,
        narration="Die Brutstätte ist voller Monster... Eine Welle von {count} Gegnern greift an!",
        result_message="Brutstätte betreten!",
    ),
}


class ExplorationHandler:
    """Options and actions for one-shot exploration sites."""

    site_types = tuple(EXPLORATION_SPECS)

    def __init__(self, context: SiteContext):
        self.context = context

    def get_options(
        self,
        site: Site,
        current_hex: Optional[HexCoord] = None,
    ) -> list[SiteOption]:
        spec = EXPLORATION_SPECS.get(site.site_type)
        if spec is None:
            return []

        if site.conquered:
            return [SiteOption(
                id="looted",
                label=spec.looted_label,
                action=lambda: ActionResult(False, spec.looted_label),
                enabled=False,
            )]

        return [SiteOption(
            id=spec.option_id,
            label=spec.label,
            action=lambda: self.explore(site),
            enabled=True,
        )]

    def execute_action(
        self,
        site: Site,
        option_id: str,
        current_hex: Optional[HexCoord] = None,
    ) -> ActionResult:
        return execute_option(self.get_options(site, current_hex), option_id)

    def explore(self, site: Site) -> ActionResult:
        """
        Roll the site's guardians and hand them to the combat boundary.

        Single-table sites pass one archetype, multi-table sites pass a
        list with one archetype per table.
        """
        spec = EXPLORATION_SPECS[site.site_type]
        enemies = roll_encounter_group(spec.tables, self.context.dice)

        self.context.game_log.add(
            spec.narration.format(enemy=enemies[0].name, count=len(enemies)),
            LogLevel.WARNING,
            context={"site": site.site_id, "enemies": [e.name for e in enemies]},
        )
        if len(enemies) == 1:
            self.context.combat.initiate_combat(enemies[0])
        else:
            self.context.combat.initiate_combat(enemies)
        return ActionResult(True, spec.result_message, {"enemies": [e.name for e in enemies]})

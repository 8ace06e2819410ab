"""
Mine site handler.

A mine has two states:
- Unconquered: the only option is to attack its guardian
- Conquered: the hero may spend 1 movement point to mine a crystal

The Unconquered -> Conquered transition is not made here. It happens
when the combat engine reports a victory (see ConquestTracker).
"""

import logging
from typing import Optional

from hexquest.data_models import CRYSTAL_PALETTE, HexCoord
from hexquest.encounter.encounter_tables import MINE_TABLE
from hexquest.observability.game_log import LogLevel
from hexquest.sites.site_context import SiteContext
from hexquest.sites.site_handler import execute_option
from hexquest.sites.site_models import ActionResult, Site, SiteOption, SiteType

logger = logging.getLogger(__name__)


COLLECT_MOVEMENT_COST = 1
NOT_ENOUGH_MOVEMENT = "Zu wenig Bewegung."


class MineHandler:
    """Options and actions for mine sites."""

    site_types = (SiteType.MINE,)

    def __init__(self, context: SiteContext):
        self.context = context

    def get_options(
        self,
        site: Site,
        current_hex: Optional[HexCoord] = None,
    ) -> list[SiteOption]:
        """Build the option list for the mine's current state."""
        if site.conquered:
            can_collect = self.context.hero.movement_points >= COLLECT_MOVEMENT_COST
            return [SiteOption(
                id="collect_crystal",
                label="Kristall abbauen (1 Bewegung)",
                action=lambda: self.collect_mine_crystal(current_hex),
                enabled=can_collect,
                help=None if can_collect else NOT_ENOUGH_MOVEMENT,
            )]

        return [SiteOption(
            id="conquer_mine",
            label="Mine erobern (Wächter besiegen)",
            action=self.attack_mine,
            enabled=True,
        )]

    def execute_action(
        self,
        site: Site,
        option_id: str,
        current_hex: Optional[HexCoord] = None,
    ) -> ActionResult:
        return execute_option(self.get_options(site, current_hex), option_id)

    def attack_mine(self) -> ActionResult:
        """
        Start a fight against the mine's guardian.

        Always succeeds at the trigger level; the fight itself is resolved
        by the combat boundary.
        """
        enemy = MINE_TABLE.roll(self.context.dice)

        self.context.game_log.add(
            f"Du willst die Mine erobern... {enemy.name} stellt sich dir in den Weg!",
            LogLevel.WARNING,
            context={"enemy": enemy.name, "enemy_type": enemy.enemy_type.value},
        )
        self.context.combat.initiate_combat(enemy)
        return ActionResult(True, "Angriff auf Mine!", {"enemy": enemy.name})

    def collect_mine_crystal(self, current_hex: Optional[HexCoord] = None) -> ActionResult:
        """
        Mine one random crystal for 1 movement point.

        Fails without touching hero state when movement is insufficient.
        """
        hero = self.context.hero
        if hero.movement_points < COLLECT_MOVEMENT_COST:
            return ActionResult(False, NOT_ENOUGH_MOVEMENT)

        color = self.context.dice.choice(CRYSTAL_PALETTE, "mine crystal color")
        stored = hero.gain_crystal(color)
        hero.spend_movement(COLLECT_MOVEMENT_COST)

        msg = f"Du hast einen {color.value.upper()}-Kristall abgebaut!"
        self.context.game_log.add(msg, LogLevel.SUCCESS, context={"color": color.value})
        if not stored:
            self.context.game_log.add(
                f"Dein Lager für {color.value.upper()}-Kristalle ist voll.",
                LogLevel.INFO,
            )

        if current_hex is not None and self.context.has_visual_feedback:
            self._show_crystal_effect(current_hex, color.value)

        return ActionResult(True, msg, {"color": color.value, "stored": stored})

    def _show_crystal_effect(self, current_hex: HexCoord, color: str) -> None:
        """Best-effort particle cue; failures never reach the player."""
        try:
            point = self.context.projection.axial_to_pixel(current_hex.q, current_hex.r)
            self.context.visual_feedback.buff_effect(point.x, point.y, color)
        except Exception as e:
            logger.debug(f"Crystal effect at {current_hex} failed: {e}")

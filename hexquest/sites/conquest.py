"""
Conquest transitions for sites.

The combat engine reports the end of every fight here. A victory at an
unconquered site flips it to conquered exactly once; a defeat leaves the
site untouched. Site handlers never call Site.conquer() themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from hexquest.data_models import EnemyArchetype
from hexquest.heroes.hero_state import Hero
from hexquest.observability.game_log import GameLog, LogLevel
from hexquest.sites.site_models import Site

logger = logging.getLogger(__name__)


@dataclass
class CombatOutcome:
    """What the combat engine reports back when a fight ends."""
    victory: bool
    enemies: list[EnemyArchetype] = field(default_factory=list)

    @property
    def fame(self) -> int:
        return sum(e.fame for e in self.enemies)


class ConquestTracker:
    """
    Receives combat outcomes and applies the Unconquered -> Conquered
    transition to the site the fight was started from.
    """

    def __init__(self, hero: Hero, game_log: GameLog):
        self.hero = hero
        self.game_log = game_log
        self._current_site: Optional[Site] = None

    @property
    def current_site(self) -> Optional[Site]:
        return self._current_site

    def set_current_site(self, site: Optional[Site]) -> None:
        self._current_site = site

    def on_combat_end(self, outcome: CombatOutcome, site: Optional[Site] = None) -> bool:
        """
        Apply a combat outcome.

        Args:
            outcome: Result reported by the combat engine
            site: Site the fight belongs to (defaults to the current site)

        Returns:
            True if a site changed to conquered
        """
        if not outcome.victory:
            logger.info("Combat lost; site state unchanged")
            return False

        for enemy in outcome.enemies:
            self.game_log.add(f"Sieg über {enemy.name}!", LogLevel.SUCCESS)
        if outcome.fame:
            self.hero.gain_fame(outcome.fame)
            self.game_log.add(f"+{outcome.fame} Ruhm", LogLevel.INFO)

        site = site or self._current_site
        if site is None or site.conquered:
            return False

        site.conquer()
        self.game_log.log_transition(
            subject=site.site_id,
            from_state="unconquered",
            to_state="conquered",
            trigger="combat_victory",
        )
        self.game_log.add(f"{site.name} erobert!", LogLevel.SUCCESS)
        return True

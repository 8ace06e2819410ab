"""
Site interaction flow.

The board calls visit_site() when the hero stands on a site, shows the
returned options, and calls select_option() with the player's choice.
Each option snapshot is used for one selection only; call visit_site()
again afterwards to get options that reflect the new state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from hexquest.data_models import HexCoord
from hexquest.sites.conquest import ConquestTracker
from hexquest.sites.handler_registry import SiteHandlerRegistry
from hexquest.sites.site_handler import execute_option
from hexquest.sites.site_models import ActionResult, Site, SiteOption

logger = logging.getLogger(__name__)


@dataclass
class SiteVisit:
    """Snapshot of a site and the options available when it was visited."""
    site: Site
    current_hex: Optional[HexCoord] = None
    options: list[SiteOption] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "site_id": self.site.site_id,
            "type": self.site.site_type.value,
            "name": self.site.name,
            "conquered": self.site.conquered,
            "hex": None if self.current_hex is None else [self.current_hex.q, self.current_hex.r],
            "options": [
                {"id": o.id, "label": o.label, "enabled": o.enabled}
                for o in self.options
            ],
        }


class SiteInteractionManager:
    """Connects the board, the handler registry and conquest tracking."""

    def __init__(self, registry: SiteHandlerRegistry, conquest: ConquestTracker):
        self.registry = registry
        self.conquest = conquest
        self._visit: Optional[SiteVisit] = None

    @property
    def current_visit(self) -> Optional[SiteVisit]:
        return self._visit

    def visit_site(self, site: Site, current_hex: Optional[HexCoord] = None) -> SiteVisit:
        """Enter a site and snapshot its options."""
        self.conquest.set_current_site(site)
        self._visit = SiteVisit(
            site=site,
            current_hex=current_hex,
            options=self.registry.get_options(site, current_hex),
        )
        logger.debug(f"Visiting {site.site_id}: {[o.id for o in self._visit.options]}")
        return self._visit

    def select_option(self, option_id: str) -> ActionResult:
        """
        Run an option from the current snapshot.

        The snapshot is consumed once an option with that id is found; its
        enabled flags may be stale after the action has changed hero or
        site state. An unknown id leaves the visit in place.
        """
        if self._visit is None:
            return ActionResult(False, "Kein Ort ausgewählt.")
        visit = self._visit
        if not any(o.id == option_id for o in visit.options):
            return ActionResult(False, f"Unbekannte Aktion: {option_id}")
        self._visit = None
        return execute_option(visit.options, option_id)

    def leave_site(self) -> None:
        self._visit = None
        self.conquest.set_current_site(None)

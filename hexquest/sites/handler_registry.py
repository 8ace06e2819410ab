"""
Site handler registry.

All site handlers are registered here keyed by site type, so the board
can ask for options and run actions without knowing which handler
serves which site.
"""

from __future__ import annotations

import logging
from typing import Optional

from hexquest.data_models import HexCoord
from hexquest.sites.exploration_handler import ExplorationHandler
from hexquest.sites.mine_handler import MineHandler
from hexquest.sites.site_context import SiteContext
from hexquest.sites.site_handler import SiteHandler
from hexquest.sites.site_models import ActionResult, Site, SiteOption, SiteType

logger = logging.getLogger(__name__)


class SiteHandlerRegistry:
    """
    Central registry mapping site types to handlers.

    Provides:
    - Handler lookup by site type
    - Option generation
    - Action execution routing
    """

    def __init__(self) -> None:
        self._handlers: dict[SiteType, SiteHandler] = {}

    def register(self, handler: SiteHandler, site_types: Optional[tuple[SiteType, ...]] = None) -> None:
        """Register a handler for its site types (or an explicit subset)."""
        for site_type in site_types or handler.site_types:
            if site_type in self._handlers:
                logger.warning(f"Replacing handler for site type {site_type.value}")
            self._handlers[SiteType(site_type)] = handler

    def get(self, site_type: SiteType) -> Optional[SiteHandler]:
        return self._handlers.get(site_type)

    def site_types(self) -> list[SiteType]:
        return list(self._handlers)

    def get_options(
        self,
        site: Site,
        current_hex: Optional[HexCoord] = None,
    ) -> list[SiteOption]:
        """Options for a site. Sites without a handler offer nothing."""
        handler = self.get(site.site_type)
        if handler is None:
            logger.debug(f"No handler for site type {site.site_type.value}")
            return []
        return handler.get_options(site, current_hex)

    def execute(
        self,
        site: Site,
        option_id: str,
        current_hex: Optional[HexCoord] = None,
    ) -> ActionResult:
        """
        Execute an option by id against the site's current state.

        Returns a failed ActionResult for unknown site types or options.
        """
        handler = self.get(site.site_type)
        if handler is None:
            return ActionResult(False, f"Keine Aktionen für {site.name}.")
        return handler.execute_action(site, option_id, current_hex)


def build_default_registry(context: SiteContext) -> SiteHandlerRegistry:
    """Create a registry with all built-in handlers sharing one context."""
    registry = SiteHandlerRegistry()
    registry.register(MineHandler(context))
    registry.register(ExplorationHandler(context))
    return registry

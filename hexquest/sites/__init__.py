"""
Site interaction system.

This module provides per-site-type handlers, the registry that dispatches
to them, and the conquest transition driven by combat outcomes.
"""

from hexquest.sites.site_models import (
    ActionResult,
    Site,
    SiteInfo,
    SiteOption,
    SiteType,
    SITE_INFO,
)
from hexquest.sites.site_context import (
    CombatBoundary,
    CoordinateProjection,
    SiteContext,
    VisualFeedback,
)
from hexquest.sites.site_handler import SiteHandler, execute_option
from hexquest.sites.mine_handler import MineHandler
from hexquest.sites.exploration_handler import ExplorationHandler, EXPLORATION_SPECS
from hexquest.sites.handler_registry import SiteHandlerRegistry, build_default_registry
from hexquest.sites.conquest import CombatOutcome, ConquestTracker
from hexquest.sites.site_interaction import SiteInteractionManager, SiteVisit

__all__ = [
    # Models
    "ActionResult",
    "Site",
    "SiteInfo",
    "SiteOption",
    "SiteType",
    "SITE_INFO",
    # Collaborators
    "CombatBoundary",
    "CoordinateProjection",
    "SiteContext",
    "VisualFeedback",
    # Handlers
    "SiteHandler",
    "execute_option",
    "MineHandler",
    "ExplorationHandler",
    "EXPLORATION_SPECS",
    "SiteHandlerRegistry",
    "build_default_registry",
    # Conquest and interaction flow
    "CombatOutcome",
    "ConquestTracker",
    "SiteInteractionManager",
    "SiteVisit",
]

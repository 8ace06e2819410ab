"""
Site types for HexQuest.

These types are deliberately UI-agnostic:
- a CLI can render SiteOption lists as numbered choices
- a board UI can render them as buttons, greying out disabled ones
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional
import itertools


class SiteType(str, Enum):
    """Site-type tags used to pick a site handler."""
    MINE = "mine"
    DUNGEON = "dungeon"
    RUINS = "ruins"
    TOMB = "tomb"
    LABYRINTH = "labyrinth"
    SPAWNING_GROUNDS = "spawning_grounds"
    KEEP = "keep"
    MAGE_TOWER = "mage_tower"
    VILLAGE = "village"
    MONASTERY = "monastery"


@dataclass(frozen=True)
class SiteInfo:
    name: str
    icon: str
    color: str


SITE_INFO: dict[SiteType, SiteInfo] = {
    SiteType.MINE: SiteInfo("Mine", "mining", "#d97706"),
    SiteType.DUNGEON: SiteInfo("Dungeon", "dungeon", "#374151"),
    SiteType.RUINS: SiteInfo("Ruinen", "ruins", "#d1d5db"),
    SiteType.TOMB: SiteInfo("Grabmal", "tomb", "#4b5563"),
    SiteType.LABYRINTH: SiteInfo("Labyrinth", "maze", "#059669"),
    SiteType.SPAWNING_GROUNDS: SiteInfo("Brutstätte", "skull", "#7f1d1d"),
    SiteType.KEEP: SiteInfo("Burg", "🏰", "#9ca3af"),
    SiteType.MAGE_TOWER: SiteInfo("Magierturm", "tower", "#8b5cf6"),
    SiteType.VILLAGE: SiteInfo("Dorf", "🏠", "#fbbf24"),
    SiteType.MONASTERY: SiteInfo("Kloster", "⛪", "#f87171"),
}

_site_ids = itertools.count(1)


@dataclass
class Site:
    """
    A map location with a conquest state.

    conquered starts False and only ever becomes True through conquer(),
    which the combat outcome handling calls after a victory.
    """
    site_type: SiteType
    site_id: str = ""
    name: str = ""
    _conquered: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        self.site_type = SiteType(self.site_type)
        if not self.site_id:
            self.site_id = f"{self.site_type.value}_{next(_site_ids)}"
        if not self.name:
            self.name = SITE_INFO[self.site_type].name

    @property
    def conquered(self) -> bool:
        return self._conquered

    @property
    def info(self) -> SiteInfo:
        return SITE_INFO[self.site_type]

    def conquer(self) -> bool:
        """
        Mark the site as conquered.

        Returns:
            True if this call changed the state, False if already conquered
        """
        if self._conquered:
            return False
        self._conquered = True
        return True


@dataclass(frozen=True)
class ActionResult:
    """Uniform outcome of executing a site option."""
    success: bool
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message, **self.details}


@dataclass(frozen=True)
class SiteOption:
    """
    A player choice offered at a site.

    enabled is computed when the option list is generated and is not
    re-evaluated later. Regenerate options after any state change.
    """
    id: str
    label: str
    action: Callable[[], ActionResult]
    enabled: bool = True
    help: Optional[str] = None

    def execute(self) -> ActionResult:
        """
        Run the option's action unless it was generated disabled.

        A disabled option reports its help text as the reason when it has one.
        """
        if not self.enabled:
            return ActionResult(False, self.help or f"{self.label}: nicht verfügbar.")
        return self.action()

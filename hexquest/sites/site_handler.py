"""
Site handler capability.

A site handler turns a site's current state into a list of options and
executes the one the player picks. There is one handler per site type;
handlers are composed through SiteHandlerRegistry rather than a class
hierarchy.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from hexquest.data_models import HexCoord
from hexquest.sites.site_models import ActionResult, Site, SiteOption, SiteType


@runtime_checkable
class SiteHandler(Protocol):
    """Protocol implemented by every site handler."""

    site_types: tuple[SiteType, ...]

    def get_options(
        self,
        site: Site,
        current_hex: Optional[HexCoord] = None,
    ) -> list[SiteOption]:
        ...

    def execute_action(
        self,
        site: Site,
        option_id: str,
        current_hex: Optional[HexCoord] = None,
    ) -> ActionResult:
        ...


def execute_option(options: Sequence[SiteOption], option_id: str) -> ActionResult:
    """
    Run the option with the given id from a freshly generated list.

    Unknown ids and disabled options produce a failed ActionResult.
    """
    option = next((o for o in options if o.id == option_id), None)
    if option is None:
        return ActionResult(False, f"Unbekannte Aktion: {option_id}")
    return option.execute()

"""
Collaborator contracts used by site handlers.

Site handlers never talk to rendering or the combat engine directly.
They receive a SiteContext bundling the hero, the game log, the combat
boundary and the optional visual helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, Union, runtime_checkable

from hexquest.data_models import DiceRoller, EnemyArchetype, PixelPoint, get_dice_roller
from hexquest.heroes.hero_state import Hero
from hexquest.observability.game_log import GameLog


@runtime_checkable
class CombatBoundary(Protocol):
    """
    Protocol for the external combat engine.

    initiate_combat() is fire-and-trust: the outcome is reported later
    through ConquestTracker.on_combat_end().
    """

    def initiate_combat(
        self,
        enemies: Union[EnemyArchetype, Sequence[EnemyArchetype]],
    ) -> None:
        ...


@runtime_checkable
class CoordinateProjection(Protocol):
    """Protocol for the board's axial-to-pixel projection."""

    def axial_to_pixel(self, q: int, r: int) -> PixelPoint:
        ...


@runtime_checkable
class VisualFeedback(Protocol):
    """Protocol for optional particle/visual cues."""

    def buff_effect(self, x: float, y: float, color: str) -> None:
        ...


@dataclass
class SiteContext:
    """
    Everything a site handler may read or mutate during an action.

    visual_feedback and projection are optional. Handlers check
    has_visual_feedback before using them.
    """
    hero: Hero
    game_log: GameLog
    combat: CombatBoundary
    projection: Optional[CoordinateProjection] = None
    visual_feedback: Optional[VisualFeedback] = None
    dice: DiceRoller = field(default_factory=get_dice_roller)

    @property
    def has_visual_feedback(self) -> bool:
        return self.visual_feedback is not None and self.projection is not None

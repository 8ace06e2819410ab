"""
Pytest fixtures for the HexQuest test suite.

Provides reusable fixtures for dice, heroes, the game log and mocked
external collaborators (combat engine, projection, visual effects).
"""

import pytest
from unittest.mock import MagicMock

from hexquest.data_models import DiceRoller, PixelPoint
from hexquest.heroes.hero_state import Hero
from hexquest.observability.game_log import GameLog
from hexquest.sites import (
    ConquestTracker,
    MineHandler,
    Site,
    SiteContext,
    SiteType,
    build_default_registry,
)


class ScriptedRandom:
    """Random source that replays fixed values, cycling when exhausted."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def scripted_dice():
    """Factory for DiceRollers that return the given draws in order."""
    def _make(*values: float) -> DiceRoller:
        return DiceRoller(source=ScriptedRandom(values))
    return _make


# =============================================================================
# HERO AND LOG FIXTURES
# =============================================================================


@pytest.fixture
def hero():
    """A Goldyx hero with 5 movement points."""
    return Hero(hero_class="GOLDYX", movement_points=5)


@pytest.fixture
def game_log():
    return GameLog()


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def combat():
    """Mock combat boundary."""
    return MagicMock()


@pytest.fixture
def projection():
    """Mock hex projection that always returns (100, 100)."""
    mock = MagicMock()
    mock.axial_to_pixel.return_value = PixelPoint(100, 100)
    return mock


@pytest.fixture
def visual_feedback():
    return MagicMock()


@pytest.fixture
def context(hero, game_log, combat, projection, visual_feedback, seeded_dice):
    """Site context with every collaborator present."""
    return SiteContext(
        hero=hero,
        game_log=game_log,
        combat=combat,
        projection=projection,
        visual_feedback=visual_feedback,
        dice=seeded_dice,
    )


@pytest.fixture
def mine_handler(context):
    return MineHandler(context)


@pytest.fixture
def registry(context):
    return build_default_registry(context)


@pytest.fixture
def conquest(hero, game_log):
    return ConquestTracker(hero, game_log)


# =============================================================================
# SITE FIXTURES
# =============================================================================


@pytest.fixture
def mine():
    """An unconquered mine."""
    return Site(SiteType.MINE)


@pytest.fixture
def conquered_mine():
    site = Site(SiteType.MINE)
    site.conquer()
    return site

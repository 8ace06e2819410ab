"""
HexQuest - Main Entry Point

Runs a scripted demo session of the site interaction subsystem: a hero
picks skills, conquers a mine and mines crystals from it.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from hexquest.data_models import DiceRoller, EnemyArchetype, HexCoord
from hexquest.heroes.hero_state import Hero
from hexquest.observability.game_log import GameLog
from hexquest.skills.skill_catalog import DEFAULT_SKILL_OFFER, get_skill_catalog
from hexquest.sites import (
    CombatOutcome,
    ConquestTracker,
    Site,
    SiteContext,
    SiteInteractionManager,
    SiteType,
    build_default_registry,
)


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GameConfig:
    """Configuration for a demo session."""

    seed: Optional[int] = None
    hero_class: str = "GOLDYX"
    movement_points: int = 4
    skill_choices: int = DEFAULT_SKILL_OFFER

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        if self.movement_points < 0:
            raise ValueError("movement_points must be >= 0")
        if self.skill_choices < 0:
            raise ValueError("skill_choices must be >= 0")


# =============================================================================
# DEMO SESSION
# =============================================================================

class PendingCombat:
    """
    Stand-in combat boundary that queues fights for the demo.

    A real combat engine resolves the fight asynchronously and reports
    back through ConquestTracker.on_combat_end().
    """

    def __init__(self) -> None:
        self.pending: list[EnemyArchetype] = []

    def initiate_combat(
        self,
        enemies: Union[EnemyArchetype, Sequence[EnemyArchetype]],
    ) -> None:
        if isinstance(enemies, EnemyArchetype):
            enemies = [enemies]
        self.pending = list(enemies)
        logger.info(f"Combat started against {[e.name for e in self.pending]}")

    def take(self) -> list[EnemyArchetype]:
        enemies, self.pending = self.pending, []
        return enemies


@dataclass
class DemoSession:
    config: GameConfig
    hero: Hero
    game_log: GameLog
    combat: PendingCombat
    conquest: ConquestTracker
    interaction: SiteInteractionManager
    dice: DiceRoller


def create_demo_session(config: GameConfig) -> DemoSession:
    """Wire a hero, log, registry and conquest tracker together."""
    dice = DiceRoller(seed=config.seed)
    hero = Hero(hero_class=config.hero_class, movement_points=config.movement_points)
    game_log = GameLog()
    combat = PendingCombat()

    context = SiteContext(hero=hero, game_log=game_log, combat=combat, dice=dice)
    conquest = ConquestTracker(hero, game_log)
    interaction = SiteInteractionManager(build_default_registry(context), conquest)

    return DemoSession(
        config=config,
        hero=hero,
        game_log=game_log,
        combat=combat,
        conquest=conquest,
        interaction=interaction,
        dice=dice,
    )


def run_demo(session: DemoSession) -> None:
    """Skill offer, mine conquest and crystal mining."""
    hero = session.hero

    offer = get_skill_catalog().get_random_skills(
        hero.hero_class, session.config.skill_choices, dice=session.dice
    )
    print(f"\nSkill offer for {hero.hero_class}: {[s.name for s in offer]}")
    if offer:
        hero.add_skill(offer[0])

    mine = Site(SiteType.MINE)
    hex_pos = HexCoord(2, -1)

    visit = session.interaction.visit_site(mine, hex_pos)
    print(f"\n{mine.name} {hex_pos}: {[o.label for o in visit.options]}")
    result = session.interaction.select_option("conquer_mine")
    print(f"  -> {result.message}")

    # Let the guardian lose
    session.conquest.on_combat_end(
        CombatOutcome(victory=True, enemies=session.combat.take())
    )

    while True:
        visit = session.interaction.visit_site(mine, hex_pos)
        option = visit.options[0]
        if not option.enabled:
            print(f"  {option.label}: nicht verfügbar")
            break
        result = session.interaction.select_option(option.id)
        print(f"  -> {result.message}")

    print(f"\nCrystals: { {c.value: n for c, n in hero.get_crystals().items()} }")
    print(f"Fame: {hero.fame}, Movement left: {hero.movement_points}")
    print("\n=== Game Log ===")
    print(session.game_log.format_log())


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="HexQuest - site interaction demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m hexquest.main                    # Run the demo
  python -m hexquest.main --seed 42          # Reproducible demo
  python -m hexquest.main --hero norowas -v  # Other hero, debug logging
        """
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for all random draws",
    )
    parser.add_argument(
        "--hero",
        type=str,
        default="GOLDYX",
        help="Hero class (default: GOLDYX)",
    )
    parser.add_argument(
        "--movement",
        type=int,
        default=4,
        help="Starting movement points (default: 4)",
    )
    parser.add_argument(
        "--skills",
        type=int,
        default=DEFAULT_SKILL_OFFER,
        help=f"Number of skills offered (default: {DEFAULT_SKILL_OFFER})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GameConfig:
    """Create GameConfig from parsed arguments."""
    return GameConfig(
        seed=args.seed,
        hero_class=args.hero,
        movement_points=args.movement,
        skill_choices=args.skills,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    print("=" * 60)
    print("HEXQUEST SITE DEMO v0.1.0")
    print("=" * 60)

    config = create_config_from_args(args)
    run_demo(create_demo_session(config))


if __name__ == "__main__":
    main()

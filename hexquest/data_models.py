"""
Shared data structures for HexQuest site interaction.

These structures are shared between the site handlers, the skill catalog
and the hero model. All randomness used by game mechanics goes through
the DiceRoller defined here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Protocol, Sequence
import random


# =============================================================================
# ENUMS
# =============================================================================


class CrystalColor(str, Enum):
    """The fixed crystal palette a hero can collect."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"


CRYSTAL_PALETTE: tuple[CrystalColor, ...] = (
    CrystalColor.RED,
    CrystalColor.GREEN,
    CrystalColor.BLUE,
    CrystalColor.WHITE,
)


class SkillKind(str, Enum):
    """Whether a skill is always on or must be activated."""
    PASSIVE = "passive"
    ACTIVE = "active"


class EnemyType(str, Enum):
    """Closed set of enemy archetype tags spawned by sites."""
    ORC_SUMMONER = "orc_summoner"
    GOLEM_SMALL = "golem_small"
    ELEMENTAL = "elemental"
    DRACONUM = "draconum"
    NECROMANCER = "necromancer"
    RUIN_GUARD = "ruin_guard"
    VAMPIRE = "vampire"
    PHANTOM = "phantom"
    SKELETON = "skeleton"
    MAGE = "mage"
    GOLEM = "golem"
    ORC_KHAN = "orc_khan"
    SPIDER_QUEEN = "spider_queen"
    ORC_HORDE = "orc_horde"
    RAT = "rat"


class AttackType(str, Enum):
    """Element of an enemy attack."""
    PHYSICAL = "physical"
    FIRE = "fire"
    ICE = "ice"


# =============================================================================
# HEX COORDINATES
# =============================================================================


@dataclass(frozen=True)
class HexCoord:
    """Axial hex coordinate."""
    q: int
    r: int

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


@dataclass(frozen=True)
class PixelPoint:
    """Screen position produced by a coordinate projection."""
    x: float
    y: float


# =============================================================================
# ENEMIES
# =============================================================================


@dataclass(frozen=True)
class EnemyArchetype:
    """
    Immutable enemy template used to start an encounter.

    Archetypes are selected from encounter tables and handed to the combat
    boundary as-is. The combat engine builds its own runtime unit from them.
    """
    name: str
    armor: int
    attack: int
    fame: int
    icon: str
    enemy_type: EnemyType
    color: str
    attack_type: AttackType = AttackType.PHYSICAL

    # Resistances and special traits
    physical_resist: bool = False
    fire_resist: bool = False
    ice_resist: bool = False
    fortified: bool = False
    summoner: bool = False
    poison: bool = False
    swift: bool = False
    brutal: bool = False
    vampiric: bool = False

    def __post_init__(self):
        for stat in ("armor", "attack", "fame"):
            if getattr(self, stat) < 0:
                raise ValueError(f"{self.name}: {stat} must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the combat boundary or UI."""
        return {
            "name": self.name,
            "armor": self.armor,
            "attack": self.attack,
            "fame": self.fame,
            "icon": self.icon,
            "type": self.enemy_type.value,
            "color": self.color,
            "attack_type": self.attack_type.value,
            "physical_resist": self.physical_resist,
            "fire_resist": self.fire_resist,
            "ice_resist": self.ice_resist,
            "fortified": self.fortified,
            "summoner": self.summoner,
            "poison": self.poison,
            "swift": self.swift,
            "brutal": self.brutal,
            "vampiric": self.vampiric,
        }


# =============================================================================
# SKILLS
# =============================================================================


@dataclass(frozen=True)
class Skill:
    """A class-scoped ability a hero may acquire."""
    skill_id: str
    name: str
    kind: SkillKind
    icon: str
    description: str


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0)."""

    def random(self) -> float:
        ...


@dataclass
class RollRecord:
    """A single logged random draw."""
    reason: str
    value: float
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.reason}: {self.value:.4f}"


class DiceRoller:
    """
    Randomization interface for game mechanics.

    Every draw goes through random() so that a scripted source can force
    exact branches in tests. Draws are recorded for debugging and replay.

    Usage:
        dice = DiceRoller(seed=42)
        dice.choice(CRYSTAL_PALETTE, "mine crystal")

        # Deterministic branches in tests
        dice = DiceRoller(source=scripted_source)
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the roller.

        Args:
            source: Object providing random() -> float in [0, 1).
                A random.Random is created if None.
            seed: Seed for the default source (ignored if source is given)
        """
        self._source: RandomSource = source if source is not None else random.Random(seed)
        self._seed = seed if source is None else None
        self._roll_log: list[RollRecord] = []

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self, reason: str = "") -> float:
        """Return a uniform float in [0.0, 1.0) and log it."""
        value = self._source.random()
        self._roll_log.append(RollRecord(reason=reason, value=value))
        return value

    def randbelow(self, n: int, reason: str = "") -> int:
        """Return a uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError("randbelow() requires n > 0")
        # Clamp guards against sources that return exactly 1.0
        return min(int(self.random(reason) * n), n - 1)

    def choice(self, seq: Sequence[Any], reason: str = "") -> Any:
        """
        Choose a random element from a non-empty sequence.

        Raises:
            IndexError: If sequence is empty
        """
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq), reason or f"choice from {len(seq)} options")]

    def sample(self, seq: Sequence[Any], k: int, reason: str = "") -> list[Any]:
        """
        Draw up to k distinct elements using a partial Fisher-Yates shuffle.

        If k exceeds the sequence length every element is returned in
        shuffled order. The input is never modified.
        """
        pool = list(seq)
        k = max(0, min(k, len(pool)))
        for i in range(k):
            j = i + self.randbelow(len(pool) - i, reason or f"sample position {i}")
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]

    def shuffle(self, x: list, reason: str = "") -> None:
        """Shuffle list x in place."""
        x[:] = self.sample(x, len(x), reason)

    def get_roll_log(self) -> list[RollRecord]:
        """Get all draws made through this roller."""
        return self._roll_log.copy()

    def clear_roll_log(self) -> None:
        """Clear the roll log."""
        self._roll_log = []


# Shared default roller
_dice_roller: Optional[DiceRoller] = None


def get_dice_roller() -> DiceRoller:
    """Get the shared, unseeded DiceRoller."""
    global _dice_roller
    if _dice_roller is None:
        _dice_roller = DiceRoller()
    return _dice_roller


def set_dice_roller(dice: DiceRoller) -> None:
    """Replace the shared DiceRoller (e.g. with a seeded one)."""
    global _dice_roller
    _dice_roller = dice


def reset_dice_roller() -> None:
    """Drop the shared DiceRoller so the next access creates a fresh one."""
    global _dice_roller
    _dice_roller = None

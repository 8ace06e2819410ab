"""
Encounter tables for site guardians.

Each table maps a single uniform roll onto an enemy archetype. Entries
are checked in order and the first entry whose threshold the roll
strictly exceeds is selected; an entry without a threshold is the
fallback. For example a roll above 0.6 (the top 40%) selects the first
entry of MINE_TABLE.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from hexquest.data_models import (
    AttackType,
    DiceRoller,
    EnemyArchetype,
    EnemyType,
    get_dice_roller,
)


logger = logging.getLogger(__name__)


# =============================================================================
# ARCHETYPES
# =============================================================================

# Mine
MINE_OVERSEER = EnemyArchetype(
    name="Minen-Aufseher", armor=5, attack=5, fame=5, icon="👺",
    enemy_type=EnemyType.ORC_SUMMONER, color="#b91c1c",
)
CRYSTAL_GUARDIAN = EnemyArchetype(
    name="Kristall-Wächter", armor=4, attack=3, fame=3, icon="💎",
    enemy_type=EnemyType.GOLEM_SMALL, color="#0891b2", physical_resist=True,
)

# Dungeon
FIRE_ELEMENTAL = EnemyArchetype(
    name="Feuer-Elementar", armor=4, attack=5, fame=4, icon="🔥",
    enemy_type=EnemyType.ELEMENTAL, color="#ef4444",
    attack_type=AttackType.FIRE, ice_resist=True,
)
DRACONUM_ELITE = EnemyArchetype(
    name="Drakonier-Elite", armor=5, attack=6, fame=7, icon="🐲",
    enemy_type=EnemyType.DRACONUM, color="#dc2626", attack_type=AttackType.FIRE,
)

# Ruins
RUIN_SUMMONER = EnemyArchetype(
    name="Ruinen-Beschwörer", armor=4, attack=3, fame=5, icon="💀",
    enemy_type=EnemyType.NECROMANCER, color="#7c3aed", summoner=True,
)
RUIN_GUARD = EnemyArchetype(
    name="Ruinen-Wächter", armor=6, attack=4, fame=4, icon="🛡️",
    enemy_type=EnemyType.RUIN_GUARD, color="#d97706", fortified=True,
)

# Tomb
VAMPIRE_LORD = EnemyArchetype(
    name="Vampir-Lord", armor=5, attack=5, fame=8, icon="🧛",
    enemy_type=EnemyType.VAMPIRE, color="#7c3aed", vampiric=True,
)
PHANTOM = EnemyArchetype(
    name="Phantom", armor=3, attack=4, fame=4, icon="👻",
    enemy_type=EnemyType.PHANTOM, color="#a855f7", physical_resist=True,
)
SKELETON_WARRIOR = EnemyArchetype(
    name="Skelett-Krieger", armor=4, attack=3, fame=3, icon="💀",
    enemy_type=EnemyType.SKELETON, color="#d1d5db",
)

# Labyrinth
LABYRINTH_MAGE = EnemyArchetype(
    name="Labyrinth-Magier", armor=3, attack=5, fame=6, icon="🧙",
    enemy_type=EnemyType.MAGE, color="#3b82f6", attack_type=AttackType.ICE,
)
STONE_GOLEM = EnemyArchetype(
    name="Stein-Golem", armor=7, attack=4, fame=5, icon="🗿",
    enemy_type=EnemyType.GOLEM, color="#6b7280", physical_resist=True,
)
DRACONUM = EnemyArchetype(
    name="Drakonier", armor=6, attack=5, fame=7, icon="🐲",
    enemy_type=EnemyType.DRACONUM, color="#dc2626", attack_type=AttackType.FIRE,
)
MINOTAUR = EnemyArchetype(
    name="Minotaurus", armor=5, attack=6, fame=4, icon="🐮",
    enemy_type=EnemyType.ORC_KHAN, color="#16a34a",
)

# Spawning grounds
SPIDER_QUEEN = EnemyArchetype(
    name="Spinnen-Königin", armor=4, attack=4, fame=7, icon="🕷️",
    enemy_type=EnemyType.SPIDER_QUEEN, color="#059669", poison=True, summoner=True,
)
ORC_HORDE = EnemyArchetype(
    name="Ork-Horde", armor=3, attack=5, fame=5, icon="👹",
    enemy_type=EnemyType.ORC_HORDE, color="#16a34a", brutal=True,
)
SWAMP_RAT = EnemyArchetype(
    name="Sumpf-Ratte", armor=3, attack=3, fame=2, icon="🐀",
    enemy_type=EnemyType.RAT, color="#a16207", swift=True,
)


# =============================================================================
# TABLES
# =============================================================================

@dataclass(frozen=True)
class EncounterEntry:
    """
    One row of an encounter table.

    above: the roll must be strictly greater than this value. None marks
    the fallback row.
    """
    archetype: EnemyArchetype
    above: Optional[float] = None

    def matches(self, roll: float) -> bool:
        return self.above is None or roll > self.above


@dataclass(frozen=True)
class EncounterTable:
    """An ordered list of entries rolled with a single uniform draw."""
    table_id: str
    entries: tuple[EncounterEntry, ...]

    def __post_init__(self):
        if not self.entries or self.entries[-1].above is not None:
            raise ValueError(f"Encounter table {self.table_id} needs a fallback entry")

    def lookup(self, roll: float) -> EnemyArchetype:
        """Select the archetype for a given roll in [0, 1)."""
        for entry in self.entries:
            if entry.matches(roll):
                return entry.archetype
        return self.entries[-1].archetype

    def roll(self, dice: Optional[DiceRoller] = None) -> EnemyArchetype:
        """Roll once on this table."""
        dice = dice or get_dice_roller()
        roll = dice.random(f"encounter table {self.table_id}")
        archetype = self.lookup(roll)
        logger.debug(f"{self.table_id}: rolled {roll:.3f} -> {archetype.name}")
        return archetype

    def archetypes(self) -> list[EnemyArchetype]:
        return [e.archetype for e in self.entries]


MINE_TABLE = EncounterTable("mine", (
    EncounterEntry(MINE_OVERSEER, above=0.6),
    EncounterEntry(CRYSTAL_GUARDIAN),
))

DUNGEON_TABLE = EncounterTable("dungeon", (
    EncounterEntry(FIRE_ELEMENTAL, above=0.5),
    EncounterEntry(DRACONUM_ELITE),
))

RUINS_TABLE = EncounterTable("ruins", (
    EncounterEntry(RUIN_SUMMONER, above=0.4),
    EncounterEntry(RUIN_GUARD),
))

TOMB_TABLE = EncounterTable("tomb", (
    EncounterEntry(VAMPIRE_LORD, above=0.7),
    EncounterEntry(PHANTOM, above=0.3),
    EncounterEntry(SKELETON_WARRIOR),
))

# Multi-enemy sites roll each slot separately
LABYRINTH_TABLES: tuple[EncounterTable, ...] = (
    EncounterTable("labyrinth_magic", (
        EncounterEntry(LABYRINTH_MAGE, above=0.5),
        EncounterEntry(STONE_GOLEM),
    )),
    EncounterTable("labyrinth_depths", (
        EncounterEntry(DRACONUM, above=0.6),
        EncounterEntry(MINOTAUR),
    )),
)

SPAWNING_TABLES: tuple[EncounterTable, ...] = (
    EncounterTable("spawning_leader", (
        EncounterEntry(SPIDER_QUEEN, above=0.5),
        EncounterEntry(ORC_HORDE),
    )),
    EncounterTable("spawning_minion", (
        EncounterEntry(SWAMP_RAT),
    )),
)


def roll_encounter_group(
    tables: tuple[EncounterTable, ...],
    dice: Optional[DiceRoller] = None,
) -> list[EnemyArchetype]:
    """Roll every table in order and return one archetype per table."""
    dice = dice or get_dice_roller()
    return [table.roll(dice) for table in tables]

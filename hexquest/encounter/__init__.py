"""
Encounter generation for site guardians.
"""

from hexquest.encounter.encounter_tables import (
    EncounterEntry,
    EncounterTable,
    MINE_TABLE,
    DUNGEON_TABLE,
    RUINS_TABLE,
    TOMB_TABLE,
    LABYRINTH_TABLES,
    SPAWNING_TABLES,
    MINE_OVERSEER,
    CRYSTAL_GUARDIAN,
    roll_encounter_group,
)

__all__ = [
    "EncounterEntry",
    "EncounterTable",
    "MINE_TABLE",
    "DUNGEON_TABLE",
    "RUINS_TABLE",
    "TOMB_TABLE",
    "LABYRINTH_TABLES",
    "SPAWNING_TABLES",
    "MINE_OVERSEER",
    "CRYSTAL_GUARDIAN",
    "roll_encounter_group",
]

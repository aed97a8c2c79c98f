"""Race and class stat bonuses — pure data, no I/O."""
from __future__ import annotations

from balance_sim.models.character import CharacterClass, Race, StatBlock

NO_BONUS = StatBlock()

# Races and classes missing from these tables are statistically neutral.
RACE_BONUSES: dict[Race, StatBlock] = {
    Race.HUMAIN: StatBlock(hp=10, auto=1, def_=1, cap=1, rescap=1, spd=1),
    Race.NAIN: StatBlock(hp=10, def_=4),
    Race.DRAGONKIN: StatBlock(hp=10, rescap=15),
    Race.ELFE: StatBlock(auto=1, cap=1, spd=5),
}

CLASS_BONUSES: dict[CharacterClass, StatBlock] = {
    CharacterClass.VOLEUR: StatBlock(spd=5),
    CharacterClass.GUERRIER: StatBlock(auto=3),
}


def race_bonus(race: Race) -> StatBlock:
    return RACE_BONUSES.get(race, NO_BONUS)


def class_bonus(char_class: CharacterClass) -> StatBlock:
    return CLASS_BONUSES.get(char_class, NO_BONUS)

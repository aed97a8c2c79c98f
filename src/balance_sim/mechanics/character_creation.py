"""Character creation logic — assembles a combat-ready character."""
from __future__ import annotations

from balance_sim.mechanics.stat_generation import generate_stats
from balance_sim.mechanics.traits import class_bonus, race_bonus
from balance_sim.models.character import Character, CharacterClass, Race, StatBlock


def apply_bonuses(base: StatBlock, race: Race, char_class: CharacterClass) -> StatBlock:
    """Add the race and class deltas to a base stat block."""
    return base + race_bonus(race) + class_bonus(char_class)


def create_character(race: Race | str, char_class: CharacterClass | str) -> Character:
    """Roll fresh stats for a race/class pair.

    Names are accepted in any case (``"mort-vivant"``, ``"MAGE"``); an unknown
    name raises ValueError.
    """
    race = Race(race)
    char_class = CharacterClass(char_class)
    stats = apply_bonuses(generate_stats(), race, char_class)
    return Character(
        race=race,
        char_class=char_class,
        stats=stats,
        current_hp=stats.hp,
    )

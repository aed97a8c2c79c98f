"""Combat math — pure functions, no I/O.

Percentages are kept as whole numbers and applied with integer division so
every result equals the floored real-valued formula.
"""
from __future__ import annotations

from balance_sim.mechanics.dice import roll_chance
from balance_sim.models.character import Character, CharacterClass, Race

TIER_SIZE = 15

BASE_CRIT_CHANCE = 0.05
ELFE_CRIT_BONUS = 0.20
VOLEUR_CRIT_PER_TIER = 0.05
CRIT_PERCENT = 150

ORC_RAGE_PERCENT = 120


def tiers(stat: int) -> int:
    """Number of complete 15-point tiers in a stat."""
    return stat // TIER_SIZE


def scaling(cap: int, base_percent: int, bonus_per_tier: int) -> int:
    """Tiered scaling percentage: ``base + bonus * floor(cap / 15)``.

    scaling(30, 15, 3) == 21 (two tiers); scaling(14, 15, 3) == 15.
    """
    return base_percent + bonus_per_tier * tiers(cap)


def crit_chance(attacker: Character) -> float:
    chance = BASE_CRIT_CHANCE
    if attacker.race is Race.ELFE:
        chance += ELFE_CRIT_BONUS
    if attacker.char_class is CharacterClass.VOLEUR:
        chance += VOLEUR_CRIT_PER_TIER * tiers(attacker.stats.cap)
    return chance


def is_enraged(character: Character) -> bool:
    """Orcs below half their max HP hit harder."""
    return character.race is Race.ORC and character.current_hp * 2 < character.stats.hp


def base_damage(attacker: Character, defender: Character) -> int:
    """Damage of a plain attack. Crit is rolled on every call.

    The 1-damage floor applies before multipliers only.
    """
    damage = max(1, attacker.stats.auto - defender.stats.def_)

    multiplier = 100
    if roll_chance(crit_chance(attacker)):
        multiplier = multiplier * CRIT_PERCENT // 100
    if is_enraged(attacker):
        multiplier = multiplier * ORC_RAGE_PERCENT // 100

    return damage * multiplier // 100

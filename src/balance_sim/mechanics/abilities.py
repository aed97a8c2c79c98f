"""Per-class special abilities — pure rules, no I/O.

Each handler takes ``(attacker, defender, turn)`` with a 1-based turn number
and returns an AbilityOutcome. A handler that does nothing this turn returns
an empty outcome, and the engine then falls back to a plain attack. Handlers
only mutate the session fields their class owns.
"""
from __future__ import annotations

from collections.abc import Callable

from balance_sim.mechanics.combat_math import base_damage, scaling, tiers
from balance_sim.models.character import Character, CharacterClass
from balance_sim.models.combat import AbilityOutcome

AbilityHandler = Callable[[Character, Character, int], AbilityOutcome]

BASE_ARROWS = 2
HEAL_MISSING_PERCENT = 20


def piercing_strike(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Guerrier: ignore part of the defender's weaker resistance."""
    if turn % 3 != 0:
        return AbilityOutcome()
    weaker_res = min(defender.stats.def_, defender.stats.rescap)
    ignored = scaling(attacker.stats.cap, 15, 3)
    # auto - weaker_res * (1 - ignored%), floored
    damage = (100 * attacker.stats.auto - weaker_res * (100 - ignored)) // 100
    return AbilityOutcome(damage=max(1, damage), effects=["piercing strike"])


def evasion(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Voleur: the next attack aimed at the attacker misses."""
    if turn % 3 != 0:
        return AbilityOutcome()
    attacker.dodge_next = True
    return AbilityOutcome(effects=["dodge"])


def riposte_stance(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Paladin: reflect a share of the next damage taken."""
    if turn % 2 != 0:
        return AbilityOutcome()
    attacker.riposte_percent = scaling(attacker.stats.cap, 50, 8)
    return AbilityOutcome(effects=["riposte"])


def heal(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Healer: restore 20% of missing HP plus a cap-scaled amount."""
    if turn % 4 != 0:
        return AbilityOutcome()
    cap = attacker.stats.cap
    missing = attacker.stats.hp - attacker.current_hp
    amount = (HEAL_MISSING_PERCENT * missing + cap * scaling(cap, 25, 5)) // 100
    attacker.current_hp = min(attacker.stats.hp, attacker.current_hp + amount)
    return AbilityOutcome(heal=amount, effects=[f"heal {amount}"])


def volley(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Archer: one damage roll multiplied by the arrow count."""
    if turn % 3 != 0:
        return AbilityOutcome()
    arrows = BASE_ARROWS + tiers(attacker.stats.cap)
    damage = base_damage(attacker, defender) * arrows
    return AbilityOutcome(damage=damage, effects=[f"{arrows} arrows"])


def spell(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Mage: cap-scaled magic damage reduced by rescap."""
    if turn % 3 != 0:
        return AbilityOutcome()
    cap = attacker.stats.cap
    raw = 100 * attacker.stats.auto + cap * scaling(cap, 40, 5) - 100 * defender.stats.rescap
    return AbilityOutcome(damage=max(1, raw // 100), effects=["spell"])


def familiar(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Demoniste: passive familiar that strikes every turn."""
    cap = attacker.stats.cap
    return AbilityOutcome(damage=cap * scaling(cap, 10, 2) // 100, effects=["familiar"])


def retaliation(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    """Masochiste: return a share of the damage stored since the last release."""
    if turn % 4 != 0 or attacker.damage_received <= 0:
        return AbilityOutcome()
    damage = attacker.damage_received * scaling(attacker.stats.cap, 20, 4) // 100
    attacker.damage_received = 0
    return AbilityOutcome(damage=damage, effects=[f"returns {damage}"])


ABILITIES: dict[CharacterClass, AbilityHandler] = {
    CharacterClass.GUERRIER: piercing_strike,
    CharacterClass.VOLEUR: evasion,
    CharacterClass.PALADIN: riposte_stance,
    CharacterClass.HEALER: heal,
    CharacterClass.ARCHER: volley,
    CharacterClass.MAGE: spell,
    CharacterClass.DEMONISTE: familiar,
    CharacterClass.MASOCHISTE: retaliation,
}


def resolve_ability(attacker: Character, defender: Character, turn: int) -> AbilityOutcome:
    handler = ABILITIES.get(attacker.char_class)
    if handler is None:
        return AbilityOutcome()
    return handler(attacker, defender, turn)

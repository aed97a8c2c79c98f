"""Combat engine — resolves one duel between two characters."""
from __future__ import annotations

import logging

from balance_sim.mechanics.abilities import resolve_ability
from balance_sim.mechanics.combat_math import base_damage
from balance_sim.models.character import Character, Race
from balance_sim.models.combat import CombatOutcome, CombatResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 100
SYLVARI_REGEN_PERCENT = 2
REVIVAL_PERCENT = 20


def turn_order(char1: Character, char2: Character) -> tuple[Character, Character]:
    """Faster character acts first; char1 wins ties."""
    if char1.stats.spd >= char2.stats.spd:
        return char1, char2
    return char2, char1


def decide_winner(char1: Character, char2: Character) -> CombatOutcome:
    if char1.is_alive and not char2.is_alive:
        return CombatOutcome.CHAR1
    if char2.is_alive and not char1.is_alive:
        return CombatOutcome.CHAR2
    return CombatOutcome.DRAW


def run_combat(char1: Character, char2: Character, max_turns: int = DEFAULT_MAX_TURNS) -> CombatResult:
    """Fight until someone drops or ``max_turns`` runs out.

    Both characters are reset first, so the same objects can be fought again.
    Deaths are only checked between actions; the outcome is read once the
    loop is over.
    """
    if max_turns < 0:
        raise ValueError(f"max_turns must be >= 0, got {max_turns}")

    char1.reset_combat_state()
    char2.reset_combat_state()

    turn = 0
    while turn < max_turns and char1.is_alive and char2.is_alive:
        turn += 1
        for attacker in turn_order(char1, char2):
            if not (char1.is_alive and char2.is_alive):
                break
            defender = char2 if attacker is char1 else char1
            resolve_action(attacker, defender, turn)

    winner = decide_winner(char1, char2)
    logger.debug(
        "%s vs %s: %s after %d turns (%d / %d HP)",
        char1.label, char2.label, winner.value, turn, char1.current_hp, char2.current_hp,
    )
    return CombatResult(
        winner=winner,
        turns=turn,
        char1_hp=char1.current_hp,
        char2_hp=char2.current_hp,
    )


def simulate_combat(char1: Character, char2: Character, max_turns: int = DEFAULT_MAX_TURNS) -> CombatOutcome:
    return run_combat(char1, char2, max_turns).winner


def resolve_action(attacker: Character, defender: Character, turn: int) -> int:
    """Play one character's action. Returns the damage dealt to the defender."""
    if attacker.race is Race.SYLVARI:
        regen = attacker.stats.hp * SYLVARI_REGEN_PERCENT // 100
        attacker.current_hp = min(attacker.stats.hp, attacker.current_hp + regen)

    if defender.dodge_next:
        defender.dodge_next = False
        logger.debug("Turn %d: %s dodges %s", turn, defender.label, attacker.label)
        return 0

    ability = resolve_ability(attacker, defender, turn)
    damage = ability.damage
    if damage == 0 and not ability.fired:
        damage = base_damage(attacker, defender)

    defender.current_hp -= damage
    defender.damage_received += damage
    logger.debug(
        "Turn %d: %s -> %s for %d %s",
        turn, attacker.label, defender.label, damage, ability.effects or "",
    )

    if defender.riposte_percent and damage > 0:
        reflected = damage * defender.riposte_percent // 100
        attacker.current_hp -= reflected
        defender.riposte_percent = 0
        logger.debug("Turn %d: %s ripostes for %d", turn, defender.label, reflected)

    if defender.current_hp <= 0 and defender.race is Race.MORT_VIVANT and not defender.has_revived:
        defender.current_hp = defender.stats.hp * REVIVAL_PERCENT // 100
        defender.has_revived = True
        logger.debug("Turn %d: %s rises again with %d HP", turn, defender.label, defender.current_hp)

    return damage

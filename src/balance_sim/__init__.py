from __future__ import annotations

from balance_sim.engine.combat import run_combat, simulate_combat
from balance_sim.engine.simulation import analyze_durations, run_matchup, run_simulations
from balance_sim.mechanics.character_creation import create_character
from balance_sim.models.character import Character, CharacterClass, Race, StatBlock
from balance_sim.models.combat import CombatOutcome, CombatResult

__all__ = [
    "Character",
    "CharacterClass",
    "CombatOutcome",
    "CombatResult",
    "Race",
    "StatBlock",
    "analyze_durations",
    "create_character",
    "run_combat",
    "run_matchup",
    "run_simulations",
    "simulate_combat",
]

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CombatOutcome(str, Enum):
    """Winner of a combat, by position of the argument passed to the engine."""

    CHAR1 = "char1"
    CHAR2 = "char2"
    DRAW = "draw"


@dataclass
class AbilityOutcome:
    damage: int = 0
    heal: int = 0
    effects: list[str] = field(default_factory=list)

    @property
    def fired(self) -> bool:
        return bool(self.effects)


@dataclass
class CombatResult:
    winner: CombatOutcome
    turns: int = 0
    char1_hp: int = 0
    char2_hp: int = 0

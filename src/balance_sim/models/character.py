from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

STAT_KEYS = ("hp", "auto", "def", "cap", "rescap", "spd")


class _LookupEnum(str, Enum):
    """String enum that also accepts member names and any letter case."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if member.value.lower() == key or member.name.lower() == key.replace("-", "_"):
                return member
        return None


class Race(_LookupEnum):
    HUMAIN = "Humain"
    NAIN = "Nain"
    DRAGONKIN = "Dragonkin"
    ELFE = "Elfe"
    ORC = "Orc"
    MORT_VIVANT = "Mort-vivant"
    LYCAN = "Lycan"
    SYLVARI = "Sylvari"


class CharacterClass(_LookupEnum):
    GUERRIER = "Guerrier"
    VOLEUR = "Voleur"
    PALADIN = "Paladin"
    HEALER = "Healer"
    ARCHER = "Archer"
    MAGE = "Mage"
    DEMONISTE = "Demoniste"
    MASOCHISTE = "Masochiste"


class StatBlock(BaseModel):
    """Six combat stats. Also used for race/class deltas, which default to zero."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hp: int = Field(default=0, ge=0)
    auto: int = Field(default=0, ge=0)
    def_: int = Field(default=0, ge=0, alias="def")
    cap: int = Field(default=0, ge=0)
    rescap: int = Field(default=0, ge=0)
    spd: int = Field(default=0, ge=0)

    def as_dict(self) -> dict[str, int]:
        return self.model_dump(by_alias=True)

    def __add__(self, other: StatBlock) -> StatBlock:
        if not isinstance(other, StatBlock):
            return NotImplemented
        mine, theirs = self.as_dict(), other.as_dict()
        return StatBlock.model_validate({key: mine[key] + theirs[key] for key in STAT_KEYS})


class Character(BaseModel):
    """A combatant: permanent stats plus the mutable state of the current combat.

    ``riposte_percent`` is a whole percentage (``66`` reflects 66% of the next
    damage taken). ``ability_cd`` is reserved; cooldowns are derived from the
    turn number.
    """

    model_config = ConfigDict(from_attributes=True)

    race: Race
    char_class: CharacterClass
    stats: StatBlock
    current_hp: int = 0
    ability_cd: int = 0
    damage_received: int = 0
    has_revived: bool = False
    dodge_next: bool = False
    riposte_percent: int = 0

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    @property
    def label(self) -> str:
        return f"{self.race.value} {self.char_class.value}"

    def reset_combat_state(self) -> None:
        """Restore full HP and clear every per-combat flag."""
        self.current_hp = self.stats.hp
        self.ability_cd = 0
        self.damage_received = 0
        self.has_revived = False
        self.dodge_next = False
        self.riposte_percent = 0

"""Shared fixtures for the balance simulator test suite."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from balance_sim.models.character import Character, CharacterClass, Race, StatBlock


def build_character(
    race: Race = Race.LYCAN,
    char_class: CharacterClass = CharacterClass.GUERRIER,
    *,
    hp: int = 150,
    auto: int = 20,
    def_: int = 15,
    cap: int = 15,
    rescap: int = 15,
    spd: int = 20,
) -> Character:
    stats = StatBlock(hp=hp, auto=auto, def_=def_, cap=cap, rescap=rescap, spd=spd)
    return Character(race=race, char_class=char_class, stats=stats, current_hp=hp)


@pytest.fixture
def make_character() -> Callable[..., Character]:
    return build_character


@pytest.fixture
def no_crits(monkeypatch):
    monkeypatch.setattr("balance_sim.mechanics.combat_math.roll_chance", lambda probability: False)


@pytest.fixture
def always_crit(monkeypatch):
    monkeypatch.setattr("balance_sim.mechanics.combat_math.roll_chance", lambda probability: True)


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)

"""Random stat block generation under a fixed point budget — pure math, no I/O.

Every character starts from a flat baseline and spends ``POINT_BUDGET`` points:
first on one or two "spike" stats, then on weighted random increments. One
point buys +1 in a combat stat or +4 HP.
"""
from __future__ import annotations

import random

from balance_sim.mechanics.dice import weighted_choice
from balance_sim.models.character import StatBlock

BASE_HP = 120
BASE_STAT = 15
HP_CAP = 200
STAT_CAP = 35
HP_STEP = 4

SPIKE_STATS = ("auto", "def", "cap", "rescap", "spd")
SPIKE_MIN = 8
SPIKE_SPREAD = 10

# Baseline "costs" 20% of HP plus the five flat stats.
POINT_BUDGET = BASE_HP - (BASE_HP // 5 + len(SPIKE_STATS) * BASE_STAT)

STAT_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("hp", 1),
    ("auto", 3),
    ("def", 3),
    ("cap", 3),
    ("rescap", 3),
    ("spd", 3),
)

SAFETY_GUARD = 10_000


def baseline() -> dict[str, int]:
    values = {"hp": BASE_HP}
    values.update({key: BASE_STAT for key in SPIKE_STATS})
    return values


def generate_stats() -> StatBlock:
    """Generate a base stat block (before race and class bonuses)."""
    values = baseline()
    remaining = _spend_on_spikes(values, POINT_BUDGET)
    _spend_weighted(values, remaining)
    return StatBlock.model_validate(values)


def _spend_on_spikes(values: dict[str, int], remaining: int) -> int:
    spike_count = 2 if random.random() < 0.5 else 1
    for key in random.sample(SPIKE_STATS, spike_count):
        if remaining <= 0:
            break
        target = min(STAT_CAP, values[key] + SPIKE_MIN + random.randint(0, SPIKE_SPREAD - 1))
        while values[key] < target and remaining > 0:
            values[key] += 1
            remaining -= 1
    return remaining


def _spend_weighted(values: dict[str, int], remaining: int) -> int:
    for _ in range(SAFETY_GUARD):
        if remaining <= 0:
            break
        key = weighted_choice(STAT_WEIGHTS)
        if key == "hp":
            if values["hp"] + HP_STEP > HP_CAP:
                break
            values["hp"] += HP_STEP
        else:
            if values[key] + 1 > STAT_CAP:
                break
            values[key] += 1
        remaining -= 1
    return remaining


def points_spent(stats: StatBlock) -> int:
    """Budget points a base block consumed above the baseline."""
    values = stats.as_dict()
    spent = (values["hp"] - BASE_HP) // HP_STEP
    spent += sum(values[key] - BASE_STAT for key in SPIKE_STATS)
    return spent

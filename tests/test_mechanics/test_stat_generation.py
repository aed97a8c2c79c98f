"""Tests for src/balance_sim/mechanics/stat_generation.py."""
from __future__ import annotations

import pytest

from balance_sim.mechanics import stat_generation
from balance_sim.mechanics.stat_generation import (
    BASE_HP,
    BASE_STAT,
    HP_CAP,
    POINT_BUDGET,
    SPIKE_STATS,
    STAT_CAP,
    baseline,
    generate_stats,
    points_spent,
)
from balance_sim.models.character import StatBlock


class TestBudget:
    def test_point_budget(self):
        assert POINT_BUDGET == 21

    def test_baseline(self):
        assert baseline() == {"hp": 120, "auto": 15, "def": 15, "cap": 15, "rescap": 15, "spd": 15}

    def test_points_spent_of_baseline_is_zero(self):
        assert points_spent(StatBlock.model_validate(baseline())) == 0

    def test_points_spent_counts_hp_in_steps(self):
        stats = StatBlock(hp=128, auto=20, def_=15, cap=15, rescap=16, spd=15)
        assert points_spent(stats) == 2 + 5 + 1


class TestGenerateStats:
    def test_ranges(self, seeded_rng):
        for _ in range(500):
            stats = generate_stats()
            assert BASE_HP <= stats.hp <= HP_CAP
            for key in SPIKE_STATS:
                assert BASE_STAT <= stats.as_dict()[key] <= STAT_CAP

    def test_never_exceeds_budget(self, seeded_rng):
        for _ in range(500):
            assert points_spent(generate_stats()) <= POINT_BUDGET

    def test_hp_grows_in_steps_of_four(self, seeded_rng):
        for _ in range(200):
            assert (generate_stats().hp - BASE_HP) % 4 == 0

    def test_spends_whole_budget_without_caps(self, seeded_rng):
        # Caps only bite after a large spike, so most blocks spend everything.
        spent = [points_spent(generate_stats()) for _ in range(200)]
        assert max(spent) == POINT_BUDGET

    def test_has_a_spike(self, seeded_rng):
        for _ in range(200):
            stats = generate_stats().as_dict()
            assert max(stats[key] for key in SPIKE_STATS) >= BASE_STAT + 8


class TestCapInteractions:
    def test_stops_when_picked_stat_is_capped(self, seeded_rng, monkeypatch):
        monkeypatch.setattr(stat_generation, "weighted_choice", lambda entries: "auto")
        for _ in range(50):
            stats = generate_stats()
            assert stats.auto <= STAT_CAP
            assert points_spent(stats) <= POINT_BUDGET

    def test_hp_only_picks_stay_under_cap(self, seeded_rng, monkeypatch):
        monkeypatch.setattr(stat_generation, "weighted_choice", lambda entries: "hp")
        for _ in range(50):
            stats = generate_stats()
            assert stats.hp <= HP_CAP
            assert points_spent(stats) == POINT_BUDGET

    def test_guard_bounds_the_loop(self, monkeypatch):
        monkeypatch.setattr(stat_generation, "SAFETY_GUARD", 3)
        monkeypatch.setattr(stat_generation, "_spend_on_spikes", lambda values, remaining: remaining)
        monkeypatch.setattr(stat_generation, "weighted_choice", lambda entries: "cap")
        stats = generate_stats()
        assert stats.cap == BASE_STAT + 3
        assert points_spent(stats) == 3


@pytest.mark.parametrize("key", SPIKE_STATS)
def test_every_stat_can_spike(key, monkeypatch, seeded_rng):
    monkeypatch.setattr(stat_generation.random, "sample", lambda population, k: [key])
    stats = generate_stats().as_dict()
    assert stats[key] >= BASE_STAT + 8

"""Tests for src/balance_sim/mechanics/combat_math.py."""
from __future__ import annotations

import pytest

from balance_sim.mechanics.combat_math import base_damage, crit_chance, is_enraged, scaling, tiers
from balance_sim.models.character import CharacterClass, Race


class TestScaling:
    @pytest.mark.parametrize("cap, base, bonus, expected", [
        (30, 15, 3, 21),
        (14, 15, 3, 15),
        (15, 15, 3, 18),
        (0, 50, 8, 50),
        (45, 40, 5, 55),
        (29, 10, 2, 12),
    ])
    def test_values(self, cap, base, bonus, expected):
        assert scaling(cap, base, bonus) == expected

    def test_monotonic_in_cap(self):
        values = [scaling(cap, 25, 5) for cap in range(0, 80)]
        assert values == sorted(values)

    @pytest.mark.parametrize("stat, expected", [(0, 0), (14, 0), (15, 1), (29, 1), (30, 2), (50, 3)])
    def test_tiers(self, stat, expected):
        assert tiers(stat) == expected


class TestCritChance:
    def test_base(self, make_character):
        assert crit_chance(make_character()) == pytest.approx(0.05)

    def test_elfe(self, make_character):
        assert crit_chance(make_character(Race.ELFE)) == pytest.approx(0.25)

    @pytest.mark.parametrize("cap, expected", [(14, 0.05), (15, 0.10), (30, 0.15), (45, 0.20)])
    def test_voleur_scales_with_cap(self, cap, expected, make_character):
        char = make_character(char_class=CharacterClass.VOLEUR, cap=cap)
        assert crit_chance(char) == pytest.approx(expected)

    def test_elfe_voleur_stacks(self, make_character):
        char = make_character(Race.ELFE, CharacterClass.VOLEUR, cap=30)
        assert crit_chance(char) == pytest.approx(0.35)


class TestBaseDamage:
    def test_plain_hit(self, make_character, no_crits):
        assert base_damage(make_character(auto=30), make_character(def_=10)) == 20

    @pytest.mark.parametrize("auto, def_", [(10, 30), (15, 15), (0, 0)])
    def test_minimum_one(self, auto, def_, make_character, no_crits):
        assert base_damage(make_character(auto=auto), make_character(def_=def_)) == 1

    def test_crit(self, make_character, always_crit):
        assert base_damage(make_character(auto=30), make_character(def_=10)) == 30

    def test_crit_on_minimum_floors_back_to_one(self, make_character, always_crit):
        assert base_damage(make_character(auto=5), make_character(def_=30)) == 1

    def test_crit_floors(self, make_character, always_crit):
        # 7 * 1.5 = 10.5
        assert base_damage(make_character(auto=22), make_character(def_=15)) == 10

    def test_orc_enraged(self, make_character, no_crits):
        orc = make_character(Race.ORC, hp=100, auto=30)
        orc.current_hp = 40
        assert is_enraged(orc)
        assert base_damage(orc, make_character(def_=10)) == 24

    def test_orc_at_half_not_enraged(self, make_character, no_crits):
        orc = make_character(Race.ORC, hp=100, auto=30)
        orc.current_hp = 50
        assert not is_enraged(orc)
        assert base_damage(orc, make_character(def_=10)) == 20

    def test_orc_enraged_crit(self, make_character, always_crit):
        orc = make_character(Race.ORC, hp=100, auto=30)
        orc.current_hp = 10
        # 20 * 1.5 * 1.2
        assert base_damage(orc, make_character(def_=10)) == 36

    def test_other_races_never_enraged(self, make_character):
        char = make_character(Race.LYCAN, hp=100)
        char.current_hp = 1
        assert not is_enraged(char)

    def test_never_below_one_random(self, make_character, seeded_rng):
        attacker = make_character(Race.ELFE, CharacterClass.VOLEUR, auto=15, cap=35)
        defender = make_character(def_=35)
        assert all(base_damage(attacker, defender) >= 1 for _ in range(300))

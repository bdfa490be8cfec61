"""Tests for the leveling skill."""

from __future__ import annotations

import pytest

from critical_miss.models.character import ClassName
from critical_miss.models.stats import Stats
from critical_miss.skills.leveling import (
    XP_TABLE,
    apply_leveling,
    average_hit_die,
    level_from_xp,
    spell_slots_for,
    xp_for_level,
)


class TestXpTable:
    """Experience thresholds."""

    def test_table_is_monotonic(self):
        assert len(XP_TABLE) == 20
        assert all(a < b for a, b in zip(XP_TABLE, XP_TABLE[1:]))

    @pytest.mark.parametrize(
        "xp,level",
        [(0, 1), (299, 1), (300, 2), (899, 2), (900, 3), (2700, 4), (355000, 20), (10**7, 20)],
    )
    def test_level_from_xp(self, xp, level):
        assert level_from_xp(xp) == level

    def test_xp_for_level_clamps(self):
        assert xp_for_level(0) == 0
        assert xp_for_level(25) == XP_TABLE[-1]

    def test_average_hit_die(self):
        assert average_hit_die(6) == 4
        assert average_hit_die(8) == 5
        assert average_hit_die(12) == 7


class TestSpellSlots:
    """Slot capacity by class and level."""

    def test_full_caster(self):
        assert spell_slots_for(ClassName.WIZARD, 1) == 2
        assert spell_slots_for(ClassName.DRUID, 3) == 4

    def test_half_caster_starts_at_two(self):
        assert spell_slots_for(ClassName.PALADIN, 1) == 0
        assert spell_slots_for(ClassName.PALADIN, 2) == 2

    def test_martial_has_none(self):
        assert spell_slots_for(ClassName.FIGHTER, 20) == 0


class TestApplyLeveling:
    """Tests for apply_leveling."""

    def test_stepwise_level_up(self, make_character):
        """0 -> 2700 XP at level 1 climbs 1 -> 2 -> 3 -> 4, one line per level."""
        hero = make_character(xp=2700)
        result = apply_leveling(hero)

        c = result.character
        assert c.level == 4
        assert result.levels_gained == 3
        level_lines = [line for line in result.log_lines if line.startswith("Level up!")]
        assert level_lines == [
            "Level up! You are now level 2. +5 max HP.",
            "Level up! You are now level 3. +5 max HP.",
            "Level up! You are now level 4. +5 max HP.",
        ]
        assert "New feature unlocked: Action Surge." in result.log_lines
        assert c.hp_max == 25
        assert c.hp == 25

    def test_input_not_mutated(self, make_character):
        hero = make_character(xp=300)
        apply_leveling(hero)
        assert hero.level == 1
        assert hero.hp_max == 10

    def test_idempotent(self, make_character):
        """A second pass with no XP change does nothing."""
        first = apply_leveling(make_character(xp=900))
        second = apply_leveling(first.character)
        assert second.log_lines == []
        assert second.levels_gained == 0
        assert second.character == first.character

    def test_hp_gain_minimum_one(self, make_character):
        """A d6 with CON 3 (-4) still gains 1 max HP per level."""
        hero = make_character(hit_die_size=6, stats=Stats(con=3), xp=300)
        result = apply_leveling(hero)
        assert result.character.hp_max == 11

    def test_heal_capped_at_new_max(self, make_character):
        hero = make_character(hp=2, xp=300)
        c = apply_leveling(hero).character
        assert c.hp == 7
        assert c.hp_max == 15

    def test_caster_slots_grow_by_delta(self, make_character):
        hero = make_character(
            class_name=ClassName.WIZARD,
            hit_die_size=6,
            spell_slots_max=2,
            spell_slots_remaining=0,
            xp=900,
        )
        c = apply_leveling(hero).character
        assert c.spell_slots_max == 4
        assert c.spell_slots_remaining == 2

    def test_slot_capacity_reconciled_without_level_up(self, make_character):
        """Capacity out of line with the level is fixed without touching HP."""
        hero = make_character(
            class_name=ClassName.WIZARD,
            hit_die_size=6,
            spell_slots_max=0,
            spell_slots_remaining=0,
        )
        result = apply_leveling(hero)
        assert result.log_lines == []
        assert result.character.spell_slots_max == 2
        assert result.character.spell_slots_remaining == 2
        assert result.character.hp_max == hero.hp_max

    def test_level_capped_at_twenty(self, make_character):
        c = apply_leveling(make_character(xp=10**7)).character
        assert c.level == 20

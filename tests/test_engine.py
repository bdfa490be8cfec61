"""Tests for the GameEngine facade."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from critical_miss.content.arcs import ARC_META
from critical_miss.engine import (
    CombatAction,
    EngineConfig,
    GameEngine,
    StatGenMode,
    generate_stats,
    random_name,
)
from critical_miss.engine.config import CampaignConfig
from critical_miss.engine.game import FIRST_NAMES, LAST_NAMES, STAT_MAX, STAT_MIN, roll_stat
from critical_miss.models.campaign import ArcId
from critical_miss.models.character import Character, ClassName, Companion, Race, Sex
from critical_miss.models.stats import StatKey, Stats


@pytest.fixture
def engine(catalog) -> GameEngine:
    return GameEngine(catalog=catalog)


def assert_invariants(c: Character) -> None:
    assert 0 <= c.hp <= c.hp_max
    assert 0 <= c.hit_dice_remaining <= c.hit_dice_max
    assert 0 <= c.spell_slots_remaining <= c.spell_slots_max
    assert 1 <= c.level <= 20
    assert 0 <= c.campaign.progress <= 100
    assert c.campaign.act in (1, 2, 3)
    assert len(c.recent_scene_ids) <= 6


# --- Character Creation Tests ---


class TestCreateCharacter:
    """Tests for GameEngine.create_character."""

    def test_fighter_derived_values(self, engine: GameEngine):
        hero = engine.create_character(
            Sex.MALE, ClassName.FIGHTER, name="Bromley", stats=Stats(con=14), arc_id=ArcId.TAXMAN
        )
        assert hero.name == "Bromley"
        assert hero.level == 1
        assert hero.hp == hero.hp_max == 12
        assert hero.hit_die_size == 10
        assert hero.hit_dice_max == hero.hit_dice_remaining == 6
        assert hero.spell_slots_max == 0
        assert hero.gold == 12
        assert hero.day == 1
        assert hero.campaign.arc_id is ArcId.TAXMAN
        assert hero.campaign.progress == 0

    def test_barbarian_bonus(self, engine: GameEngine):
        hero = engine.create_character(Sex.FEMALE, ClassName.BARBARIAN, stats=Stats(con=14))
        assert hero.hp_max == 16
        assert hero.hit_die_size == 12

    def test_wizard_gets_slots(self, engine: GameEngine):
        hero = engine.create_character(Sex.FEMALE, ClassName.WIZARD, stats=Stats())
        assert hero.spell_slots_max == hero.spell_slots_remaining == 2
        assert hero.hit_die_size == 6

    def test_hp_at_least_one(self, engine: GameEngine):
        hero = engine.create_character(Sex.MALE, ClassName.WIZARD, stats=Stats(con=1))
        assert hero.hp_max == 5

    def test_blank_name_is_generated(self, engine: GameEngine):
        hero = engine.create_character(Sex.FEMALE, ClassName.ROGUE, name="   ")
        first, _, last = hero.name.partition(" ")
        assert first in FIRST_NAMES[Sex.FEMALE]
        assert last in LAST_NAMES

    def test_race_and_config(self, catalog):
        config = EngineConfig(campaign=CampaignConfig(starting_gold=50, starting_hit_dice=2))
        engine = GameEngine(config=config, catalog=catalog)
        hero = engine.create_character(Sex.MALE, ClassName.DRUID, race=Race.GNOME)
        assert hero.race is Race.GNOME
        assert hero.gold == 50
        assert hero.hit_dice_max == 2

    def test_random_arc(self, engine: GameEngine):
        hero = engine.create_character(Sex.MALE, ClassName.PALADIN)
        assert hero.campaign.arc_id in set(ArcId)


class TestStatGeneration:
    """Rolled ability scores."""

    def test_roll_stat_in_range(self):
        for _ in range(100):
            assert STAT_MIN <= roll_stat() <= STAT_MAX

    def test_weighted_mode_follows_priority(self):
        with patch(
            "critical_miss.engine.game.roll_stat", side_effect=[8, 15, 12, 17, 10, 13]
        ):
            stats = generate_stats(ClassName.ROGUE)
        assert stats.dex == 17
        assert stats.int_ == 15
        assert stats.cha == 13
        assert stats.con == 12
        assert stats.wis == 10
        assert stats.str_ == 8

    def test_chaos_mode_is_a_permutation(self):
        rolls = [8, 15, 12, 17, 10, 13]
        with patch("critical_miss.engine.game.roll_stat", side_effect=rolls):
            stats = generate_stats(ClassName.ROGUE, StatGenMode.CHAOS)
        assert sorted(stats.get(key) for key in StatKey) == sorted(rolls)

    def test_random_name(self):
        assert random_name(Sex.MALE).split(" ")[0] in FIRST_NAMES[Sex.MALE]


class TestBackgroundAndRestart:
    """Background text and starting a new adventure."""

    def test_background_mentions_arc(self, engine: GameEngine, make_character):
        hero = make_character(race=Race.ELF)
        text = engine.generate_background(hero)
        assert text.startswith("You are a female elf fighter who was ")
        assert f"Current campaign: {ARC_META[ArcId.TREASURE].title} (Act 1)." in text

    def test_restart_keeps_identity_resets_story(self, engine: GameEngine, make_character):
        hero = make_character(
            hp=2,
            xp=950,
            level=3,
            hp_max=20,
            gold=77,
            day=40,
            hit_dice_remaining=1,
            inventory=["Cursed Spoon"],
            flags={"scarred": True},
            companions=[Companion(id="c1", name="Pip")],
            next_scene_id="court.day",
            recent_scene_ids=["a", "b"],
        )
        hero.campaign.advance(90)
        hero.campaign.mark_seen("court.day")

        c = engine.restart_adventure(hero, arc_id=ArcId.MIMIC)
        assert (c.name, c.level, c.xp, c.gold, c.stats) == (
            hero.name, hero.level, hero.xp, hero.gold, hero.stats,
        )
        assert c.campaign.arc_id is ArcId.MIMIC
        assert c.campaign.progress == 0
        assert c.campaign.seen_scene_ids == []
        assert c.hp == c.hp_max == 20
        assert c.hit_dice_remaining == c.hit_dice_max
        assert c.day == 1
        assert c.inventory == []
        assert c.flags == {}
        assert c.companions == []
        assert c.next_scene_id is None
        assert c.recent_scene_ids == []
        assert hero.campaign.progress == 90


# --- Turn Flow Tests ---


class TestTurnFlow:
    """Selection, check and resolution through the facade."""

    def test_turn(self, engine: GameEngine, character: Character):
        selection = engine.next_turn(character)
        pending = engine.begin_check(selection.scene, selection.scene.choices[0].id)
        result = engine.resolve(selection.character, selection.scene, pending, roll=20)
        assert result.success is True
        assert result.character.day == character.day + 1
        assert result.character.campaign.progress >= 8

    def test_rests(self, engine: GameEngine, make_character):
        hero = make_character(hp=3)
        short = engine.short_rest(hero, dice_rolled=[5], consequence_roll=100, story_roll=10)
        assert short.character.hp == 8
        long = engine.long_rest(short.character, consequence_roll=100, story_roll=10)
        assert long.character.hp == long.character.hp_max

    def test_short_rest_rolls_dice(self, engine: GameEngine, make_character):
        hero = make_character(hp=1, hp_max=30)
        with patch("critical_miss.skills.rest.roll_die", return_value=4):
            result = engine.short_rest(hero, dice_count=2, consequence_roll=100, story_roll=10)
        assert result.hit_dice_spent == 2
        assert result.hp_healed == 8

    def test_revive(self, engine: GameEngine, make_character):
        result = engine.revive(make_character(hp=0), roll=6)
        assert result.character.hp == 6

    def test_invariants_hold_over_random_play(self, engine: GameEngine):
        """Thirty unscripted turns never break a resource invariant."""
        hero = engine.create_character(Sex.FEMALE, ClassName.WIZARD)
        for turn in range(30):
            selection = engine.next_turn(hero)
            hero = selection.character
            assert_invariants(hero)

            choice = selection.scene.choices[turn % len(selection.scene.choices)]
            result = engine.resolve(hero, selection.scene, engine.begin_check(selection.scene, choice.id))
            hero = result.character
            assert_invariants(hero)

            rounds = 0
            while hero.pending_combat is not None:
                action = CombatAction.ATTACK if rounds < 20 else CombatAction.RUN
                hero = engine.combat_action(hero, action).character
                assert_invariants(hero)
                rounds += 1

            if hero.is_dead:
                revived = engine.revive(hero).character
                hero = revived if not revived.is_dead else engine.long_rest(revived).character
            elif turn % 5 == 4:
                hero = engine.short_rest(hero).character
            assert_invariants(hero)

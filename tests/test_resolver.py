"""Tests for check resolution."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from critical_miss.content.arcs import HUB_SCENE_ID
from critical_miss.engine.config import CampaignConfig
from critical_miss.engine.resolver import begin_check, resolve_roll
from critical_miss.models.combat import CombatOutcome
from critical_miss.models.scene import (
    AdjustHp,
    ChoiceNotFoundError,
    CombatTrigger,
    GainXp,
    Outcome,
    Scene,
    SceneChoice,
)
from critical_miss.models.stats import StatKey, Stats


def ambush_scene(hp_loss: int = 3) -> Scene:
    """A road scene whose failure is an attack."""
    trigger = CombatTrigger(
        enemy_kind="hound",
        on_win=CombatOutcome(text="The hound limps off."),
        on_lose=CombatOutcome(text="You are dinner, briefly."),
        on_flee=CombatOutcome(text="You climb a tree."),
    )
    return Scene(
        id="road.test_ambush",
        category="Road",
        title="Teeth in the Dark",
        body="Something growls.",
        choices=[
            SceneChoice(
                id="listen",
                text="Listen",
                stat=StatKey.WIS,
                dc=12,
                on_success=Outcome(text="You hear it first.", effects=[GainXp(amount=3)]),
                on_fail=Outcome(
                    text="It lunges from the brush.",
                    effects=[AdjustHp(amount=-hp_loss), GainXp(amount=1)],
                    combat=trigger,
                ),
            ),
            SceneChoice(
                id="run",
                text="Run",
                stat=StatKey.DEX,
                dc=10,
                on_success=Outcome(text="You get away."),
                on_fail=Outcome(text="You trip. -2 HP.", effects=[AdjustHp(amount=-2)]),
            ),
        ],
    )


@pytest.fixture
def hub(catalog) -> Scene:
    return catalog.require_scene(HUB_SCENE_ID)


class TestBeginCheck:
    def test_pending_roll(self, hub):
        pending = begin_check(hub, "rumors")
        assert pending.scene_id == HUB_SCENE_ID
        assert pending.choice_id == "rumors"
        assert pending.stat is StatKey.CHA
        assert pending.dc == 12

    def test_unknown_choice(self, hub):
        with pytest.raises(ChoiceNotFoundError):
            begin_check(hub, "dance")


class TestResolveRoll:
    """Tests for resolve_roll."""

    def test_success_applies_outcome(self, character, hub):
        result = resolve_roll(character, hub, begin_check(hub, "rumors"), roll=12)

        c = result.character
        assert result.success is True
        assert result.breakdown == "d20 12 + CHA +0 = 12 vs DC 12"
        assert c.xp == 4
        assert c.campaign.flags["heard_rumor"] is True
        # baseline 8 plus the outcome's own 10
        assert c.campaign.progress == 18
        assert c.day == character.day + 1
        texts = [entry.text for entry in result.log]
        assert texts[0] == result.outcome_text
        assert "Quest hook: The Map That Shouldn’t Exist" in texts
        assert all(entry.day == c.day for entry in result.log)

    def test_failure_still_advances(self, character, hub):
        result = resolve_roll(character, hub, begin_check(hub, "rumors"), roll=5)
        c = result.character
        assert result.success is False
        assert c.gold == character.gold - 2
        assert c.campaign.progress == 8
        assert c.day == character.day + 1

    def test_natural_one_fails(self, make_character, hub):
        hero = make_character(stats=Stats(cha=30))
        result = resolve_roll(hero, hub, begin_check(hub, "rumors"), roll=1)
        assert result.success is False

    def test_input_not_mutated(self, character, hub):
        resolve_roll(character, hub, begin_check(hub, "rumors"), roll=20)
        assert character.xp == 0
        assert character.campaign.progress == 0
        assert character.day == 1

    def test_draws_roll_when_missing(self, character, hub):
        with patch("critical_miss.skills.checks.roll_d20", return_value=20):
            result = resolve_roll(character, hub, begin_check(hub, "flirt"))
        assert result.roll == 20
        assert result.success is True

    def test_rejects_bad_roll(self, character, hub):
        with pytest.raises(ValueError):
            resolve_roll(character, hub, begin_check(hub, "rumors"), roll=21)

    def test_pending_roll_for_another_scene(self, character, hub):
        scene = ambush_scene()
        with pytest.raises(ChoiceNotFoundError):
            resolve_roll(character, scene, begin_check(hub, "rumors"), roll=10)

    def test_custom_progress(self, character, hub):
        config = CampaignConfig(progress_per_check=0)
        result = resolve_roll(character, hub, begin_check(hub, "flirt"), roll=2, config=config)
        assert result.character.campaign.progress == 0

    def test_level_up_in_log(self, make_character, hub):
        hero = make_character(xp=296)
        result = resolve_roll(hero, hub, begin_check(hub, "rumors"), roll=15)
        assert result.levels_gained == 1
        assert result.character.level == 2
        assert any(e.text.startswith("Level up! You are now level 2.") for e in result.log)


class TestCombatHandOff:
    """Outcomes tagged as attacks start a fight instead of dealing damage."""

    def test_tagged_failure_starts_combat(self, character):
        scene = ambush_scene(hp_loss=3)
        result = resolve_roll(character, scene, begin_check(scene, "listen"), roll=2)

        c = result.character
        assert result.combat is not None
        assert result.combat.enemy.kind == "hound"
        assert c.pending_combat == result.combat
        assert c.hp == character.hp
        # other effects still apply
        assert c.xp == 1

    def test_untagged_damage_applies(self, character):
        scene = ambush_scene()
        result = resolve_roll(character, scene, begin_check(scene, "run"), roll=2)
        assert result.combat is None
        assert result.character.pending_combat is None
        assert result.character.hp == character.hp - 2

    def test_success_branch_has_no_fight(self, character):
        scene = ambush_scene()
        result = resolve_roll(character, scene, begin_check(scene, "listen"), roll=18)
        assert result.combat is None

    def test_authored_tavern_brawl(self, character, catalog):
        hub = catalog.require_scene(HUB_SCENE_ID)
        result = resolve_roll(character, hub, begin_check(hub, "suspicious"), roll=2)
        assert result.combat is not None
        assert result.combat.enemy.kind == "thug"
        assert "Combat triggered: Tavern brawl" in [e.text for e in result.log]

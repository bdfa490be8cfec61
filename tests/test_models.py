"""Tests for the core models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from critical_miss.models.campaign import ArcId, CampaignState, act_for_progress
from critical_miss.models.combat import CombatStatus
from critical_miss.models.scene import Outcome, Scene, SceneChoice
from critical_miss.models.stats import StatKey


class TestCampaignState:
    """Tests for CampaignState."""

    @pytest.mark.parametrize(
        "progress,act", [(0, 1), (34, 1), (35, 2), (69, 2), (70, 3), (100, 3)]
    )
    def test_act_from_progress(self, progress, act):
        assert act_for_progress(progress) == act
        assert CampaignState(arc_id=ArcId.MIMIC, progress=progress).act == act

    def test_advance_clamped(self):
        campaign = CampaignState(arc_id=ArcId.TAXMAN, progress=95)
        assert campaign.advance(10) == 5
        assert campaign.progress == 100
        assert campaign.advance(-20) == 0

    def test_mark_seen_is_append_only(self):
        campaign = CampaignState(arc_id=ArcId.TAXMAN)
        campaign.mark_seen("a")
        campaign.mark_seen("b")
        campaign.mark_seen("a")
        assert campaign.seen_scene_ids == ["a", "b"]

    def test_progress_bounds(self):
        with pytest.raises(ValidationError):
            CampaignState(arc_id=ArcId.TAXMAN, progress=101)


class TestCharacter:
    """Tests for Character helpers."""

    def test_pools_clamped_on_creation(self, make_character):
        c = make_character(hp=50, hit_dice_remaining=9, spell_slots_max=1, spell_slots_remaining=4)
        assert c.hp == c.hp_max
        assert c.hit_dice_remaining == c.hit_dice_max
        assert c.spell_slots_remaining == 1

    def test_heal_and_damage_report_actual(self, make_character):
        c = make_character(hp=8)
        assert c.heal(5) == 2
        assert c.take_damage(15) == 10
        assert c.is_dead
        assert c.take_damage(3) == 0

    def test_adjust_gold_returns_applied(self, make_character):
        c = make_character(gold=4)
        assert c.adjust_gold(-10) == -4
        assert c.gold == 0

    def test_use_spell_slot(self, make_character):
        c = make_character(spell_slots_max=1, spell_slots_remaining=1)
        assert c.use_spell_slot() is True
        assert c.use_spell_slot() is False

    def test_negative_hp_rejected(self, make_character):
        with pytest.raises(ValidationError):
            make_character(hp=-1)


class TestScene:
    def _choice(self, choice_id: str) -> SceneChoice:
        return SceneChoice(
            id=choice_id,
            text=choice_id,
            stat=StatKey.STR,
            dc=10,
            on_success=Outcome(text="ok"),
            on_fail=Outcome(text="no"),
        )

    def test_choice_count_bounds(self):
        with pytest.raises(ValidationError):
            Scene(id="s", category="Road", title="t", body="b", choices=[self._choice("a")])
        with pytest.raises(ValidationError):
            Scene(
                id="s",
                category="Road",
                title="t",
                body="b",
                choices=[self._choice(str(i)) for i in range(5)],
            )

    def test_scene_is_frozen(self):
        scene = Scene(
            id="s", category="Road", title="t", body="b",
            choices=[self._choice("a"), self._choice("b")],
        )
        with pytest.raises(ValidationError):
            scene.title = "changed"


def test_terminal_statuses():
    assert {s for s in CombatStatus if s.is_terminal} == {
        CombatStatus.WON,
        CombatStatus.LOST,
        CombatStatus.FLED,
    }

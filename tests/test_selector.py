"""Tests for scene selection."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from critical_miss.content.arcs import ARC_SCENE_POOLS, HUB_SCENE_ID
from critical_miss.content.catalog import SceneCatalog
from critical_miss.engine.config import CampaignConfig
from critical_miss.engine.selector import (
    FILLER_CATEGORY,
    available_refs,
    filler_scene_id,
    make_filler_scene,
    next_turn_scene,
    weighted_pick,
)
from critical_miss.models.campaign import ArcId, CampaignState
from critical_miss.models.scene import WeightedSceneRef


def in_arc(make_character, arc_id: ArcId, progress: int = 0, **flags):
    campaign = CampaignState(arc_id=arc_id, progress=progress, flags=dict(flags))
    return make_character(campaign=campaign)


class TestWeightedPick:
    """Cumulative-weight walk."""

    def test_walks_cumulative_weights(self):
        items = [("a", 1), ("b", 3), ("c", 2)]
        assert weighted_pick(items, draw=1) == "a"
        assert weighted_pick(items, draw=2) == "b"
        assert weighted_pick(items, draw=4) == "b"
        assert weighted_pick(items, draw=5) == "c"
        assert weighted_pick(items, draw=6) == "c"

    def test_last_absorbs_leftover(self):
        assert weighted_pick([("a", 1), ("b", 1)], draw=99) == "b"

    def test_empty_pool(self):
        with pytest.raises(ValueError, match="empty"):
            weighted_pick([])

    def test_non_positive_total(self):
        with pytest.raises(ValueError):
            weighted_pick([("a", 0)])

    def test_draw_is_within_total(self):
        with patch("critical_miss.engine.selector.secrets.randbelow", return_value=0) as draw:
            assert weighted_pick([("a", 2), ("b", 5)]) == "a"
        draw.assert_called_once_with(7)

    def test_random_draws_stay_in_pool(self):
        items = [("x", 1), ("y", 1)]
        for _ in range(50):
            assert weighted_pick(items) in {"x", "y"}


class TestPoolSelection:
    """Pool picks, no-repeat law and filler fallback."""

    def test_no_repeats_until_exhausted(self, make_character, catalog):
        """Every act-1 treasure scene appears once before any filler."""
        hero = in_arc(make_character, ArcId.TREASURE)
        pool_ids = {ref.id for ref in ARC_SCENE_POOLS[ArcId.TREASURE][1]}

        picked = []
        for _ in range(len(pool_ids)):
            selection = next_turn_scene(hero, catalog)
            assert selection.source == "pool"
            picked.append(selection.scene.id)
            hero = selection.character

        assert sorted(picked) == sorted(pool_ids)
        assert next_turn_scene(hero, catalog).source == "filler"

    def test_marks_seen(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.VENGEANCE)
        selection = next_turn_scene(hero, catalog)
        c = selection.character
        assert c.last_scene_id == selection.scene.id
        assert c.recent_scene_ids == [selection.scene.id]
        assert selection.scene.id in c.campaign.seen_scene_ids
        assert hero.campaign.seen_scene_ids == []

    def test_recent_window_is_bounded(self, make_character, catalog):
        config = CampaignConfig(recent_window=2)
        hero = in_arc(make_character, ArcId.TREASURE)
        for _ in range(4):
            hero = next_turn_scene(hero, catalog, config).character
        assert len(hero.recent_scene_ids) == 2
        assert len(hero.campaign.seen_scene_ids) == 4

    def test_gated_entry_skipped(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.MIMIC, progress=40, mimic_followup_done=True)
        ids = [ref.id for ref in available_refs(hero, catalog)]
        assert "camp.mimic_followup" not in ids
        assert "dungeon.mimic_intro" in ids

    def test_ungated_entry_available(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.MIMIC, progress=40)
        ids = [ref.id for ref in available_refs(hero, catalog)]
        assert "camp.mimic_followup" in ids

    def test_unknown_pool_entry_skipped(self, make_character):
        catalog = SceneCatalog(pools={ArcId.TREASURE: {1: [WeightedSceneRef(id="nowhere")]}})
        hero = in_arc(make_character, ArcId.TREASURE)
        assert available_refs(hero, catalog) == []
        assert next_turn_scene(hero, catalog).source == "filler"


class TestForcedAndFinale:
    """Queued follow-ups and finales take precedence over the pool."""

    def test_forced_scene_first(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TREASURE, progress=90)
        hero = hero.model_copy(update={"next_scene_id": "road.witness"})
        selection = next_turn_scene(hero, catalog)
        assert selection.source == "forced"
        assert selection.scene.id == "road.witness"
        assert selection.character.next_scene_id is None
        assert "road.witness" in selection.character.campaign.seen_scene_ids

    def test_forced_scene_may_repeat(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TREASURE)
        hero.campaign.mark_seen("road.witness")
        hero = hero.model_copy(update={"next_scene_id": "road.witness"})
        assert next_turn_scene(hero, catalog).scene.id == "road.witness"

    def test_unknown_forced_scene_falls_back_to_hub(self, make_character, catalog, caplog):
        hero = make_character(next_scene_id="does.not.exist")
        with caplog.at_level(logging.WARNING, logger="critical_miss.content.catalog"):
            selection = next_turn_scene(hero, catalog)
        assert selection.scene.id == HUB_SCENE_ID
        assert "does.not.exist" in caplog.text

    def test_finale_at_threshold(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TREASURE, progress=85)
        selection = next_turn_scene(hero, catalog)
        assert selection.source == "finale"
        assert selection.scene.id == "vault.final_lock"

    def test_finale_only_once(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TREASURE, progress=100)
        first = next_turn_scene(hero, catalog)
        second = next_turn_scene(first.character, catalog)
        assert first.source == "finale"
        assert second.source == "pool"
        assert second.scene.id == "vault.lantern_room"

    def test_no_finale_below_threshold(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TREASURE, progress=84)
        assert next_turn_scene(hero, catalog).source == "pool"


class TestFiller:
    """Synthesized filler scenes."""

    def test_shape(self, make_character, catalog):
        hero = in_arc(make_character, ArcId.TAXMAN, progress=10)
        scene = make_filler_scene(hero, catalog)
        assert scene.category == FILLER_CATEGORY
        assert scene.title == catalog.arc_meta(ArcId.TAXMAN).title
        assert [c.id for c in scene.choices] == ["push_on", "scavenge"]
        assert all(10 <= c.dc <= 15 for c in scene.choices)

    def test_id_keyed_by_arc_day_and_act(self, make_character):
        hero = in_arc(make_character, ArcId.MIMIC, progress=75)
        assert filler_scene_id(hero) == "filler.mimic.day1.act3"

    def test_ids_unique_on_same_day(self, make_character):
        """Fillers requested repeatedly on the same day never collide."""
        catalog = SceneCatalog(pools={})
        hero = in_arc(make_character, ArcId.TREASURE)
        ids = []
        for _ in range(3):
            selection = next_turn_scene(hero, catalog)
            ids.append(selection.scene.id)
            hero = selection.character
        assert ids == [
            "filler.treasure.day1.act1",
            "filler.treasure.day1.act1.n2",
            "filler.treasure.day1.act1.n3",
        ]

    def test_custom_dc_range(self, make_character, catalog):
        config = CampaignConfig(filler_dc_min=12, filler_dc_max=12)
        scene = make_filler_scene(make_character(), catalog, config)
        assert {c.dc for c in scene.choices} == {12}

    def test_bad_dc_range(self):
        with pytest.raises(ValueError):
            CampaignConfig(filler_dc_min=16, filler_dc_max=10)

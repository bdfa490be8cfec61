"""Tests for snapshot models and the in-memory repository."""

from __future__ import annotations

import pytest

from critical_miss.db import InMemorySnapshotRepository, SnapshotRepository
from critical_miss.engine.resolver import begin_check
from critical_miss.models.log import LogEntry
from critical_miss.models.snapshot import (
    SNAPSHOT_VERSION,
    CombatStage,
    IdleStage,
    RollStage,
    Snapshot,
)
from critical_miss.skills.combat import start_combat


@pytest.fixture
def repo() -> InMemorySnapshotRepository:
    return InMemorySnapshotRepository()


class TestInMemorySnapshotRepository:
    """Tests for InMemorySnapshotRepository."""

    def test_satisfies_protocol(self, repo: InMemorySnapshotRepository):
        store: SnapshotRepository = repo
        assert store.load() is None

    def test_save_and_load(self, repo: InMemorySnapshotRepository, character):
        snapshot = Snapshot(character=character, log=[LogEntry(day=1, text="Hello")])
        repo.save(snapshot)
        loaded = repo.load()
        assert loaded == snapshot
        assert loaded is not snapshot

    def test_saved_copy_is_isolated(self, repo: InMemorySnapshotRepository, character):
        expected = character.gold
        snapshot = Snapshot(character=character.model_copy(deep=True))
        repo.save(snapshot)
        snapshot.character.gold = 0
        repo.load().character.gold = 1
        assert repo.load().character.gold == expected
        assert expected != 0

    def test_clear(self, repo: InMemorySnapshotRepository):
        repo.save(Snapshot())
        repo.clear()
        assert repo.load() is None

    def test_rejects_old_version(self, repo: InMemorySnapshotRepository):
        with pytest.raises(ValueError, match="version"):
            repo.save(Snapshot(version=SNAPSHOT_VERSION - 1))


class TestSnapshotShape:
    """Snapshots survive a JSON hop with their stage intact."""

    def test_defaults(self):
        snapshot = Snapshot()
        assert snapshot.version == SNAPSHOT_VERSION
        assert isinstance(snapshot.stage, IdleStage)

    def test_roll_stage_json(self, catalog, character):
        scene = catalog.require_scene("tavern.dripping_goblet")
        snapshot = Snapshot(
            character=character,
            stage=RollStage(scene=scene, pending=begin_check(scene, "flirt")),
        )
        restored = Snapshot.model_validate_json(snapshot.model_dump_json())
        assert isinstance(restored.stage, RollStage)
        assert restored.stage.pending.choice_id == "flirt"
        assert restored.stage.scene == scene

    def test_combat_stage_json(self, catalog):
        hub = catalog.require_scene("tavern.dripping_goblet")
        trigger = hub.get_choice("suspicious").on_fail.combat
        combat = start_combat(trigger)
        snapshot = Snapshot(stage=CombatStage(combat=combat))
        restored = Snapshot.model_validate_json(snapshot.model_dump_json())
        assert isinstance(restored.stage, CombatStage)
        assert restored.stage.combat.enemy == combat.enemy

    def test_character_act_is_derived(self, character):
        data = Snapshot(character=character).model_dump()
        assert data["character"]["campaign"]["act"] == 1

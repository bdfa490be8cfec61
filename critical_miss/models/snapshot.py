"""
Snapshot shape exchanged with the persistence collaborator.

The engine never reads or writes persisted bytes; it only produces and
accepts these models.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from critical_miss.models.character import Character
from critical_miss.models.combat import CombatState
from critical_miss.models.log import LogEntry
from critical_miss.models.scene import PendingRoll, Scene

SNAPSHOT_VERSION = 4


class IdleStage(BaseModel):
    """Waiting for the next turn."""

    kind: Literal["idle"] = "idle"


class SceneStage(BaseModel):
    kind: Literal["scene"] = "scene"
    scene: Scene


class RollStage(BaseModel):
    kind: Literal["roll"] = "roll"
    scene: Scene
    pending: PendingRoll


class OutcomeStage(BaseModel):
    kind: Literal["outcome"] = "outcome"
    scene: Scene | None = None
    outcome_text: str


class CombatStage(BaseModel):
    kind: Literal["combat"] = "combat"
    combat: CombatState


class DeadStage(BaseModel):
    kind: Literal["dead"] = "dead"


Stage = Annotated[
    IdleStage | SceneStage | RollStage | OutcomeStage | CombatStage | DeadStage,
    Field(discriminator="kind"),
]


class Snapshot(BaseModel):
    """Everything a session needs to resume."""

    version: int = SNAPSHOT_VERSION
    character: Character | None = None
    log: list[LogEntry] = Field(default_factory=list)
    stage: Stage = Field(default_factory=IdleStage)

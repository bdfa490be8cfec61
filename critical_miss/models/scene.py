"""
Scene models for Critical Miss.

Scenes are immutable authored content. Each choice carries two outcomes,
and each outcome is pure data: narrative text, extra log lines, a list of
effects for the resolver to interpret, and optionally a combat trigger.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from critical_miss.models.combat import CombatOutcome
from critical_miss.models.stats import StatKey


class ChoiceNotFoundError(ValueError):
    """A choice id (or pending roll) does not belong to the scene."""


# =============================================================================
# Effects
# =============================================================================


class AdjustHp(BaseModel):
    """Heal (positive) or hurt (negative)."""

    kind: Literal["hp"] = "hp"
    amount: int


class AdjustGold(BaseModel):
    kind: Literal["gold"] = "gold"
    amount: int


class GainXp(BaseModel):
    kind: Literal["xp"] = "xp"
    amount: int = Field(ge=0)


class AddItem(BaseModel):
    kind: Literal["item"] = "item"
    item: str


class SetArcFlag(BaseModel):
    """Arc-scoped continuity flag."""

    kind: Literal["arc_flag"] = "arc_flag"
    key: str
    value: bool = True


class SetFlag(BaseModel):
    """Character-level flag that survives across arcs."""

    kind: Literal["flag"] = "flag"
    key: str
    value: bool = True


class AdvanceArc(BaseModel):
    kind: Literal["advance_arc"] = "advance_arc"
    delta: int = Field(ge=0)


class ForceScene(BaseModel):
    """Queue a specific follow-up scene for the next turn."""

    kind: Literal["next_scene"] = "next_scene"
    scene_id: str


class AddCompanion(BaseModel):
    """Add a companion, or refresh the relationship of an existing one."""

    kind: Literal["companion"] = "companion"
    companion_id: str
    name: str
    relationship: int = Field(default=50, ge=0, le=100)


class AdjustRelationship(BaseModel):
    kind: Literal["relationship"] = "relationship"
    companion_id: str
    delta: int


class JoinParty(BaseModel):
    kind: Literal["party"] = "party"
    member: str


Effect = Annotated[
    AdjustHp
    | AdjustGold
    | GainXp
    | AddItem
    | SetArcFlag
    | SetFlag
    | AdvanceArc
    | ForceScene
    | AddCompanion
    | AdjustRelationship
    | JoinParty,
    Field(discriminator="kind"),
]


# =============================================================================
# Outcomes, choices, scenes
# =============================================================================


class CombatTrigger(BaseModel):
    """Authored tag: this outcome is an attack and starts a fight."""

    enemy_kind: str = Field(description="Enemy template key, e.g. 'thug'")
    on_win: CombatOutcome
    on_lose: CombatOutcome
    on_flee: CombatOutcome


class Outcome(BaseModel):
    """What happens when a choice succeeds or fails."""

    text: str
    logs: list[str] = Field(default_factory=list)
    effects: list[Effect] = Field(default_factory=list)
    combat: CombatTrigger | None = None

    @property
    def hp_delta(self) -> int:
        """Net authored hp change (negative means harm)."""
        return sum(e.amount for e in self.effects if isinstance(e, AdjustHp))


class SceneChoice(BaseModel):
    """One option offered by a scene."""

    id: str
    text: str
    stat: StatKey
    dc: int = Field(ge=1, description="Difficulty class")
    on_success: Outcome
    on_fail: Outcome

    model_config = {"frozen": True}


class Scene(BaseModel):
    """An authored (or synthesized filler) story beat."""

    id: str
    category: str
    title: str
    body: str
    choices: list[SceneChoice] = Field(min_length=2, max_length=4)

    model_config = {"frozen": True}

    def get_choice(self, choice_id: str) -> SceneChoice:
        """Look up a choice; unknown ids are an authoring error."""
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        raise ChoiceNotFoundError(f"Choice '{choice_id}' not found in scene '{self.id}'")


class PendingRoll(BaseModel):
    """Correlates a picked choice with the die roll that will resolve it."""

    scene_id: str
    choice_id: str
    stat: StatKey
    dc: int


class WeightedSceneRef(BaseModel):
    """An entry in an arc/act pool."""

    id: str
    weight: int = Field(default=1, ge=1)
    unless_flags: list[str] = Field(
        default_factory=list, description="Skip the entry once any of these arc flags is set"
    )

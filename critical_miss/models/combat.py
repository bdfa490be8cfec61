"""
Combat models for Critical Miss.

A CombatState exists from the moment an outcome starts a fight until one of
the three terminal branches (won, lost, fled) is applied by the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from critical_miss.models.stats import StatKey


class CombatStatus(str, Enum):
    """State of the combat state machine."""

    ACTIVE = "active"
    WON = "won"
    LOST = "lost"
    FLED = "fled"

    @property
    def is_terminal(self) -> bool:
        return self is not CombatStatus.ACTIVE


class DamageDice(BaseModel):
    """A damage expression like 1d8."""

    dice: int = Field(default=1, ge=1)
    sides: Literal[4, 6, 8, 10, 12]

    @property
    def notation(self) -> str:
        return f"{self.dice}d{self.sides}"


class AttackIntent(BaseModel):
    """A plain attack."""

    kind: Literal["attack"] = "attack"
    label: str
    to_hit: int = Field(description="Bonus added to the enemy's d20")
    damage: DamageDice
    stat: StatKey = Field(description="Player stat whose modifier raises AC against it")


class HeavyIntent(BaseModel):
    """A heavier, telegraphed attack."""

    kind: Literal["heavy"] = "heavy"
    label: str
    to_hit: int
    damage: DamageDice
    stat: StatKey


class DefendIntent(BaseModel):
    """A defensive stance: raises AC, deals no damage."""

    kind: Literal["defend"] = "defend"
    label: str
    ac_bonus: int = Field(default=2, ge=0)


EnemyIntent = Annotated[
    AttackIntent | HeavyIntent | DefendIntent,
    Field(discriminator="kind"),
]


class CombatEnemy(BaseModel):
    """Enemy snapshot."""

    id: str = Field(default_factory=lambda: f"e_{uuid4().hex[:12]}")
    kind: str = Field(description="Template key, e.g. 'thug'")
    name: str
    hp_max: int = Field(ge=1)
    hp: int = Field(ge=0)
    ac: int = Field(ge=0)
    intent: EnemyIntent

    @model_validator(mode="after")
    def hp_not_exceeds_max(self) -> CombatEnemy:
        if self.hp > self.hp_max:
            self.hp = self.hp_max
        return self

    @property
    def effective_ac(self) -> int:
        """AC including any defensive intent."""
        if isinstance(self.intent, DefendIntent):
            return self.ac + self.intent.ac_bonus
        return self.ac


class CombatOutcome(BaseModel):
    """Authored reward/consequence for one terminal branch."""

    text: str
    next_scene_id: str | None = None
    logs: list[str] = Field(default_factory=list)


class CombatState(BaseModel):
    """An ongoing fight."""

    enemy: CombatEnemy
    round: int = Field(default=1, ge=1)
    flee_progress: int = Field(default=0, ge=0, le=100)
    guard: bool = Field(default=False, description="Player guard bonus for the next enemy action")
    on_win: CombatOutcome
    on_lose: CombatOutcome
    on_flee: CombatOutcome

    def outcome_for(self, status: CombatStatus) -> CombatOutcome:
        """Authored branch for a terminal status."""
        if status is CombatStatus.WON:
            return self.on_win
        if status is CombatStatus.LOST:
            return self.on_lose
        if status is CombatStatus.FLED:
            return self.on_flee
        raise ValueError("Active combat has no outcome")

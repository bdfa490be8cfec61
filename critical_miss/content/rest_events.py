"""
Rest story events.

Narrative threads that can only surface while the character rests. Each is
gated by arc flags, rolled against the rest's consequence roll, and resolved
with its own stat check using the story roll.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from critical_miss.models.campaign import ArcId
from critical_miss.models.stats import StatKey


class RestEvent(BaseModel):
    """An arc-specific event that may interrupt a rest."""

    id: str
    arc_id: ArcId
    requires_flags: list[str] = Field(default_factory=list)
    blocked_by_flags: list[str] = Field(default_factory=list)
    short_chance: int = Field(ge=0, le=100, description="Percentile threshold on short rest")
    long_chance: int = Field(ge=0, le=100, description="Percentile threshold on long rest")
    stat: StatKey
    dc: int = Field(ge=1)
    intro_text: str
    success_text: str
    failure_text: str
    set_flags: list[str] = Field(default_factory=list, description="Arc flags set either way")
    success_flag: str | None = None
    failure_flag: str | None = None
    next_scene_id: str | None = None
    short_hp_loss: int = Field(default=1, ge=0)
    long_hp_loss: int = Field(default=2, ge=0)

    def is_available(self, arc_id: ArcId, flags: dict[str, bool]) -> bool:
        if arc_id != self.arc_id:
            return False
        if not all(flags.get(f, False) for f in self.requires_flags):
            return False
        return not any(flags.get(f, False) for f in self.blocked_by_flags)


REST_EVENTS: tuple[RestEvent, ...] = (
    RestEvent(
        id="mimic_scratching",
        arc_id=ArcId.MIMIC,
        requires_flags=["mimic_met"],
        blocked_by_flags=["mimic_followup_done"],
        short_chance=25,
        long_chance=40,
        stat=StatKey.WIS,
        dc=13,
        intro_text="Rest event: scratching outside your tent…",
        success_text="You wake in time. Whatever it is, you have the upper hand.",
        failure_text="You do NOT wake in time. Something bites.",
        set_flags=["mimic_followup_done"],
        success_flag="mimic_rest_good",
        failure_flag="mimic_rest_bad",
        next_scene_id="camp.mimic_followup",
        short_hp_loss=1,
        long_hp_loss=2,
    ),
)

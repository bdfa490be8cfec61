"""
Campaign state: which authored arc the character is in and how far along it is.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

ACT_TWO_THRESHOLD = 35
ACT_THREE_THRESHOLD = 70
MAX_PROGRESS = 100


class ArcId(str, Enum):
    """Authored campaign storylines."""

    TAXMAN = "taxman"
    INTERNSHIP = "internship"
    MIMIC = "mimic"
    TREASURE = "treasure"
    VENGEANCE = "vengeance"


def act_for_progress(progress: int) -> int:
    """Act 1..3 as a pure function of arc progress."""
    if progress >= ACT_THREE_THRESHOLD:
        return 3
    if progress >= ACT_TWO_THRESHOLD:
        return 2
    return 1


class CampaignState(BaseModel):
    """
    Story state for the current arc.

    Reset (not mutated back) when a new adventure starts for the same character.
    """

    arc_id: ArcId
    progress: int = Field(default=0, ge=0, le=MAX_PROGRESS)
    flags: dict[str, bool] = Field(default_factory=dict, description="Arc-scoped flags")
    seen_scene_ids: list[str] = Field(
        default_factory=list, description="Scenes already used in this arc (append-only)"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def act(self) -> int:
        """Current act, derived from progress."""
        return act_for_progress(self.progress)

    def has_flag(self, key: str) -> bool:
        return self.flags.get(key, False)

    def advance(self, delta: int) -> int:
        """
        Move progress forward, clamped to 0..100.

        Returns the actual progress gained.
        """
        before = self.progress
        self.progress = max(0, min(MAX_PROGRESS, self.progress + max(0, delta)))
        return self.progress - before

    def mark_seen(self, scene_id: str) -> None:
        if scene_id not in self.seen_scene_ids:
            self.seen_scene_ids.append(scene_id)


def new_campaign_state(arc_id: ArcId) -> CampaignState:
    """Fresh story state at the start of an arc."""
    return CampaignState(arc_id=arc_id)

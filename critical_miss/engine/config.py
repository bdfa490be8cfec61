"""
Engine configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from critical_miss.skills.combat import CombatConfig
from critical_miss.skills.rest import RestConfig


class CampaignConfig(BaseModel):
    """Tunables for scene flow and new characters."""

    progress_per_check: int = Field(default=8, ge=0, description="Baseline story momentum")
    finale_threshold: int = Field(default=85, ge=0, le=100)
    recent_window: int = Field(default=6, ge=1, description="Size of the recent-scene window")
    starting_gold: int = Field(default=12, ge=0)
    starting_hit_dice: int = Field(default=6, ge=0)
    filler_dc_min: int = Field(default=10, ge=1)
    filler_dc_max: int = Field(default=15, ge=1)

    @model_validator(mode="after")
    def filler_range_ordered(self) -> CampaignConfig:
        if self.filler_dc_min > self.filler_dc_max:
            raise ValueError("filler_dc_min must not exceed filler_dc_max")
        return self


class EngineConfig(BaseModel):
    """Engine configuration."""

    campaign: CampaignConfig = Field(default_factory=CampaignConfig)
    combat: CombatConfig = Field(default_factory=CombatConfig)
    rest: RestConfig = Field(default_factory=RestConfig)

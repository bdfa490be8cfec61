"""
Core Engine for Critical Miss.

The engine orchestrates:
- Scene selection (queued follow-ups, finales, weighted pools, filler)
- Check resolution (effects, combat hand-off, leveling)
- Combat rounds and rest through the GameEngine facade
"""

from __future__ import annotations

from critical_miss.engine.config import CampaignConfig, EngineConfig
from critical_miss.engine.effects import apply_effect, apply_effects
from critical_miss.engine.game import (
    CombatAction,
    CombatRoundResult,
    GameEngine,
    StatGenMode,
    generate_stats,
    random_name,
)
from critical_miss.engine.resolver import ResolutionResult, begin_check, resolve_roll
from critical_miss.engine.selector import (
    SceneSelection,
    make_filler_scene,
    next_turn_scene,
    weighted_pick,
)

__all__ = [
    # Config
    "CampaignConfig",
    "EngineConfig",
    # Effects
    "apply_effect",
    "apply_effects",
    # Selector
    "SceneSelection",
    "make_filler_scene",
    "next_turn_scene",
    "weighted_pick",
    # Resolver
    "ResolutionResult",
    "begin_check",
    "resolve_roll",
    # Facade
    "CombatAction",
    "CombatRoundResult",
    "GameEngine",
    "StatGenMode",
    "generate_stats",
    "random_name",
]

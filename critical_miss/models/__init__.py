"""
Core Data Models for Critical Miss.

These models define the campaign record the engine threads through every
operation: the character, its campaign state, authored scenes and their
data-only outcomes, combat state, journal lines and the persisted snapshot.
"""

from critical_miss.models.campaign import (
    ACT_THREE_THRESHOLD,
    ACT_TWO_THRESHOLD,
    ArcId,
    CampaignState,
    act_for_progress,
    new_campaign_state,
)
from critical_miss.models.character import (
    MAX_LEVEL,
    Alignment,
    Character,
    ClassName,
    Companion,
    Party,
    Race,
    Sex,
)
from critical_miss.models.combat import (
    AttackIntent,
    CombatEnemy,
    CombatOutcome,
    CombatState,
    CombatStatus,
    DamageDice,
    DefendIntent,
    EnemyIntent,
    HeavyIntent,
)
from critical_miss.models.log import LogEntry, log_lines
from critical_miss.models.scene import (
    AddCompanion,
    AddItem,
    AdjustGold,
    AdjustHp,
    AdjustRelationship,
    AdvanceArc,
    ChoiceNotFoundError,
    CombatTrigger,
    Effect,
    ForceScene,
    GainXp,
    JoinParty,
    Outcome,
    PendingRoll,
    Scene,
    SceneChoice,
    SetArcFlag,
    SetFlag,
    WeightedSceneRef,
)
from critical_miss.models.snapshot import SNAPSHOT_VERSION, Snapshot, Stage
from critical_miss.models.stats import StatKey, Stats, modifier_for_score

__all__ = [
    # Campaign
    "ArcId",
    "CampaignState",
    "act_for_progress",
    "new_campaign_state",
    "ACT_TWO_THRESHOLD",
    "ACT_THREE_THRESHOLD",
    # Character
    "Character",
    "Companion",
    "Party",
    "Sex",
    "Race",
    "ClassName",
    "Alignment",
    "MAX_LEVEL",
    # Stats
    "StatKey",
    "Stats",
    "modifier_for_score",
    # Combat
    "CombatState",
    "CombatEnemy",
    "CombatOutcome",
    "CombatStatus",
    "DamageDice",
    "EnemyIntent",
    "AttackIntent",
    "HeavyIntent",
    "DefendIntent",
    # Scenes
    "Scene",
    "SceneChoice",
    "Outcome",
    "CombatTrigger",
    "PendingRoll",
    "WeightedSceneRef",
    "ChoiceNotFoundError",
    "Effect",
    "AdjustHp",
    "AdjustGold",
    "GainXp",
    "AddItem",
    "SetArcFlag",
    "SetFlag",
    "AdvanceArc",
    "ForceScene",
    "AddCompanion",
    "AdjustRelationship",
    "JoinParty",
    # Log & snapshot
    "LogEntry",
    "log_lines",
    "Snapshot",
    "Stage",
    "SNAPSHOT_VERSION",
]

"""
Check Resolver.

Resolves a picked choice against a d20: advances time and arc momentum,
applies the matching outcome's effects, hands off to combat when the
outcome is tagged as an attack, then reconciles leveling.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from critical_miss.engine.config import CampaignConfig
from critical_miss.engine.effects import apply_effects
from critical_miss.models.character import Character
from critical_miss.models.combat import CombatState
from critical_miss.models.log import LogEntry, log_lines
from critical_miss.models.scene import ChoiceNotFoundError, PendingRoll, Scene
from critical_miss.skills.checks import make_check
from critical_miss.skills.combat import start_combat
from critical_miss.skills.leveling import apply_leveling

logger = logging.getLogger(__name__)


class ResolutionResult(BaseModel):
    """Result of resolving a pending roll."""

    character: Character
    log: list[LogEntry] = Field(default_factory=list)
    outcome_text: str
    breakdown: str = Field(description="e.g. 'd20 11 + DEX +2 = 13 vs DC 13'")
    roll: int = Field(ge=1, le=20)
    success: bool
    combat: CombatState | None = Field(
        default=None, description="Fight started by this outcome, if any"
    )
    levels_gained: int = Field(default=0, ge=0)


def begin_check(scene: Scene, choice_id: str) -> PendingRoll:
    """Correlate a picked choice with the roll that will resolve it."""
    picked = scene.get_choice(choice_id)
    return PendingRoll(scene_id=scene.id, choice_id=picked.id, stat=picked.stat, dc=picked.dc)


def resolve_roll(
    character: Character,
    scene: Scene,
    pending: PendingRoll,
    roll: int | None = None,
    config: CampaignConfig | None = None,
) -> ResolutionResult:
    """
    Resolve a pending roll.

    Order of operations:
    1. total = d20 + stat modifier; a natural 1 always fails
    2. day += 1 and arc progress += the baseline increment, regardless of result
    3. the success or failure outcome's effects are applied in order
    4. a combat-tagged outcome rolls back its hp loss and attaches a fight
    5. leveling reconciles any XP change

    Args:
        character: Character making the check (not mutated)
        scene: Scene the choice belongs to
        pending: Pending roll from begin_check
        roll: Externally supplied natural d20; drawn internally when None
        config: Campaign tunables

    Returns:
        ResolutionResult

    Raises:
        ChoiceNotFoundError: The pending roll does not belong to this scene
    """
    config = config or CampaignConfig()
    if pending.scene_id != scene.id:
        raise ChoiceNotFoundError(
            f"Pending roll for scene '{pending.scene_id}' resolved against '{scene.id}'"
        )
    picked = scene.get_choice(pending.choice_id)

    c = character.model_copy(deep=True)
    check = make_check(c.modifier(picked.stat), picked.dc, roll=roll, stat=picked.stat)

    c.day += 1
    c.campaign.advance(config.progress_per_check)

    outcome = picked.on_success if check.success else picked.on_fail
    hp_before = c.hp
    c = apply_effects(c, outcome.effects)
    entries = log_lines(c.day, outcome.text, *outcome.logs)

    combat = None
    if outcome.combat is not None:
        # The attacker deals the damage in the fight instead.
        if c.hp < hp_before:
            c.hp = hp_before
        combat = start_combat(outcome.combat)
        c.pending_combat = combat
        logger.debug(
            "Outcome of %s/%s starts combat with %s", scene.id, picked.id, combat.enemy.kind
        )

    leveling = apply_leveling(c)
    c = leveling.character
    entries.extend(log_lines(c.day, *leveling.log_lines))

    logger.debug(
        "Resolved %s/%s: %s (%s)",
        scene.id,
        picked.id,
        "success" if check.success else "failure",
        check.breakdown,
    )
    return ResolutionResult(
        character=c,
        log=entries,
        outcome_text=outcome.text,
        breakdown=check.breakdown,
        roll=check.roll,
        success=check.success,
        combat=combat,
        levels_gained=leveling.levels_gained,
    )

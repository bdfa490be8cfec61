"""
Outcome effect interpreter.

Applies an outcome's effect list to a character, in order. Every value is
clamped to its valid range; nothing here raises for resource exhaustion.
"""

from __future__ import annotations

from collections.abc import Iterable

from critical_miss.models.character import Character, Companion
from critical_miss.models.scene import (
    AddCompanion,
    AddItem,
    AdjustGold,
    AdjustHp,
    AdjustRelationship,
    AdvanceArc,
    Effect,
    ForceScene,
    GainXp,
    JoinParty,
    SetArcFlag,
    SetFlag,
)


def _clamp_relationship(value: int) -> int:
    return max(0, min(100, value))


def apply_effect(character: Character, effect: Effect) -> None:
    """Apply one effect in place to a working copy."""
    if isinstance(effect, AdjustHp):
        character.adjust_hp(effect.amount)
    elif isinstance(effect, AdjustGold):
        character.adjust_gold(effect.amount)
    elif isinstance(effect, GainXp):
        character.xp += effect.amount
    elif isinstance(effect, AddItem):
        character.inventory.append(effect.item)
    elif isinstance(effect, SetArcFlag):
        character.campaign.flags[effect.key] = effect.value
    elif isinstance(effect, SetFlag):
        character.flags[effect.key] = effect.value
    elif isinstance(effect, AdvanceArc):
        character.campaign.advance(effect.delta)
    elif isinstance(effect, ForceScene):
        character.next_scene_id = effect.scene_id
    elif isinstance(effect, AddCompanion):
        existing = character.get_companion(effect.companion_id)
        if existing is None:
            character.companions.append(
                Companion(
                    id=effect.companion_id,
                    name=effect.name,
                    relationship=_clamp_relationship(effect.relationship),
                )
            )
        else:
            existing.relationship = _clamp_relationship(effect.relationship)
    elif isinstance(effect, AdjustRelationship):
        existing = character.get_companion(effect.companion_id)
        if existing is not None:
            existing.relationship = _clamp_relationship(existing.relationship + effect.delta)
    elif isinstance(effect, JoinParty):
        character.party.in_party = True
        if effect.member not in character.party.members:
            character.party.members.append(effect.member)
    else:
        raise TypeError(f"Unsupported effect: {effect!r}")


def apply_effects(character: Character, effects: Iterable[Effect]) -> Character:
    """
    Apply effects in order and return the resulting character.

    The input character is not mutated.
    """
    c = character.model_copy(deep=True)
    for effect in effects:
        apply_effect(c, effect)
    return c

"""
Character Model for Critical Miss.

The protagonist record: identity fixed at creation, resources, progression,
recovery pools, collections, narrative flags, navigation state and the
embedded CampaignState. Owned by the engine; the presentation layer only
reads snapshots of it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from critical_miss.models.campaign import CampaignState
from critical_miss.models.combat import CombatState
from critical_miss.models.stats import StatKey, Stats

MAX_LEVEL = 20
MAX_GOLD = 999_999


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Race(str, Enum):
    HUMAN = "Human"
    ELF = "Elf"
    DWARF = "Dwarf"
    HALFLING = "Halfling"
    HALF_ELF = "Half-Elf"
    HALF_ORC = "Half-Orc"
    GNOME = "Gnome"
    TIEFLING = "Tiefling"


class ClassName(str, Enum):
    ROGUE = "Rogue"
    WIZARD = "Wizard"
    BARBARIAN = "Barbarian"
    FIGHTER = "Fighter"
    PALADIN = "Paladin"
    DRUID = "Druid"


class Alignment(str, Enum):
    GOOD = "Good"
    NEUTRAL = "Neutral"
    EVIL = "Evil"


class Companion(BaseModel):
    """A travelling companion and how much they like you."""

    id: str
    name: str
    relationship: int = Field(default=50, ge=0, le=100)


class Party(BaseModel):
    """Adventuring party membership."""

    in_party: bool = False
    members: list[str] = Field(default_factory=list)


class Character(BaseModel):
    """
    The protagonist.

    Invariants (held at every return point of the engine):
    0 <= hp <= hp_max, 0 <= hit_dice_remaining <= hit_dice_max,
    0 <= spell_slots_remaining <= spell_slots_max, 1 <= level <= 20.
    """

    # Identity
    name: str
    sex: Sex
    race: Race = Race.HUMAN
    class_name: ClassName
    alignment: Alignment = Alignment.NEUTRAL

    # Progression
    level: int = Field(default=1, ge=1, le=MAX_LEVEL)
    xp: int = Field(default=0, ge=0)

    # Resources
    day: int = Field(default=1, ge=0)
    hp: int = Field(ge=0)
    hp_max: int = Field(ge=1)
    gold: int = Field(default=0, ge=0, le=MAX_GOLD)

    # Recovery pools
    hit_die_size: int = Field(description="6, 8, 10 or 12")
    hit_dice_max: int = Field(ge=0)
    hit_dice_remaining: int = Field(ge=0)
    spell_slots_max: int = Field(default=0, ge=0)
    spell_slots_remaining: int = Field(default=0, ge=0)

    stats: Stats = Field(default_factory=Stats)

    # Collections
    inventory: list[str] = Field(default_factory=list)
    companions: list[Companion] = Field(default_factory=list)
    party: Party = Field(default_factory=Party)

    # Narrative continuity
    flags: dict[str, bool] = Field(default_factory=dict)
    next_scene_id: str | None = Field(default=None, description="Forced follow-up scene")
    last_scene_id: str | None = None
    recent_scene_ids: list[str] = Field(default_factory=list)

    campaign: CampaignState
    pending_combat: CombatState | None = Field(
        default=None, description="Fight started by the last outcome, not yet picked up"
    )

    @model_validator(mode="after")
    def clamp_pools(self) -> Character:
        if self.hp > self.hp_max:
            self.hp = self.hp_max
        if self.hit_dice_remaining > self.hit_dice_max:
            self.hit_dice_remaining = self.hit_dice_max
        if self.spell_slots_remaining > self.spell_slots_max:
            self.spell_slots_remaining = self.spell_slots_max
        return self

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    @property
    def con_modifier(self) -> int:
        return self.stats.modifier(StatKey.CON)

    def modifier(self, stat: StatKey | str) -> int:
        return self.stats.modifier(stat)

    def heal(self, amount: int) -> int:
        """
        Heal HP up to maximum.

        Returns actual HP healed.
        """
        space = self.hp_max - self.hp
        actual = max(0, min(amount, space))
        self.hp += actual
        return actual

    def take_damage(self, amount: int) -> int:
        """
        Lose HP, never below zero.

        Returns actual HP lost.
        """
        actual = max(0, min(amount, self.hp))
        self.hp -= actual
        return actual

    def adjust_hp(self, amount: int) -> int:
        """Signed hp change. Returns the signed change actually applied."""
        if amount >= 0:
            return self.heal(amount)
        return -self.take_damage(-amount)

    def adjust_gold(self, amount: int) -> int:
        """Signed gold change clamped to 0..MAX_GOLD. Returns the applied change."""
        before = self.gold
        self.gold = max(0, min(MAX_GOLD, self.gold + amount))
        return self.gold - before

    def spend_hit_dice(self, count: int) -> int:
        """Spend up to `count` hit dice; returns how many were actually spent."""
        actual = max(0, min(count, self.hit_dice_remaining))
        self.hit_dice_remaining -= actual
        return actual

    def use_spell_slot(self) -> bool:
        """Consume one spell slot; False if none remain."""
        if self.spell_slots_remaining <= 0:
            return False
        self.spell_slots_remaining -= 1
        return True

    def get_companion(self, companion_id: str) -> Companion | None:
        for companion in self.companions:
            if companion.id == companion_id:
                return companion
        return None

"""
Leveling Skill.

Derives level from accumulated experience and reconciles every
level-dependent resource (max HP, spell slot capacity). Reconciliation is
idempotent: running it twice without an XP change does nothing the second time.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from critical_miss.models.character import MAX_LEVEL, Character, ClassName

# XP needed to reach each level (index 0 -> level 1), SRD-style progression.
XP_TABLE: tuple[int, ...] = (
    0,
    300,
    900,
    2700,
    6500,
    14000,
    23000,
    34000,
    48000,
    64000,
    85000,
    100000,
    120000,
    140000,
    165000,
    195000,
    225000,
    265000,
    305000,
    355000,
)

HIT_DIE_BY_CLASS: dict[ClassName, int] = {
    ClassName.WIZARD: 6,
    ClassName.ROGUE: 8,
    ClassName.DRUID: 8,
    ClassName.FIGHTER: 10,
    ClassName.PALADIN: 10,
    ClassName.BARBARIAN: 12,
}

# Spell slot capacity by level for full casters; index 0 -> level 1.
_FULL_CASTER_SLOTS = (2, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 8, 8, 9, 9, 9, 9, 10, 10)
# Half casters pick up slots at level 2.
_HALF_CASTER_SLOTS = (0, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6, 6, 6)

_SLOT_TABLES: dict[ClassName, tuple[int, ...]] = {
    ClassName.WIZARD: _FULL_CASTER_SLOTS,
    ClassName.DRUID: _FULL_CASTER_SLOTS,
    ClassName.PALADIN: _HALF_CASTER_SLOTS,
}

MILESTONES: dict[tuple[ClassName, int], str] = {
    (ClassName.FIGHTER, 2): "Action Surge",
    (ClassName.FIGHTER, 5): "Extra Attack",
    (ClassName.ROGUE, 2): "Cunning Action",
    (ClassName.ROGUE, 5): "Uncanny Dodge",
    (ClassName.BARBARIAN, 2): "Reckless Attack",
    (ClassName.BARBARIAN, 5): "Extra Attack",
    (ClassName.PALADIN, 2): "Divine Smite",
    (ClassName.PALADIN, 5): "Extra Attack",
    (ClassName.WIZARD, 2): "Arcane Tradition",
    (ClassName.WIZARD, 5): "Third-circle spells",
    (ClassName.DRUID, 2): "Wild Shape",
    (ClassName.DRUID, 5): "Third-circle spells",
}


class LevelingResult(BaseModel):
    """Result of reconciling a character's level and resources."""

    character: Character
    log_lines: list[str] = Field(default_factory=list)
    levels_gained: int = Field(default=0, ge=0)


def xp_for_level(level: int) -> int:
    """XP threshold for a level (clamped to 1..20)."""
    level = max(1, min(MAX_LEVEL, level))
    return XP_TABLE[level - 1]


def level_from_xp(xp: int) -> int:
    """Largest level whose threshold is <= xp."""
    level = 1
    for index, threshold in enumerate(XP_TABLE):
        if xp >= threshold:
            level = index + 1
        else:
            break
    return level


def average_hit_die(hit_die_size: int) -> int:
    """Fixed per-level HP for a hit die (d8 -> 5)."""
    return hit_die_size // 2 + 1


def spell_slots_for(class_name: ClassName, level: int) -> int:
    """Spell slot capacity for a class at a level."""
    table = _SLOT_TABLES.get(class_name)
    if table is None:
        return 0
    level = max(1, min(MAX_LEVEL, level))
    return table[level - 1]


def _reconcile_slots(character: Character) -> None:
    capacity = spell_slots_for(character.class_name, character.level)
    delta = capacity - character.spell_slots_max
    if delta == 0:
        return
    character.spell_slots_max = capacity
    character.spell_slots_remaining = max(
        0, min(capacity, character.spell_slots_remaining + delta)
    )


def apply_leveling(character: Character) -> LevelingResult:
    """
    Bring level and resources in line with XP.

    Levels are gained one at a time, never skipped. Each step:
    - max HP += max(1, average hit die + CON modifier), healing the same amount
    - spell slot capacity recomputed for (class, level); remaining moves by the delta
    - one "level up" line, plus a feature note for milestone (class, level) pairs

    When no level is gained only the slot capacity is reconciled.

    Args:
        character: Character to reconcile (not mutated)

    Returns:
        LevelingResult with the updated character and log lines
    """
    c = character.model_copy(deep=True)
    lines: list[str] = []
    target = level_from_xp(c.xp)

    if target <= c.level:
        _reconcile_slots(c)
        return LevelingResult(character=c)

    gained = 0
    while c.level < target:
        c.level += 1
        gained += 1

        hp_gain = max(1, average_hit_die(c.hit_die_size) + c.con_modifier)
        c.hp_max += hp_gain
        c.heal(hp_gain)

        slots_before = c.spell_slots_max
        _reconcile_slots(c)

        line = f"Level up! You are now level {c.level}. +{hp_gain} max HP."
        if c.spell_slots_max > slots_before:
            line += f" +{c.spell_slots_max - slots_before} spell slot(s)."
        lines.append(line)

        feature = MILESTONES.get((c.class_name, c.level))
        if feature:
            lines.append(f"New feature unlocked: {feature}.")

    return LevelingResult(character=c, log_lines=lines, levels_gained=gained)

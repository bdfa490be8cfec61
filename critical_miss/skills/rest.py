"""
Rest and Recovery Skills.

Short rest and long rest, plus reviving a fallen character with a hit die.
Handles HP recovery, hit dice, spell slot restoration, the chance of a
setback while resting, and arc-specific rest story events.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from critical_miss.content.rest_events import REST_EVENTS, RestEvent
from critical_miss.models.character import Character
from critical_miss.models.log import LogEntry
from critical_miss.skills.checks import make_check, validate_d20
from critical_miss.skills.dice import roll_d20, roll_die

PERCENTILE = 100


class RestConfig(BaseModel):
    """Tunables for rest consequences."""

    short_consequence_chance: int = Field(default=25, ge=0, le=100)
    short_gold_cost: int = Field(default=1, ge=0)
    short_progress: int = Field(default=6, ge=0)
    short_days: int = Field(default=1, ge=0)
    long_consequence_chance: int = Field(default=55, ge=0, le=100)
    long_gold_cost: int = Field(default=3, ge=0)
    long_progress: int = Field(default=12, ge=0)
    long_days: int = Field(default=2, ge=0)


class RestResult(BaseModel):
    """Result of a rest or revive."""

    character: Character
    log: list[LogEntry] = Field(default_factory=list)
    summary: str
    hit_dice_spent: int = Field(default=0, ge=0)
    hp_healed: int = Field(default=0, ge=0)
    event_id: str | None = Field(default=None, description="Rest story event that fired")
    consequence: bool = Field(default=False, description="Whether a setback was applied")


def roll_hit_dice(character: Character, count: int) -> list[int]:
    """Roll up to `count` of the character's available hit dice."""
    count = max(0, min(count, character.hit_dice_remaining))
    return [roll_die(character.hit_die_size) for _ in range(count)]


def _validate_percentile(roll: int) -> int:
    if not 1 <= roll <= PERCENTILE:
        raise ValueError(f"Percentile roll must be between 1 and {PERCENTILE}, got {roll}")
    return roll


def _resolve_rest_event(
    c: Character,
    consequence_roll: int,
    story_roll: int,
    long_rest: bool,
    events: Sequence[RestEvent],
) -> tuple[list[str], str | None]:
    """Fire the first available rest event whose chance the roll meets."""
    for event in events:
        if not event.is_available(c.campaign.arc_id, c.campaign.flags):
            continue
        chance = event.long_chance if long_rest else event.short_chance
        if consequence_roll > chance:
            continue

        check = make_check(c.modifier(event.stat), event.dc, roll=story_roll, stat=event.stat)
        for flag in event.set_flags:
            c.campaign.flags[flag] = True
        outcome_flag = event.success_flag if check.success else event.failure_flag
        if outcome_flag:
            c.campaign.flags[outcome_flag] = True
        if event.next_scene_id:
            c.next_scene_id = event.next_scene_id

        lines = [
            f"{event.intro_text} ({check.breakdown})",
            event.success_text if check.success else event.failure_text,
        ]
        if not check.success:
            loss = event.long_hp_loss if long_rest else event.short_hp_loss
            lost = c.take_damage(loss)
            lines.append(f"Rest consequence: -{lost} HP.")
        return lines, event.id
    return [], None


def take_short_rest(
    character: Character,
    dice_rolled: Sequence[int],
    consequence_roll: int | None = None,
    story_roll: int | None = None,
    config: RestConfig | None = None,
    events: Sequence[RestEvent] = REST_EVENTS,
) -> RestResult:
    """
    Take a short rest.

    Spends one hit die per supplied roll (never more than remain) and heals
    sum(rolls) + dice * CON modifier, at least 1 when any die was spent.
    Advances the day. A low percentile consequence roll costs a little gold
    and nudges the arc forward.

    Args:
        character: The resting character (not mutated)
        dice_rolled: Hit die results, each within 1..hit_die_size
        consequence_roll: Percentile roll (1-100) for setbacks and rest events
        story_roll: d20 for a rest event's check
        config: Rest tunables

    Returns:
        RestResult with the updated character and journal lines
    """
    config = config or RestConfig()
    for value in dice_rolled:
        if not 1 <= value <= character.hit_die_size:
            raise ValueError(f"Hit die roll {value} outside 1..{character.hit_die_size}")
    consequence_roll = _validate_percentile(
        consequence_roll if consequence_roll is not None else roll_die(PERCENTILE)
    )
    story_roll = validate_d20(story_roll) if story_roll is not None else roll_d20()

    c = character.model_copy(deep=True)
    c.day += config.short_days
    texts: list[str] = []

    usable = list(dice_rolled)[: c.hit_dice_remaining]
    spent = c.spend_hit_dice(len(usable))
    healed = 0
    if spent:
        amount = max(1, sum(usable) + spent * c.con_modifier)
        healed = c.heal(amount)
        texts.append(f"Short rest: spent {spent}d{c.hit_die_size}. Healed {healed} HP.")
    elif dice_rolled:
        texts.append("Short rest: no hit dice left to spend. You catch your breath.")
    else:
        texts.append("Short rest: you catch your breath without spending hit dice.")

    event_lines, event_id = _resolve_rest_event(
        c, consequence_roll, story_roll, long_rest=False, events=events
    )
    texts.extend(event_lines)

    consequence = consequence_roll <= config.short_consequence_chance
    if consequence:
        lost = -c.adjust_gold(-config.short_gold_cost)
        c.campaign.advance(config.short_progress)
        texts.append(
            "While you rest, time moves. A small “fee” finds its way out of your "
            f"coin pouch. -{lost} gold."
        )

    return RestResult(
        character=c,
        log=[LogEntry(day=c.day, text=t) for t in texts],
        summary=f"Short rest: +{healed} HP",
        hit_dice_spent=spent,
        hp_healed=healed,
        event_id=event_id,
        consequence=consequence,
    )


def take_long_rest(
    character: Character,
    consequence_roll: int | None = None,
    story_roll: int | None = None,
    config: RestConfig | None = None,
    events: Sequence[RestEvent] = REST_EVENTS,
) -> RestResult:
    """
    Take a long rest.

    Fully restores HP, spell slots and hit dice and advances two days. The
    longer rest is riskier: the setback chance is higher and costs more.
    """
    config = config or RestConfig()
    consequence_roll = _validate_percentile(
        consequence_roll if consequence_roll is not None else roll_die(PERCENTILE)
    )
    story_roll = validate_d20(story_roll) if story_roll is not None else roll_d20()

    c = character.model_copy(deep=True)
    c.day += config.long_days

    healed = c.heal(c.hp_max)
    c.spell_slots_remaining = c.spell_slots_max
    c.hit_dice_remaining = c.hit_dice_max
    texts = ["Long rest: fully healed. Spell slots refreshed. Hit dice restored."]

    event_lines, event_id = _resolve_rest_event(
        c, consequence_roll, story_roll, long_rest=True, events=events
    )
    texts.extend(event_lines)

    consequence = consequence_roll <= config.long_consequence_chance
    if consequence:
        lost = -c.adjust_gold(-config.long_gold_cost)
        c.campaign.advance(config.long_progress)
        texts.append(
            "You wake to missing supplies and the distant sound of consequences. "
            f"-{lost} gold."
        )

    return RestResult(
        character=c,
        log=[LogEntry(day=c.day, text=t) for t in texts],
        summary="Long rest: fully restored",
        hp_healed=healed,
        event_id=event_id,
        consequence=consequence,
    )


def revive(character: Character, roll: int | None = None) -> RestResult:
    """
    Bring a fallen character back by spending one hit die.

    Returns at max(1, roll + CON modifier) HP, capped at max HP. With no hit
    dice left, or when not dead, nothing happens.
    """
    c = character.model_copy(deep=True)

    if not c.is_dead:
        return RestResult(
            character=c,
            log=[LogEntry(day=c.day, text="You are still standing. No revive needed.")],
            summary="No revive needed",
        )

    if c.hit_dice_remaining <= 0:
        return RestResult(
            character=c,
            log=[LogEntry(day=c.day, text="No hit dice remaining. You cannot revive.")],
            summary="Cannot revive",
        )

    if roll is None:
        roll = roll_die(c.hit_die_size)
    elif not 1 <= roll <= c.hit_die_size:
        raise ValueError(f"Hit die roll {roll} outside 1..{c.hit_die_size}")

    c.spend_hit_dice(1)
    healed = c.heal(max(1, roll + c.con_modifier))
    return RestResult(
        character=c,
        log=[LogEntry(day=c.day, text=f"You revive with {c.hp} HP.")],
        summary=f"Revived with {c.hp} HP",
        hit_dice_spent=1,
        hp_healed=healed,
    )

"""
Dice Rolling Skill.

Fair, cryptographically random dice for every draw the engine makes:
checks, attack and damage rolls, hit dice, stat generation and content picks.
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

DICE_PATTERN = r"^(\d+)d(\d+)(?:(kh|kl)(\d+))?([+-]\d+)?$"


class DiceResult(BaseModel):
    """Result of a dice roll."""

    notation: str = Field(description="Original dice notation")
    rolls: list[int] = Field(description="Individual die results")
    kept: list[int] | None = Field(default=None, description="Kept dice for kh/kl")
    modifier: int = Field(default=0, description="Any +/- modifier")
    total: int = Field(description="Final result")


def roll_die(sides: int) -> int:
    """Roll a single die, uniform over [1, sides]."""
    if sides < 1:
        raise ValueError("Die size must be positive")
    return secrets.randbelow(sides) + 1


def roll_d20() -> int:
    """Natural d20 roll."""
    return roll_die(20)


def roll_dice(notation: str) -> DiceResult:
    """
    Roll dice using standard notation.

    Supports:
    - NdX: Roll N dice with X sides (e.g., "2d6", "1d20")
    - NdX+M: Add modifier (e.g., "1d20+5", "2d6-2")
    - NdXkhN: Keep highest N dice (e.g., "4d6kh3")
    - NdXklN: Keep lowest N dice (e.g., "2d20kl1")

    Args:
        notation: Dice notation string

    Returns:
        DiceResult with individual rolls and total

    Examples:
        >>> result = roll_dice("4d6kh3")
        >>> result.kept   # [6, 5, 4] (highest 3)
        >>> result.rolls  # [6, 5, 4, 1] (all 4 rolls)
    """
    notation = notation.lower().strip()

    match = re.match(DICE_PATTERN, notation)
    if not match:
        raise ValueError(f"Invalid dice notation: {notation}")

    num_dice = int(match.group(1))
    die_size = int(match.group(2))
    keep_type = match.group(3)
    keep_count = int(match.group(4)) if match.group(4) else None
    modifier = int(match.group(5)) if match.group(5) else 0

    if num_dice < 1 or die_size < 1:
        raise ValueError("Number of dice and die size must be positive")

    if keep_count is not None and keep_count > num_dice:
        raise ValueError(f"Cannot keep {keep_count} dice when only rolling {num_dice}")

    rolls = [roll_die(die_size) for _ in range(num_dice)]

    kept: list[int] | None = None
    if keep_type == "kh" and keep_count:
        kept = sorted(rolls, reverse=True)[:keep_count]
        dice_sum = sum(kept)
    elif keep_type == "kl" and keep_count:
        kept = sorted(rolls)[:keep_count]
        dice_sum = sum(kept)
    else:
        dice_sum = sum(rolls)

    return DiceResult(
        notation=notation,
        rolls=rolls,
        kept=kept,
        modifier=modifier,
        total=dice_sum + modifier,
    )


def roll_damage(dice: int, sides: int, modifier: int = 0) -> int:
    """Sum of `dice` dice plus modifier, never less than 1."""
    total = sum(roll_die(sides) for _ in range(dice)) + modifier
    return max(1, total)


_system_random = secrets.SystemRandom()


def choice(items: Sequence[T]) -> T:
    """Uniform pick from a non-empty sequence."""
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    return secrets.choice(items)


def shuffle(items: Sequence[T]) -> list[T]:
    """Return a shuffled copy."""
    out = list(items)
    _system_random.shuffle(out)
    return out

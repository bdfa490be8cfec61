"""
Skill Check Resolution.

d20 + stat modifier against a difficulty class. A natural 1 always fails.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from critical_miss.models.stats import StatKey
from critical_miss.skills.dice import roll_d20

D20_SIDES = 20


class CheckResult(BaseModel):
    """Result of a d20 check."""

    roll: int = Field(ge=1, le=D20_SIDES, description="The natural roll")
    modifier: int
    total: int
    dc: int
    success: bool
    is_critical_failure: bool = Field(default=False, description="Natural 1")
    stat: StatKey | None = None

    @property
    def breakdown(self) -> str:
        """Human-readable math, e.g. 'd20 11 + DEX +2 = 13 vs DC 13'."""
        sign = f"+{self.modifier}" if self.modifier >= 0 else str(self.modifier)
        label = f"{self.stat.label} " if self.stat else ""
        return f"d20 {self.roll} + {label}{sign} = {self.total} vs DC {self.dc}"


def validate_d20(roll: int) -> int:
    """Reject externally supplied rolls outside 1..20."""
    if not 1 <= roll <= D20_SIDES:
        raise ValueError(f"d20 roll must be between 1 and {D20_SIDES}, got {roll}")
    return roll


def make_check(
    modifier: int,
    dc: int,
    roll: int | None = None,
    stat: StatKey | None = None,
) -> CheckResult:
    """
    Resolve a check.

    Args:
        modifier: Stat (or other) modifier added to the roll
        dc: Difficulty class the total must meet or exceed
        roll: Externally supplied natural roll; drawn internally when None
        stat: Stat the check is keyed to, for display

    Returns:
        CheckResult; success iff the roll is not a natural 1 and total >= dc
    """
    natural = validate_d20(roll) if roll is not None else roll_d20()
    total = natural + modifier
    critical_failure = natural == 1

    return CheckResult(
        roll=natural,
        modifier=modifier,
        total=total,
        dc=dc,
        success=not critical_failure and total >= dc,
        is_critical_failure=critical_failure,
        stat=stat,
    )

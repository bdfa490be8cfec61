"""
Ability scores shared by characters, checks and combat.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class StatKey(str, Enum):
    """The six ability scores a check or attack can be keyed to."""

    STR = "str"
    DEX = "dex"
    CON = "con"
    INT = "int"
    WIS = "wis"
    CHA = "cha"

    @property
    def label(self) -> str:
        """Display label, e.g. 'DEX'."""
        return self.value.upper()


def modifier_for_score(score: int) -> int:
    """Classic-ish ability modifier: floor((score - 10) / 2)."""
    return (score - 10) // 2


class Stats(BaseModel):
    """The six ability scores."""

    str_: int = Field(default=10, ge=1, le=30, alias="str")
    dex: int = Field(default=10, ge=1, le=30)
    con: int = Field(default=10, ge=1, le=30)
    int_: int = Field(default=10, ge=1, le=30, alias="int")
    wis: int = Field(default=10, ge=1, le=30)
    cha: int = Field(default=10, ge=1, le=30)

    model_config = {"populate_by_name": True}

    def get(self, stat: StatKey | str) -> int:
        """Get ability score by key."""
        key = StatKey(stat)
        mapping = {
            StatKey.STR: self.str_,
            StatKey.DEX: self.dex,
            StatKey.CON: self.con,
            StatKey.INT: self.int_,
            StatKey.WIS: self.wis,
            StatKey.CHA: self.cha,
        }
        return mapping[key]

    def modifier(self, stat: StatKey | str) -> int:
        """Get ability modifier by key."""
        return modifier_for_score(self.get(stat))

    @classmethod
    def from_mapping(cls, values: dict[StatKey, int]) -> Stats:
        """Build from a StatKey -> score mapping (missing keys default to 10)."""
        return cls(**{key.value: values.get(key, 10) for key in StatKey})

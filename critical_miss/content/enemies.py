"""
Enemy templates and the shared intent table.
"""

from __future__ import annotations

from dataclasses import dataclass

from critical_miss.models.combat import (
    AttackIntent,
    CombatEnemy,
    DamageDice,
    DefendIntent,
    EnemyIntent,
    HeavyIntent,
)
from critical_miss.models.stats import StatKey


@dataclass(frozen=True)
class EnemyTemplate:
    """Authored enemy stat block."""

    name: str
    hp_max: int
    ac: int
    opening_intent: EnemyIntent


ENEMY_TEMPLATES: dict[str, EnemyTemplate] = {
    "thug": EnemyTemplate(
        name="Tavern Thug",
        hp_max=14,
        ac=12,
        opening_intent=AttackIntent(
            label="Cheap shot", to_hit=3, damage=DamageDice(dice=1, sides=8), stat=StatKey.STR
        ),
    ),
    "hound": EnemyTemplate(
        name="Starving Hound",
        hp_max=10,
        ac=12,
        opening_intent=AttackIntent(
            label="Lunge", to_hit=2, damage=DamageDice(dice=1, sides=6), stat=StatKey.DEX
        ),
    ),
    "rival": EnemyTemplate(
        name="Rival Adventurer",
        hp_max=16,
        ac=13,
        opening_intent=HeavyIntent(
            label="Power strike", to_hit=3, damage=DamageDice(dice=1, sides=10), stat=StatKey.STR
        ),
    ),
}

# Picked uniformly after every enemy turn.
INTENT_TABLE: tuple[EnemyIntent, ...] = (
    AttackIntent(label="Attack", to_hit=3, damage=DamageDice(dice=1, sides=6), stat=StatKey.STR),
    HeavyIntent(
        label="Heavy swing", to_hit=1, damage=DamageDice(dice=1, sides=10), stat=StatKey.STR
    ),
    DefendIntent(label="Defend", ac_bonus=2),
)


def make_enemy(kind: str) -> CombatEnemy:
    """Instantiate a fresh enemy from its template."""
    template = ENEMY_TEMPLATES.get(kind)
    if template is None:
        raise ValueError(f"Unknown enemy kind: {kind}")
    return CombatEnemy(
        kind=kind,
        name=template.name,
        hp_max=template.hp_max,
        hp=template.hp_max,
        ac=template.ac,
        intent=template.opening_intent.model_copy(),
    )

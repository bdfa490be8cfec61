"""
Stateless Skills for Critical Miss.

Skills are pure functions that:
- Take structured input (Pydantic models) and optional explicit rolls
- Execute game rules (dice, checks, combat, rest, leveling)
- Return structured output holding the next state
- NEVER mutate their inputs
"""

from critical_miss.skills.checks import CheckResult, make_check, validate_d20
from critical_miss.skills.combat import (
    AttackKind,
    AttackProfile,
    CombatActionResult,
    CombatConfig,
    combat_status,
    combat_xp_reward,
    enemy_turn,
    player_attack,
    player_guard,
    player_run,
    start_combat,
)
from critical_miss.skills.dice import DiceResult, roll_d20, roll_damage, roll_dice, roll_die
from critical_miss.skills.leveling import (
    HIT_DIE_BY_CLASS,
    XP_TABLE,
    LevelingResult,
    apply_leveling,
    level_from_xp,
    spell_slots_for,
    xp_for_level,
)
from critical_miss.skills.rest import (
    RestConfig,
    RestResult,
    revive,
    roll_hit_dice,
    take_long_rest,
    take_short_rest,
)

__all__ = [
    # Dice
    "roll_dice",
    "roll_die",
    "roll_d20",
    "roll_damage",
    "DiceResult",
    # Checks
    "make_check",
    "validate_d20",
    "CheckResult",
    # Combat
    "AttackKind",
    "AttackProfile",
    "CombatActionResult",
    "CombatConfig",
    "start_combat",
    "player_attack",
    "player_guard",
    "player_run",
    "enemy_turn",
    "combat_status",
    "combat_xp_reward",
    # Leveling
    "XP_TABLE",
    "HIT_DIE_BY_CLASS",
    "LevelingResult",
    "apply_leveling",
    "level_from_xp",
    "spell_slots_for",
    "xp_for_level",
    # Rest
    "RestConfig",
    "RestResult",
    "roll_hit_dice",
    "take_short_rest",
    "take_long_rest",
    "revive",
]

"""
Combat Skills for Critical Miss.

Turn-based, one-on-one combat:
- Player actions: attack (weapon, cantrip, slot spell), guard, run
- Enemy turn: resolve the telegraphed intent, then pick the next one
- Terminal detection: won, lost, fled
- Terminal rewards (XP)

Every action is pure: it returns a new Character and CombatState and never
mutates its inputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, Field

from critical_miss.content.enemies import INTENT_TABLE, make_enemy
from critical_miss.models.character import Character, ClassName
from critical_miss.models.combat import (
    CombatEnemy,
    CombatState,
    CombatStatus,
    DamageDice,
    DefendIntent,
    EnemyIntent,
)
from critical_miss.models.scene import CombatTrigger
from critical_miss.models.stats import StatKey
from critical_miss.skills.checks import make_check
from critical_miss.skills.dice import choice, roll_damage


# =============================================================================
# Configuration Models
# =============================================================================


class CombatConfig(BaseModel):
    """Tunables for the combat state machine."""

    guard_ac_bonus: int = Field(default=3, ge=0, description="AC bonus from Guard")
    base_player_ac: int = Field(default=10, ge=0)
    flee_dc: int = Field(default=13, ge=1, description="DC of the Run check")
    flee_gain_success: int = Field(default=40, ge=0, le=100)
    flee_gain_failure: int = Field(default=20, ge=0, le=100)
    xp_per_enemy_hp: int = Field(default=3, ge=0)
    win_xp_min: int = Field(default=20, ge=0)
    win_xp_max: int = Field(default=60, ge=0)
    flee_xp_min: int = Field(default=10, ge=0)


# =============================================================================
# Attack Profiles
# =============================================================================


class AttackKind(str, Enum):
    WEAPON = "weapon"
    CANTRIP = "cantrip"
    SPELL = "spell"


class AttackProfile(BaseModel):
    """What the player swings or casts."""

    name: str
    stat: StatKey
    damage: DamageDice


_WEAPONS: dict[ClassName, AttackProfile] = {
    ClassName.ROGUE: AttackProfile(name="Shortsword", stat=StatKey.DEX, damage=DamageDice(sides=6)),
    ClassName.WIZARD: AttackProfile(name="Staff", stat=StatKey.STR, damage=DamageDice(sides=6)),
    ClassName.BARBARIAN: AttackProfile(
        name="Greataxe", stat=StatKey.STR, damage=DamageDice(sides=12)
    ),
    ClassName.FIGHTER: AttackProfile(name="Longsword", stat=StatKey.STR, damage=DamageDice(sides=8)),
    ClassName.PALADIN: AttackProfile(name="Mace", stat=StatKey.STR, damage=DamageDice(sides=8)),
    ClassName.DRUID: AttackProfile(name="Club", stat=StatKey.STR, damage=DamageDice(sides=6)),
}

_CANTRIPS: dict[ClassName, AttackProfile] = {
    ClassName.WIZARD: AttackProfile(name="Firebolt", stat=StatKey.INT, damage=DamageDice(sides=10)),
    ClassName.DRUID: AttackProfile(name="Thorn Whip", stat=StatKey.WIS, damage=DamageDice(sides=6)),
}

_SPELLS: dict[ClassName, AttackProfile] = {
    ClassName.WIZARD: AttackProfile(
        name="Magic Missile", stat=StatKey.INT, damage=DamageDice(dice=3, sides=4)
    ),
    ClassName.DRUID: AttackProfile(
        name="Moonbeam", stat=StatKey.WIS, damage=DamageDice(dice=2, sides=6)
    ),
}


def weapon_for_class(class_name: ClassName) -> AttackProfile:
    return _WEAPONS[class_name]


def cantrip_for_class(class_name: ClassName) -> AttackProfile | None:
    return _CANTRIPS.get(class_name)


def spell_for_class(class_name: ClassName) -> AttackProfile | None:
    return _SPELLS.get(class_name)


# =============================================================================
# Result Models
# =============================================================================


class CombatActionResult(BaseModel):
    """Result of one player action or enemy turn."""

    character: Character
    combat: CombatState
    text: str
    roll: int | None = Field(default=None, description="Natural d20, if one was rolled")
    hit: bool | None = None
    damage: int = Field(default=0, ge=0)
    consumed_turn: bool = Field(
        default=True, description="False for no-op actions (e.g. no spell slots)"
    )


# =============================================================================
# Setup
# =============================================================================


def next_intent(intents: Sequence[EnemyIntent] | None = None) -> EnemyIntent:
    """Pick the enemy's next declared action."""
    table = intents or INTENT_TABLE
    return choice(table).model_copy()


def start_combat(trigger: CombatTrigger) -> CombatState:
    """Create a fight from an outcome's combat tag."""
    return CombatState(
        enemy=make_enemy(trigger.enemy_kind),
        on_win=trigger.on_win,
        on_lose=trigger.on_lose,
        on_flee=trigger.on_flee,
    )


# =============================================================================
# Player Actions
# =============================================================================


def player_attack(
    character: Character,
    combat: CombatState,
    kind: AttackKind = AttackKind.WEAPON,
    roll: int | None = None,
) -> CombatActionResult:
    """
    Attack the enemy.

    To-hit is d20 + stat modifier against the enemy's AC (raised while it
    defends). A natural 1 always misses. Damage is the profile's dice plus
    the stat modifier, at least 1. Slot spells consume one spell slot; with
    none left the action is a no-op.

    Args:
        character: The player
        combat: Current fight
        kind: Weapon, cantrip or slot spell (falls back to the weapon when
            the class has no such attack)
        roll: Externally supplied natural d20

    Returns:
        CombatActionResult
    """
    c = character.model_copy(deep=True)
    state = combat.model_copy(deep=True)

    profile = weapon_for_class(c.class_name)
    if kind is AttackKind.CANTRIP:
        profile = cantrip_for_class(c.class_name) or profile
    elif kind is AttackKind.SPELL:
        spell = spell_for_class(c.class_name)
        if spell is not None:
            if not c.use_spell_slot():
                return CombatActionResult(
                    character=c,
                    combat=state,
                    text="No spell slots left.",
                    consumed_turn=False,
                )
            profile = spell

    modifier = c.modifier(profile.stat)
    check = make_check(modifier, state.enemy.effective_ac, roll=roll, stat=profile.stat)
    state.guard = False

    if not check.success:
        return CombatActionResult(
            character=c,
            combat=state,
            text=f"You use {profile.name}. Miss. ({check.breakdown})",
            roll=check.roll,
            hit=False,
        )

    amount = roll_damage(profile.damage.dice, profile.damage.sides, modifier)
    state.enemy.hp = max(0, min(state.enemy.hp_max, state.enemy.hp - amount))
    return CombatActionResult(
        character=c,
        combat=state,
        text=f"You use {profile.name}. Hit! (-{amount} HP)",
        roll=check.roll,
        hit=True,
        damage=amount,
    )


def player_guard(character: Character, combat: CombatState) -> CombatActionResult:
    """Brace: raise AC against the enemy's next action only."""
    state = combat.model_copy(deep=True)
    state.guard = True
    return CombatActionResult(
        character=character.model_copy(deep=True),
        combat=state,
        text="You brace and guard.",
    )


def player_run(
    character: Character,
    combat: CombatState,
    roll: int | None = None,
    config: CombatConfig | None = None,
) -> CombatActionResult:
    """
    Try to get away.

    Uses the better of the DEX and CON modifiers against a fixed DC; success
    adds more flee progress than failure. Reaching 100 ends the fight as fled.
    """
    config = config or CombatConfig()
    state = combat.model_copy(deep=True)

    modifier = max(character.modifier(StatKey.DEX), character.modifier(StatKey.CON))
    check = make_check(modifier, config.flee_dc, roll=roll)

    gain = config.flee_gain_success if check.success else config.flee_gain_failure
    state.flee_progress = max(0, min(100, state.flee_progress + gain))
    state.guard = False

    math = f"Run check {check.roll} + {modifier} = {check.total} vs DC {check.dc}"
    if check.success:
        text = f"You make distance. ({math})"
    else:
        text = f"You stumble but keep moving. ({math})"

    return CombatActionResult(
        character=character.model_copy(deep=True),
        combat=state,
        text=text,
        roll=check.roll,
        hit=check.success,
    )


# =============================================================================
# Enemy Turn
# =============================================================================


def player_ac(character: Character, stat: StatKey, guard: bool, config: CombatConfig) -> int:
    """Effective AC against an intent keyed to `stat`."""
    bonus = config.guard_ac_bonus if guard else 0
    return config.base_player_ac + character.modifier(stat) + bonus


def enemy_turn(
    character: Character,
    combat: CombatState,
    roll: int | None = None,
    config: CombatConfig | None = None,
    intents: Sequence[EnemyIntent] | None = None,
) -> CombatActionResult:
    """
    Resolve the enemy's declared intent, then declare the next one.

    A defend intent deals no damage. Attacks roll d20 + intent bonus against
    the player's effective AC; a natural 1 misses. The guard bonus is
    consumed and the round counter advances either way.
    """
    config = config or CombatConfig()
    c = character.model_copy(deep=True)
    state = combat.model_copy(deep=True)
    enemy: CombatEnemy = state.enemy
    intent = enemy.intent

    def advance() -> None:
        enemy.intent = next_intent(intents)
        state.guard = False
        state.round += 1

    if isinstance(intent, DefendIntent):
        advance()
        return CombatActionResult(character=c, combat=state, text=f"{enemy.name} defends.")

    ac = player_ac(c, intent.stat, state.guard, config)
    check = make_check(intent.to_hit, ac, roll=roll)

    if check.success:
        amount = roll_damage(intent.damage.dice, intent.damage.sides)
        lost = c.take_damage(amount)
        advance()
        return CombatActionResult(
            character=c,
            combat=state,
            text=f"{enemy.name} hits ({intent.label}). -{lost} HP",
            roll=check.roll,
            hit=True,
            damage=lost,
        )

    advance()
    return CombatActionResult(
        character=c,
        combat=state,
        text=f"{enemy.name} misses ({intent.label}).",
        roll=check.roll,
        hit=False,
    )


# =============================================================================
# Terminal States
# =============================================================================


def combat_status(character: Character, combat: CombatState) -> CombatStatus:
    """
    Where the state machine stands.

    Checked after every player action and every enemy turn. Exactly one
    status applies; an enemy at 0 HP wins the fight before anything else.
    """
    if combat.enemy.hp <= 0:
        return CombatStatus.WON
    if character.hp <= 0:
        return CombatStatus.LOST
    if combat.flee_progress >= 100:
        return CombatStatus.FLED
    return CombatStatus.ACTIVE


def combat_xp_reward(
    enemy: CombatEnemy,
    status: CombatStatus,
    config: CombatConfig | None = None,
) -> int:
    """
    XP for ending a fight.

    Wins scale with enemy max HP, clamped to a fixed range; fleeing earns
    half of that with a floor; losing earns nothing.
    """
    config = config or CombatConfig()
    base = max(config.win_xp_min, min(config.win_xp_max, enemy.hp_max * config.xp_per_enemy_hp))
    if status is CombatStatus.WON:
        return base
    if status is CombatStatus.FLED:
        return max(config.flee_xp_min, base // 2)
    return 0

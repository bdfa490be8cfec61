"""
Game Engine for Critical Miss.

The facade the presentation layer drives. Every method takes the current
Character (plus whatever the action needs) and returns the next state; the
engine itself holds only configuration and the content catalog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from critical_miss.content.arcs import ARC_WEIGHTS
from critical_miss.content.catalog import SceneCatalog, default_catalog
from critical_miss.engine.config import EngineConfig
from critical_miss.engine.resolver import ResolutionResult, begin_check, resolve_roll
from critical_miss.engine.selector import SceneSelection, next_turn_scene, weighted_pick
from critical_miss.models.campaign import ArcId, new_campaign_state
from critical_miss.models.character import (
    Alignment,
    Character,
    ClassName,
    Party,
    Race,
    Sex,
)
from critical_miss.models.combat import CombatState, CombatStatus
from critical_miss.models.log import LogEntry, log_lines
from critical_miss.models.scene import PendingRoll, Scene
from critical_miss.models.stats import StatKey, Stats
from critical_miss.skills.combat import (
    AttackKind,
    CombatActionResult,
    combat_status,
    combat_xp_reward,
    enemy_turn,
    player_attack,
    player_guard,
    player_run,
)
from critical_miss.skills.dice import choice, roll_dice, shuffle
from critical_miss.skills.leveling import (
    HIT_DIE_BY_CLASS,
    LevelingResult,
    apply_leveling,
    spell_slots_for,
)
from critical_miss.skills.rest import (
    RestResult,
    revive,
    roll_hit_dice,
    take_long_rest,
    take_short_rest,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Character creation tables
# =============================================================================

FIRST_NAMES: dict[Sex, tuple[str, ...]] = {
    Sex.FEMALE: ("Astra", "Lilith", "Morgana", "Nyx", "Seraphine", "Vera", "Tess", "Rowan"),
    Sex.MALE: ("Bromley", "Thorn", "Garrick", "Roland", "Osric", "Dorian", "Milo", "Cedric"),
}

LAST_NAMES = (
    "Underfoot",
    "Tax-Evasion",
    "McSidequest",
    "the Uninsured",
    "von Bad Idea",
    "of Regret",
    "Two-Swords",
    "Half-Plan",
)

BACKGROUND_HOOKS = (
    "raised by a cleric with debt and a bard with commitment issues",
    "cursed at birth by an intern wizard who was “pretty sure” it would wear off",
    "destined for greatness, according to a prophecy written on a bar napkin",
    "trained by monks until you got banned for “excessive vibes”",
    "born during a lightning storm that definitely meant something ominous",
)


def _priority(*labels: str) -> tuple[StatKey, ...]:
    return tuple(StatKey(label.lower()) for label in labels)


# Best rolls go to the first stats listed.
STAT_PRIORITY: dict[ClassName, tuple[StatKey, ...]] = {
    ClassName.ROGUE: _priority("DEX", "INT", "CHA", "CON", "WIS", "STR"),
    ClassName.WIZARD: _priority("INT", "WIS", "CON", "DEX", "CHA", "STR"),
    ClassName.BARBARIAN: _priority("STR", "CON", "DEX", "WIS", "CHA", "INT"),
    ClassName.FIGHTER: _priority("STR", "CON", "DEX", "WIS", "CHA", "INT"),
    ClassName.PALADIN: _priority("CHA", "STR", "CON", "WIS", "DEX", "INT"),
    ClassName.DRUID: _priority("WIS", "CON", "INT", "DEX", "CHA", "STR"),
}

BASE_HP = 10
BARBARIAN_HP_BONUS = 4
STAT_MIN = 3
STAT_MAX = 18


class StatGenMode(str, Enum):
    WEIGHTED = "weighted"
    CHAOS = "chaos"


class CombatAction(str, Enum):
    ATTACK = "attack"
    CANTRIP = "cantrip"
    SPELL = "spell"
    GUARD = "guard"
    RUN = "run"


_ATTACK_KINDS = {
    CombatAction.ATTACK: AttackKind.WEAPON,
    CombatAction.CANTRIP: AttackKind.CANTRIP,
    CombatAction.SPELL: AttackKind.SPELL,
}


class CombatRoundResult(BaseModel):
    """Result of one combat round (player action, then the enemy's reply)."""

    character: Character
    combat: CombatState = Field(description="Fight state after the round")
    status: CombatStatus
    log: list[LogEntry] = Field(default_factory=list)
    xp_awarded: int = Field(default=0, ge=0)
    enemy_acted: bool = False


def random_name(sex: Sex) -> str:
    return f"{choice(FIRST_NAMES[sex])} {choice(LAST_NAMES)}"


def roll_stat() -> int:
    """4d6, drop the lowest, clamped to 3..18."""
    return max(STAT_MIN, min(STAT_MAX, roll_dice("4d6kh3").total))


def generate_stats(class_name: ClassName, mode: StatGenMode = StatGenMode.WEIGHTED) -> Stats:
    """
    Roll six scores.

    Weighted mode hands the best rolls to the class's priority stats; chaos
    mode shuffles them across STR..CHA.
    """
    rolls = sorted((roll_stat() for _ in range(len(StatKey))), reverse=True)
    if mode is StatGenMode.CHAOS:
        return Stats.from_mapping(dict(zip(StatKey, shuffle(rolls))))
    return Stats.from_mapping(dict(zip(STAT_PRIORITY[class_name], rolls)))


def pick_arc() -> ArcId:
    return weighted_pick(list(ARC_WEIGHTS))


@dataclass
class GameEngine:
    """
    Campaign resolution engine.

    Coordinates:
    - Character creation and background text
    - Scene selection and check resolution
    - Combat rounds and their terminal rewards
    - Rest, revive and restart
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    catalog: SceneCatalog = field(default_factory=default_catalog)

    # -------------------------------------------------------------------------
    # Character lifecycle
    # -------------------------------------------------------------------------

    def create_character(
        self,
        sex: Sex,
        class_name: ClassName,
        name: str | None = None,
        race: Race = Race.HUMAN,
        alignment: Alignment = Alignment.NEUTRAL,
        stats: Stats | None = None,
        stat_mode: StatGenMode = StatGenMode.WEIGHTED,
        arc_id: ArcId | None = None,
    ) -> Character:
        """Create a level-1 character at the start of a fresh campaign."""
        stats = stats or generate_stats(class_name, stat_mode)
        hp_max = BASE_HP + stats.modifier(StatKey.CON)
        if class_name is ClassName.BARBARIAN:
            hp_max += BARBARIAN_HP_BONUS
        hp_max = max(1, hp_max)

        slots = spell_slots_for(class_name, 1)
        hit_dice = self.config.campaign.starting_hit_dice
        character = Character(
            name=(name or "").strip() or random_name(sex),
            sex=sex,
            race=race,
            class_name=class_name,
            alignment=alignment,
            hp=hp_max,
            hp_max=hp_max,
            gold=self.config.campaign.starting_gold,
            hit_die_size=HIT_DIE_BY_CLASS[class_name],
            hit_dice_max=hit_dice,
            hit_dice_remaining=hit_dice,
            spell_slots_max=slots,
            spell_slots_remaining=slots,
            stats=stats,
            campaign=new_campaign_state(arc_id or pick_arc()),
        )
        logger.info(
            "Created %s (%s %s) in arc %s",
            character.name,
            race.value,
            class_name.value,
            character.campaign.arc_id.value,
        )
        return character

    def generate_background(self, character: Character) -> str:
        meta = self.catalog.arc_meta(character.campaign.arc_id)
        return (
            f"You are a {character.sex.value.lower()} {character.race.value.lower()} "
            f"{character.class_name.value.lower()} who was {choice(BACKGROUND_HOOKS)}.\n\n"
            f"Current campaign: {meta.title} (Act {character.campaign.act})."
        )

    def restart_adventure(self, character: Character, arc_id: ArcId | None = None) -> Character:
        """
        Start a new campaign for the same character.

        Identity, stats, level, XP and gold carry over; story state is reset and
        resources are restored.
        """
        c = character.model_copy(deep=True)
        c.campaign = new_campaign_state(arc_id or pick_arc())
        c.flags = {}
        c.inventory = []
        c.companions = []
        c.party = Party()
        c.next_scene_id = None
        c.last_scene_id = None
        c.recent_scene_ids = []
        c.pending_combat = None
        c.hp = c.hp_max
        c.hit_dice_remaining = c.hit_dice_max
        c.spell_slots_remaining = c.spell_slots_max
        c.day = 1
        logger.info("%s restarts in arc %s", c.name, c.campaign.arc_id.value)
        return c

    def apply_leveling(self, character: Character) -> LevelingResult:
        return apply_leveling(character)

    # -------------------------------------------------------------------------
    # Scenes and checks
    # -------------------------------------------------------------------------

    def next_turn(self, character: Character) -> SceneSelection:
        return next_turn_scene(character, self.catalog, self.config.campaign)

    def begin_check(self, scene: Scene, choice_id: str) -> PendingRoll:
        return begin_check(scene, choice_id)

    def resolve(
        self,
        character: Character,
        scene: Scene,
        pending: PendingRoll,
        roll: int | None = None,
    ) -> ResolutionResult:
        return resolve_roll(character, scene, pending, roll=roll, config=self.config.campaign)

    # -------------------------------------------------------------------------
    # Combat
    # -------------------------------------------------------------------------

    def _player_action(
        self,
        character: Character,
        combat: CombatState,
        action: CombatAction,
        roll: int | None,
    ) -> CombatActionResult:
        if action is CombatAction.GUARD:
            return player_guard(character, combat)
        if action is CombatAction.RUN:
            return player_run(character, combat, roll=roll, config=self.config.combat)
        return player_attack(character, combat, kind=_ATTACK_KINDS[action], roll=roll)

    def _finish_combat(
        self,
        character: Character,
        combat: CombatState,
        status: CombatStatus,
        lines: list[str],
    ) -> tuple[Character, int]:
        outcome = combat.outcome_for(status)
        xp = combat_xp_reward(combat.enemy, status, self.config.combat)

        c = character.model_copy(deep=True)
        c.pending_combat = None
        lines.append(outcome.text)
        lines.extend(outcome.logs)
        if xp:
            c.xp += xp
            lines.append(f"+{xp} XP.")
        if outcome.next_scene_id:
            c.next_scene_id = outcome.next_scene_id

        leveling = apply_leveling(c)
        lines.extend(leveling.log_lines)
        logger.info(
            "Combat with %s ended: %s after %d round(s)",
            combat.enemy.name,
            status.value,
            combat.round,
        )
        return leveling.character, xp

    def combat_action(
        self,
        character: Character,
        action: CombatAction,
        player_roll: int | None = None,
        enemy_roll: int | None = None,
    ) -> CombatRoundResult:
        """
        Run one combat round against the character's pending fight.

        Player action, terminal check, enemy turn, terminal check. A terminal
        status applies its authored outcome and XP, queues any follow-up
        scene, reconciles leveling and clears the pending fight. A spell with
        no slots left is a no-op and the enemy does not act.

        Raises:
            ValueError: No fight is pending
        """
        if character.pending_combat is None:
            raise ValueError("No combat in progress")

        lines: list[str] = []
        c = character.model_copy(deep=True)
        combat = c.pending_combat
        enemy_acted = False

        status = combat_status(c, combat)
        if status is CombatStatus.ACTIVE:
            result = self._player_action(c, combat, action, player_roll)
            c, combat = result.character, result.combat
            lines.append(result.text)

            if not result.consumed_turn:
                c.pending_combat = combat
                return CombatRoundResult(
                    character=c,
                    combat=combat,
                    status=CombatStatus.ACTIVE,
                    log=log_lines(c.day, *lines),
                )

            status = combat_status(c, combat)
            if status is CombatStatus.ACTIVE:
                reply = enemy_turn(c, combat, roll=enemy_roll, config=self.config.combat)
                c, combat = reply.character, reply.combat
                lines.append(reply.text)
                enemy_acted = True
                status = combat_status(c, combat)

        xp = 0
        if status.is_terminal:
            c, xp = self._finish_combat(c, combat, status, lines)
        else:
            c.pending_combat = combat

        return CombatRoundResult(
            character=c,
            combat=combat,
            status=status,
            log=log_lines(c.day, *lines),
            xp_awarded=xp,
            enemy_acted=enemy_acted,
        )

    # -------------------------------------------------------------------------
    # Rest
    # -------------------------------------------------------------------------

    def short_rest(
        self,
        character: Character,
        dice_count: int = 1,
        dice_rolled: list[int] | None = None,
        consequence_roll: int | None = None,
        story_roll: int | None = None,
    ) -> RestResult:
        if dice_rolled is None:
            dice_rolled = roll_hit_dice(character, dice_count)
        return take_short_rest(
            character,
            dice_rolled,
            consequence_roll=consequence_roll,
            story_roll=story_roll,
            config=self.config.rest,
        )

    def long_rest(
        self,
        character: Character,
        consequence_roll: int | None = None,
        story_roll: int | None = None,
    ) -> RestResult:
        return take_long_rest(
            character,
            consequence_roll=consequence_roll,
            story_roll=story_roll,
            config=self.config.rest,
        )

    def revive(self, character: Character, roll: int | None = None) -> RestResult:
        return revive(character, roll=roll)

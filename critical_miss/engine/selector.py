"""
Scene Selector.

Chooses the next scene for a character:
1. an explicitly queued follow-up,
2. the arc finale once act 3 is far enough along (and the finale is unseen),
3. a weighted pick from the (arc, act) pool minus seen and gated entries,
4. a synthesized filler scene when the pool is exhausted.

Every selection is marked into the recent window and the arc's seen set.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence
from typing import Literal, TypeVar

from pydantic import BaseModel

from critical_miss.content.catalog import SceneCatalog, default_catalog
from critical_miss.engine.config import CampaignConfig
from critical_miss.models.character import Character
from critical_miss.models.scene import (
    AdjustGold,
    AdjustHp,
    GainXp,
    Outcome,
    Scene,
    SceneChoice,
    WeightedSceneRef,
)
from critical_miss.models.stats import StatKey
from critical_miss.skills.dice import choice, roll_die

logger = logging.getLogger(__name__)

T = TypeVar("T")

FILLER_CATEGORY = "Travel"

FILLER_MOODS = (
    "A long road and longer thoughts.",
    "You make camp and listen to the world breathing.",
    "A small detour becomes a lesson in humility.",
    "You follow a rumor that turns into… mostly walking.",
    "The day is quiet. That makes you nervous.",
)


class SceneSelection(BaseModel):
    """The chosen scene and the character after marking it seen."""

    character: Character
    scene: Scene
    source: Literal["forced", "finale", "pool", "filler"]


def weighted_pick(items: Sequence[tuple[T, int]], draw: int | None = None) -> T:
    """
    Cumulative-weight walk over (item, weight) pairs.

    `draw` is a point in 1..total weight (drawn uniformly when None). Each
    candidate's weight is subtracted until the remainder is <= 0; the last
    candidate absorbs anything left over.
    """
    if not items:
        raise ValueError("Cannot pick from an empty pool")
    total = sum(weight for _, weight in items)
    if total <= 0:
        raise ValueError("Total weight must be positive")
    remaining = draw if draw is not None else secrets.randbelow(total) + 1
    for item, weight in items:
        remaining -= weight
        if remaining <= 0:
            return item
    return items[-1][0]


def mark_seen(character: Character, scene_id: str, window: int) -> None:
    """Record a visit in the bounded recent window and the arc's seen set."""
    character.last_scene_id = scene_id
    character.recent_scene_ids = [*character.recent_scene_ids, scene_id][-window:]
    character.campaign.mark_seen(scene_id)


def available_refs(
    character: Character, catalog: SceneCatalog
) -> list[WeightedSceneRef]:
    """Pool entries for the current (arc, act) not yet seen and not gated off."""
    campaign = character.campaign
    seen = set(campaign.seen_scene_ids)
    refs = []
    for ref in catalog.pool(campaign.arc_id, campaign.act):
        if ref.id in seen or ref.id not in catalog:
            continue
        if any(campaign.has_flag(flag) for flag in ref.unless_flags):
            continue
        refs.append(ref)
    return refs


def _filler_dc(config: CampaignConfig) -> int:
    span = config.filler_dc_max - config.filler_dc_min + 1
    return config.filler_dc_min + roll_die(span) - 1


def filler_scene_id(character: Character) -> str:
    """Unique id keyed by arc, day and act; suffixed if already used."""
    campaign = character.campaign
    base = f"filler.{campaign.arc_id.value}.day{character.day}.act{campaign.act}"
    seen = set(campaign.seen_scene_ids)
    if base not in seen:
        return base
    n = 2
    while f"{base}.n{n}" in seen:
        n += 1
    return f"{base}.n{n}"


def make_filler_scene(
    character: Character,
    catalog: SceneCatalog | None = None,
    config: CampaignConfig | None = None,
) -> Scene:
    """Synthesize a two-choice travel scene so the campaign never stalls."""
    catalog = catalog or default_catalog()
    config = config or CampaignConfig()
    stats = list(StatKey)

    return Scene(
        id=filler_scene_id(character),
        category=FILLER_CATEGORY,
        title=catalog.arc_meta(character.campaign.arc_id).title,
        body=f"{choice(FILLER_MOODS)}\n\n(You feel the campaign tightening around you.)",
        choices=[
            SceneChoice(
                id="push_on",
                text="Push onward",
                stat=choice(stats),
                dc=_filler_dc(config),
                on_success=Outcome(
                    text="You make good time. Your confidence grows legs. +2 XP.",
                    effects=[GainXp(amount=2)],
                ),
                on_fail=Outcome(
                    text="You trip over a root that was clearly placed by fate. -1 HP.",
                    effects=[AdjustHp(amount=-1)],
                ),
            ),
            SceneChoice(
                id="scavenge",
                text="Scavenge for supplies",
                stat=choice(stats),
                dc=_filler_dc(config),
                on_success=Outcome(
                    text="You find something valuable and mostly legal. +2 gold.",
                    effects=[AdjustGold(amount=2)],
                ),
                on_fail=Outcome(
                    text="You find nothing, but you do gain character. +1 XP.",
                    effects=[GainXp(amount=1)],
                ),
            ),
        ],
    )


def next_turn_scene(
    character: Character,
    catalog: SceneCatalog | None = None,
    config: CampaignConfig | None = None,
) -> SceneSelection:
    """
    Pick the next scene.

    Args:
        character: Current character (not mutated)
        catalog: Scene catalog (defaults to the authored content)
        config: Campaign tunables

    Returns:
        SceneSelection with the scene and the character after marking it seen
    """
    catalog = catalog or default_catalog()
    config = config or CampaignConfig()
    c = character.model_copy(deep=True)
    campaign = c.campaign

    if c.next_scene_id:
        scene = catalog.get_scene(c.next_scene_id)
        c.next_scene_id = None
        mark_seen(c, scene.id, config.recent_window)
        logger.debug("Forced follow-up scene %s", scene.id)
        return SceneSelection(character=c, scene=scene, source="forced")

    finale_id = catalog.finale(campaign.arc_id)
    if (
        finale_id
        and campaign.act == 3
        and campaign.progress >= config.finale_threshold
        and finale_id not in campaign.seen_scene_ids
        and finale_id in catalog
    ):
        scene = catalog.require_scene(finale_id)
        mark_seen(c, scene.id, config.recent_window)
        logger.debug("Forcing %s finale %s", campaign.arc_id.value, scene.id)
        return SceneSelection(character=c, scene=scene, source="finale")

    refs = available_refs(c, catalog)
    if not refs:
        scene = make_filler_scene(c, catalog, config)
        mark_seen(c, scene.id, config.recent_window)
        logger.debug(
            "Pool exhausted for %s act %d, filler %s",
            campaign.arc_id.value,
            campaign.act,
            scene.id,
        )
        return SceneSelection(character=c, scene=scene, source="filler")

    scene_id = weighted_pick([(ref.id, ref.weight) for ref in refs])
    scene = catalog.require_scene(scene_id)
    mark_seen(c, scene.id, config.recent_window)
    logger.debug("Picked %s from %s act %d pool", scene.id, campaign.arc_id.value, campaign.act)
    return SceneSelection(character=c, scene=scene, source="pool")

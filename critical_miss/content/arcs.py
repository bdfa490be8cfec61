"""
Campaign arcs: titles, per-act weighted scene pools and finales.
"""

from __future__ import annotations

from pydantic import BaseModel

from critical_miss.models.campaign import ArcId
from critical_miss.models.scene import WeightedSceneRef

HUB_SCENE_ID = "tavern.dripping_goblet"


class ArcMeta(BaseModel):
    title: str
    blurb: str


ARC_META: dict[ArcId, ArcMeta] = {
    ArcId.TAXMAN: ArcMeta(
        title="The Crown vs. Your Vibes",
        blurb="An auditor has taken an unholy interest in your finances.",
    ),
    ArcId.INTERNSHIP: ArcMeta(
        title="Unpaid, Unholy Internship",
        blurb="A wizard has offered you “experience.” You will pay in suffering.",
    ),
    ArcId.MIMIC: ArcMeta(
        title="Chest With Feelings",
        blurb="A mimic has chosen you. That is not a compliment.",
    ),
    ArcId.TREASURE: ArcMeta(
        title="The Map That Shouldn’t Exist",
        blurb="A map falls into your hands, and suddenly everyone wants you dead.",
    ),
    ArcId.VENGEANCE: ArcMeta(
        title="Black Letter",
        blurb="A letter brings bad news. Your grief becomes a direction.",
    ),
}


def _pool(*entries: tuple[str, int]) -> list[WeightedSceneRef]:
    return [WeightedSceneRef(id=scene_id, weight=weight) for scene_id, weight in entries]


_MIMIC_FOLLOWUP = WeightedSceneRef(
    id="camp.mimic_followup",
    weight=2,
    unless_flags=["mimic_followup_done", "mimic_sent_away"],
)

ARC_SCENE_POOLS: dict[ArcId, dict[int, list[WeightedSceneRef]]] = {
    ArcId.TAXMAN: {
        1: _pool(("tavern.taxman", 5), ("street.paperwork", 2), (HUB_SCENE_ID, 1)),
        2: _pool(("street.paperwork", 5), ("court.day", 3), (HUB_SCENE_ID, 1)),
        3: _pool(("court.day", 6), (HUB_SCENE_ID, 1)),
    },
    ArcId.INTERNSHIP: {
        1: _pool(("tower.internship", 5), ("lab.safety", 2), (HUB_SCENE_ID, 1)),
        2: _pool(("lab.safety", 5), ("fallout.jar", 3), (HUB_SCENE_ID, 1)),
        3: _pool(("fallout.jar", 6), (HUB_SCENE_ID, 1)),
    },
    ArcId.MIMIC: {
        1: _pool(("dungeon.mimic_intro", 5), (HUB_SCENE_ID, 1)),
        2: [*_pool(("dungeon.mimic_intro", 3), (HUB_SCENE_ID, 1)), _MIMIC_FOLLOWUP],
        3: _pool(("camp.mimic_finale", 6), (HUB_SCENE_ID, 1)),
    },
    ArcId.TREASURE: {
        1: _pool(
            ("tavern.rumor_black_road", 4),
            ("street.map_drop", 3),
            ("road.first_blood", 2),
        ),
        2: _pool(
            ("road.rival_party", 3),
            ("road.bridge_toll", 2),
            ("ruins.stone_gate", 3),
            ("road.first_blood", 1),
        ),
        3: _pool(("vault.lantern_room", 3), ("vault.final_lock", 3)),
    },
    ArcId.VENGEANCE: {
        1: _pool(("letter.black_seal", 4), ("village.funeral", 2), ("road.witness", 2)),
        2: _pool(("road.witness", 2), ("road.hired_blade", 3), ("manor.closed_doors", 3)),
        3: _pool(("manor.confrontation", 4), ("manor.aftermath", 2)),
    },
}

ARC_FINALES: dict[ArcId, str] = {
    ArcId.TAXMAN: "court.day",
    ArcId.INTERNSHIP: "fallout.jar",
    ArcId.MIMIC: "camp.mimic_finale",
    ArcId.TREASURE: "vault.final_lock",
    ArcId.VENGEANCE: "manor.confrontation",
}

# New campaigns lean toward the story-forward arcs.
ARC_WEIGHTS: tuple[tuple[ArcId, int], ...] = (
    (ArcId.TREASURE, 3),
    (ArcId.VENGEANCE, 3),
    (ArcId.TAXMAN, 2),
    (ArcId.INTERNSHIP, 2),
    (ArcId.MIMIC, 1),
)

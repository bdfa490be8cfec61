"""
Authored content for Critical Miss.

Scenes, arc pools and finales, enemy and intent tables, rest story events,
and the catalog/linter built over them.
"""

from critical_miss.content.arcs import (
    ARC_FINALES,
    ARC_META,
    ARC_SCENE_POOLS,
    ARC_WEIGHTS,
    HUB_SCENE_ID,
    ArcMeta,
)
from critical_miss.content.catalog import SceneCatalog, SceneNotFoundError, default_catalog
from critical_miss.content.enemies import ENEMY_TEMPLATES, INTENT_TABLE, EnemyTemplate, make_enemy
from critical_miss.content.lint import LintIssue, lint_catalog, looks_like_attack
from critical_miss.content.rest_events import REST_EVENTS, RestEvent
from critical_miss.content.scenes import AUTHORED_SCENES

__all__ = [
    "ARC_FINALES",
    "ARC_META",
    "ARC_SCENE_POOLS",
    "ARC_WEIGHTS",
    "AUTHORED_SCENES",
    "ENEMY_TEMPLATES",
    "HUB_SCENE_ID",
    "INTENT_TABLE",
    "REST_EVENTS",
    "ArcMeta",
    "EnemyTemplate",
    "LintIssue",
    "RestEvent",
    "SceneCatalog",
    "SceneNotFoundError",
    "default_catalog",
    "lint_catalog",
    "looks_like_attack",
    "make_enemy",
]

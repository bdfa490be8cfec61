"""
Content linting.

Flags outcomes whose text reads like an attack (hp loss caused by someone)
but that carry no combat tag, and tagged outcomes that reference unknown
enemies. Resolution never consults this; it is an authoring aid only.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from critical_miss.content.catalog import SceneCatalog
from critical_miss.content.enemies import ENEMY_TEMPLATES
from critical_miss.models.scene import Outcome, Scene

ATTACK_KEYWORDS = (
    "hit",
    "hits",
    "stab",
    "bite",
    "bites",
    "ambush",
    "slash",
    "punch",
    "swing",
    "swings",
    "jab",
    "jabs",
    "strike",
    "claw",
    "lunge",
    "attack",
)

# Harm with no attacker.
ENVIRONMENTAL_EXCLUSIONS = (
    "masonry",
    "freezing water",
    "smoke",
    "fire",
    "paperwork",
    "bureaucracy",
    "emotional",
)

ADVERSARIAL_CATEGORIES = frozenset({"tavern", "street", "road", "manor"})

_ATTACK_RE = re.compile(r"\b(" + "|".join(ATTACK_KEYWORDS) + r")\b", re.IGNORECASE)


class LintIssue(BaseModel):
    scene_id: str
    choice_id: str
    branch: str
    message: str


def looks_like_attack(text: str, category: str) -> bool:
    """
    Whether harm described by `text` in a scene of `category` reads as an attack.

    Environmental harm never counts. Otherwise attack verbs or an inherently
    adversarial scene category do.
    """
    lowered = text.lower()
    if any(term in lowered for term in ENVIRONMENTAL_EXCLUSIONS):
        return False
    if _ATTACK_RE.search(text):
        return True
    return category.strip().lower() in ADVERSARIAL_CATEGORIES


def _lint_outcome(scene: Scene, choice_id: str, branch: str, outcome: Outcome) -> list[LintIssue]:
    issues: list[LintIssue] = []
    if outcome.combat is not None:
        if outcome.combat.enemy_kind not in ENEMY_TEMPLATES:
            issues.append(
                LintIssue(
                    scene_id=scene.id,
                    choice_id=choice_id,
                    branch=branch,
                    message=f"unknown enemy kind '{outcome.combat.enemy_kind}'",
                )
            )
        return issues

    if outcome.hp_delta < 0 and looks_like_attack(outcome.text, scene.category):
        issues.append(
            LintIssue(
                scene_id=scene.id,
                choice_id=choice_id,
                branch=branch,
                message="hp loss reads like an attack but has no combat tag",
            )
        )
    return issues


def lint_catalog(catalog: SceneCatalog) -> list[LintIssue]:
    """Check every outcome in the catalog, plus dangling scene references."""
    issues: list[LintIssue] = []
    for scene in catalog.scenes():
        for choice in scene.choices:
            issues.extend(_lint_outcome(scene, choice.id, "success", choice.on_success))
            issues.extend(_lint_outcome(scene, choice.id, "fail", choice.on_fail))
    for missing in catalog.missing_references():
        issues.append(
            LintIssue(scene_id=missing, choice_id="", branch="", message="referenced but not authored")
        )
    return issues

"""Shared fixtures for Critical Miss tests."""

from __future__ import annotations

import pytest

from critical_miss.content.catalog import SceneCatalog
from critical_miss.models.campaign import ArcId, new_campaign_state
from critical_miss.models.character import Character, ClassName, Sex
from critical_miss.models.stats import Stats


def build_character(**overrides) -> Character:
    """A level-1 Fighter with flat 10s, unless overridden."""
    values = {
        "name": "Test Hero",
        "sex": Sex.FEMALE,
        "class_name": ClassName.FIGHTER,
        "hp": 10,
        "hp_max": 10,
        "gold": 12,
        "hit_die_size": 8,
        "hit_dice_max": 6,
        "hit_dice_remaining": 6,
        "stats": Stats(),
        "campaign": new_campaign_state(ArcId.TREASURE),
    }
    values.update(overrides)
    return Character(**values)


@pytest.fixture
def make_character():
    """Factory fixture for characters."""
    return build_character


@pytest.fixture
def character() -> Character:
    return build_character()


@pytest.fixture
def catalog() -> SceneCatalog:
    return SceneCatalog()

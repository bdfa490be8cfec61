"""
Scene catalog.

Read-only lookup over the authored scenes and the per-arc pools. The engine
treats it as static data keyed by scene id.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from critical_miss.content.arcs import ARC_FINALES, ARC_META, ARC_SCENE_POOLS, HUB_SCENE_ID, ArcMeta
from critical_miss.content.scenes import AUTHORED_SCENES
from critical_miss.models.campaign import ArcId
from critical_miss.models.scene import Scene, WeightedSceneRef

logger = logging.getLogger(__name__)


class SceneNotFoundError(LookupError):
    """A scene id is not in the catalog."""


class SceneCatalog:
    """
    Authored scenes plus arc pools and finales.

    `get_scene` falls back to the hub scene for unknown ids so a stale
    reference never stalls the story; `require_scene` is strict.
    """

    def __init__(
        self,
        scenes: Iterable[Scene] = AUTHORED_SCENES,
        pools: Mapping[ArcId, Mapping[int, list[WeightedSceneRef]]] | None = None,
        finales: Mapping[ArcId, str] | None = None,
        hub_scene_id: str = HUB_SCENE_ID,
    ) -> None:
        self._scenes: dict[str, Scene] = {}
        for scene in scenes:
            if scene.id in self._scenes:
                raise ValueError(f"Duplicate scene id: {scene.id}")
            self._scenes[scene.id] = scene
        self._pools = pools if pools is not None else ARC_SCENE_POOLS
        self._finales = finales if finales is not None else ARC_FINALES
        if hub_scene_id not in self._scenes:
            raise ValueError(f"Hub scene '{hub_scene_id}' is not in the catalog")
        self.hub_scene_id = hub_scene_id

    def __contains__(self, scene_id: object) -> bool:
        return scene_id in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)

    @property
    def scene_ids(self) -> list[str]:
        return list(self._scenes)

    def scenes(self) -> list[Scene]:
        return list(self._scenes.values())

    def require_scene(self, scene_id: str) -> Scene:
        """Strict lookup."""
        scene = self._scenes.get(scene_id)
        if scene is None:
            raise SceneNotFoundError(f"Scene '{scene_id}' not found")
        return scene

    def get_scene(self, scene_id: str) -> Scene:
        """Lookup with the hub scene as the fallback for unknown ids."""
        scene = self._scenes.get(scene_id)
        if scene is None:
            logger.warning("Unknown scene id %r, falling back to %s", scene_id, self.hub_scene_id)
            return self._scenes[self.hub_scene_id]
        return scene

    def pool(self, arc_id: ArcId, act: int) -> list[WeightedSceneRef]:
        """Weighted pool for an arc and act (empty if none is authored)."""
        return list(self._pools.get(arc_id, {}).get(act, []))

    def finale(self, arc_id: ArcId) -> str | None:
        return self._finales.get(arc_id)

    @staticmethod
    def arc_meta(arc_id: ArcId) -> ArcMeta:
        return ARC_META[arc_id]

    def missing_references(self) -> list[str]:
        """Pool, finale and forced-scene ids that point nowhere."""
        referenced: set[str] = set(self._finales.values())
        for acts in self._pools.values():
            for refs in acts.values():
                referenced.update(ref.id for ref in refs)
        for scene in self._scenes.values():
            for choice in scene.choices:
                for outcome in (choice.on_success, choice.on_fail):
                    referenced.update(
                        e.scene_id for e in outcome.effects if e.kind == "next_scene"
                    )
                    if outcome.combat:
                        for branch in (
                            outcome.combat.on_win,
                            outcome.combat.on_lose,
                            outcome.combat.on_flee,
                        ):
                            if branch.next_scene_id:
                                referenced.add(branch.next_scene_id)
        return sorted(ref for ref in referenced if ref not in self._scenes)


_default_catalog: SceneCatalog | None = None


def default_catalog() -> SceneCatalog:
    """Shared catalog over the authored content."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = SceneCatalog()
    return _default_catalog

"""
In-memory implementation of the snapshot repository for testing.
"""

from __future__ import annotations

from critical_miss.models.snapshot import SNAPSHOT_VERSION, Snapshot


class InMemorySnapshotRepository:
    """
    In-memory implementation of SnapshotRepository.

    Stores a deep copy so later changes by the caller never leak into the
    saved state.
    """

    def __init__(self) -> None:
        self._snapshot: Snapshot | None = None

    def load(self) -> Snapshot | None:
        if self._snapshot is None:
            return None
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: Snapshot) -> None:
        if snapshot.version != SNAPSHOT_VERSION:
            raise ValueError(
                f"Snapshot version {snapshot.version} is not the current version {SNAPSHOT_VERSION}"
            )
        self._snapshot = snapshot.model_copy(deep=True)

    def clear(self) -> None:
        self._snapshot = None

"""
Persistence interface definitions for Critical Miss.

Uses a Protocol class to define the contract the persistence collaborator
fulfils. It owns the stored bytes and any migration of older shapes; the
engine only ever sees current-version Snapshot models.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from critical_miss.models.snapshot import Snapshot


class SnapshotRepository(Protocol):
    """Interface for loading and saving a session snapshot."""

    def load(self) -> Snapshot | None:
        """Return the saved snapshot, or None when nothing is saved."""
        ...

    def save(self, snapshot: Snapshot) -> None:
        """Replace the saved snapshot."""
        ...

    def clear(self) -> None:
        """Forget the saved snapshot."""
        ...

"""
Persistence layer for Critical Miss.

Provides the snapshot repository interface and an in-memory implementation.
"""

from __future__ import annotations

from critical_miss.db.interfaces import SnapshotRepository
from critical_miss.db.memory import InMemorySnapshotRepository

__all__ = [
    "SnapshotRepository",
    "InMemorySnapshotRepository",
]

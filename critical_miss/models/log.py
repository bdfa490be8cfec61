"""
Narrative log entries handed back to the presentation layer.
"""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    """One line of the campaign journal."""

    id: str = Field(default_factory=lambda: f"log_{uuid4().hex}")
    day: int = Field(ge=0, description="In-game day the line was written")
    text: str


def log_lines(day: int, *texts: str) -> list[LogEntry]:
    """Build log entries for a batch of lines on the same day."""
    return [LogEntry(day=day, text=text) for text in texts]

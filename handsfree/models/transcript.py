"""Transcript log models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class TranscriptOrigin(Enum):
    """Who produced a transcript entry."""
    USER = "user"
    SYSTEM = "system"
    MODEL = "model"


@dataclass
class TranscriptEntry:
    """A single line in the append-only transcript log."""
    id: int
    text: str
    origin: TranscriptOrigin
    timestamp: datetime = field(default_factory=datetime.now)

"""Speech recognition result models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class RecognitionResult:
    """Result delivered by the continuous recognition collaborator."""
    text: str
    is_final: bool = True
    confidence: Optional[float] = None
    language: str = "en-US"
    timestamp: datetime = field(default_factory=datetime.now)

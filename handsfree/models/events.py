"""Pub/sub topic names and event payloads."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .modes import UIMode

SPEECH_FINAL_TOPIC = "speech.final"
SPEECH_INTERIM_TOPIC = "speech.interim"
MEDIA_COMMAND_TOPIC = "media.command"
TRANSCRIPT_TOPIC = "transcript.entry"
NAVIGATION_TOPIC = "ui.navigation"
ENTITY_SAVED_TOPIC = "entity.saved"


@dataclass
class NavigationChange:
    """Panel change caused by a dispatched action."""
    previous: UIMode
    current: UIMode
    forced_by_media: bool = False
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RecognitionError:
    """Error reported by the recognition collaborator."""
    code: str
    message: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

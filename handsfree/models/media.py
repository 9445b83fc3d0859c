"""Media commands sent to the camera/microphone collaborator."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .modes import RecordingType


@dataclass
class MediaCommand:
    """Base class for a single pending media instruction."""

    action = ""

    def describe(self) -> str:
        """Human readable status line for this command."""
        return self.action


@dataclass
class TakePhotos(MediaCommand):
    """Take `count` photos after `delay` seconds."""
    count: int = 1
    delay: int = 0

    action = "take picture"

    def describe(self) -> str:
        return f"Taking {self.count} photo(s) with a {self.delay}s delay."


@dataclass
class TakePhotoTimer(MediaCommand):
    """Take a single photo once the countdown expires."""
    duration: int = 3

    action = "photo timer"

    def describe(self) -> str:
        return f"Taking a photo in {self.duration} seconds."


@dataclass
class RecordVideo(MediaCommand):
    """Start a video recording, open-ended when duration is None."""
    duration: Optional[int] = None

    action = "record video"

    def describe(self) -> str:
        if self.duration:
            return f"Recording Video for {self.duration} seconds."
        return "Started Video recording."


@dataclass
class RecordAudio(MediaCommand):
    """Start an audio-only recording, open-ended when duration is None."""
    duration: Optional[int] = None

    action = "record sound"

    def describe(self) -> str:
        if self.duration:
            return f"Recording Audio for {self.duration} seconds."
        return "Started Audio recording."


@dataclass
class StopRecording(MediaCommand):
    action = "stop recording"

    def describe(self) -> str:
        return "Stopping recording."


@dataclass
class StopAudioRecording(MediaCommand):
    action = "stop audio recording"

    def describe(self) -> str:
        return "Stopping audio recording."


@dataclass
class SwitchCamera(MediaCommand):
    action = "switch camera"

    def describe(self) -> str:
        return "Switching camera."


@dataclass
class Recording:
    """A captured photo or a finished video/audio recording."""
    name: str
    type: RecordingType
    timestamp: datetime = field(default_factory=datetime.now)
    duration: Optional[float] = None

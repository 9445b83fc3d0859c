"""Data models for the hands-free capture application."""

from .modes import UIMode, CaptureMode, RecordingType
from .media import (
    MediaCommand,
    TakePhotos,
    TakePhotoTimer,
    RecordVideo,
    RecordAudio,
    StopRecording,
    StopAudioRecording,
    SwitchCamera,
    Recording,
)
from .entities import (
    ContactStatus,
    DraftContact,
    DraftConfirmation,
    Contact,
    Confirmation,
)
from .transcript import TranscriptEntry, TranscriptOrigin
from .recognition import RecognitionResult
from .events import NavigationChange, RecognitionError
from .state import AppState

__all__ = [
    "UIMode",
    "CaptureMode",
    "RecordingType",
    # Media commands
    "MediaCommand",
    "TakePhotos",
    "TakePhotoTimer",
    "RecordVideo",
    "RecordAudio",
    "StopRecording",
    "StopAudioRecording",
    "SwitchCamera",
    "Recording",
    # Entities
    "ContactStatus",
    "DraftContact",
    "DraftConfirmation",
    "Contact",
    "Confirmation",
    "TranscriptEntry",
    "TranscriptOrigin",
    "RecognitionResult",
    "NavigationChange",
    "RecognitionError",
    "AppState",
]

"""Navigation and capture mode enums."""

from enum import Enum


class UIMode(Enum):
    """Panel currently shown to the user."""
    MAIN = "main"
    CONTACTS = "contacts"
    MEDIA = "media"
    CALENDAR = "calendar"


class CaptureMode(Enum):
    """Which draft entity, if any, absorbs field-setting utterances."""
    GENERAL = "general"
    CONTACT = "contact"
    CONFIRMATION = "confirmation"


class RecordingType(Enum):
    """Kind of capture the media collaborator is running."""
    VIDEO = "video"
    AUDIO = "audio"
    PHOTO = "photo"

"""Ordered rule table turning normalized utterances into actions."""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..models.actions import (
    Action,
    ShowCommands,
    HideCommands,
    MediaAction,
    SetContactField,
    SetConfirmationField,
    SaveContact,
    CancelContact,
    SaveConfirmation,
    CancelConfirmation,
    Navigate,
    CaptureContact,
    CaptureConfirmation,
    Unknown,
)
from ..models.entities import CONTACT_FIELDS
from ..models.media import (
    TakePhotos,
    TakePhotoTimer,
    RecordVideo,
    RecordAudio,
    StopRecording,
    StopAudioRecording,
    SwitchCamera,
)
from ..models.modes import CaptureMode, UIMode
from .normalizer import words_to_numbers

logger = logging.getLogger(__name__)

SHOW_COMMANDS_PHRASES = ("commands list",)
HIDE_COMMANDS_PHRASES = ("close list", "hide commands")

STOP_AUDIO_PHRASES = (
    "stop audio recording",
    "stop sound recording",
    "stop recording sound",
    "stop recording audio",
)
STOP_PHRASES = ("stop recording", "stop video recording")
SWITCH_CAMERA_PHRASE = "switch camera"

PHOTO_TRIGGER = re.compile(r"\b(?:take|takes|taking|took)\s+(?:a\s+)?(?:picture|photo)s?\b")
PHOTO_TIMER_TRIGGER = re.compile(r"\bphoto timer\b(?:\s+(?:for\s+)?(\d+))?")
DURATION_PATTERN = re.compile(r"(?:for\s)?(\d+)")
LEADING_INTEGER = re.compile(r"^(\d+)")
CONFIRMATION_KEYWORDS = re.compile(r"type|name|number", re.IGNORECASE)

DEFAULT_PHOTO_COUNT = 1
DEFAULT_PHOTO_DELAY = 0
DEFAULT_PHOTO_TIMER_SECONDS = 3

# (prefixes, action factory); first matching prefix wins
NAVIGATION_RULES: List[Tuple[Tuple[str, ...], Callable[[], Action]]] = [
    (("show contacts",), lambda: Navigate(UIMode.CONTACTS)),
    (("open camera", "open media"), lambda: Navigate(UIMode.MEDIA)),
    (("show calendar", "open calendar"), lambda: Navigate(UIMode.CALENDAR)),
    (("return to main", "close camera", "close contacts", "close calendar"),
     lambda: Navigate(UIMode.MAIN)),
    (("capture contact",), CaptureContact),
    (("capture confirmation",), CaptureConfirmation),
]


def _leading_int(token: str) -> Optional[int]:
    match = LEADING_INTEGER.match(token)
    return int(match.group(1)) if match else None


def parse_photo_params(params: str) -> Tuple[int, int]:
    """Extract photo count and timer delay from the text after a photo trigger.

    The count is an optional leading integer; the delay is the integer
    following the token ``timer``. Both are found by scanning, so
    ``"5 timer 3"`` and ``"timer 3"`` both parse.

    Args:
        params: Normalized text following the trigger phrase

    Returns:
        Tuple of (count, delay); unparseable values fall back to (1, 0)
    """
    parts = [part for part in params.split() if part]
    count = DEFAULT_PHOTO_COUNT
    delay = DEFAULT_PHOTO_DELAY

    if parts:
        leading = _leading_int(parts[0])
        if leading:
            count = leading

    if "timer" in parts:
        timer_index = parts.index("timer")
        if timer_index + 1 < len(parts):
            value = _leading_int(parts[timer_index + 1])
            if value is not None:
                delay = value

    return count, delay


def parse_duration(normalized: str) -> Optional[int]:
    """Extract a recording duration in seconds.

    Args:
        normalized: Normalized command text

    Returns:
        Duration in seconds, or None for an open-ended recording
    """
    match = DURATION_PATTERN.search(normalized)
    if not match:
        return None
    duration = int(match.group(1))
    if "minute" in normalized:
        duration *= 60
    return duration or None


class CommandMatcher:
    """Classifies a normalized utterance into a single action.

    Rules are evaluated in strict priority order and the first match wins:
    meta commands, media commands, contact fields, confirmation fields,
    save/cancel, navigation. Anything else becomes ``Unknown``.
    """

    def __init__(self, photo_timer_default: int = DEFAULT_PHOTO_TIMER_SECONDS):
        self.photo_timer_default = photo_timer_default
        self.rules: List[Tuple[str, Callable[[str, str, CaptureMode], Optional[Action]]]] = [
            ("meta", self._match_meta),
            ("media", self._match_media),
            ("contact_field", self._match_contact_field),
            ("confirmation_field", self._match_confirmation_field),
            ("save_cancel", self._match_save_cancel),
            ("navigation", self._match_navigation),
        ]

    def match(self, normalized: str, raw: str, mode: CaptureMode) -> Action:
        """Match an utterance against the rule table.

        Args:
            normalized: Output of ``normalize(raw)``
            raw: Original utterance, used for verbatim field values
            mode: Current capture mode

        Returns:
            The first matching action, or ``Unknown``
        """
        raw = raw.strip()
        for name, rule in self.rules:
            action = rule(normalized, raw, mode)
            if action is not None:
                logger.debug(f"Rule '{name}' matched '{raw}' -> {action}")
                return action

        logger.debug(f"No rule matched '{raw}'")
        return Unknown(raw_text=raw)

    def _match_meta(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        if normalized in SHOW_COMMANDS_PHRASES:
            return ShowCommands()
        if normalized in HIDE_COMMANDS_PHRASES:
            return HideCommands()
        return None

    def _match_media(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        # Dedicated audio stop goes first so it is never taken as the generic stop
        if any(phrase in normalized for phrase in STOP_AUDIO_PHRASES):
            return MediaAction(StopAudioRecording())
        if any(phrase in normalized for phrase in STOP_PHRASES):
            return MediaAction(StopRecording())

        if "record video" in normalized:
            return MediaAction(RecordVideo(duration=parse_duration(normalized)))
        if "record sound" in normalized:
            return MediaAction(RecordAudio(duration=parse_duration(normalized)))

        trigger = PHOTO_TRIGGER.search(normalized)
        if trigger:
            count, delay = parse_photo_params(normalized[trigger.end():])
            return MediaAction(TakePhotos(count=count, delay=delay))

        timer = PHOTO_TIMER_TRIGGER.search(normalized)
        if timer:
            duration = int(timer.group(1)) if timer.group(1) else self.photo_timer_default
            return MediaAction(TakePhotoTimer(duration=duration))

        if normalized == SWITCH_CAMERA_PHRASE:
            return MediaAction(SwitchCamera())
        return None

    def _match_contact_field(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        if mode != CaptureMode.CONTACT:
            return None
        parts = raw.split()
        if not parts:
            return None
        field_name = parts[0].lower()
        if field_name not in CONTACT_FIELDS:
            return None
        return SetContactField(field=field_name, value=" ".join(parts[1:]))

    def _match_confirmation_field(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        if mode != CaptureMode.CONFIRMATION:
            return None
        # Earliest keyword in the text wins, not keyword order
        keyword = CONFIRMATION_KEYWORDS.search(raw)
        if not keyword:
            return None
        field_name = keyword.group(0).lower()
        value = raw[keyword.end():].strip()
        if field_name == "number":
            value = re.sub(r"\s", "", words_to_numbers(value))
        return SetConfirmationField(field=field_name, value=value)

    def _match_save_cancel(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        if normalized == "save contact":
            return SaveContact()
        if normalized == "cancel contact":
            return CancelContact()
        if normalized == "save confirmation":
            return SaveConfirmation()
        if normalized == "cancel confirmation":
            return CancelConfirmation()
        return None

    def _match_navigation(self, normalized: str, raw: str, mode: CaptureMode) -> Optional[Action]:
        for prefixes, factory in NAVIGATION_RULES:
            if normalized.startswith(prefixes):
                return factory()
        return None

"""Mutable session state read and written by the dispatcher."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .entities import DraftContact, DraftConfirmation
from .media import MediaCommand
from .modes import UIMode, CaptureMode, RecordingType
from .transcript import TranscriptEntry, TranscriptOrigin

READY_STATUS = "Ready to start."


@dataclass
class AppState:
    """Session state for one hands-free capture session.

    A single instance is created per session and passed by reference into
    the dispatcher. Invariant: whenever ``capture_mode`` is not GENERAL the
    draft of the matching kind exists (it may be empty).
    """
    ui_mode: UIMode = UIMode.MAIN
    capture_mode: CaptureMode = CaptureMode.GENERAL
    draft_contact: Optional[DraftContact] = None
    draft_confirmation: Optional[DraftConfirmation] = None
    pending_media_command: Optional[MediaCommand] = None
    active_recording: Optional[RecordingType] = None
    show_commands: bool = False
    status: str = READY_STATUS
    transcript: List[TranscriptEntry] = field(default_factory=list)

    def append_transcript(self, text: str, origin: TranscriptOrigin,
                          timestamp: Optional[datetime] = None) -> TranscriptEntry:
        """Append an entry to the transcript log and return it."""
        entry = TranscriptEntry(
            id=len(self.transcript) + 1,
            text=text,
            origin=origin,
            timestamp=timestamp or datetime.now(),
        )
        self.transcript.append(entry)
        return entry

    def set_status(self, message: str) -> TranscriptEntry:
        """Update the visible status and log it as a system entry."""
        self.status = message
        return self.append_transcript(message, TranscriptOrigin.SYSTEM)

    def enter_contact_capture(self) -> None:
        self.reset_capture()
        self.capture_mode = CaptureMode.CONTACT
        self.draft_contact = DraftContact()

    def enter_confirmation_capture(self) -> None:
        self.reset_capture()
        self.capture_mode = CaptureMode.CONFIRMATION
        self.draft_confirmation = DraftConfirmation()

    def reset_capture(self) -> None:
        """Drop any draft and return to GENERAL capture."""
        self.capture_mode = CaptureMode.GENERAL
        self.draft_contact = None
        self.draft_confirmation = None

    def mode_label(self) -> str:
        """Label shown in the mode indicator."""
        if self.active_recording is not None:
            return f"RECORDING {self.active_recording.value.upper()}"
        if self.ui_mode == UIMode.CONTACTS:
            if self.capture_mode == CaptureMode.CONTACT:
                return "CONTACT CAPTURE"
            if self.capture_mode == CaptureMode.CONFIRMATION:
                return "CONFIRMATION CAPTURE"
            return "CONTACTS VIEW"
        if self.ui_mode == UIMode.MEDIA:
            return "MEDIA VIEW"
        if self.ui_mode == UIMode.CALENDAR:
            return "CALENDAR VIEW"
        return "GENERAL LISTENING"

"""Mode-aware dispatcher applying interpreted actions to session state."""

import logging
import random
import string
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union

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
from ..models.entities import Contact, Confirmation, ContactStatus
from ..models.events import NavigationChange
from ..models.media import MediaCommand, StopRecording
from ..models.modes import UIMode, CaptureMode, RecordingType
from ..models.state import AppState
from ..models.transcript import TranscriptEntry

logger = logging.getLogger(__name__)

NAVIGATION_STATUS = {
    UIMode.MAIN: "Returned to main view.",
    UIMode.CONTACTS: "Showing contacts.",
    UIMode.MEDIA: "Opened camera.",
    UIMode.CALENDAR: "Showing calendar.",
}

RESUME_STATUS = {
    CaptureMode.CONTACT: "Resumed contact capture.",
    CaptureMode.CONFIRMATION: "Resumed confirmation capture.",
}


def generate_entity_id() -> str:
    """Generate an id from the current time plus a random suffix."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    random_suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=8))
    return f"{timestamp}_{random_suffix}"


@dataclass
class DispatchResult:
    """Effects of dispatching one action."""
    action: Action
    navigation: Optional[NavigationChange] = None
    media_command: Optional[MediaCommand] = None
    created: List[Union[Contact, Confirmation]] = field(default_factory=list)
    draft_changed: bool = False
    status_entries: List[TranscriptEntry] = field(default_factory=list)

    @property
    def status(self) -> Optional[str]:
        """Last status message produced, if any."""
        return self.status_entries[-1].text if self.status_entries else None


class CommandDispatcher:
    """Applies actions to an ``AppState`` and reports the resulting effects.

    Dispatch is synchronous and performs no I/O: persisted entities and
    media commands are returned as effects for the caller to hand to the
    persistence and media collaborators.
    """

    def __init__(self,
                 id_factory: Callable[[], str] = generate_entity_id,
                 clock: Callable[[], datetime] = datetime.now):
        """Initialize dispatcher.

        Args:
            id_factory: Produces ids for saved contacts and confirmations
            clock: Produces timestamps for saved confirmations
        """
        self.id_factory = id_factory
        self.clock = clock
        self._handlers: Dict[type, Callable[[Action, AppState, DispatchResult], None]] = {
            ShowCommands: self._on_show_commands,
            HideCommands: self._on_hide_commands,
            MediaAction: self._on_media,
            SetContactField: self._on_set_contact_field,
            SetConfirmationField: self._on_set_confirmation_field,
            SaveContact: self._on_save_contact,
            CancelContact: self._on_cancel_contact,
            SaveConfirmation: self._on_save_confirmation,
            CancelConfirmation: self._on_cancel_confirmation,
            Navigate: self._on_navigate,
            CaptureContact: self._on_capture_contact,
            CaptureConfirmation: self._on_capture_confirmation,
            Unknown: self._on_unknown,
        }

    def dispatch(self, action: Action, state: AppState) -> DispatchResult:
        """Apply an action to the session state.

        Args:
            action: Interpreted action
            state: Session state, mutated in place

        Returns:
            DispatchResult describing the effects
        """
        result = DispatchResult(action=action)
        handler = self._handlers.get(type(action))
        if handler is None:
            logger.warning(f"No handler for action {type(action).__name__}, treating as unknown")
            handler = self._on_unknown
        handler(action, state, result)
        logger.debug(f"Dispatched {type(action).__name__}: ui={state.ui_mode.value} "
                     f"capture={state.capture_mode.value} status='{state.status}'")
        return result

    def _status(self, state: AppState, result: DispatchResult, message: str) -> None:
        result.status_entries.append(state.set_status(message))

    def _navigate(self, state: AppState, result: DispatchResult, target: UIMode,
                  forced_by_media: bool = False) -> None:
        if state.ui_mode == target:
            return
        result.navigation = NavigationChange(
            previous=state.ui_mode,
            current=target,
            forced_by_media=forced_by_media,
        )
        logger.info(f"Navigating {state.ui_mode.value} -> {target.value}")
        state.ui_mode = target

    def _on_show_commands(self, action: ShowCommands, state: AppState, result: DispatchResult) -> None:
        state.show_commands = True
        self._status(state, result, "Showing command list.")

    def _on_hide_commands(self, action: HideCommands, state: AppState, result: DispatchResult) -> None:
        state.show_commands = False
        self._status(state, result, "Command list hidden.")

    def _on_media(self, action: MediaAction, state: AppState, result: DispatchResult) -> None:
        # Media view comes up first; an ongoing capture stays active so dictation can resume
        self._navigate(state, result, UIMode.MEDIA, forced_by_media=True)
        command = action.command

        if isinstance(command, StopRecording) and state.active_recording == RecordingType.AUDIO:
            self._status(state, result,
                         'Audio recording in progress. Say "stop audio recording" to stop it.')
            return

        if state.pending_media_command is not None:
            logger.debug(f"Replacing pending media command {state.pending_media_command} with {command}")
        state.pending_media_command = command
        result.media_command = command
        self._status(state, result, command.describe())

    def _on_set_contact_field(self, action: SetContactField, state: AppState, result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONTACT or state.draft_contact is None:
            self._status(state, result, "No contact capture in progress.")
            return
        state.draft_contact.set_field(action.field, action.value)
        result.draft_changed = True
        self._status(state, result, f'Set {action.field} to "{action.value}"')

    def _on_set_confirmation_field(self, action: SetConfirmationField, state: AppState,
                                   result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONFIRMATION or state.draft_confirmation is None:
            self._status(state, result, "No confirmation capture in progress.")
            return
        state.draft_confirmation.set_field(action.field, action.value)
        result.draft_changed = True
        self._status(state, result, f'Set confirmation {action.field} to "{action.value}"')

    def _on_save_contact(self, action: SaveContact, state: AppState, result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONTACT or state.draft_contact is None:
            self._status(state, result, "No contact capture in progress.")
            return

        draft = state.draft_contact
        if not (draft.name and draft.name.strip()):
            self._status(state, result, "Cannot save contact without a name.")
            return

        contact = Contact(
            id=self.id_factory(),
            name=draft.name,
            status=ContactStatus.OFFLINE,
            phone=draft.phone,
            email=draft.email,
            details=draft.details,
        )
        result.created.append(contact)
        state.reset_capture()
        result.draft_changed = True
        logger.info(f"Contact saved: {contact.id} ({contact.name})")
        self._status(state, result, f'Contact "{contact.name}" saved.')

    def _on_cancel_contact(self, action: CancelContact, state: AppState, result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONTACT:
            self._status(state, result, "No contact capture in progress.")
            return
        state.reset_capture()
        result.draft_changed = True
        self._status(state, result, "Contact capture cancelled.")

    def _on_save_confirmation(self, action: SaveConfirmation, state: AppState, result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONFIRMATION or state.draft_confirmation is None:
            self._status(state, result, "No confirmation capture in progress.")
            return

        draft = state.draft_confirmation
        if not draft.number:
            self._status(state, result, "Cannot save confirmation without a number.")
            return

        confirmation = Confirmation(
            id=self.id_factory(),
            number=draft.number,
            type=draft.type,
            name=draft.name,
            timestamp=self.clock(),
        )
        result.created.append(confirmation)
        state.reset_capture()
        result.draft_changed = True
        logger.info(f"Confirmation saved: {confirmation.id} ({confirmation.number})")
        self._status(state, result, f'Confirmation "{confirmation.number}" saved.')

    def _on_cancel_confirmation(self, action: CancelConfirmation, state: AppState,
                                result: DispatchResult) -> None:
        if state.capture_mode != CaptureMode.CONFIRMATION:
            self._status(state, result, "No confirmation capture in progress.")
            return
        state.reset_capture()
        result.draft_changed = True
        self._status(state, result, "Confirmation capture cancelled.")

    def _on_navigate(self, action: Navigate, state: AppState, result: DispatchResult) -> None:
        # Coming back to contacts after a media detour resumes the paused capture
        if (action.target == UIMode.CONTACTS and state.ui_mode != UIMode.CONTACTS
                and state.capture_mode != CaptureMode.GENERAL):
            self._navigate(state, result, action.target)
            self._status(state, result, RESUME_STATUS[state.capture_mode])
            return

        self._navigate(state, result, action.target)
        if state.capture_mode != CaptureMode.GENERAL:
            logger.info(f"Leaving {state.capture_mode.value} capture, draft discarded")
            result.draft_changed = True
        state.reset_capture()
        self._status(state, result, NAVIGATION_STATUS[action.target])

    def _on_capture_contact(self, action: CaptureContact, state: AppState, result: DispatchResult) -> None:
        self._navigate(state, result, UIMode.CONTACTS)
        state.enter_contact_capture()
        result.draft_changed = True
        self._status(state, result, 'Ready to capture contact. Say "name", "phone", etc.')

    def _on_capture_confirmation(self, action: CaptureConfirmation, state: AppState,
                                 result: DispatchResult) -> None:
        self._navigate(state, result, UIMode.CONTACTS)
        state.enter_confirmation_capture()
        result.draft_changed = True
        self._status(state, result, 'Ready to capture confirmation. Say "type", "name", or "number".')

    def _on_unknown(self, action: Action, state: AppState, result: DispatchResult) -> None:
        raw_text = getattr(action, "raw_text", type(action).__name__)
        logger.info(f"Unrecognized command: '{raw_text}'")
        self._status(state, result, f'Command not recognized: "{raw_text}"')

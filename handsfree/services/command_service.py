"""Command service: runs finalized utterances through interpretation and dispatch."""

import logging
import threading
from typing import List, Optional

from ..commands.base import AbstractCommandInterpreter
from ..commands.interpreter import RuleBasedInterpreter
from ..models.actions import Action
from ..models.media import MediaCommand
from ..models.modes import RecordingType
from ..models.state import AppState
from ..models.transcript import TranscriptEntry, TranscriptOrigin
from ..storage.entity_store import EntityStore
from .dispatcher import CommandDispatcher, DispatchResult
from .publisher import SessionEventPublisher

logger = logging.getLogger(__name__)


class CommandService:
    """Service that owns the session state and applies voice commands to it.

    This service provides the core's external boundary:
    1. ``handle_utterance`` for each finalized utterance, in arrival order
    2. ``complete_media_command`` for the media collaborator's completion
    3. ``on_recording_state_change`` for recording state reports
    4. ``report_status`` for collaborator status messages

    Dispatch effects are persisted through the entity store and published
    on pub/sub topics after the state change has been applied.
    """

    def __init__(self,
                 state: Optional[AppState] = None,
                 interpreter: Optional[AbstractCommandInterpreter] = None,
                 dispatcher: Optional[CommandDispatcher] = None,
                 store: Optional[EntityStore] = None,
                 publisher: Optional[SessionEventPublisher] = None):
        """Initialize command service.

        Args:
            state: Session state; a fresh one is created when omitted
            interpreter: Command interpreter, rule-based by default
            dispatcher: Dispatcher applying actions to the state
            store: Persistence collaborator for saved entities
            publisher: Pub/sub publisher for dispatch effects
        """
        self.state = state or AppState()
        self.interpreter = interpreter or RuleBasedInterpreter()
        self.dispatcher = dispatcher or CommandDispatcher()
        self.store = store or EntityStore()
        self.publisher = publisher or SessionEventPublisher()

        self.lock = threading.RLock()
        logger.info(f"CommandService initialized with interpreter: {self.interpreter.name}")

    def handle_utterance(self, text: str) -> Optional[DispatchResult]:
        """Interpret and dispatch one finalized utterance.

        Args:
            text: Finalized utterance from the recognition session

        Returns:
            DispatchResult, or None when the utterance was blank
        """
        command = text.strip()
        if not command:
            logger.debug("Ignoring blank utterance")
            return None

        with self.lock:
            first_entry = len(self.state.transcript)
            self.state.append_transcript(command, TranscriptOrigin.USER)
            action = self.interpreter.interpret(command, self.state.capture_mode)
            result = self.dispatcher.dispatch(action, self.state)
            new_entries = self.state.transcript[first_entry:]
            self._persist(result)

        self._publish(result, new_entries)
        return result

    def handle_action(self, action: Action) -> DispatchResult:
        """Dispatch an action that did not come from speech (e.g. a toolbar button)."""
        with self.lock:
            first_entry = len(self.state.transcript)
            result = self.dispatcher.dispatch(action, self.state)
            new_entries = self.state.transcript[first_entry:]
            self._persist(result)

        self._publish(result, new_entries)
        return result

    def complete_media_command(self, command: Optional[MediaCommand] = None) -> bool:
        """Clear the pending media command once the collaborator has run it.

        Args:
            command: The command that finished; when given, the pending
                command is only cleared if it is still this one

        Returns:
            True if the pending command was cleared
        """
        with self.lock:
            pending = self.state.pending_media_command
            if pending is None:
                return False
            if command is not None and pending is not command:
                logger.debug(f"Completed {command.action} superseded by pending {pending.action}")
                return False
            self.state.pending_media_command = None
            logger.info(f"Media command completed: {pending.action}")
            return True

    def on_recording_state_change(self, recording: bool,
                                  recording_type: Optional[RecordingType] = None) -> None:
        """Record what the media collaborator is currently capturing."""
        with self.lock:
            self.state.active_recording = recording_type if recording else None
            logger.info(f"Recording state changed: recording={recording} type={recording_type}")

    def report_status(self, message: str) -> TranscriptEntry:
        """Append a collaborator status message (e.g. recognition errors)."""
        with self.lock:
            entry = self.state.set_status(message)
        self.publisher.publish_transcript_entry(entry)
        return entry

    def _persist(self, result: DispatchResult) -> None:
        for entity in result.created:
            self.store.append(entity)

    def _publish(self, result: DispatchResult, entries: List[TranscriptEntry]) -> None:
        for entry in entries:
            self.publisher.publish_transcript_entry(entry)
        if result.navigation is not None:
            self.publisher.publish_navigation(result.navigation)
        for entity in result.created:
            self.publisher.publish_entity_saved(entity)
        if result.media_command is not None:
            self.publisher.publish_media_command(result.media_command)

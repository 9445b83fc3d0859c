"""Simulated media collaborator that executes media commands without devices.

It subscribes to the media command topic, keeps track of what is being
recorded, reports recording state changes back to the command service and
acknowledges every command through the completion callback so the pending
command is cleared. Captured photos and finished recordings are kept as
``Recording`` entries, newest first.
"""

import logging
import threading
import time
from datetime import datetime
from typing import Callable, List, Optional

from pubsub import pub

from ..models.events import MEDIA_COMMAND_TOPIC
from ..models.media import (
    MediaCommand,
    Recording,
    TakePhotos,
    TakePhotoTimer,
    RecordVideo,
    RecordAudio,
    StopRecording,
    StopAudioRecording,
    SwitchCamera,
)
from ..models.modes import RecordingType

logger = logging.getLogger(__name__)

FACING_MODES = ("user", "environment")


class SimulatedMediaService:
    """Executes media commands against a simulated camera and microphone."""

    def __init__(self,
                 on_complete: Callable[[MediaCommand], object],
                 on_recording_state_change: Callable[[bool, Optional[RecordingType]], None],
                 topic: str = MEDIA_COMMAND_TOPIC,
                 use_timers: bool = True):
        """Initialize simulated media service.

        Args:
            on_complete: Called with each command once it has been executed
            on_recording_state_change: Called when recording starts or stops
            topic: Media command topic to subscribe to
            use_timers: Stop timed recordings automatically after their duration
        """
        self.on_complete = on_complete
        self.on_recording_state_change = on_recording_state_change
        self.topic = topic
        self.use_timers = use_timers

        self.recording_type: Optional[RecordingType] = None
        self.facing_mode = FACING_MODES[0]
        self.executed: List[MediaCommand] = []
        self.photos: List[Recording] = []
        self.recordings: List[Recording] = []

        self.lock = threading.RLock()
        self._stop_timer: Optional[threading.Timer] = None
        # Bumped on every recording start; a timer only stops its own recording
        self._generation = 0
        self._recording_started: Optional[float] = None

        pub.subscribe(self._on_media_command, topic)
        logger.info(f"SimulatedMediaService initialized - subscribed to {topic}")

    @property
    def is_recording(self) -> bool:
        return self.recording_type is not None

    @property
    def photos_taken(self) -> int:
        return len(self.photos)

    def _on_media_command(self, command: MediaCommand) -> None:
        """Handle a media command published by the command service."""
        logger.info(f"Executing media command: {command.action}")
        with self.lock:
            self.executed.append(command)
            if isinstance(command, TakePhotos):
                self._take_photos(command.count, command.delay)
            elif isinstance(command, TakePhotoTimer):
                self._take_photos(1, command.duration)
            elif isinstance(command, RecordVideo):
                self._start_recording(RecordingType.VIDEO, command.duration)
            elif isinstance(command, RecordAudio):
                self._start_recording(RecordingType.AUDIO, command.duration)
            elif isinstance(command, StopRecording):
                # Generic stop never ends an audio-only recording
                if self.recording_type == RecordingType.VIDEO:
                    self._stop_recording()
            elif isinstance(command, StopAudioRecording):
                if self.recording_type == RecordingType.AUDIO:
                    self._stop_recording()
            elif isinstance(command, SwitchCamera):
                self._switch_camera()
            else:
                logger.warning(f"Unsupported media command: {command}")

        self.on_complete(command)

    def _take_photos(self, count: int, delay: int) -> None:
        for _ in range(count):
            now = datetime.now()
            photo = Recording(
                name=f"photo-{now.strftime('%Y%m%d_%H%M%S')}_{len(self.photos) + 1:03d}.jpg",
                type=RecordingType.PHOTO,
                timestamp=now,
            )
            self.photos.insert(0, photo)
        logger.info(f"📸 Took {count} photo(s) after {delay}s (total {self.photos_taken})")

    def _start_recording(self, recording_type: RecordingType, duration: Optional[int]) -> None:
        if self.recording_type is not None:
            logger.warning(f"Recording already in progress ({self.recording_type.value}), restarting")
            self._stop_recording()

        self._generation += 1
        self.recording_type = recording_type
        self._recording_started = time.time()
        self.on_recording_state_change(True, recording_type)
        logger.info(f"🔴 Started {recording_type.value} recording"
                    + (f" for {duration}s" if duration else ""))

        if duration and self.use_timers:
            self._stop_timer = threading.Timer(duration, self._on_duration_elapsed,
                                               args=(self._generation,))
            self._stop_timer.daemon = True
            self._stop_timer.start()

    def _on_duration_elapsed(self, generation: int) -> None:
        with self.lock:
            if generation != self._generation or self.recording_type is None:
                logger.debug(f"Ignoring stale recording timer (generation {generation})")
                return
            logger.info("Recording duration elapsed")
            self._stop_recording()

    def _stop_recording(self) -> None:
        if self._stop_timer is not None:
            self._stop_timer.cancel()
            self._stop_timer = None

        elapsed = time.time() - self._recording_started if self._recording_started else 0.0
        now = datetime.now()
        recording = Recording(
            name=f"{self.recording_type.value}-{now.strftime('%Y%m%d_%H%M%S')}_{round(elapsed)}s.webm",
            type=self.recording_type,
            timestamp=now,
            duration=elapsed,
        )
        self.recordings.insert(0, recording)
        logger.info(f"⏹️  Stopped {self.recording_type.value} recording after {elapsed:.1f}s")

        self.recording_type = None
        self._recording_started = None
        self.on_recording_state_change(False, None)

    def _switch_camera(self) -> None:
        index = FACING_MODES.index(self.facing_mode)
        self.facing_mode = FACING_MODES[(index + 1) % len(FACING_MODES)]
        logger.info(f"Switched camera to {self.facing_mode}")

    def shutdown(self) -> None:
        """Stop any recording and unsubscribe from the media topic."""
        logger.info("Shutting down SimulatedMediaService...")
        with self.lock:
            if self.recording_type is not None:
                self._stop_recording()
        try:
            pub.unsubscribe(self._on_media_command, self.topic)
        except Exception as e:
            logger.warning(f"Error during unsubscribe: {e}")
        logger.info("SimulatedMediaService shutdown complete")

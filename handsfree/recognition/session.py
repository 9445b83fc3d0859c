"""Continuous recognition session feeding finalized utterances to a single consumer."""

import logging
import queue
import threading
import time
from typing import Callable, Iterable, List, Optional

from pubsub import pub

from ..models.events import SPEECH_FINAL_TOPIC, SPEECH_INTERIM_TOPIC, RecognitionError
from ..models.recognition import RecognitionResult

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_ERRORS = ("no-speech", "aborted")


class RecognitionSession:
    """Serializes delivery of finalized utterances to the command handler.

    Finalized results are queued in arrival order and drained by exactly one
    worker thread, so the handler never runs concurrently with itself.
    Interim results bypass the queue entirely: they only overwrite
    ``interim_transcript`` and are published for display.
    """

    def __init__(self,
                 handler: Callable[[str], object],
                 status_callback: Optional[Callable[[str], object]] = None,
                 final_topic: str = SPEECH_FINAL_TOPIC,
                 interim_topic: str = SPEECH_INTERIM_TOPIC,
                 ignored_errors: Iterable[str] = DEFAULT_IGNORED_ERRORS,
                 language: str = "en-US"):
        """Initialize recognition session.

        Args:
            handler: Called with each finalized utterance, one at a time
            status_callback: Receives user-visible status messages
            final_topic: Pub/sub topic announcing each finalized utterance
            interim_topic: Pub/sub topic for interim transcripts
            ignored_errors: Error codes that are not reported to the user
            language: Recognition language
        """
        self.handler = handler
        self.status_callback = status_callback
        self.final_topic = final_topic
        self.interim_topic = interim_topic
        self.ignored_errors = set(ignored_errors)
        self.language = language

        self.interim_transcript = ""
        self.errors: List[RecognitionError] = []
        self.is_listening = False
        self.utterances_processed = 0

        self.task_queue: "queue.Queue[Optional[str]]" = queue.Queue()
        # Guards is_listening together with queueing
        self.lock = threading.RLock()
        self.worker_thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start listening and the consumer thread."""
        with self.lock:
            if self.is_listening:
                logger.warning("Recognition session already listening")
                return
            self.is_listening = True

        self.worker_thread = threading.Thread(target=self._worker_loop, daemon=True)
        self.worker_thread.name = "recognition_consumer"
        self.worker_thread.start()
        logger.info(f"Recognition session started ({self.language})")

    def on_result(self, result: RecognitionResult) -> None:
        """Accept a recognition result from the speech collaborator."""
        if not result.is_final:
            self.on_interim(result.text)
            return

        text = result.text.strip()
        # A final result supersedes whatever interim text was showing
        self.on_interim("")
        if not text:
            return
        with self.lock:
            if not self.is_listening:
                logger.warning(f"Dropping utterance received while not listening: '{text}'")
                return

            logger.debug(f"Queueing finalized utterance: '{text}'")
            self.task_queue.put(text)

    def on_interim(self, text: str) -> None:
        """Update the display-only interim transcript."""
        self.interim_transcript = text
        pub.sendMessage(self.interim_topic, text=text)

    def on_error(self, code: str, message: Optional[str] = None) -> None:
        """Handle an error reported by the speech collaborator.

        Transient errors such as no-speech timeouts are logged only; all
        others become a status message.
        """
        error = RecognitionError(code=code, message=message)
        self.errors.append(error)
        if code in self.ignored_errors:
            logger.debug(f"Ignoring recognition error: {code}")
            return

        logger.warning(f"Speech recognition error: {code} {message or ''}".strip())
        if self.status_callback:
            self.status_callback(f"Speech recognition error: {code}")

    def _worker_loop(self) -> None:
        """Drain finalized utterances strictly in arrival order."""
        logger.debug("Recognition consumer thread starting")
        while True:
            text = self.task_queue.get()
            if text is None:
                logger.debug("Recognition consumer received sentinel, exiting.")
                self.task_queue.task_done()
                break

            try:
                pub.sendMessage(self.final_topic, text=text)
                self.handler(text)
                self.utterances_processed += 1
            except Exception as e:
                logger.error(f"Unhandled exception handling utterance '{text}': {e}", exc_info=True)
                if self.status_callback:
                    self.status_callback(f"Error handling command: {e}")
            finally:
                self.task_queue.task_done()
        logger.debug("Recognition consumer thread exiting")

    def wait_until_idle(self, timeout: float = 5.0) -> bool:
        """Wait until every queued utterance has been handled."""
        start_time = time.time()
        while time.time() - start_time < timeout:
            if self.task_queue.unfinished_tasks == 0:
                return True
            time.sleep(0.01)
        logger.warning(f"Timeout waiting for recognition queue: "
                       f"{self.task_queue.unfinished_tasks} utterances remain")
        return False

    def stop(self, timeout: float = 5.0) -> bool:
        """Stop listening, letting already queued utterances finish first.

        Args:
            timeout: Maximum time to wait for the queue to drain

        Returns:
            True if the queue drained and the consumer exited
        """
        # Nothing can be queued once the flag is cleared, so the sentinel is last
        with self.lock:
            if not self.is_listening:
                return True
            self.is_listening = False

        logger.info("Stopping recognition session...")
        drained = self.wait_until_idle(timeout)

        self.task_queue.put(None)
        if self.worker_thread:
            self.worker_thread.join(2.0)
            if self.worker_thread.is_alive():
                logger.warning("Recognition consumer thread did not terminate cleanly.")
                return False
        self.interim_transcript = ""

        logger.info(f"Recognition session stopped after {self.utterances_processed} utterances")
        return drained

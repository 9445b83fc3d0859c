"""Line-based input standing in for the speech recognizer in a terminal."""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

QUIT_WORDS = ("quit", "exit")


class LineInputHandler:
    """Reads typed utterances from stdin and hands them to a callback."""

    def __init__(self, callback: Callable[[str], bool], prompt: str = "🎤 > "):
        """Initialize line input handler.

        Args:
            callback: Function that takes an utterance and returns True to continue, False to quit
            prompt: Prompt printed before each line
        """
        self.callback = callback
        self.prompt = prompt
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self.finished = threading.Event()

    def start(self) -> None:
        """Start reading lines in a background thread."""
        if self.running:
            return

        self.running = True
        self.finished.clear()
        self.thread = threading.Thread(target=self._input_loop, daemon=True)
        self.thread.start()
        logger.info("Line input handler started")

    def stop(self) -> None:
        self.running = False
        if self.thread:
            self.thread.join(timeout=1.0)
        logger.info("Line input handler stopped")

    def _input_loop(self) -> None:
        try:
            while self.running:
                try:
                    line = input(self.prompt)
                except (EOFError, KeyboardInterrupt):
                    break

                if line.strip().lower() in QUIT_WORDS:
                    break
                if not self.callback(line):
                    logger.info("Callback returned False, breaking input loop")
                    break
        finally:
            self.running = False
            self.finished.set()
            logger.info("Line input loop ended")

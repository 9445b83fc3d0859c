"""Main application entry point for hands-free capture."""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from handsfree import __version__
from handsfree.commands.interpreter import RuleBasedInterpreter
from handsfree.commands.matcher import CommandMatcher
from handsfree.models.recognition import RecognitionResult
from handsfree.recognition.session import RecognitionSession
from handsfree.services.command_service import CommandService
from handsfree.services.media_service import SimulatedMediaService
from handsfree.storage.entity_store import EntityStore
from handsfree.ui.console_screen import ConsoleScreen
from handsfree.ui.line_input import LineInputHandler

from .config import HandsFreeConfig, DEFAULT_CONFIG_FILE

logger = logging.getLogger(__name__)


class Server:

    def __init__(self, config_path: str, log_level: Optional[str] = None):
        # Load configuration
        self.config = HandsFreeConfig(config_path)
        # Set up logging (override config with command line if specified)
        level = log_level or self.config.get('logging.level', 'INFO')
        setup_logging(self.config, level)

    def init(self):
        # Initialize services
        logger.info("Initializing services...")

        data_dir = self.config.get_data_directory() if self.config.get('storage.persist', True) else None
        self.store = EntityStore(data_dir, seed_contacts=self.config.get_seed_contacts())

        matcher = CommandMatcher(
            photo_timer_default=self.config.get('media.photo_timer_default_seconds', 3)
        )
        self.command_service = CommandService(
            interpreter=RuleBasedInterpreter(matcher),
            store=self.store,
        )
        self.media_service = SimulatedMediaService(
            on_complete=self.command_service.complete_media_command,
            on_recording_state_change=self.command_service.on_recording_state_change,
            use_timers=self.config.get('media.use_timers', True),
        )
        self.session = RecognitionSession(
            handler=self._on_utterance,
            status_callback=self.command_service.report_status,
            ignored_errors=self.config.get('recognition.ignored_errors', ["no-speech", "aborted"]),
            language=self.config.get('recognition.language', 'en-US'),
        )
        self.screen = ConsoleScreen(transcript_lines=self.config.get('ui.transcript_lines', 10))

    def _on_utterance(self, text: str) -> None:
        self.command_service.handle_utterance(text)
        self._refresh_screen()

    def _refresh_screen(self) -> None:
        self.screen.show_status(
            self.command_service.state,
            self.store.contacts,
            interim_transcript=self.session.interim_transcript,
            is_listening=self.session.is_listening,
            photos=list(self.media_service.photos),
            recordings=list(self.media_service.recordings),
        )

    def _on_line(self, line: str) -> bool:
        self.session.on_result(RecognitionResult(text=line))
        self.session.wait_until_idle()
        return True

    def run_script(self, lines: List[str]) -> None:
        """Feed utterances from a script, one per line, then stop."""
        try:
            self.session.start()
            for line in lines:
                if not line.strip() or line.lstrip().startswith('#'):
                    continue
                self.session.on_result(RecognitionResult(text=line))
            self.session.wait_until_idle(timeout=30.0)
        finally:
            self.cleanup()

    def run_interactive(self) -> None:
        input_handler = LineInputHandler(self._on_line)
        try:
            self.session.start()
            self._refresh_screen()
            input_handler.start()
            input_handler.finished.wait()
        finally:
            input_handler.stop()
            self.cleanup()

    def cleanup(self):
        self.session.stop()
        self.media_service.shutdown()
        counts = self.store.counts()
        logger.info(f"Session ended: {counts['contacts']} contacts, {counts['confirmations']} confirmations")


def setup_logging(config, level: str = "INFO") -> None:
    """Set up logging configuration from YAML config."""
    # Get log file path from config
    log_file_path = config.get('logging.file_path', 'data/logs/handsfree.log')
    console_output = config.get('logging.console_output', True)

    # Create logs directory if it doesn't exist
    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    # Set up handlers
    handlers = []

    # File handler - always write to file
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    # Console handler - only if enabled in config
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    # Log startup
    logger = logging.getLogger(__name__)
    logger.info("=" * 50)
    logger.info("Hands-free capture starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")
    logger.info("=" * 50)


def main() -> None:
    """Main entry point for the hands-free capture application."""
    parser = argparse.ArgumentParser(
        description="Hands-free capture - voice commands for contacts, confirmations and media",
        epilog="Type one utterance per line; say 'commands list' for help, 'quit' to exit"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration YAML file (default: {DEFAULT_CONFIG_FILE})"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: from config, else INFO)"
    )

    parser.add_argument(
        "--script",
        type=str,
        help="Feed utterances from a file (one per line) instead of reading the terminal"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"handsfree v{__version__}"
    )

    args = parser.parse_args()

    try:
        server = Server(args.config, args.log_level)
        server.init()
        if args.script:
            with open(args.script, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
            server.run_script(lines)
        else:
            server.run_interactive()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except Exception as e:
        print(f"❌ Error: {e}")
        logging.error(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Default rule-based command interpreter."""

import logging
from typing import Optional

from ..models.actions import Action
from ..models.modes import CaptureMode
from .base import AbstractCommandInterpreter
from .matcher import CommandMatcher
from .normalizer import normalize

logger = logging.getLogger(__name__)


class RuleBasedInterpreter(AbstractCommandInterpreter):
    """Normalizes an utterance and runs it through the ordered rule table."""

    name = "rules"

    def __init__(self, matcher: Optional[CommandMatcher] = None):
        self.matcher = matcher or CommandMatcher()

    def interpret(self, raw_text: str, capture_mode: CaptureMode) -> Action:
        normalized = normalize(raw_text)
        action = self.matcher.match(normalized, raw_text, capture_mode)
        logger.info(f"Interpreted '{raw_text}' ({capture_mode.value}) as {type(action).__name__}")
        return action

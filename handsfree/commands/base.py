"""Abstract base class for command interpreters."""

from abc import ABC, abstractmethod

from ..models.actions import Action
from ..models.modes import CaptureMode


class AbstractCommandInterpreter(ABC):
    """Turns a finalized utterance into an action.

    Implementations must be deterministic for a given utterance and capture
    mode and must never mutate application state.
    """

    name = "abstract"

    @abstractmethod
    def interpret(self, raw_text: str, capture_mode: CaptureMode) -> Action:
        """Interpret an utterance.

        Args:
            raw_text: Finalized utterance in its original casing
            capture_mode: Current capture mode

        Returns:
            The interpreted action; ``Unknown`` when nothing matched
        """
        pass

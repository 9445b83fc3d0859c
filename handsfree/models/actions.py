"""Actions produced by command interpreters.

An action is the interpreted intent of one finalized utterance plus any
parameters extracted from it. Interpreters never mutate state; the
dispatcher turns actions into state changes and effects.
"""

from dataclasses import dataclass

from .media import MediaCommand
from .modes import UIMode


@dataclass
class Action:
    """Base class for interpreted voice commands."""


@dataclass
class ShowCommands(Action):
    pass


@dataclass
class HideCommands(Action):
    pass


@dataclass
class MediaAction(Action):
    """Any command destined for the media collaborator."""
    command: MediaCommand


@dataclass
class SetContactField(Action):
    field: str
    value: str


@dataclass
class SetConfirmationField(Action):
    field: str
    value: str


@dataclass
class SaveContact(Action):
    pass


@dataclass
class CancelContact(Action):
    pass


@dataclass
class SaveConfirmation(Action):
    pass


@dataclass
class CancelConfirmation(Action):
    pass


@dataclass
class Navigate(Action):
    """Explicit navigation to another panel."""
    target: UIMode


@dataclass
class CaptureContact(Action):
    pass


@dataclass
class CaptureConfirmation(Action):
    pass


@dataclass
class Unknown(Action):
    """No rule matched; reported, never fatal."""
    raw_text: str

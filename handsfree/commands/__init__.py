"""Voice command interpretation: normalization, matching, interpreters."""

from .base import AbstractCommandInterpreter
from .normalizer import normalize, words_to_numbers
from .matcher import CommandMatcher, parse_photo_params, parse_duration
from .interpreter import RuleBasedInterpreter
from .reference import COMMAND_REFERENCE, CommandHelp, commands_by_section

__all__ = [
    "AbstractCommandInterpreter",
    "normalize",
    "words_to_numbers",
    "CommandMatcher",
    "parse_photo_params",
    "parse_duration",
    "RuleBasedInterpreter",
    "COMMAND_REFERENCE",
    "CommandHelp",
    "commands_by_section",
]

"""Continuous speech recognition session boundary."""

from .session import RecognitionSession

__all__ = [
    "RecognitionSession",
]

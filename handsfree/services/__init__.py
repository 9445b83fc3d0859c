"""Services layer for hands-free command handling."""

from .dispatcher import CommandDispatcher, DispatchResult
from .command_service import CommandService
from .publisher import SessionEventPublisher
from .media_service import SimulatedMediaService

__all__ = [
    "CommandDispatcher",
    "DispatchResult",
    "CommandService",
    "SessionEventPublisher",
    "SimulatedMediaService",
]

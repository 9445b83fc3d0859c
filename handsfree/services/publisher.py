"""Session event publisher for pub/sub event publishing."""

import logging
from typing import Union

from pubsub import pub

from ..models.entities import Contact, Confirmation
from ..models.events import (
    MEDIA_COMMAND_TOPIC,
    TRANSCRIPT_TOPIC,
    NAVIGATION_TOPIC,
    ENTITY_SAVED_TOPIC,
    NavigationChange,
)
from ..models.media import MediaCommand
from ..models.transcript import TranscriptEntry

logger = logging.getLogger(__name__)


class SessionEventPublisher:
    """Publishes dispatch effects using pubsub.pub for pub/sub architecture."""

    def __init__(self,
                 media_topic: str = MEDIA_COMMAND_TOPIC,
                 transcript_topic: str = TRANSCRIPT_TOPIC,
                 navigation_topic: str = NAVIGATION_TOPIC,
                 entity_topic: str = ENTITY_SAVED_TOPIC):
        """Initialize session event publisher.

        Args:
            media_topic: Topic for media commands
            transcript_topic: Topic for transcript entries
            navigation_topic: Topic for panel changes
            entity_topic: Topic for saved contacts and confirmations
        """
        self.media_topic = media_topic
        self.transcript_topic = transcript_topic
        self.navigation_topic = navigation_topic
        self.entity_topic = entity_topic
        logger.info(f"SessionEventPublisher initialized with media topic: {media_topic}")

    def publish_media_command(self, command: MediaCommand) -> None:
        pub.sendMessage(self.media_topic, command=command)
        logger.debug(f"Published media command: {command.action}")

    def publish_transcript_entry(self, entry: TranscriptEntry) -> None:
        pub.sendMessage(self.transcript_topic, entry=entry)
        logger.debug(f"Published transcript entry {entry.id} ({entry.origin.value})")

    def publish_navigation(self, change: NavigationChange) -> None:
        pub.sendMessage(self.navigation_topic, change=change)
        logger.debug(f"Published navigation: {change.previous.value} -> {change.current.value}")

    def publish_entity_saved(self, entity: Union[Contact, Confirmation]) -> None:
        pub.sendMessage(self.entity_topic, entity=entity)
        logger.debug(f"Published saved {type(entity).__name__}: {entity.id}")

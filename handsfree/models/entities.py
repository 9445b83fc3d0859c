"""Draft and persisted contact/confirmation models."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Optional


class ContactStatus(Enum):
    """Presence shown next to a contact."""
    ONLINE = "online"
    OFFLINE = "offline"


CONTACT_FIELDS = ("name", "phone", "email", "details")
CONFIRMATION_FIELDS = ("type", "name", "number")


@dataclass
class DraftContact:
    """In-progress contact awaiting dictation."""
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    details: Optional[str] = None

    def set_field(self, field_name: str, value: str) -> None:
        if field_name not in CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field: {field_name}")
        setattr(self, field_name, value)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class DraftConfirmation:
    """In-progress confirmation code awaiting dictation."""
    type: Optional[str] = None
    name: Optional[str] = None
    number: Optional[str] = None

    def set_field(self, field_name: str, value: str) -> None:
        if field_name not in CONFIRMATION_FIELDS:
            raise ValueError(f"Unknown confirmation field: {field_name}")
        setattr(self, field_name, value)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class Contact:
    """A saved contact."""
    id: str
    name: str
    status: ContactStatus = ContactStatus.OFFLINE
    phone: Optional[str] = None
    email: Optional[str] = None
    details: Optional[str] = None


@dataclass
class Confirmation:
    """A saved confirmation code (booking, order, flight...)."""
    id: str
    number: str
    type: Optional[str] = None
    name: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

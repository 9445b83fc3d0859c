"""Append-only storage for saved contacts and confirmations."""

import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..models.entities import Contact, Confirmation, ContactStatus

logger = logging.getLogger(__name__)

CONTACTS_FILE = "contacts.json"
CONFIRMATIONS_FILE = "confirmations.json"


def contact_from_dict(data: Dict[str, Any]) -> Contact:
    """Build a Contact from a stored or seeded dictionary.

    Seeded contacts keep their status; a missing status means offline.
    """
    return Contact(
        id=str(data["id"]),
        name=data["name"],
        status=ContactStatus(data.get("status", ContactStatus.OFFLINE.value)),
        phone=data.get("phone"),
        email=data.get("email"),
        details=data.get("details"),
    )


def confirmation_from_dict(data: Dict[str, Any]) -> Confirmation:
    return Confirmation(
        id=str(data["id"]),
        number=data["number"],
        type=data.get("type"),
        name=data.get("name"),
        timestamp=datetime.fromisoformat(data["timestamp"]),
    )


class EntityStore:
    """Holds saved contacts and confirmations, optionally mirrored to JSON files.

    The store only ever appends. When a data directory is given, every
    append rewrites the matching JSON file so a later session can load it.
    """

    def __init__(self, data_dir: Optional[str] = None,
                 seed_contacts: Iterable[Dict[str, Any]] = ()):
        """Initialize entity store.

        Args:
            data_dir: Directory for JSON files; None keeps everything in memory
            seed_contacts: Contacts to start with when nothing is stored yet
        """
        self.data_dir = Path(data_dir) if data_dir else None
        self._contacts: List[Contact] = []
        self._confirmations: List[Confirmation] = []

        if self.data_dir is not None:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self._load()

        if not self._contacts:
            for index, data in enumerate(seed_contacts, 1):
                data = dict(data)
                data.setdefault("id", f"seed_{index}")
                self._contacts.append(contact_from_dict(data))

        logger.info(f"EntityStore initialized with data_dir: {self.data_dir} "
                    f"({len(self._contacts)} contacts, {len(self._confirmations)} confirmations)")

    @property
    def contacts(self) -> List[Contact]:
        return list(self._contacts)

    @property
    def confirmations(self) -> List[Confirmation]:
        return list(self._confirmations)

    def counts(self) -> Dict[str, int]:
        return {
            "contacts": len(self._contacts),
            "confirmations": len(self._confirmations),
        }

    def append(self, entity: Union[Contact, Confirmation]) -> None:
        """Append a saved contact or confirmation."""
        if isinstance(entity, Contact):
            self.append_contact(entity)
        elif isinstance(entity, Confirmation):
            self.append_confirmation(entity)
        else:
            raise TypeError(f"Cannot store {type(entity).__name__}")

    def append_contact(self, contact: Contact) -> None:
        self._contacts.append(contact)
        logger.info(f"Stored contact {contact.id}: {contact.name}")
        self._write(CONTACTS_FILE, [self._contact_to_dict(c) for c in self._contacts])

    def append_confirmation(self, confirmation: Confirmation) -> None:
        self._confirmations.append(confirmation)
        logger.info(f"Stored confirmation {confirmation.id}: {confirmation.number}")
        self._write(CONFIRMATIONS_FILE,
                    [self._confirmation_to_dict(c) for c in self._confirmations])

    def _contact_to_dict(self, contact: Contact) -> Dict[str, Any]:
        data = asdict(contact)
        data["status"] = contact.status.value
        return data

    def _confirmation_to_dict(self, confirmation: Confirmation) -> Dict[str, Any]:
        data = asdict(confirmation)
        data["timestamp"] = confirmation.timestamp.isoformat()
        return data

    def _write(self, filename: str, records: List[Dict[str, Any]]) -> None:
        if self.data_dir is None:
            return
        path = self.data_dir / filename
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            logger.debug(f"Wrote {len(records)} records to {path}")
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            raise

    def _load(self) -> None:
        contacts_path = self.data_dir / CONTACTS_FILE
        confirmations_path = self.data_dir / CONFIRMATIONS_FILE

        if contacts_path.exists():
            with open(contacts_path, 'r', encoding='utf-8') as f:
                self._contacts = [contact_from_dict(item) for item in json.load(f)]
            logger.info(f"Loaded {len(self._contacts)} contacts from {contacts_path}")

        if confirmations_path.exists():
            with open(confirmations_path, 'r', encoding='utf-8') as f:
                self._confirmations = [confirmation_from_dict(item) for item in json.load(f)]
            logger.info(f"Loaded {len(self._confirmations)} confirmations from {confirmations_path}")

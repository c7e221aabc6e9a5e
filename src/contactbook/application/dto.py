"""Result types returned by ContactService."""

from dataclasses import dataclass


# --- success results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was validated and stored under a new id."""

    contact_id: str


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: str


@dataclass(frozen=True)
class ContactUpdated:
    """Update applied. changed is empty when no field was provided (nothing stored)."""

    contact_id: str
    changed: tuple[str, ...] = ()


# --- failure results ---


@dataclass(frozen=True)
class Invalid:
    """A value failed validation. field names the offending input."""

    field: str
    reason: str


@dataclass(frozen=True)
class Duplicate:
    """A contact with this id already exists."""

    contact_id: str


@dataclass(frozen=True)
class NotFound:
    """No contact with this id (delete/update only; reads return None)."""

    contact_id: str


@dataclass(frozen=True)
class CapacityExceeded:
    """The store is full; delete something before adding."""

    limit: int


AddResult = ContactAdded | Invalid | Duplicate | CapacityExceeded
DeleteResult = ContactDeleted | Invalid | NotFound
UpdateResult = ContactUpdated | Invalid | NotFound | CapacityExceeded

FAILURES = (Invalid, Duplicate, NotFound, CapacityExceeded)

"""Application ports (interfaces). Implemented by infrastructure adapters."""

from dataclasses import dataclass, field
from typing import Any, Protocol

from contactbook.domain import Contact

AUDIT_CREATED = "created"
AUDIT_UPDATED = "updated"
AUDIT_DELETED = "deleted"
AUDIT_CLEARED = "cleared"
AUDIT_REJECTED = "rejected"


@dataclass(frozen=True)
class AuditEvent:
    """One audit record. detail holds action-specific data (field, reason, count)."""

    action: str
    contact_id: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)


class AuditSink(Protocol):
    """Receives audit events. Must not be relied on for control flow."""

    def record(self, event: AuditEvent) -> None:
        ...


class ContactRepository(Protocol):
    """Keyed store of contacts. Each method is atomic on its own; sequences of calls are not."""

    def save(self, contact: Contact) -> None:
        """Insert or replace by contact_id. Raises CapacityExceededError for a new id when full."""
        ...

    def find_by_id(self, contact_id: str | None) -> Contact | None:
        """Return the stored contact, or None (also for a None/empty id)."""
        ...

    def exists_by_id(self, contact_id: str | None) -> bool:
        ...

    def delete_by_id(self, contact_id: str | None) -> bool:
        """Remove the contact. Returns True only if something was removed."""
        ...

    def find_all(self) -> list[Contact]:
        """Snapshot of all contacts, in no particular order."""
        ...

    def count(self) -> int:
        ...

    def clear(self) -> None:
        ...

"""In-memory implementation of ContactRepository (no DB), safe for concurrent use."""

import logging
import threading

from contactbook.application.audit import NullAuditSink, emit
from contactbook.application.ports import (
    AUDIT_CLEARED,
    AUDIT_CREATED,
    AUDIT_DELETED,
    AUDIT_UPDATED,
    AuditEvent,
    AuditSink,
)
from contactbook.domain import CapacityExceededError, Contact, ContactValidationError

logger = logging.getLogger(__name__)

MAX_CAPACITY = 10000


class InMemoryContactRepository:
    """Stores contacts in a dict keyed by contact_id.
    One lock guards the dict; every method holds it for its whole body, so
    the capacity check and insert in save cannot be split by another thread.
    Returned contacts are the stored objects, not copies.
    """

    def __init__(
        self,
        max_capacity: int = MAX_CAPACITY,
        *,
        audit: AuditSink | None = None,
    ) -> None:
        if max_capacity < 1:
            raise ValueError("max_capacity must be at least 1.")
        self._max_capacity = max_capacity
        self._audit = audit if audit is not None else NullAuditSink()
        self._by_id: dict[str, Contact] = {}
        self._lock = threading.Lock()

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    def save(self, contact: Contact) -> None:
        if contact is None:
            raise ContactValidationError("contact", "Contact cannot be None.")
        contact_id = contact.contact_id
        with self._lock:
            existed = contact_id in self._by_id
            if not existed and len(self._by_id) >= self._max_capacity:
                logger.warning(
                    "Contact limit (%d) reached, save rejected for %s",
                    self._max_capacity,
                    contact_id,
                )
                raise CapacityExceededError(self._max_capacity)
            self._by_id[contact_id] = contact
        action = AUDIT_UPDATED if existed else AUDIT_CREATED
        emit(
            self._audit,
            AuditEvent(
                action,
                contact_id,
                {"name": f"{contact.first_name} {contact.last_name}"},
            ),
        )

    def find_by_id(self, contact_id: str | None) -> Contact | None:
        if not contact_id:
            return None
        with self._lock:
            return self._by_id.get(contact_id)

    def exists_by_id(self, contact_id: str | None) -> bool:
        if contact_id is None:
            return False
        with self._lock:
            return contact_id in self._by_id

    def delete_by_id(self, contact_id: str | None) -> bool:
        if contact_id is None:
            return False
        with self._lock:
            removed = self._by_id.pop(contact_id, None)
        if removed is None:
            logger.debug("Delete attempted for unknown id %s", contact_id)
            return False
        emit(
            self._audit,
            AuditEvent(
                AUDIT_DELETED,
                contact_id,
                {"name": f"{removed.first_name} {removed.last_name}"},
            ),
        )
        return True

    def find_all(self) -> list[Contact]:
        with self._lock:
            return list(self._by_id.values())

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)

    def clear(self) -> None:
        with self._lock:
            removed = len(self._by_id)
            self._by_id.clear()
        emit(self._audit, AuditEvent(AUDIT_CLEARED, None, {"count": removed}))

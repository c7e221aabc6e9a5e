"""Application layer: use cases, validation policy, ports, and results. Depends only on domain."""

from contactbook.application.audit import NullAuditSink, emit
from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    FAILURES,
    CapacityExceeded,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    Duplicate,
    Invalid,
    NotFound,
)
from contactbook.application.ports import (
    AUDIT_CLEARED,
    AUDIT_CREATED,
    AUDIT_DELETED,
    AUDIT_REJECTED,
    AUDIT_UPDATED,
    AuditEvent,
    AuditSink,
    ContactRepository,
)
from contactbook.application.validator import ContactValidator

__all__ = [
    "AUDIT_CLEARED",
    "AUDIT_CREATED",
    "AUDIT_DELETED",
    "AUDIT_REJECTED",
    "AUDIT_UPDATED",
    "AuditEvent",
    "AuditSink",
    "CapacityExceeded",
    "ContactAdded",
    "ContactDeleted",
    "ContactRepository",
    "ContactService",
    "ContactUpdated",
    "ContactValidator",
    "Duplicate",
    "FAILURES",
    "Invalid",
    "NotFound",
    "NullAuditSink",
    "emit",
]

"""
Contactbook core: clean-architecture layout.

- domain: Contact entity, ContactDraft, errors. No outer dependencies.
- application: use cases (ContactService), ContactValidator, ports, results.
- infrastructure: adapters (InMemoryContactRepository, audit sinks, phone display).
"""

from contactbook.application import (
    CapacityExceeded,
    ContactAdded,
    ContactDeleted,
    ContactRepository,
    ContactService,
    ContactUpdated,
    ContactValidator,
    Duplicate,
    Invalid,
    NotFound,
)
from contactbook.domain import (
    CapacityExceededError,
    Contact,
    ContactDraft,
    ContactValidationError,
    build_contact,
)
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "CapacityExceeded",
    "CapacityExceededError",
    "Contact",
    "ContactAdded",
    "ContactDeleted",
    "ContactDraft",
    "ContactRepository",
    "ContactService",
    "ContactUpdated",
    "ContactValidationError",
    "ContactValidator",
    "Duplicate",
    "InMemoryContactRepository",
    "Invalid",
    "NotFound",
    "build_contact",
]

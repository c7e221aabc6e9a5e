"""Domain layer: entities and errors. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, ContactDraft, build_contact
from contactbook.domain.errors import CapacityExceededError, ContactValidationError

__all__ = [
    "CapacityExceededError",
    "Contact",
    "ContactDraft",
    "ContactValidationError",
    "build_contact",
]

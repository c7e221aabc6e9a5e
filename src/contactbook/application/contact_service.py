"""Contact add, delete, update, get and list on top of a ContactRepository."""

import logging
import threading
from contextlib import nullcontext
from dataclasses import replace

from contactbook.application.audit import NullAuditSink, emit
from contactbook.application.dto import (
    AddResult,
    CapacityExceeded,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DeleteResult,
    Duplicate,
    Invalid,
    NotFound,
    UpdateResult,
)
from contactbook.application.ports import (
    AUDIT_REJECTED,
    AuditEvent,
    AuditSink,
    ContactRepository,
)
from contactbook.application.validator import ContactValidator
from contactbook.domain import (
    CapacityExceededError,
    Contact,
    ContactDraft,
    ContactValidationError,
    build_contact,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("first_name", "last_name", "phone", "address")


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ContactService:
    """
    Business rules for the contact book.

    Every value is validated before it reaches the repository. Domain
    failures come back as result values (Invalid, Duplicate, NotFound,
    CapacityExceeded); reads return None for a missing contact.

    Add and update are each built from several repository calls (check,
    then act). By default those sequences are not atomic: another thread
    may insert or delete the same id in between. Pass serialize_writes=True
    to run every write under one service-wide lock.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        validator: ContactValidator | None = None,
        audit: AuditSink | None = None,
        serialize_writes: bool = False,
    ) -> None:
        if repository is None:
            raise ValueError("ContactService requires a repository.")
        self._repo = repository
        self._validator = validator if validator is not None else ContactValidator()
        self._audit = audit if audit is not None else NullAuditSink()
        self._write_lock = threading.RLock() if serialize_writes else None

    def _writing(self):
        return self._write_lock if self._write_lock is not None else nullcontext()

    def _reject(self, operation: str, contact_id: str | None, result):
        detail = {"operation": operation, "result": type(result).__name__}
        if isinstance(result, Invalid):
            detail["field"] = result.field
            detail["reason"] = result.reason
        emit(self._audit, AuditEvent(AUDIT_REJECTED, contact_id, detail))
        return result

    def add_contact(self, contact: Contact | None) -> AddResult:
        """Validate and store a new contact. Validation runs before the duplicate check."""
        if contact is None:
            return self._reject(
                "add", None, Invalid(field="contact", reason="Contact cannot be None.")
            )
        contact_id = contact.contact_id
        try:
            self._validator.validate(contact)
        except ContactValidationError as e:
            logger.debug("Add rejected for %s: %s", contact_id, e.message)
            return self._reject("add", contact_id, Invalid(field=e.field, reason=e.message))

        with self._writing():
            if self._repo.exists_by_id(contact_id):
                return self._reject("add", contact_id, Duplicate(contact_id=contact_id))
            try:
                self._repo.save(contact)
            except CapacityExceededError as e:
                return self._reject("add", contact_id, CapacityExceeded(limit=e.limit))

        logger.info("Contact added: %s", contact_id)
        return ContactAdded(contact_id=contact_id)

    def delete_contact(self, contact_id: str | None) -> DeleteResult:
        if _is_blank(contact_id) or not isinstance(contact_id, str):
            return self._reject(
                "delete",
                None,
                Invalid(field="contact_id", reason="contact_id cannot be empty."),
            )
        with self._writing():
            if not self._repo.delete_by_id(contact_id):
                return self._reject("delete", contact_id, NotFound(contact_id=contact_id))
        logger.info("Contact deleted: %s", contact_id)
        return ContactDeleted(contact_id=contact_id)

    def update_contact(
        self,
        contact_id: str | None,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> UpdateResult:
        """
        Change the given fields of an existing contact.

        None or blank arguments mean "leave as is". Each provided value is
        checked on its own; if any fails, nothing is changed. The record is
        saved only when at least one field was provided.
        """
        if _is_blank(contact_id) or not isinstance(contact_id, str):
            return self._reject(
                "update",
                None,
                Invalid(field="contact_id", reason="contact_id cannot be empty."),
            )
        values = dict(zip(UPDATABLE_FIELDS, (first_name, last_name, phone, address)))
        updates = {name: value for name, value in values.items() if not _is_blank(value)}

        with self._writing():
            contact = self._repo.find_by_id(contact_id)
            if contact is None:
                return self._reject("update", contact_id, NotFound(contact_id=contact_id))
            if not updates:
                logger.debug("No fields to update for contact %s", contact_id)
                return ContactUpdated(contact_id=contact_id)

            # Policy then structure, one field at a time in field order, on a
            # draft; the live record is untouched until every field passes.
            draft = ContactDraft.from_contact(contact)
            try:
                for name, value in updates.items():
                    self._validate_field(name, value)
                    draft = replace(draft, **{name: value})
                    build_contact(draft)
            except ContactValidationError as e:
                return self._reject(
                    "update", contact_id, Invalid(field=e.field, reason=e.message)
                )

            # In-place on the stored object; readers may see fields change one by one.
            for name, value in updates.items():
                setattr(contact, name, value)
            try:
                self._repo.save(contact)
            except CapacityExceededError as e:
                # The contact was deleted and the store refilled since find_by_id.
                return self._reject("update", contact_id, CapacityExceeded(limit=e.limit))

        logger.info("Contact updated: %s (%s)", contact_id, ", ".join(updates))
        return ContactUpdated(contact_id=contact_id, changed=tuple(updates))

    def _validate_field(self, name: str, value: str) -> None:
        if name == "phone":
            self._validator.validate_phone(value)
        elif name == "address":
            self._validator.validate_address(value)
        else:
            self._validator.validate_name(value, name)

    def get_contact(self, contact_id: str | None) -> Contact | None:
        """Return the contact with this id, or None if the id is blank or unknown."""
        if _is_blank(contact_id) or not isinstance(contact_id, str):
            return None
        return self._repo.find_by_id(contact_id)

    def get_all_contacts(self) -> list[Contact]:
        contacts = self._repo.find_all()
        logger.debug("Retrieved %d contacts", len(contacts))
        return contacts

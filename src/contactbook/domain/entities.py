"""Domain entities: Contact and ContactDraft."""

import re
from dataclasses import dataclass

from contactbook.domain.errors import ContactValidationError

CONTACT_ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 10
PHONE_LENGTH = 10
ADDRESS_MAX_LENGTH = 30

_DIGITS = re.compile(r"[0-9]+")


def _check_text(value, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise ContactValidationError(field, f"{field} must be a string.")
    if not 1 <= len(value) <= max_length:
        raise ContactValidationError(
            field, f"{field} must be 1 to {max_length} characters."
        )
    return value


def _check_phone(value) -> str:
    if not isinstance(value, str):
        raise ContactValidationError("phone", "phone must be a string.")
    if len(value) != PHONE_LENGTH or not _DIGITS.fullmatch(value):
        raise ContactValidationError(
            "phone", f"phone must be exactly {PHONE_LENGTH} digits."
        )
    return value


class Contact:
    """
    A person in the contact book, identified by contact_id.
    Every field is checked on construction and on each assignment, so a
    Contact is never observed holding an invalid value. Only structural
    rules live here; content policy belongs to ContactValidator.
    """

    def __init__(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> None:
        self._contact_id = _check_text(contact_id, "contact_id", CONTACT_ID_MAX_LENGTH)
        self._first_name = _check_text(first_name, "first_name", NAME_MAX_LENGTH)
        self._last_name = _check_text(last_name, "last_name", NAME_MAX_LENGTH)
        self._phone = _check_phone(phone)
        self._address = _check_text(address, "address", ADDRESS_MAX_LENGTH)

    @property
    def contact_id(self) -> str:
        return self._contact_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _check_text(value, "first_name", NAME_MAX_LENGTH)

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _check_text(value, "last_name", NAME_MAX_LENGTH)

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = _check_phone(value)

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = _check_text(value, "address", ADDRESS_MAX_LENGTH)

    def _fields(self) -> tuple[str, str, str, str, str]:
        return (
            self._contact_id,
            self._first_name,
            self._last_name,
            self._phone,
            self._address,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contact):
            return NotImplemented
        return self._fields() == other._fields()

    # Mutable, so not usable as a dict key or set member.
    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Contact(contact_id={self._contact_id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, phone={self._phone!r}, address={self._address!r})"
        )


@dataclass(frozen=True)
class ContactDraft:
    """
    Field values for a Contact that is not built yet.
    Carries no rules of its own; build_contact hands everything to Contact.
    """

    contact_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactDraft":
        """Draft holding a copy of an existing contact's values."""
        return cls(
            contact_id=contact.contact_id,
            first_name=contact.first_name,
            last_name=contact.last_name,
            phone=contact.phone,
            address=contact.address,
        )


def build_contact(draft: ContactDraft) -> Contact:
    """Build a Contact from a draft. Raises ContactValidationError on any bad field."""
    return Contact(
        contact_id=draft.contact_id,
        first_name=draft.first_name,
        last_name=draft.last_name,
        phone=draft.phone,
        address=draft.address,
    )

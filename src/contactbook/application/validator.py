"""
Content policy for contact fields: rejects script and SQL injection payloads,
control characters, and non-name characters in names.

Separate from the checks in Contact: those keep the entity structurally
sound (length, digits), these decide whether a value is safe to store and
display again.
"""

import logging
import re

from contactbook.domain import Contact, ContactValidationError

# Rejections are logged by field and rule only; the value itself may be hostile.
security_logger = logging.getLogger("contactbook.security")

XSS_PATTERN = re.compile(
    r"<script|javascript:|\bon[a-z]+\s*=|<iframe|<object|<embed",
    re.IGNORECASE,
)

# A lone apostrophe is fine so names like O'Brien pass.
SQL_INJECTION_PATTERN = re.compile(
    r";\s*--|--\s*$|'\s*(or|and)\s+'|\"\s*(or|and)\s*\"?\d|union\s+select|drop\s+table",
    re.IGNORECASE,
)

# Control characters except tab, newline, carriage return.
CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

VALID_NAME_PATTERN = re.compile(r"[A-Za-z\s\-']+", re.ASCII)

DIGITS_PATTERN = re.compile(r"[0-9]+")


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


class ContactValidator:
    """Stateless; one instance can be shared across threads and services."""

    def validate(self, contact: Contact | None) -> None:
        """Check every field of contact. Raises on the first violation."""
        if contact is None:
            raise ContactValidationError("contact", "Contact cannot be None.")
        self.validate_contact_id(contact.contact_id)
        self.validate_name(contact.first_name, "first_name")
        self.validate_name(contact.last_name, "last_name")
        self.validate_phone(contact.phone)
        self.validate_address(contact.address)

    def validate_contact_id(self, value: str | None) -> None:
        if _is_blank(value):
            raise ContactValidationError("contact_id", "contact_id cannot be empty.")
        self._check_unsafe_content(value, "contact_id")
        self._check_control_characters(value, "contact_id")

    def validate_name(self, value: str | None, field_name: str) -> None:
        if _is_blank(value):
            raise ContactValidationError(field_name, f"{field_name} cannot be empty.")
        self._check_unsafe_content(value, field_name)
        self._check_control_characters(value, field_name)
        if not VALID_NAME_PATTERN.fullmatch(value):
            security_logger.warning("Invalid characters in %s, input rejected", field_name)
            raise ContactValidationError(
                field_name,
                f"{field_name} may only contain letters, spaces, hyphens and apostrophes.",
            )

    def validate_phone(self, value: str | None) -> None:
        if _is_blank(value):
            raise ContactValidationError("phone", "phone cannot be empty.")
        if not DIGITS_PATTERN.fullmatch(value):
            security_logger.warning("Non-digit phone number rejected")
            raise ContactValidationError("phone", "phone must contain only digits.")

    def validate_address(self, value: str | None) -> None:
        if _is_blank(value):
            raise ContactValidationError("address", "address cannot be empty.")
        self._check_unsafe_content(value, "address")
        self._check_control_characters(value, "address")

    def _check_unsafe_content(self, value: str, field_name: str) -> None:
        if XSS_PATTERN.search(value):
            security_logger.warning("XSS pattern in %s, input rejected", field_name)
            raise ContactValidationError(
                field_name, f"{field_name} contains potentially unsafe content."
            )
        if SQL_INJECTION_PATTERN.search(value):
            security_logger.warning("SQL injection pattern in %s, input rejected", field_name)
            raise ContactValidationError(
                field_name, f"{field_name} contains potentially unsafe content."
            )

    def _check_control_characters(self, value: str, field_name: str) -> None:
        if CONTROL_CHAR_PATTERN.search(value):
            security_logger.warning("Control characters in %s, input rejected", field_name)
            raise ContactValidationError(
                field_name, f"{field_name} contains control characters."
            )

"""Phone number formatting for display. Stored numbers stay as 10 raw digits."""

import phonenumbers
from phonenumbers import PhoneNumber, PhoneNumberFormat


def parse_phone(digits: str, region: str) -> PhoneNumber | None:
    """Read stored digits as a number dialled in region; None unless valid there."""
    if not digits:
        return None
    try:
        number = phonenumbers.parse(digits, region)
    except phonenumbers.NumberParseException:
        return None
    return number if phonenumbers.is_valid_number(number) else None


def format_phone(
    digits: str, region: str = "US", style: int = PhoneNumberFormat.NATIONAL
) -> str:
    """Display form of stored digits, e.g. "2025551234" -> "(202) 555-1234" for US.
    Digits that are not a valid number in region are shown as they are.
    """
    number = parse_phone(digits, region)
    if number is None:
        return digits
    return phonenumbers.format_number(number, style)

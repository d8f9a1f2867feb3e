#!/usr/bin/env python3
"""
Checksum and format validators for stringkit.

Contains:
- Luhn (mod 10) check for payment-card style numbers
- Iranian national code (کد ملی) checksum
- Iranian mobile number format with operator prefix allow-list
- General purpose string validators (email, phone, password, numbers, dates)

Every validator returns a plain bool. Malformed input fails validation; it
never raises.
"""

from datetime import datetime
from typing import Iterable, Optional

from .logging_config import get_logger
from .tables import (
    ASCII_DIGITS_RE,
    DECIMAL_NUMBER_RE,
    DEFAULT_OPERATOR_PREFIXES,
    EMAIL_ADDRESS_RE,
    PHONE_RE,
    SIGNED_INTEGER_RE,
)

# Initialize logger for this module
logger = get_logger(__name__)


def _is_ascii_digits(text: Optional[str]) -> bool:
    # str.isdigit() also accepts Persian and other Unicode digits
    return bool(text) and ASCII_DIGITS_RE.fullmatch(text) is not None


def luhn_check(digits: Optional[str]) -> bool:
    """
    Validate a digit string with the Luhn checksum.

    Digits are processed right to left; every second digit is doubled and
    reduced by 9 when it exceeds 9. The number is valid when the total is a
    multiple of 10. Separators must be stripped by the caller.

    Args:
        digits: Non-empty string of ASCII digits

    Returns:
        True if the checksum holds, False otherwise (including malformed input)
    """
    if not _is_ascii_digits(digits):
        logger.debug("Luhn check rejected non-digit input")
        return False

    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = ord(ch) - 48
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d

    return total % 10 == 0


def is_valid_credit_card(number: Optional[str]) -> bool:
    """Validate a card number, ignoring spaces between digit groups."""
    if not number:
        return False
    return luhn_check(number.replace(" ", ""))


def is_valid_iranian_national_code(code: Optional[str]) -> bool:
    """
    Validate an Iranian national code (کد ملی).

    The code must be exactly 10 ASCII digits. With ``s`` the weighted sum of
    the first nine digits (weights 10 down to 2) modulo 11, the last digit must
    equal ``s`` when ``s < 2`` and ``11 - s`` otherwise.

    Args:
        code: Candidate national code

    Returns:
        True if the code passes the checksum, False otherwise
    """
    if not _is_ascii_digits(code) or len(code) != 10:
        logger.debug(f"National code rejected: expected 10 digits, got {code!r}")
        return False

    digits = [ord(ch) - 48 for ch in code]
    check = digits[9]
    remainder = sum(d * (10 - i) for i, d in enumerate(digits[:9])) % 11

    if remainder < 2:
        return check == remainder
    return check == 11 - remainder


def is_valid_iranian_mobile_number(
    number: Optional[str], operator_prefixes: Optional[Iterable[str]] = None
) -> bool:
    """
    Validate an Iranian mobile number such as ``09123456789``.

    Args:
        number: Candidate number, 11 ASCII digits starting with "09"
        operator_prefixes: Allowed three-digit operator prefixes; defaults to
            DEFAULT_OPERATOR_PREFIXES

    Returns:
        True if the number has a valid shape and an allowed operator prefix
    """
    if not _is_ascii_digits(number) or len(number) != 11:
        return False
    if not number.startswith("09"):
        return False

    if operator_prefixes is None:
        operator_prefixes = DEFAULT_OPERATOR_PREFIXES

    if number[:3] not in set(operator_prefixes):
        logger.debug(f"Mobile number rejected: unknown operator prefix {number[:3]}")
        return False
    return True


def is_valid_email(text: Optional[str]) -> bool:
    return bool(text) and EMAIL_ADDRESS_RE.fullmatch(text) is not None


def is_valid_phone_number(text: Optional[str]) -> bool:
    return bool(text) and PHONE_RE.fullmatch(text) is not None


def is_valid_password(
    text: Optional[str], min_length: int = 6, max_length: int = 20
) -> bool:
    """Password must fit the length bounds and hold at least one digit and one letter."""
    if not text or not min_length <= len(text) <= max_length:
        return False
    has_digit = any("0" <= ch <= "9" for ch in text)
    has_letter = any(ch.isascii() and ch.isalpha() for ch in text)
    return has_digit and has_letter


def is_valid_number(text: Optional[str]) -> bool:
    """Integer or decimal such as ``-12`` or ``3.25``."""
    return bool(text) and DECIMAL_NUMBER_RE.fullmatch(text) is not None


def is_not_empty(text: Optional[str]) -> bool:
    return bool(text)


def is_valid_date(text: Optional[str], fmt: str = "%Y-%m-%d") -> bool:
    """Check that ``text`` parses as a date in the given strptime format."""
    if not text:
        return False
    try:
        datetime.strptime(text, fmt)
    except ValueError:
        return False
    return True


def has_no_surrounding_spaces(text: Optional[str]) -> bool:
    """True when ``text`` has no leading or trailing whitespace; None passes."""
    if text is None:
        return True
    return text.strip() == text


def is_positive_integer(text: Optional[str]) -> bool:
    return _is_ascii_digits(text) and int(text) > 0


def is_valid_number_in_range(text: Optional[str], minimum: int, maximum: int) -> bool:
    """Integer text within ``minimum``..``maximum`` inclusive."""
    if not text or SIGNED_INTEGER_RE.fullmatch(text) is None:
        return False
    return minimum <= int(text) <= maximum


def contains_char(text: Optional[str], char: str) -> bool:
    return bool(text) and char in text

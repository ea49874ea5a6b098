"""
Shared lightweight helpers for working with CHI numbers.
"""

import logging
import re
from typing import TypeAlias

from chi_number.errors import FormatError

logger = logging.getLogger(__name__)

# CHI numbers arrive either as text or, from some upstream systems, as integers
# with any leading zero lost.
chi_input: TypeAlias = str | int

CHI_NUMBER_LENGTH = 10


def is_ascii_digits(value: str) -> bool:
    """
    Return ``True`` if every character of ``value`` is one of ``0``-``9``.

    :meth:`str.isdigit` on its own also accepts other Unicode digits.
    """
    return value.isascii() and value.isdigit()


def compute_check_digit(first_nine: str) -> int | None:
    """
    Compute the CHI modulus-11 check digit.

    Each of the nine digits is weighted 10 down to 2, left to right. The check
    digit is ``11 - (total % 11)``, with 11 mapped to 0.

    :param first_nine: The first nine digits of a CHI number.
    :returns: The check digit, or ``None`` when the computation yields 10, in
        which case no CHI number can start with these nine digits.
    :raises FormatError: If ``first_nine`` is not exactly nine ASCII digits.
    """
    if len(first_nine) != 9 or not is_ascii_digits(first_nine):
        raise FormatError(
            value=first_nine,
            message="Check digit needs exactly 9 leading digits",
        )

    weights = range(10, 1, -1)
    total = sum(int(ch) * w for ch, w in zip(first_nine, weights, strict=True))

    check = 11 - (total % 11)

    if check == 11:
        return 0
    if check == 10:
        return None

    return check


def normalise_chi_number(value: chi_input) -> str:
    """
    Turn loosely formatted input into a bare digit string.

    Whitespace and hyphens are removed from strings. Integers are left-padded
    with zeros, since a CHI number for someone born on days 1-9 of a month
    starts with ``0``.

    :param value: CHI number as a string or integer.
    :returns: The candidate digit string. It is not validated.
    :raises FormatError: If ``value`` is neither a string nor a non-negative
        integer.
    """
    if isinstance(value, bool):
        raise FormatError(value=value, message="CHI number must be a string or int")
    if isinstance(value, int):
        if value < 0:
            raise FormatError(value=value, message="CHI number must not be negative")
        return str(value).zfill(CHI_NUMBER_LENGTH)
    if not isinstance(value, str):
        raise FormatError(value=value, message="CHI number must be a string or int")

    return re.sub(r"[\s-]", "", value)


def is_valid_chi_number(value: chi_input) -> bool:
    """
    Validate a CHI number without raising.

    Accepts the same loose input as :func:`normalise_chi_number`.

    :param value: CHI number as a string or integer.
    :returns: ``True`` if the value is 10 digits with a matching check digit,
        otherwise ``False``.
    """
    try:
        digits = normalise_chi_number(value)
    except FormatError:
        return False

    if len(digits) != CHI_NUMBER_LENGTH:
        return False
    if not is_ascii_digits(digits):
        return False

    valid = compute_check_digit(digits[:9]) == int(digits[9])
    if not valid:
        logger.debug("CHI number failed the modulus-11 check")
    return valid

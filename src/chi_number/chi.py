"""
Community Health Index (CHI) number value type.

The CHI is the population register used for health care in Scotland. A CHI
number is 10 digits:

- ``0-5``: date of birth as ``DDMMYY``
- ``6-7``: sequence digits
- ``8``: sex, even for female and odd for male
- ``9``: modulus-11 check digit over the first nine digits

Usage:

    chi = ChiNumber.parse("1811431232")
    chi.date_of_birth(cutoff=23)  # date(1943, 11, 18)
    chi.sex  # Sex.MALE
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum

from chi_number.common.common import (
    CHI_NUMBER_LENGTH,
    chi_input,
    compute_check_digit,
    is_ascii_digits,
    normalise_chi_number,
)
from chi_number.errors import ChecksumError, FormatError, InvalidDateError

logger = logging.getLogger(__name__)


class Sex(Enum):
    """Sex category. Values are FHIR administrative gender codes."""

    MALE = "male"
    FEMALE = "female"


def current_year_cutoff(today: date | None = None) -> int:
    """
    Return the last two digits of the current year.

    This is the default century cut-off: a two-digit year up to and including
    this value is read as 20xx, anything later as 19xx.

    :param today: Optional date override (for testing); defaults to today's date.
    :returns: An integer between 0 and 99.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()
    return today.year % 100


def _check_cutoff(cutoff: int) -> None:
    # bool is an int subclass but never a meaningful cut-off
    if isinstance(cutoff, bool) or not isinstance(cutoff, int):
        raise ValueError(f"cutoff must be an integer, got {cutoff!r}")
    if not 0 <= cutoff <= 99:
        raise ValueError(f"cutoff must be between 0 and 99, got {cutoff}")


def _validate(raw: object) -> None:
    """
    Check length, characters and check digit of a candidate CHI number.

    :raises FormatError: If ``raw`` is not a string of exactly 10 ASCII digits.
    :raises ChecksumError: If the check digit does not match.
    """
    if not isinstance(raw, str):
        logger.debug("Rejected CHI number of type %s", type(raw).__name__)
        raise FormatError(value=raw, message="CHI number must be a string")

    if len(raw) != CHI_NUMBER_LENGTH:
        logger.debug("Rejected CHI number of length %d", len(raw))
        raise FormatError(
            value=raw,
            message=f"CHI number must be {CHI_NUMBER_LENGTH} characters long, "
            f"got {len(raw)}",
        )

    if not is_ascii_digits(raw):
        logger.debug("Rejected CHI number containing non-digit characters")
        raise FormatError(value=raw, message="CHI number must contain only digits")

    expected = compute_check_digit(raw[:9])
    actual = int(raw[9])
    if expected != actual:
        logger.debug("Rejected CHI number with a mismatched check digit")
        raise ChecksumError(expected=expected, actual=actual)


@dataclass(frozen=True)
class ChiNumber:
    """
    A validated CHI number.

    Instances can only hold a value that passed validation: the constructor
    runs the same checks as :meth:`parse`.

    :param value: The 10-digit CHI number.
    """

    value: str

    def __post_init__(self) -> None:
        _validate(self.value)

    @classmethod
    def parse(cls, raw: str) -> ChiNumber:
        """
        Validate ``raw`` and wrap it.

        :param raw: Exactly 10 ASCII digits with a valid check digit.
        :returns: The validated CHI number.
        :raises FormatError: If ``raw`` is not exactly 10 ASCII digits.
        :raises ChecksumError: If the modulus-11 check digit does not match.
        """
        return cls(raw)

    def __str__(self) -> str:
        return self.value

    def formatted(self) -> str:
        """Return the number grouped for display, e.g. ``"181143 1232"``."""
        return f"{self.value[:6]} {self.value[6:]}"

    @property
    def digits(self) -> tuple[int, ...]:
        return tuple(int(ch) for ch in self.value)

    @property
    def check_digit(self) -> int:
        return int(self.value[9])

    def date_of_birth(self, cutoff: int | None = None) -> date:
        """
        Derive the date of birth from the first six digits.

        The CHI number only holds a two-digit year, so ``cutoff`` decides the
        century: a year of ``cutoff`` or less is read as 20xx, anything greater
        as 19xx. With ``cutoff=20``, ``18`` is 2018 and ``21`` is 1921.

        :param cutoff: Highest two-digit year still read as 20xx, between 0 and
            99. Defaults to :func:`current_year_cutoff`.
        :returns: The date of birth.
        :raises InvalidDateError: If day, month and year are not a calendar date.
        :raises ValueError: If ``cutoff`` is out of range.
        """
        if cutoff is None:
            cutoff = current_year_cutoff()
        _check_cutoff(cutoff)

        day = int(self.value[0:2])
        month = int(self.value[2:4])
        year_suffix = int(self.value[4:6])

        year = 1900 + year_suffix if year_suffix > cutoff else 2000 + year_suffix

        try:
            return date(year, month, day)
        except ValueError as err:
            logger.debug("CHI number date digits are not a calendar date: %s", err)
            raise InvalidDateError(day=day, month=month, year=year) from err

    @property
    def sex(self) -> Sex:
        """Sex category from the parity of digit 8."""
        if int(self.value[8]) % 2 == 0:
            return Sex.FEMALE
        return Sex.MALE


def parse(raw: str) -> ChiNumber:
    """Validate ``raw`` as a CHI number. See :meth:`ChiNumber.parse`."""
    return ChiNumber.parse(raw)


def date_of_birth(chi: ChiNumber, cutoff: int | None = None) -> date:
    """Date of birth of ``chi``. See :meth:`ChiNumber.date_of_birth`."""
    return chi.date_of_birth(cutoff)


def sex_category(chi: ChiNumber) -> Sex:
    return chi.sex


def coerce_chi_number(value: chi_input) -> ChiNumber:
    """
    Build a :class:`ChiNumber` from loosely formatted input.

    Notes:
    - Input may include whitespace or hyphens (e.g., ``"181143 1232"``).
    - Integer input is zero-padded back to 10 digits.

    :param value: CHI number, as a string or integer.
    :returns: The validated CHI number.
    :raises FormatError: If the normalised value is not 10 ASCII digits.
    :raises ChecksumError: If the check digit does not match.
    """
    return ChiNumber.parse(normalise_chi_number(value))

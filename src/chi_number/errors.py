"""
Exceptions raised when a CHI number cannot be parsed or decoded.

Every exception here derives from :class:`ChiNumberError`, which is itself a
:class:`ValueError`.
"""

from dataclasses import dataclass


class ChiNumberError(ValueError):
    """Base class for errors raised for an invalid CHI number."""


@dataclass(eq=False)
class FormatError(ChiNumberError):
    """
    Raised when a value is not exactly 10 ASCII decimal digits.

    :param value: The rejected value.
    :param message: Human-readable description of the problem.
    """

    value: object
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ChecksumError(ChiNumberError):
    """
    Raised when the final digit does not match the modulus-11 check digit.

    :param expected: Check digit computed from the first nine digits, or ``None``
        when the computation yields 10 and no digit can be valid.
    :param actual: Check digit found at position 9.
    """

    expected: int | None
    actual: int

    def __str__(self) -> str:
        if self.expected is None:
            return "CHI number has no valid check digit for its first nine digits"
        return (
            f"CHI number check digit is {self.actual}, expected {self.expected}"
        )


@dataclass(eq=False)
class InvalidDateError(ChiNumberError):
    """
    Raised when the six leading digits do not form a calendar date.

    :param day: Day of month read from positions 0-1.
    :param month: Month read from positions 2-3.
    :param year: Four-digit year after applying the century cut-off.
    """

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return (
            "CHI number does not encode a valid date of birth "
            f"(day={self.day}, month={self.month}, year={self.year})"
        )

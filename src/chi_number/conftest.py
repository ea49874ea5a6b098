"""Pytest configuration and shared fixtures for CHI number tests."""

from collections.abc import Callable

import pytest

from chi_number.chi import ChiNumber
from chi_number.common.common import compute_check_digit


@pytest.fixture
def male_1943() -> ChiNumber:
    return ChiNumber.parse("1811431232")


@pytest.fixture
def female_2023() -> ChiNumber:
    return ChiNumber.parse("1304236366")


@pytest.fixture
def female_1949() -> ChiNumber:
    return ChiNumber.parse("1304496368")


@pytest.fixture
def build_chi_number() -> Callable[[str, int], ChiNumber]:
    """
    Return a factory for CHI numbers with chosen date digits and sex digit.

    The factory tries sequence digits ``00``-``99`` until the first nine digits
    have a valid check digit.

    :return: ``factory(date_digits, sex_digit)`` where ``date_digits`` is
        ``DDMMYY``.
    """

    def factory(date_digits: str, sex_digit: int = 0) -> ChiNumber:
        for sequence in range(100):
            first_nine = f"{date_digits}{sequence:02d}{sex_digit}"
            check = compute_check_digit(first_nine)
            if check is not None:
                return ChiNumber.parse(f"{first_nine}{check}")
        raise AssertionError(f"No valid CHI number for {date_digits}")

    return factory

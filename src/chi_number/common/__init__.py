"""Shared CHI number helpers."""

from chi_number.common.common import (
    CHI_NUMBER_LENGTH,
    compute_check_digit,
    is_ascii_digits,
    is_valid_chi_number,
    normalise_chi_number,
)

__all__ = [
    "CHI_NUMBER_LENGTH",
    "compute_check_digit",
    "is_ascii_digits",
    "is_valid_chi_number",
    "normalise_chi_number",
]

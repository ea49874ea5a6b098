"""Validation and decoding of Scottish Community Health Index (CHI) numbers."""

from chi_number.chi import (
    ChiNumber,
    Sex,
    coerce_chi_number,
    current_year_cutoff,
    date_of_birth,
    parse,
    sex_category,
)
from chi_number.common import compute_check_digit, is_valid_chi_number
from chi_number.errors import (
    ChecksumError,
    ChiNumberError,
    FormatError,
    InvalidDateError,
)
from chi_number.fhir_resources import to_fhir_identifier, to_fhir_patient

__all__ = [
    "ChecksumError",
    "ChiNumber",
    "ChiNumberError",
    "FormatError",
    "InvalidDateError",
    "Sex",
    "coerce_chi_number",
    "compute_check_digit",
    "current_year_cutoff",
    "date_of_birth",
    "is_valid_chi_number",
    "parse",
    "sex_category",
    "to_fhir_identifier",
    "to_fhir_patient",
]

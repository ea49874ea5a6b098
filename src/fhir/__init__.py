"""FHIR data types and resources."""

from fhir.identifier import Identifier
from fhir.patient import Patient

__all__ = [
    "Identifier",
    "Patient",
]

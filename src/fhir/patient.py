"""FHIR Patient resource."""

from typing import TypedDict

from fhir.identifier import Identifier


class Patient(TypedDict):
    """The subset of a FHIR Patient that a CHI number can populate."""

    resourceType: str
    id: str
    identifier: list[Identifier]
    gender: str
    birthDate: str

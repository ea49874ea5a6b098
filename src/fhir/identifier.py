"""FHIR Identifier type."""

from typing import TypedDict


class Identifier(TypedDict):
    """Business identifier of a resource, such as a CHI number."""

    system: str
    value: str

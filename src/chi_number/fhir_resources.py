"""
Render a CHI number as FHIR R4 JSON fragments.
"""

from fhir import Identifier, Patient

from chi_number.chi import ChiNumber


def to_fhir_identifier(chi: ChiNumber, system: str) -> Identifier:
    """
    Build a FHIR ``Identifier`` for a CHI number.

    :param chi: The CHI number.
    :param system: Identifier system URI for CHI numbers.
    :returns: The identifier.
    """
    return Identifier(system=system, value=chi.value)


def to_fhir_patient(
    chi: ChiNumber, system: str, cutoff: int | None = None
) -> Patient:
    """
    Build a FHIR ``Patient`` holding the demographics encoded in a CHI number.

    :param chi: The CHI number.
    :param system: Identifier system URI for CHI numbers.
    :param cutoff: Century cut-off passed to :meth:`ChiNumber.date_of_birth`.
    :returns: A Patient with ``identifier``, ``gender`` and ``birthDate`` set.
    :raises InvalidDateError: If the date of birth cannot be derived.
    """
    return Patient(
        resourceType="Patient",
        id=chi.value,
        identifier=[to_fhir_identifier(chi, system)],
        gender=chi.sex.value,
        birthDate=chi.date_of_birth(cutoff).isoformat(),
    )

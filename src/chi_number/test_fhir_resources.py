"""
Unit tests for :mod:`chi_number.fhir_resources`.
"""

import json

import pytest

from chi_number.chi import ChiNumber, parse
from chi_number.errors import InvalidDateError
from chi_number.fhir_resources import to_fhir_identifier, to_fhir_patient

SYSTEM = "urn:example:chi-number"


class TestToFhirIdentifier:
    def test_identifier_carries_system_and_value(self, male_1943: ChiNumber) -> None:
        actual = to_fhir_identifier(male_1943, SYSTEM)

        assert actual == {"system": SYSTEM, "value": "1811431232"}


class TestToFhirPatient:
    def test_patient_has_demographics_from_chi_number(
        self, male_1943: ChiNumber
    ) -> None:
        actual = to_fhir_patient(male_1943, SYSTEM, cutoff=23)

        expected = {
            "resourceType": "Patient",
            "id": "1811431232",
            "identifier": [{"system": SYSTEM, "value": "1811431232"}],
            "gender": "male",
            "birthDate": "1943-11-18",
        }
        assert actual == expected

    def test_patient_is_json_serialisable(self, female_2023: ChiNumber) -> None:
        body = json.loads(json.dumps(to_fhir_patient(female_2023, SYSTEM, 23)))

        assert body["gender"] == "female"
        assert body["birthDate"] == "2023-04-13"

    def test_invalid_date_propagates(self) -> None:
        with pytest.raises(InvalidDateError):
            to_fhir_patient(parse("1097701239"), SYSTEM, cutoff=23)

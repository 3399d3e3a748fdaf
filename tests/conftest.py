"""
Shared pytest fixtures for FHIR R5 codec tests.
"""

from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "testdata" / "fhir5-json"


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings between tests to avoid state leakage."""
    from fhir_r5.config.settings import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_patient() -> dict[str, Any]:
    """Sample FHIR Patient resource."""
    return {
        "resourceType": "Patient",
        "id": "test-patient-123",
        "meta": {
            "versionId": "1",
            "lastUpdated": "2024-01-15T10:30:00Z",
        },
        "identifier": [
            {
                "system": "http://example.org/mrn",
                "value": "MRN-12345",
            }
        ],
        "active": True,
        "name": [
            {
                "use": "official",
                "family": "Smith",
                "given": ["John", "William"],
            }
        ],
        "gender": "male",
        "birthDate": "1970-05-15",
        "address": [
            {
                "use": "home",
                "line": ["123 Main St"],
                "city": "Boston",
                "state": "MA",
                "postalCode": "02115",
            }
        ],
    }


@pytest.fixture
def sample_observation() -> dict[str, Any]:
    """Sample FHIR Observation resource with a quantity value."""
    return {
        "resourceType": "Observation",
        "id": "test-observation-1",
        "status": "final",
        "code": {
            "coding": [
                {
                    "system": "http://loinc.org",
                    "code": "29463-7",
                    "display": "Body weight",
                }
            ]
        },
        "subject": {"reference": "Patient/test-patient-123"},
        "effectiveDateTime": "2024-01-15T10:30:00Z",
        "valueQuantity": {
            "value": 72.5,
            "unit": "kg",
            "system": "http://unitsofmeasure.org",
            "code": "kg",
        },
    }


@pytest.fixture
def sample_bundle() -> dict[str, Any]:
    """Sample FHIR Bundle resource."""
    return {
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 2,
        "entry": [
            {
                "fullUrl": "Patient/test-patient-123",
                "resource": {
                    "resourceType": "Patient",
                    "id": "test-patient-123",
                    "name": [{"family": "Smith", "given": ["John"]}],
                },
                "search": {"mode": "match"},
            },
            {
                "fullUrl": "Patient/test-patient-456",
                "resource": {
                    "resourceType": "Patient",
                    "id": "test-patient-456",
                    "name": [{"family": "Doe", "given": ["Jane"]}],
                },
                "search": {"mode": "match"},
            },
        ],
    }


@pytest.fixture
def sample_parameters() -> dict[str, Any]:
    """Sample FHIR Parameters resource with nested parts."""
    return {
        "resourceType": "Parameters",
        "parameter": [
            {"name": "exact", "valueBoolean": True},
            {
                "name": "property",
                "part": [
                    {"name": "code", "valueCode": "display"},
                    {"name": "value", "valueString": "Body weight"},
                ],
            },
            {
                "name": "patient",
                "resource": {"resourceType": "Patient", "id": "p1"},
            },
        ],
    }


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory of the FHIR R5 JSON example documents."""
    return FIXTURES_DIR

"""
Tests for base-model constraints and advisory diagnostics.
"""

import json

import pytest

from fhir_r5 import collect_diagnostics, parse_resource, validate_resource
from fhir_r5.errors import ConstraintViolationError
from fhir_r5.models import HumanName, Period
from fhir_r5.resources import Patient
from fhir_r5.validation import DiagnosticSeverity, iter_elements, validate_resource_type


def _parse(obj):
    return parse_resource(json.dumps(obj).encode("utf-8"))


def _rules(resource):
    return [(d.rule, d.path) for d in collect_diagnostics(resource)]


class TestValidateResourceType:
    """Tests for validate_resource_type function."""

    def test_valid_types(self):
        """Should accept valid resource types."""
        assert validate_resource_type("Patient") == "Patient"
        assert validate_resource_type("MedicationRequest") == "MedicationRequest"

    def test_invalid_types(self):
        """Should reject names that are not capitalised words."""
        for name in ("patient", "", "Patient1", "Patient/123"):
            with pytest.raises(ValueError):
                validate_resource_type(name)


class TestBundleDiagnostics:
    """Tests for bundle entry expectations."""

    def test_transaction_without_request(self):
        """Should warn when a transaction entry has no request."""
        bundle = _parse(
            {
                "resourceType": "Bundle",
                "type": "transaction",
                "entry": [
                    {"resource": {"resourceType": "Patient"}, "request": {"method": "POST", "url": "Patient"}},
                    {"resource": {"resourceType": "Patient"}},
                ],
            }
        )
        assert _rules(bundle) == [("bundle-entry-request", "/entry/1")]

    def test_batch_response_without_response(self):
        """Should warn when a batch-response entry has no response."""
        bundle = _parse({"resourceType": "Bundle", "type": "batch-response", "entry": [{"fullUrl": "urn:x"}]})
        assert _rules(bundle) == [("bundle-entry-response", "/entry/0")]

    def test_collection_has_no_expectation(self):
        """Should not warn about collection entries."""
        bundle = _parse({"resourceType": "Bundle", "type": "collection", "entry": [{"fullUrl": "urn:x"}]})
        assert collect_diagnostics(bundle) == []

    def test_severity_and_code(self, sample_bundle):
        """Should report business-rule warnings."""
        del sample_bundle["entry"][0]["search"]
        diagnostic = collect_diagnostics(_parse(sample_bundle))[0]
        assert diagnostic.severity is DiagnosticSeverity.WARNING
        assert diagnostic.code == "business-rule"
        assert "search" in diagnostic.message


class TestElementDiagnostics:
    """Tests for element-level advisory rules."""

    def test_coding_version_without_system(self):
        """Should warn about a Coding version without a system."""
        patient = _parse({"resourceType": "Patient", "maritalStatus": {"coding": [{"version": "1", "code": "M"}]}})
        assert _rules(patient) == [("coding-version-without-system", "/maritalStatus/coding/0")]

    def test_attachment_data_without_content_type(self):
        """Should warn about attachment data without a content type."""
        patient = _parse({"resourceType": "Patient", "photo": [{"data": "aGVsbG8="}]})
        assert _rules(patient) == [("attachment-data-without-content-type", "/photo/0")]

    def test_empty_required_reference(self):
        """Should warn about a required reference with nothing in it."""
        patient = _parse({"resourceType": "Patient", "link": [{"other": {"type": "Patient"}, "type": "seealso"}]})
        assert _rules(patient) == [("reference-empty", "/link/0/other")]

    def test_unknown_field_information(self):
        """Should report kept unknown fields as information."""
        patient = _parse({"resourceType": "Patient", "name": [{"family": "x", "nick": "y"}]})
        diagnostics = collect_diagnostics(patient)
        assert [(d.rule, d.path) for d in diagnostics] == [("unknown-field", "/name/0/nick")]
        assert diagnostics[0].severity is DiagnosticSeverity.INFORMATION

    def test_clean_resource(self, sample_patient):
        """Should report nothing for a clean resource."""
        assert collect_diagnostics(_parse(sample_patient)) == []


class TestValidateResource:
    """Tests for checking constraints of constructed trees."""

    def test_period_in_constructed_tree(self):
        """Should find a reversed period anywhere in the tree."""
        patient = Patient(name=[HumanName(family="x", period=Period(start="2020-01-01", end="2019-01-01"))])
        with pytest.raises(ConstraintViolationError) as exc_info:
            validate_resource(patient)
        assert exc_info.value.path == "/name/0/period"

    def test_period_coarser_precision(self):
        """Should compare at the coarser precision."""
        validate_resource(Patient(name=[HumanName(period=Period(start="2020", end="2020-06-15"))]))
        with pytest.raises(ConstraintViolationError):
            validate_resource(Patient(name=[HumanName(period=Period(start="2021", end="2020-12"))]))

    def test_period_with_time_zones(self):
        """Should compare instants across time zones."""
        period = Period(start="2020-01-01T10:00:00+02:00", end="2020-01-01T09:00:00Z")
        validate_resource(Patient(name=[HumanName(period=period)]))

    def test_nested_contained(self):
        """Should reject contained resources that contain others."""
        document = {
            "resourceType": "Patient",
            "contained": [
                {
                    "resourceType": "Organization",
                    "id": "o1",
                    "contained": [{"resourceType": "Organization", "id": "o2"}],
                }
            ],
        }
        with pytest.raises(ConstraintViolationError) as exc_info:
            _parse(document)
        assert exc_info.value.path == "/contained/0"

    def test_parameter_value_and_resource(self):
        """Should reject a parameter with both a value and a resource."""
        document = {
            "resourceType": "Parameters",
            "parameter": [{"name": "x", "valueString": "a", "resource": {"resourceType": "Patient"}}],
        }
        with pytest.raises(ConstraintViolationError):
            _parse(document)

    def test_valid_tree(self, sample_parameters):
        """Should accept a valid tree."""
        validate_resource(_parse(sample_parameters))


class TestIterElements:
    """Tests for walking a model tree."""

    def test_root_first(self, sample_patient):
        """Should yield the resource itself at the root path first."""
        patient = _parse(sample_patient)
        model, path = next(iter_elements(patient))
        assert model is patient
        assert path == "/"

    def test_paths(self, sample_patient):
        """Should yield JSON Pointer paths of nested elements."""
        paths = [path for _, path in iter_elements(_parse(sample_patient))]
        assert "/name/0" in paths
        assert "/name/0/given/1" in paths
        assert "/address/0/postalCode" in paths

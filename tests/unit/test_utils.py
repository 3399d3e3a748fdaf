"""
Tests for the FHIR utility functions module.
"""

import json

import pytest

from fhir_r5 import emit_resource, parse_resource, parse_resource_of
from fhir_r5.errors import ConstraintViolationError, MissingRequiredFieldError, UnknownCodeForRequiredBindingError
from fhir_r5.resources import OperationOutcome, Patient
from fhir_r5.utils import (
    iter_bundle_resources,
    json_differences,
    json_equal,
    operation_outcome_from_diagnostics,
    operation_outcome_from_error,
    resources_by_type,
)
from fhir_r5.validation import collect_diagnostics


def _parse(obj):
    return parse_resource(json.dumps(obj).encode("utf-8"))


class TestOperationOutcomeFromError:
    """Tests for operation_outcome_from_error function."""

    def test_missing_field(self):
        """Should describe the error in a single issue."""
        outcome = operation_outcome_from_error(MissingRequiredFieldError("/status"))
        issue = outcome.issue[0]
        assert len(outcome.issue) == 1
        assert issue.severity.to_json() == "error"
        assert issue.code.to_json() == "required"
        assert issue.diagnostics.value == "MissingRequiredField at /status: required field is missing"
        assert issue.location[0].value == "/status"

    @pytest.mark.parametrize(
        "error,code",
        [
            (ConstraintViolationError("/contained/0", "x"), "invariant"),
            (UnknownCodeForRequiredBindingError("/gender", "bogus"), "code-invalid"),
        ],
    )
    def test_issue_type(self, error, code):
        """Should map the error to an issue type."""
        assert operation_outcome_from_error(error).issue[0].code.to_json() == code

    def test_outcome_round_trips(self):
        """Should emit an OperationOutcome that parses strictly."""
        outcome = operation_outcome_from_error(MissingRequiredFieldError("/status"))
        parsed = parse_resource_of(OperationOutcome, emit_resource(outcome), strict=True)
        assert parsed.issue[0].location[0].value == "/status"


class TestOperationOutcomeFromDiagnostics:
    """Tests for operation_outcome_from_diagnostics function."""

    def test_one_issue_per_diagnostic(self, sample_bundle):
        """Should convert each diagnostic to an issue."""
        for entry in sample_bundle["entry"]:
            del entry["search"]
        outcome = operation_outcome_from_diagnostics(collect_diagnostics(_parse(sample_bundle)))
        assert [issue.location[0].value for issue in outcome.issue] == ["/entry/0", "/entry/1"]
        assert all(issue.severity.to_json() == "warning" for issue in outcome.issue)
        assert all(issue.code.to_json() == "business-rule" for issue in outcome.issue)

    def test_information_severity(self):
        """Should keep the information severity of unknown-field notes."""
        outcome = operation_outcome_from_diagnostics(collect_diagnostics(_parse({"resourceType": "Patient", "x": 1})))
        assert outcome.issue[0].severity.to_json() == "information"
        assert outcome.issue[0].code.to_json() == "informational"

    def test_no_diagnostics(self):
        """Should return a single informational issue."""
        outcome = operation_outcome_from_diagnostics([])
        assert len(outcome.issue) == 1
        assert outcome.issue[0].severity.to_json() == "information"
        assert outcome.issue[0].diagnostics.value == "No issues detected"


class TestBundleResources:
    """Tests for bundle helpers."""

    def test_iter_resources(self, sample_bundle):
        """Should yield entry resources in order."""
        resources = list(iter_bundle_resources(_parse(sample_bundle)))
        assert [resource.id.value for resource in resources] == ["test-patient-123", "test-patient-456"]

    def test_skips_entries_without_resource(self):
        """Should skip entries such as DELETE requests."""
        bundle = _parse(
            {
                "resourceType": "Bundle",
                "type": "transaction",
                "entry": [
                    {"request": {"method": "DELETE", "url": "Patient/1"}},
                    {"resource": {"resourceType": "Patient"}, "request": {"method": "POST", "url": "Patient"}},
                ],
            }
        )
        assert [type(resource) for resource in iter_bundle_resources(bundle)] == [Patient]

    def test_resources_by_type(self):
        """Should group resources by resourceType."""
        bundle = _parse(
            {
                "resourceType": "Bundle",
                "type": "collection",
                "entry": [
                    {"resource": {"resourceType": "Patient", "id": "a"}},
                    {"resource": {"resourceType": "Organization", "id": "o"}},
                    {"resource": {"resourceType": "Patient", "id": "b"}},
                ],
            }
        )
        grouped = resources_by_type(bundle)
        assert sorted(grouped) == ["Organization", "Patient"]
        assert [patient.id.value for patient in grouped["Patient"]] == ["a", "b"]

    def test_empty_bundle(self):
        """Should return an empty mapping for a bundle without entries."""
        assert resources_by_type(_parse({"resourceType": "Bundle", "type": "collection"})) == {}


class TestJsonDifferences:
    """Tests for json_differences and json_equal functions."""

    def test_member_order_ignored(self):
        """Should treat objects with reordered members as equal."""
        assert json_equal(b'{"a": 1, "b": [true]}', '{"b": [true], "a": 1}')

    def test_number_lexical_significant(self):
        """Should distinguish 1.0 from 1.00."""
        assert json_differences(b'{"a": 1.0}', b'{"a": 1.00}') == ["/a"]

    def test_number_not_string(self):
        """Should distinguish a number from a string with the same text."""
        assert json_differences(b'{"a": 1}', b'{"a": "1"}') == ["/a"]

    def test_missing_member(self):
        """Should report members present on one side only."""
        assert json_differences(b'{"a": 1}', b'{"a": 1, "b": {"c": 2}}') == ["/b"]

    def test_array_order(self):
        """Should treat arrays as ordered."""
        assert json_differences(b'{"a": [1, 2]}', b'{"a": [2, 1]}') == ["/a/0", "/a/1"]

    def test_array_length(self):
        """Should report an array of another length at the array."""
        assert json_differences(b'{"a": [1]}', b'{"a": [1, 2]}') == ["/a"]

    def test_nested_path(self):
        """Should report nested differences as JSON Pointers."""
        left = b'{"name": [{"given": ["a", null]}]}'
        right = b'{"name": [{"given": ["a", "b"]}]}'
        assert json_differences(left, right) == ["/name/0/given/1"]

    def test_escaped_keys(self):
        """Should escape / and ~ in reported paths."""
        assert json_differences({"a/b": 1, "c~d": True}, {"a/b": 2, "c~d": False}) == ["/a~1b", "/c~0d"]

    def test_booleans_not_numbers(self):
        """Should not treat true as 1."""
        assert not json_equal({"a": True}, {"a": 1})

    def test_decoded_trees(self):
        """Should compare Python values with decoded documents."""
        assert json_equal({"a": 1.5, "b": None}, b'{"b": null, "a": 1.5}')

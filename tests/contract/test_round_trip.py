"""
Contract tests for lossless round trips of FHIR R5 JSON documents.

Every document under tests/testdata/fhir5-json must parse in strict mode and
emit back to a document equal to the input: same members, same array order,
same number spelling.

Run with: pytest tests/contract -v
"""

from pathlib import Path

import pytest

from fhir_r5 import emit_resource, parse_resource, parse_resource_with_diagnostics
from fhir_r5.codec import jsonio
from fhir_r5.resources import Bundle
from fhir_r5.utils import json_differences, json_equal

# Mark all tests in this module as contract tests
pytestmark = pytest.mark.contract

FIXTURES = sorted((Path(__file__).parent.parent / "testdata" / "fhir5-json").glob("*.json"))


@pytest.mark.parametrize("path", FIXTURES, ids=[path.stem for path in FIXTURES])
class TestDocumentRoundTrip:
    """Round-trip contract for each sample document."""

    def test_lossless(self, path):
        """Should emit a document equal to the one it read."""
        data = path.read_bytes()
        assert json_differences(data, emit_resource(parse_resource(data))) == []

    def test_strict(self, path):
        """Should parse without unknown fields in strict mode."""
        data = path.read_bytes()
        resource = parse_resource(data, strict=True)
        assert resource.resource_type == jsonio.loads(data)["resourceType"]

    def test_emit_stable(self, path):
        """Should emit identical bytes when the output is read again."""
        first = emit_resource(parse_resource(path.read_bytes()))
        assert emit_resource(parse_resource(first)) == first

    def test_resource_type_first(self, path):
        """Should write resourceType as the first member."""
        emitted = emit_resource(parse_resource(path.read_bytes()))
        assert emitted.startswith(b'{"resourceType":')


class TestBundleContract:
    """Contract tests for the sample Bundles."""

    def test_searchset_clean(self, fixtures_dir):
        """Should report no diagnostics for a well-formed searchset."""
        result = parse_resource_with_diagnostics((fixtures_dir / "bundle-searchset.json").read_bytes())
        assert isinstance(result.resource, Bundle)
        assert result.warnings == []

    def test_search_score_spelling(self, fixtures_dir):
        """Should keep the search score exactly as written."""
        data = (fixtures_dir / "bundle-searchset.json").read_bytes()
        emitted = emit_resource(parse_resource(data))
        assert b'"score":0.750' in emitted
        assert b'"score":1}' in emitted

    def test_transaction_clean(self, fixtures_dir):
        """Should report no diagnostics when every entry has a request."""
        result = parse_resource_with_diagnostics((fixtures_dir / "bundle-transaction.json").read_bytes())
        assert result.warnings == []

    def test_delete_entry_without_resource(self, fixtures_dir):
        """Should keep a DELETE entry that carries no resource."""
        bundle = parse_resource((fixtures_dir / "bundle-transaction.json").read_bytes())
        deletes = [entry for entry in bundle.entry if entry.request.method.to_json() == "DELETE"]
        assert len(deletes) == 1
        assert deletes[0].resource is None
        assert deletes[0].request.url.value == "Patient/234"

    def test_pretty_output_equivalent(self, fixtures_dir):
        """Should emit an indented document equal to the compact one."""
        resource = parse_resource((fixtures_dir / "bundle-transaction.json").read_bytes())
        assert json_equal(emit_resource(resource), emit_resource(resource, indent=2))

"""
Performance benchmarks for critical code paths.

These tests measure execution time of key operations to detect regressions.

Run with: pytest tests/performance -v
Run benchmarks only: pytest tests/performance -v -m benchmark
"""

import json
import time

import pytest

from fhir_r5 import collect_diagnostics, emit_resource, parse_resource
from fhir_r5.codec import jsonio
from fhir_r5.resources import Bundle
from fhir_r5.utils import json_equal

# Mark all tests in this module as performance benchmarks
pytestmark = [pytest.mark.performance, pytest.mark.benchmark]


@pytest.fixture(scope="module")
def search_bundle():
    """Encoded searchset Bundle with 100 Observation entries."""
    bundle = {
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 100,
        "entry": [
            {
                "fullUrl": f"https://example.org/fhir/Observation/obs-{i}",
                "resource": {
                    "resourceType": "Observation",
                    "id": f"obs-{i}",
                    "status": "final",
                    "code": {"coding": [{"system": "http://loinc.org", "code": "29463-7", "display": "Body weight"}]},
                    "subject": {"reference": f"Patient/patient-{i}"},
                    "effectiveDateTime": "2024-01-15T10:30:00Z",
                    "valueQuantity": {"value": 72.5, "unit": "kg", "system": "http://unitsofmeasure.org", "code": "kg"},
                },
                "search": {"mode": "match", "score": 0.750},
            }
            for i in range(100)
        ],
    }
    return json.dumps(bundle).encode("utf-8")


class TestCodecPerformance:
    """Performance benchmarks for parse and emit."""

    def test_parse_bundle_performance(self, search_bundle):
        """Benchmark parsing a Bundle with 100 entries."""
        iterations = 20
        start = time.perf_counter()

        for _ in range(iterations):
            bundle = parse_resource(search_bundle)
            assert len(bundle.entry) == 100

        elapsed = time.perf_counter() - start
        avg_time = elapsed / iterations

        # Should complete in under 500ms per iteration
        assert avg_time < 0.5, f"Average parse time {avg_time:.4f}s exceeds 500ms"

    def test_emit_bundle_performance(self, search_bundle):
        """Benchmark emitting a Bundle with 100 entries."""
        bundle = parse_resource(search_bundle)
        iterations = 20
        start = time.perf_counter()

        for _ in range(iterations):
            emitted = emit_resource(bundle)

        elapsed = time.perf_counter() - start
        avg_time = elapsed / iterations

        assert json_equal(search_bundle, emitted)
        # Should complete in under 250ms per iteration
        assert avg_time < 0.25, f"Average emit time {avg_time:.4f}s exceeds 250ms"

    def test_diagnostics_performance(self, search_bundle):
        """Benchmark collecting diagnostics over a Bundle with 100 entries."""
        bundle = parse_resource(search_bundle)
        assert isinstance(bundle, Bundle)
        iterations = 20
        start = time.perf_counter()

        for _ in range(iterations):
            assert collect_diagnostics(bundle) == []

        elapsed = time.perf_counter() - start
        avg_time = elapsed / iterations

        # Should complete in under 250ms per iteration
        assert avg_time < 0.25, f"Average diagnostics time {avg_time:.4f}s exceeds 250ms"


class TestJsonPerformance:
    """Performance benchmarks for the JSON layer."""

    def test_loads_performance(self, search_bundle):
        """Benchmark strict JSON decoding."""
        iterations = 50
        start = time.perf_counter()

        for _ in range(iterations):
            tree = jsonio.loads(search_bundle)
            assert len(tree["entry"]) == 100

        elapsed = time.perf_counter() - start
        avg_time = elapsed / iterations

        # Should complete in under 50ms per iteration
        assert avg_time < 0.05, f"Average loads time {avg_time:.4f}s exceeds 50ms"

    def test_dumps_performance(self, search_bundle):
        """Benchmark encoding with exact number spelling."""
        tree = jsonio.loads(search_bundle)
        iterations = 50
        start = time.perf_counter()

        for _ in range(iterations):
            jsonio.dumps(tree)

        elapsed = time.perf_counter() - start
        avg_time = elapsed / iterations

        # Should complete in under 50ms per iteration
        assert avg_time < 0.05, f"Average dumps time {avg_time:.4f}s exceeds 50ms"

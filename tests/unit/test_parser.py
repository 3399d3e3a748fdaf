"""
Tests for parsing FHIR JSON into typed resources.
"""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from fhir_r5 import (
    emit_resource,
    parse_bundle_entry_resource,
    parse_resource,
    parse_resource_of,
    parse_resource_with_diagnostics,
    resource_from_dict,
)
from fhir_r5.errors import (
    CodecError,
    ConstraintViolationError,
    InvalidExtensionError,
    InvalidLexicalFormError,
    MissingRequiredFieldError,
    MultipleChoiceVariantsError,
    PrimitiveSiblingMisalignmentError,
    ResourceTypeMismatchError,
    StructuralError,
    UnknownCodeForRequiredBindingError,
    UnknownFieldError,
    UnknownResourceTypeError,
)
from fhir_r5.models import DatePrecision, Quantity, String
from fhir_r5.models.codes import AdministrativeGender
from fhir_r5.resources import Bundle, Observation, Patient
from fhir_r5.utils import json_equal


def _doc(obj) -> bytes:
    return json.dumps(obj).encode("utf-8")


def _observation(**members) -> dict:
    return {"resourceType": "Observation", "status": "final", "code": {"text": "weight"}, **members}


class TestDispatch:
    """Tests for resourceType dispatch."""

    def test_concrete_class(self, sample_patient):
        """Should return an instance of the concrete resource class."""
        patient = parse_resource(_doc(sample_patient))
        assert isinstance(patient, Patient)
        assert patient.id.value == "test-patient-123"

    def test_accepts_text(self):
        """Should accept an already-decoded string."""
        assert isinstance(parse_resource('{"resourceType": "Patient"}'), Patient)

    def test_unknown_resource_type(self):
        """Should reject an unknown resourceType."""
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            parse_resource(b'{"resourceType": "Spaceship"}')
        assert exc_info.value.name == "Spaceship"
        assert exc_info.value.path == "/"

    def test_missing_resource_type(self):
        """Should reject a document without resourceType."""
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            parse_resource(b'{"id": "p1"}')
        assert exc_info.value.name is None

    def test_root_must_be_object(self):
        """Should reject a top-level array."""
        with pytest.raises(StructuralError):
            parse_resource(b"[]")

    def test_parse_resource_of(self, sample_patient):
        """Should return the expected type."""
        patient = parse_resource_of(Patient, _doc(sample_patient))
        assert isinstance(patient, Patient)

    def test_parse_resource_of_mismatch(self, sample_patient):
        """Should reject a document of another resource type."""
        with pytest.raises(ResourceTypeMismatchError) as exc_info:
            parse_resource_of(Observation, _doc(sample_patient))
        assert exc_info.value.expected == "Observation"
        assert exc_info.value.actual == "Patient"

    def test_bundle_entries_dispatch(self, sample_bundle):
        """Should dispatch every entry resource on its own resourceType."""
        bundle = parse_resource(_doc(sample_bundle))
        assert isinstance(bundle, Bundle)
        assert [type(entry.resource) for entry in bundle.entry] == [Patient, Patient]

    def test_typed_resource_slot_mismatch(self):
        """Should reject a resource of the wrong type in a typed slot."""
        document = {
            "resourceType": "Bundle",
            "type": "collection",
            "issues": {"resourceType": "Patient"},
        }
        with pytest.raises(ResourceTypeMismatchError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/issues"

    def test_bundle_entry_resource(self, sample_patient):
        """Should parse a decoded entry resource object."""
        assert isinstance(parse_bundle_entry_resource(sample_patient), Patient)

    def test_from_dict_with_python_numbers(self, sample_observation):
        """Should accept plain int and float values in decoded trees."""
        observation = resource_from_dict(sample_observation)
        assert observation.value.value.value == "72.5"


class TestScenarios:
    """End-to-end parse and emit scenarios."""

    def test_minimal_patient(self):
        """Should emit a constructed Patient byte-for-byte."""
        assert emit_resource(Patient(id="p1", active=True)) == b'{"resourceType":"Patient","id":"p1","active":true}'

    def test_value_quantity_round_trip(self):
        """Should resolve valueQuantity to a Quantity and emit it back."""
        document = _observation(valueQuantity={"value": 185, "unit": "lbs"})
        observation = parse_resource(_doc(document))
        assert isinstance(observation.value, Quantity)
        assert observation.value.value.value == "185"
        assert json_equal(_doc(document), emit_resource(observation))

    def test_two_choice_variants(self):
        """Should reject valueQuantity together with valueString."""
        document = _observation(valueQuantity={"value": 185}, valueString="tall")
        with pytest.raises(MultipleChoiceVariantsError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/"
        assert exc_info.value.names == ["valueQuantity", "valueString"]

    def test_partial_date_with_extension(self):
        """Should fuse birthDate with its _birthDate element."""
        document = {
            "resourceType": "Patient",
            "birthDate": "1970",
            "_birthDate": {
                "extension": [{"url": "http://example.org/approximate", "valueBoolean": True}]
            },
        }
        patient = parse_resource(_doc(document))
        assert patient.birth_date.value == "1970"
        assert patient.birth_date.precision is DatePrecision.YEAR
        assert patient.birth_date.extension[0].url == "http://example.org/approximate"
        assert patient.birth_date.extension[0].value.value is True
        assert json_equal(_doc(document), emit_resource(patient))

    def test_primitive_array_alignment(self):
        """Should pair given with _given by position."""
        document = {
            "resourceType": "Patient",
            "name": [
                {
                    "given": ["Peter", None, "James"],
                    "_given": [
                        None,
                        {"extension": [{"url": "http://example.org/middle", "valueString": "J"}]},
                        None,
                    ],
                }
            ],
        }
        patient = parse_resource(_doc(document))
        given = patient.name[0].given
        assert [item.value for item in given] == ["Peter", None, "James"]
        assert given[1].extension[0].value.value == "J"
        assert given[0].extension is None
        assert json_equal(_doc(document), emit_resource(patient))

    def test_searchset_missing_search(self):
        """Should warn about a searchset entry without search and keep total an int."""
        document = {
            "resourceType": "Bundle",
            "type": "searchset",
            "total": 2,
            "entry": [
                {"resource": {"resourceType": "Patient", "id": "a"}, "search": {"mode": "match"}},
                {"resource": {"resourceType": "Patient", "id": "b"}},
            ],
        }
        result = parse_resource_with_diagnostics(_doc(document))
        assert result.resource.total.value == 2
        assert isinstance(result.resource.total.value, int)
        assert [(d.rule, d.path) for d in result.warnings] == [("bundle-entry-search", "/entry/1")]

    def test_decimal_precision(self):
        """Should keep 1.200 as written."""
        document = b'{"resourceType":"Observation","status":"final","code":{"text":"x"},"valueQuantity":{"value":1.200}}'
        observation = parse_resource(document)
        assert observation.value.value.value == "1.200"
        assert emit_resource(observation) == document


class TestUnknownFields:
    """Tests for lenient and strict handling of undeclared members."""

    def test_lenient_keeps_unknown(self):
        """Should keep unknown members in the extra side-map."""
        patient = parse_resource(b'{"resourceType": "Patient", "nickname": {"value": 1.50}}')
        assert patient.model_extra == {"nickname": {"value": "1.50"}}
        assert emit_resource(patient) == b'{"resourceType":"Patient","nickname":{"value":1.50}}'

    def test_strict_rejects_unknown(self):
        """Should reject unknown members in strict mode."""
        with pytest.raises(UnknownFieldError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "nickname": "Pete"}', strict=True)
        assert exc_info.value.path == "/"
        assert exc_info.value.name == "nickname"

    def test_strict_nested_path(self):
        """Should report the object that carries the unknown member."""
        document = {"resourceType": "Patient", "name": [{"family": "Chalmers", "nick": "Pete"}]}
        with pytest.raises(UnknownFieldError) as exc_info:
            parse_resource(_doc(document), strict=True)
        assert exc_info.value.path == "/name/0"

    def test_unknown_choice_suffix(self):
        """Should treat an undeclared choice variant as unknown."""
        with pytest.raises(UnknownFieldError):
            parse_resource(_doc(_observation(valueHumanName={"family": "x"})), strict=True)

    def test_strict_from_settings(self, monkeypatch):
        """Should use FHIR_R5_STRICT when no argument is given."""
        monkeypatch.setenv("FHIR_R5_STRICT", "true")
        with pytest.raises(UnknownFieldError):
            parse_resource(b'{"resourceType": "Patient", "nickname": "Pete"}')

    def test_argument_overrides_settings(self, monkeypatch):
        """Should let strict=False override the configured default."""
        monkeypatch.setenv("FHIR_R5_STRICT", "true")
        patient = parse_resource(b'{"resourceType": "Patient", "nickname": "Pete"}', strict=False)
        assert patient.model_extra["nickname"] == "Pete"


class TestCardinality:
    """Tests for required fields and empty arrays."""

    def test_missing_required(self):
        """Should report a missing required field at its path."""
        document = {"resourceType": "Observation", "code": {"text": "x"}}
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/status"

    def test_missing_required_nested(self):
        """Should report missing fields inside backbone elements."""
        document = _observation(component=[{"valueString": "x"}])
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/component/0/code"

    def test_missing_required_choice(self):
        """Should report a required choice by its base name."""
        document = {
            "resourceType": "MedicationRequest",
            "status": "active",
            "intent": "order",
            "medication": {"concept": {"text": "aspirin"}},
            "subject": {"reference": "Patient/p1"},
            "substitution": {},
        }
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/substitution/allowed"

    def test_empty_array_lenient(self):
        """Should treat an empty array as absent in lenient mode."""
        patient = parse_resource(b'{"resourceType": "Patient", "identifier": [], "active": true}')
        assert patient.identifier is None
        assert emit_resource(patient) == b'{"resourceType":"Patient","active":true}'

    def test_empty_array_strict(self):
        """Should reject an empty array in strict mode."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "identifier": []}', strict=True)
        assert exc_info.value.path == "/identifier"


class TestLexical:
    """Tests for primitive lexical checks."""

    def test_bad_date(self):
        """Should reject an invalid month."""
        with pytest.raises(InvalidLexicalFormError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "birthDate": "1970-13"}')
        assert exc_info.value.path == "/birthDate"
        assert exc_info.value.type_name == "date"

    def test_string_for_boolean(self):
        """Should reject a quoted boolean."""
        with pytest.raises(InvalidLexicalFormError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "active": "true"}')
        assert exc_info.value.path == "/active"

    def test_unsigned_int_range(self):
        """Should reject a negative unsignedInt."""
        with pytest.raises(InvalidLexicalFormError) as exc_info:
            parse_resource(b'{"resourceType": "Bundle", "type": "searchset", "total": -1}')
        assert exc_info.value.path == "/total"

    def test_integer_overflow(self):
        """Should reject integers beyond 32 bits."""
        with pytest.raises(InvalidLexicalFormError):
            parse_resource(b'{"resourceType": "Bundle", "type": "searchset", "total": 4294967296}')

    def test_integer64_as_string(self):
        """Should read integer64 from a JSON string."""
        document = b'{"resourceType":"Patient","photo":[{"contentType":"image/png","size":"1024"}]}'
        patient = parse_resource(document)
        assert patient.photo[0].size.value == 1024
        assert emit_resource(patient) == document

    def test_integer64_as_number(self):
        """Should reject integer64 written as a JSON number."""
        with pytest.raises(InvalidLexicalFormError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "photo": [{"size": 1024}]}')
        assert exc_info.value.path == "/photo/0/size"

    def test_empty_string(self):
        """Should reject an empty string value."""
        with pytest.raises(InvalidLexicalFormError):
            parse_resource(b'{"resourceType": "Patient", "name": [{"family": ""}]}')


class TestBindings:
    """Tests for required terminology bindings."""

    def test_known_code(self, sample_patient):
        """Should resolve a bound code to its enum member."""
        patient = parse_resource(_doc(sample_patient))
        assert patient.gender.value is AdministrativeGender.MALE
        assert patient.gender.to_json() == "male"

    def test_unknown_code(self):
        """Should reject a code outside the required value set."""
        with pytest.raises(UnknownCodeForRequiredBindingError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "gender": "bogus"}')
        assert exc_info.value.path == "/gender"
        assert exc_info.value.value == "bogus"
        assert exc_info.value.value_set == "AdministrativeGender"

    def test_unbound_code_kept(self):
        """Should keep codes of unbound elements verbatim."""
        document = {"resourceType": "Patient", "language": "x-klingon"}
        assert parse_resource(_doc(document)).language.value == "x-klingon"


class TestStructure:
    """Tests for JSON shape errors."""

    def test_object_for_array(self):
        """Should reject an object where an array is expected."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "name": {"family": "x"}}')
        assert exc_info.value.path == "/name"

    def test_array_for_object(self):
        """Should reject an array where a single value is expected."""
        with pytest.raises(StructuralError):
            parse_resource(b'{"resourceType": "Patient", "maritalStatus": [{"text": "x"}]}')

    def test_null_value(self):
        """Should reject null where a value is expected."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "active": null}')
        assert exc_info.value.path == "/active"

    def test_null_in_complex_array(self):
        """Should reject null items in arrays of complex elements."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "name": [null]}')
        assert exc_info.value.path == "/name/0"

    def test_sibling_length_mismatch(self):
        """Should reject a _field array of another length."""
        document = {"resourceType": "Patient", "name": [{"given": ["a", "b"], "_given": [None]}]}
        with pytest.raises(PrimitiveSiblingMisalignmentError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/name/0/given"

    def test_sibling_both_null(self):
        """Should reject a position that is null in both arrays."""
        document = {"resourceType": "Patient", "name": [{"given": ["a", None], "_given": [None, None]}]}
        with pytest.raises(PrimitiveSiblingMisalignmentError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/name/0/given/1"

    def test_element_only_array(self):
        """Should accept a _field array without values."""
        document = {
            "resourceType": "Patient",
            "name": [{"_given": [{"extension": [{"url": "http://example.org/x", "valueCode": "masked"}]}]}],
        }
        patient = parse_resource(_doc(document))
        assert patient.name[0].given[0].value is None
        assert json_equal(_doc(document), emit_resource(patient))

    def test_empty_primitive_element(self):
        """Should reject a primitive with neither a value nor an id or extension."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "_birthDate": {}}')
        assert exc_info.value.path == "/_birthDate"

    def test_null_value_with_empty_element(self):
        """Should reject a null value whose sibling element is empty."""
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "birthDate": null, "_birthDate": {}}')
        assert exc_info.value.path == "/_birthDate"

    def test_empty_element_in_array(self):
        """Should reject an array position with a null value and an empty element."""
        document = {"resourceType": "Patient", "name": [{"given": ["a", None], "_given": [None, {}]}]}
        with pytest.raises(StructuralError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/name/0/_given/1"

    def test_element_with_id_only(self):
        """Should accept a primitive that carries only an id."""
        patient = parse_resource(b'{"resourceType": "Patient", "_birthDate": {"id": "bd"}}')
        assert patient.birth_date.value is None
        assert patient.birth_date.id == "bd"

    def test_sibling_on_complex_field(self):
        """Should not accept a _field sibling of a non-primitive field in strict mode."""
        with pytest.raises(CodecError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "_maritalStatus": {"id": "x"}}', strict=True)
        assert exc_info.value.kind.value == "UnknownField"


class TestExtensions:
    """Tests for extension shape rules."""

    def test_both_value_and_nested(self):
        """Should reject an extension with a value and nested extensions."""
        document = {
            "resourceType": "Patient",
            "extension": [
                {
                    "url": "http://example.org/a",
                    "valueString": "x",
                    "extension": [{"url": "b", "valueString": "y"}],
                }
            ],
        }
        with pytest.raises(InvalidExtensionError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/extension/0"

    def test_neither_value_nor_nested(self):
        """Should reject an empty extension."""
        with pytest.raises(InvalidExtensionError):
            parse_resource(b'{"resourceType": "Patient", "extension": [{"url": "http://example.org/a"}]}')

    def test_complex_nested(self):
        """Should accept nested extensions without a value."""
        document = {
            "resourceType": "Patient",
            "extension": [
                {
                    "url": "http://hl7.org/fhir/us/core/StructureDefinition/us-core-race",
                    "extension": [
                        {"url": "text", "valueString": "Mixed"},
                        {"url": "ombCategory", "valueCoding": {"code": "2106-3"}},
                    ],
                }
            ],
        }
        patient = parse_resource(_doc(document))
        nested = patient.extension[0].extension
        assert isinstance(nested[0].value, String)
        assert nested[1].value.code.value == "2106-3"
        assert json_equal(_doc(document), emit_resource(patient))

    def test_extension_requires_url(self):
        """Should reject an extension without url."""
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_resource(b'{"resourceType": "Patient", "extension": [{"valueString": "x"}]}')
        assert exc_info.value.path == "/extension/0/url"


class TestConstraints:
    """Tests for base-model rules checked during parsing."""

    def test_period_order(self):
        """Should reject a period that ends before it starts."""
        document = _observation(effectivePeriod={"start": "2024-02-01", "end": "2024-01-01"})
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/effectivePeriod"

    def test_period_mixed_precision(self):
        """Should compare periods at the coarser precision."""
        document = _observation(effectivePeriod={"start": "2024-01", "end": "2024-01-01T00:00:00Z"})
        assert parse_resource(_doc(document)).value is None

    def test_contained_without_id(self):
        """Should reject a contained resource without id."""
        document = {"resourceType": "Patient", "contained": [{"resourceType": "Organization", "name": "x"}]}
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/contained/0"

    def test_contained_duplicate_id(self):
        """Should reject two contained resources with the same id."""
        document = {
            "resourceType": "Patient",
            "contained": [
                {"resourceType": "Organization", "id": "o1"},
                {"resourceType": "Organization", "id": "o1"},
            ],
        }
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/contained/1"

    def test_parameter_value_and_part(self):
        """Should reject a parameter carrying both a value and parts."""
        document = {
            "resourceType": "Parameters",
            "parameter": [{"name": "x", "valueString": "a", "part": [{"name": "y", "valueString": "b"}]}],
        }
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_resource(_doc(document))
        assert exc_info.value.path == "/parameter/0"


class TestDocumentLimits:
    """Tests for document-level checks."""

    def test_max_document_bytes(self, monkeypatch):
        """Should reject documents over FHIR_R5_MAX_DOCUMENT_BYTES."""
        monkeypatch.setenv("FHIR_R5_MAX_DOCUMENT_BYTES", "16")
        with pytest.raises(StructuralError, match="exceeds"):
            parse_resource(b'{"resourceType": "Patient", "id": "p1"}')

    def test_duplicate_keys(self):
        """Should reject a resource with a repeated member."""
        with pytest.raises(StructuralError):
            parse_resource(b'{"resourceType": "Patient", "active": true, "active": false}')


def _reorder(obj):
    """Reverse member order at every level of a JSON tree."""
    if isinstance(obj, dict):
        return {key: _reorder(obj[key]) for key in reversed(list(obj))}
    if isinstance(obj, list):
        return [_reorder(item) for item in obj]
    return obj


class TestDeterminism:
    """Tests that parsing depends on content, not member order or thread."""

    DOCUMENT = {
        "resourceType": "Patient",
        "id": "p1",
        "extension": [{"url": "http://example.org/fhir/StructureDefinition/flag", "valueBoolean": True}],
        "active": True,
        "name": [
            {
                "family": "Chalmers",
                "given": ["Peter", None],
                "_given": [None, {"extension": [{"url": "http://example.org/x", "valueCode": "masked"}]}],
            }
        ],
        "gender": "male",
        "birthDate": "1974-12",
        "_birthDate": {"id": "bd"},
        "deceasedBoolean": False,
    }

    def test_member_order_ignored(self):
        """Should build equal models and identical output from reordered members."""
        reordered = _reorder(self.DOCUMENT)
        assert list(reordered)[-1] == "resourceType"
        assert list(reordered["name"][0]).index("_given") < list(reordered["name"][0]).index("given")

        first = parse_resource(_doc(self.DOCUMENT), strict=True)
        second = parse_resource(_doc(reordered), strict=True)
        assert first == second
        assert emit_resource(first) == emit_resource(second)

    def test_repeated_parse(self):
        """Should build equal models from the same document every time."""
        data = _doc(self.DOCUMENT)
        assert parse_resource(data) == parse_resource(data)

    def test_parallel_parse(self):
        """Should give the same result when parsed from several threads."""
        data = _doc(self.DOCUMENT)
        expected = emit_resource(parse_resource(data))
        with ThreadPoolExecutor(max_workers=8) as pool:
            emitted = list(pool.map(lambda _: emit_resource(parse_resource(data)), range(32)))
        assert emitted == [expected] * 32

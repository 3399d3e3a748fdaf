"""
Tests for emitting typed resources as FHIR JSON.
"""

import decimal
import json

import pytest

from fhir_r5 import emit_resource, parse_resource, resource_to_dict
from fhir_r5.errors import PrimitiveSiblingMisalignmentError
from fhir_r5.models import Date, Extension, HumanName, JsonNumber, Period, String
from fhir_r5.resources import Bundle, Observation, Patient
from fhir_r5.resources.bundle import BundleEntry, BundleEntrySearch


class TestKeyOrder:
    """Tests for member ordering in emitted JSON."""

    def test_resource_type_first(self):
        """Should write resourceType before any other member."""
        assert next(iter(resource_to_dict(Patient(active=True, id="p1")))) == "resourceType"

    def test_declaration_order(self):
        """Should write fields in declaration order regardless of construction order."""
        patient = Patient(birth_date="1970-01-01", gender="female", active=False, id="p1")
        assert list(resource_to_dict(patient)) == ["resourceType", "id", "active", "gender", "birthDate"]

    def test_unknown_members_last(self):
        """Should write kept unknown members after declared fields."""
        patient = parse_resource(b'{"resourceType": "Patient", "nickname": "Pete", "active": true}')
        assert list(resource_to_dict(patient)) == ["resourceType", "active", "nickname"]


class TestValues:
    """Tests for value rendering."""

    def test_absent_fields_omitted(self):
        """Should never write null for an absent field."""
        assert emit_resource(Patient()) == b'{"resourceType":"Patient"}'

    def test_bound_code(self):
        """Should write bound codes as their string."""
        assert resource_to_dict(Patient(gender="other"))["gender"] == "other"

    def test_decimal_from_python_decimal(self):
        """Should write a decimal.Decimal with its exact digits."""
        bundle = Bundle(
            type="searchset",
            entry=[BundleEntry(search=BundleEntrySearch(score=decimal.Decimal("0.750")))],
        )
        assert emit_resource(bundle) == b'{"resourceType":"Bundle","type":"searchset","entry":[{"search":{"score":0.750}}]}'

    def test_decimal_in_dict_is_number_token(self):
        """Should put decimals in the tree as JsonNumber tokens."""
        bundle = Bundle(type="searchset", entry=[BundleEntry(search=BundleEntrySearch(score="1.50"))])
        score = resource_to_dict(bundle)["entry"][0]["search"]["score"]
        assert isinstance(score, JsonNumber)
        assert score == "1.50"

    def test_plain_value_assigned_after_construction(self):
        """Should wrap plain values assigned to primitive fields."""
        patient = Patient(id="p1")
        patient.active = False
        assert emit_resource(patient) == b'{"resourceType":"Patient","id":"p1","active":false}'

    def test_indent(self):
        """Should pretty-print when an indent is given."""
        assert emit_resource(Patient(id="p1"), indent=2) == b'{\n  "resourceType": "Patient",\n  "id": "p1"\n}'

    def test_utf8_output(self):
        """Should write non-ASCII text as UTF-8."""
        patient = Patient(name=[HumanName(family="Müller")])
        assert "Müller".encode("utf-8") in emit_resource(patient)


class TestPrimitiveElements:
    """Tests for the _field sibling of primitives."""

    def test_element_with_value(self):
        """Should write id and extensions of a primitive under _field."""
        patient = Patient(birth_date="1970")
        patient.birth_date.id = "bd"
        tree = resource_to_dict(patient)
        assert tree["birthDate"] == "1970"
        assert tree["_birthDate"] == {"id": "bd"}

    def test_list_padding(self):
        """Should pad value and element arrays with null at the same positions."""
        flagged = String(extension=[Extension(url="http://example.org/flag", value=String(value="y"))])
        patient = Patient(name=[HumanName(given=["Peter", flagged, "James"])])
        name = json.loads(emit_resource(patient))["name"][0]
        assert name["given"] == ["Peter", None, "James"]
        assert name["_given"] == [
            None,
            {"extension": [{"url": "http://example.org/flag", "valueString": "y"}]},
            None,
        ]

    def test_empty_primitive_rejected(self):
        """Should refuse a primitive with neither a value nor an element."""
        patient = Patient(id="p1")
        patient.birth_date = Date.model_construct(value=None)
        with pytest.raises(PrimitiveSiblingMisalignmentError) as exc_info:
            emit_resource(patient)
        assert exc_info.value.path == "/birthDate"

    def test_list_without_elements(self):
        """Should omit the _field array when no item has an element."""
        tree = resource_to_dict(Patient(name=[HumanName(given=["a", "b"])]))
        assert tree["name"] == [{"given": ["a", "b"]}]


class TestChoiceEmission:
    """Tests for choice element keys."""

    def test_choice_key_suffix(self):
        """Should write the variant type name after the base name."""
        document = b'{"resourceType":"Patient","deceasedDateTime":"2015-02-14T13:42:00+10:00"}'
        assert emit_resource(parse_resource(document)) == document

    def test_choice_primitive_element(self):
        """Should write the _field sibling of a primitive choice variant."""
        document = b'{"resourceType":"Patient","deceasedBoolean":true,"_deceasedBoolean":{"id":"d1"}}'
        assert emit_resource(parse_resource(document)) == document

    def test_disallowed_variant_type(self):
        """Should refuse a value whose type is not a variant of the choice."""
        patient = Patient(id="p1")
        patient.deceased = Period(start="2020-01-01")
        with pytest.raises(TypeError):
            emit_resource(patient)

    def test_plain_scalar_wrapped(self):
        """Should wrap a plain value that only one primitive variant accepts."""
        patient = Patient(id="p1")
        patient.deceased = True
        assert emit_resource(patient) == b'{"resourceType":"Patient","id":"p1","deceasedBoolean":true}'

    def test_plain_string_wrapped(self):
        """Should pick the string variant for free text."""
        observation = Observation(status="final", code={"text": "note"})
        observation.value = "no abnormality"
        assert resource_to_dict(observation)["valueString"] == "no abnormality"

    def test_plain_integer_wrapped(self):
        """Should pick the integer variant for a Python int."""
        observation = Observation(status="final", code={"text": "count"})
        observation.value = 3
        assert resource_to_dict(observation)["valueInteger"] == 3

    def test_ambiguous_plain_scalar(self):
        """Should refuse a plain value that several variants accept."""
        observation = Observation(status="final", code={"text": "date"})
        observation.value = "2020-01-01"
        with pytest.raises(TypeError, match="ambiguous"):
            emit_resource(observation)

"""
Tests for resource-level helpers and recursive backbone elements.
"""

import json

import pytest

from fhir_r5 import emit_resource, parse_resource, parse_resource_of, resource_to_dict
from fhir_r5.models import Markdown, Url
from fhir_r5.resources import (
    CapabilityStatement,
    CodeSystem,
    EvidenceReport,
    ImplementationGuide,
    PackagedProductDefinition,
    Parameters,
    PlanDefinition,
    Questionnaire,
    ValueSet,
)
from fhir_r5.resources.code_system import FilterOperator
from fhir_r5.utils import json_equal


@pytest.fixture
def load(fixtures_dir):
    """Parse a fixture document as a given resource type."""

    def _load(resource_cls, name):
        return parse_resource_of(resource_cls, (fixtures_dir / name).read_bytes(), strict=True)

    return _load


class TestCodeSystem:
    """Tests for CodeSystem concept lookup."""

    def test_find_top_level(self, load):
        """Should find a root concept."""
        code_system = load(CodeSystem, "codesystem-example.json")
        assert code_system.find_concept("chol").display.value == "SChol"

    def test_find_nested(self, load):
        """Should search the whole hierarchy."""
        code_system = load(CodeSystem, "codesystem-example.json")
        concept = code_system.find_concept("chol-plasma")
        assert concept.definition.value == "Serum Cholesterol, measured on plasma"

    def test_find_missing(self, load):
        """Should return None for an undefined code."""
        assert load(CodeSystem, "codesystem-example.json").find_concept("ldl") is None

    def test_filter_operators(self, load):
        """Should resolve every filter operator to its enum member."""
        operators = load(CodeSystem, "codesystem-example.json").filter[0].operator
        assert [operator.value for operator in operators] == [FilterOperator.EQUALS, FilterOperator.IS_A]


class TestValueSet:
    """Tests for ValueSet compose and expansion."""

    def test_nested_contains(self, load):
        """Should parse nested expansion contains."""
        value_set = load(ValueSet, "valueset-example.json")
        nested = [inner for outer in value_set.expansion.contains for inner in outer.contains or []]
        assert nested

    def test_expansion_parameters(self, load):
        """Should resolve expansion parameter value variants."""
        parameters = load(ValueSet, "valueset-example.json").expansion.parameter
        assert {type(parameter.value).__name__ for parameter in parameters} == {"String", "Integer"}


class TestCapabilityStatement:
    """Tests for CapabilityStatement lookup."""

    def test_rest_resource(self, load):
        """Should find a resource entry by type."""
        statement = load(CapabilityStatement, "capabilitystatement-example.json")
        resource = statement.rest_resource("Patient")
        assert resource.conditional_read.to_json() == "full-support"
        assert [policy.to_json() for policy in resource.reference_policy] == ["literal", "logical"]

    def test_rest_resource_missing(self, load):
        """Should return None for an unsupported type or mode."""
        statement = load(CapabilityStatement, "capabilitystatement-example.json")
        assert statement.rest_resource("Observation") is None
        assert statement.rest_resource("Patient", mode="client") is None


class TestParameters:
    """Tests for Parameters lookup."""

    def test_get_parameter(self, sample_parameters):
        """Should find parameters and parts by name."""
        parameters = parse_resource(json.dumps(sample_parameters).encode("utf-8"))
        assert isinstance(parameters, Parameters)
        assert parameters.get_parameter("exact").value.value is True
        assert parameters.get_parameter("property").get_part("value").value.value == "Body weight"
        assert parameters.get_parameter("patient").resource.id.value == "p1"
        assert parameters.get_parameter("missing") is None
        assert parameters.get_parameter("exact").get_part("code") is None


class TestRecursiveElements:
    """Tests for backbone elements that nest themselves."""

    def test_packaging_depth(self, load):
        """Should count nested packaging layers."""
        product = load(PackagedProductDefinition, "packagedproductdefinition-example.json")
        assert product.packaging.depth() == 3

    def test_packaging_leaf(self, load):
        """Should reach contained items in the innermost layer."""
        product = load(PackagedProductDefinition, "packagedproductdefinition-example.json")
        leaf = product.packaging.packaging[0].packaging[0]
        assert leaf.contained_item[0].item.reference.reference.value == "ManufacturedItemDefinition/example"
        assert leaf.depth() == 1

    def test_plan_definition_actions(self, load):
        """Should parse nested actions with their choice elements."""
        plan = load(PlanDefinition, "plandefinition-example.json")
        actions = plan.action[0].action
        assert actions[0].definition.value == "http://example.org/fhir/ActivityDefinition/chlamydia-screening"
        assert type(actions[1].definition).__name__ == "Uri"
        assert actions[1].dynamic_value[0].path.value == "priority"

    def test_evidence_report_sections(self, load):
        """Should parse sections nested three levels deep."""
        report = load(EvidenceReport, "evidencereport-example.json")
        innermost = report.section[0].section[1].section[0]
        assert innermost.title.value == "Primary outcome"
        assert innermost.entry_quantity[0].value.value == "0.5"

    def test_questionnaire_items(self, load):
        """Should parse nested items and keep decimal initial values."""
        questionnaire = load(Questionnaire, "questionnaire-example.json")
        height = questionnaire.item[1].item[2]
        assert height.link_id.value == "2.3"
        assert height.initial[0].value.value == "1.70"


class TestImplementationGuide:
    """Tests for ImplementationGuide keyword fields and page sources."""

    def test_global_alias(self, load):
        """Should read the global member into global_."""
        guide = load(ImplementationGuide, "implementationguide-example.json")
        assert guide.global_[0].type.value == "Patient"
        assert "global" in resource_to_dict(guide)

    def test_page_source_variants(self, load):
        """Should resolve page sources to their variant types."""
        page = load(ImplementationGuide, "implementationguide-example.json").definition.page
        assert isinstance(page.source, Url)
        assert isinstance(page.page[0].source, Markdown)

    def test_round_trip(self, fixtures_dir):
        """Should emit the same document it read."""
        data = (fixtures_dir / "implementationguide-example.json").read_bytes()
        assert json_equal(data, emit_resource(parse_resource(data)))

"""Measure resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    DomainResource,
    Expression,
    Identifier,
    Markdown,
    Period,
    Reference,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class MeasureTerm(BackboneElement):
    code: CodeableConcept | None = None
    definition: Markdown | None = None


class MeasureGroupPopulation(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    description: Markdown | None = None
    criteria: Expression | None = None
    group_definition: Reference | None = None
    input_population_id: String | None = None
    aggregate_method: CodeableConcept | None = None


class MeasureGroupStratifierComponent(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    description: Markdown | None = None
    criteria: Expression | None = None
    group_definition: Reference | None = None


class MeasureGroupStratifier(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    description: Markdown | None = None
    criteria: Expression | None = None
    group_definition: Reference | None = None
    component: list[MeasureGroupStratifierComponent] | None = None


class MeasureGroup(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    description: Markdown | None = None
    type: list[CodeableConcept] | None = None
    subject: CodeableConcept | Reference | None = None
    basis: Code | None = None
    scoring: CodeableConcept | None = None
    scoring_unit: CodeableConcept | None = None
    rate_aggregation: Markdown | None = None
    improvement_notation: CodeableConcept | None = None
    library: list[Canonical] | None = None
    population: list[MeasureGroupPopulation] | None = None
    stratifier: list[MeasureGroupStratifier] | None = None


class MeasureSupplementalData(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    usage: list[CodeableConcept] | None = None
    description: Markdown | None = None
    criteria: Expression


class Measure(DomainResource):
    """The definition of a quality measure."""

    resource_type: ClassVar[str] = "Measure"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    subtitle: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    subject: CodeableConcept | Reference | None = None
    basis: Code | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    usage: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    approval_date: Date | None = None
    last_review_date: Date | None = None
    effective_period: Period | None = None
    topic: list[CodeableConcept] | None = None
    author: list[ContactDetail] | None = None
    editor: list[ContactDetail] | None = None
    reviewer: list[ContactDetail] | None = None
    endorser: list[ContactDetail] | None = None
    related_artifact: list[RelatedArtifact] | None = None
    library: list[Canonical] | None = None
    disclaimer: Markdown | None = None
    scoring: CodeableConcept | None = None
    scoring_unit: CodeableConcept | None = None
    composite_scoring: CodeableConcept | None = None
    type: list[CodeableConcept] | None = None
    risk_adjustment: Markdown | None = None
    rate_aggregation: Markdown | None = None
    rationale: Markdown | None = None
    clinical_recommendation_statement: Markdown | None = None
    improvement_notation: CodeableConcept | None = None
    term: list[MeasureTerm] | None = None
    guidance: Markdown | None = None
    group: list[MeasureGroup] | None = None
    supplemental_data: list[MeasureSupplementalData] | None = None

"""ValueSet resource."""

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
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    Period,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus
from fhir_r5.resources.code_system import FilterOperator


class ValueSetConceptDesignation(BackboneElement):
    language: Code | None = None
    use: Coding | None = None
    additional_use: list[Coding] | None = None
    value: String


class ValueSetComposeIncludeConcept(BackboneElement):
    code: Code
    display: String | None = None
    designation: list[ValueSetConceptDesignation] | None = None


class ValueSetComposeIncludeFilter(BackboneElement):
    property: Code
    op: Annotated[Code, Binding(FilterOperator)]
    value: String


class ValueSetComposeInclude(BackboneElement):
    """Include one or more codes from a code system or other value set(s); also used for excludes."""

    system: Uri | None = None
    version: String | None = None
    concept: list[ValueSetComposeIncludeConcept] | None = None
    filter: list[ValueSetComposeIncludeFilter] | None = None
    value_set: list[Canonical] | None = None
    copyright: String | None = None


class ValueSetCompose(BackboneElement):
    locked_date: Date | None = None
    inactive: Boolean | None = None
    include: list[ValueSetComposeInclude]
    exclude: list[ValueSetComposeInclude] | None = None
    property: list[String] | None = None


class ValueSetExpansionParameter(BackboneElement):
    name: String
    value: String | Boolean | Integer | Decimal | Uri | Code | DateTime | None = None


class ValueSetExpansionProperty(BackboneElement):
    code: Code
    uri: Uri | None = None


class ValueSetExpansionContainsProperty(BackboneElement):
    code: Code
    value: Code | Coding | String | Integer | Boolean | DateTime | Decimal


class ValueSetExpansionContains(BackboneElement):
    """Codes in the value set; entries may nest."""

    system: Uri | None = None
    abstract: Boolean | None = None
    inactive: Boolean | None = None
    version: String | None = None
    code: Code | None = None
    display: String | None = None
    designation: list[ValueSetConceptDesignation] | None = None
    property: list[ValueSetExpansionContainsProperty] | None = None
    contains: list["ValueSetExpansionContains"] | None = None


class ValueSetExpansion(BackboneElement):
    identifier: Uri | None = None
    next: Uri | None = None
    timestamp: DateTime
    total: Integer | None = None
    offset: Integer | None = None
    parameter: list[ValueSetExpansionParameter] | None = None
    property: list[ValueSetExpansionProperty] | None = None
    contains: list[ValueSetExpansionContains] | None = None


class ValueSetScope(BackboneElement):
    inclusion_criteria: String | None = None
    exclusion_criteria: String | None = None


class ValueSet(DomainResource):
    """A set of codes drawn from one or more code systems."""

    resource_type: ClassVar[str] = "ValueSet"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    immutable: Boolean | None = None
    purpose: Markdown | None = None
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
    compose: ValueSetCompose | None = None
    expansion: ValueSetExpansion | None = None
    scope: ValueSetScope | None = None


ValueSetExpansionContains.model_rebuild()

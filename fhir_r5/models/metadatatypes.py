"""
Metadata data types used mostly by canonical (knowledge) resources:
contact details, related artifacts, expressions, triggers, data
requirements, usage contexts and availability.
"""

from typing import Annotated

from fhir_r5.models.base import Binding, Element
from fhir_r5.models.codes import (
    DaysOfWeek,
    OperationParameterUse,
    PriceComponentType,
    PublicationStatus,
    RelatedArtifactType,
    SortDirection,
    TriggerType,
    ValueFilterComparator,
)
from fhir_r5.models.datatypes import (
    Address,
    Attachment,
    CodeableConcept,
    Coding,
    ContactPoint,
    Duration,
    HumanName,
    Money,
    Period,
    Quantity,
    Range,
    Reference,
    Timing,
)
from fhir_r5.models.primitives import (
    Boolean,
    Canonical,
    Code,
    Date,
    DateTime,
    Decimal,
    Id,
    Integer,
    Markdown,
    PositiveInt,
    String,
    Time,
    Uri,
    Url,
)


class ContactDetail(Element):
    """Contact information for a person or organization."""

    name: String | None = None
    telecom: list[ContactPoint] | None = None


class ExtendedContactDetail(Element):
    """Contact information with purpose, address and the responsible organization."""

    purpose: CodeableConcept | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None
    organization: Reference | None = None
    period: Period | None = None


class VirtualServiceDetail(Element):
    channel_type: Coding | None = None
    address: Url | String | ContactPoint | ExtendedContactDetail | None = None
    additional_info: list[Url] | None = None
    max_participants: PositiveInt | None = None
    session_key: String | None = None


class RelatedArtifact(Element):
    """Related artifacts such as additional documentation, justification, or bibliographic references."""

    type: Annotated[Code, Binding(RelatedArtifactType)]
    classifier: list[CodeableConcept] | None = None
    label: String | None = None
    display: String | None = None
    citation: Markdown | None = None
    document: Attachment | None = None
    resource: Canonical | None = None
    resource_reference: Reference | None = None
    publication_status: Annotated[Code | None, Binding(PublicationStatus)] = None
    publication_date: Date | None = None


class Expression(Element):
    """
    An expression that can be used to generate a value.

    The expression text is carried as data; evaluating it is left to a
    FHIRPath or CQL engine.
    """

    description: String | None = None
    name: Id | None = None
    language: Code | None = None
    expression: String | None = None
    reference: Uri | None = None


class DataRequirementCodeFilter(Element):
    path: String | None = None
    search_param: String | None = None
    value_set: Canonical | None = None
    code: list[Coding] | None = None


class DataRequirementDateFilter(Element):
    path: String | None = None
    search_param: String | None = None
    value: DateTime | Period | Duration | None = None


class DataRequirementValueFilter(Element):
    path: String | None = None
    search_param: String | None = None
    comparator: Annotated[Code | None, Binding(ValueFilterComparator)] = None
    value: DateTime | Period | Duration | None = None


class DataRequirementSort(Element):
    path: String
    direction: Annotated[Code, Binding(SortDirection)]


class DataRequirement(Element):
    """Describes a required data item for evaluation in terms of type, profile and filters."""

    type: Code
    profile: list[Canonical] | None = None
    subject: CodeableConcept | Reference | None = None
    must_support: list[String] | None = None
    code_filter: list[DataRequirementCodeFilter] | None = None
    date_filter: list[DataRequirementDateFilter] | None = None
    value_filter: list[DataRequirementValueFilter] | None = None
    limit: PositiveInt | None = None
    sort: list[DataRequirementSort] | None = None


class ParameterDefinition(Element):
    """Definition of a parameter to a module (Library, PlanDefinition...)."""

    name: Code | None = None
    use: Annotated[Code, Binding(OperationParameterUse)]
    min: Integer | None = None
    max: String | None = None
    documentation: String | None = None
    type: Code
    profile: Canonical | None = None


class TriggerDefinition(Element):
    type: Annotated[Code, Binding(TriggerType)]
    name: String | None = None
    code: CodeableConcept | None = None
    subscription_topic: Canonical | None = None
    timing: Timing | Reference | Date | DateTime | None = None
    data: list[DataRequirement] | None = None
    condition: Expression | None = None


class UsageContext(Element):
    """Describes the context of use for a conformance or knowledge resource."""

    code: Coding
    value: CodeableConcept | Quantity | Range | Reference


class AvailabilityAvailableTime(Element):
    days_of_week: Annotated[list[Code] | None, Binding(DaysOfWeek)] = None
    all_day: Boolean | None = None
    available_start_time: Time | None = None
    available_end_time: Time | None = None


class AvailabilityNotAvailableTime(Element):
    description: String | None = None
    during: Period | None = None


class Availability(Element):
    """Availability data for an item (opening hours, service times)."""

    available_time: list[AvailabilityAvailableTime] | None = None
    not_available_time: list[AvailabilityNotAvailableTime] | None = None


class MonetaryComponent(Element):
    type: Annotated[Code, Binding(PriceComponentType)]
    code: CodeableConcept | None = None
    factor: Decimal | None = None
    amount: Money | None = None

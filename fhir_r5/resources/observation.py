"""Observation resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    DateTime,
    DomainResource,
    Identifier,
    Instant,
    Integer,
    Markdown,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
    SampledData,
    String,
    Time,
    Timing,
)
from fhir_r5.models.codes import ObservationStatus


class TriggeredByType(str, Enum):
    REFLEX = "reflex"
    REPEAT = "repeat"
    RE_RUN = "re-run"


class ObservationTriggeredBy(BackboneElement):
    observation: Reference
    type: Annotated[Code, Binding(TriggeredByType)]
    reason: String | None = None


class ObservationReferenceRange(BackboneElement):
    """Guidance on how to interpret the value by comparison to a normal or recommended range."""

    low: Quantity | None = None
    high: Quantity | None = None
    normal_value: CodeableConcept | None = None
    type: CodeableConcept | None = None
    applies_to: list[CodeableConcept] | None = None
    age: Range | None = None
    text: Markdown | None = None


class ObservationComponent(BackboneElement):
    code: CodeableConcept
    value: (
        Quantity
        | CodeableConcept
        | String
        | Boolean
        | Integer
        | Range
        | Ratio
        | SampledData
        | Time
        | DateTime
        | Period
        | Attachment
        | Reference
        | None
    ) = None
    data_absent_reason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    reference_range: list[ObservationReferenceRange] | None = None


class Observation(DomainResource):
    """Measurements and simple assertions made about a patient, device or other subject."""

    resource_type: ClassVar[str] = "Observation"

    identifier: list[Identifier] | None = None
    instantiates: Canonical | Reference | None = None
    based_on: list[Reference] | None = None
    triggered_by: list[ObservationTriggeredBy] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(ObservationStatus)]
    category: list[CodeableConcept] | None = None
    code: CodeableConcept
    subject: Reference | None = None
    focus: list[Reference] | None = None
    encounter: Reference | None = None
    effective: DateTime | Period | Timing | Instant | None = None
    issued: Instant | None = None
    performer: list[Reference] | None = None
    value: (
        Quantity
        | CodeableConcept
        | String
        | Boolean
        | Integer
        | Range
        | Ratio
        | SampledData
        | Time
        | DateTime
        | Period
        | Attachment
        | Reference
        | None
    ) = None
    data_absent_reason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None
    body_site: CodeableConcept | None = None
    body_structure: Reference | None = None
    method: CodeableConcept | None = None
    specimen: Reference | None = None
    device: Reference | None = None
    reference_range: list[ObservationReferenceRange] | None = None
    has_member: list[Reference] | None = None
    derived_from: list[Reference] | None = None
    component: list[ObservationComponent] | None = None

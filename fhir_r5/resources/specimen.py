"""Specimen resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Duration,
    Identifier,
    Period,
    Quantity,
    Reference,
    String,
)


class SpecimenStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    UNSATISFACTORY = "unsatisfactory"
    ENTERED_IN_ERROR = "entered-in-error"


class SpecimenCombined(str, Enum):
    GROUPED = "grouped"
    POOLED = "pooled"


class SpecimenFeature(BackboneElement):
    type: CodeableConcept
    description: String


class SpecimenCollection(BackboneElement):
    """Collection details."""

    collector: Reference | None = None
    collected: DateTime | Period | None = None
    duration: Duration | None = None
    quantity: Quantity | None = None
    method: CodeableConcept | None = None
    device: CodeableReference | None = None
    procedure: Reference | None = None
    body_site: CodeableReference | None = None
    fasting_status: CodeableConcept | Duration | None = None


class SpecimenProcessing(BackboneElement):
    description: String | None = None
    method: CodeableConcept | None = None
    additive: list[Reference] | None = None
    time: DateTime | Period | None = None


class SpecimenContainer(BackboneElement):
    device: Reference
    location: Reference | None = None
    specimen_quantity: Quantity | None = None


class Specimen(DomainResource):
    """A sample to be used for analysis."""

    resource_type: ClassVar[str] = "Specimen"

    identifier: list[Identifier] | None = None
    accession_identifier: Identifier | None = None
    status: Annotated[Code | None, Binding(SpecimenStatus)] = None
    type: CodeableConcept | None = None
    subject: Reference | None = None
    received_time: DateTime | None = None
    parent: list[Reference] | None = None
    request: list[Reference] | None = None
    combined: Annotated[Code | None, Binding(SpecimenCombined)] = None
    role: list[CodeableConcept] | None = None
    feature: list[SpecimenFeature] | None = None
    collection: SpecimenCollection | None = None
    processing: list[SpecimenProcessing] | None = None
    container: list[SpecimenContainer] | None = None
    condition: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None

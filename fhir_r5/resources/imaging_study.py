"""ImagingStudy resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    Coding,
    DateTime,
    DomainResource,
    Id,
    Identifier,
    Reference,
    String,
    UnsignedInt,
)


class ImagingStudyStatus(str, Enum):
    REGISTERED = "registered"
    AVAILABLE = "available"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class ImagingStudySeriesPerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class ImagingStudySeriesInstance(BackboneElement):
    uid: Id
    sop_class: Coding
    number: UnsignedInt | None = None
    title: String | None = None


class ImagingStudySeries(BackboneElement):
    """Each study has one or more series of images or other content."""

    uid: Id
    number: UnsignedInt | None = None
    modality: CodeableConcept
    description: String | None = None
    number_of_instances: UnsignedInt | None = None
    endpoint: list[Reference] | None = None
    body_site: CodeableReference | None = None
    laterality: CodeableConcept | None = None
    specimen: list[Reference] | None = None
    started: DateTime | None = None
    performer: list[ImagingStudySeriesPerformer] | None = None
    instance: list[ImagingStudySeriesInstance] | None = None


class ImagingStudy(DomainResource):
    """A set of images produced in single study (one or more series of references images)."""

    resource_type: ClassVar[str] = "ImagingStudy"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(ImagingStudyStatus)]
    modality: list[CodeableConcept] | None = None
    subject: Reference
    encounter: Reference | None = None
    started: DateTime | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    referrer: Reference | None = None
    endpoint: list[Reference] | None = None
    number_of_series: UnsignedInt | None = None
    number_of_instances: UnsignedInt | None = None
    procedure: list[CodeableReference] | None = None
    location: Reference | None = None
    reason: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    description: String | None = None
    series: list[ImagingStudySeries] | None = None

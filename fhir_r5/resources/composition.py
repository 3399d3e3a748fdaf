"""Composition resource."""

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
    Identifier,
    Narrative,
    Period,
    Reference,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)


class CompositionStatus(str, Enum):
    REGISTERED = "registered"
    PARTIAL = "partial"
    PRELIMINARY = "preliminary"
    FINAL = "final"
    AMENDED = "amended"
    CORRECTED = "corrected"
    APPENDED = "appended"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    DEPRECATED = "deprecated"
    UNKNOWN = "unknown"


class CompositionAttester(BackboneElement):
    mode: CodeableConcept
    time: DateTime | None = None
    party: Reference | None = None


class CompositionEvent(BackboneElement):
    period: Period | None = None
    detail: list[CodeableReference] | None = None


class CompositionSection(BackboneElement):
    """Composition is broken into sections; sections nest."""

    title: String | None = None
    code: CodeableConcept | None = None
    author: list[Reference] | None = None
    focus: Reference | None = None
    text: Narrative | None = None
    ordered_by: CodeableConcept | None = None
    entry: list[Reference] | None = None
    empty_reason: CodeableConcept | None = None
    section: list["CompositionSection"] | None = None


class Composition(DomainResource):
    """A set of healthcare-related information assembled into a single logical package."""

    resource_type: ClassVar[str] = "Composition"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    status: Annotated[Code, Binding(CompositionStatus)]
    type: CodeableConcept
    category: list[CodeableConcept] | None = None
    subject: list[Reference] | None = None
    encounter: Reference | None = None
    date: DateTime
    use_context: list[UsageContext] | None = None
    author: list[Reference]
    name: String | None = None
    title: String
    note: list[Annotation] | None = None
    attester: list[CompositionAttester] | None = None
    custodian: Reference | None = None
    relates_to: list[RelatedArtifact] | None = None
    event: list[CompositionEvent] | None = None
    section: list[CompositionSection] | None = None


CompositionSection.model_rebuild()

"""ClinicalImpression resource."""

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
    Period,
    Reference,
    String,
    Uri,
)
from fhir_r5.models.codes import EventStatus


class ClinicalImpressionFinding(BackboneElement):
    item: CodeableReference | None = None
    basis: String | None = None


class ClinicalImpression(DomainResource):
    """A clinical assessment performed when planning treatments and management strategies for a patient."""

    resource_type: ClassVar[str] = "ClinicalImpression"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(EventStatus)]
    status_reason: CodeableConcept | None = None
    description: String | None = None
    subject: Reference
    encounter: Reference | None = None
    effective: DateTime | Period | None = None
    date: DateTime | None = None
    performer: Reference | None = None
    previous: Reference | None = None
    problem: list[Reference] | None = None
    change_pattern: CodeableConcept | None = None
    protocol: list[Uri] | None = None
    summary: String | None = None
    finding: list[ClinicalImpressionFinding] | None = None
    prognosis_codeable_concept: list[CodeableConcept] | None = None
    prognosis_reference: list[Reference] | None = None
    supporting_info: list[Reference] | None = None
    note: list[Annotation] | None = None

"""Procedure resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Age,
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Period,
    Range,
    Reference,
    String,
    Timing,
    Uri,
)
from fhir_r5.models.codes import EventStatus


class ProcedurePerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference
    on_behalf_of: Reference | None = None
    period: Period | None = None


class ProcedureFocalDevice(BackboneElement):
    action: CodeableConcept | None = None
    manipulated: Reference


class Procedure(DomainResource):
    """An action that is or was performed on or for a patient, practitioner, device, organization, or location."""

    resource_type: ClassVar[str] = "Procedure"

    identifier: list[Identifier] | None = None
    instantiates_canonical: list[Canonical] | None = None
    instantiates_uri: list[Uri] | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(EventStatus)]
    status_reason: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    code: CodeableConcept | None = None
    subject: Reference
    focus: Reference | None = None
    encounter: Reference | None = None
    occurrence: DateTime | Period | String | Age | Range | Timing | None = None
    recorded: DateTime | None = None
    recorder: Reference | None = None
    reported: Boolean | Reference | None = None
    performer: list[ProcedurePerformer] | None = None
    location: Reference | None = None
    reason: list[CodeableReference] | None = None
    body_site: list[CodeableConcept] | None = None
    outcome: CodeableConcept | None = None
    report: list[Reference] | None = None
    complication: list[CodeableReference] | None = None
    follow_up: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None
    focal_device: list[ProcedureFocalDevice] | None = None
    used: list[CodeableReference] | None = None
    supporting_info: list[Reference] | None = None

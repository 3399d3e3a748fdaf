"""ServiceRequest resource."""

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
    Markdown,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
    String,
    Timing,
    Uri,
)
from fhir_r5.models.codes import RequestIntent, RequestPriority, RequestStatus


class ServiceRequestOrderDetailParameter(BackboneElement):
    code: CodeableConcept
    value: (
        Quantity
        | Ratio
        | Range
        | Boolean
        | CodeableConcept
        | String
        | Period
    )


class ServiceRequestOrderDetail(BackboneElement):
    parameter_focus: CodeableReference | None = None
    parameter: list[ServiceRequestOrderDetailParameter]


class ServiceRequestPatientInstruction(BackboneElement):
    instruction: Markdown | Reference | None = None


class ServiceRequest(DomainResource):
    """A record of a request for service such as diagnostic investigations, treatments, or operations to be performed."""

    resource_type: ClassVar[str] = "ServiceRequest"

    identifier: list[Identifier] | None = None
    instantiates_canonical: list[Canonical] | None = None
    instantiates_uri: list[Uri] | None = None
    based_on: list[Reference] | None = None
    replaces: list[Reference] | None = None
    requisition: Identifier | None = None
    status: Annotated[Code, Binding(RequestStatus)]
    status_reason: CodeableConcept | None = None
    intent: Annotated[Code, Binding(RequestIntent)]
    category: list[CodeableConcept] | None = None
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    do_not_perform: Boolean | None = None
    code: CodeableReference | None = None
    order_detail: list[ServiceRequestOrderDetail] | None = None
    quantity: Quantity | Ratio | Range | None = None
    subject: Reference
    focus: list[Reference] | None = None
    encounter: Reference | None = None
    occurrence: DateTime | Period | Timing | String | Age | Range | None = None
    as_needed: Boolean | CodeableConcept | None = None
    authored_on: DateTime | None = None
    requester: Reference | None = None
    performer_type: CodeableConcept | None = None
    performer: list[Reference] | None = None
    location: list[CodeableReference] | None = None
    reason: list[CodeableReference] | None = None
    insurance: list[Reference] | None = None
    supporting_info: list[CodeableReference] | None = None
    specimen: list[Reference] | None = None
    body_site: list[CodeableConcept] | None = None
    body_structure: Reference | None = None
    note: list[Annotation] | None = None
    patient_instruction: list[ServiceRequestPatientInstruction] | None = None
    relevant_history: list[Reference] | None = None

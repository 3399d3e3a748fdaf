"""CommunicationRequest resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Period,
    Reference,
)
from fhir_r5.models.codes import RequestIntent, RequestPriority, RequestStatus


class CommunicationRequestPayload(BackboneElement):
    content: Attachment | Reference | CodeableConcept


class CommunicationRequest(DomainResource):
    """A request to convey information."""

    resource_type: ClassVar[str] = "CommunicationRequest"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    replaces: list[Reference] | None = None
    group_identifier: Identifier | None = None
    status: Annotated[Code, Binding(RequestStatus)]
    status_reason: CodeableConcept | None = None
    intent: Annotated[Code, Binding(RequestIntent)]
    category: list[CodeableConcept] | None = None
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    do_not_perform: Boolean | None = None
    medium: list[CodeableConcept] | None = None
    subject: Reference | None = None
    about: list[Reference] | None = None
    encounter: Reference | None = None
    payload: list[CommunicationRequestPayload] | None = None
    occurrence: DateTime | Period | None = None
    authored_on: DateTime | None = None
    requester: Reference | None = None
    recipient: list[Reference] | None = None
    information_provider: list[Reference] | None = None
    reason: list[CodeableReference] | None = None
    note: list[Annotation] | None = None

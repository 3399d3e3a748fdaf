"""Communication resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    Attachment,
    BackboneElement,
    Binding,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Reference,
    Uri,
)
from fhir_r5.models.codes import EventStatus, RequestPriority


class CommunicationPayload(BackboneElement):
    content: Attachment | Reference | CodeableConcept


class Communication(DomainResource):
    """A clinical or business level record of information being transmitted or shared."""

    resource_type: ClassVar[str] = "Communication"

    identifier: list[Identifier] | None = None
    instantiates_canonical: list[Canonical] | None = None
    instantiates_uri: list[Uri] | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    in_response_to: list[Reference] | None = None
    status: Annotated[Code, Binding(EventStatus)]
    status_reason: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    medium: list[CodeableConcept] | None = None
    subject: Reference | None = None
    topic: CodeableConcept | None = None
    about: list[Reference] | None = None
    encounter: Reference | None = None
    sent: DateTime | None = None
    received: DateTime | None = None
    recipient: list[Reference] | None = None
    sender: Reference | None = None
    reason: list[CodeableReference] | None = None
    payload: list[CommunicationPayload] | None = None
    note: list[Annotation] | None = None

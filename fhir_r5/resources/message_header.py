"""MessageHeader resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Canonical,
    Code,
    CodeableConcept,
    Coding,
    ContactPoint,
    DomainResource,
    Identifier,
    Reference,
    String,
    Url,
)


class ResponseType(str, Enum):
    OK = "ok"
    TRANSIENT_ERROR = "transient-error"
    FATAL_ERROR = "fatal-error"


class MessageHeaderDestination(BackboneElement):
    endpoint: Url | Reference | None = None
    name: String | None = None
    target: Reference | None = None
    receiver: Reference | None = None


class MessageHeaderSource(BackboneElement):
    endpoint: Url | Reference | None = None
    name: String | None = None
    software: String | None = None
    version: String | None = None
    contact: ContactPoint | None = None


class MessageHeaderResponse(BackboneElement):
    identifier: Identifier
    code: Annotated[Code, Binding(ResponseType)]
    details: Reference | None = None


class MessageHeader(DomainResource):
    """
    The header for a message exchange that is either requesting or
    responding to an action.

    The reference(s) in ``focus`` are the subject matter of the message.
    """

    resource_type: ClassVar[str] = "MessageHeader"

    event: Coding | Canonical
    destination: list[MessageHeaderDestination] | None = None
    sender: Reference | None = None
    author: Reference | None = None
    source: MessageHeaderSource
    responsible: Reference | None = None
    reason: CodeableConcept | None = None
    response: MessageHeaderResponse | None = None
    focus: list[Reference] | None = None
    definition: Canonical | None = None

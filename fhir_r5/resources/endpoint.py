"""Endpoint resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    ContactPoint,
    DomainResource,
    Identifier,
    Period,
    Reference,
    String,
    Url,
)


class EndpointStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    ERROR = "error"
    OFF = "off"
    ENTERED_IN_ERROR = "entered-in-error"


class EndpointPayload(BackboneElement):
    type: list[CodeableConcept] | None = None
    mime_type: list[Code] | None = None


class Endpoint(DomainResource):
    """The technical details of an endpoint that can be used for electronic services."""

    resource_type: ClassVar[str] = "Endpoint"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(EndpointStatus)]
    connection_type: list[CodeableConcept]
    name: String | None = None
    description: String | None = None
    environment_type: list[CodeableConcept] | None = None
    managing_organization: Reference | None = None
    contact: list[ContactPoint] | None = None
    period: Period | None = None
    payload: list[EndpointPayload] | None = None
    address: Url
    header: list[String] | None = None

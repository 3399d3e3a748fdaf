"""Location resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Address,
    Availability,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    Coding,
    Decimal,
    DomainResource,
    ExtendedContactDetail,
    Identifier,
    Markdown,
    Reference,
    String,
    VirtualServiceDetail,
)


class LocationStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"


class LocationMode(str, Enum):
    INSTANCE = "instance"
    KIND = "kind"


class LocationPosition(BackboneElement):
    """WGS84 coordinates of the location."""

    longitude: Decimal
    latitude: Decimal
    altitude: Decimal | None = None


class Location(DomainResource):
    """Details and position information for a place."""

    resource_type: ClassVar[str] = "Location"

    identifier: list[Identifier] | None = None
    status: Annotated[Code | None, Binding(LocationStatus)] = None
    operational_status: Coding | None = None
    name: String | None = None
    alias: list[String] | None = None
    description: Markdown | None = None
    mode: Annotated[Code | None, Binding(LocationMode)] = None
    type: list[CodeableConcept] | None = None
    contact: list[ExtendedContactDetail] | None = None
    address: Address | None = None
    form: CodeableConcept | None = None
    position: LocationPosition | None = None
    managing_organization: Reference | None = None
    part_of: Reference | None = None
    characteristic: list[CodeableConcept] | None = None
    hours_of_operation: list[Availability] | None = None
    virtual_service: list[VirtualServiceDetail] | None = None
    endpoint: list[Reference] | None = None

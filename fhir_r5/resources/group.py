"""Group resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    DomainResource,
    Identifier,
    Markdown,
    Period,
    Quantity,
    Range,
    Reference,
    String,
    UnsignedInt,
)


class GroupType(str, Enum):
    PERSON = "person"
    ANIMAL = "animal"
    PRACTITIONER = "practitioner"
    DEVICE = "device"
    CARETEAM = "careteam"
    HEALTHCARESERVICE = "healthcareservice"
    LOCATION = "location"
    ORGANIZATION = "organization"
    RELATEDPERSON = "relatedperson"
    SPECIMEN = "specimen"


class GroupMembershipBasis(str, Enum):
    DEFINITIONAL = "definitional"
    ENUMERATED = "enumerated"


class GroupCharacteristic(BackboneElement):
    code: CodeableConcept
    value: CodeableConcept | Boolean | Quantity | Range | Reference
    exclude: Boolean
    period: Period | None = None


class GroupMember(BackboneElement):
    entity: Reference
    period: Period | None = None
    inactive: Boolean | None = None


class Group(DomainResource):
    """
    Represents a defined collection of entities that may be discussed or
    acted upon collectively but which are not expected to act collectively.
    """

    resource_type: ClassVar[str] = "Group"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    type: Annotated[Code, Binding(GroupType)]
    membership: Annotated[Code, Binding(GroupMembershipBasis)]
    code: CodeableConcept | None = None
    name: String | None = None
    description: Markdown | None = None
    quantity: UnsignedInt | None = None
    managing_entity: Reference | None = None
    characteristic: list[GroupCharacteristic] | None = None
    member: list[GroupMember] | None = None

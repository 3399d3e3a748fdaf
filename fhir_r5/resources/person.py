"""Person resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Address,
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    ContactPoint,
    Date,
    DateTime,
    DomainResource,
    HumanName,
    Identifier,
    Reference,
)
from fhir_r5.models.codes import AdministrativeGender


class IdentityAssuranceLevel(str, Enum):
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    LEVEL4 = "level4"


class PersonCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class PersonLink(BackboneElement):
    target: Reference
    assurance: Annotated[Code | None, Binding(IdentityAssuranceLevel)] = None


class Person(DomainResource):
    """Demographics and administrative information about a person independent of a specific health-related context."""

    resource_type: ClassVar[str] = "Person"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: Annotated[Code | None, Binding(AdministrativeGender)] = None
    birth_date: Date | None = None
    deceased: Boolean | DateTime | None = None
    address: list[Address] | None = None
    marital_status: CodeableConcept | None = None
    photo: list[Attachment] | None = None
    communication: list[PersonCommunication] | None = None
    managing_organization: Reference | None = None
    link: list[PersonLink] | None = None

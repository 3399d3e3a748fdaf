"""Patient resource."""

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
    Integer,
    Period,
    Reference,
)
from fhir_r5.models.codes import AdministrativeGender


class LinkType(str, Enum):
    REPLACED_BY = "replaced-by"
    REPLACES = "replaces"
    REFER = "refer"
    SEEALSO = "seealso"


class PatientContact(BackboneElement):
    """A contact party (guardian, partner, friend) for the patient."""

    relationship: list[CodeableConcept] | None = None
    name: HumanName | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None
    gender: Annotated[Code | None, Binding(AdministrativeGender)] = None
    organization: Reference | None = None
    period: Period | None = None


class PatientCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class PatientLink(BackboneElement):
    other: Reference
    type: Annotated[Code, Binding(LinkType)]


class Patient(DomainResource):
    """Demographics and other administrative information about an individual receiving care."""

    resource_type: ClassVar[str] = "Patient"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: Annotated[Code | None, Binding(AdministrativeGender)] = None
    birth_date: Date | None = None
    deceased: Boolean | DateTime | None = None
    address: list[Address] | None = None
    marital_status: CodeableConcept | None = None
    multiple_birth: Boolean | Integer | None = None
    photo: list[Attachment] | None = None
    contact: list[PatientContact] | None = None
    communication: list[PatientCommunication] | None = None
    general_practitioner: list[Reference] | None = None
    managing_organization: Reference | None = None
    link: list[PatientLink] | None = None

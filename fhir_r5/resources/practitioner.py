"""Practitioner resource."""

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
    Period,
    Reference,
)
from fhir_r5.models.codes import AdministrativeGender


class PractitionerQualification(BackboneElement):
    identifier: list[Identifier] | None = None
    code: CodeableConcept
    period: Period | None = None
    issuer: Reference | None = None


class PractitionerCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class Practitioner(DomainResource):
    """A person with a formal responsibility in the provisioning of healthcare or related services."""

    resource_type: ClassVar[str] = "Practitioner"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: Annotated[Code | None, Binding(AdministrativeGender)] = None
    birth_date: Date | None = None
    deceased: Boolean | DateTime | None = None
    address: list[Address] | None = None
    photo: list[Attachment] | None = None
    qualification: list[PractitionerQualification] | None = None
    communication: list[PractitionerCommunication] | None = None

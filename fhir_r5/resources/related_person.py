"""RelatedPerson resource."""

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
    DomainResource,
    HumanName,
    Identifier,
    Period,
    Reference,
)
from fhir_r5.models.codes import AdministrativeGender


class RelatedPersonCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class RelatedPerson(DomainResource):
    """A person that is related to a patient, but who is not a direct target of care."""

    resource_type: ClassVar[str] = "RelatedPerson"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    patient: Reference
    relationship: list[CodeableConcept] | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: Annotated[Code | None, Binding(AdministrativeGender)] = None
    birth_date: Date | None = None
    address: list[Address] | None = None
    photo: list[Attachment] | None = None
    period: Period | None = None
    communication: list[RelatedPersonCommunication] | None = None

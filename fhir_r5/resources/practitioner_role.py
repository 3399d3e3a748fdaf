"""PractitionerRole resource."""

from typing import ClassVar

from fhir_r5.models import (
    Availability,
    Boolean,
    CodeableConcept,
    DomainResource,
    ExtendedContactDetail,
    Identifier,
    Period,
    Reference,
)


class PractitionerRole(DomainResource):
    """Roles/organizations the practitioner is associated with."""

    resource_type: ClassVar[str] = "PractitionerRole"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    period: Period | None = None
    practitioner: Reference | None = None
    organization: Reference | None = None
    code: list[CodeableConcept] | None = None
    specialty: list[CodeableConcept] | None = None
    location: list[Reference] | None = None
    healthcare_service: list[Reference] | None = None
    contact: list[ExtendedContactDetail] | None = None
    characteristic: list[CodeableConcept] | None = None
    communication: list[CodeableConcept] | None = None
    availability: list[Availability] | None = None
    endpoint: list[Reference] | None = None

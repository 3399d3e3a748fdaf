"""OrganizationAffiliation resource."""

from typing import ClassVar

from fhir_r5.models import (
    Boolean,
    CodeableConcept,
    DomainResource,
    ExtendedContactDetail,
    Identifier,
    Period,
    Reference,
)


class OrganizationAffiliation(DomainResource):
    """Defines an affiliation/association/relationship between two distinct organizations."""

    resource_type: ClassVar[str] = "OrganizationAffiliation"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    period: Period | None = None
    organization: Reference | None = None
    participating_organization: Reference | None = None
    network: list[Reference] | None = None
    code: list[CodeableConcept] | None = None
    specialty: list[CodeableConcept] | None = None
    location: list[Reference] | None = None
    healthcare_service: list[Reference] | None = None
    contact: list[ExtendedContactDetail] | None = None
    endpoint: list[Reference] | None = None

"""Organization resource."""

from typing import ClassVar

from fhir_r5.models import (
    BackboneElement,
    Boolean,
    CodeableConcept,
    DomainResource,
    ExtendedContactDetail,
    Identifier,
    Markdown,
    Period,
    Reference,
    String,
)


class OrganizationQualification(BackboneElement):
    identifier: list[Identifier] | None = None
    code: CodeableConcept
    period: Period | None = None
    issuer: Reference | None = None


class Organization(DomainResource):
    """A formally or informally recognized grouping of people or organizations."""

    resource_type: ClassVar[str] = "Organization"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    type: list[CodeableConcept] | None = None
    name: String | None = None
    alias: list[String] | None = None
    description: Markdown | None = None
    contact: list[ExtendedContactDetail] | None = None
    part_of: Reference | None = None
    endpoint: list[Reference] | None = None
    qualification: list[OrganizationQualification] | None = None

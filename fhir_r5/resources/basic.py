"""Basic resource."""

from typing import ClassVar

from fhir_r5.models import CodeableConcept, Date, DomainResource, Identifier, Reference


class Basic(DomainResource):
    """Resource for non-supported content."""

    resource_type: ClassVar[str] = "Basic"

    identifier: list[Identifier] | None = None
    code: CodeableConcept
    subject: Reference | None = None
    created: Date | None = None
    author: Reference | None = None

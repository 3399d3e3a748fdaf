"""Schedule resource."""

from typing import ClassVar

from fhir_r5.models import (
    Boolean,
    CodeableConcept,
    CodeableReference,
    DomainResource,
    Identifier,
    Markdown,
    Period,
    Reference,
    String,
)


class Schedule(DomainResource):
    """A container for slots of time that may be available for booking appointments."""

    resource_type: ClassVar[str] = "Schedule"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    service_category: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    specialty: list[CodeableConcept] | None = None
    name: String | None = None
    actor: list[Reference]
    planning_horizon: Period | None = None
    comment: Markdown | None = None

"""Slot resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    DomainResource,
    Identifier,
    Instant,
    Reference,
    String,
)


class SlotStatus(str, Enum):
    BUSY = "busy"
    FREE = "free"
    BUSY_UNAVAILABLE = "busy-unavailable"
    BUSY_TENTATIVE = "busy-tentative"
    ENTERED_IN_ERROR = "entered-in-error"


class Slot(DomainResource):
    """A slot of time on a schedule that may be available for booking appointments."""

    resource_type: ClassVar[str] = "Slot"

    identifier: list[Identifier] | None = None
    service_category: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    specialty: list[CodeableConcept] | None = None
    appointment_type: list[CodeableConcept] | None = None
    schedule: Reference
    status: Annotated[Code, Binding(SlotStatus)]
    start: Instant
    end: Instant
    overbooked: Boolean | None = None
    comment: String | None = None

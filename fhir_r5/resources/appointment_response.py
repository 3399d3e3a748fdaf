"""AppointmentResponse resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    Date,
    DomainResource,
    Identifier,
    Instant,
    Markdown,
    PositiveInt,
    Reference,
)


class AppointmentResponseStatus(str, Enum):
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"
    NEEDS_ACTION = "needs-action"
    ENTERED_IN_ERROR = "entered-in-error"


class AppointmentResponse(DomainResource):
    """A reply to an appointment request for a patient and/or practitioner(s)."""

    resource_type: ClassVar[str] = "AppointmentResponse"

    identifier: list[Identifier] | None = None
    appointment: Reference
    proposed_new_time: Boolean | None = None
    start: Instant | None = None
    end: Instant | None = None
    participant_type: list[CodeableConcept] | None = None
    actor: Reference | None = None
    participant_status: Annotated[Code, Binding(AppointmentResponseStatus)]
    comment: Markdown | None = None
    recurring: Boolean | None = None
    occurrence_date: Date | None = None
    recurrence_id: PositiveInt | None = None

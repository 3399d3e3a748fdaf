"""Appointment resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    Coding,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Instant,
    Period,
    PositiveInt,
    Reference,
    String,
    VirtualServiceDetail,
)


class AppointmentStatus(str, Enum):
    PROPOSED = "proposed"
    PENDING = "pending"
    BOOKED = "booked"
    ARRIVED = "arrived"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"
    NOSHOW = "noshow"
    ENTERED_IN_ERROR = "entered-in-error"
    CHECKED_IN = "checked-in"
    WAITLIST = "waitlist"


class ParticipationStatus(str, Enum):
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"
    NEEDS_ACTION = "needs-action"


class AppointmentParticipant(BackboneElement):
    type: list[CodeableConcept] | None = None
    period: Period | None = None
    actor: Reference | None = None
    required: Boolean | None = None
    status: Annotated[Code, Binding(ParticipationStatus)]


class AppointmentRecurrenceTemplateWeeklyTemplate(BackboneElement):
    monday: Boolean | None = None
    tuesday: Boolean | None = None
    wednesday: Boolean | None = None
    thursday: Boolean | None = None
    friday: Boolean | None = None
    saturday: Boolean | None = None
    sunday: Boolean | None = None
    week_interval: PositiveInt | None = None


class AppointmentRecurrenceTemplateMonthlyTemplate(BackboneElement):
    day_of_month: PositiveInt | None = None
    nth_week_of_month: Coding | None = None
    day_of_week: Coding | None = None
    month_interval: PositiveInt


class AppointmentRecurrenceTemplateYearlyTemplate(BackboneElement):
    year_interval: PositiveInt


class AppointmentRecurrenceTemplate(BackboneElement):
    """Details of the recurrence pattern or template used to generate occurrences."""

    timezone: CodeableConcept | None = None
    recurrence_type: CodeableConcept
    last_occurrence_date: Date | None = None
    occurrence_count: PositiveInt | None = None
    occurrence_date: list[Date] | None = None
    weekly_template: AppointmentRecurrenceTemplateWeeklyTemplate | None = None
    monthly_template: AppointmentRecurrenceTemplateMonthlyTemplate | None = None
    yearly_template: AppointmentRecurrenceTemplateYearlyTemplate | None = None
    excluding_date: list[Date] | None = None
    excluding_recurrence_id: list[PositiveInt] | None = None


class Appointment(DomainResource):
    """A booking of a healthcare event among patient(s), practitioner(s), related person(s) and/or device(s)."""

    resource_type: ClassVar[str] = "Appointment"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(AppointmentStatus)]
    cancellation_reason: CodeableConcept | None = None
    class_: list[CodeableConcept] | None = Field(default=None, alias="class")
    service_category: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    specialty: list[CodeableConcept] | None = None
    appointment_type: CodeableConcept | None = None
    reason: list[CodeableReference] | None = None
    priority: CodeableConcept | None = None
    description: String | None = None
    replaces: list[Reference] | None = None
    virtual_service: list[VirtualServiceDetail] | None = None
    supporting_information: list[Reference] | None = None
    previous_appointment: Reference | None = None
    originating_appointment: Reference | None = None
    start: Instant | None = None
    end: Instant | None = None
    minutes_duration: PositiveInt | None = None
    requested_period: list[Period] | None = None
    slot: list[Reference] | None = None
    account: list[Reference] | None = None
    created: DateTime | None = None
    cancellation_date: DateTime | None = None
    note: list[Annotation] | None = None
    patient_instruction: list[CodeableReference] | None = None
    based_on: list[Reference] | None = None
    subject: Reference | None = None
    participant: list[AppointmentParticipant]
    recurrence_id: PositiveInt | None = None
    occurrence_changed: Boolean | None = None
    recurrence_template: list[AppointmentRecurrenceTemplate] | None = None

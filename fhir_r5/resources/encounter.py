"""Encounter resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Duration,
    Identifier,
    Period,
    Reference,
    VirtualServiceDetail,
)


class EncounterStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    DISCHARGED = "discharged"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISCONTINUED = "discontinued"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class EncounterLocationStatus(str, Enum):
    PLANNED = "planned"
    ACTIVE = "active"
    RESERVED = "reserved"
    COMPLETED = "completed"


class EncounterParticipant(BackboneElement):
    type: list[CodeableConcept] | None = None
    period: Period | None = None
    actor: Reference | None = None


class EncounterReason(BackboneElement):
    use: list[CodeableConcept] | None = None
    value: list[CodeableReference] | None = None


class EncounterDiagnosis(BackboneElement):
    condition: list[CodeableReference] | None = None
    use: list[CodeableConcept] | None = None


class EncounterAdmission(BackboneElement):
    """Details about the admission to a healthcare service."""

    pre_admission_identifier: Identifier | None = None
    origin: Reference | None = None
    admit_source: CodeableConcept | None = None
    re_admission: CodeableConcept | None = None
    destination: Reference | None = None
    discharge_disposition: CodeableConcept | None = None


class EncounterLocation(BackboneElement):
    location: Reference
    status: Annotated[Code | None, Binding(EncounterLocationStatus)] = None
    form: CodeableConcept | None = None
    period: Period | None = None


class Encounter(DomainResource):
    """An interaction between a patient and healthcare provider(s)."""

    resource_type: ClassVar[str] = "Encounter"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(EncounterStatus)]
    class_: list[CodeableConcept] | None = Field(default=None, alias="class")
    priority: CodeableConcept | None = None
    type: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    subject: Reference | None = None
    subject_status: CodeableConcept | None = None
    episode_of_care: list[Reference] | None = None
    based_on: list[Reference] | None = None
    care_team: list[Reference] | None = None
    part_of: Reference | None = None
    service_provider: Reference | None = None
    participant: list[EncounterParticipant] | None = None
    appointment: list[Reference] | None = None
    virtual_service: list[VirtualServiceDetail] | None = None
    actual_period: Period | None = None
    planned_start_date: DateTime | None = None
    planned_end_date: DateTime | None = None
    length: Duration | None = None
    reason: list[EncounterReason] | None = None
    diagnosis: list[EncounterDiagnosis] | None = None
    account: list[Reference] | None = None
    diet_preference: list[CodeableConcept] | None = None
    special_arrangement: list[CodeableConcept] | None = None
    special_courtesy: list[CodeableConcept] | None = None
    admission: EncounterAdmission | None = None
    location: list[EncounterLocation] | None = None

"""MedicationDispense resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Dosage,
    Identifier,
    Quantity,
    Reference,
)


class MedicationDispenseStatus(str, Enum):
    PREPARATION = "preparation"
    IN_PROGRESS = "in-progress"
    CANCELLED = "cancelled"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    STOPPED = "stopped"
    DECLINED = "declined"
    UNKNOWN = "unknown"


class MedicationDispensePerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class MedicationDispenseSubstitution(BackboneElement):
    was_substituted: Boolean
    type: CodeableConcept | None = None
    reason: list[CodeableConcept] | None = None
    responsible_party: Reference | None = None


class MedicationDispense(DomainResource):
    """Dispensing a medication to a named patient."""

    resource_type: ClassVar[str] = "MedicationDispense"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(MedicationDispenseStatus)]
    status_reason: CodeableReference | None = None
    category: list[CodeableConcept] | None = None
    medication: CodeableReference
    subject: Reference
    encounter: Reference | None = None
    supporting_information: list[Reference] | None = None
    performer: list[MedicationDispensePerformer] | None = None
    location: Reference | None = None
    authorizing_prescription: list[Reference] | None = None
    type: CodeableConcept | None = None
    quantity: Quantity | None = None
    days_supply: Quantity | None = None
    recorded: DateTime | None = None
    when_prepared: DateTime | None = None
    when_handed_over: DateTime | None = None
    destination: Reference | None = None
    receiver: list[Reference] | None = None
    note: list[Annotation] | None = None
    dosage_instruction: list[Dosage] | None = None
    substitution: MedicationDispenseSubstitution | None = None
    event_history: list[Reference] | None = None

"""MedicationRequest resource."""

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
    Duration,
    Identifier,
    Markdown,
    Period,
    Quantity,
    Reference,
    UnsignedInt,
)
from fhir_r5.models.codes import RequestPriority


class MedicationRequestStatus(str, Enum):
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    ENDED = "ended"
    STOPPED = "stopped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    DRAFT = "draft"
    UNKNOWN = "unknown"


class MedicationRequestIntent(str, Enum):
    PROPOSAL = "proposal"
    PLAN = "plan"
    ORDER = "order"
    ORIGINAL_ORDER = "original-order"
    REFLEX_ORDER = "reflex-order"
    FILLER_ORDER = "filler-order"
    INSTANCE_ORDER = "instance-order"
    OPTION = "option"


class MedicationRequestDispenseRequestInitialFill(BackboneElement):
    quantity: Quantity | None = None
    duration: Duration | None = None


class MedicationRequestDispenseRequest(BackboneElement):
    """Medication supply authorization."""

    initial_fill: MedicationRequestDispenseRequestInitialFill | None = None
    dispense_interval: Duration | None = None
    validity_period: Period | None = None
    number_of_repeats_allowed: UnsignedInt | None = None
    quantity: Quantity | None = None
    expected_supply_duration: Duration | None = None
    dispenser: Reference | None = None
    dispenser_instruction: list[Annotation] | None = None
    dose_administration_aid: CodeableConcept | None = None


class MedicationRequestSubstitution(BackboneElement):
    allowed: Boolean | CodeableConcept
    reason: CodeableConcept | None = None


class MedicationRequest(DomainResource):
    """
    An order or request for both supply of the medication and the
    instructions for administration of the medication to a patient.
    """

    resource_type: ClassVar[str] = "MedicationRequest"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    prior_prescription: Reference | None = None
    group_identifier: Identifier | None = None
    status: Annotated[Code, Binding(MedicationRequestStatus)]
    status_reason: CodeableConcept | None = None
    status_changed: DateTime | None = None
    intent: Annotated[Code, Binding(MedicationRequestIntent)]
    category: list[CodeableConcept] | None = None
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    do_not_perform: Boolean | None = None
    medication: CodeableReference
    subject: Reference
    information_source: list[Reference] | None = None
    encounter: Reference | None = None
    supporting_information: list[Reference] | None = None
    authored_on: DateTime | None = None
    requester: Reference | None = None
    reported: Boolean | None = None
    performer_type: CodeableConcept | None = None
    performer: list[Reference] | None = None
    device: list[CodeableReference] | None = None
    recorder: Reference | None = None
    reason: list[CodeableReference] | None = None
    course_of_therapy_type: CodeableConcept | None = None
    insurance: list[Reference] | None = None
    note: list[Annotation] | None = None
    rendered_dosage_instruction: Markdown | None = None
    effective_dose_period: Period | None = None
    dosage_instruction: list[Dosage] | None = None
    dispense_request: MedicationRequestDispenseRequest | None = None
    substitution: MedicationRequestSubstitution | None = None
    event_history: list[Reference] | None = None

"""MedicationAdministration resource."""

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
    Identifier,
    Period,
    Quantity,
    Ratio,
    Reference,
    String,
    Timing,
)


class MedicationAdministrationStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    NOT_DONE = "not-done"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    STOPPED = "stopped"
    UNKNOWN = "unknown"


class MedicationAdministrationPerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class MedicationAdministrationDosage(BackboneElement):
    """Details of how medication was taken."""

    text: String | None = None
    site: CodeableConcept | None = None
    route: CodeableConcept | None = None
    method: CodeableConcept | None = None
    dose: Quantity | None = None
    rate: Ratio | Quantity | None = None


class MedicationAdministration(DomainResource):
    """Administration of medication to a patient."""

    resource_type: ClassVar[str] = "MedicationAdministration"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(MedicationAdministrationStatus)]
    status_reason: list[CodeableConcept] | None = None
    category: list[CodeableConcept] | None = None
    medication: CodeableReference
    subject: Reference
    encounter: Reference | None = None
    supporting_information: list[Reference] | None = None
    occurrence: DateTime | Period | Timing | None = None
    recorded: DateTime | None = None
    is_sub_potent: Boolean | None = None
    sub_potent_reason: list[CodeableConcept] | None = None
    performer: list[MedicationAdministrationPerformer] | None = None
    reason: list[CodeableReference] | None = None
    request: Reference | None = None
    device: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    dosage: MedicationAdministrationDosage | None = None
    event_history: list[Reference] | None = None

"""Goal resource."""

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
    Date,
    DomainResource,
    Duration,
    Identifier,
    Integer,
    Quantity,
    Range,
    Ratio,
    Reference,
    String,
)


class GoalLifecycleStatus(str, Enum):
    PROPOSED = "proposed"
    PLANNED = "planned"
    ACCEPTED = "accepted"
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    REJECTED = "rejected"


class GoalTarget(BackboneElement):
    """Target outcome for the goal."""

    measure: CodeableConcept | None = None
    detail: (
        Quantity
        | Range
        | CodeableConcept
        | String
        | Boolean
        | Integer
        | Ratio
        | None
    ) = None
    due: Date | Duration | None = None


class Goal(DomainResource):
    """Describes the intended objective(s) for a patient, group or organization."""

    resource_type: ClassVar[str] = "Goal"

    identifier: list[Identifier] | None = None
    lifecycle_status: Annotated[Code, Binding(GoalLifecycleStatus)]
    achievement_status: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    continuous: Boolean | None = None
    priority: CodeableConcept | None = None
    description: CodeableConcept
    subject: Reference
    start: Date | CodeableConcept | None = None
    target: list[GoalTarget] | None = None
    status_date: Date | None = None
    status_reason: String | None = None
    source: Reference | None = None
    addresses: list[Reference] | None = None
    note: list[Annotation] | None = None
    outcome: list[CodeableReference] | None = None

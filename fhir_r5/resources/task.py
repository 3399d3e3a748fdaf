"""Task resource."""

from enum import Enum
from typing import Annotated, Any, ClassVar

from pydantic import Field, field_validator

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    OpenType,
    Period,
    PositiveInt,
    Reference,
    String,
    Uri,
)
from fhir_r5.models.base import check_open_type
from fhir_r5.models.codes import RequestPriority


class TaskStatus(str, Enum):
    DRAFT = "draft"
    REQUESTED = "requested"
    RECEIVED = "received"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    READY = "ready"
    CANCELLED = "cancelled"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    FAILED = "failed"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"


class TaskIntent(str, Enum):
    UNKNOWN = "unknown"
    PROPOSAL = "proposal"
    PLAN = "plan"
    ORDER = "order"
    ORIGINAL_ORDER = "original-order"
    REFLEX_ORDER = "reflex-order"
    FILLER_ORDER = "filler-order"
    INSTANCE_ORDER = "instance-order"
    OPTION = "option"


class TaskPerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class TaskRestriction(BackboneElement):
    repetitions: PositiveInt | None = None
    period: Period | None = None
    recipient: list[Reference] | None = None


class TaskInput(BackboneElement):
    type: CodeableConcept
    value: Annotated[Any, OpenType()]

    _check_open_type = field_validator("value")(check_open_type)


class TaskOutput(BackboneElement):
    type: CodeableConcept
    value: Annotated[Any, OpenType()]

    _check_open_type = field_validator("value")(check_open_type)


class Task(DomainResource):
    """A task to be performed."""

    resource_type: ClassVar[str] = "Task"

    identifier: list[Identifier] | None = None
    instantiates_canonical: Canonical | None = None
    instantiates_uri: Uri | None = None
    based_on: list[Reference] | None = None
    group_identifier: Identifier | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(TaskStatus)]
    status_reason: CodeableReference | None = None
    business_status: CodeableConcept | None = None
    intent: Annotated[Code, Binding(TaskIntent)]
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    do_not_perform: Boolean | None = None
    code: CodeableConcept | None = None
    description: String | None = None
    focus: Reference | None = None
    for_: Reference | None = Field(default=None, alias="for")
    encounter: Reference | None = None
    requested_period: Period | None = None
    execution_period: Period | None = None
    authored_on: DateTime | None = None
    last_modified: DateTime | None = None
    requester: Reference | None = None
    requested_performer: list[CodeableReference] | None = None
    owner: Reference | None = None
    performer: list[TaskPerformer] | None = None
    location: Reference | None = None
    reason: list[CodeableReference] | None = None
    insurance: list[Reference] | None = None
    note: list[Annotation] | None = None
    relevant_history: list[Reference] | None = None
    restriction: TaskRestriction | None = None
    input: list[TaskInput] | None = None
    output: list[TaskOutput] | None = None

"""Transport resource."""

from enum import Enum
from typing import Annotated, Any, ClassVar

from pydantic import Field, field_validator

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
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
from fhir_r5.resources.task import TaskIntent


class TransportStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"
    CANCELLED = "cancelled"
    PLANNED = "planned"
    ENTERED_IN_ERROR = "entered-in-error"


class TransportRestriction(BackboneElement):
    repetitions: PositiveInt | None = None
    period: Period | None = None
    recipient: list[Reference] | None = None


class TransportInput(BackboneElement):
    type: CodeableConcept
    value: Annotated[Any, OpenType()]

    _check_open_type = field_validator("value")(check_open_type)


class TransportOutput(BackboneElement):
    type: CodeableConcept
    value: Annotated[Any, OpenType()]

    _check_open_type = field_validator("value")(check_open_type)


class Transport(DomainResource):
    """Record of transport of item."""

    resource_type: ClassVar[str] = "Transport"

    identifier: list[Identifier] | None = None
    instantiates_canonical: Canonical | None = None
    instantiates_uri: Uri | None = None
    based_on: list[Reference] | None = None
    group_identifier: Identifier | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code | None, Binding(TransportStatus)] = None
    status_reason: CodeableConcept | None = None
    intent: Annotated[Code, Binding(TaskIntent)]
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    code: CodeableConcept | None = None
    description: String | None = None
    focus: Reference | None = None
    for_: Reference | None = Field(default=None, alias="for")
    encounter: Reference | None = None
    completion_time: DateTime | None = None
    authored_on: DateTime | None = None
    last_modified: DateTime | None = None
    requester: Reference | None = None
    performer_type: list[CodeableConcept] | None = None
    owner: Reference | None = None
    location: Reference | None = None
    insurance: list[Reference] | None = None
    note: list[Annotation] | None = None
    relevant_history: list[Reference] | None = None
    restriction: TransportRestriction | None = None
    input: list[TransportInput] | None = None
    output: list[TransportOutput] | None = None
    requested_location: Reference
    current_location: Reference
    reason: CodeableReference | None = None
    history: Reference | None = None

"""GuidanceResponse resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    Binding,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    DataRequirement,
    DateTime,
    DomainResource,
    Identifier,
    Reference,
    Uri,
)


class GuidanceResponseStatus(str, Enum):
    SUCCESS = "success"
    DATA_REQUESTED = "data-requested"
    DATA_REQUIRED = "data-required"
    IN_PROGRESS = "in-progress"
    FAILURE = "failure"
    ENTERED_IN_ERROR = "entered-in-error"


class GuidanceResponse(DomainResource):
    """The formal response to a guidance request."""

    resource_type: ClassVar[str] = "GuidanceResponse"

    request_identifier: Identifier | None = None
    identifier: list[Identifier] | None = None
    module: Uri | Canonical | CodeableConcept
    status: Annotated[Code, Binding(GuidanceResponseStatus)]
    subject: Reference | None = None
    encounter: Reference | None = None
    occurrence_date_time: DateTime | None = None
    performer: Reference | None = None
    reason: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    evaluation_message: Reference | None = None
    output_parameters: Reference | None = None
    result: list[Reference] | None = None
    data_requirement: list[DataRequirement] | None = None

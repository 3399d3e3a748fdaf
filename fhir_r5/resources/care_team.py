"""CareTeam resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    ContactPoint,
    DomainResource,
    Identifier,
    Period,
    Reference,
    String,
    Timing,
)


class CareTeamStatus(str, Enum):
    PROPOSED = "proposed"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"
    ENTERED_IN_ERROR = "entered-in-error"


class CareTeamParticipant(BackboneElement):
    role: CodeableConcept | None = None
    member: Reference | None = None
    on_behalf_of: Reference | None = None
    coverage: Period | Timing | None = None


class CareTeam(DomainResource):
    """Planned participants in the coordination and delivery of care."""

    resource_type: ClassVar[str] = "CareTeam"

    identifier: list[Identifier] | None = None
    status: Annotated[Code | None, Binding(CareTeamStatus)] = None
    category: list[CodeableConcept] | None = None
    name: String | None = None
    subject: Reference | None = None
    period: Period | None = None
    participant: list[CareTeamParticipant] | None = None
    reason: list[CodeableReference] | None = None
    managing_organization: list[Reference] | None = None
    telecom: list[ContactPoint] | None = None
    note: list[Annotation] | None = None

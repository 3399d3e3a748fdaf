"""EpisodeOfCare resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DomainResource,
    Identifier,
    Period,
    Reference,
)


class EpisodeOfCareStatus(str, Enum):
    PLANNED = "planned"
    WAITLIST = "waitlist"
    ACTIVE = "active"
    ONHOLD = "onhold"
    FINISHED = "finished"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"


class EpisodeOfCareStatusHistory(BackboneElement):
    status: Annotated[Code, Binding(EpisodeOfCareStatus)]
    period: Period


class EpisodeOfCareReason(BackboneElement):
    use: CodeableConcept | None = None
    value: list[CodeableReference] | None = None


class EpisodeOfCareDiagnosis(BackboneElement):
    condition: list[CodeableReference] | None = None
    use: CodeableConcept | None = None


class EpisodeOfCare(DomainResource):
    """An association of a Patient with an Organization and Healthcare Provider(s) for a period of time."""

    resource_type: ClassVar[str] = "EpisodeOfCare"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(EpisodeOfCareStatus)]
    status_history: list[EpisodeOfCareStatusHistory] | None = None
    type: list[CodeableConcept] | None = None
    reason: list[EpisodeOfCareReason] | None = None
    diagnosis: list[EpisodeOfCareDiagnosis] | None = None
    patient: Reference
    managing_organization: Reference | None = None
    period: Period | None = None
    referral_request: list[Reference] | None = None
    care_manager: Reference | None = None
    care_team: list[Reference] | None = None
    account: list[Reference] | None = None

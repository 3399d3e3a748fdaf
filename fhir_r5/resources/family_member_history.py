"""FamilyMemberHistory resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Age,
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Period,
    Range,
    Reference,
    String,
    Uri,
)


class FamilyHistoryStatus(str, Enum):
    PARTIAL = "partial"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    HEALTH_UNKNOWN = "health-unknown"


class FamilyMemberHistoryParticipant(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class FamilyMemberHistoryCondition(BackboneElement):
    code: CodeableConcept
    outcome: CodeableConcept | None = None
    contributed_to_death: Boolean | None = None
    onset: Age | Range | Period | String | None = None
    note: list[Annotation] | None = None


class FamilyMemberHistoryProcedure(BackboneElement):
    code: CodeableConcept
    outcome: CodeableConcept | None = None
    contributed_to_death: Boolean | None = None
    performed: Age | Range | Period | String | DateTime | None = None
    note: list[Annotation] | None = None


class FamilyMemberHistory(DomainResource):
    """Significant health conditions for a person related to the patient relevant in the context of care for the patient."""

    resource_type: ClassVar[str] = "FamilyMemberHistory"

    identifier: list[Identifier] | None = None
    instantiates_canonical: list[Canonical] | None = None
    instantiates_uri: list[Uri] | None = None
    status: Annotated[Code, Binding(FamilyHistoryStatus)]
    data_absent_reason: CodeableConcept | None = None
    patient: Reference
    date: DateTime | None = None
    participant: list[FamilyMemberHistoryParticipant] | None = None
    name: String | None = None
    relationship: CodeableConcept
    sex: CodeableConcept | None = None
    born: Period | Date | String | None = None
    age: Age | Range | String | None = None
    estimated_age: Boolean | None = None
    deceased: Boolean | Age | Range | Date | String | None = None
    reason: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    condition: list[FamilyMemberHistoryCondition] | None = None
    procedure: list[FamilyMemberHistoryProcedure] | None = None

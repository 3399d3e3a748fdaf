"""RiskAssessment resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Period,
    Range,
    Reference,
    String,
)
from fhir_r5.models.codes import ObservationStatus


class RiskAssessmentPrediction(BackboneElement):
    """Outcome predicted."""

    outcome: CodeableConcept | None = None
    probability: Decimal | Range | None = None
    qualitative_risk: CodeableConcept | None = None
    relative_risk: Decimal | None = None
    when: Period | Range | None = None
    rationale: String | None = None


class RiskAssessment(DomainResource):
    """Potential outcomes for a subject with likelihood."""

    resource_type: ClassVar[str] = "RiskAssessment"

    identifier: list[Identifier] | None = None
    based_on: Reference | None = None
    parent: Reference | None = None
    status: Annotated[Code, Binding(ObservationStatus)]
    method: CodeableConcept | None = None
    code: CodeableConcept | None = None
    subject: Reference
    encounter: Reference | None = None
    occurrence: DateTime | Period | None = None
    condition: Reference | None = None
    performer: Reference | None = None
    reason: list[CodeableReference] | None = None
    basis: list[Reference] | None = None
    prediction: list[RiskAssessmentPrediction] | None = None
    mitigation: String | None = None
    note: list[Annotation] | None = None

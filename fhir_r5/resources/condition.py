"""Condition resource."""

from typing import ClassVar

from fhir_r5.models import (
    Age,
    Annotation,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Period,
    Range,
    Reference,
    String,
)


class ConditionParticipant(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class ConditionStage(BackboneElement):
    summary: CodeableConcept | None = None
    assessment: list[Reference] | None = None
    type: CodeableConcept | None = None


class Condition(DomainResource):
    """
    A clinical condition, problem, diagnosis, or other event, situation,
    issue, or clinical concept that has risen to a level of concern.
    """

    resource_type: ClassVar[str] = "Condition"

    identifier: list[Identifier] | None = None
    clinical_status: CodeableConcept
    verification_status: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    severity: CodeableConcept | None = None
    code: CodeableConcept | None = None
    body_site: list[CodeableConcept] | None = None
    subject: Reference
    encounter: Reference | None = None
    onset: DateTime | Age | Period | Range | String | None = None
    abatement: DateTime | Age | Period | Range | String | None = None
    recorded_date: DateTime | None = None
    participant: list[ConditionParticipant] | None = None
    stage: list[ConditionStage] | None = None
    evidence: list[CodeableReference] | None = None
    note: list[Annotation] | None = None

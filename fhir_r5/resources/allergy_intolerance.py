"""AllergyIntolerance resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Age,
    Annotation,
    BackboneElement,
    Binding,
    Code,
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


class AllergyIntoleranceCategory(str, Enum):
    FOOD = "food"
    MEDICATION = "medication"
    ENVIRONMENT = "environment"
    BIOLOGIC = "biologic"


class AllergyIntoleranceCriticality(str, Enum):
    LOW = "low"
    HIGH = "high"
    UNABLE_TO_ASSESS = "unable-to-assess"


class AllergyIntoleranceSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class AllergyIntoleranceParticipant(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class AllergyIntoleranceReaction(BackboneElement):
    """Details about each adverse reaction event linked to exposure to the substance."""

    substance: CodeableConcept | None = None
    manifestation: list[CodeableReference]
    description: String | None = None
    onset: DateTime | None = None
    severity: Annotated[Code | None, Binding(AllergyIntoleranceSeverity)] = None
    exposure_route: CodeableConcept | None = None
    note: list[Annotation] | None = None


class AllergyIntolerance(DomainResource):
    """Risk of harmful or undesirable physiological response which is specific to an individual."""

    resource_type: ClassVar[str] = "AllergyIntolerance"

    identifier: list[Identifier] | None = None
    clinical_status: CodeableConcept | None = None
    verification_status: CodeableConcept | None = None
    type: CodeableConcept | None = None
    category: Annotated[list[Code] | None, Binding(AllergyIntoleranceCategory)] = None
    criticality: Annotated[Code | None, Binding(AllergyIntoleranceCriticality)] = None
    code: CodeableConcept | None = None
    patient: Reference
    encounter: Reference | None = None
    onset: DateTime | Age | Period | Range | String | None = None
    recorded_date: DateTime | None = None
    participant: list[AllergyIntoleranceParticipant] | None = None
    last_occurrence: DateTime | None = None
    note: list[Annotation] | None = None
    reaction: list[AllergyIntoleranceReaction] | None = None

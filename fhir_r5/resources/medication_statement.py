"""MedicationStatement resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Dosage,
    Identifier,
    Markdown,
    Period,
    Reference,
    Timing,
)


class MedicationStatementStatus(str, Enum):
    RECORDED = "recorded"
    ENTERED_IN_ERROR = "entered-in-error"
    DRAFT = "draft"


class MedicationStatementAdherence(BackboneElement):
    code: CodeableConcept
    reason: CodeableConcept | None = None


class MedicationStatement(DomainResource):
    """Record of medication being taken by a patient."""

    resource_type: ClassVar[str] = "MedicationStatement"

    identifier: list[Identifier] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(MedicationStatementStatus)]
    category: list[CodeableConcept] | None = None
    medication: CodeableReference
    subject: Reference
    encounter: Reference | None = None
    effective: DateTime | Period | Timing | None = None
    date_asserted: DateTime | None = None
    information_source: list[Reference] | None = None
    derived_from: list[Reference] | None = None
    reason: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    related_clinical_information: list[Reference] | None = None
    rendered_dosage_instruction: Markdown | None = None
    dosage: list[Dosage] | None = None
    adherence: MedicationStatementAdherence | None = None

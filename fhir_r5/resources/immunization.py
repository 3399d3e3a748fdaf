"""Immunization resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Quantity,
    Reference,
    String,
)


class ImmunizationStatus(str, Enum):
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    NOT_DONE = "not-done"


class ImmunizationPerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class ImmunizationProgramEligibility(BackboneElement):
    program: CodeableConcept
    program_status: CodeableConcept


class ImmunizationReaction(BackboneElement):
    date: DateTime | None = None
    manifestation: CodeableReference | None = None
    reported: Boolean | None = None


class ImmunizationProtocolApplied(BackboneElement):
    """Protocol followed by the provider."""

    series: String | None = None
    authority: Reference | None = None
    target_disease: list[CodeableConcept] | None = None
    dose_number: String
    series_doses: String | None = None


class Immunization(DomainResource):
    """Describes the event of a patient being administered a vaccine or a record of an immunization."""

    resource_type: ClassVar[str] = "Immunization"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    status: Annotated[Code, Binding(ImmunizationStatus)]
    status_reason: CodeableConcept | None = None
    vaccine_code: CodeableConcept
    administered_product: CodeableReference | None = None
    manufacturer: CodeableReference | None = None
    lot_number: String | None = None
    expiration_date: Date | None = None
    patient: Reference
    encounter: Reference | None = None
    supporting_information: list[Reference] | None = None
    occurrence: DateTime | String | None = None
    primary_source: Boolean | None = None
    information_source: CodeableReference | None = None
    location: Reference | None = None
    site: CodeableConcept | None = None
    route: CodeableConcept | None = None
    dose_quantity: Quantity | None = None
    performer: list[ImmunizationPerformer] | None = None
    note: list[Annotation] | None = None
    reason: list[CodeableReference] | None = None
    is_subpotent: Boolean | None = None
    subpotent_reason: list[CodeableConcept] | None = None
    program_eligibility: list[ImmunizationProgramEligibility] | None = None
    funding_source: CodeableConcept | None = None
    reaction: list[ImmunizationReaction] | None = None
    protocol_applied: list[ImmunizationProtocolApplied] | None = None

"""HealthcareService resource."""

from typing import ClassVar

from fhir_r5.models import (
    Attachment,
    Availability,
    BackboneElement,
    Boolean,
    CodeableConcept,
    DomainResource,
    ExtendedContactDetail,
    Identifier,
    Markdown,
    Reference,
    String,
)


class HealthcareServiceEligibility(BackboneElement):
    code: CodeableConcept | None = None
    comment: Markdown | None = None


class HealthcareService(DomainResource):
    """The details of a healthcare service available at a location."""

    resource_type: ClassVar[str] = "HealthcareService"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    provided_by: Reference | None = None
    offered_in: list[Reference] | None = None
    category: list[CodeableConcept] | None = None
    type: list[CodeableConcept] | None = None
    specialty: list[CodeableConcept] | None = None
    location: list[Reference] | None = None
    name: String | None = None
    comment: Markdown | None = None
    extra_details: Markdown | None = None
    photo: Attachment | None = None
    contact: list[ExtendedContactDetail] | None = None
    coverage_area: list[Reference] | None = None
    service_provision_code: list[CodeableConcept] | None = None
    eligibility: list[HealthcareServiceEligibility] | None = None
    program: list[CodeableConcept] | None = None
    characteristic: list[CodeableConcept] | None = None
    communication: list[CodeableConcept] | None = None
    referral_method: list[CodeableConcept] | None = None
    appointment_required: Boolean | None = None
    availability: list[Availability] | None = None
    endpoint: list[Reference] | None = None

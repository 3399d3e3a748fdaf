"""DiagnosticReport resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    Attachment,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    DateTime,
    DomainResource,
    Identifier,
    Instant,
    Markdown,
    Period,
    Reference,
    String,
)


class DiagnosticReportStatus(str, Enum):
    REGISTERED = "registered"
    PARTIAL = "partial"
    PRELIMINARY = "preliminary"
    MODIFIED = "modified"
    FINAL = "final"
    AMENDED = "amended"
    CORRECTED = "corrected"
    APPENDED = "appended"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class DiagnosticReportSupportingInfo(BackboneElement):
    type: CodeableConcept
    reference: Reference


class DiagnosticReportMedia(BackboneElement):
    comment: String | None = None
    link: Reference


class DiagnosticReport(DomainResource):
    """
    The findings and interpretation of diagnostic tests performed on
    patients, groups of patients, products, substances, devices, and
    locations.
    """

    resource_type: ClassVar[str] = "DiagnosticReport"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    status: Annotated[Code, Binding(DiagnosticReportStatus)]
    category: list[CodeableConcept] | None = None
    code: CodeableConcept
    subject: Reference | None = None
    encounter: Reference | None = None
    effective: DateTime | Period | None = None
    issued: Instant | None = None
    performer: list[Reference] | None = None
    results_interpreter: list[Reference] | None = None
    specimen: list[Reference] | None = None
    result: list[Reference] | None = None
    note: list[Annotation] | None = None
    study: list[Reference] | None = None
    supporting_info: list[DiagnosticReportSupportingInfo] | None = None
    media: list[DiagnosticReportMedia] | None = None
    composition: Reference | None = None
    conclusion: Markdown | None = None
    conclusion_code: list[CodeableConcept] | None = None
    presented_form: list[Attachment] | None = None

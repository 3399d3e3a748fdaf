"""EvidenceReport resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    ContactDetail,
    DomainResource,
    Identifier,
    Markdown,
    Narrative,
    Period,
    Quantity,
    Range,
    Reference,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class ReportRelationshipType(str, Enum):
    REPLACES = "replaces"
    AMENDS = "amends"
    APPENDS = "appends"
    TRANSFORMS = "transforms"
    REPLACED_WITH = "replacedWith"
    AMENDED_WITH = "amendedWith"
    APPENDED_WITH = "appendedWith"
    TRANSFORMED_WITH = "transformedWith"


class ListMode(str, Enum):
    WORKING = "working"
    SNAPSHOT = "snapshot"
    CHANGES = "changes"


class EvidenceReportSubjectCharacteristic(BackboneElement):
    code: CodeableConcept
    value: Reference | CodeableConcept | Boolean | Quantity | Range
    exclude: Boolean | None = None
    period: Period | None = None


class EvidenceReportSubject(BackboneElement):
    characteristic: list[EvidenceReportSubjectCharacteristic] | None = None
    note: list[Annotation] | None = None


class EvidenceReportRelatesToTarget(BackboneElement):
    url: Uri | None = None
    identifier: Identifier | None = None
    display: Markdown | None = None
    resource: Reference | None = None


class EvidenceReportRelatesTo(BackboneElement):
    code: Annotated[Code, Binding(ReportRelationshipType)]
    target: EvidenceReportRelatesToTarget


class EvidenceReportSection(BackboneElement):
    title: String | None = None
    focus: CodeableConcept | None = None
    focus_reference: Reference | None = None
    author: list[Reference] | None = None
    text: Narrative | None = None
    mode: Annotated[Code | None, Binding(ListMode)] = None
    ordered_by: CodeableConcept | None = None
    entry_classifier: list[CodeableConcept] | None = None
    entry_reference: list[Reference] | None = None
    entry_quantity: list[Quantity] | None = None
    empty_reason: CodeableConcept | None = None
    section: list["EvidenceReportSection"] | None = None


class EvidenceReport(DomainResource):
    """A report of evidence, organized into nested sections."""

    resource_type: ClassVar[str] = "EvidenceReport"

    url: Uri | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    use_context: list[UsageContext] | None = None
    identifier: list[Identifier] | None = None
    related_identifier: list[Identifier] | None = None
    cite_as: Reference | Markdown | None = None
    type: CodeableConcept | None = None
    note: list[Annotation] | None = None
    related_artifact: list[RelatedArtifact] | None = None
    subject: EvidenceReportSubject
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    author: list[ContactDetail] | None = None
    editor: list[ContactDetail] | None = None
    reviewer: list[ContactDetail] | None = None
    endorser: list[ContactDetail] | None = None
    relates_to: list[EvidenceReportRelatesTo] | None = None
    section: list[EvidenceReportSection] | None = None


EvidenceReportSection.model_rebuild()

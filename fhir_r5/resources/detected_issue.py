"""DetectedIssue resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    DateTime,
    DomainResource,
    Identifier,
    Markdown,
    Period,
    Reference,
    Uri,
)


class DetectedIssueStatus(str, Enum):
    PRELIMINARY = "preliminary"
    FINAL = "final"
    ENTERED_IN_ERROR = "entered-in-error"
    MITIGATED = "mitigated"


class DetectedIssueSeverity(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class DetectedIssueEvidence(BackboneElement):
    code: list[CodeableConcept] | None = None
    detail: list[Reference] | None = None


class DetectedIssueMitigation(BackboneElement):
    action: CodeableConcept
    date: DateTime | None = None
    author: Reference | None = None
    note: list[Annotation] | None = None


class DetectedIssue(DomainResource):
    """Indicates an actual or potential clinical issue with or between one or more active or proposed clinical actions."""

    resource_type: ClassVar[str] = "DetectedIssue"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(DetectedIssueStatus)]
    category: list[CodeableConcept] | None = None
    code: CodeableConcept | None = None
    severity: Annotated[Code | None, Binding(DetectedIssueSeverity)] = None
    subject: Reference | None = None
    encounter: Reference | None = None
    identified: DateTime | Period | None = None
    author: Reference | None = None
    implicated: list[Reference] | None = None
    evidence: list[DetectedIssueEvidence] | None = None
    detail: Markdown | None = None
    reference: Uri | None = None
    mitigation: list[DetectedIssueMitigation] | None = None

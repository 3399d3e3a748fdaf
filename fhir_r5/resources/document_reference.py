"""DocumentReference resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Binding,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    Coding,
    DateTime,
    DomainResource,
    Identifier,
    Instant,
    Markdown,
    Period,
    Reference,
    String,
    Uri,
)
from fhir_r5.resources.composition import CompositionStatus


class DocumentReferenceStatus(str, Enum):
    CURRENT = "current"
    SUPERSEDED = "superseded"
    ENTERED_IN_ERROR = "entered-in-error"


class DocumentReferenceAttester(BackboneElement):
    mode: CodeableConcept
    time: DateTime | None = None
    party: Reference | None = None


class DocumentReferenceRelatesTo(BackboneElement):
    code: CodeableConcept
    target: Reference


class DocumentReferenceContentProfile(BackboneElement):
    value: Coding | Uri | Canonical


class DocumentReferenceContent(BackboneElement):
    attachment: Attachment
    profile: list[DocumentReferenceContentProfile] | None = None


class DocumentReference(DomainResource):
    """A reference to a document of any kind for any purpose."""

    resource_type: ClassVar[str] = "DocumentReference"

    identifier: list[Identifier] | None = None
    version: String | None = None
    based_on: list[Reference] | None = None
    status: Annotated[Code, Binding(DocumentReferenceStatus)]
    doc_status: Annotated[Code | None, Binding(CompositionStatus)] = None
    modality: list[CodeableConcept] | None = None
    type: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    subject: Reference | None = None
    context: list[Reference] | None = None
    event: list[CodeableReference] | None = None
    body_site: list[CodeableReference] | None = None
    facility: CodeableConcept | None = None
    practice_setting: CodeableConcept | None = None
    period: Period | None = None
    date: Instant | None = None
    author: list[Reference] | None = None
    attester: list[DocumentReferenceAttester] | None = None
    custodian: Reference | None = None
    relates_to: list[DocumentReferenceRelatesTo] | None = None
    description: Markdown | None = None
    security_label: list[CodeableConcept] | None = None
    content: list[DocumentReferenceContent]

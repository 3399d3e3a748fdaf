"""NamingSystem resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Markdown,
    Period,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class NamingSystemType(str, Enum):
    CODESYSTEM = "codesystem"
    IDENTIFIER = "identifier"
    ROOT = "root"


class NamingSystemIdentifierType(str, Enum):
    OID = "oid"
    UUID = "uuid"
    URI = "uri"
    IRI_STEM = "iri-stem"
    V2CSMNEMONIC = "v2csmnemonic"
    OTHER = "other"


class NamingSystemUniqueId(BackboneElement):
    type: Annotated[Code, Binding(NamingSystemIdentifierType)]
    value: String
    preferred: Boolean | None = None
    comment: String | None = None
    period: Period | None = None
    authoritative: Boolean | None = None


class NamingSystem(DomainResource):
    """A curated namespace that issues unique symbols within that namespace."""

    resource_type: ClassVar[str] = "NamingSystem"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String
    title: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    kind: Annotated[Code, Binding(NamingSystemType)]
    experimental: Boolean | None = None
    date: DateTime
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    responsible: String | None = None
    type: CodeableConcept | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    approval_date: Date | None = None
    last_review_date: Date | None = None
    effective_period: Period | None = None
    topic: list[CodeableConcept] | None = None
    author: list[ContactDetail] | None = None
    editor: list[ContactDetail] | None = None
    reviewer: list[ContactDetail] | None = None
    endorser: list[ContactDetail] | None = None
    related_artifact: list[RelatedArtifact] | None = None
    usage: String | None = None
    unique_id: list[NamingSystemUniqueId]

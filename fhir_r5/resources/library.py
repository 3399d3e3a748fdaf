"""Library resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Attachment,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    DataRequirement,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Markdown,
    ParameterDefinition,
    Period,
    Reference,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class Library(DomainResource):
    """
    A collection of knowledge assets such as logic libraries and
    information model descriptions.
    """

    resource_type: ClassVar[str] = "Library"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    subtitle: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    type: CodeableConcept
    subject: CodeableConcept | Reference | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    usage: Markdown | None = None
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
    parameter: list[ParameterDefinition] | None = None
    data_requirement: list[DataRequirement] | None = None
    content: list[Attachment] | None = None

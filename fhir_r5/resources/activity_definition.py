"""ActivityDefinition resource."""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Age,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    DomainResource,
    Dosage,
    Duration,
    Expression,
    Identifier,
    Markdown,
    Period,
    Quantity,
    Range,
    Reference,
    RelatedArtifact,
    String,
    Timing,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import (
    ActionParticipantType,
    PublicationStatus,
    RequestIntent,
    RequestPriority,
)


class ActivityDefinitionParticipant(BackboneElement):
    type: Annotated[Code | None, Binding(ActionParticipantType)] = None
    type_canonical: Canonical | None = None
    type_reference: Reference | None = None
    role: CodeableConcept | None = None
    function: CodeableConcept | None = None


class ActivityDefinitionDynamicValue(BackboneElement):
    path: String
    expression: Expression


class ActivityDefinition(DomainResource):
    """The definition of a specific activity to be taken, independent of any particular patient."""

    resource_type: ClassVar[str] = "ActivityDefinition"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    subtitle: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    subject: CodeableConcept | Reference | Canonical | None = None
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
    library: list[Canonical] | None = None
    kind: Code | None = None
    profile: Canonical | None = None
    code: CodeableConcept | None = None
    intent: Annotated[Code | None, Binding(RequestIntent)] = None
    priority: Annotated[Code | None, Binding(RequestPriority)] = None
    do_not_perform: Boolean | None = None
    timing: Timing | Age | Range | Duration | None = None
    as_needed: Boolean | CodeableConcept | None = None
    location: CodeableReference | None = None
    participant: list[ActivityDefinitionParticipant] | None = None
    product: Reference | CodeableConcept | None = None
    quantity: Quantity | None = None
    dosage: list[Dosage] | None = None
    body_site: list[CodeableConcept] | None = None
    specimen_requirement: list[Canonical] | None = None
    observation_requirement: list[Canonical] | None = None
    observation_result_requirement: list[Canonical] | None = None
    transform: Canonical | None = None
    dynamic_value: list[ActivityDefinitionDynamicValue] | None = None

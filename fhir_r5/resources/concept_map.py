"""ConceptMap resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    Period,
    Quantity,
    RelatedArtifact,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class ConceptMapRelationship(str, Enum):
    RELATED_TO = "related-to"
    EQUIVALENT = "equivalent"
    SOURCE_IS_NARROWER_THAN_TARGET = "source-is-narrower-than-target"
    SOURCE_IS_BROADER_THAN_TARGET = "source-is-broader-than-target"
    NOT_RELATED_TO = "not-related-to"


class ConceptMapGroupUnmappedMode(str, Enum):
    USE_SOURCE_CODE = "use-source-code"
    FIXED = "fixed"
    OTHER_MAP = "other-map"


class ConceptMapPropertyType(str, Enum):
    CODING = "Coding"
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE_TIME = "dateTime"
    DECIMAL = "decimal"
    CODE = "code"


class ConceptMapAttributeType(str, Enum):
    CODE = "code"
    CODING = "Coding"
    STRING = "string"
    BOOLEAN = "boolean"
    QUANTITY = "Quantity"


class ConceptMapProperty(BackboneElement):
    code: Code
    uri: Uri | None = None
    description: String | None = None
    type: Annotated[Code, Binding(ConceptMapPropertyType)]
    system: Canonical | None = None


class ConceptMapAdditionalAttribute(BackboneElement):
    code: Code
    uri: Uri | None = None
    description: String | None = None
    type: Annotated[Code, Binding(ConceptMapAttributeType)]


class ConceptMapGroupElementTargetProperty(BackboneElement):
    code: Code
    value: Coding | String | Integer | Boolean | DateTime | Decimal | Code


class ConceptMapGroupElementTargetDependsOn(BackboneElement):
    """Other properties required for this mapping; also used for ``product``."""

    attribute: Code
    value: Code | Coding | String | Boolean | Quantity | None = None
    value_set: Canonical | None = None


class ConceptMapGroupElementTarget(BackboneElement):
    code: Code | None = None
    display: String | None = None
    value_set: Canonical | None = None
    relationship: Annotated[Code, Binding(ConceptMapRelationship)]
    comment: String | None = None
    property: list[ConceptMapGroupElementTargetProperty] | None = None
    depends_on: list[ConceptMapGroupElementTargetDependsOn] | None = None
    product: list[ConceptMapGroupElementTargetDependsOn] | None = None


class ConceptMapGroupElement(BackboneElement):
    code: Code | None = None
    display: String | None = None
    value_set: Canonical | None = None
    no_map: Boolean | None = None
    target: list[ConceptMapGroupElementTarget] | None = None


class ConceptMapGroupUnmapped(BackboneElement):
    mode: Annotated[Code, Binding(ConceptMapGroupUnmappedMode)]
    code: Code | None = None
    display: String | None = None
    value_set: Canonical | None = None
    relationship: Annotated[Code | None, Binding(ConceptMapRelationship)] = None
    other_map: Canonical | None = None


class ConceptMapGroup(BackboneElement):
    source: Canonical | None = None
    target: Canonical | None = None
    element: list[ConceptMapGroupElement]
    unmapped: ConceptMapGroupUnmapped | None = None


class ConceptMap(DomainResource):
    """A statement of relationships from one set of concepts to one or more other concepts."""

    resource_type: ClassVar[str] = "ConceptMap"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
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
    property: list[ConceptMapProperty] | None = None
    additional_attribute: list[ConceptMapAdditionalAttribute] | None = None
    source_scope: Uri | Canonical | None = None
    target_scope: Uri | Canonical | None = None
    group: list[ConceptMapGroup] | None = None

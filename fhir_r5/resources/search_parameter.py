"""SearchParameter resource."""

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
    DateTime,
    DomainResource,
    Identifier,
    Markdown,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus, SearchParamType


class SearchProcessingMode(str, Enum):
    NORMAL = "normal"
    PHONETIC = "phonetic"
    OTHER = "other"


class SearchComparator(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"
    SA = "sa"
    EB = "eb"
    AP = "ap"


class SearchModifierCode(str, Enum):
    MISSING = "missing"
    EXACT = "exact"
    CONTAINS = "contains"
    NOT = "not"
    TEXT = "text"
    IN = "in"
    NOT_IN = "not-in"
    BELOW = "below"
    ABOVE = "above"
    TYPE = "type"
    IDENTIFIER = "identifier"
    OF_TYPE = "of-type"
    CODE_TEXT = "code-text"
    TEXT_ADVANCED = "text-advanced"
    ITERATE = "iterate"


class SearchParameterComponent(BackboneElement):
    definition: Canonical
    expression: String


class SearchParameter(DomainResource):
    """A search parameter that defines a named search item usable to search/filter on a resource."""

    resource_type: ClassVar[str] = "SearchParameter"

    url: Uri
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String
    title: String | None = None
    derived_from: Canonical | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    code: Code
    base: list[Code]
    type: Annotated[Code, Binding(SearchParamType)]
    expression: String | None = None
    processing_mode: Annotated[Code | None, Binding(SearchProcessingMode)] = None
    constraint: String | None = None
    target: list[Code] | None = None
    multiple_or: Boolean | None = None
    multiple_and: Boolean | None = None
    comparator: Annotated[list[Code] | None, Binding(SearchComparator)] = None
    modifier: Annotated[list[Code] | None, Binding(SearchModifierCode)] = None
    chain: list[String] | None = None
    component: list[SearchParameterComponent] | None = None

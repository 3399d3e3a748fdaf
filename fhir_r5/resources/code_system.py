"""
CodeSystem resource.

Concepts form a hierarchy through ``CodeSystemConcept.concept``.
"""

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
    RelatedArtifact,
    String,
    UnsignedInt,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class CodeSystemContentMode(str, Enum):
    NOT_PRESENT = "not-present"
    EXAMPLE = "example"
    FRAGMENT = "fragment"
    COMPLETE = "complete"
    SUPPLEMENT = "supplement"


class CodeSystemHierarchyMeaning(str, Enum):
    GROUPED_BY = "grouped-by"
    IS_A = "is-a"
    PART_OF = "part-of"
    CLASSIFIED_WITH = "classified-with"


class FilterOperator(str, Enum):
    EQUALS = "="
    IS_A = "is-a"
    DESCENDENT_OF = "descendent-of"
    IS_NOT_A = "is-not-a"
    REGEX = "regex"
    IN = "in"
    NOT_IN = "not-in"
    GENERALIZES = "generalizes"
    CHILD_OF = "child-of"
    DESCENDENT_LEAF = "descendent-leaf"
    EXISTS = "exists"


class PropertyType(str, Enum):
    CODE = "code"
    CODING = "Coding"
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE_TIME = "dateTime"
    DECIMAL = "decimal"


class CodeSystemFilter(BackboneElement):
    code: Code
    description: String | None = None
    operator: Annotated[list[Code], Binding(FilterOperator)]
    value: String


class CodeSystemProperty(BackboneElement):
    code: Code
    uri: Uri | None = None
    description: String | None = None
    type: Annotated[Code, Binding(PropertyType)]


class CodeSystemConceptDesignation(BackboneElement):
    language: Code | None = None
    use: Coding | None = None
    additional_use: list[Coding] | None = None
    value: String


class CodeSystemConceptProperty(BackboneElement):
    code: Code
    value: Code | Coding | String | Integer | Boolean | DateTime | Decimal


class CodeSystemConcept(BackboneElement):
    """A concept defined in the code system; child concepts nest under it."""

    code: Code
    display: String | None = None
    definition: String | None = None
    designation: list[CodeSystemConceptDesignation] | None = None
    property: list[CodeSystemConceptProperty] | None = None
    concept: list["CodeSystemConcept"] | None = None


class CodeSystem(DomainResource):
    """Declares the existence of and describes a code system or code system supplement."""

    resource_type: ClassVar[str] = "CodeSystem"

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
    case_sensitive: Boolean | None = None
    value_set: Canonical | None = None
    hierarchy_meaning: Annotated[Code | None, Binding(CodeSystemHierarchyMeaning)] = None
    compositional: Boolean | None = None
    version_needed: Boolean | None = None
    content: Annotated[Code, Binding(CodeSystemContentMode)]
    supplements: Canonical | None = None
    count: UnsignedInt | None = None
    filter: list[CodeSystemFilter] | None = None
    property: list[CodeSystemProperty] | None = None
    concept: list[CodeSystemConcept] | None = None

    def find_concept(self, code: str) -> CodeSystemConcept | None:
        """Depth-first search of the concept hierarchy for a code."""
        stack = list(reversed(self.concept or []))
        while stack:
            concept = stack.pop()
            if concept.code is not None and concept.code.value == code:
                return concept
            stack.extend(reversed(concept.concept or []))
        return None


CodeSystemConcept.model_rebuild()

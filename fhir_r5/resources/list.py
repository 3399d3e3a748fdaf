"""List resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    DateTime,
    DomainResource,
    Identifier,
    Reference,
    String,
)


class ListStatus(str, Enum):
    CURRENT = "current"
    RETIRED = "retired"
    ENTERED_IN_ERROR = "entered-in-error"


class ListMode(str, Enum):
    WORKING = "working"
    SNAPSHOT = "snapshot"
    CHANGES = "changes"


class ListEntry(BackboneElement):
    flag: CodeableConcept | None = None
    deleted: Boolean | None = None
    date: DateTime | None = None
    item: Reference


class List(DomainResource):
    """A list is a curated collection of resources."""

    resource_type: ClassVar[str] = "List"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(ListStatus)]
    mode: Annotated[Code, Binding(ListMode)]
    title: String | None = None
    code: CodeableConcept | None = None
    subject: list[Reference] | None = None
    encounter: Reference | None = None
    date: DateTime | None = None
    source: Reference | None = None
    ordered_by: CodeableConcept | None = None
    note: list[Annotation] | None = None
    entry: list[ListEntry] | None = None
    empty_reason: CodeableConcept | None = None

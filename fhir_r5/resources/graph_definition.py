"""GraphDefinition resource."""

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
    Id,
    Identifier,
    Integer,
    Markdown,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus
from fhir_r5.resources.compartment_definition import CompartmentType


class GraphCompartmentUse(str, Enum):
    WHERE = "where"
    REQUIRES = "requires"


class GraphCompartmentRule(str, Enum):
    IDENTICAL = "identical"
    MATCHING = "matching"
    DIFFERENT = "different"
    CUSTOM = "custom"


class GraphDefinitionNode(BackboneElement):
    node_id: Id
    description: String | None = None
    type: Code
    profile: Canonical | None = None


class GraphDefinitionLinkCompartment(BackboneElement):
    use: Annotated[Code, Binding(GraphCompartmentUse)]
    rule: Annotated[Code, Binding(GraphCompartmentRule)]
    code: Annotated[Code, Binding(CompartmentType)]
    expression: String | None = None
    description: String | None = None


class GraphDefinitionLink(BackboneElement):
    description: String | None = None
    min: Integer | None = None
    max: String | None = None
    source_id: Id
    path: String | None = None
    slice_name: String | None = None
    target_id: Id
    params: String | None = None
    compartment: list[GraphDefinitionLinkCompartment] | None = None


class GraphDefinition(DomainResource):
    """A formal computable definition of a graph of resources."""

    resource_type: ClassVar[str] = "GraphDefinition"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String
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
    start: Id | None = None
    node: list[GraphDefinitionNode] | None = None
    link: list[GraphDefinitionLink] | None = None

"""OperationDefinition resource."""

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
    Integer,
    Markdown,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import OperationParameterUse, PublicationStatus, SearchParamType


class OperationKind(str, Enum):
    OPERATION = "operation"
    QUERY = "query"


class OperationParameterScope(str, Enum):
    INSTANCE = "instance"
    TYPE = "type"
    SYSTEM = "system"


class BindingStrength(str, Enum):
    REQUIRED = "required"
    EXTENSIBLE = "extensible"
    PREFERRED = "preferred"
    EXAMPLE = "example"


class OperationDefinitionParameterBinding(BackboneElement):
    strength: Annotated[Code, Binding(BindingStrength)]
    value_set: Canonical


class OperationDefinitionParameterReferencedFrom(BackboneElement):
    source: String
    source_id: String | None = None


class OperationDefinitionParameter(BackboneElement):
    """An operation parameter; ``part`` nests the parts of a tuple parameter."""

    name: Code
    use: Annotated[Code, Binding(OperationParameterUse)]
    scope: Annotated[list[Code] | None, Binding(OperationParameterScope)] = None
    min: Integer
    max: String
    documentation: Markdown | None = None
    type: Code | None = None
    allowed_type: list[Code] | None = None
    target_profile: list[Canonical] | None = None
    search_type: Annotated[Code | None, Binding(SearchParamType)] = None
    binding: OperationDefinitionParameterBinding | None = None
    referenced_from: list[OperationDefinitionParameterReferencedFrom] | None = None
    part: list["OperationDefinitionParameter"] | None = None


class OperationDefinitionOverload(BackboneElement):
    parameter_name: list[String] | None = None
    comment: String | None = None


class OperationDefinition(DomainResource):
    """A formal computable definition of an operation or a named query."""

    resource_type: ClassVar[str] = "OperationDefinition"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String
    title: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    kind: Annotated[Code, Binding(OperationKind)]
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
    affects_state: Boolean | None = None
    code: Code
    comment: Markdown | None = None
    base: Canonical | None = None
    resource: list[Code] | None = None
    system: Boolean
    type: Boolean
    instance: Boolean
    input_profile: Canonical | None = None
    output_profile: Canonical | None = None
    parameter: list[OperationDefinitionParameter] | None = None
    overload: list[OperationDefinitionOverload] | None = None


OperationDefinitionParameter.model_rebuild()

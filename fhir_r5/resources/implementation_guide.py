"""ImplementationGuide resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

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
    Markdown,
    Reference,
    String,
    Uri,
    Url,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class GuidePageGeneration(str, Enum):
    HTML = "html"
    MARKDOWN = "markdown"
    XML = "xml"
    GENERATED = "generated"


class ImplementationGuideDependsOn(BackboneElement):
    uri: Canonical
    package_id: Id | None = None
    version: String | None = None
    reason: Markdown | None = None


class ImplementationGuideGlobal(BackboneElement):
    type: Code
    profile: Canonical


class ImplementationGuideDefinitionGrouping(BackboneElement):
    name: String
    description: Markdown | None = None


class ImplementationGuideDefinitionResource(BackboneElement):
    reference: Reference
    fhir_version: list[Code] | None = None
    name: String | None = None
    description: Markdown | None = None
    is_example: Boolean | None = None
    profile: list[Canonical] | None = None
    grouping_id: Id | None = None


class ImplementationGuideDefinitionPage(BackboneElement):
    """A page in the guide's table of contents; child pages nest under it."""

    source: Url | String | Markdown | None = None
    name: Url
    title: String
    generation: Annotated[Code, Binding(GuidePageGeneration)]
    page: list["ImplementationGuideDefinitionPage"] | None = None


class ImplementationGuideDefinitionParameter(BackboneElement):
    code: Coding
    value: String


class ImplementationGuideDefinitionTemplate(BackboneElement):
    code: Code
    source: String
    scope: String | None = None


class ImplementationGuideDefinition(BackboneElement):
    grouping: list[ImplementationGuideDefinitionGrouping] | None = None
    resource: list[ImplementationGuideDefinitionResource] | None = None
    page: ImplementationGuideDefinitionPage | None = None
    parameter: list[ImplementationGuideDefinitionParameter] | None = None
    template: list[ImplementationGuideDefinitionTemplate] | None = None


class ImplementationGuideManifestResource(BackboneElement):
    reference: Reference
    is_example: Boolean | None = None
    profile: list[Canonical] | None = None
    relative_path: Url | None = None


class ImplementationGuideManifestPage(BackboneElement):
    name: String
    title: String | None = None
    anchor: list[String] | None = None


class ImplementationGuideManifest(BackboneElement):
    rendering: Url | None = None
    resource: list[ImplementationGuideManifestResource]
    page: list[ImplementationGuideManifestPage] | None = None
    image: list[String] | None = None
    other: list[String] | None = None


class ImplementationGuide(DomainResource):
    """A set of rules about how FHIR is used to solve a particular problem."""

    resource_type: ClassVar[str] = "ImplementationGuide"

    url: Uri
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
    package_id: Id
    license: Code | None = None
    fhir_version: list[Code]
    depends_on: list[ImplementationGuideDependsOn] | None = None
    global_: list[ImplementationGuideGlobal] | None = Field(default=None, alias="global")
    definition: ImplementationGuideDefinition | None = None
    manifest: ImplementationGuideManifest | None = None


ImplementationGuideDefinitionPage.model_rebuild()

"""CompartmentDefinition resource."""

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
    DateTime,
    DomainResource,
    Markdown,
    String,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class CompartmentType(str, Enum):
    PATIENT = "Patient"
    ENCOUNTER = "Encounter"
    RELATED_PERSON = "RelatedPerson"
    PRACTITIONER = "Practitioner"
    DEVICE = "Device"
    EPISODE_OF_CARE = "EpisodeOfCare"


class CompartmentDefinitionResource(BackboneElement):
    code: Code
    param: list[String] | None = None
    documentation: String | None = None
    start_param: Uri | None = None
    end_param: Uri | None = None


class CompartmentDefinition(DomainResource):
    """How a resource is related to a compartment."""

    resource_type: ClassVar[str] = "CompartmentDefinition"

    url: Uri
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
    code: Annotated[Code, Binding(CompartmentType)]
    search: Boolean
    resource: list[CompartmentDefinitionResource] | None = None

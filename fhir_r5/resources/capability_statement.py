"""
CapabilityStatement resource.

Describes what a FHIR server or client supports: the REST interface,
messaging endpoints and document profiles.
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
    DateTime,
    DomainResource,
    Identifier,
    Markdown,
    Reference,
    String,
    UnsignedInt,
    Uri,
    Url,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus, SearchParamType


class CapabilityStatementKind(str, Enum):
    INSTANCE = "instance"
    CAPABILITY = "capability"
    REQUIREMENTS = "requirements"


class RestfulCapabilityMode(str, Enum):
    CLIENT = "client"
    SERVER = "server"


class TypeRestfulInteraction(str, Enum):
    READ = "read"
    VREAD = "vread"
    UPDATE = "update"
    PATCH = "patch"
    DELETE = "delete"
    HISTORY_INSTANCE = "history-instance"
    HISTORY_TYPE = "history-type"
    CREATE = "create"
    SEARCH_TYPE = "search-type"


class SystemRestfulInteraction(str, Enum):
    TRANSACTION = "transaction"
    BATCH = "batch"
    SEARCH_SYSTEM = "search-system"
    HISTORY_SYSTEM = "history-system"


class ResourceVersionPolicy(str, Enum):
    NO_VERSION = "no-version"
    VERSIONED = "versioned"
    VERSIONED_UPDATE = "versioned-update"


class ConditionalReadStatus(str, Enum):
    NOT_SUPPORTED = "not-supported"
    MODIFIED_SINCE = "modified-since"
    NOT_MATCH = "not-match"
    FULL_SUPPORT = "full-support"


class ConditionalDeleteStatus(str, Enum):
    NOT_SUPPORTED = "not-supported"
    SINGLE = "single"
    MULTIPLE = "multiple"


class ReferenceHandlingPolicy(str, Enum):
    LITERAL = "literal"
    LOGICAL = "logical"
    RESOLVES = "resolves"
    ENFORCED = "enforced"
    LOCAL = "local"


class EventCapabilityMode(str, Enum):
    SENDER = "sender"
    RECEIVER = "receiver"


class DocumentMode(str, Enum):
    PRODUCER = "producer"
    CONSUMER = "consumer"


class CapabilityStatementSoftware(BackboneElement):
    name: String
    version: String | None = None
    release_date: DateTime | None = None


class CapabilityStatementImplementation(BackboneElement):
    description: Markdown
    url: Url | None = None
    custodian: Reference | None = None


class CapabilityStatementRestSecurity(BackboneElement):
    cors: Boolean | None = None
    service: list[CodeableConcept] | None = None
    description: Markdown | None = None


class CapabilityStatementRestResourceInteraction(BackboneElement):
    code: Annotated[Code, Binding(TypeRestfulInteraction)]
    documentation: Markdown | None = None


class CapabilityStatementRestResourceSearchParam(BackboneElement):
    name: String
    definition: Canonical | None = None
    type: Annotated[Code, Binding(SearchParamType)]
    documentation: Markdown | None = None


class CapabilityStatementRestResourceOperation(BackboneElement):
    name: String
    definition: Canonical
    documentation: Markdown | None = None


class CapabilityStatementRestResource(BackboneElement):
    type: Code
    profile: Canonical | None = None
    supported_profile: list[Canonical] | None = None
    documentation: Markdown | None = None
    interaction: list[CapabilityStatementRestResourceInteraction] | None = None
    versioning: Annotated[Code | None, Binding(ResourceVersionPolicy)] = None
    read_history: Boolean | None = None
    update_create: Boolean | None = None
    conditional_create: Boolean | None = None
    conditional_read: Annotated[Code | None, Binding(ConditionalReadStatus)] = None
    conditional_update: Boolean | None = None
    conditional_patch: Boolean | None = None
    conditional_delete: Annotated[Code | None, Binding(ConditionalDeleteStatus)] = None
    reference_policy: Annotated[list[Code] | None, Binding(ReferenceHandlingPolicy)] = None
    search_include: list[String] | None = None
    search_rev_include: list[String] | None = None
    search_param: list[CapabilityStatementRestResourceSearchParam] | None = None
    operation: list[CapabilityStatementRestResourceOperation] | None = None


class CapabilityStatementRestInteraction(BackboneElement):
    code: Annotated[Code, Binding(SystemRestfulInteraction)]
    documentation: Markdown | None = None


class CapabilityStatementRest(BackboneElement):
    mode: Annotated[Code, Binding(RestfulCapabilityMode)]
    documentation: Markdown | None = None
    security: CapabilityStatementRestSecurity | None = None
    resource: list[CapabilityStatementRestResource] | None = None
    interaction: list[CapabilityStatementRestInteraction] | None = None
    search_param: list[CapabilityStatementRestResourceSearchParam] | None = None
    operation: list[CapabilityStatementRestResourceOperation] | None = None
    compartment: list[Canonical] | None = None


class CapabilityStatementMessagingEndpoint(BackboneElement):
    protocol: Coding
    address: Url


class CapabilityStatementMessagingSupportedMessage(BackboneElement):
    mode: Annotated[Code, Binding(EventCapabilityMode)]
    definition: Canonical


class CapabilityStatementMessaging(BackboneElement):
    endpoint: list[CapabilityStatementMessagingEndpoint] | None = None
    reliable_cache: UnsignedInt | None = None
    documentation: Markdown | None = None
    supported_message: list[CapabilityStatementMessagingSupportedMessage] | None = None


class CapabilityStatementDocument(BackboneElement):
    mode: Annotated[Code, Binding(DocumentMode)]
    documentation: Markdown | None = None
    profile: Canonical


class CapabilityStatement(DomainResource):
    """A statement of system capabilities."""

    resource_type: ClassVar[str] = "CapabilityStatement"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    date: DateTime
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    kind: Annotated[Code, Binding(CapabilityStatementKind)]
    instantiates: list[Canonical] | None = None
    imports: list[Canonical] | None = None
    software: CapabilityStatementSoftware | None = None
    implementation: CapabilityStatementImplementation | None = None
    fhir_version: Code
    format: list[Code]
    patch_format: list[Code] | None = None
    accept_language: list[Code] | None = None
    implementation_guide: list[Canonical] | None = None
    rest: list[CapabilityStatementRest] | None = None
    messaging: list[CapabilityStatementMessaging] | None = None
    document: list[CapabilityStatementDocument] | None = None

    def rest_resource(self, resource_type: str, mode: str = "server") -> CapabilityStatementRestResource | None:
        """Find the REST entry for a resource type in the given capability mode."""
        for rest in self.rest or []:
            if rest.mode is None or rest.mode.value != mode:
                continue
            for resource in rest.resource or []:
                if resource.type is not None and resource.type.value == resource_type:
                    return resource
        return None

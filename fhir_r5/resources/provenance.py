"""Provenance resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Instant,
    Period,
    Reference,
    Signature,
    Uri,
)


class ProvenanceEntityRole(str, Enum):
    REVISION = "revision"
    QUOTATION = "quotation"
    SOURCE = "source"
    INSTANTIATES = "instantiates"
    REMOVAL = "removal"


class ProvenanceAgent(BackboneElement):
    type: CodeableConcept | None = None
    role: list[CodeableConcept] | None = None
    who: Reference
    on_behalf_of: Reference | None = None


class ProvenanceEntity(BackboneElement):
    role: Annotated[Code, Binding(ProvenanceEntityRole)]
    what: Reference
    agent: list[ProvenanceAgent] | None = None


class Provenance(DomainResource):
    """Who, what, when for a set of resources."""

    resource_type: ClassVar[str] = "Provenance"

    target: list[Reference]
    occurred: Period | DateTime | None = None
    recorded: Instant | None = None
    policy: list[Uri] | None = None
    location: Reference | None = None
    authorization: list[CodeableReference] | None = None
    activity: CodeableConcept | None = None
    based_on: list[Reference] | None = None
    patient: Reference | None = None
    encounter: Reference | None = None
    agent: list[ProvenanceAgent]
    entity: list[ProvenanceEntity] | None = None
    signature: list[Signature] | None = None

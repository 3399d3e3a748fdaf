"""Consent resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    Date,
    DateTime,
    DomainResource,
    Expression,
    Identifier,
    Period,
    Reference,
    Url,
)


class ConsentStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"
    NOT_DONE = "not-done"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class ConsentDecision(str, Enum):
    DENY = "deny"
    PERMIT = "permit"


class ConsentDataMeaning(str, Enum):
    INSTANCE = "instance"
    RELATED = "related"
    DEPENDENTS = "dependents"
    AUTHORED_BY = "authoredby"


class ConsentPolicyBasis(BackboneElement):
    reference: Reference | None = None
    url: Url | None = None


class ConsentVerification(BackboneElement):
    verified: Boolean
    verification_type: CodeableConcept | None = None
    verified_by: Reference | None = None
    verified_with: Reference | None = None
    verification_date: list[DateTime] | None = None


class ConsentProvisionActor(BackboneElement):
    role: CodeableConcept | None = None
    reference: Reference | None = None


class ConsentProvisionData(BackboneElement):
    meaning: Annotated[Code, Binding(ConsentDataMeaning)]
    reference: Reference


class ConsentProvision(BackboneElement):
    """Constraints to the base Consent.policyRule; provisions nest."""

    period: Period | None = None
    actor: list[ConsentProvisionActor] | None = None
    action: list[CodeableConcept] | None = None
    security_label: list[Coding] | None = None
    purpose: list[Coding] | None = None
    document_type: list[Coding] | None = None
    resource_type_: list[Coding] | None = Field(default=None, alias="resourceType")
    code: list[CodeableConcept] | None = None
    data_period: Period | None = None
    data: list[ConsentProvisionData] | None = None
    expression: Expression | None = None
    provision: list["ConsentProvision"] | None = None


class Consent(DomainResource):
    """A record of a healthcare consumer's choices or choices made on their behalf."""

    resource_type: ClassVar[str] = "Consent"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(ConsentStatus)]
    category: list[CodeableConcept] | None = None
    subject: Reference | None = None
    date: Date | None = None
    period: Period | None = None
    grantor: list[Reference] | None = None
    grantee: list[Reference] | None = None
    manager: list[Reference] | None = None
    controller: list[Reference] | None = None
    source_attachment: list[Attachment] | None = None
    source_reference: list[Reference] | None = None
    regulatory_basis: list[CodeableConcept] | None = None
    policy_basis: ConsentPolicyBasis | None = None
    policy_text: list[Reference] | None = None
    verification: list[ConsentVerification] | None = None
    decision: Annotated[Code | None, Binding(ConsentDecision)] = None
    provision: list[ConsentProvision] | None = None


ConsentProvision.model_rebuild()

"""Account resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Instant,
    Markdown,
    Money,
    Period,
    PositiveInt,
    Reference,
    String,
)


class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ENTERED_IN_ERROR = "entered-in-error"
    ON_HOLD = "on-hold"
    UNKNOWN = "unknown"


class AccountCoverage(BackboneElement):
    coverage: Reference
    priority: PositiveInt | None = None


class AccountGuarantor(BackboneElement):
    party: Reference
    on_hold: Boolean | None = None
    period: Period | None = None


class AccountDiagnosis(BackboneElement):
    sequence: PositiveInt | None = None
    condition: CodeableReference
    date_of_diagnosis: DateTime | None = None
    type: list[CodeableConcept] | None = None
    on_admission: Boolean | None = None
    package_code: list[CodeableConcept] | None = None


class AccountProcedure(BackboneElement):
    sequence: PositiveInt | None = None
    code: CodeableReference
    date_of_service: DateTime | None = None
    type: list[CodeableConcept] | None = None
    package_code: list[CodeableConcept] | None = None
    device: list[Reference] | None = None


class AccountRelatedAccount(BackboneElement):
    relationship: CodeableConcept | None = None
    account: Reference


class AccountBalance(BackboneElement):
    aggregate: CodeableConcept | None = None
    term: CodeableConcept | None = None
    estimate: Boolean | None = None
    amount: Money


class Account(DomainResource):
    """A financial tool for tracking value accrued for a particular purpose."""

    resource_type: ClassVar[str] = "Account"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(AccountStatus)]
    billing_status: CodeableConcept | None = None
    type: CodeableConcept | None = None
    name: String | None = None
    subject: list[Reference] | None = None
    service_period: Period | None = None
    coverage: list[AccountCoverage] | None = None
    owner: Reference | None = None
    description: Markdown | None = None
    guarantor: list[AccountGuarantor] | None = None
    diagnosis: list[AccountDiagnosis] | None = None
    procedure: list[AccountProcedure] | None = None
    related_account: list[AccountRelatedAccount] | None = None
    currency: CodeableConcept | None = None
    balance: list[AccountBalance] | None = None
    calculated_at: Instant | None = None

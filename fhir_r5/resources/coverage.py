"""Coverage resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    DomainResource,
    Identifier,
    Money,
    Period,
    PositiveInt,
    Quantity,
    Reference,
    String,
)
from fhir_r5.models.codes import FinancialResourceStatus


class CoverageKind(str, Enum):
    INSURANCE = "insurance"
    SELF_PAY = "self-pay"
    OTHER = "other"


class CoveragePaymentBy(BackboneElement):
    party: Reference
    responsibility: String | None = None


class CoverageClass(BackboneElement):
    type: CodeableConcept
    value: Identifier
    name: String | None = None


class CoverageCostToBeneficiaryException(BackboneElement):
    type: CodeableConcept
    period: Period | None = None


class CoverageCostToBeneficiary(BackboneElement):
    """Patient payments for services/products."""

    type: CodeableConcept | None = None
    category: CodeableConcept | None = None
    network: CodeableConcept | None = None
    unit: CodeableConcept | None = None
    term: CodeableConcept | None = None
    value: Quantity | Money | None = None
    exception: list[CoverageCostToBeneficiaryException] | None = None


class Coverage(DomainResource):
    """Insurance or medical plan or a payment agreement."""

    resource_type: ClassVar[str] = "Coverage"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(FinancialResourceStatus)]
    kind: Annotated[Code, Binding(CoverageKind)]
    payment_by: list[CoveragePaymentBy] | None = None
    type: CodeableConcept | None = None
    policy_holder: Reference | None = None
    subscriber: Reference | None = None
    subscriber_id: list[Identifier] | None = None
    beneficiary: Reference
    dependent: String | None = None
    relationship: CodeableConcept | None = None
    period: Period | None = None
    insurer: Reference | None = None
    class_: list[CoverageClass] | None = Field(default=None, alias="class")
    order: PositiveInt | None = None
    network: String | None = None
    cost_to_beneficiary: list[CoverageCostToBeneficiary] | None = None
    subrogation: Boolean | None = None
    contract: list[Reference] | None = None
    insurance_plan: Reference | None = None

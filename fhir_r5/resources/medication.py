"""Medication resource."""

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
    Quantity,
    Ratio,
    Reference,
    String,
)


class MedicationStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ENTERED_IN_ERROR = "entered-in-error"


class MedicationIngredient(BackboneElement):
    item: CodeableReference
    is_active: Boolean | None = None
    strength: Ratio | CodeableConcept | Quantity | None = None


class MedicationBatch(BackboneElement):
    lot_number: String | None = None
    expiration_date: DateTime | None = None


class Medication(DomainResource):
    """Definition of a medication for the purposes of prescribing, dispensing, and administering."""

    resource_type: ClassVar[str] = "Medication"

    identifier: list[Identifier] | None = None
    code: CodeableConcept | None = None
    status: Annotated[Code | None, Binding(MedicationStatus)] = None
    marketing_authorization_holder: Reference | None = None
    dose_form: CodeableConcept | None = None
    total_volume: Quantity | None = None
    ingredient: list[MedicationIngredient] | None = None
    batch: MedicationBatch | None = None
    definition: Reference | None = None

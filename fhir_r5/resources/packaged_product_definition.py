"""PackagedProductDefinition resource."""

from typing import ClassVar

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Boolean,
    CodeableConcept,
    CodeableReference,
    Date,
    DateTime,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    MarketingStatus,
    ProductShelfLife,
    Quantity,
    Reference,
    String,
)


class PackagedProductDefinitionLegalStatusOfSupply(BackboneElement):
    code: CodeableConcept | None = None
    jurisdiction: CodeableConcept | None = None


class PackagedProductDefinitionPackagingProperty(BackboneElement):
    type: CodeableConcept
    value: CodeableConcept | Quantity | Date | Boolean | Attachment | None = None


class PackagedProductDefinitionPackagingContainedItem(BackboneElement):
    item: CodeableReference
    amount: Quantity | None = None


class PackagedProductDefinitionPackaging(BackboneElement):
    """A packaging layer; inner layers nest under ``packaging``."""

    identifier: list[Identifier] | None = None
    type: CodeableConcept | None = None
    component_part: Boolean | None = None
    quantity: Integer | None = None
    material: list[CodeableConcept] | None = None
    alternate_material: list[CodeableConcept] | None = None
    shelf_life_storage: list[ProductShelfLife] | None = None
    manufacturer: list[Reference] | None = None
    property: list[PackagedProductDefinitionPackagingProperty] | None = None
    contained_item: list[PackagedProductDefinitionPackagingContainedItem] | None = None
    packaging: list["PackagedProductDefinitionPackaging"] | None = None

    def depth(self) -> int:
        """Number of packaging layers from this one inwards."""
        return 1 + max((inner.depth() for inner in self.packaging or []), default=0)


class PackagedProductDefinition(DomainResource):
    """A medically related item or items, in a container or package."""

    resource_type: ClassVar[str] = "PackagedProductDefinition"

    identifier: list[Identifier] | None = None
    name: String | None = None
    type: CodeableConcept | None = None
    package_for: list[Reference] | None = None
    status: CodeableConcept | None = None
    status_date: DateTime | None = None
    contained_item_quantity: list[Quantity] | None = None
    description: Markdown | None = None
    legal_status_of_supply: list[PackagedProductDefinitionLegalStatusOfSupply] | None = None
    marketing_status: list[MarketingStatus] | None = None
    copackaged_indicator: Boolean | None = None
    manufacturer: list[Reference] | None = None
    attached_document: list[Reference] | None = None
    packaging: PackagedProductDefinitionPackaging | None = None
    characteristic: list[PackagedProductDefinitionPackagingProperty] | None = None


PackagedProductDefinitionPackaging.model_rebuild()

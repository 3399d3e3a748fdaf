"""Typed FHIR R5 model: primitives, element layer and resource frame."""

from fhir_r5.models.base import (
    BackboneElement,
    Binding,
    Element,
    Extension,
    FhirModel,
    OpenType,
)
from fhir_r5.models.datatypes import (
    Address,
    Age,
    Annotation,
    Attachment,
    CodeableConcept,
    CodeableReference,
    Coding,
    ContactPoint,
    Count,
    Distance,
    Dosage,
    DosageDoseAndRate,
    Duration,
    HumanName,
    Identifier,
    MarketingStatus,
    Meta,
    Money,
    Narrative,
    Period,
    ProductShelfLife,
    Quantity,
    Range,
    Ratio,
    RatioRange,
    Reference,
    SampledData,
    Signature,
    Timing,
    TimingRepeat,
)
from fhir_r5.models.metadatatypes import (
    Availability,
    AvailabilityAvailableTime,
    AvailabilityNotAvailableTime,
    ContactDetail,
    DataRequirement,
    DataRequirementCodeFilter,
    DataRequirementDateFilter,
    DataRequirementSort,
    DataRequirementValueFilter,
    Expression,
    ExtendedContactDetail,
    MonetaryComponent,
    ParameterDefinition,
    RelatedArtifact,
    TriggerDefinition,
    UsageContext,
    VirtualServiceDetail,
)
from fhir_r5.models.primitives import (
    Base64Binary,
    Boolean,
    Canonical,
    Code,
    Date,
    DatePrecision,
    DateTime,
    Decimal,
    Id,
    Instant,
    Integer,
    Integer64,
    JsonNumber,
    Markdown,
    Oid,
    PositiveInt,
    Primitive,
    String,
    Time,
    UnsignedInt,
    Uri,
    Url,
    Uuid,
    Xhtml,
)
from fhir_r5.models.resource import DomainResource, Resource

__all__ = [
    # base
    "BackboneElement",
    "Binding",
    "Element",
    "Extension",
    "FhirModel",
    "OpenType",
    # primitives
    "Base64Binary",
    "Boolean",
    "Canonical",
    "Code",
    "Date",
    "DatePrecision",
    "DateTime",
    "Decimal",
    "Id",
    "Instant",
    "Integer",
    "Integer64",
    "JsonNumber",
    "Markdown",
    "Oid",
    "PositiveInt",
    "Primitive",
    "String",
    "Time",
    "UnsignedInt",
    "Uri",
    "Url",
    "Uuid",
    "Xhtml",
    # data types
    "Address",
    "Age",
    "Annotation",
    "Attachment",
    "CodeableConcept",
    "CodeableReference",
    "Coding",
    "ContactPoint",
    "Count",
    "Distance",
    "Dosage",
    "DosageDoseAndRate",
    "Duration",
    "HumanName",
    "Identifier",
    "MarketingStatus",
    "Meta",
    "Money",
    "Narrative",
    "Period",
    "ProductShelfLife",
    "Quantity",
    "Range",
    "Ratio",
    "RatioRange",
    "Reference",
    "SampledData",
    "Signature",
    "Timing",
    "TimingRepeat",
    # metadata types
    "Availability",
    "AvailabilityAvailableTime",
    "AvailabilityNotAvailableTime",
    "ContactDetail",
    "DataRequirement",
    "DataRequirementCodeFilter",
    "DataRequirementDateFilter",
    "DataRequirementSort",
    "DataRequirementValueFilter",
    "Expression",
    "ExtendedContactDetail",
    "MonetaryComponent",
    "ParameterDefinition",
    "RelatedArtifact",
    "TriggerDefinition",
    "UsageContext",
    "VirtualServiceDetail",
    # resource frame
    "DomainResource",
    "Resource",
]

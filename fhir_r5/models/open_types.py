"""Data types admissible for ``Extension.value[x]`` (the FHIR "open type" list)."""

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
    Duration,
    HumanName,
    Identifier,
    Meta,
    Money,
    Period,
    Quantity,
    Range,
    Ratio,
    RatioRange,
    Reference,
    SampledData,
    Signature,
    Timing,
)
from fhir_r5.models.metadatatypes import (
    Availability,
    ContactDetail,
    DataRequirement,
    Expression,
    ExtendedContactDetail,
    ParameterDefinition,
    RelatedArtifact,
    TriggerDefinition,
    UsageContext,
)
from fhir_r5.models.primitives import PRIMITIVE_TYPES

OPEN_TYPES: tuple[type, ...] = PRIMITIVE_TYPES + (
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
    Duration,
    HumanName,
    Identifier,
    Money,
    Period,
    Quantity,
    Range,
    Ratio,
    RatioRange,
    Reference,
    SampledData,
    Signature,
    Timing,
    ContactDetail,
    DataRequirement,
    Expression,
    ParameterDefinition,
    RelatedArtifact,
    TriggerDefinition,
    UsageContext,
    Availability,
    ExtendedContactDetail,
    Dosage,
    Meta,
)

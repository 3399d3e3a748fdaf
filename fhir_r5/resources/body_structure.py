"""BodyStructure resource."""

from typing import ClassVar

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Boolean,
    CodeableConcept,
    CodeableReference,
    DomainResource,
    Identifier,
    Markdown,
    Quantity,
    Reference,
)


class BodyStructureDistanceFromLandmark(BackboneElement):
    device: list[CodeableReference] | None = None
    value: list[Quantity] | None = None


class BodyStructureBodyLandmarkOrientation(BackboneElement):
    landmark_description: list[CodeableConcept] | None = None
    clock_face_position: list[CodeableConcept] | None = None
    distance_from_landmark: list[BodyStructureDistanceFromLandmark] | None = None
    surface_orientation: list[CodeableConcept] | None = None


class BodyStructureIncludedStructure(BackboneElement):
    """Included anatomic location(s); also used for excluded ones."""

    structure: CodeableConcept
    laterality: CodeableConcept | None = None
    body_landmark_orientation: list[BodyStructureBodyLandmarkOrientation] | None = None
    spatial_reference: list[Reference] | None = None
    qualifier: list[CodeableConcept] | None = None


class BodyStructure(DomainResource):
    """Specific and identified anatomical structure."""

    resource_type: ClassVar[str] = "BodyStructure"

    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    morphology: CodeableConcept | None = None
    included_structure: list[BodyStructureIncludedStructure]
    excluded_structure: list[BodyStructureIncludedStructure] | None = None
    description: Markdown | None = None
    image: list[Attachment] | None = None
    patient: Reference

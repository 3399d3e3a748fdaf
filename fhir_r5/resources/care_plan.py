"""CarePlan resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Annotation,
    BackboneElement,
    Binding,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    DateTime,
    DomainResource,
    Identifier,
    Period,
    Reference,
    String,
    Uri,
)
from fhir_r5.models.codes import RequestStatus


class CarePlanIntent(str, Enum):
    PROPOSAL = "proposal"
    PLAN = "plan"
    ORDER = "order"
    OPTION = "option"
    DIRECTIVE = "directive"


class CarePlanActivity(BackboneElement):
    performed_activity: list[CodeableReference] | None = None
    progress: list[Annotation] | None = None
    planned_activity_reference: Reference | None = None


class CarePlan(DomainResource):
    """Healthcare plan for patient or group."""

    resource_type: ClassVar[str] = "CarePlan"

    identifier: list[Identifier] | None = None
    instantiates_canonical: list[Canonical] | None = None
    instantiates_uri: list[Uri] | None = None
    based_on: list[Reference] | None = None
    replaces: list[Reference] | None = None
    part_of: list[Reference] | None = None
    status: Annotated[Code, Binding(RequestStatus)]
    intent: Annotated[Code, Binding(CarePlanIntent)]
    category: list[CodeableConcept] | None = None
    title: String | None = None
    description: String | None = None
    subject: Reference
    encounter: Reference | None = None
    period: Period | None = None
    created: DateTime | None = None
    custodian: Reference | None = None
    contributor: list[Reference] | None = None
    care_team: list[Reference] | None = None
    addresses: list[CodeableReference] | None = None
    supporting_info: list[Reference] | None = None
    goal: list[Reference] | None = None
    activity: list[CarePlanActivity] | None = None
    note: list[Annotation] | None = None

"""Flag resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Binding,
    Code,
    CodeableConcept,
    DomainResource,
    Identifier,
    Period,
    Reference,
)


class FlagStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ENTERED_IN_ERROR = "entered-in-error"


class Flag(DomainResource):
    """Prospective warnings of potential issues when providing care to the patient."""

    resource_type: ClassVar[str] = "Flag"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(FlagStatus)]
    category: list[CodeableConcept] | None = None
    code: CodeableConcept
    subject: Reference
    period: Period | None = None
    encounter: Reference | None = None
    author: Reference | None = None

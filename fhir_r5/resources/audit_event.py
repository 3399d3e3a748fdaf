"""AuditEvent resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Base64Binary,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    Coding,
    DateTime,
    DomainResource,
    Instant,
    Integer,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
    String,
    Time,
    Uri,
)


class AuditEventAction(str, Enum):
    CREATE = "C"
    READ = "R"
    UPDATE = "U"
    DELETE = "D"
    EXECUTE = "E"


class AuditEventSeverity(str, Enum):
    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFORMATIONAL = "informational"
    DEBUG = "debug"


class AuditEventOutcome(BackboneElement):
    code: Coding
    detail: list[CodeableConcept] | None = None


class AuditEventAgent(BackboneElement):
    """Actor involved in the event."""

    type: CodeableConcept | None = None
    role: list[CodeableConcept] | None = None
    who: Reference
    requestor: Boolean | None = None
    location: Reference | None = None
    policy: list[Uri] | None = None
    network: Reference | Uri | String | None = None
    authorization: list[CodeableConcept] | None = None


class AuditEventSource(BackboneElement):
    site: Reference | None = None
    observer: Reference
    type: list[CodeableConcept] | None = None


class AuditEventEntityDetail(BackboneElement):
    type: CodeableConcept
    value: (
        Quantity
        | CodeableConcept
        | String
        | Boolean
        | Integer
        | Range
        | Ratio
        | Time
        | DateTime
        | Period
        | Base64Binary
    )


class AuditEventEntity(BackboneElement):
    what: Reference | None = None
    role: CodeableConcept | None = None
    security_label: list[CodeableConcept] | None = None
    query: Base64Binary | None = None
    detail: list[AuditEventEntityDetail] | None = None
    agent: list[AuditEventAgent] | None = None


class AuditEvent(DomainResource):
    """A record of an event relevant for purposes such as operations, privacy, security, maintenance, and performance analysis."""

    resource_type: ClassVar[str] = "AuditEvent"

    category: list[CodeableConcept] | None = None
    code: CodeableConcept
    action: Annotated[Code | None, Binding(AuditEventAction)] = None
    severity: Annotated[Code | None, Binding(AuditEventSeverity)] = None
    occurred: Period | DateTime | None = None
    recorded: Instant
    outcome: AuditEventOutcome | None = None
    authorization: list[CodeableConcept] | None = None
    based_on: list[Reference] | None = None
    patient: Reference | None = None
    encounter: Reference | None = None
    agent: list[AuditEventAgent]
    source: AuditEventSource
    entity: list[AuditEventEntity] | None = None

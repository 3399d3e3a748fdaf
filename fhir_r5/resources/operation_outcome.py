"""OperationOutcome resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    CodeableConcept,
    DomainResource,
    String,
)


class IssueSeverity(str, Enum):
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    SUCCESS = "success"


class IssueType(str, Enum):
    """Type of an OperationOutcome issue."""

    INVALID = "invalid"
    STRUCTURE = "structure"
    REQUIRED = "required"
    VALUE = "value"
    INVARIANT = "invariant"
    SECURITY = "security"
    LOGIN = "login"
    UNKNOWN = "unknown"
    EXPIRED = "expired"
    FORBIDDEN = "forbidden"
    SUPPRESSED = "suppressed"
    PROCESSING = "processing"
    NOT_SUPPORTED = "not-supported"
    DUPLICATE = "duplicate"
    MULTIPLE_MATCHES = "multiple-matches"
    NOT_FOUND = "not-found"
    DELETED = "deleted"
    TOO_LONG = "too-long"
    CODE_INVALID = "code-invalid"
    EXTENSION = "extension"
    TOO_COSTLY = "too-costly"
    BUSINESS_RULE = "business-rule"
    CONFLICT = "conflict"
    LIMITED_FILTER = "limited-filter"
    TRANSIENT = "transient"
    LOCK_ERROR = "lock-error"
    NO_STORE = "no-store"
    EXCEPTION = "exception"
    TIMEOUT = "timeout"
    INCOMPLETE = "incomplete"
    THROTTLED = "throttled"
    INFORMATIONAL = "informational"
    SUCCESS = "success"


class OperationOutcomeIssue(BackboneElement):
    severity: Annotated[Code, Binding(IssueSeverity)]
    code: Annotated[Code, Binding(IssueType)]
    details: CodeableConcept | None = None
    diagnostics: String | None = None
    location: list[String] | None = None
    expression: list[String] | None = None


class OperationOutcome(DomainResource):
    """Information about the outcome of an operation: errors, warnings and information."""

    resource_type: ClassVar[str] = "OperationOutcome"

    issue: list[OperationOutcomeIssue]

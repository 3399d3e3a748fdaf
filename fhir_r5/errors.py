"""
Error types for the FHIR R5 codec.

Every codec failure is a ``CodecError`` carrying its kind, the JSON Pointer
path of the offending value and a human-readable detail. Parsing either
returns a complete resource or raises one of these; no partial tree is ever
handed back.
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """User-visible error categories."""

    STRUCTURAL = "structural"
    CARDINALITY = "cardinality"
    LEXICAL = "lexical"
    DISCRIMINATOR = "discriminator"
    BINDING = "binding"
    EXTENSION = "extension"


class ErrorKind(str, Enum):
    STRUCTURAL = "Structural"
    INVALID_LEXICAL_FORM = "InvalidLexicalForm"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    UNKNOWN_RESOURCE_TYPE = "UnknownResourceType"
    RESOURCE_TYPE_MISMATCH = "ResourceTypeMismatch"
    MULTIPLE_CHOICE_VARIANTS = "MultipleChoiceVariants"
    PRIMITIVE_SIBLING_MISALIGNMENT = "PrimitiveSiblingMisalignment"
    UNKNOWN_CODE_FOR_REQUIRED_BINDING = "UnknownCodeForRequiredBinding"
    UNKNOWN_FIELD = "UnknownField"
    INVALID_EXTENSION = "InvalidExtension"
    CONSTRAINT_VIOLATION = "ConstraintViolation"


ERROR_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.STRUCTURAL: ErrorCategory.STRUCTURAL,
    ErrorKind.INVALID_LEXICAL_FORM: ErrorCategory.LEXICAL,
    ErrorKind.MISSING_REQUIRED_FIELD: ErrorCategory.CARDINALITY,
    ErrorKind.UNKNOWN_RESOURCE_TYPE: ErrorCategory.DISCRIMINATOR,
    ErrorKind.RESOURCE_TYPE_MISMATCH: ErrorCategory.DISCRIMINATOR,
    ErrorKind.MULTIPLE_CHOICE_VARIANTS: ErrorCategory.CARDINALITY,
    ErrorKind.PRIMITIVE_SIBLING_MISALIGNMENT: ErrorCategory.STRUCTURAL,
    ErrorKind.UNKNOWN_CODE_FOR_REQUIRED_BINDING: ErrorCategory.BINDING,
    ErrorKind.UNKNOWN_FIELD: ErrorCategory.STRUCTURAL,
    ErrorKind.INVALID_EXTENSION: ErrorCategory.EXTENSION,
    ErrorKind.CONSTRAINT_VIOLATION: ErrorCategory.CARDINALITY,
}


class CodecError(Exception):
    """Base exception for all codec errors."""

    kind: ErrorKind = ErrorKind.STRUCTURAL

    def __init__(self, path: str, detail: str, details: dict[str, Any] | None = None):
        self.path = path
        self.detail = detail
        self.details = details or {}
        self.message = f"{self.kind.value} at {path}: {detail}"
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        return ERROR_CATEGORIES[self.kind]

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "kind": self.kind.value,
            "category": self.category.value,
            "path": self.path,
            "message": self.message,
            "details": self.details,
        }


# Structural Errors


class StructuralError(CodecError):
    """Raised when the JSON shape does not match the model (object vs array, scalar vs object)."""

    kind = ErrorKind.STRUCTURAL


class UnknownFieldError(CodecError):
    """Raised in strict mode when an object carries an undeclared member."""

    kind = ErrorKind.UNKNOWN_FIELD

    def __init__(self, path: str, name: str):
        self.name = name
        super().__init__(path, f"unknown field '{name}'", details={"name": name})


class PrimitiveSiblingMisalignmentError(CodecError):
    """Raised when a primitive array and its ``_field`` sibling do not pair up."""

    kind = ErrorKind.PRIMITIVE_SIBLING_MISALIGNMENT


# Lexical Errors


class InvalidLexicalFormError(CodecError):
    """Raised when a primitive value fails its regex or range."""

    kind = ErrorKind.INVALID_LEXICAL_FORM

    def __init__(self, type_name: str, value: Any, path: str, reason: str | None = None):
        self.type_name = type_name
        self.value = value
        detail = reason or f"invalid {type_name} value {value!r}"
        super().__init__(path, detail, details={"type": type_name, "value": value})


# Cardinality Errors


class MissingRequiredFieldError(CodecError):
    """Raised when a required field is absent."""

    kind = ErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, path: str):
        super().__init__(path, "required field is missing")


class MultipleChoiceVariantsError(CodecError):
    """Raised when more than one alternative of a choice element is present."""

    kind = ErrorKind.MULTIPLE_CHOICE_VARIANTS

    def __init__(self, path: str, names: list[str]):
        self.names = list(names)
        super().__init__(
            path,
            f"more than one choice variant present: {', '.join(self.names)}",
            details={"names": self.names},
        )


class ConstraintViolationError(CodecError):
    """Raised when a base-model rule spanning several fields is broken."""

    kind = ErrorKind.CONSTRAINT_VIOLATION


# Discriminator Errors


class UnknownResourceTypeError(CodecError):
    """Raised when ``resourceType`` is missing or names no known resource."""

    kind = ErrorKind.UNKNOWN_RESOURCE_TYPE

    def __init__(self, name: str | None, path: str = "/"):
        self.name = name
        detail = "missing resourceType" if name is None else f"unknown resourceType '{name}'"
        super().__init__(path, detail, details={"name": name})


class ResourceTypeMismatchError(CodecError):
    """Raised when a document's ``resourceType`` is not the expected one."""

    kind = ErrorKind.RESOURCE_TYPE_MISMATCH

    def __init__(self, expected: str, actual: str, path: str = "/"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            path,
            f"expected resourceType '{expected}', got '{actual}'",
            details={"expected": expected, "actual": actual},
        )


# Binding and Extension Errors


class UnknownCodeForRequiredBindingError(CodecError):
    """Raised when a code is not a member of its required value set."""

    kind = ErrorKind.UNKNOWN_CODE_FOR_REQUIRED_BINDING

    def __init__(self, path: str, value: str, value_set: str | None = None):
        self.value = value
        self.value_set = value_set
        detail = f"'{value}' is not in the required value set"
        if value_set:
            detail += f" {value_set}"
        super().__init__(path, detail, details={"value": value, "value_set": value_set})


class InvalidExtensionError(CodecError):
    """Raised when an extension carries both or neither of ``value[x]`` and nested extensions."""

    kind = ErrorKind.INVALID_EXTENSION

"""
Base-model constraints and advisory diagnostics.

Constraints are rules of the base model that span more than one field
(``Period`` ordering, ``contained`` shape, ``Parameters.parameter``
content). They are checked as each element is parsed and raise
``ConstraintViolationError``.

Diagnostics are discouraged-but-legal combinations. They never fail a
parse; ``collect_diagnostics`` returns them as a list for the caller.
"""

import re
from collections.abc import Iterator
from enum import Enum
from functools import cache

from pydantic import BaseModel, Field

from fhir_r5.errors import ConstraintViolationError
from fhir_r5.models.datatypes import Attachment, Coding, Period, Reference
from fhir_r5.models.primitives import DatePrecision
from fhir_r5.models.resource import DomainResource, Resource
from fhir_r5.models.schema import FieldKind, fields_of, join_path, type_suffix

# Validation patterns
RESOURCE_TYPE_PATTERN = re.compile(r"^[A-Z][A-Za-z]+$")


class DiagnosticSeverity(str, Enum):
    """Severity of an advisory diagnostic (OperationOutcome issue severity)."""

    WARNING = "warning"
    INFORMATION = "information"


class Diagnostic(BaseModel):
    """A non-fatal finding about a parsed resource."""

    severity: DiagnosticSeverity = Field(description="Issue severity")
    code: str = Field(description="OperationOutcome issue type code")
    path: str = Field(description="JSON Pointer to the element concerned")
    message: str = Field(description="Human-readable explanation")
    rule: str = Field(description="Short identifier of the advisory rule that fired")


# Bundle.type -> entry member every entry is expected to carry
_BUNDLE_ENTRY_EXPECTATIONS = {
    "transaction": "request",
    "batch": "request",
    "transaction-response": "response",
    "batch-response": "response",
    "searchset": "search",
}


def validate_resource_type(resource_type: str) -> str:
    """
    Validate FHIR resource type format.

    Raises:
        ValueError: If format is invalid
    """
    if not resource_type or not RESOURCE_TYPE_PATTERN.match(resource_type):
        raise ValueError(
            f"Invalid resource type '{resource_type}'. "
            f"Must start with uppercase letter followed by letters only."
        )
    return resource_type


# Constraints


def _period_bounds_ordered(period: Period) -> bool:
    start, end = period.start, period.end
    if start is None or end is None or start.value is None or end.value is None:
        return True
    if start.precision is DatePrecision.SECOND and end.precision is DatePrecision.SECOND:
        return start.to_python() <= end.to_python()
    # Compare at the coarser of the two precisions
    start_parts, end_parts = start.date_parts(), end.date_parts()
    depth = min(len(start_parts), len(end_parts))
    return start_parts[:depth] <= end_parts[:depth]


def _check_contained(resource: DomainResource, path: str) -> None:
    seen: set[str] = set()
    for i, inner in enumerate(resource.contained or []):
        inner_path = join_path(path, "contained", i)
        inner_id = inner.id.value if inner.id is not None else None
        if inner_id is None:
            raise ConstraintViolationError(inner_path, "contained resources must have an id")
        if isinstance(inner, DomainResource) and inner.contained:
            raise ConstraintViolationError(
                inner_path, "contained resources must not contain other resources"
            )
        if inner_id in seen:
            raise ConstraintViolationError(
                inner_path,
                f"duplicate contained id '{inner_id}'",
                details={"id": inner_id},
            )
        seen.add(inner_id)


@cache
def _parameters_parameter() -> type:
    from fhir_r5.resources.parameters import ParametersParameter

    return ParametersParameter


def check_constraints(model: BaseModel, path: str) -> None:
    """
    Check the multi-field rules of one element.

    Raises:
        ConstraintViolationError: If the element breaks one of them
    """
    if isinstance(model, Period):
        if not _period_bounds_ordered(model):
            raise ConstraintViolationError(
                path,
                f"period start {model.start.value} is after end {model.end.value}",
            )
    elif isinstance(model, DomainResource):
        if model.contained:
            _check_contained(model, path)
    elif isinstance(model, _parameters_parameter()):
        carried = [
            name for name in ("value", "resource", "part") if getattr(model, name) is not None
        ]
        if len(carried) > 1:
            raise ConstraintViolationError(
                path,
                f"parameter carries more than one of value[x], resource and part: {', '.join(carried)}",
            )


def iter_elements(model: BaseModel, path: str = "/") -> Iterator[tuple[BaseModel, str]]:
    """
    Walk a model tree depth-first, yielding every model with its JSON Pointer.

    Primitive elements are yielded at their value path.
    """
    yield model, path
    for spec in fields_of(type(model)):
        value = getattr(model, spec.name)
        if value is None or spec.kind is FieldKind.SCALAR:
            continue
        if spec.kind is FieldKind.CHOICE:
            items = [(value, join_path(path, spec.json_name + type_suffix(type(value))))]
        elif spec.is_list:
            items = [(item, join_path(path, spec.json_name, i)) for i, item in enumerate(value)]
        else:
            items = [(value, join_path(path, spec.json_name))]
        for item, item_path in items:
            if isinstance(item, BaseModel):
                yield from iter_elements(item, item_path)


def validate_resource(resource: Resource) -> None:
    """
    Check the constraints of every element of a constructed resource.

    Parsing already does this; use it for trees built or modified in code.

    Raises:
        ConstraintViolationError: On the first broken rule
    """
    for model, path in iter_elements(resource):
        check_constraints(model, path)


# Diagnostics


def _bundle_diagnostics(bundle: Resource, path: str) -> Iterator[Diagnostic]:
    bundle_type = bundle.type.to_json() if bundle.type is not None else None
    expected = _BUNDLE_ENTRY_EXPECTATIONS.get(bundle_type)
    if expected is None:
        return
    for i, entry in enumerate(bundle.entry or []):
        if getattr(entry, expected) is None:
            yield Diagnostic(
                severity=DiagnosticSeverity.WARNING,
                code="business-rule",
                path=join_path(path, "entry", i),
                message=f"{bundle_type} bundle entries should carry '{expected}'",
                rule=f"bundle-entry-{expected}",
            )


def _element_diagnostics(model: BaseModel, path: str) -> Iterator[Diagnostic]:
    if getattr(type(model), "resource_type", None) == "Bundle":
        yield from _bundle_diagnostics(model, path)

    if isinstance(model, Coding) and model.version is not None and model.system is None:
        yield Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code="business-rule",
            path=path,
            message="Coding.version is present without Coding.system",
            rule="coding-version-without-system",
        )

    if isinstance(model, Attachment) and model.data is not None and model.content_type is None:
        yield Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code="incomplete",
            path=path,
            message="Attachment.data is present without Attachment.contentType",
            rule="attachment-data-without-content-type",
        )

    for spec in fields_of(type(model)):
        if not (spec.required and spec.kind is FieldKind.COMPLEX and spec.types == (Reference,)):
            continue
        value = getattr(model, spec.name)
        references = value if spec.is_list else [value]
        for i, reference in enumerate(references or []):
            if reference is None:
                continue
            if reference.reference is None and reference.identifier is None and reference.display is None:
                ref_path = join_path(path, spec.json_name, i) if spec.is_list else join_path(path, spec.json_name)
                yield Diagnostic(
                    severity=DiagnosticSeverity.WARNING,
                    code="required",
                    path=ref_path,
                    message="required reference has none of reference, identifier or display",
                    rule="reference-empty",
                )

    for name in model.model_extra or {}:
        yield Diagnostic(
            severity=DiagnosticSeverity.INFORMATION,
            code="informational",
            path=join_path(path, name),
            message=f"unknown field '{name}' was kept",
            rule="unknown-field",
        )


def collect_diagnostics(resource: Resource) -> list[Diagnostic]:
    """
    Collect advisory diagnostics for a resource tree.

    Args:
        resource: Parsed or constructed resource

    Returns:
        Diagnostics in document order (empty when nothing is discouraged)
    """
    diagnostics: list[Diagnostic] = []
    for model, path in iter_elements(resource):
        diagnostics.extend(_element_diagnostics(model, path))
    return diagnostics

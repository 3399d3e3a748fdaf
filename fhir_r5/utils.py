"""
FHIR utility functions for OperationOutcome conversion, bundle processing and JSON comparison.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from fhir_r5.codec import jsonio
from fhir_r5.config.logging import get_logger
from fhir_r5.errors import CodecError, ErrorCategory, ErrorKind
from fhir_r5.models.primitives import JsonNumber, number_lexical
from fhir_r5.models.resource import Resource
from fhir_r5.models.schema import join_path
from fhir_r5.resources.bundle import Bundle
from fhir_r5.resources.operation_outcome import OperationOutcome, OperationOutcomeIssue
from fhir_r5.validation import Diagnostic

logger = get_logger(__name__)

# Error category -> OperationOutcome issue type
_ISSUE_TYPES: dict[ErrorCategory, str] = {
    ErrorCategory.STRUCTURAL: "structure",
    ErrorCategory.CARDINALITY: "required",
    ErrorCategory.LEXICAL: "value",
    ErrorCategory.DISCRIMINATOR: "not-supported",
    ErrorCategory.BINDING: "code-invalid",
    ErrorCategory.EXTENSION: "extension",
}


def _issue_type(error: CodecError) -> str:
    if error.kind is ErrorKind.CONSTRAINT_VIOLATION:
        return "invariant"
    return _ISSUE_TYPES[error.category]


def operation_outcome_from_error(error: CodecError) -> OperationOutcome:
    """
    Convert a codec error to an OperationOutcome with a single error issue.

    The JSON Pointer of the failure goes into ``issue.location``.

    Args:
        error: The error raised by a parse operation

    Returns:
        OperationOutcome describing the failure
    """
    issue = OperationOutcomeIssue(
        severity="error",
        code=_issue_type(error),
        diagnostics=error.message,
        location=[error.path],
    )
    return OperationOutcome(issue=[issue])


def operation_outcome_from_diagnostics(diagnostics: Iterable[Diagnostic]) -> OperationOutcome:
    """
    Convert advisory diagnostics to an OperationOutcome.

    An empty set of diagnostics yields a single informational issue, since
    an OperationOutcome needs at least one.
    """
    issues = [
        OperationOutcomeIssue(
            severity=diagnostic.severity.value,
            code=diagnostic.code,
            diagnostics=diagnostic.message,
            location=[diagnostic.path],
        )
        for diagnostic in diagnostics
    ]
    if not issues:
        issues.append(
            OperationOutcomeIssue(
                severity="information", code="informational", diagnostics="No issues detected"
            )
        )
    return OperationOutcome(issue=issues)


def iter_bundle_resources(bundle: Bundle) -> Iterator[Resource]:
    """
    Iterate the resources of a Bundle, unwrapping the entry wrapper objects.

    Entries without a resource (e.g. DELETE requests) are skipped.
    """
    for entry in bundle.entry or []:
        if entry.resource is not None:
            yield entry.resource


def resources_by_type(bundle: Bundle) -> dict[str, list[Resource]]:
    """
    Group the resources of a Bundle by ``resourceType``.

    Args:
        bundle: A parsed Bundle

    Returns:
        Dictionary mapping each resource type to its resources, in entry order
    """
    grouped: dict[str, list[Resource]] = {}
    for resource in iter_bundle_resources(bundle):
        grouped.setdefault(resource.resource_type, []).append(resource)

    logger.debug("Grouped bundle resources", types=len(grouped))
    return grouped


def _as_tree(document: Any) -> Any:
    if isinstance(document, (bytes, bytearray, str)):
        return jsonio.loads(document)
    return document


def _is_number(value: Any) -> bool:
    return isinstance(value, JsonNumber) or (not isinstance(value, str) and number_lexical(value) is not None)


def _differences(left: Any, right: Any, path: str, out: list[str]) -> None:
    if isinstance(left, dict) and isinstance(right, dict):
        for key in sorted(set(left) | set(right)):
            if key not in left or key not in right:
                out.append(join_path(path, key))
            else:
                _differences(left[key], right[key], join_path(path, key), out)
    elif isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            out.append(path)
            return
        for i, (a, b) in enumerate(zip(left, right)):
            _differences(a, b, join_path(path, i), out)
    elif _is_number(left) or _is_number(right):
        # Numbers compare by lexical form, so 1.0 and 1.00 differ
        if not (_is_number(left) and _is_number(right)) or number_lexical(left) != number_lexical(right):
            out.append(path)
    elif type(left) is not type(right) and not (isinstance(left, str) and isinstance(right, str)):
        out.append(path)
    elif left != right:
        out.append(path)


def json_differences(left: Any, right: Any) -> list[str]:
    """
    List the JSON Pointers at which two JSON documents differ.

    Object member order is ignored; array order and number lexical forms
    are significant. Documents may be bytes, strings or decoded trees.
    """
    out: list[str] = []
    _differences(_as_tree(left), _as_tree(right), "/", out)
    return out


def json_equal(left: Any, right: Any) -> bool:
    """Check two JSON documents for semantic equality (see ``json_differences``)."""
    return not json_differences(left, right)

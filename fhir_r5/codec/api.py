"""
Public parse and emit operations.

``strict=None`` on any parse function means "use the configured default"
(``FHIR_R5_STRICT``, lenient unless set).
"""

from dataclasses import dataclass, field
from typing import Any, TypeVar

from fhir_r5.codec import jsonio
from fhir_r5.codec.emitter import Emitter
from fhir_r5.codec.parser import Parser
from fhir_r5.codec.registry import ResourceRegistry
from fhir_r5.config.logging import get_logger, set_document_id
from fhir_r5.config.settings import get_settings
from fhir_r5.constants import ROOT_PATH
from fhir_r5.errors import ResourceTypeMismatchError, StructuralError, UnknownResourceTypeError
from fhir_r5.models.resource import Resource
from fhir_r5.validation import Diagnostic, DiagnosticSeverity, collect_diagnostics

logger = get_logger(__name__)

ResourceT = TypeVar("ResourceT", bound=Resource)


@dataclass
class ParseResult:
    """A parsed resource together with its advisory diagnostics."""

    resource: Resource
    warnings: list[Diagnostic] = field(default_factory=list)


def _strict(strict: bool | None) -> bool:
    return get_settings().strict if strict is None else strict


def _load(data: bytes | str) -> Any:
    return jsonio.loads(data, max_bytes=get_settings().max_document_bytes)


def _check_expected(resource_cls: type[Resource], obj: Any) -> None:
    if not isinstance(obj, dict):
        raise StructuralError(ROOT_PATH, "expected a resource object")
    name = obj.get("resourceType")
    if name is None:
        raise UnknownResourceTypeError(None)
    if not isinstance(name, str):
        return
    if not ResourceRegistry.has(name):
        raise UnknownResourceTypeError(name)
    if not issubclass(ResourceRegistry.get(name), resource_cls):
        raise ResourceTypeMismatchError(resource_cls.resource_type, name)


def resource_from_dict(obj: dict[str, Any], *, strict: bool | None = None) -> Resource:
    """
    Parse an already-decoded JSON object into a typed resource.

    Numbers may be ``JsonNumber`` tokens (from ``jsonio.loads``) or plain
    ``int``/``float``/``Decimal`` values.

    Raises:
        CodecError: On any codec failure
    """
    return Parser(strict=_strict(strict)).parse_resource(obj, ROOT_PATH)


def resource_from_dict_of(
    resource_cls: type[ResourceT], obj: dict[str, Any], *, strict: bool | None = None
) -> ResourceT:
    """
    Parse a decoded JSON object that must be a ``resource_cls``.

    Raises:
        ResourceTypeMismatchError: If the object is another known resource type
        CodecError: On any other codec failure
    """
    _check_expected(resource_cls, obj)
    return Parser(strict=_strict(strict)).parse_resource(obj, ROOT_PATH, expected=resource_cls)


def parse_resource(data: bytes | str, *, strict: bool | None = None) -> Resource:
    """
    Parse a FHIR JSON document into a typed resource.

    Args:
        data: UTF-8 encoded JSON (or an already-decoded string)
        strict: Reject unknown fields; None uses the configured default

    Returns:
        The resource, as an instance of its concrete class

    Raises:
        CodecError: On any codec failure; no partial tree is returned
    """
    set_document_id()
    resource = resource_from_dict(_load(data), strict=strict)
    logger.debug("Parsed resource", resource_type=resource.resource_type)
    return resource


def parse_resource_with_diagnostics(
    data: bytes | str, *, strict: bool | None = None
) -> ParseResult:
    """
    Parse a FHIR JSON document and collect advisory diagnostics.

    Diagnostics never fail the parse; they are returned alongside the
    resource.
    """
    resource = parse_resource(data, strict=strict)
    warnings = collect_diagnostics(resource)
    for diagnostic in warnings:
        if diagnostic.severity is DiagnosticSeverity.WARNING:
            logger.warning(
                "Advisory diagnostic",
                rule=diagnostic.rule,
                path=diagnostic.path,
                resource_type=resource.resource_type,
            )
    return ParseResult(resource=resource, warnings=warnings)


def parse_resource_of(
    resource_cls: type[ResourceT], data: bytes | str, *, strict: bool | None = None
) -> ResourceT:
    """
    Parse a FHIR JSON document that must be of a given resource type.

    Raises:
        ResourceTypeMismatchError: If the document is another resource type
        CodecError: On any other codec failure
    """
    set_document_id()
    return resource_from_dict_of(resource_cls, _load(data), strict=strict)


def parse_bundle_entry_resource(obj: dict[str, Any], *, strict: bool | None = None) -> Resource:
    """
    Parse the ``resource`` object of a Bundle entry (already a decoded map).

    Dispatches on the object's own ``resourceType``.
    """
    return resource_from_dict(obj, strict=strict)


def resource_to_dict(resource: Resource) -> dict[str, Any]:
    """
    Convert a typed resource to its FHIR JSON tree.

    Decimals appear as ``JsonNumber`` tokens; write the tree with
    ``jsonio.dumps`` (or ``emit_resource``) to keep them exact.
    """
    return Emitter().emit_resource(resource)


def emit_resource(resource: Resource, *, indent: int | None = None) -> bytes:
    """
    Serialize a typed resource to FHIR JSON.

    Args:
        resource: The resource to write
        indent: Pretty-print with this many spaces per level; compact when None

    Returns:
        UTF-8 encoded JSON with ``resourceType`` as the first key
    """
    return jsonio.dumps(resource_to_dict(resource), indent=indent).encode("utf-8")

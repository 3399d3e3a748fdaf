"""Bidirectional mapping between the typed model and FHIR R5 JSON."""

from fhir_r5.codec.api import (
    ParseResult,
    emit_resource,
    parse_bundle_entry_resource,
    parse_resource,
    parse_resource_of,
    parse_resource_with_diagnostics,
    resource_from_dict,
    resource_from_dict_of,
    resource_to_dict,
)
from fhir_r5.codec.registry import ResourceRegistry

__all__ = [
    "ParseResult",
    "ResourceRegistry",
    "emit_resource",
    "parse_bundle_entry_resource",
    "parse_resource",
    "parse_resource_of",
    "parse_resource_with_diagnostics",
    "resource_from_dict",
    "resource_from_dict_of",
    "resource_to_dict",
]

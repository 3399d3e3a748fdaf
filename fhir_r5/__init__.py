"""
Typed FHIR R5 resource model with a lossless JSON codec.

    from fhir_r5 import parse_resource, emit_resource

    patient = parse_resource(data)
    data = emit_resource(patient)
"""

from fhir_r5.codec import (
    ParseResult,
    ResourceRegistry,
    emit_resource,
    parse_bundle_entry_resource,
    parse_resource,
    parse_resource_of,
    parse_resource_with_diagnostics,
    resource_from_dict,
    resource_from_dict_of,
    resource_to_dict,
)
from fhir_r5.config import configure_logging, get_settings
from fhir_r5.constants import FHIR_VERSION
from fhir_r5.errors import CodecError, ErrorCategory, ErrorKind
from fhir_r5.validation import Diagnostic, collect_diagnostics, validate_resource

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "Diagnostic",
    "ErrorCategory",
    "ErrorKind",
    "FHIR_VERSION",
    "ParseResult",
    "ResourceRegistry",
    "collect_diagnostics",
    "configure_logging",
    "emit_resource",
    "get_settings",
    "parse_bundle_entry_resource",
    "parse_resource",
    "parse_resource_of",
    "parse_resource_with_diagnostics",
    "resource_from_dict",
    "resource_from_dict_of",
    "resource_to_dict",
    "validate_resource",
]

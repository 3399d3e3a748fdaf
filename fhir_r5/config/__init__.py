"""Configuration modules for the FHIR R5 codec."""

from fhir_r5.config.logging import (
    configure_from_settings,
    configure_logging,
    get_document_id,
    get_logger,
    set_document_id,
)
from fhir_r5.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "get_document_id",
    "set_document_id",
]

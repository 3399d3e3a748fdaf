"""
Tests for settings and logging configuration.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from fhir_r5.config.logging import (
    add_document_id,
    configure_from_settings,
    configure_logging,
    document_id_var,
    get_document_id,
    get_logger,
    set_document_id,
)
from fhir_r5.config.settings import Settings, get_settings, reset_settings
from fhir_r5.constants import DEFAULT_MAX_DOCUMENT_BYTES


@pytest.fixture
def restore_logging():
    """Undo logging configuration made by a test."""
    yield
    structlog.reset_defaults()
    logging.getLogger("fhir_r5").setLevel(logging.NOTSET)


@pytest.fixture
def empty_document_id():
    """Run the test with no document ID in context."""
    token = document_id_var.set("")
    yield
    document_id_var.reset(token)


class TestSettings:
    """Tests for Settings and its cache."""

    def test_defaults(self):
        """Should work without any environment variables."""
        settings = Settings()
        assert settings.strict is False
        assert settings.max_document_bytes == DEFAULT_MAX_DOCUMENT_BYTES
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_environment(self, monkeypatch):
        """Should read FHIR_R5_ variables."""
        monkeypatch.setenv("FHIR_R5_STRICT", "true")
        monkeypatch.setenv("FHIR_R5_MAX_DOCUMENT_BYTES", "1024")
        monkeypatch.setenv("FHIR_R5_LOG_JSON", "1")
        settings = Settings()
        assert settings.strict is True
        assert settings.max_document_bytes == 1024
        assert settings.log_json is True

    def test_max_document_bytes_positive(self, monkeypatch):
        """Should reject a non-positive document limit."""
        monkeypatch.setenv("FHIR_R5_MAX_DOCUMENT_BYTES", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_cached(self):
        """Should return the same instance until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_reset_rereads_environment(self, monkeypatch):
        """Should pick up environment changes after reset."""
        assert get_settings().strict is False
        monkeypatch.setenv("FHIR_R5_STRICT", "true")
        assert get_settings().strict is False
        reset_settings()
        assert get_settings().strict is True


class TestDocumentId:
    """Tests for the document correlation ID."""

    def test_set_explicit(self, empty_document_id):
        """Should store the given ID."""
        assert set_document_id("doc-1") == "doc-1"
        assert get_document_id() == "doc-1"

    def test_generated(self, empty_document_id):
        """Should generate a short ID when none is given."""
        document_id = set_document_id()
        assert len(document_id) == 8
        assert get_document_id() == document_id

    def test_processor_adds_id(self, empty_document_id):
        """Should add the document ID to log events."""
        set_document_id("doc-2")
        assert add_document_id(None, "info", {"event": "x"}) == {"event": "x", "document_id": "doc-2"}

    def test_processor_without_id(self, empty_document_id):
        """Should leave events alone when no document is being parsed."""
        assert add_document_id(None, "info", {"event": "x"}) == {"event": "x"}


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_level(self, restore_logging):
        """Should set the level of the package logger."""
        configure_logging(level="DEBUG")
        assert logging.getLogger("fhir_r5").level == logging.DEBUG

    def test_unknown_level_falls_back(self, restore_logging):
        """Should fall back to WARNING for an unknown level name."""
        configure_logging(level="CHATTY")
        assert logging.getLogger("fhir_r5").level == logging.WARNING

    def test_configure_from_settings(self, monkeypatch, restore_logging):
        """Should use FHIR_R5_LOG_LEVEL."""
        monkeypatch.setenv("FHIR_R5_LOG_LEVEL", "INFO")
        configure_from_settings()
        assert logging.getLogger("fhir_r5").level == logging.INFO

    def test_json_output(self, restore_logging, caplog, empty_document_id):
        """Should render events as JSON with the document ID."""
        configure_logging(level="INFO", json_format=True)
        set_document_id("doc-3")
        get_logger("fhir_r5.tests").info("Parsed resource", resource_type="Patient")
        messages = [record.getMessage() for record in caplog.records]
        assert any('"document_id": "doc-3"' in message for message in messages)
        assert any('"resource_type": "Patient"' in message for message in messages)

    def test_get_logger(self):
        """Should return a logger that accepts key-value pairs."""
        logger = get_logger("fhir_r5.tests")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_disabled_level_skips_processors(self, restore_logging):
        """Should not run any processor for events below the logger's level."""
        seen = []

        def record(logger, method_name, event_dict):
            seen.append(event_dict["event"])
            return event_dict

        structlog.configure(processors=[record, structlog.processors.KeyValueRenderer()])
        logging.getLogger("fhir_r5.tests.quiet").setLevel(logging.WARNING)
        logger = get_logger("fhir_r5.tests.quiet")
        logger.debug("Dispatching resource")
        logger.info("Parsed resource")
        logger.warning("Advisory diagnostic")
        assert seen == ["Advisory diagnostic"]
        logging.getLogger("fhir_r5.tests.quiet").setLevel(logging.NOTSET)

"""
Tests for the codec error hierarchy.
"""

import pytest

from fhir_r5.errors import (
    ERROR_CATEGORIES,
    CodecError,
    ConstraintViolationError,
    ErrorCategory,
    ErrorKind,
    InvalidExtensionError,
    InvalidLexicalFormError,
    MissingRequiredFieldError,
    MultipleChoiceVariantsError,
    PrimitiveSiblingMisalignmentError,
    ResourceTypeMismatchError,
    StructuralError,
    UnknownCodeForRequiredBindingError,
    UnknownFieldError,
    UnknownResourceTypeError,
)


class TestCodecError:
    """Tests for the base error."""

    def test_message(self):
        """Should prefix the detail with kind and path."""
        error = MissingRequiredFieldError("/status")
        assert error.message == "MissingRequiredField at /status: required field is missing"
        assert str(error) == error.message

    def test_to_dict(self):
        """Should serialize every attribute."""
        error = UnknownFieldError("/name/0", "nick")
        assert error.to_dict() == {
            "error": "UnknownFieldError",
            "kind": "UnknownField",
            "category": "structural",
            "path": "/name/0",
            "message": "UnknownField at /name/0: unknown field 'nick'",
            "details": {"name": "nick"},
        }

    def test_every_kind_has_category(self):
        """Should map every error kind to a category."""
        assert set(ERROR_CATEGORIES) == set(ErrorKind)

    def test_catchable_as_codec_error(self):
        """Should let callers catch every failure as CodecError."""
        with pytest.raises(CodecError):
            raise StructuralError("/", "bad shape")


class TestErrorKinds:
    """Tests for the specific error classes."""

    @pytest.mark.parametrize(
        "error,kind,category",
        [
            (StructuralError("/", "x"), ErrorKind.STRUCTURAL, ErrorCategory.STRUCTURAL),
            (UnknownFieldError("/", "x"), ErrorKind.UNKNOWN_FIELD, ErrorCategory.STRUCTURAL),
            (
                PrimitiveSiblingMisalignmentError("/given", "x"),
                ErrorKind.PRIMITIVE_SIBLING_MISALIGNMENT,
                ErrorCategory.STRUCTURAL,
            ),
            (
                InvalidLexicalFormError("date", "1970-13", "/birthDate"),
                ErrorKind.INVALID_LEXICAL_FORM,
                ErrorCategory.LEXICAL,
            ),
            (MissingRequiredFieldError("/status"), ErrorKind.MISSING_REQUIRED_FIELD, ErrorCategory.CARDINALITY),
            (
                MultipleChoiceVariantsError("/", ["valueQuantity", "valueString"]),
                ErrorKind.MULTIPLE_CHOICE_VARIANTS,
                ErrorCategory.CARDINALITY,
            ),
            (ConstraintViolationError("/", "x"), ErrorKind.CONSTRAINT_VIOLATION, ErrorCategory.CARDINALITY),
            (UnknownResourceTypeError("Foo"), ErrorKind.UNKNOWN_RESOURCE_TYPE, ErrorCategory.DISCRIMINATOR),
            (
                ResourceTypeMismatchError("Patient", "Observation"),
                ErrorKind.RESOURCE_TYPE_MISMATCH,
                ErrorCategory.DISCRIMINATOR,
            ),
            (
                UnknownCodeForRequiredBindingError("/gender", "bogus", "AdministrativeGender"),
                ErrorKind.UNKNOWN_CODE_FOR_REQUIRED_BINDING,
                ErrorCategory.BINDING,
            ),
            (InvalidExtensionError("/extension/0", "x"), ErrorKind.INVALID_EXTENSION, ErrorCategory.EXTENSION),
        ],
    )
    def test_kind_and_category(self, error, kind, category):
        """Should carry its kind and category."""
        assert isinstance(error, CodecError)
        assert error.kind is kind
        assert error.category is category

    def test_lexical_default_detail(self):
        """Should describe the offending value when no reason is given."""
        error = InvalidLexicalFormError("date", "1970-13", "/birthDate")
        assert error.detail == "invalid date value '1970-13'"
        assert error.details == {"type": "date", "value": "1970-13"}

    def test_lexical_reason(self):
        """Should use the given reason as detail."""
        error = InvalidLexicalFormError("boolean", "true", "/active", "boolean must be JSON true or false")
        assert error.message == "InvalidLexicalForm at /active: boolean must be JSON true or false"

    def test_choice_names(self):
        """Should list the variants present."""
        error = MultipleChoiceVariantsError("/", ["valueQuantity", "valueString"])
        assert error.names == ["valueQuantity", "valueString"]
        assert "valueQuantity, valueString" in error.message

    def test_missing_resource_type(self):
        """Should describe a missing resourceType."""
        error = UnknownResourceTypeError(None)
        assert error.path == "/"
        assert error.detail == "missing resourceType"

    def test_unknown_resource_type(self):
        """Should name the unknown resourceType."""
        assert UnknownResourceTypeError("Spaceship").detail == "unknown resourceType 'Spaceship'"

    def test_mismatch(self):
        """Should name both resource types."""
        error = ResourceTypeMismatchError("Patient", "Observation", "/entry/0/resource")
        assert error.path == "/entry/0/resource"
        assert error.details == {"expected": "Patient", "actual": "Observation"}

    def test_binding_value_set(self):
        """Should name the value set when known."""
        error = UnknownCodeForRequiredBindingError("/gender", "bogus", "AdministrativeGender")
        assert error.detail == "'bogus' is not in the required value set AdministrativeGender"
        assert UnknownCodeForRequiredBindingError("/gender", "bogus").detail == (
            "'bogus' is not in the required value set"
        )

"""
Tests for custom exception hierarchy.
"""

import json

import pytest

from sbom_visualizer.shared.exceptions import (
    ExportError,
    GenerationError,
    SBOMError,
    SBOMParseError,
    SBOMValidationError,
    SBOMVisualizerError,
    create_error_context,
    wrap_external_error,
)


class TestSBOMVisualizerError:
    """Tests for base exception class."""

    def test_basic_creation(self) -> None:
        """Test creating exception with just a message."""
        error = SBOMVisualizerError("Test error message")
        assert error.message == "Test error message"
        assert error.context == {}
        assert str(error) == "Test error message"

    def test_creation_with_context(self) -> None:
        """Test creating exception with context."""
        error = SBOMVisualizerError("Test error", context={"file": "test.json", "line": 42})
        assert "file=test.json" in str(error)
        assert "line=42" in str(error)
        assert "(Context:" in str(error)


class TestExceptionHierarchy:
    """Tests for the exception subclasses."""

    @pytest.mark.parametrize(
        "error_class",
        [SBOMError, SBOMParseError, SBOMValidationError, ExportError, GenerationError],
    )
    def test_inherits_from_base(self, error_class: type) -> None:
        """Test every error is catchable as SBOMVisualizerError."""
        assert issubclass(error_class, SBOMVisualizerError)

    def test_sbom_errors_share_base(self) -> None:
        """Test input errors derive from SBOMError."""
        assert issubclass(SBOMParseError, SBOMError)
        assert issubclass(SBOMValidationError, SBOMError)

    def test_validation_error_carries_errors(self) -> None:
        """Test the individual problems are kept on the exception."""
        error = SBOMValidationError("Invalid", errors=["Missing 'bomFormat'"])
        assert error.errors == ["Missing 'bomFormat'"]
        assert SBOMValidationError("Invalid").errors == []

    def test_can_be_raised_and_caught(self) -> None:
        """Test exceptions propagate through the base class."""
        with pytest.raises(SBOMVisualizerError):
            raise ExportError("Save failed")


class TestWrapExternalError:
    """Tests for wrap_external_error function."""

    def test_wrap_json_decode_error(self) -> None:
        """Test wrapping JSONDecodeError."""
        try:
            json.loads("{not json")
        except json.JSONDecodeError as e:
            wrapped = wrap_external_error(e)

        assert isinstance(wrapped, SBOMParseError)
        assert "Invalid JSON" in wrapped.message
        assert wrapped.context["original_error"] == "JSONDecodeError"

    def test_wrap_file_not_found(self) -> None:
        """Test wrapping FileNotFoundError."""
        wrapped = wrap_external_error(FileNotFoundError("missing.json"))
        assert isinstance(wrapped, SBOMParseError)
        assert "File not found" in wrapped.message

    def test_wrap_permission_error(self) -> None:
        """Test wrapping PermissionError."""
        wrapped = wrap_external_error(PermissionError("denied"))
        assert type(wrapped) is SBOMVisualizerError
        assert "Permission denied" in wrapped.message

    def test_wrap_unicode_error(self) -> None:
        """Test wrapping UnicodeDecodeError."""
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert isinstance(wrap_external_error(error), SBOMParseError)

    def test_wrap_directory_error(self) -> None:
        """Test reading a directory maps to SBOMParseError."""
        wrapped = wrap_external_error(IsADirectoryError("sboms/"))
        assert isinstance(wrapped, SBOMParseError)
        assert "Cannot read input" in wrapped.message

    def test_wrap_other_os_error(self) -> None:
        """Test generic OSError maps to the base error, not ExportError."""
        wrapped = wrap_external_error(OSError("disk full"))
        assert type(wrapped) is SBOMVisualizerError
        assert not isinstance(wrapped, ExportError)
        assert "I/O error" in wrapped.message

    def test_wrap_value_error(self) -> None:
        """Test wrapping ValueError."""
        wrapped = wrap_external_error(ValueError("bad value"))
        assert "Data validation error" in wrapped.message

    def test_wrap_unknown_error(self) -> None:
        """Test wrapping unknown exception type."""
        wrapped = wrap_external_error(RuntimeError("boom"))
        assert "Unexpected error" in wrapped.message

    def test_wrap_preserves_context(self) -> None:
        """Test that provided context is preserved."""
        wrapped = wrap_external_error(OSError("x"), {"path": "out.html"})
        assert wrapped.context["path"] == "out.html"
        assert wrapped.context["original_error"] == "OSError"


class TestCreateErrorContext:
    """Tests for create_error_context function."""

    def test_drops_none_values(self) -> None:
        """Test None values are filtered out."""
        context = create_error_context(path="a.json", component=None, count=0)
        assert context == {"path": "a.json", "count": 0}

    def test_empty(self) -> None:
        """Test creating empty context."""
        assert create_error_context() == {}

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for dependency checking and the exception hierarchy."""
import logging

import pytest

from md2doc.exceptions import (
    DependencyError,
    InvalidFileError,
    InvalidOptionsError,
    Md2DocError,
    TreeValidationError,
    ValidationError,
)
from md2doc.utils.decorators import debug_timer, requires_dependencies
from md2doc.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the dependency checking decorator."""

    def test_present_dependency_runs(self) -> None:
        """Test that the wrapped function runs when imports succeed."""

        @requires_dependencies("test", [("pytest", "pytest", "")])
        def run() -> str:
            return "ran"

        assert run() == "ran"

    def test_missing_dependency_raises(self) -> None:
        """Test that missing modules raise a helpful error."""

        @requires_dependencies("test", [("not-a-real-dist", "not_a_real_module_md2doc", ">=1.0")])
        def run() -> str:
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        error = exc_info.value
        assert error.missing_packages == [("not-a-real-dist", ">=1.0")]
        assert "pip install" in str(error)
        assert isinstance(error.original_import_error, ImportError)

    def test_version_mismatch(self) -> None:
        """Test that an unsatisfiable version is reported."""

        @requires_dependencies("test", [("pytest", "pytest", ">=9999")])
        def run() -> str:
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        assert exc_info.value.version_mismatches[0][0] == "pytest"
        assert "version mismatches" in str(exc_info.value)


@pytest.mark.unit
class TestPackageVersions:
    """Test installed version lookups."""

    def test_installed_package(self) -> None:
        """Test that an installed distribution has a version."""
        assert get_package_version("pytest")

    def test_missing_package(self) -> None:
        """Test that a missing distribution has no version."""
        assert get_package_version("not-a-real-dist-md2doc") is None

    def test_requirement_met(self) -> None:
        """Test a satisfiable requirement."""
        meets, installed = check_version_requirement("pytest", ">=1.0")

        assert meets is True
        assert installed

    def test_invalid_specifier(self) -> None:
        """Test a malformed specifier."""
        with pytest.raises(ValueError):
            check_version_requirement("pytest", "not a spec")


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception relationships and attributes."""

    def test_all_derive_from_base(self) -> None:
        """Test the common base class."""
        errors = (ValidationError, InvalidOptionsError, InvalidFileError, TreeValidationError, DependencyError)
        for error_class in errors:
            assert issubclass(error_class, Md2DocError)

    def test_invalid_options_is_validation_error(self) -> None:
        """Test that option errors are validation errors."""
        error = InvalidOptionsError("markdown", int, str)

        assert isinstance(error, ValidationError)
        assert error.parameter_name == "options"
        assert "expected options of type 'int'" in str(error)

    def test_invalid_file_path(self) -> None:
        """Test the file path attribute."""
        error = InvalidFileError("too big", file_path="a.md")

        assert error.file_path == "a.md"
        assert error.message == "too big"


@pytest.mark.unit
class TestDebugTimer:
    """Test the DEBUG timing context manager."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the elapsed time is logged at DEBUG level."""
        logger = logging.getLogger("md2doc.tests.timer")

        with caplog.at_level(logging.DEBUG, logger="md2doc.tests.timer"):
            with debug_timer(logger, "Import (a.md)"):
                pass

        assert any("Import (a.md) completed in" in record.getMessage() for record in caplog.records)

    def test_silent_when_debug_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test nothing is logged above DEBUG level."""
        logger = logging.getLogger("md2doc.tests.timer")

        with caplog.at_level(logging.INFO, logger="md2doc.tests.timer"):
            with debug_timer(logger, "Import (a.md)"):
                pass

        assert caplog.records == []

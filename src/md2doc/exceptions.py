#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2doc library.

The converter itself never raises for malformed token streams: it degrades to
a best-effort tree. The exceptions below cover the conditions that are genuine
caller errors (wrong options, invalid import files), explicit invariant checks,
and missing tokenizer libraries.

Exception Hierarchy
-------------------
- Md2DocError (base exception)

  - ValidationError (bad argument or option value)
    - InvalidOptionsError (wrong options class for a converter)

  - InvalidFileError (import file rejected or unreadable)

  - TreeValidationError (document tree breaks a structural invariant)

  - DependencyError (tokenizer libraries missing or too old)

"""

from typing import Any, Sequence


class Md2DocError(Exception):
    """Root of every error md2doc raises on purpose.

    Parameters
    ----------
    message : str
        Error text, also available as ``message``
    original_error : Exception or None, default = None
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2DocError):
    """A caller passed an argument md2doc cannot accept.

    Parameters
    ----------
    message : str
        What is wrong with the argument
    parameter_name : str or None, default = None
        Name of the offending argument
    parameter_value : Any, default = None
        The rejected value
    original_error : Exception or None, default = None
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Store the offending argument alongside the message."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A component was given an options object of the wrong class.

    Raised, for example, when ``ImportOptions`` reaches a converter that
    expects ``ConverterOptions``.

    Parameters
    ----------
    converter_name : str
        Component that rejected the options
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed

    """

    def __init__(self, converter_name: str, expected_type: type, received_type: type):
        """Build the message from the expected and received classes."""
        super().__init__(
            f"{converter_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'.",
            parameter_name="options",
            parameter_value=received_type,
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidFileError(Md2DocError):
    """A Markdown file was rejected by the importer or could not be read.

    Parameters
    ----------
    message : str
        Why the file was rejected
    file_path : str or None, default = None
        Name or path of the file
    original_error : Exception or None, default = None
        I/O or decoding error behind the rejection

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Store the rejected file's path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class TreeValidationError(Md2DocError):
    """Exception raised when a document tree breaks a structural invariant.

    Parameters
    ----------
    message : str
        Summary of the failure
    violations : list[str]
        One human-readable entry per violated invariant occurrence

    """

    def __init__(self, message: str, violations: list[str] | None = None):
        """Initialize the tree validation error with its violations."""
        super().__init__(message)
        self.violations = violations or []


def _dependency_message(
    converter_name: str,
    missing_packages: Sequence[tuple[str, str]],
    version_mismatches: Sequence[tuple[str, str, str]],
) -> str:
    lines = []
    if missing_packages:
        names = ", ".join(f"'{name}{spec}'" for name, spec in missing_packages)
        lines.append(f"{converter_name} requires the following packages: {names}")
    if version_mismatches:
        details = ", ".join(
            f"'{name}' (requires {required}, but {installed} is installed)"
            for name, required, installed in version_mismatches
        )
        lines.append(f"{converter_name} has version mismatches: {details}")

    requirements = [f'"{name}{spec}"' if spec else name for name, spec in missing_packages]
    requirements += [f'"{name}{required}"' for name, required, _ in version_mismatches]
    if requirements:
        lines.append(f"Install with: pip install --upgrade {' '.join(requirements)}")
    return "\n".join(lines)


class DependencyError(Md2DocError):
    """The libraries behind a component are missing or too old.

    Parameters
    ----------
    converter_name : str
        Component that needs the packages, e.g. ``"markdown tokenizer"``
    missing_packages : list of (install_name, version_spec)
        Packages that could not be imported
    version_mismatches : list of (install_name, required, installed), optional
        Installed packages whose version does not satisfy the requirement
    original_import_error : ImportError or None, default = None
        First import failure, kept for debugging

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Build an install hint covering every missing or outdated package."""
        version_mismatches = version_mismatches or []
        super().__init__(
            _dependency_message(converter_name, missing_packages, version_mismatches),
            original_error=original_import_error,
        )
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error


__all__ = [
    "Md2DocError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidFileError",
    "TreeValidationError",
    "DependencyError",
]

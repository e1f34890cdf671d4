#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the paraunwrap library.

This module defines the exception classes raised at the boundaries of the
unwrap pipeline. The transform itself never raises for unexpected node
shapes; it leaves such nodes untouched. Errors only surface when input cannot
be decoded, output cannot be written, options are invalid, or an optional
dependency is missing.

Exception Hierarchy
-------------------
- ParaUnwrapError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (input document decoding failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing optional packages)

"""

from typing import Any


class ParaUnwrapError(Exception):
    """Base exception class for all paraunwrap-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ParaUnwrapError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(ParaUnwrapError):
    """Base exception for file access problems.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(ParaUnwrapError):
    """Exception raised when the input payload cannot be decoded into a tree.

    This is the boundary failure surface: the input is not UTF-8, not JSON,
    or not shaped like a document. It is always fatal for the run.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of decoding where the error occurred
        (e.g. ``"input_reading"``, ``"json_parsing"``, ``"document_validation"``)
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(ParaUnwrapError):
    """Exception raised when encoding the output document fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing output fails.

    Parameters
    ----------
    file_path : str
        Path (or stream description) of the output that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(ParaUnwrapError):
    """Exception raised when an optional package is required but not installed.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the package
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if not install_command and missing_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                install_command = f"pip install {packages_str}"
            if install_command:
                message += f"\nInstall with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command


__all__ = [
    "ParaUnwrapError",
    "ValidationError",
    "FileError",
    "FileNotFoundError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]

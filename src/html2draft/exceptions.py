#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2draft library.

Markup content never produces an error: unknown tags degrade to the default
block type with no style and no entity, and a missing required attribute only
suppresses the entity of that one element. The exceptions below cover the
conditions around the conversion core: bad options, unreadable input,
tokenizer backend failures and missing packages.

Exception Hierarchy
-------------------
- Html2DraftError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser)

  - FileError (input access and I/O)
    - InputFileError (missing or unreadable input file)

  - ParsingError (tokenizer backend failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Html2DraftError(Exception):
    """Base exception class for all html2draft-specific errors.

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


class ValidationError(Html2DraftError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a parser.

    Parameters
    ----------
    converter_name : str
        Name of the parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the parser."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Html2DraftError):
    """Base exception for input access and I/O errors.

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
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileError(FileError):
    """Exception raised when an input file is missing or cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input file error."""
        if message is None:
            message = f"Cannot read input file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Html2DraftError):
    """Exception raised when the markup tokenizer backend fails.

    Parameters
    ----------
    message : str
        Description of the failure
    parser_name : str, optional
        The BeautifulSoup backend that was in use
    original_error : Exception, optional
        The original exception raised by the backend

    """

    def __init__(self, message: str, parser_name: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parser_name = parser_name


def _requirement(name: str, spec: str) -> str:
    return f"{name}{spec}" if spec else name


class DependencyError(Html2DraftError):
    """Exception raised when BeautifulSoup or the selected backend is unavailable.

    Parameters
    ----------
    converter_name : str
        Name of the conversion that needs the packages (e.g. ``"html"``)
    missing_packages : list[tuple[str, str]]
        ``(install_name, version_spec)`` for packages that cannot be imported
    version_mismatches : list[tuple[str, str, str]], optional
        ``(install_name, required_spec, installed_version)`` for packages
        that are installed at an unsupported version
    message : str, optional
        Custom error message; by default one is built from the package lists
        and ends with a ``pip install`` hint
    original_import_error : ImportError, optional
        The first ImportError encountered while checking

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            label = converter_name.upper()
            lines = []
            if missing_packages:
                names = ", ".join(repr(_requirement(name, spec)) for name, spec in missing_packages)
                lines.append(f"{label} conversion requires the following packages: {names}")
            for name, required, installed in version_mismatches:
                lines.append(f"{label} conversion needs '{name}' {required}, but {installed} is installed")

            to_install = [_requirement(name, spec) for name, spec in missing_packages]
            to_install += [_requirement(name, required) for name, required, _ in version_mismatches]
            if to_install:
                lines.append("Install with: pip install --upgrade " + " ".join(f'"{req}"' for req in to_install))
            message = "\n".join(lines)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error

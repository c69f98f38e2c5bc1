#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the strtools library.

The string helpers themselves never raise for their documented inputs;
they return empty or unchanged values instead. These exceptions are
raised by the settings layer when a configuration source cannot be used.

Exception Hierarchy
-------------------
- StrToolsError (base exception)

  - ConfigError (unreadable or malformed settings file)

  - ValidationError (invalid setting value)

"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class StrToolsError(Exception):
    """Base exception class for all strtools-specific errors.

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


class ConfigError(StrToolsError):
    """Exception raised when a settings file cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str or Path, optional
        Path of the offending settings file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        config_path: str | Path | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = str(config_path) if config_path is not None else None


class ValidationError(StrToolsError):
    """Exception raised for an invalid setting value.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid setting
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

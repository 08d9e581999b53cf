"""
Common exception classes for the package builder.

This module defines custom exception classes used throughout the application
for better error handling and categorization.
"""

from __future__ import annotations

from enum import Enum


class PackageBuilderError(Exception):
    """Base exception class for all package builder errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include the context attributes set by subclasses
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                value = getattr(self, attr_name)
                error_dict[attr_name] = (
                    value.value if isinstance(value, Enum) else value
                )

        return {"error": error_dict}


class ConfigurationError(PackageBuilderError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class ArgumentErrorKind(str, Enum):
    """Reasons a command-line argument can be rejected."""

    NOT_RECOGNIZED = "not_recognized"
    ALREADY_DEFINED = "already_defined"
    REQUIRED = "required"
    PROPERTY_NOT_RECOGNIZED = "property_not_recognized"
    PROPERTY_ALREADY_DEFINED = "property_already_defined"
    PROPERTY_VALUE_NOT_RECOGNIZED = "property_value_not_recognized"


class CommandLineArgumentError(PackageBuilderError):
    """Raised when a command-line argument is invalid."""

    def __init__(
        self,
        argument_name: str | None,
        message: str = "Invalid command-line argument",
        kind: ArgumentErrorKind = ArgumentErrorKind.NOT_RECOGNIZED,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if argument_name is not None:
            det.setdefault("argument_name", argument_name)
        super().__init__(message, det)
        self.argument_name = argument_name
        self.kind = kind

    def __str__(self) -> str:
        if self.argument_name is not None:
            return f"{self.message}\nArgument name: {self.argument_name}"
        return self.message


class CommandLineArgumentPropertyError(CommandLineArgumentError):
    """Raised when a property inside a structured argument is invalid."""

    def __init__(
        self,
        argument_name: str | None,
        property_name: str | None,
        message: str = "Invalid command-line argument property",
        kind: ArgumentErrorKind = ArgumentErrorKind.PROPERTY_NOT_RECOGNIZED,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if property_name is not None:
            det.setdefault("property_name", property_name)
        super().__init__(argument_name, message, kind, det)
        self.property_name = property_name

    def __str__(self) -> str:
        text = super().__str__()
        if self.property_name is not None:
            return f"{text}\nProperty name: {self.property_name}"
        return text


class PackageBuildError(PackageBuilderError):
    """Raised when building a module package fails."""

    def __init__(
        self,
        message: str = "Package build failed",
        module_name: str | None = None,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if module_name:
            det.setdefault("module_name", module_name)
        super().__init__(message, det)
        self.module_name = module_name

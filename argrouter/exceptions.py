# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Argrouter framework.

These exceptions provide structured error handling for the failure cases of
routing, option recognition and argument binding, as well as the
configuration defects detected when commands are built and registered.

All exceptions inherit from `ArgRouterError`, the base exception for the framework.

Exception Hierarchy:
- ArgRouterError
    ├── RoutingFailure
    ├── OptionMisuse
    ├── BindingFailure
    ├── CommandError
    ├── SignatureError
    ├── OptionConfigurationError
    ├── CommandAlreadyExistsError
    ├── RegistryFrozenError
    └── ConfigError

Every exception carries an `ErrorKind` so the dispatcher can report the
failure category without inspecting the concrete class.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Failure categories reported by a failed dispatch."""

    ROUTING = "routing"
    OPTION_MISUSE = "option_misuse"
    BINDING = "binding"
    COMMAND = "command"
    CONFIGURATION = "configuration"
    SILENT = "silent"
    UNEXPECTED = "unexpected"

    def __str__(self) -> str:
        return self.value


class ArgRouterError(Exception):
    """Base exception for the Argrouter framework."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class RoutingFailure(ArgRouterError):
    """Exception raised when no registered command matches the input."""

    kind = ErrorKind.ROUTING

    def __init__(self, message: str, *, ambiguous: bool = False):
        super().__init__(message)
        self.ambiguous = ambiguous


class OptionMisuse(ArgRouterError):
    """Exception raised for unrecognized options or keyed options missing a value."""

    kind = ErrorKind.OPTION_MISUSE

    def __init__(
        self,
        message: str,
        unrecognized: list[str] | None = None,
        missing_values: list[str] | None = None,
    ):
        super().__init__(message)
        self.unrecognized: list[str] = unrecognized or []
        self.missing_values: list[str] = missing_values or []


class BindingFailure(ArgRouterError):
    """Exception raised when positional tokens do not fit the command signature."""

    kind = ErrorKind.BINDING


class CommandError(ArgRouterError):
    """Exception raised by a command executor with a user-facing message."""

    kind = ErrorKind.COMMAND


class SignatureError(ArgRouterError):
    """Exception raised when a signature string is malformed."""

    kind = ErrorKind.CONFIGURATION


class OptionConfigurationError(ArgRouterError):
    """Exception raised when option aliases are invalid or collide."""

    kind = ErrorKind.CONFIGURATION


class CommandAlreadyExistsError(ArgRouterError):
    """Exception raised when a command with the same name is already registered."""

    kind = ErrorKind.CONFIGURATION


class RegistryFrozenError(ArgRouterError):
    """Exception raised when registering commands after dispatch has begun."""

    kind = ErrorKind.CONFIGURATION


class ConfigError(ArgRouterError):
    """Exception raised when an application config file cannot be loaded."""

    kind = ErrorKind.CONFIGURATION

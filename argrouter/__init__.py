"""
Argrouter CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .app import ArgRouter
from .command import CommandBuilder, CommandCapability, CommandDescriptor
from .exceptions import (
    ArgRouterError,
    BindingFailure,
    CommandError,
    ErrorKind,
    OptionMisuse,
    RoutingFailure,
    SignatureError,
)
from .logger import logger
from .parser import BoundArguments, OptionKind, OptionSpec
from .registry import CommandRegistry
from .result import Dispatched, ExitEarly, Failed
from .router import DefaultRouter, RoutingResult
from .signals import SilentAbort

__all__ = [
    "ArgRouter",
    "ArgRouterError",
    "BindingFailure",
    "BoundArguments",
    "CommandBuilder",
    "CommandCapability",
    "CommandDescriptor",
    "CommandError",
    "CommandRegistry",
    "DefaultRouter",
    "Dispatched",
    "ErrorKind",
    "ExitEarly",
    "Failed",
    "OptionKind",
    "OptionMisuse",
    "OptionSpec",
    "RoutingFailure",
    "RoutingResult",
    "SignatureError",
    "SilentAbort",
    "logger",
]

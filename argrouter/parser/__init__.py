"""
Argrouter CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binder import BoundArguments, bind_arguments
from .option import OptionKind, OptionRegistry, OptionSpec
from .recognizer import OptionRecognizer, RecognitionResult
from .signature import SignatureSlot, SlotKind, parse_signature, render_signature
from .token import Token, TokenRole, expand_combined_flags, split_argument_string, tokenize

__all__ = [
    "BoundArguments",
    "bind_arguments",
    "OptionKind",
    "OptionRegistry",
    "OptionSpec",
    "OptionRecognizer",
    "RecognitionResult",
    "SignatureSlot",
    "SlotKind",
    "parse_signature",
    "render_signature",
    "Token",
    "TokenRole",
    "expand_combined_flags",
    "split_argument_string",
    "tokenize",
]

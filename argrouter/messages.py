# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Message generators used by the dispatcher to talk to the user.

The dispatcher never formats text itself. It hands structured data to:

- `UsageStatementGenerator`: renders the usage statement of one command,
  printed for `-h`/`--help` and alongside option misuse.
- `MisusedOptionsMessageGenerator`: renders the report for unrecognized
  options and keyed options missing their value. Returning `None` prints
  nothing.

Both are protocols; the default implementations produce plain text that the
dispatcher prints through the shared rich console. Applications can swap
either one when constructing `ArgRouter`.
"""
from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from argrouter.command import CommandDescriptor
from argrouter.parser.recognizer import RecognitionResult


class UnrecognizedOptionsPrinting(Enum):
    """What the default misuse generator prints."""

    NONE = "none"
    UNRECOGNIZED_ONLY = "unrecognized_only"
    USAGE_ONLY = "usage_only"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class UsageStatementGenerator(Protocol):
    def generate(self, command: CommandDescriptor, program: str) -> str: ...


@runtime_checkable
class MisusedOptionsMessageGenerator(Protocol):
    def generate(
        self, command: CommandDescriptor, recognition: RecognitionResult, usage: str
    ) -> str | None: ...


class DefaultUsageStatementGenerator:
    """Plain-text usage statement with an aligned options table."""

    def generate(self, command: CommandDescriptor, program: str) -> str:
        parts = [part for part in (program, command.name) if part]
        signature = command.get_signature_text()
        if signature:
            parts.append(signature)
        options = command.option_registry.specs
        if options:
            parts.append("[options]")
        lines = [f"Usage: {' '.join(parts)}"]

        for text in (command.description, command.help_text):
            if text:
                lines.extend(("", text))

        if options:
            lines.extend(("", "Options:"))
            alias_texts = [spec.get_alias_text() for spec in options]
            width = max(len(text) for text in alias_texts)
            for alias_text, spec in zip(alias_texts, options):
                lines.append(f"  {alias_text.ljust(width)}  {spec.help}".rstrip())
        return "\n".join(lines)


class DefaultMisusedOptionsMessageGenerator:
    """Reports misused options according to `UnrecognizedOptionsPrinting`."""

    def __init__(
        self,
        behavior: UnrecognizedOptionsPrinting = UnrecognizedOptionsPrinting.ALL,
    ) -> None:
        self.behavior = behavior

    def generate(
        self, command: CommandDescriptor, recognition: RecognitionResult, usage: str
    ) -> str | None:
        if self.behavior is UnrecognizedOptionsPrinting.NONE:
            return None
        if self.behavior is UnrecognizedOptionsPrinting.USAGE_ONLY:
            return usage

        lines = [f"Unrecognized option: {option}" for option in recognition.unrecognized]
        lines.extend(
            f"Missing value for option: {option}" for option in recognition.missing_values
        )
        report = "\n".join(lines)
        if self.behavior is UnrecognizedOptionsPrinting.UNRECOGNIZED_ONLY:
            return report
        return f"{usage}\n\n{report}"

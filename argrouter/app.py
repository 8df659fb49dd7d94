# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""app.py

Main class for constructing and dispatching an Argrouter command line.

`ArgRouter` owns a `CommandRegistry`, appends the implicit `help` and
`version` commands, and runs one dispatch per invocation:

    tokenize -> route -> recognize options -> bind arguments -> execute

Every dispatch returns a `DispatchResult` (`Dispatched`, `ExitEarly` or
`Failed`). Failures are printed through the shared rich console except
`SilentAbort`, whose problem has already been reported. `go()` turns the
result into an exit code and `run()` exits the process with it.

Example:
    app = ArgRouter("greeter", version="1.2.0", description="Says hello")

    def greet(arguments):
        name = arguments.get("name", "world")
        if arguments.flag("shout"):
            name = name.upper()
        print(f"Hello, {name}!")

    (
        app.command("greet")
        .describe("Greet someone")
        .signature("[<name>]")
        .flag("-s", "--shout", help="Greet loudly.")
        .executes(greet)
        .register()
    )

    app.run()
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, NoReturn, Sequence

from rich.console import Console
from rich.table import Table

from argrouter.builtins import build_help_command, build_version_command
from argrouter.command import CommandBuilder, CommandDescriptor
from argrouter.console import console as default_console
from argrouter.exceptions import ArgRouterError, BindingFailure, ErrorKind
from argrouter.logger import logger
from argrouter.messages import (
    DefaultMisusedOptionsMessageGenerator,
    DefaultUsageStatementGenerator,
    MisusedOptionsMessageGenerator,
    UsageStatementGenerator,
)
from argrouter.parser.binder import bind_arguments
from argrouter.parser.recognizer import OptionRecognizer
from argrouter.parser.token import Token, split_argument_string, tokenize
from argrouter.registry import CommandRegistry
from argrouter.result import Dispatched, DispatchResult, ExitEarly, Failed
from argrouter.router import DefaultRouter, RouterProtocol
from argrouter.signals import SilentAbort
from argrouter.themes import OneColors
from argrouter.utils import get_program_invocation


class ArgRouter:
    """
    Routes an argument vector to a registered command and executes it.

    Args:
        program (str | None): Program name shown in usage statements. Defaults
            to the name the process was invoked with.
        version (str): Version printed by the `version` command.
        description (str): Shown at the top of the help listing.
        registry (CommandRegistry | None): Pre-populated registry to use.
        router (RouterProtocol | None): Router replacing `DefaultRouter`.
        recognizer (OptionRecognizer | None): Recognizer replacing the default.
        usage_generator (UsageStatementGenerator | None): Usage formatter.
        misuse_generator (MisusedOptionsMessageGenerator | None): Option
            misuse formatter.
        help_command (bool): Append the implicit `help` command.
        version_command (bool): Append the implicit `version` command.
        default_command (str | None): Command to run when the input names none.
        console (Console | None): Console for all output.
    """

    def __init__(
        self,
        program: str | None = None,
        version: str = "1.0",
        description: str = "",
        registry: CommandRegistry | None = None,
        router: RouterProtocol | None = None,
        recognizer: OptionRecognizer | None = None,
        usage_generator: UsageStatementGenerator | None = None,
        misuse_generator: MisusedOptionsMessageGenerator | None = None,
        help_command: bool = True,
        version_command: bool = True,
        default_command: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.program: str = program or get_program_invocation()
        self.version: str = version
        self.description: str = description
        self.registry: CommandRegistry = registry or CommandRegistry()
        self.router: RouterProtocol = router or DefaultRouter(
            default_command=default_command
        )
        self.recognizer: OptionRecognizer = recognizer or OptionRecognizer()
        self.usage_generator: UsageStatementGenerator = (
            usage_generator or DefaultUsageStatementGenerator()
        )
        self.misuse_generator: MisusedOptionsMessageGenerator = (
            misuse_generator or DefaultMisusedOptionsMessageGenerator()
        )
        self.console: Console = console or default_console

        self._implicit_commands: list[CommandDescriptor] = []
        if help_command:
            self._implicit_commands.append(build_help_command(self))
        if version_command:
            self._implicit_commands.append(build_version_command(self))
        for implicit in self._implicit_commands:
            self.registry.reserve(implicit.name, implicit.shortcuts)

    def register_command(self, command: CommandDescriptor) -> None:
        self.registry.register_command(command)

    def register_commands(self, commands: Iterable[CommandDescriptor]) -> None:
        self.registry.register_commands(commands)

    def command(self, name: str) -> CommandBuilder:
        return self.registry.command(name)

    def routable_commands(self) -> list[CommandDescriptor]:
        """Registered commands followed by the implicit ones."""
        return [*self.registry.commands, *self._implicit_commands]

    def print_error(self, message: str) -> None:
        self.console.print(message, style=OneColors.DARK_RED_b, markup=False)

    def print_usage(self, command: CommandDescriptor) -> None:
        usage = self.usage_generator.generate(command, self.program)
        self.console.print(usage, markup=False)

    def render_help(self) -> None:
        """Print the program usage line, description and the visible commands."""
        self.console.print(
            f"Usage: {self.program} <command> [<args>]",
            style=OneColors.BLUE_b,
            markup=False,
        )
        if self.description:
            self.console.print()
            self.console.print(self.description, markup=False)

        table = Table(box=None, show_header=False, pad_edge=False)
        table.add_column("Command", style=OneColors.CYAN_b, no_wrap=True)
        table.add_column("Description")
        for command in self.routable_commands():
            if command.hidden:
                continue
            table.add_row(command.name, command.description)
        self.console.print()
        self.console.print("Available commands:", markup=False)
        self.console.print(table, markup=False)

    def _setup_and_execute(
        self, command: CommandDescriptor, remaining: list[Token]
    ) -> DispatchResult:
        options: dict[str, Any] = {}
        positional = remaining
        if command.is_option_aware:
            recognition = self.recognizer.recognize(remaining, command.option_registry)
            if recognition.exit_early:
                self.print_usage(command)
                return ExitEarly(command)
            if recognition.has_misuse:
                usage = self.usage_generator.generate(command, self.program)
                message = self.misuse_generator.generate(command, recognition, usage)
                if message:
                    self.print_error(message)
                if command.fail_on_unrecognized_options:
                    raise SilentAbort()
                logger.warning(
                    "[Command:%s] Continuing despite misused options: %s",
                    command.name,
                    recognition.to_error(),
                )
            options = recognition.values
            positional = recognition.remaining_values

        arguments = bind_arguments(command.slots, positional, options=options)
        value = command.execute(arguments)
        return Dispatched(command=command, arguments=arguments, value=value)

    def dispatch(self, argv: Sequence[str] | None = None) -> DispatchResult:
        """
        Route, recognize, bind and execute in one pass.

        Args:
            argv (Sequence[str] | None): Arguments excluding the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            DispatchResult: `Dispatched`, `ExitEarly` or `Failed`.
        """
        argv = list(sys.argv[1:] if argv is None else argv)
        self.registry.freeze()
        command: CommandDescriptor | None = None
        try:
            tokens = tokenize(argv)
            routing = self.router.route(self.routable_commands(), tokens)
            command = routing.command
            return self._setup_and_execute(command, routing.remaining)
        except SilentAbort:
            logger.debug("Dispatch of %s aborted silently", argv)
            return Failed(ErrorKind.SILENT, command=command)
        except ArgRouterError as error:
            message = str(error)
            self.print_error(message)
            if isinstance(error, BindingFailure) and command is not None:
                self.print_usage(command)
            return Failed(error.kind, message, command)
        except Exception as error:
            logger.exception("Unexpected error while dispatching %s", argv)
            message = f"An error occurred: {error}"
            self.print_error(message)
            return Failed(ErrorKind.UNEXPECTED, message, command)

    def go(self, argv: Sequence[str] | None = None) -> int:
        """Dispatch and return the process exit code."""
        return self.dispatch(argv).exit_code

    def debug_go(self, argument_string: str) -> int:
        """Dispatch a whitespace or shell-quoted argument string, for debugging."""
        self.console.print("[Debug Mode]", markup=False)
        return self.go(split_argument_string(argument_string))

    def run(self, argv: Sequence[str] | None = None) -> NoReturn:
        sys.exit(self.go(argv))

    def __repr__(self) -> str:
        return (
            f"ArgRouter(program='{self.program}', version='{self.version}', "
            f"commands={len(self.registry)})"
        )

# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implicit `help` and `version` commands appended by `ArgRouter` at dispatch.

- `help [<command>] ...` lists every visible command, or prints the usage
  statement of the named command (`help remote add`). Shortcuts: `-h`, `--help`.
- `version` prints `<program> v<version>`. Shortcuts: `-v`, `--version`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from argrouter.command import CommandDescriptor
from argrouter.exceptions import CommandError
from argrouter.parser.binder import BoundArguments
from argrouter.themes import OneColors

if TYPE_CHECKING:
    from argrouter.app import ArgRouter

HELP_COMMAND_NAME = "help"
HELP_SHORTCUTS: tuple[str, ...] = ("-h", "--help")
VERSION_COMMAND_NAME = "version"
VERSION_SHORTCUTS: tuple[str, ...] = ("-v", "--version")


def build_help_command(app: ArgRouter) -> CommandDescriptor:
    def show_help(arguments: BoundArguments) -> None:
        words = [
            word for word in arguments.get_list("command") if word not in HELP_SHORTCUTS
        ]
        if not words:
            app.render_help()
            return
        name = " ".join(words)
        target = next(
            (command for command in app.routable_commands() if command.name == name),
            None,
        )
        if target is None:
            raise CommandError(f"Command '{name}' not found")
        app.print_usage(target)

    return CommandDescriptor(
        name=HELP_COMMAND_NAME,
        description="Show available commands or the usage of one command.",
        signature="[<command>] ...",
        shortcuts=HELP_SHORTCUTS,
        executor=show_help,
    )


def build_version_command(app: ArgRouter) -> CommandDescriptor:
    def show_version(_: BoundArguments) -> str:
        app.console.print(
            f"[{OneColors.GREEN_b}]{escape(app.program)} v{escape(app.version)}[/]"
        )
        return app.version

    return CommandDescriptor(
        name=VERSION_COMMAND_NAME,
        description="Show the program version.",
        shortcuts=VERSION_SHORTCUTS,
        executor=show_version,
    )

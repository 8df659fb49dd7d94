# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Explicit command registry.

`CommandRegistry` holds the commands an application can route to. It is
populated at startup and frozen by the dispatcher before the first dispatch,
after which it is read-only.

Registration enforces the invariant the router relies on: two commands whose
names are equal-length prefixes of the same input would have identical names,
so duplicate names (and duplicate shortcuts) are rejected here. Names
reserved for the implicit help and version commands are rejected as well.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from argrouter.command import CommandBuilder, CommandDescriptor
from argrouter.exceptions import CommandAlreadyExistsError, RegistryFrozenError
from argrouter.logger import logger


class CommandRegistry:
    """Ordered, name-unique collection of command descriptors."""

    def __init__(self, commands: Iterable[CommandDescriptor] = ()) -> None:
        self._commands: dict[str, CommandDescriptor] = {}
        self._reserved: dict[str, str] = {}
        self._frozen: bool = False
        self.register_commands(commands)

    @staticmethod
    def normalize_name(name: str) -> str:
        return " ".join(name.split())

    def reserve(self, name: str, shortcuts: Iterable[str] = ()) -> None:
        """Reserve a name and shortcuts for a command appended at dispatch time."""
        name = self.normalize_name(name)
        if name in self._commands:
            raise CommandAlreadyExistsError(
                f"Command '{name}' is already registered and cannot be reserved"
            )
        self._reserved[name] = name
        for shortcut in shortcuts:
            self._check_shortcut(shortcut, name)
            self._reserved[shortcut] = name

    def _check_shortcut(self, shortcut: str, owner: str) -> None:
        if shortcut in self._reserved:
            raise CommandAlreadyExistsError(
                f"Shortcut '{shortcut}' for '{owner}' is reserved by "
                f"'{self._reserved[shortcut]}'"
            )
        for command in self._commands.values():
            if shortcut in command.shortcuts:
                raise CommandAlreadyExistsError(
                    f"Shortcut '{shortcut}' for '{owner}' is already used by "
                    f"'{command.name}'"
                )

    def register_command(self, command: CommandDescriptor) -> None:
        """
        Register one command.

        Raises:
            RegistryFrozenError: If dispatch has already started.
            CommandAlreadyExistsError: If the name or a shortcut is taken.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{command.name}': commands must be registered "
                "before dispatch"
            )
        if not isinstance(command, CommandDescriptor):
            raise TypeError(f"Expected a CommandDescriptor, got {type(command).__name__}")
        if command.name in self._commands or command.name in self._reserved:
            raise CommandAlreadyExistsError(f"Command '{command.name}' already exists")
        for shortcut in command.shortcuts:
            self._check_shortcut(shortcut, command.name)
        self._commands[command.name] = command
        logger.debug("Registered command '%s'", command.name)

    def register_commands(self, commands: Iterable[CommandDescriptor]) -> None:
        for command in commands:
            self.register_command(command)

    def command(self, name: str) -> CommandBuilder:
        """Start a builder whose `register()` adds the command to this registry."""
        return CommandBuilder(name, registry=self)

    def get(self, name: str) -> CommandDescriptor | None:
        return self._commands.get(self.normalize_name(name))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def commands(self) -> tuple[CommandDescriptor, ...]:
        return tuple(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize_name(name) in self._commands

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry(commands={len(self._commands)}, frozen={self._frozen})"

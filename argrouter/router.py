# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Routes a tokenized invocation to exactly one registered command.

`DefaultRouter` compares each command's whitespace-split name against the
leading value-like tokens and picks the longest match, so `remote add origin`
reaches `remote add` rather than `remote`. The matched name tokens are marked
consumed and the rest are handed on for option recognition and binding.

Other routes:
- A leading option-like token equal to a command shortcut (`-h`, `--version`)
  routes to that command.
- Empty input routes to the default command if one is configured, otherwise
  to `help` when it is registered.
- Unmatched input routes to the default command if one is configured,
  otherwise raises `RoutingFailure`.

Two commands matching with the same length is a registration defect and is
reported as an ambiguous `RoutingFailure`, never resolved silently.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable

from argrouter.command import CommandDescriptor
from argrouter.exceptions import RoutingFailure
from argrouter.logger import logger
from argrouter.parser.token import Token


@dataclass
class RoutingResult:
    """The routed command and how the token stream was split to reach it."""

    command: CommandDescriptor
    consumed: list[Token] = field(default_factory=list)
    remaining: list[Token] = field(default_factory=list)


@runtime_checkable
class RouterProtocol(Protocol):
    def route(
        self, commands: Sequence[CommandDescriptor], tokens: list[Token]
    ) -> RoutingResult: ...


class DefaultRouter:
    """Longest-prefix router with shortcut and default-command support."""

    def __init__(self, default_command: str | None = None, help_command: str = "help"):
        self.default_command = default_command
        self.help_command = help_command

    def _find(
        self, commands: Sequence[CommandDescriptor], name: str | None
    ) -> CommandDescriptor | None:
        if not name:
            return None
        name = " ".join(name.split())
        return next((command for command in commands if command.name == name), None)

    def _route_to(
        self, command: CommandDescriptor, tokens: list[Token], count: int
    ) -> RoutingResult:
        consumed = tokens[:count]
        for token in consumed:
            token.consume()
        logger.debug("Routed to '%s' consuming %d token(s)", command.name, count)
        return RoutingResult(command=command, consumed=consumed, remaining=tokens[count:])

    def route(
        self, commands: Sequence[CommandDescriptor], tokens: list[Token]
    ) -> RoutingResult:
        """
        Select the command `tokens` refer to.

        Args:
            commands (Sequence[CommandDescriptor]): All routable commands,
                including the implicit ones.
            tokens (list[Token]): The tokenized invocation.

        Returns:
            RoutingResult: The command with consumed and remaining tokens.

        Raises:
            RoutingFailure: If nothing matches, or two commands tie.
        """
        default = self._find(commands, self.default_command)

        if not tokens:
            fallback = default or self._find(commands, self.help_command)
            if fallback is None:
                raise RoutingFailure("No command specified")
            return self._route_to(fallback, tokens, 0)

        first = tokens[0]
        if first.is_option:
            for command in commands:
                if first.text in command.shortcuts:
                    return self._route_to(command, tokens, 1)

        leading: list[str] = []
        for token in tokens:
            if token.is_option:
                break
            leading.append(token.text)

        best: list[CommandDescriptor] = []
        best_length = 0
        for command in commands:
            words = command.words
            length = len(words)
            if length > len(leading) or tuple(leading[:length]) != words:
                continue
            if length > best_length:
                best, best_length = [command], length
            elif length == best_length:
                best.append(command)

        if len(best) > 1:
            names = ", ".join(f"'{command.name}'" for command in best)
            logger.error("Ambiguous routing between %s", names)
            raise RoutingFailure(
                f"Ambiguous command: {names} all match the input", ambiguous=True
            )
        if best:
            return self._route_to(best[0], tokens, best_length)
        if default is not None:
            return self._route_to(default, tokens, 0)
        raise RoutingFailure(f"Command '{first.text}' not found")

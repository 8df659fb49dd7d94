# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome variants of a single dispatch.

- `Dispatched`: the command ran; carries its bound arguments and return value.
- `ExitEarly`: the help option was given; usage was shown, nothing executed.
- `Failed`: routing, option recognition, binding or execution failed.

Only `Failed` carries a message. `exit_code` maps every variant to the
process exit status (0 or 1).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from argrouter.command import CommandDescriptor
from argrouter.exceptions import ErrorKind
from argrouter.parser.binder import BoundArguments

SUCCESS = 0
FAILURE = 1


@dataclass(frozen=True)
class Dispatched:
    command: CommandDescriptor
    arguments: BoundArguments
    value: Any = None

    @property
    def exit_code(self) -> int:
        return SUCCESS


@dataclass(frozen=True)
class ExitEarly:
    command: CommandDescriptor

    @property
    def exit_code(self) -> int:
        return SUCCESS


@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    message: str | None = None
    command: CommandDescriptor | None = None

    @property
    def exit_code(self) -> int:
        return FAILURE


DispatchResult = Union[Dispatched, ExitEarly, Failed]

# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the immutable `CommandDescriptor` and the chainable `CommandBuilder`.

A descriptor names a command (names may contain spaces for namespaced
commands such as `remote add`), declares its options and positional
signature, and points at the executor that runs once arguments are bound.

Descriptors are frozen once constructed. The signature string is parsed at
construction, so a malformed signature fails when the command is declared
rather than when it is first invoked.

Example:
    descriptor = (
        CommandBuilder("remote add")
        .describe("Add a remote")
        .signature("<name> <url>")
        .flag("-f", "--fetch", help="Fetch after adding.")
        .executes(add_remote)
        .build()
    )
"""
from __future__ import annotations

import asyncio
import inspect
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

from argrouter.exceptions import CommandError, OptionConfigurationError
from argrouter.logger import logger
from argrouter.parser.binder import BoundArguments
from argrouter.parser.option import OptionRegistry, OptionSpec
from argrouter.parser.signature import SignatureSlot, parse_signature, render_signature
from argrouter.parser.token import is_option_like

if TYPE_CHECKING:
    from argrouter.registry import CommandRegistry

Executor = Callable[[BoundArguments], Any]


class CommandCapability(Enum):
    """Whether a command takes part in option recognition."""

    PLAIN = "plain"
    OPTION_AWARE = "option_aware"

    def __str__(self) -> str:
        return self.value


class CommandDescriptor(BaseModel):
    """
    Represents a routable command.

    Attributes:
        name (str): Command name; internal whitespace separates namespace words.
        description (str): One line summary for help listings.
        signature (str): Declarative positional signature, e.g. `"<in> [<out>]"`.
        options (tuple[OptionSpec, ...]): Declared flags and keyed options.
        capability (CommandCapability): `option_aware` commands get option
            recognition (and the implicit help option); `plain` commands bind
            every token positionally.
        fail_on_unrecognized_options (bool): Abort before executing when an
            option is misused; otherwise report it and carry on.
        shortcuts (tuple[str, ...]): Option-like tokens that route to this
            command when given first (e.g. `-h` for help).
        executor (Callable[[BoundArguments], Any] | None): Runs the command.
        help_text (str): Longer help shown in the command's usage statement.
        hidden (bool): Leave the command out of help listings.
    """

    name: str
    description: str = ""
    signature: str = ""
    options: tuple[OptionSpec, ...] = ()
    capability: CommandCapability = CommandCapability.PLAIN
    fail_on_unrecognized_options: bool = True
    shortcuts: tuple[str, ...] = ()
    executor: Executor | None = None
    help_text: str = ""
    hidden: bool = False

    _slots: tuple[SignatureSlot, ...] = PrivateAttr(default=())
    _option_registry: OptionRegistry = PrivateAttr(default_factory=OptionRegistry)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="before")
    @classmethod
    def infer_capability(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("options") and "capability" not in data:
            data = {**data, "capability": CommandCapability.OPTION_AWARE}
        return data

    @field_validator("name")
    @classmethod
    def normalize_name(cls, name: str) -> str:
        normalized = " ".join(name.split())
        if not normalized:
            raise ValueError("Command name cannot be empty")
        if any(is_option_like(word) for word in normalized.split()):
            raise ValueError(f"Command name '{name}' cannot contain option-like words")
        return normalized

    @field_validator("options")
    @classmethod
    def normalize_options(cls, options: tuple[OptionSpec, ...]) -> tuple[OptionSpec, ...]:
        return OptionRegistry(options).specs

    @field_validator("shortcuts")
    @classmethod
    def validate_shortcuts(cls, shortcuts: tuple[str, ...]) -> tuple[str, ...]:
        for shortcut in shortcuts:
            if not is_option_like(shortcut):
                raise ValueError(f"Shortcut '{shortcut}' must look like an option")
        return shortcuts

    def model_post_init(self, _: Any) -> None:
        """Parse the signature and index the options once, at declaration time."""
        self._slots = parse_signature(self.signature)
        registry = OptionRegistry(self.options)
        if self.capability is CommandCapability.OPTION_AWARE:
            registry = registry.with_help()
        elif self.options:
            raise OptionConfigurationError(
                f"Plain command '{self.name}' cannot declare options"
            )
        self._option_registry = registry

    @property
    def slots(self) -> tuple[SignatureSlot, ...]:
        return self._slots

    @property
    def option_registry(self) -> OptionRegistry:
        """Declared options, plus the implicit help option for option-aware commands."""
        return self._option_registry

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.name.split())

    @property
    def is_option_aware(self) -> bool:
        return self.capability is CommandCapability.OPTION_AWARE

    def get_signature_text(self) -> str:
        return render_signature(self._slots)

    def execute(self, arguments: BoundArguments) -> Any:
        """Run the executor with bound arguments, driving coroutines to completion."""
        if self.executor is None:
            raise CommandError(f"Command '{self.name}' has no executor")
        logger.debug("[Command:%s] Executing with %r", self.name, arguments)
        result = self.executor(arguments)
        if inspect.isawaitable(result):
            if _loop_is_running():
                if inspect.iscoroutine(result):
                    result.close()
                raise CommandError(
                    f"Command '{self.name}' returned an awaitable while an event loop "
                    "is already running; dispatch from synchronous code instead"
                )
            result = asyncio.run(_await(result))
        return result

    def __str__(self) -> str:
        return (
            f"CommandDescriptor(name='{self.name}', signature='{self.signature}', "
            f"options={len(self.options)}, capability={self.capability})"
        )


async def _await(awaitable: Any) -> Any:
    return await awaitable


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class CommandBuilder:
    """
    Accumulates a command's settings and produces an immutable descriptor.

    Builders obtained from `CommandRegistry.command()` can register the
    finished descriptor directly with `register()`.
    """

    def __init__(self, name: str, registry: CommandRegistry | None = None) -> None:
        self._name = name
        self._registry = registry
        self._description = ""
        self._signature = ""
        self._options = OptionRegistry()
        self._capability: CommandCapability | None = None
        self._fail_on_unrecognized = True
        self._shortcuts: list[str] = []
        self._executor: Executor | None = None
        self._help_text = ""
        self._hidden = False

    def describe(self, description: str) -> CommandBuilder:
        self._description = description
        return self

    def signature(self, signature: str) -> CommandBuilder:
        self._signature = signature
        return self

    def flag(self, *aliases: str, dest: str | None = None, help: str = "") -> CommandBuilder:
        self._options.add_flag(*aliases, dest=dest, help=help)
        return self

    def keyed(self, *aliases: str, dest: str | None = None, help: str = "") -> CommandBuilder:
        self._options.add_keyed(*aliases, dest=dest, help=help)
        return self

    def option_aware(self, enabled: bool = True) -> CommandBuilder:
        self._capability = (
            CommandCapability.OPTION_AWARE if enabled else CommandCapability.PLAIN
        )
        return self

    def fail_on_unrecognized(self, fail: bool = True) -> CommandBuilder:
        self._fail_on_unrecognized = fail
        return self

    def shortcut(self, *aliases: str) -> CommandBuilder:
        self._shortcuts.extend(aliases)
        return self

    def help_text(self, text: str) -> CommandBuilder:
        self._help_text = text
        return self

    def hidden(self, hidden: bool = True) -> CommandBuilder:
        self._hidden = hidden
        return self

    def executes(self, executor: Executor) -> CommandBuilder:
        if not callable(executor):
            raise TypeError(f"{executor!r} is not callable")
        self._executor = executor
        return self

    def build(self) -> CommandDescriptor:
        data: dict[str, Any] = {
            "name": self._name,
            "description": self._description,
            "signature": self._signature,
            "options": self._options.specs,
            "fail_on_unrecognized_options": self._fail_on_unrecognized,
            "shortcuts": tuple(self._shortcuts),
            "executor": self._executor,
            "help_text": self._help_text,
            "hidden": self._hidden,
        }
        if self._capability is not None:
            data["capability"] = self._capability
        return CommandDescriptor(**data)

    def register(self) -> CommandDescriptor:
        if self._registry is None:
            raise CommandError(f"Builder for '{self._name}' is not bound to a registry")
        descriptor = self.build()
        self._registry.register_command(descriptor)
        return descriptor

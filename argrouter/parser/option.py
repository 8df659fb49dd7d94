# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionSpec` and `OptionRegistry`, the declarative description of the
flags and keyed options a command understands.

Each `OptionSpec` has one or more aliases (`-v`, `--verbose`), a kind and the
destination name its value is stored under. Flags take no value; keyed
options take exactly one. The reserved help option (`-h`/`--help`) is a
third kind that requests an early exit.

`OptionRegistry` accumulates specs while a command is being built and
enforces that no two specs share an alias or destination.

Example:
    options = OptionRegistry()
    options.add_flag("-v", "--verbose", help="Print more output.")
    options.add_keyed("-o", "--output", help="Write to this file.")
    options.lookup("--output").dest  # "output"
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Mapping

from argrouter.exceptions import OptionConfigurationError
from argrouter.parser.token import is_option_like

HELP_ALIASES: tuple[str, ...] = ("-h", "--help")
HELP_DEST = "help"


class OptionKind(Enum):
    """
    Defines what happens when an option alias is recognized.

    Members:
        FLAG: Record presence; consumes no value.
        KEYED: Consume exactly one following token as the value.
        HELP: Request an early exit so usage can be shown.

    Aliases:
        - "switch" → "flag"
        - "key" / "value" → "keyed"
    """

    FLAG = "flag"
    KEYED = "keyed"
    HELP = "help"

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        aliases = {"switch": "flag", "key": "keyed", "value": "keyed"}
        normalized = value.strip().lower()
        normalized = aliases.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionSpec:
    """
    Represents one declared option.

    Attributes:
        aliases (tuple[str, ...]): Short and long aliases for the option.
        kind (OptionKind): Flag, keyed or help.
        dest (str): Key under which the recognized value is stored.
        help (str): Help text shown in usage statements.
    """

    aliases: tuple[str, ...]
    kind: OptionKind = OptionKind.FLAG
    dest: str = ""
    help: str = ""

    @property
    def arity(self) -> int:
        return 1 if self.kind is OptionKind.KEYED else 0

    @property
    def takes_value(self) -> bool:
        return self.arity == 1

    def get_alias_text(self) -> str:
        text = ", ".join(self.aliases)
        if self.takes_value:
            text = f"{text} {self.dest.upper()}"
        return text


def validate_aliases(aliases: tuple[str, ...]) -> None:
    if not aliases:
        raise OptionConfigurationError("No aliases provided")
    for alias in aliases:
        if not isinstance(alias, str):
            raise OptionConfigurationError(f"Alias '{alias}' must be a string")
        if "=" in alias or " " in alias:
            raise OptionConfigurationError(
                f"Alias '{alias}' must not contain '=' or whitespace"
            )
        if not is_option_like(alias):
            raise OptionConfigurationError(
                f"Alias '{alias}' must start with '-' or '--' followed by a letter"
            )
        if not alias.startswith("--") and len(alias) != 2:
            raise OptionConfigurationError(
                f"Short alias '{alias}' must be a single character"
            )
    if len(set(aliases)) != len(aliases):
        raise OptionConfigurationError(f"Duplicate aliases in {aliases}")


def dest_from_aliases(aliases: tuple[str, ...], dest: str | None = None) -> str:
    """Derive the destination name, preferring the first long alias."""
    if not dest:
        long_aliases = [alias for alias in aliases if alias.startswith("--")]
        chosen = long_aliases[0] if long_aliases else aliases[0]
        dest = chosen.lstrip("-").replace("-", "_").lower()
    if not dest.replace("_", "").isalnum():
        raise OptionConfigurationError(
            "dest must be a valid identifier (letters, digits, and underscores only)"
        )
    if dest[0].isdigit():
        raise OptionConfigurationError("dest must not start with a digit")
    return dest


def help_option() -> OptionSpec:
    return OptionSpec(
        aliases=HELP_ALIASES,
        kind=OptionKind.HELP,
        dest=HELP_DEST,
        help="Show this help message.",
    )


class OptionRegistry:
    """Accumulates the option specs declared by one command."""

    def __init__(self, options: Iterable[OptionSpec] = ()) -> None:
        self._specs: list[OptionSpec] = []
        self._alias_map: dict[str, OptionSpec] = {}
        for spec in options:
            self.add(spec)

    def add(self, spec: OptionSpec) -> OptionSpec:
        """Register a prepared spec, rejecting alias or dest collisions."""
        validate_aliases(spec.aliases)
        dest = dest_from_aliases(spec.aliases, spec.dest)
        if dest != spec.dest:
            spec = OptionSpec(aliases=spec.aliases, kind=spec.kind, dest=dest, help=spec.help)
        for alias in spec.aliases:
            if alias in self._alias_map:
                raise OptionConfigurationError(
                    f"Alias '{alias}' is already used by '{self._alias_map[alias].dest}'"
                )
        if any(existing.dest == spec.dest for existing in self._specs):
            raise OptionConfigurationError(f"Destination '{spec.dest}' is already defined")
        self._specs.append(spec)
        for alias in spec.aliases:
            self._alias_map[alias] = spec
        return spec

    def add_flag(self, *aliases: str, dest: str | None = None, help: str = "") -> OptionSpec:
        return self.add(OptionSpec(tuple(aliases), OptionKind.FLAG, dest or "", help))

    def add_keyed(
        self, *aliases: str, dest: str | None = None, help: str = ""
    ) -> OptionSpec:
        return self.add(OptionSpec(tuple(aliases), OptionKind.KEYED, dest or "", help))

    def with_help(self) -> OptionRegistry:
        """Return a copy that also declares the implicit help option."""
        registry = OptionRegistry(self._specs)
        if not any(alias in self._alias_map for alias in HELP_ALIASES) and not any(
            spec.dest == HELP_DEST for spec in self._specs
        ):
            registry.add(help_option())
        return registry

    def lookup(self, alias: str) -> OptionSpec | None:
        return self._alias_map.get(alias)

    @property
    def alias_map(self) -> Mapping[str, OptionSpec]:
        return self._alias_map

    @property
    def specs(self) -> tuple[OptionSpec, ...]:
        return tuple(self._specs)

    def __contains__(self, alias: object) -> bool:
        return alias in self._alias_map

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OptionRegistry(options={len(self._specs)}, aliases={len(self._alias_map)})"

# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds leftover positional tokens to a command's signature slots.

Slots are filled in order: each required slot takes exactly one token, each
optional slot takes one if any are left, and a variadic slot takes the rest.
Too few tokens for the required slots, or tokens left over without a
variadic slot, raise `BindingFailure`.

The resulting `BoundArguments` is an immutable mapping of slot name to text
(or a tuple of texts for the variadic slot). It also carries the option
values recognized for the command, and offers typed lookup so commands can
interpret values themselves.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

from argrouter.exceptions import BindingFailure
from argrouter.logger import logger
from argrouter.parser.coerce import coerce_value
from argrouter.parser.signature import SignatureSlot, SlotKind, parse_signature
from argrouter.parser.token import Token

_MISSING = object()


class BoundArguments(Mapping[str, Any]):
    """
    Read-only view of the arguments bound for one invocation.

    Positional values are looked up by slot name; option values by their
    dest through `option()` and `flag()`.

    Example:
        arguments.get("out", "-")
        arguments.get("count", type=int)
        arguments.get_list("files")
        arguments.flag("verbose")
    """

    def __init__(
        self,
        values: Mapping[str, str | tuple[str, ...]] | None = None,
        options: Mapping[str, Any] | None = None,
        slots: Sequence[SignatureSlot] = (),
    ) -> None:
        self._values: Mapping[str, str | tuple[str, ...]] = MappingProxyType(
            dict(values or {})
        )
        self._options: Mapping[str, Any] = MappingProxyType(dict(options or {}))
        self._slots: tuple[SignatureSlot, ...] = tuple(slots)

    @property
    def slots(self) -> tuple[SignatureSlot, ...]:
        return self._slots

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    def __getitem__(self, name: str) -> str | tuple[str, ...]:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def has(self, name: str) -> bool:
        """Return True if a value was bound to `name`."""
        return name in self._values

    def get(self, name: str, default: Any = None, *, type: Any = None) -> Any:
        value = self._values.get(name, _MISSING)
        if value is _MISSING:
            return default
        if type is None:
            return value
        if isinstance(value, tuple):
            return tuple(self._coerce(name, item, type) for item in value)
        return self._coerce(name, value, type)

    def require(self, name: str, *, type: Any = None) -> Any:
        """Return the value bound to `name`, raising if it was not bound."""
        if name not in self._values:
            raise BindingFailure(f"No value was bound to '{name}'")
        return self.get(name, type=type)

    def get_list(self, name: str, *, type: Any = None) -> list[Any]:
        """Return the value(s) bound to `name` as a list, empty if unbound."""
        value = self.get(name, type=type)
        if value is None:
            return []
        if isinstance(value, tuple):
            return list(value)
        return [value]

    def option(self, dest: str, default: Any = None, *, type: Any = None) -> Any:
        value = self._options.get(dest, _MISSING)
        if value is _MISSING:
            return default
        if type is None or not isinstance(value, str):
            return value
        return self._coerce(dest, value, type)

    def flag(self, dest: str) -> bool:
        return bool(self._options.get(dest, False))

    def _coerce(self, name: str, value: str, target_type: Any) -> Any:
        try:
            return coerce_value(value, target_type)
        except (ValueError, TypeError) as error:
            raise BindingFailure(f"Invalid value for '{name}': {error}") from error

    def __repr__(self) -> str:
        return f"BoundArguments({dict(self._values)!r}, options={dict(self._options)!r})"


def bind_arguments(
    slots: Sequence[SignatureSlot] | str,
    tokens: Sequence[Token | str],
    options: Mapping[str, Any] | None = None,
) -> BoundArguments:
    """
    Assign positional tokens to signature slots.

    Args:
        slots (Sequence[SignatureSlot] | str): Parsed slots, or a signature string.
        tokens (Sequence[Token | str]): Positional tokens in input order.
        options (Mapping[str, Any] | None): Recognized option values to carry along.

    Returns:
        BoundArguments: The bound values.

    Raises:
        BindingFailure: If there are too few or too many tokens.
    """
    if isinstance(slots, str):
        slots = parse_signature(slots)
    tokens = [token if isinstance(token, Token) else Token(token) for token in tokens]

    values: dict[str, str | tuple[str, ...]] = {}
    index = 0
    for slot in slots:
        if slot.kind is SlotKind.REQUIRED:
            if index >= len(tokens):
                required = sum(1 for s in slots if s.is_required)
                raise BindingFailure(
                    f"Not enough arguments: missing <{slot.name}> "
                    f"(expected at least {required}, got {len(tokens)})"
                )
            tokens[index].consume()
            values[slot.name] = tokens[index].text
            index += 1
        elif slot.kind is SlotKind.OPTIONAL:
            if index < len(tokens):
                tokens[index].consume()
                values[slot.name] = tokens[index].text
                index += 1
        else:
            rest = tokens[index:]
            for token in rest:
                token.consume()
            values[slot.name] = tuple(token.text for token in rest)
            index = len(tokens)

    if index < len(tokens):
        extra = " ".join(token.text for token in tokens[index:])
        raise BindingFailure(
            f"Too many arguments: expected at most {len(slots)}, got {len(tokens)} "
            f"(unexpected: {extra})"
        )

    logger.debug("Bound arguments %s", values)
    return BoundArguments(values, options=options, slots=slots)

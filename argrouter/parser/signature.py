# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses declarative command signatures into ordered parameter slots.

A signature is a space separated list of slots:

- `<name>`      required, exactly one token
- `[<name>]`    optional, one token when available
- `...`         marks the final slot variadic (zero or more tokens). It may be
                written as its own word (`<files> ...`), as a suffix
                (`<files>...`) or as a prefix naming a new slot (`...extra`).

Parsing is pure and happens once when a command descriptor is built, so a
malformed signature fails fast with `SignatureError`.

Example:
    parse_signature("<source> [<destination>] ...extra")
    -> (source: required, destination: optional, extra: variadic)
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from argrouter.exceptions import SignatureError

VARIADIC_MARKER = "..."

_NAME = r"[A-Za-z_][\w-]*"
_REQUIRED = re.compile(rf"^<({_NAME})>$")
_OPTIONAL = re.compile(rf"^\[<({_NAME})>\]$")
_BARE = re.compile(rf"^({_NAME})$")


class SlotKind(Enum):
    """How many tokens a signature slot accepts."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    VARIADIC = "variadic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SignatureSlot:
    """One parameter position in a parsed signature."""

    name: str
    kind: SlotKind
    position: int

    @property
    def is_required(self) -> bool:
        return self.kind is SlotKind.REQUIRED

    @property
    def is_variadic(self) -> bool:
        return self.kind is SlotKind.VARIADIC

    def render(self) -> str:
        if self.kind is SlotKind.REQUIRED:
            return f"<{self.name}>"
        if self.kind is SlotKind.OPTIONAL:
            return f"[<{self.name}>]"
        return f"[<{self.name}>] {VARIADIC_MARKER}"


def _parse_slot(part: str, signature: str) -> tuple[str, SlotKind]:
    if match := _REQUIRED.match(part):
        return match.group(1), SlotKind.REQUIRED
    if match := _OPTIONAL.match(part):
        return match.group(1), SlotKind.OPTIONAL
    raise SignatureError(f"Invalid slot '{part}' in signature '{signature}'")


def parse_signature(signature: str) -> tuple[SignatureSlot, ...]:
    """
    Parse a signature string into slots.

    Args:
        signature (str): Declarative signature such as `"<in> [<out>]"`.

    Returns:
        tuple[SignatureSlot, ...]: Slots in declaration order.

    Raises:
        SignatureError: On an unparseable slot, a required slot after an
            optional one, a misplaced or repeated variadic marker, or a
            duplicated slot name.
    """
    parts = signature.split()
    names: list[str] = []
    kinds: list[SlotKind] = []
    variadic_seen = False

    for part in parts:
        if variadic_seen:
            if VARIADIC_MARKER in part:
                raise SignatureError(
                    f"Signature '{signature}' has more than one variadic marker"
                )
            raise SignatureError(
                f"Variadic marker must be on the final slot of '{signature}'"
            )

        if part == VARIADIC_MARKER:
            if not names:
                raise SignatureError(
                    f"Variadic marker in '{signature}' does not follow a slot"
                )
            kinds[-1] = SlotKind.VARIADIC
            variadic_seen = True
            continue

        if part.startswith(VARIADIC_MARKER):
            body = part[len(VARIADIC_MARKER) :]
            if VARIADIC_MARKER in body:
                raise SignatureError(
                    f"Signature '{signature}' has more than one variadic marker"
                )
            match = _BARE.match(body)
            name = match.group(1) if match else _parse_slot(body, signature)[0]
            names.append(name)
            kinds.append(SlotKind.VARIADIC)
            variadic_seen = True
            continue

        kind_override = None
        if part.endswith(VARIADIC_MARKER):
            part = part[: -len(VARIADIC_MARKER)]
            kind_override = SlotKind.VARIADIC
            variadic_seen = True

        name, kind = _parse_slot(part, signature)
        names.append(name)
        kinds.append(kind_override or kind)

    for index, kind in enumerate(kinds):
        if kind is SlotKind.REQUIRED and SlotKind.OPTIONAL in kinds[:index]:
            raise SignatureError(
                f"Required slot '<{names[index]}>' cannot follow an optional slot "
                f"in '{signature}'"
            )

    duplicates = {name for name in names if names.count(name) > 1}
    if duplicates:
        raise SignatureError(
            f"Duplicate slot names in '{signature}': {', '.join(sorted(duplicates))}"
        )

    return tuple(
        SignatureSlot(name=name, kind=kind, position=index)
        for index, (name, kind) in enumerate(zip(names, kinds))
    )


def render_signature(slots: tuple[SignatureSlot, ...] | list[SignatureSlot]) -> str:
    """Render slots back into their canonical signature text."""
    return " ".join(slot.render() for slot in slots)

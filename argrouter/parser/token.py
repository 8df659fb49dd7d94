# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizer for raw argument vectors.

Turns the process argument vector (or a debug string) into an ordered list of
`Token` objects tagged as option-like or value-like. Attached values
(`--key=value`, `-k=value`) are split here; combined short flags (`-abc`) can
only be split once the routed command's options are known, which is what
`expand_combined_flags()` is for.

Rules:
- One or two leading dashes followed by a non-numeric character is an option.
- A lone `-`, negative numbers (`-5`, `-.5`) and everything after a bare `--`
  separator are values. The separator itself is dropped.
- Tokenizing never fails; validity is judged by later passes.
"""
from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Mapping

from argrouter.logger import logger

if TYPE_CHECKING:
    from argrouter.parser.option import OptionSpec

SEPARATOR = "--"


class TokenRole(Enum):
    """Whether a token looks like an option or a plain value."""

    VALUE = "value"
    OPTION = "option"

    def __str__(self) -> str:
        return self.value


@dataclass
class Token:
    """
    One atomic unit of parsed input.

    Attributes:
        text (str): The raw token text.
        role (TokenRole): Option-like or value-like.
        consumed (bool): Flipped once a routing, recognition or binding pass
            has claimed the token.
        attached (bool): The value was written joined to its option
            (`--key=value`, `-ovalue`).
    """

    text: str
    role: TokenRole = TokenRole.VALUE
    consumed: bool = False
    attached: bool = False

    @property
    def is_option(self) -> bool:
        return self.role is TokenRole.OPTION

    def consume(self) -> None:
        self.consumed = True

    def __str__(self) -> str:
        return self.text


def is_option_like(text: str) -> bool:
    """Return True if `text` has the shape of an option (`-x`, `--xyz`)."""
    if text.startswith("--"):
        rest = text[2:]
    elif text.startswith("-"):
        rest = text[1:]
    else:
        return False
    if not rest:
        return False
    if rest[0].isdigit():
        return False
    if rest[0] == "." and rest[1:2].isdigit():
        return False
    return True


def tokenize(argv: Iterable[str]) -> list[Token]:
    """
    Split an argument vector into tokens.

    Args:
        argv (Iterable[str]): Arguments excluding the program name.

    Returns:
        list[Token]: Tokens in input order, none consumed.
    """
    tokens: list[Token] = []
    after_separator = False
    for text in argv:
        if after_separator:
            tokens.append(Token(text))
            continue
        if text == SEPARATOR:
            after_separator = True
            continue
        if not is_option_like(text):
            tokens.append(Token(text))
            continue
        flag, sep, value = text.partition("=")
        if sep and is_option_like(flag):
            tokens.append(Token(flag, TokenRole.OPTION))
            tokens.append(Token(value, attached=True))
        else:
            tokens.append(Token(text, TokenRole.OPTION))
    return tokens


def split_argument_string(argument_string: str) -> list[str]:
    """Split a debug argument string the way a shell would."""
    try:
        return shlex.split(argument_string)
    except ValueError:
        logger.warning(
            "Failed to split arguments with shell rules, using whitespace: %s",
            argument_string,
        )
        return argument_string.split()


def _split_bundle(text: str, lookup: Mapping[str, OptionSpec]) -> list[Token] | None:
    chars = text[1:]
    pieces: list[Token] = []
    for index, char in enumerate(chars):
        alias = f"-{char}"
        spec = lookup.get(alias)
        if spec is None:
            return None
        pieces.append(Token(alias, TokenRole.OPTION))
        if spec.takes_value:
            attached = chars[index + 1 :]
            if attached:
                pieces.append(Token(attached, attached=True))
            return pieces
    return pieces


def expand_combined_flags(
    tokens: list[Token], lookup: Mapping[str, OptionSpec]
) -> list[Token]:
    """
    Expand POSIX-style bundles of single-character options.

    `-abc` becomes `-a -b -c` when every character is a declared flag. When a
    character names a keyed option, the characters after it become its
    attached value (`-ofile` -> `-o file`). Bundles containing an undeclared
    character are left untouched so they surface as unrecognized.

    Args:
        tokens (list[Token]): Tokens remaining after routing.
        lookup (Mapping[str, OptionSpec]): Declared options keyed by alias.

    Returns:
        list[Token]: A new list; tokens that were not expanded are reused.
    """
    expanded: list[Token] = []
    for token in tokens:
        text = token.text
        if (
            token.consumed
            or not token.is_option
            or text.startswith("--")
            or len(text) <= 2
            or text in lookup
        ):
            expanded.append(token)
            continue
        pieces = _split_bundle(text, lookup)
        if pieces is None:
            expanded.append(token)
        else:
            logger.debug(
                "Expanded combined flags %s -> %s", text, [p.text for p in pieces]
            )
            expanded.extend(pieces)
    return expanded

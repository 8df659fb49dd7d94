# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Recognizes the options a routed command declares and strips them from the
token stream.

`OptionRecognizer.recognize()` scans tokens left to right:

- Flags are consumed and recorded as `True`.
- Keyed options consume themselves and the next value-like token. A keyed
  option with nothing usable after it is recorded as missing its value.
- Unknown option-like tokens are recorded as unrecognized and left unconsumed.
- A value attached to a flag or an unknown option (`--verbose=yes`) is
  reported as unrecognized together with its option and never binds.
- The help option sets `exit_early` and stops the scan.

The recognizer never raises for misuse. Whether an unrecognized option is
fatal is the command's policy, applied by the dispatcher.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from argrouter.exceptions import OptionMisuse
from argrouter.logger import logger
from argrouter.parser.option import OptionKind, OptionRegistry
from argrouter.parser.token import Token, expand_combined_flags


@dataclass
class RecognitionResult:
    """
    Outcome of one recognition pass.

    Attributes:
        tokens (list[Token]): The token stream after combined flags were
            expanded; consumed tokens are marked in place.
        consumed_tokens (list[Token]): Option and value tokens that were claimed.
        values (dict[str, Any]): Recognized values keyed by option dest.
        unrecognized (list[str]): Option-like tokens no spec matched.
        missing_values (list[str]): Keyed option aliases given without a value.
        exit_early (bool): True if the help option was seen.
    """

    tokens: list[Token] = field(default_factory=list)
    consumed_tokens: list[Token] = field(default_factory=list)
    values: dict[str, Any] = field(default_factory=dict)
    unrecognized: list[str] = field(default_factory=list)
    missing_values: list[str] = field(default_factory=list)
    exit_early: bool = False

    @property
    def has_misuse(self) -> bool:
        return bool(self.unrecognized or self.missing_values)

    @property
    def remaining_values(self) -> list[Token]:
        """Unconsumed value-like tokens, ready for binding."""
        return [token for token in self.tokens if not token.consumed and not token.is_option]

    def to_error(self) -> OptionMisuse:
        parts = []
        if self.unrecognized:
            parts.append(f"Unrecognized options: {', '.join(self.unrecognized)}")
        if self.missing_values:
            parts.append(f"Missing values for: {', '.join(self.missing_values)}")
        return OptionMisuse(
            "; ".join(parts) or "Incorrect option usage",
            unrecognized=list(self.unrecognized),
            missing_values=list(self.missing_values),
        )


def _attached_value(tokens: list[Token], index: int) -> Token | None:
    if index < len(tokens) and tokens[index].attached and not tokens[index].consumed:
        return tokens[index]
    return None


class OptionRecognizer:
    """Matches option tokens against a command's declared options."""

    def recognize(
        self, tokens: list[Token], options: OptionRegistry
    ) -> RecognitionResult:
        """
        Recognize declared options in `tokens`.

        Args:
            tokens (list[Token]): Tokens left after routing.
            options (OptionRegistry): The command's declared options, including
                the implicit help option when applicable.

        Returns:
            RecognitionResult: What was consumed, bound and left unrecognized.
        """
        tokens = expand_combined_flags(tokens, options.alias_map)
        result = RecognitionResult(tokens=tokens)

        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1
            if token.consumed or not token.is_option:
                continue

            spec = options.lookup(token.text)
            attached = _attached_value(tokens, index)
            if spec is None:
                if attached is None:
                    result.unrecognized.append(token.text)
                else:
                    attached.consume()
                    result.unrecognized.append(f"{token.text}={attached.text}")
                    index += 1
                continue

            if spec.kind is OptionKind.HELP:
                token.consume()
                result.consumed_tokens.append(token)
                result.exit_early = True
                logger.debug("Help option '%s' requested an early exit", token.text)
                break

            if spec.kind is OptionKind.FLAG:
                if attached is not None:
                    attached.consume()
                    result.unrecognized.append(f"{token.text}={attached.text}")
                    index += 1
                    continue
                token.consume()
                result.consumed_tokens.append(token)
                result.values[spec.dest] = True
                continue

            value_token = tokens[index] if index < len(tokens) else None
            if value_token is None or value_token.consumed or value_token.is_option:
                result.missing_values.append(token.text)
                continue
            token.consume()
            value_token.consume()
            result.consumed_tokens.extend((token, value_token))
            result.values[spec.dest] = value_token.text
            index += 1

        logger.debug(
            "Recognized options %s (unrecognized=%s, missing=%s)",
            result.values,
            result.unrecognized,
            result.missing_values,
        )
        return result

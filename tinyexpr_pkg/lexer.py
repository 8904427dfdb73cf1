"""Lexer: turns an expression string into an End-terminated token tuple."""

from __future__ import annotations

import re

from .config import (
    IDENT_CHAR_RE,
    IDENT_START_RE,
    MAX_INPUT_LENGTH,
    NUMBER_CHAR_RE,
    OPERATOR_CHARS,
    SEPARATOR_CHAR,
)
from .logging_config import get_logger
from .registry import Registry
from .tokens import (
    ConstantToken,
    EndToken,
    FunctionToken,
    NumberToken,
    OperatorToken,
    SeparatorToken,
    Token,
    TokenKind,
    VariableToken,
)
from .types import (
    InputTooLongError,
    NumericParseError,
    UnexpectedCharacterError,
    UnknownIdentifierError,
)

logger = get_logger("lexer")


def _scan_run(expression: str, start: int, pattern: re.Pattern[str]) -> int:
    """Return the index just past the maximal run of ``pattern`` chars at ``start``."""
    end = start + 1
    while end < len(expression) and pattern.match(expression[end]):
        end += 1
    return end


def _resolve_identifier(name: str, registry: Registry) -> Token:
    kind = registry.classify(name)
    if kind is TokenKind.FUNCTION:
        return FunctionToken(name)
    if kind is TokenKind.CONSTANT:
        return ConstantToken(name)
    if kind is TokenKind.VARIABLE:
        return VariableToken(name)
    raise UnknownIdentifierError(name)


def tokenize(
    expression: str, registry: Registry, max_length: int | None = None
) -> tuple[Token, ...]:
    """Scan ``expression`` left to right into tokens.

    Identifiers are classified against ``registry`` (function, then constant,
    then variable). The first invalid input raises; no partial sequence is
    returned.

    Args:
        expression: Expression string (e.g., "2 + sin(x)")
        registry: Name tables used to classify identifiers
        max_length: Input length limit (default: MAX_INPUT_LENGTH)

    Returns:
        Tuple of tokens ending with exactly one EndToken

    Raises:
        InputTooLongError, NumericParseError, UnknownIdentifierError,
        UnexpectedCharacterError
    """
    limit = MAX_INPUT_LENGTH if max_length is None else max_length
    if len(expression) > limit:
        raise InputTooLongError(len(expression), limit)

    tokens: list[Token] = []
    i = 0
    while i < len(expression):
        char = expression[i]
        if NUMBER_CHAR_RE.match(char):
            end = _scan_run(expression, i, NUMBER_CHAR_RE)
            text = expression[i:end]
            try:
                tokens.append(NumberToken(float(text)))
            except ValueError:
                raise NumericParseError(text, i) from None
            i = end
        elif IDENT_START_RE.match(char):
            end = _scan_run(expression, i, IDENT_CHAR_RE)
            tokens.append(_resolve_identifier(expression[i:end], registry))
            i = end
        elif char in OPERATOR_CHARS:
            tokens.append(OperatorToken(char))
            i += 1
        elif char == SEPARATOR_CHAR:
            tokens.append(SeparatorToken())
            i += 1
        elif char.isspace():
            i += 1
        else:
            raise UnexpectedCharacterError(char, i)

    tokens.append(EndToken())
    logger.debug("Tokenized into %d tokens", len(tokens), extra={"expression": expression})
    return tuple(tokens)

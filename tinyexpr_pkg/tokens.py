"""Token model: one frozen dataclass per lexical kind.

A token carries exactly the payload of its kind, so a number token with an
operator symbol cannot be built. ``Token`` is the union of all kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    SEPARATOR = "separator"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class NumberToken:
    value: float
    kind: ClassVar[TokenKind] = TokenKind.NUMBER

    def __str__(self) -> str:
        return f"Token(number, value: {self.value})"


@dataclass(frozen=True)
class VariableToken:
    name: str
    kind: ClassVar[TokenKind] = TokenKind.VARIABLE

    def __str__(self) -> str:
        return f"Token(variable, name: {self.name})"


@dataclass(frozen=True)
class OperatorToken:
    symbol: str
    kind: ClassVar[TokenKind] = TokenKind.OPERATOR

    def __str__(self) -> str:
        return f"Token(operator, operator: {self.symbol})"


@dataclass(frozen=True)
class FunctionToken:
    name: str
    kind: ClassVar[TokenKind] = TokenKind.FUNCTION

    def __str__(self) -> str:
        return f"Token(function, name: {self.name})"


@dataclass(frozen=True)
class ConstantToken:
    name: str
    kind: ClassVar[TokenKind] = TokenKind.CONSTANT

    def __str__(self) -> str:
        return f"Token(constant, name: {self.name})"


@dataclass(frozen=True)
class SeparatorToken:
    kind: ClassVar[TokenKind] = TokenKind.SEPARATOR

    def __str__(self) -> str:
        return "Token(separator)"


@dataclass(frozen=True)
class EndToken:
    kind: ClassVar[TokenKind] = TokenKind.END

    def __str__(self) -> str:
        return "Token(end)"


@dataclass(frozen=True)
class ErrorToken:
    kind: ClassVar[TokenKind] = TokenKind.ERROR

    def __str__(self) -> str:
        return "Token(error)"


Token = Union[
    NumberToken,
    VariableToken,
    OperatorToken,
    FunctionToken,
    ConstantToken,
    SeparatorToken,
    EndToken,
    ErrorToken,
]


def is_operator(token: Token, symbol: str) -> bool:
    """Return True if ``token`` is the operator ``symbol``."""
    return isinstance(token, OperatorToken) and token.symbol == symbol

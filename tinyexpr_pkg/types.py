"""Error classes and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an expression through the non-raising API."""

    ok: bool
    result: float | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        return f"EvalResult(ok=True, result={self.result!r})"


class ExpressionFormatError(Exception):
    """Base class for every failure raised while lexing or evaluating."""

    default_code = "EXPRESSION_FORMAT_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnexpectedCharacterError(ExpressionFormatError):
    """Raised when the lexer meets a character outside the supported alphabet."""

    default_code = "UNEXPECTED_CHARACTER"

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character: {char!r} at position {position}")


class NumericParseError(ExpressionFormatError):
    """Raised for a malformed run of digits and decimal points."""

    default_code = "NUMERIC_PARSE"

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"Invalid number: {text!r} at position {position}")


class UnknownIdentifierError(ExpressionFormatError):
    """Raised when an identifier is neither a function, a constant nor a variable."""

    default_code = "UNKNOWN_IDENTIFIER"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown variable, function, or constant: {name}")


class UndefinedVariableError(ExpressionFormatError):
    default_code = "UNDEFINED_VARIABLE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' is not defined.")


class MismatchedParenthesesError(ExpressionFormatError):
    default_code = "MISMATCHED_PARENTHESES"


class UnexpectedTokenError(ExpressionFormatError):
    """Raised when a primary is expected but another token is found."""

    default_code = "UNEXPECTED_TOKEN"


class UnexpectedTokenAtEndError(ExpressionFormatError):
    default_code = "UNEXPECTED_TOKEN_AT_END"


class ArgumentCountError(ExpressionFormatError):
    """Raised when a built-in function is called with fewer arguments than its arity."""

    default_code = "ARGUMENT_COUNT"

    def __init__(self, name: str, arity: int, supplied: int):
        self.name = name
        self.arity = arity
        self.supplied = supplied
        super().__init__(
            f"Function '{name}' expects {arity} argument(s), got {supplied}"
        )


class DomainError(ExpressionFormatError):
    """Raised from inside a math function body for arguments outside its domain."""

    default_code = "DOMAIN_ERROR"


class InputTooLongError(ExpressionFormatError):
    default_code = "TOO_LONG"

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Input too long ({length} > {limit} characters)")

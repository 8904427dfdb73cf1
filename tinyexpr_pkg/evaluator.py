"""Single-pass recursive-descent evaluation.

Parsing and evaluation are fused: each grammar level consumes tokens from a
cursor and returns a float, so no syntax tree is built. Levels, tightest
binding first:

    primary    := "-" primary | NUMBER | VARIABLE | CONSTANT
                | FUNCTION "(" expression ("," expression)* ")"
                | "(" expression ")"
    power      := primary (("^" primary) | "!")*          (left mode)
                | primary "!"* ["^" power]                (right mode)
    factor     := power (("*" | "/" | "%") power)*
    expression := factor (("+" | "-") factor)*
"""

from __future__ import annotations

from collections.abc import Mapping

from . import helpers
from .config import POW_FROM_RIGHT
from .lexer import tokenize
from .logging_config import get_logger
from .registry import Registry
from .tokens import (
    ConstantToken,
    EndToken,
    FunctionToken,
    NumberToken,
    SeparatorToken,
    Token,
    VariableToken,
    is_operator,
)
from .types import (
    MismatchedParenthesesError,
    UndefinedVariableError,
    UnexpectedTokenAtEndError,
    UnexpectedTokenError,
)

logger = get_logger("evaluator")


class ExpressionEvaluator:
    """Evaluate one arithmetic expression against a registry.

    Example:
        >>> evaluator = ExpressionEvaluator("x + y * z")
        >>> evaluator.add_variables({"x": 3, "y": 2, "z": 5})
        >>> evaluator.evaluate()
        13.0

    The instance is not safe for concurrent use. Give each thread its own
    evaluator (or a ``registry.copy()``) or serialise access externally.
    """

    def __init__(
        self,
        expression: str,
        pow_from_right: bool | None = None,
        registry: Registry | None = None,
    ):
        self.expression = expression
        self.pow_from_right = POW_FROM_RIGHT if pow_from_right is None else pow_from_right
        self.registry = registry if registry is not None else Registry()
        self.tokens: tuple[Token, ...] = ()
        self._index = 0

    def add_variables(self, variables: Mapping[str, float]) -> None:
        self.registry.add_variables(variables)

    def update_variables(self, variables: Mapping[str, float]) -> None:
        self.registry.update_variables(variables)

    @property
    def current_token(self) -> Token:
        return self.tokens[self._index]

    def _next_token(self) -> None:
        self._index += 1

    def evaluate(self) -> float:
        """Tokenize the expression afresh and reduce it to a float.

        Raises:
            ExpressionFormatError: on any lexical, grammatical or domain failure
        """
        self.tokens = tokenize(self.expression, self.registry)
        self._index = 0
        result = self._optimize(self._parse_expression())
        if not isinstance(self.current_token, EndToken):
            raise UnexpectedTokenAtEndError(
                f"Unexpected token at the end of the expression: {self.current_token}"
            )
        logger.debug("Evaluated to %r", result, extra={"expression": self.expression})
        return result

    def _optimize(self, value: float) -> float:
        # Pass-through; constant folding is not performed.
        return value

    def _parse_expression(self) -> float:
        result = self._parse_factor()
        while is_operator(self.current_token, "+") or is_operator(self.current_token, "-"):
            op = self.current_token.symbol
            self._next_token()
            right = self._parse_factor()
            result = result + right if op == "+" else result - right
        return result

    def _parse_factor(self) -> float:
        result = self._parse_power()
        while (
            is_operator(self.current_token, "*")
            or is_operator(self.current_token, "/")
            or is_operator(self.current_token, "%")
        ):
            op = self.current_token.symbol
            self._next_token()
            right = self._parse_power()
            if op == "*":
                result *= right
            elif op == "/":
                result = helpers.divide(result, right)
            else:
                result = helpers.modulo(result, right)
        return result

    def _parse_power(self) -> float:
        if self.pow_from_right:
            return self._parse_power_right()
        result = self._parse_primary()
        while is_operator(self.current_token, "^") or is_operator(self.current_token, "!"):
            op = self.current_token.symbol
            self._next_token()
            if op == "^":
                result = helpers.power(result, self._parse_primary())
            else:
                result = helpers.factorial(result)
        return result

    def _parse_power_right(self) -> float:
        result = self._parse_primary()
        while is_operator(self.current_token, "!"):
            self._next_token()
            result = helpers.factorial(result)
        if is_operator(self.current_token, "^"):
            self._next_token()
            result = helpers.power(result, self._parse_power_right())
        return result

    def _expect_closing_paren(self) -> None:
        if not is_operator(self.current_token, ")"):
            raise MismatchedParenthesesError("Mismatched parentheses.")
        self._next_token()

    def _parse_primary(self) -> float:
        token = self.current_token
        if is_operator(token, "-"):
            self._next_token()
            return -self._parse_primary()
        if isinstance(token, NumberToken):
            self._next_token()
            return token.value
        if isinstance(token, VariableToken):
            if not self.registry.has_variable(token.name):
                raise UndefinedVariableError(token.name)
            self._next_token()
            return self.registry.variable(token.name)
        if isinstance(token, ConstantToken):
            self._next_token()
            return self.registry.constant(token.name)
        if isinstance(token, FunctionToken):
            return self._parse_call(token.name)
        if is_operator(token, "("):
            self._next_token()
            value = self._parse_expression()
            self._expect_closing_paren()
            return value
        raise UnexpectedTokenError(f"Unexpected token: {token}")

    def _parse_call(self, name: str) -> float:
        self._next_token()
        if not is_operator(self.current_token, "("):
            raise MismatchedParenthesesError(
                f"Expected '(' after function name: {name}"
            )
        self._next_token()
        args = [self._parse_expression()]
        while isinstance(self.current_token, SeparatorToken):
            self._next_token()
            args.append(self._parse_expression())
        self._expect_closing_paren()
        return self.registry.function(name).call(args)

"""Name tables consulted while lexing and evaluating.

The registry holds three tables:

- built-in functions, each a ``UnaryFunction`` or ``BinaryFunction``
- built-in constants (``pi`` and ``e``)
- caller-supplied variables, merged in with ``add_variables`` or
  ``update_variables`` (both insert-or-overwrite, last write wins)

Identifiers resolve in the order function, constant, variable.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from . import helpers
from .tokens import TokenKind
from .types import ArgumentCountError, DomainError


@dataclass(frozen=True)
class UnaryFunction:
    name: str
    func: Callable[[float], float]
    arity = 1

    def call(self, args: Sequence[float]) -> float:
        """Apply to the first argument; extra arguments are ignored."""
        if len(args) < 1:
            raise ArgumentCountError(self.name, self.arity, len(args))
        return self.func(args[0])


@dataclass(frozen=True)
class BinaryFunction:
    name: str
    func: Callable[[float, float], float]
    arity = 2

    def call(self, args: Sequence[float]) -> float:
        """Apply to the first two arguments; extra arguments are ignored."""
        if len(args) < 2:
            raise ArgumentCountError(self.name, self.arity, len(args))
        return self.func(args[0], args[1])


BuiltinFunction = UnaryFunction | BinaryFunction


def _cosec(x: float) -> float:
    if x == 0:
        raise DomainError("cosec is undefined for x = 0")
    return helpers.divide(1.0, math.sin(x))


def _sec(x: float) -> float:
    if x == math.pi / 2 or x == -math.pi / 2:
        raise DomainError("sec is undefined for x = ±pi/2")
    return helpers.divide(1.0, math.cos(x))


def _cot(x: float) -> float:
    if x == 0:
        raise DomainError("cot is undefined for x = 0")
    return helpers.divide(1.0, math.tan(x))


def _log10(x: float) -> float:
    if x <= 0:
        raise DomainError("log is undefined for x <= 0")
    return math.log10(x)


def _ln(x: float) -> float:
    if x <= 0:
        raise DomainError("ln is undefined for x <= 0")
    return math.log(x)


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("sqrt is undefined for x < 0")
    return math.sqrt(x)


def _ceil(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.ceil(x))


def _floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


_sin = helpers.nan_on_domain(math.sin)
_cos = helpers.nan_on_domain(math.cos)
_tan = helpers.nan_on_domain(math.tan)


def _builtin_functions() -> dict[str, BuiltinFunction]:
    unary = {
        "sin": _sin,
        "cos": _cos,
        "tan": _tan,
        "cosec": _cosec,
        "sec": _sec,
        "cot": _cot,
        "log": _log10,
        "ln": _ln,
        "sqrt": _sqrt,
        "abs": abs,
        "exp": helpers.exp,
        "fac": helpers.factorial,
        "ceil": _ceil,
        "floor": _floor,
        "sinh": helpers.sinh,
        "cosh": helpers.cosh,
        "tanh": helpers.tanh,
    }
    binary = {
        "atan2": math.atan2,
        "ncr": helpers.combinations,
        "npr": helpers.permutations,
    }
    functions: dict[str, BuiltinFunction] = {
        name: UnaryFunction(name, func) for name, func in unary.items()
    }
    functions.update(
        (name, BinaryFunction(name, func)) for name, func in binary.items()
    )
    return functions


BUILTIN_CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


class Registry:
    """Function, constant and variable tables for one evaluator."""

    def __init__(self) -> None:
        self.functions: dict[str, BuiltinFunction] = _builtin_functions()
        self.constants: dict[str, float] = dict(BUILTIN_CONSTANTS)
        self.variables: dict[str, float] = {}

    def add_variables(self, variables: Mapping[str, float]) -> None:
        """Merge ``variables`` into the variable table, overwriting existing names."""
        self.variables.update((name, float(value)) for name, value in variables.items())

    def update_variables(self, variables: Mapping[str, float]) -> None:
        """Same merge-overwrite as :meth:`add_variables`."""
        self.add_variables(variables)

    def classify(self, name: str) -> TokenKind | None:
        """Return the token kind ``name`` resolves to, or None if unknown."""
        if name in self.functions:
            return TokenKind.FUNCTION
        if name in self.constants:
            return TokenKind.CONSTANT
        if name in self.variables:
            return TokenKind.VARIABLE
        return None

    def function(self, name: str) -> BuiltinFunction:
        return self.functions[name]

    def constant(self, name: str) -> float:
        return self.constants[name]

    def has_variable(self, name: str) -> bool:
        return name in self.variables

    def variable(self, name: str) -> float:
        return self.variables[name]

    def copy(self) -> Registry:
        """Return an independent registry with the same variable bindings."""
        clone = Registry()
        clone.variables = dict(self.variables)
        return clone

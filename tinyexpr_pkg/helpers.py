"""Pure math helpers used by the function registry and the evaluator.

Python's float operators raise on division by zero, overflow and some domain
violations where a native double would produce infinity or NaN. The
``divide``, ``modulo`` and ``power`` helpers restore the IEEE-754 results so
that representable edge cases propagate as values instead of exceptions.
"""

from __future__ import annotations

import math

# Largest n for which n! is a finite double
MAX_FACTORIAL_INPUT = 170


def factorial(x: float) -> float:
    """Factorial of ``x`` truncated to an integer count.

    n! = n * (n - 1) * ... * 1, 0! = 1. Returns NaN for negative or NaN input
    and infinity once the product no longer fits in a double.
    """
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0 or x == 1:
        return 1.0
    if x >= MAX_FACTORIAL_INPUT + 1:
        return math.inf
    result = 1.0
    for i in range(2, int(x) + 1):
        result *= i
    return result


def combinations(n: float, r: float) -> float:
    """Number of combinations C(n, r) = n! / (r! * (n - r)!).

    Returns NaN if n < r or if either argument is negative.
    """
    if n < r or n < 0 or r < 0:
        return math.nan
    return divide(factorial(n), factorial(r) * factorial(n - r))


def permutations(n: float, r: float) -> float:
    """Number of permutations P(n, r) = n! / (n - r)!.

    Returns NaN if n < r or if either argument is negative.
    """
    if n < r or n < 0 or r < 0:
        return math.nan
    return divide(factorial(n), factorial(n - r))


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def sinh(x: float) -> float:
    """Hyperbolic sine, (e^x - e^(-x)) / 2."""
    return (exp(x) - exp(-x)) / 2


def cosh(x: float) -> float:
    """Hyperbolic cosine, (e^x + e^(-x)) / 2."""
    return (exp(x) + exp(-x)) / 2


def tanh(x: float) -> float:
    """Hyperbolic tangent, sinh(x) / cosh(x).

    Saturates to +/-1 where both exponentials overflow.
    """
    if abs(x) > 20:
        return math.copysign(1.0, x)
    return sinh(x) / cosh(x)


def divide(a: float, b: float) -> float:
    """Floating-point division yielding +/-inf or NaN on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(a: float, b: float) -> float:
    """Euclidean float modulo, always in [0, |b|).

    A zero divisor or a non-finite dividend yields NaN.
    """
    if b == 0 or not math.isfinite(a):
        return math.nan
    remainder = math.fmod(a, b)
    if remainder < 0:
        return remainder + abs(b)
    return remainder


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and x % 2 == 1


def power(base: float, exponent: float) -> float:
    """Real-valued exponentiation.

    Negative bases with fractional exponents yield NaN, ``0 ^ negative``
    yields infinity and overflow yields a signed infinity.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def nan_on_domain(func):
    """Wrap a ``math`` function so domain violations give NaN instead of raising."""

    def wrapper(x: float) -> float:
        try:
            return func(x)
        except ValueError:
            return math.nan

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper

"""Public API for tinyexpr."""

from __future__ import annotations

from collections.abc import Mapping

from .evaluator import ExpressionEvaluator
from .logging_config import get_logger
from .types import EvalResult, ExpressionFormatError

logger = get_logger("api")


def evaluate(
    expression: str,
    variables: Mapping[str, float] | None = None,
    pow_from_right: bool | None = None,
) -> float:
    """Evaluate an expression string in one call.

    Args:
        expression: Expression string (e.g., "2+2", "sin(pi/2)")
        variables: Optional variable bindings (e.g., {"x": 2})
        pow_from_right: Treat ``^`` as right-associative (default: config)

    Returns:
        The result as a float

    Raises:
        ExpressionFormatError: forwarded unchanged from the evaluator

    Example:
        >>> from tinyexpr_pkg.api import evaluate
        >>> evaluate("x + y", {"x": 2, "y": 3})
        5.0
    """
    evaluator = ExpressionEvaluator(expression, pow_from_right=pow_from_right)
    if variables is not None:
        evaluator.add_variables(variables)
    return evaluator.evaluate()


def evaluate_safely(
    expression: str,
    variables: Mapping[str, float] | None = None,
    pow_from_right: bool | None = None,
) -> EvalResult:
    """Evaluate an expression, returning a structured result instead of raising.

    Args:
        expression: Expression string
        variables: Optional variable bindings
        pow_from_right: Treat ``^`` as right-associative (default: config)

    Returns:
        EvalResult with ``result`` on success or ``error``/``error_code`` on failure
    """
    try:
        value = evaluate(expression, variables, pow_from_right=pow_from_right)
    except ExpressionFormatError as e:
        logger.debug(
            f"Evaluation failed: {e.code} - {e.message}", extra={"expression": expression}
        )
        return EvalResult(ok=False, error=e.message, error_code=e.code)
    except RecursionError:
        logger.warning(
            "Expression nesting exceeds the interpreter recursion limit",
            extra={"expression": expression},
        )
        return EvalResult(
            ok=False, error="Expression is nested too deeply", error_code="TOO_DEEP"
        )
    return EvalResult(ok=True, result=value)

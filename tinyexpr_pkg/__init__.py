"""tinyexpr package: lexer, evaluator, registry, API and CLI for arithmetic expressions."""

from .api import evaluate, evaluate_safely
from .evaluator import ExpressionEvaluator
from .registry import Registry
from .types import ExpressionFormatError

__all__ = [
    "config",
    "tokens",
    "helpers",
    "registry",
    "lexer",
    "evaluator",
    "api",
    "cli",
    "types",
    "logging_config",
    "ExpressionEvaluator",
    "ExpressionFormatError",
    "Registry",
    "evaluate",
    "evaluate_safely",
]

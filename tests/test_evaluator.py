"""Unit tests for the recursive-descent evaluator."""

import math
import unittest

from tinyexpr_pkg.evaluator import ExpressionEvaluator
from tinyexpr_pkg.registry import Registry
from tinyexpr_pkg.tokens import EndToken, VariableToken
from tinyexpr_pkg.types import (
    ArgumentCountError,
    DomainError,
    ExpressionFormatError,
    MismatchedParenthesesError,
    UndefinedVariableError,
    UnexpectedTokenAtEndError,
    UnexpectedTokenError,
    UnknownIdentifierError,
)


def ev(expression, pow_from_right=False, **variables):
    evaluator = ExpressionEvaluator(expression, pow_from_right=pow_from_right)
    evaluator.add_variables(variables)
    return evaluator.evaluate()


class TestArithmetic(unittest.TestCase):
    """Basic operators and precedence."""

    def test_basic_operators(self):
        self.assertEqual(ev("2 + 3"), 5.0)
        self.assertEqual(ev("10 - 4"), 6.0)
        self.assertEqual(ev("6 * 7"), 42.0)
        self.assertEqual(ev("20 / 5"), 4.0)
        self.assertEqual(ev("8 % 3"), 2.0)

    def test_precedence(self):
        self.assertEqual(ev("2 + 3 * 4"), 14.0)
        self.assertEqual(ev("(2 + 3) * 4"), 20.0)
        self.assertEqual(ev("(2 + 3)^2"), 25.0)
        self.assertEqual(ev("2 * 3^2"), 18.0)
        self.assertEqual(ev("1 + 2 * 3 - 4 / 2"), 5.0)

    def test_left_associativity(self):
        self.assertEqual(ev("10 - 4 - 3"), 3.0)
        self.assertEqual(ev("100 / 10 / 5"), 2.0)
        self.assertEqual(ev("17 % 7 % 2"), 1.0)

    def test_nested_parentheses(self):
        self.assertEqual(ev("((1 + 2) * (3 + 4))"), 21.0)

    def test_result_is_float(self):
        self.assertIsInstance(ev("2 + 2"), float)


class TestUnary(unittest.TestCase):
    def test_negation(self):
        self.assertEqual(ev("-5"), -5.0)
        self.assertEqual(ev("-(2+3)"), -5.0)
        self.assertEqual(ev("--4"), 4.0)
        self.assertEqual(ev("3 - -2"), 5.0)
        self.assertEqual(ev("2 * -3"), -6.0)

    def test_negation_binds_tighter_than_power(self):
        self.assertEqual(ev("-2^2"), 4.0)
        self.assertEqual(ev("2^-1"), 0.5)


class TestPowerAndFactorial(unittest.TestCase):
    def test_power(self):
        self.assertEqual(ev("2^3"), 8.0)
        self.assertEqual(ev("5^0"), 1.0)

    def test_power_is_left_associative_by_default(self):
        self.assertEqual(ev("2^3^2"), 64.0)

    def test_power_right_associative_when_requested(self):
        self.assertEqual(ev("2^3^2", pow_from_right=True), 512.0)
        self.assertEqual(ev("(2^3)^2", pow_from_right=True), 64.0)

    def test_factorial_operator_matches_function(self):
        self.assertEqual(ev("5!"), 120.0)
        self.assertEqual(ev("fac(5)"), 120.0)
        self.assertEqual(ev("0!"), 1.0)
        self.assertEqual(ev("fac(0)"), 1.0)

    def test_factorial_shares_power_loop(self):
        self.assertEqual(ev("3!!"), 720.0)
        # left mode applies ! to the running result 2^3
        self.assertEqual(ev("2^3!"), 40320.0)
        # right mode binds ! to the exponent
        self.assertEqual(ev("2^3!", pow_from_right=True), 64.0)

    def test_factorial_of_negative_is_nan(self):
        self.assertTrue(math.isnan(ev("(-3)!")))

    def test_factorial_truncates_before_overflow_check(self):
        self.assertEqual(ev("fac(170.5)"), ev("fac(170)"))
        self.assertEqual(ev("170.5!"), ev("170!"))
        self.assertEqual(ev("fac(171)"), math.inf)

    def test_real_valued_power_edge_cases(self):
        self.assertTrue(math.isnan(ev("(-8)^(1/3)")))
        self.assertEqual(ev("0^-1"), math.inf)
        self.assertEqual(ev("10^400"), math.inf)


class TestFloatingPointEdgeCases(unittest.TestCase):
    """Representable IEEE-754 results are values, not failures."""

    def test_division_by_zero(self):
        self.assertEqual(ev("1/0"), math.inf)
        self.assertEqual(ev("-1/0"), -math.inf)
        self.assertTrue(math.isnan(ev("0/0")))

    def test_modulo_by_zero(self):
        self.assertTrue(math.isnan(ev("5 % 0")))

    def test_modulo_is_euclidean(self):
        self.assertEqual(ev("-7 % 3"), 2.0)
        self.assertEqual(ev("7 % -3"), 1.0)
        self.assertEqual(ev("-7 % -3"), 2.0)
        self.assertEqual(ev("7.5 % 2"), 1.5)


class TestFunctionsAndConstants(unittest.TestCase):
    def test_constants(self):
        self.assertAlmostEqual(ev("pi"), math.pi)
        self.assertAlmostEqual(ev("e"), math.e)

    def test_trigonometry(self):
        self.assertAlmostEqual(ev("sin(pi / 2)"), 1.0, places=6)
        self.assertAlmostEqual(ev("cos(pi)"), -1.0, places=6)
        self.assertAlmostEqual(ev("tan(pi / 4)"), 1.0, places=6)
        self.assertAlmostEqual(ev("atan2(1, 1)"), math.pi / 4, places=6)
        self.assertAlmostEqual(ev("cosec(pi / 2)"), 1.0, places=6)
        self.assertAlmostEqual(ev("sec(0)"), 1.0, places=6)
        self.assertAlmostEqual(ev("cot(pi / 4)"), 1.0, places=6)

    def test_hyperbolic(self):
        self.assertAlmostEqual(ev("sinh(1)"), math.sinh(1.0), places=6)
        self.assertAlmostEqual(ev("cosh(1)"), math.cosh(1.0), places=6)
        self.assertAlmostEqual(ev("tanh(1)"), math.tanh(1.0), places=6)

    def test_logarithms(self):
        self.assertEqual(ev("log(100)"), 2.0)
        self.assertEqual(ev("log(1000)"), 3.0)
        self.assertAlmostEqual(ev("ln(e)"), 1.0, places=6)

    def test_misc_functions(self):
        self.assertEqual(ev("sqrt(16)"), 4.0)
        self.assertEqual(ev("abs(-5)"), 5.0)
        self.assertEqual(ev("exp(0)"), 1.0)
        self.assertEqual(ev("ceil(1.2)"), 2.0)
        self.assertEqual(ev("floor(-1.2)"), -2.0)

    def test_combinatorics(self):
        self.assertEqual(ev("ncr(5, 2)"), 10.0)
        self.assertEqual(ev("npr(5, 2)"), 20.0)

    def test_nested_calls(self):
        self.assertAlmostEqual(ev("sqrt(abs(-16)) + log(10^3)"), 7.0)

    def test_extra_arguments_are_dropped(self):
        self.assertEqual(ev("abs(-2, 99)"), 2.0)
        self.assertAlmostEqual(ev("atan2(1, 1, 5)"), math.pi / 4, places=6)

    def test_too_few_arguments(self):
        with self.assertRaises(ArgumentCountError) as ctx:
            ev("atan2(1)")
        self.assertEqual(ctx.exception.arity, 2)
        self.assertEqual(ctx.exception.supplied, 1)


class TestDomainErrors(unittest.TestCase):
    def test_logarithm_domain(self):
        for expr in ("log(-1)", "log(0)", "ln(0)", "ln(-2)"):
            with self.assertRaises(DomainError, msg=expr):
                ev(expr)

    def test_sqrt_domain(self):
        with self.assertRaises(DomainError):
            ev("sqrt(-4)")

    def test_reciprocal_singularities_are_exact(self):
        for expr in ("cosec(0)", "cot(0)", "sec(pi/2)", "sec(-pi/2)"):
            with self.assertRaises(DomainError, msg=expr):
                ev(expr)

    def test_near_singularity_is_not_an_error(self):
        # tan(pi) is a tiny nonzero double, so only x == 0 fails
        self.assertTrue(abs(ev("cot(pi)")) > 1e10)
        self.assertTrue(math.isfinite(ev("sec(1.5707963)")))

    def test_domain_error_is_expression_format_error(self):
        with self.assertRaises(ExpressionFormatError) as ctx:
            ev("log(-1)")
        self.assertEqual(ctx.exception.code, "DOMAIN_ERROR")


class TestParseFailures(unittest.TestCase):
    def test_unknown_identifier(self):
        with self.assertRaises(UnknownIdentifierError):
            ev("unknown")

    def test_missing_right_operand(self):
        with self.assertRaises(UnexpectedTokenError):
            ev("5 +")

    def test_empty_expression(self):
        with self.assertRaises(UnexpectedTokenError):
            ev("")

    def test_missing_closing_parenthesis(self):
        with self.assertRaises(MismatchedParenthesesError):
            ev("(2 + 3")
        with self.assertRaises(MismatchedParenthesesError):
            ev("sin(1")

    def test_function_without_parenthesis(self):
        with self.assertRaises(MismatchedParenthesesError):
            ev("sin 2")

    def test_function_with_no_arguments(self):
        with self.assertRaises(UnexpectedTokenError):
            ev("atan2()")

    def test_trailing_tokens(self):
        with self.assertRaises(UnexpectedTokenAtEndError):
            ev("2 3")
        with self.assertRaises(UnexpectedTokenAtEndError):
            ev("(1 + 2))")

    def test_separator_outside_call(self):
        with self.assertRaises(UnexpectedTokenAtEndError):
            ev("1, 2")

    def test_undefined_variable(self):
        evaluator = ExpressionEvaluator("0")
        evaluator.tokens = (VariableToken("ghost"), EndToken())
        with self.assertRaises(UndefinedVariableError) as ctx:
            evaluator._parse_expression()
        self.assertEqual(ctx.exception.name, "ghost")


class TestVariablesAndState(unittest.TestCase):
    def test_add_then_update_variables(self):
        evaluator = ExpressionEvaluator("x + y * z")
        evaluator.add_variables({"x": 3, "y": 2, "z": 5})
        self.assertEqual(evaluator.evaluate(), 13.0)
        evaluator.update_variables({"x": 10})
        self.assertEqual(evaluator.evaluate(), 20.0)

    def test_add_and_update_are_identical(self):
        evaluator = ExpressionEvaluator("fresh * 2")
        evaluator.update_variables({"fresh": 4})
        self.assertEqual(evaluator.evaluate(), 8.0)
        evaluator.add_variables({"fresh": 5})
        self.assertEqual(evaluator.evaluate(), 10.0)

    def test_idempotent_registration(self):
        evaluator = ExpressionEvaluator("a - b")
        evaluator.add_variables({"a": 1, "b": 2})
        snapshot = dict(evaluator.registry.variables)
        evaluator.add_variables({"a": 1, "b": 2})
        evaluator.update_variables({"a": 1, "b": 2})
        self.assertEqual(evaluator.registry.variables, snapshot)

    def test_deterministic_repeated_evaluation(self):
        evaluator = ExpressionEvaluator("sin(x) * e^x / 3")
        evaluator.add_variables({"x": 0.7})
        first = evaluator.evaluate()
        for _ in range(5):
            self.assertEqual(evaluator.evaluate(), first)

    def test_tokens_are_rebuilt_per_call(self):
        evaluator = ExpressionEvaluator("1 + 1")
        evaluator.evaluate()
        first_tokens = evaluator.tokens
        evaluator.evaluate()
        self.assertEqual(len(evaluator.tokens), 4)
        self.assertEqual(evaluator.tokens, first_tokens)

    def test_variable_unknown_until_added(self):
        evaluator = ExpressionEvaluator("late + 1")
        with self.assertRaises(UnknownIdentifierError):
            evaluator.evaluate()
        evaluator.add_variables({"late": 1})
        self.assertEqual(evaluator.evaluate(), 2.0)

    def test_variables_cannot_shadow_builtins(self):
        evaluator = ExpressionEvaluator("pi + sin(0)")
        evaluator.add_variables({"pi": 3.0, "sin": 1.0})
        self.assertAlmostEqual(evaluator.evaluate(), math.pi)

    def test_shared_registry(self):
        registry = Registry()
        registry.add_variables({"k": 2})
        first = ExpressionEvaluator("k * 3", registry=registry)
        second = ExpressionEvaluator("k + 3", registry=registry)
        registry.update_variables({"k": 4})
        self.assertEqual(first.evaluate(), 12.0)
        self.assertEqual(second.evaluate(), 7.0)


if __name__ == "__main__":
    unittest.main()

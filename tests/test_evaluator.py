import sys
import os

sys.path.append(os.path.dirname(os.path.realpath(__file__)) + "/..")

import unittest
from Tokenizer import Token
from Evaluator import Evaluator, evalPostfix
from Errors import ErrorKind, EvalError
import Operators


N = Token.number
OP = Token.operator
F = Token.function


class TestEvaluator(unittest.TestCase):
    def check_error(self, kind: ErrorKind, postfix):
        with self.assertRaises(EvalError) as ctx:
            evalPostfix(postfix)
        self.assertEqual(ctx.exception.kind, kind)

    def test_number(self):
        self.assertEqual(evalPostfix([N(42)]), 42)

    def test_operand_order(self):
        # a is pushed first: 10 2 - is 10 - 2
        self.assertEqual(evalPostfix([N(10), N(2), OP("-")]), 8)
        self.assertEqual(evalPostfix([N(10), N(2), OP("/")]), 5)
        self.assertEqual(evalPostfix([N(2), N(10), OP("^")]), 1024)
        self.assertEqual(evalPostfix([N(10), N(3), OP("%")]), 1)

    def test_expressions(self):
        # 3 + 4 * 2
        self.assertEqual(evalPostfix([N(3), N(4), N(2), OP("*"), OP("+")]), 11)
        # 2 ^ (3 ^ 2)
        self.assertEqual(
            evalPostfix([N(2), N(3), N(2), OP("^"), OP("^")]), 512)
        # sqrt(16) + 2
        self.assertEqual(evalPostfix([N(16), F("sqrt"), N(2), OP("+")]), 6)
        # -(fact(3))
        self.assertEqual(evalPostfix([N(3), F("fact"), F(Operators.NEG)]), -6)

    def test_stack_underflow(self):
        self.check_error(ErrorKind.STACK_UNDERFLOW, [OP("+")])
        self.check_error(ErrorKind.STACK_UNDERFLOW, [N(3), OP("+")])
        self.check_error(ErrorKind.STACK_UNDERFLOW, [F("sqrt")])
        self.check_error(ErrorKind.STACK_UNDERFLOW,
                         [N(1), N(2), OP("+"), OP("*")])

    def test_malformed(self):
        self.check_error(ErrorKind.MALFORMED_EXPRESSION, [])
        self.check_error(ErrorKind.MALFORMED_EXPRESSION, [N(3), N(4)])
        self.check_error(ErrorKind.MALFORMED_EXPRESSION,
                         [N(1), N(2), N(3), OP("+")])

    def test_operator_errors(self):
        self.check_error(ErrorKind.DIVISION_BY_ZERO, [N(10), N(0), OP("/")])
        self.check_error(ErrorKind.DOMAIN_ERROR, [N(-4), F("sqrt")])
        self.check_error(ErrorKind.UNKNOWN_FUNCTION, [N(2), F("foo")])

    def test_first_error_wins(self):
        # Division fails before the unknown function is reached
        self.check_error(ErrorKind.DIVISION_BY_ZERO,
                         [N(1), N(0), OP("/"), F("foo")])

    def test_stack_consumed(self):
        evaluator = Evaluator([N(1), N(2), OP("+")])
        self.assertEqual(evaluator.evaluate(), 3)
        self.assertEqual(evaluator.stack, [3])


if __name__ == "__main__":
    unittest.main()

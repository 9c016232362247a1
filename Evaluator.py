from typing import List
from Tokenizer import Token
from Errors import ErrorKind, EvalError
import Operators


class Evaluator:
    tokens: List[Token]
    stack: List[float]

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.stack = []

    def _pop_operands(self, token: Token, n: int) -> List[float]:
        # Operands in push order
        if len(self.stack) < n:
            raise EvalError(ErrorKind.STACK_UNDERFLOW,
                            f'"{token.sym}" at column {token.col} needs {n} '
                            f"operand(s), found {len(self.stack)}")
        operands = self.stack[-n:]
        del self.stack[-n:]
        return operands

    def evaluate(self) -> float:
        for token in self.tokens:
            if token.is_number():
                self.stack.append(token.value)

            elif token.is_operator():
                a, b = self._pop_operands(token, 2)
                self.stack.append(Operators.apply_operator(token.sym, a, b))

            elif token.is_function():
                a, = self._pop_operands(token, 1)
                self.stack.append(Operators.apply_function(token.sym, a))

            else:
                assert False, f"Unexpected token in postfix sequence {token}"

        if len(self.stack) != 1:
            raise EvalError(ErrorKind.MALFORMED_EXPRESSION,
                            f"{len(self.stack)} values left after evaluation, "
                            "expected 1")
        return self.stack[0]


def evalPostfix(tokens: List[Token]) -> float:
    return Evaluator(tokens).evaluate()

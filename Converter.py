from typing import List
from Tokenizer import Token
from Errors import ErrorKind, ConvertError
import Operators


class Converter:
    """Infix to postfix conversion (shunting-yard).

    Functions bind tighter than every infix operator and are applied to the
    operand right after them. A "+" or "-" in prefix position (start of the
    expression, after an operator, "(" or a function name) is a sign: "+" is
    dropped and "-" becomes the internal negation function.
    """

    tokens: List[Token]
    output: List[Token]
    stack: List[Token]

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.output = []
        self.stack = []

    def error(self, msg: str) -> None:
        raise ConvertError(ErrorKind.MISMATCHED_PAREN, msg)

    def top(self) -> Token:
        return self.stack[-1] if self.stack else None

    def pop(self) -> None:
        self.output.append(self.stack.pop())

    @staticmethod
    def is_prefix_position(prev: Token) -> bool:
        return prev is None or prev.type in \
            [Token.OPERATOR, Token.OPENPAREN, Token.FUNCTION]

    def _should_pop(self, token: Token) -> bool:
        top = self.top()
        if top is None:
            return False
        if top.is_function():
            return True
        if not top.is_operator():
            return False

        top_prec = Operators.precedence(top.sym)
        prec = Operators.precedence(token.sym)
        if top_prec > prec:
            return True
        return top_prec == prec and \
            not Operators.is_right_associative(token.sym)

    def operator(self, token: Token) -> None:
        while self._should_pop(token):
            self.pop()
        self.stack.append(token)

    def closeParen(self, token: Token) -> None:
        while self.stack and self.top().type != Token.OPENPAREN:
            self.pop()
        if not self.stack:
            self.error(f'Unmatched ")" at column {token.col}')
        self.stack.pop()  # Discard "("

        # Apply the function to the group just closed
        top = self.top()
        if top is not None and top.is_function():
            self.pop()

    def convert(self) -> List[Token]:
        prev = None
        for token in self.tokens:
            if token.is_number():
                self.output.append(token)

            elif token.is_function():
                self.stack.append(token)

            elif token.is_operator():
                if token.sym in ["+", "-"] and self.is_prefix_position(prev):
                    if token.sym == "-":
                        self.stack.append(
                            Token.function(Operators.NEG, col=token.col))
                    # Unary "+" is a no-op. Keep prev as it is so that
                    # "+-3" and "- +3" still read as signs.
                    continue
                self.operator(token)

            elif token.type == Token.OPENPAREN:
                self.stack.append(token)

            elif token.type == Token.CLOSEPAREN:
                self.closeParen(token)

            else:
                assert False, f"Unexpected token {token}"

            prev = token

        while self.stack:
            if self.top().type == Token.OPENPAREN:
                self.error(f'Unmatched "(" at column {self.top().col}')
            self.pop()

        return self.output


def toPostfix(tokens: List[Token]) -> List[Token]:
    return Converter(tokens).convert()

#! /bin/env python3

import sys
from typing import List, Optional
from Errors import ErrorKind, TokenizeError


class CharReader:
    # Returned once the whole expression has been consumed
    EOF = None

    def __init__(self, code: str):
        self.code = code
        self.idx = 0

        # For debugging
        self.col = 0

    def __str__(self) -> str:
        return f"<expression>:{self.col}"

    def end(self) -> bool:
        return self.idx >= len(self.code)

    def getNext(self) -> Optional[str]:
        if self.end():
            return self.EOF
        self.col += 1
        sym = self.code[self.idx]
        self.idx += 1
        return sym


class Token:
    NUMBER = 60  # number or Ans
    OPERATOR = 10  # + - * / % ^
    FUNCTION = 61  # identifier
    OPENPAREN = 50  # (
    CLOSEPAREN = 35  # )
    EOF = 255  # end of expression

    TokenName = {
        NUMBER: "NUMBER",
        OPERATOR: "OPERATOR",
        FUNCTION: "FUNCTION",
        OPENPAREN: "OPENPAREN",
        CLOSEPAREN: "CLOSEPAREN",
        EOF: "EOF",
    }

    SYMBOLS = {
        "+": OPERATOR,
        "-": OPERATOR,
        "*": OPERATOR,
        "/": OPERATOR,
        "%": OPERATOR,
        "^": OPERATOR,
        "(": OPENPAREN,
        ")": CLOSEPAREN,
    }

    # Identifier replaced by the previous result
    ANS = "Ans"

    col: int
    sym: str
    type: int
    value: float

    def __init__(self, type: int, sym: str = "", value: float = None,
                 col: int = 0):
        assert type in self.TokenName, f"Unknown token type {type}"
        assert (type == self.NUMBER) == (value is not None), \
            "Only number tokens carry a value"
        self.type = type
        self.sym = sym
        self.value = value
        self.col = col

    @classmethod
    def number(cls, value: float, col: int = 0) -> "Token":
        return cls(cls.NUMBER, sym=f"{value:g}", value=float(value), col=col)

    @classmethod
    def operator(cls, sym: str, col: int = 0) -> "Token":
        assert cls.SYMBOLS.get(sym) == cls.OPERATOR, f"Not an operator {sym}"
        return cls(cls.OPERATOR, sym=sym, col=col)

    @classmethod
    def function(cls, name: str, col: int = 0) -> "Token":
        return cls(cls.FUNCTION, sym=name, col=col)

    @classmethod
    def paren(cls, sym: str, col: int = 0) -> "Token":
        assert sym in ["(", ")"]
        return cls(cls.SYMBOLS[sym], sym=sym, col=col)

    def is_number(self) -> bool:
        return self.type == self.NUMBER

    def is_operator(self) -> bool:
        return self.type == self.OPERATOR

    def is_function(self) -> bool:
        return self.type == self.FUNCTION

    def __str__(self) -> str:
        return f'"{self.sym}" ({self.TokenName[self.type]}) col {self.col}'

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, __o: object) -> bool:
        # Column and the spelling of numbers are debug information only
        if not isinstance(__o, Token):
            return False
        if self.type != __o.type:
            return False
        if self.is_number():
            return self.value == __o.value
        return self.sym == __o.sym

    def __hash__(self) -> int:
        if self.is_number():
            return hash((self.type, self.value))
        return hash((self.type, self.sym))


class Tokenizer:
    def __init__(self, expression: str, lastResult: float = 0.0):
        self.expression = expression
        self.lastResult = float(lastResult)
        self.reader = CharReader(self.expression)

        # States
        self.inputSym = None

        self.next()  # Read the first char
        self.clear_white_space()

    def error(self, error_msg: str) -> None:
        raise TokenizeError(ErrorKind.INVALID_CHARACTER, error_msg)

    def next(self) -> None:
        self.inputSym = self.reader.getNext()

    def end(self) -> bool:
        return self.inputSym == CharReader.EOF

    def peek(self) -> Optional[str]:
        # Char right after inputSym, without consuming it
        if self.reader.end():
            return CharReader.EOF
        return self.reader.code[self.reader.idx]

    def is_white_space(self) -> bool:
        assert self.inputSym != None
        return self.inputSym in [" ", "\t", "\n", "\r", "\v", "\f"]

    def is_digit(self, sym: str = None) -> bool:
        sym = self.inputSym if sym is None else sym
        assert sym != None
        return ord(sym) >= ord("0") and ord(sym) <= ord("9")

    def is_letter(self) -> bool:
        assert self.inputSym != None
        if ord(self.inputSym) >= ord("a") and ord(self.inputSym) <= ord("z"):
            return True
        elif ord(self.inputSym) >= ord("A") and ord(self.inputSym) <= ord("Z"):
            return True
        else:
            return False

    def is_number_start(self) -> bool:
        if self.is_digit():
            return True
        # ".5" is a number, a lone "." is not
        nextSym = self.peek()
        return self.inputSym == "." and nextSym is not None and \
            self.is_digit(nextSym)

    def clear_white_space(self) -> None:
        while not self.end() and self.is_white_space():
            self.next()

    def number(self) -> Token:
        col = self.reader.col
        sym = ""

        # Integer part
        while not self.end() and self.is_digit():
            sym += self.inputSym
            self.next()

        # Optional fractional part, "3." is legal
        if not self.end() and self.inputSym == ".":
            sym += self.inputSym
            self.next()
            while not self.end() and self.is_digit():
                sym += self.inputSym
                self.next()

        # Consume following white spaces. Prepare for parsing the next token.
        self.clear_white_space()

        return Token(Token.NUMBER, sym=sym, value=float(sym), col=col)

    def identifier(self) -> Token:
        col = self.reader.col
        sym = ""

        while not self.end() and self.is_letter():
            sym += self.inputSym
            self.next()

        # Consume following white spaces. Prepare for parsing the next token.
        self.clear_white_space()

        if sym == Token.ANS:
            return Token(Token.NUMBER, sym=sym, value=self.lastResult, col=col)

        # Checked against the function table at evaluation time
        return Token(Token.FUNCTION, sym=sym, col=col)

    def operator(self) -> Token:
        col = self.reader.col
        sym = self.inputSym

        if sym not in Token.SYMBOLS:
            self.error(f'Invalid character "{sym}" at column {col}')
        self.next()

        # Consume following white spaces. Prepare for parsing the next token.
        self.clear_white_space()

        return Token(Token.SYMBOLS[sym], sym=sym, col=col)

    def getNext(self) -> Token:
        if self.end():
            return Token(Token.EOF, col=self.reader.col + 1)
        elif self.is_number_start():
            return self.number()
        elif self.is_letter():
            return self.identifier()
        else:
            return self.operator()

    def tokenize(self) -> List[Token]:
        tokens = []
        token = self.getNext()
        while token.type != Token.EOF:
            tokens.append(token)
            token = self.getNext()
        return tokens


def tokenize(expression: str, lastResult: float = 0.0) -> List[Token]:
    return Tokenizer(expression, lastResult).tokenize()


if __name__ == "__main__":
    for token in tokenize(" ".join(sys.argv[1:])):
        print(token)

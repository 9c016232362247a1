from __future__ import annotations
from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_CHARACTER = auto()
    MISMATCHED_PAREN = auto()
    STACK_UNDERFLOW = auto()
    MALFORMED_EXPRESSION = auto()
    DIVISION_BY_ZERO = auto()
    DOMAIN_ERROR = auto()
    UNKNOWN_FUNCTION = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()

    def __repr__(self) -> str:
        return self.__str__()


class CalcError(Exception):
    kind: ErrorKind
    msg: str

    # Name of the pipeline stage raising this error
    STAGE = "Calculator"

    def __init__(self, kind: ErrorKind, msg: str = "") -> None:
        self.kind = kind
        self.msg = msg if msg else str(kind)
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return f"{self.STAGE} error ({self.kind}): {self.msg}"

    def __eq__(self, __o: object) -> bool:
        # Same stage, same kind, same message
        if not isinstance(__o, CalcError):
            return False
        return type(self) is type(__o) and self.kind == __o.kind and \
            self.msg == __o.msg

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.msg))


class TokenizeError(CalcError):
    STAGE = "Tokenizer"


class ConvertError(CalcError):
    STAGE = "Converter"


class EvalError(CalcError):
    STAGE = "Evaluator"

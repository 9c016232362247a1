from typing import Callable, Dict
from Errors import ErrorKind, EvalError
import math


PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 2,
    "^": 3,
}

RIGHT_ASSOCIATIVE = {"^"}

# Function produced by the converter for a unary minus. Not a letter run,
# so the tokenizer never yields it from user input.
NEG = "u-"


def precedence(op: str) -> int:
    assert op in PRECEDENCE, f"Unknown operator {op}"
    return PRECEDENCE[op]


def is_right_associative(op: str) -> bool:
    return op in RIGHT_ASSOCIATIVE


def degrees_to_radians(deg: float) -> float:
    return deg * math.pi / 180.0


def factorial(a: float) -> float:
    if not math.isfinite(a) or a < 0 or math.floor(a) != a:
        raise EvalError(ErrorKind.DOMAIN_ERROR,
                        f"fact() needs a non-negative integer, got {a:g}")
    result = 1.0
    for i in range(2, int(a) + 1):
        result *= i
        # 171! and up overflow
        if result == math.inf:
            break
    return result


def divide(a: float, b: float) -> float:
    if b == 0:
        raise EvalError(ErrorKind.DIVISION_BY_ZERO, f"{a:g} / {b:g}")
    return a / b


def modulo(a: float, b: float) -> float:
    # Remainder of the truncated operands, sign follows the dividend
    if not (math.isfinite(a) and math.isfinite(b)):
        raise EvalError(ErrorKind.DOMAIN_ERROR, f"{a:g} % {b:g}")
    x, y = int(a), int(b)
    if y == 0:
        raise EvalError(ErrorKind.DIVISION_BY_ZERO, f"{a:g} % {b:g}")
    return float(int(math.fmod(x, y)))


def power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        # Odd integral exponents keep the sign of the base
        if a < 0 and b == math.floor(b) and int(b) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ^ negative is a pole, negative ^ fractional is not real
        return math.inf if a == 0 else math.nan


def exponential(a: float) -> float:
    try:
        return math.exp(a)
    except OverflowError:
        return math.inf


def _trig(func: Callable[[float], float]) -> Callable:
    def apply(a: float) -> float:
        # sin(inf) is nan, as in C
        if not math.isfinite(a):
            return math.nan
        return func(degrees_to_radians(a))
    return apply


def _positive(name: str, func: Callable[[float], float]) -> Callable:
    def apply(a: float) -> float:
        if a <= 0:
            raise EvalError(ErrorKind.DOMAIN_ERROR,
                            f"{name}() needs a positive argument, got {a:g}")
        return func(a)
    return apply


def _non_negative(name: str, func: Callable[[float], float]) -> Callable:
    def apply(a: float) -> float:
        if a < 0:
            raise EvalError(ErrorKind.DOMAIN_ERROR,
                            f"{name}() needs a non-negative argument, "
                            f"got {a:g}")
        return func(a)
    return apply


OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
    "%": modulo,
    "^": power,
}

FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sqrt": _non_negative("sqrt", math.sqrt),
    "abs": math.fabs,
    "ln": _positive("ln", math.log),
    "log": _positive("log", math.log10),
    "exp": exponential,
    "fact": factorial,
    # Angles are in degrees
    "sin": _trig(math.sin),
    "cos": _trig(math.cos),
    "tan": _trig(math.tan),
}

# Only reachable through tokens built by the converter
INTERNAL_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    NEG: lambda a: -a,
}


def is_function(name: str) -> bool:
    return name in FUNCTIONS


def apply_operator(op: str, a: float, b: float) -> float:
    assert op in OPERATORS, f"Unknown operator {op}"
    return OPERATORS[op](a, b)


def apply_function(name: str, a: float) -> float:
    if name in INTERNAL_FUNCTIONS:
        return INTERNAL_FUNCTIONS[name](a)
    if name not in FUNCTIONS:
        raise EvalError(ErrorKind.UNKNOWN_FUNCTION,
                        f'Unknown function "{name}"')
    return FUNCTIONS[name](a)

from Tokenizer import Tokenizer, Token
from Converter import Converter
from Evaluator import Evaluator
from Errors import CalcError
from typing import Callable, List
from functools import wraps


class CalcDebug:
    """Trace of the pipeline stages, one subtree per evaluated expression."""

    class NT:
        def __init__(self, name: str):
            self.name = name
            self.components = []

    def __init__(self, file: str = None):
        self.root = []
        self.current = self.root
        self.stack = []
        self.file = file

    def add(self, item):
        self.current.append(item)

    def push(self, stage_name: str):
        nt = self.NT(stage_name)
        self.add(nt)
        self.stack.append(self.current)
        self.current = nt.components

    def pop(self):
        self.current = self.stack.pop()

    def toStr(self, node: List, indent: int = 0) -> str:
        string = ""

        for item in node:
            if isinstance(item, self.NT):
                string += f"{'| ' * indent}NT:{item.name}\n"
                string += self.toStr(indent=indent+1, node=item.components)
            elif isinstance(item, Token):
                string += f"{'| ' * indent}{item}\n"
            elif isinstance(item, CalcError):
                string += f"{'| ' * indent}ERROR: {item}\n"
            elif isinstance(item, (str, float)):
                string += f"{'| ' * indent}{item}\n"
            else:
                raise Exception("Internal error: debug node of unexpected "
                                f"type {type(item)}")

        return string

    def dump(self):
        if self.file:
            with open(self.file, "w+") as f:
                f.write(self.toStr(self.root))
        else:
            print(self.toStr(self.root), end="")


class Result:
    value: float
    error: CalcError

    def __init__(self, value: float = None, error: CalcError = None):
        assert (value is None) != (error is None), \
            "A result holds either a value or an error"
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return f"{self.value:.6f}" if self.ok else str(self.error)

    def __repr__(self) -> str:
        return f"Result({self.__str__()})"

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Result):
            return False
        if self.ok != __o.ok:
            return False
        if self.ok:
            # nan results of the same expression compare equal
            return self.value == __o.value or \
                (self.value != self.value and __o.value != __o.value)
        return self.error == __o.error


class Calculator:
    """text -> tokens -> postfix tokens -> number.

    Holds no state between calls apart from the optional debug trace; the
    previous result is passed in by the caller every time.
    """

    debug: CalcDebug

    def __init__(self, debug: CalcDebug = None):
        self.debug = debug
        self._traced_error = None

    def _stage(func: Callable):
        @wraps(func)
        def wrapStage(self, *args, **kargs):
            try:
                if self.debug:
                    self.debug.push(func.__name__)
                ret = func(self, *args, **kargs)

            except CalcError as e:
                # Record the error once, in the stage that raised it
                if self.debug and e is not self._traced_error:
                    self.debug.add(e)
                    self._traced_error = e
                raise e

            finally:
                if self.debug:
                    self.debug.pop()
            return ret

        return wrapStage

    @_stage
    def tokenize(self, expression: str, lastResult: float = 0.0) -> List[Token]:
        tokens = Tokenizer(expression, lastResult).tokenize()
        if self.debug:
            for token in tokens:
                self.debug.add(token)
        return tokens

    @_stage
    def toPostfix(self, tokens: List[Token]) -> List[Token]:
        postfix = Converter(tokens).convert()
        if self.debug:
            for token in postfix:
                self.debug.add(token)
        return postfix

    @_stage
    def evalPostfix(self, postfix: List[Token]) -> float:
        value = Evaluator(postfix).evaluate()
        if self.debug:
            self.debug.add(value)
        return value

    @_stage
    def calculate(self, expression: str, lastResult: float = 0.0) -> float:
        if self.debug:
            self.debug.add(f"expression: {expression!r}, Ans = {lastResult:g}")
        tokens = self.tokenize(expression, lastResult)
        postfix = self.toPostfix(tokens)
        return self.evalPostfix(postfix)

    def evaluate(self, expression: str, lastResult: float = 0.0) -> Result:
        try:
            return Result(value=self.calculate(expression, lastResult))
        except CalcError as e:
            return Result(error=e)


def evaluate(expression: str, lastResult: float = 0.0,
             debug: CalcDebug = None) -> Result:
    return Calculator(debug=debug).evaluate(expression, lastResult)


def calculate(expression: str, lastResult: float = 0.0,
              debug: CalcDebug = None) -> float:
    return Calculator(debug=debug).calculate(expression, lastResult)

from graphviz import Digraph
from typing import List
from Tokenizer import Token
import Operators


class ExprVis:
    """Draws a postfix token sequence as an expression tree."""

    g: Digraph
    debug: bool

    number_color = "#00BFFF"
    operator_color = "#D2691E"
    function_color = "#40E0D0"
    col_color = "#FF69B4"

    def __init__(self, filename: str = "graph/expr.dot",
                 debug: bool = False) -> None:
        self._graph = Digraph('expr', filename=filename,
                              node_attr={'shape': 'record'})
        self.debug = debug
        self._cnt = 0

    @property
    def source(self) -> str:
        return self._graph.source

    def _color(self, token: Token) -> str:
        if token.is_number():
            return ExprVis.number_color
        elif token.is_operator():
            return ExprVis.operator_color
        else:
            return ExprVis.function_color

    def _dot_name(self) -> str:
        name = f"T{self._cnt}"
        self._cnt += 1
        return name

    def _dot_label(self, token: Token) -> str:
        sym = token.sym
        if token.is_function() and sym == Operators.NEG:
            sym = "-"
        if token.is_number() and sym == Token.ANS:
            sym = f"Ans = {token.value:g}"
        label = f"<b>{sym}</b>"
        # Column of the token in the input, for debugging
        if self.debug:
            label += f' | <font color="{ExprVis.col_color}">' \
                f"col {token.col}</font>"
        return f"<{label}>"

    def _node(self, token: Token) -> str:
        name = self._dot_name()
        color = self._color(token)
        self._graph.node(name, self._dot_label(token), color=color,
                         fontcolor=color)
        return name

    def _edge(self, src: str, dst: str) -> None:
        self._graph.edge(src + ":s", dst + ":n")

    def expression(self, postfix: List[Token]) -> None:
        # Operands of each operator are the last nodes drawn. Missing
        # operands of a malformed expression are left out.
        stack = []
        for token in postfix:
            name = self._node(token)
            arity = 0
            if token.is_operator():
                arity = 2
            elif token.is_function():
                arity = 1

            operands = stack[-arity:] if arity else []
            if arity:
                del stack[-arity:]
            for operand in operands:
                self._edge(name, operand)
            stack.append(name)

    def save(self) -> str:
        return self._graph.save()

    def render(self) -> str:
        return self._graph.render()

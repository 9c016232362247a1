#! /bin/env python3

from Calculator import Calculator, CalcDebug
from Errors import CalcError
from ExprVis import ExprVis
from Tokenizer import Token
from typing import List

import argparse
import sys


def getArgs(argv: List[str] = None):
    parser = argparse.ArgumentParser(description="Arithmetic expression "
                                     "calculator")
    parser.add_argument("-e", dest="exprs", type=str, action="append",
                        default=[], help="expression to evaluate, repeatable")
    parser.add_argument("-i", dest="src", type=str,
                        help="file with one expression per line")
    parser.add_argument("-a", dest="ans", type=float, default=0.0,
                        help="initial value of Ans")
    parser.add_argument("-d", dest="debug", type=str,
                        help="write the debug trace to this file")
    parser.add_argument("-g", dest="graph", type=str,
                        help="dot file for the tree of the last expression")
    parser.add_argument("-r", action="store_true", dest="render",
                        default=False, help="render the dot file with graphviz")
    parser.add_argument("-v", action="store_true",
                        dest="verbose", default=False, help="verbose mode")
    args = parser.parse_args(argv)
    if not args.exprs and not args.src:
        parser.error("nothing to evaluate, use -e or -i")
    return args


def readExpressions(file: str) -> List[str]:
    exprs = []
    with open(file) as f:
        for line in f:
            line = line.strip()
            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue
            exprs.append(line)
    return exprs


def convert(expr: str, ans: float, default: List[Token]) -> List[Token]:
    # Postfix form of expr, or default if expr does not convert
    calculator = Calculator()
    try:
        return calculator.toPostfix(calculator.tokenize(expr, ans))
    except CalcError:
        return default


def main(argv: List[str] = None) -> int:
    # Get args
    args = getArgs(argv)
    exprs = list(args.exprs)
    if args.src:
        exprs += readExpressions(args.src)

    debug = None
    if args.debug or args.verbose:
        debug = CalcDebug(file=args.debug)
    calculator = Calculator(debug=debug)

    ans = args.ans
    failed = False
    postfix = None
    for expr in exprs:
        if args.graph:
            postfix = convert(expr, ans, postfix)
        result = calculator.evaluate(expr, ans)
        if result.ok:
            print(f"Result: {result.value:.6f}")
            ans = result.value
        else:
            print(f"Error: {result.error}", file=sys.stderr)
            failed = True

    if debug:
        debug.dump()

    # Visualisation of the last expression that could be converted
    if args.graph and postfix is not None:
        vis = ExprVis(filename=args.graph, debug=args.verbose)
        vis.expression(postfix)
        vis.save()
        if args.render:
            vis.render()

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging

from scicalc.notation import format_number, to_functional_notation
from scicalc.parser import parse
from scicalc.runtime import interpret
from scicalc.tokenizer import tokenize
from scicalc.utils import CalculatorError


def run(code: str, verbose: bool) -> None:
    try:
        tokens = tokenize(code)
        if verbose:
            print(f"tokens: {' '.join(str(t) for t in tokens)}")
        ast = parse(tokens)
        if verbose:
            print(f"ast: {to_functional_notation(ast)}")
        result = interpret(ast)
    except CalculatorError as e:
        print(e)
        return
    print(format_number(result))


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions")
    arg_parser.add_argument("expressions", nargs="*", help="evaluate these and exit instead of starting a REPL")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="show tokens, AST and debug logs")
    args = arg_parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.expressions:
        for code in args.expressions:
            run(code, args.verbose)
    else:
        while True:
            try:
                code = input("> ")
            except EOFError:
                break
            if code.strip():
                run(code, args.verbose)

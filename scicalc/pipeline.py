import math
from dataclasses import dataclass

from scicalc.parser import Expression, parse
from scicalc.runtime import interpret
from scicalc.tokenizer import Token, tokenize


@dataclass(frozen=True)
class Calculation:
    code: str
    tokens: list[Token]
    ast: Expression
    result: float


def calculate(code: str) -> Calculation:
    tokens = tokenize(code)
    ast = parse(tokens)
    return Calculation(code=code, tokens=tokens, ast=ast, result=interpret(ast))


# trig arguments are radians, so sin(30) is not 0.5 here
SAMPLE_EXPRESSIONS: list[tuple[str, float]] = [
    # basic operations
    ("1 + 2", 3),
    ("3 * 4", 12),
    ("10 - 7", 3),
    ("8 / 2", 4),
    ("2 ^ 3", 8),
    # factorials
    ("3!", 6),
    ("4! + 5", 29),
    ("5! - 120", 0),
    # parentheses
    ("(2 + 3) * 4", 20),
    ("10 - (3 + 2)", 5),
    ("(2 + 3) ^ 2", 25),
    # precedence and associativity
    ("2 + 3 * 4", 14),
    ("2 ^ 3 ^ 2", 512),
    ("10 / 2 * 5", 25),
    ("10 - 2 + 3", 11),
    # functions
    ("sin(0)", math.sin(0)),
    ("cos(0)", math.cos(0)),
    ("sin(cos(0))", math.sin(math.cos(0))),
    ("2 * sin(30)", 2 * math.sin(30)),
    ("sin(30) ^ 2", math.sin(30) ** 2),
    # mixed
    ("2 ^ 3!", 64),
    ("(2 + 3!) * 4", 32),
    ("4 / (2 + 2)", 1),
    ("1 / (2 ^ -1)", 2),
    ("3 + 4 * (2 - 1)", 7),
    # negative numbers
    ("-1 + 2", 1),
    ("-3 ^ 2", 9),
    ("(-3) ^ 2", 9),
    # fractions
    ("1 / 2", 0.5),
    ("1 / (2 / 3)", 1.5),
    ("1 / (3 ^ -1)", 3),
    ("2 * (1 / 2)", 1),
    ("3 / (1 / 3)", 9),
    ("(2 + 3) / 5", 1),
]

import enum
import logging
from dataclasses import dataclass

from scicalc.tokenizer import Token, TokenType, untokenize
from scicalc.utils import CalculatorError, PrintableEnum, format_caret

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalculatorError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        caret_idx = len(untokenize(self.tokens[: self.error_token_idx]))
        return "\n".join([f"[Parser error] {self.errmsg}", *format_caret(untokenize(self.tokens), caret_idx)])


class BinaryOperator(PrintableEnum):
    PLUS = enum.auto()
    MINUS = enum.auto()
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()
    POWER = enum.auto()


class UnaryOperator(PrintableEnum):
    FACTORIAL = enum.auto()


class FunctionName(PrintableEnum):
    SIN = enum.auto()
    COS = enum.auto()


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class BinaryNode:
    left: "Expression"
    operator: BinaryOperator
    right: "Expression"


@dataclass(frozen=True)
class UnaryNode:
    operator: UnaryOperator
    operand: "Expression"


@dataclass(frozen=True)
class FunctionNode:
    name: FunctionName
    argument: "Expression"


Expression = NumberNode | BinaryNode | UnaryNode | FunctionNode


ADDITIVE_OPERATORS = {
    TokenType.PLUS: BinaryOperator.PLUS,
    TokenType.MINUS: BinaryOperator.MINUS,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.MULTIPLY: BinaryOperator.MULTIPLY,
    TokenType.DIVIDE: BinaryOperator.DIVIDE,
}

FUNCTIONS = {
    TokenType.SIN: FunctionName.SIN,
    TokenType.COS: FunctionName.COS,
}

# tokens that can start an atom; seeing one right after an operand means implicit multiplication
ATOM_START = {TokenType.NUMBER, TokenType.LPAREN, *FUNCTIONS}


def parse(tokens: list[Token]) -> Expression:
    if not tokens or tokens[-1].type is not TokenType.EOF:
        raise ParserError("Token list must end with EOF", tokens=tokens, error_token_idx=len(tokens))
    check_parentheses(tokens)

    try:
        expr, i = _consume_expression(tokens, 0)
    except RecursionError:
        raise ParserError("Expression is nested too deeply", tokens=tokens, error_token_idx=0) from None

    if tokens[i].type is not TokenType.EOF:
        raise ParserError(f"Unexpected token {tokens[i].type}", tokens=tokens, error_token_idx=i)

    logger.debug("Parsed %r into %s", untokenize(tokens), expr)
    return expr


def check_parentheses(tokens: list[Token]) -> None:
    """Fails fast on unbalanced parentheses before any descent happens"""
    depth = 0
    for i, token in enumerate(tokens):
        if token.type is TokenType.LPAREN:
            depth += 1
        elif token.type is TokenType.RPAREN:
            depth -= 1
            if depth < 0:
                raise ParserError("Unexpected closing parenthesis", tokens=tokens, error_token_idx=i)
    if depth > 0:
        raise ParserError("Unclosed parenthesis", tokens=tokens, error_token_idx=len(tokens) - 1)


def _consume_expression(tokens: list[Token], i: int) -> tuple[Expression, int]:
    """expression := term (("+"|"-") term)*"""
    result, i = _consume_term(tokens, i)
    while tokens[i].type in ADDITIVE_OPERATORS:
        operator = ADDITIVE_OPERATORS[tokens[i].type]
        right, i = _consume_term(tokens, i + 1)
        result = BinaryNode(left=result, operator=operator, right=right)
    return result, i


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    """term := power ((("*"|"/") power) | power)*"""
    result, i = _consume_power(tokens, i)
    while True:
        if tokens[i].type in MULTIPLICATIVE_OPERATORS:
            operator = MULTIPLICATIVE_OPERATORS[tokens[i].type]
            right, i = _consume_power(tokens, i + 1)
        elif tokens[i].type in ATOM_START:
            operator = BinaryOperator.MULTIPLY
            right, i = _consume_power(tokens, i)
        else:
            break
        result = BinaryNode(left=result, operator=operator, right=right)
    return result, i


def _consume_power(tokens: list[Token], i: int) -> tuple[Expression, int]:
    """power := factorial ("^" power)?, recursion on the right makes it right-associative"""
    base, i = _consume_factorial(tokens, i)
    if tokens[i].type is not TokenType.POWER:
        return base, i
    exponent, i = _consume_power(tokens, i + 1)
    return BinaryNode(left=base, operator=BinaryOperator.POWER, right=exponent), i


def _consume_factorial(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_atom(tokens, i)
    while tokens[i].type is TokenType.FACTORIAL:
        result = UnaryNode(operator=UnaryOperator.FACTORIAL, operand=result)
        i += 1
    return result, i


def _consume_atom(tokens: list[Token], i: int) -> tuple[Expression, int]:
    first = tokens[i]
    if first.type is TokenType.NUMBER:
        if first.literal is None:
            raise ParserError("Number token without a value", tokens=tokens, error_token_idx=i)
        return NumberNode(value=first.literal), i + 1
    elif first.type in FUNCTIONS:
        i = _expect(tokens, i + 1, TokenType.LPAREN, "Expect '(' after function name.")
        argument, i = _consume_expression(tokens, i)
        i = _expect(tokens, i, TokenType.RPAREN, "Expect ')' after function argument.")
        return FunctionNode(name=FUNCTIONS[first.type], argument=argument), i
    elif first.type is TokenType.LPAREN:
        inner, i = _consume_expression(tokens, i + 1)
        i = _expect(tokens, i, TokenType.RPAREN, "Expect ')' after expression.")
        return inner, i
    elif first.type is TokenType.RPAREN:
        raise ParserError("Unexpected closing parenthesis", tokens=tokens, error_token_idx=i)
    elif first.type is TokenType.EOF:
        raise ParserError("Unexpected token EOF, expression expected", tokens=tokens, error_token_idx=i)
    else:
        raise ParserError(f"Unexpected token {first.type}", tokens=tokens, error_token_idx=i)


def _expect(tokens: list[Token], i: int, token_type: TokenType, errmsg: str) -> int:
    """Index after the expected token"""
    if tokens[i].type is not token_type:
        raise ParserError(errmsg, tokens=tokens, error_token_idx=i)
    return i + 1

import pytest

from scicalc.parser import (
    BinaryNode,
    BinaryOperator,
    Expression,
    FunctionName,
    FunctionNode,
    NumberNode,
    ParserError,
    UnaryNode,
    UnaryOperator,
    check_parentheses,
    parse,
)
from scicalc.tokenizer import Token, TokenType, tokenize


def n(value: float) -> NumberNode:
    return NumberNode(value=value)


def binop(left: Expression, operator: BinaryOperator, right: Expression) -> BinaryNode:
    return BinaryNode(left=left, operator=operator, right=right)


def fact(operand: Expression) -> UnaryNode:
    return UnaryNode(operator=UnaryOperator.FACTORIAL, operand=operand)


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("1", n(1)),
        pytest.param("(((1)))", n(1)),
        pytest.param("-3", n(-3)),
        pytest.param("2 + 3 * 4", binop(n(2), BinaryOperator.PLUS, binop(n(3), BinaryOperator.MULTIPLY, n(4)))),
        pytest.param("10 - 2 + 3", binop(binop(n(10), BinaryOperator.MINUS, n(2)), BinaryOperator.PLUS, n(3))),
        pytest.param("8 / 4 / 2", binop(binop(n(8), BinaryOperator.DIVIDE, n(4)), BinaryOperator.DIVIDE, n(2))),
        pytest.param("2 ^ 3 ^ 2", binop(n(2), BinaryOperator.POWER, binop(n(3), BinaryOperator.POWER, n(2)))),
        pytest.param("3!^2", binop(fact(n(3)), BinaryOperator.POWER, n(2))),
        pytest.param("3!!", fact(fact(n(3)))),
        pytest.param("-3 ^ 2", binop(n(-3), BinaryOperator.POWER, n(2))),
        pytest.param("2(3+1)", binop(n(2), BinaryOperator.MULTIPLY, binop(n(3), BinaryOperator.PLUS, n(1)))),
        pytest.param("(2)(3)", binop(n(2), BinaryOperator.MULTIPLY, n(3))),
        pytest.param("2 3 4", binop(binop(n(2), BinaryOperator.MULTIPLY, n(3)), BinaryOperator.MULTIPLY, n(4))),
        pytest.param(
            "2sin(0)",
            binop(n(2), BinaryOperator.MULTIPLY, FunctionNode(name=FunctionName.SIN, argument=n(0))),
        ),
        pytest.param(
            "cos(1 + 2)!",
            fact(FunctionNode(name=FunctionName.COS, argument=binop(n(1), BinaryOperator.PLUS, n(2)))),
        ),
    ],
)
def test_parse(code: str, expected_ast: Expression) -> None:
    assert parse(tokenize(code)) == expected_ast


@pytest.mark.parametrize(
    "code, errmsg",
    [
        pytest.param("(2 + 3", "Unclosed parenthesis"),
        pytest.param("2 + 3)", "Unexpected closing parenthesis"),
        pytest.param(")(", "Unexpected closing parenthesis"),
        # the balance check runs before the stray operator is reached
        pytest.param("* (2", "Unclosed parenthesis"),
        pytest.param("()", "Unexpected closing parenthesis"),
        pytest.param("sin 3", "Expect '(' after function name."),
        pytest.param("cos", "Expect '(' after function name."),
        pytest.param("", "Unexpected token EOF, expression expected"),
        pytest.param("2 +", "Unexpected token EOF, expression expected"),
        pytest.param("3 ^", "Unexpected token EOF, expression expected"),
        pytest.param("* 2", "Unexpected token MULTIPLY"),
        pytest.param("- 3", "Unexpected token MINUS"),
        pytest.param("!", "Unexpected token FACTORIAL"),
        pytest.param("2 * / 3", "Unexpected token DIVIDE"),
    ],
)
def test_parser_errors(code: str, errmsg: str) -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize(code))
    assert exc_info.value.errmsg == errmsg


def test_check_parentheses_accepts_balanced() -> None:
    check_parentheses(tokenize("((1)(2))"))


def test_tokens_must_end_with_eof() -> None:
    with pytest.raises(ParserError) as exc_info:
        parse([Token(type=TokenType.NUMBER, lexeme="1", literal=1.0)])
    assert exc_info.value.errmsg == "Token list must end with EOF"


def test_parser_error_points_at_token() -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize("2 + 3)"))
    assert exc_info.value.error_token_idx == 3
    assert str(exc_info.value) == "[Parser error] Unexpected closing parenthesis\n2+3)\n   ^"


def test_deep_nesting_is_parser_error() -> None:
    depth = 5000
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize("(" * depth + "1" + ")" * depth))
    assert exc_info.value.errmsg == "Expression is nested too deeply"


def test_parse_does_not_modify_tokens() -> None:
    tokens = tokenize("2(3 + 1)!")
    copy = list(tokens)
    parse(tokens)
    assert tokens == copy

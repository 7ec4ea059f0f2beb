"""Presentation helpers for parsed expressions"""
from typing import Any

from scicalc.parser import BinaryNode, BinaryOperator, Expression, FunctionNode, NumberNode, UnaryNode, UnaryOperator

FUNCTIONAL_NAMES: dict[BinaryOperator | UnaryOperator, str] = {
    BinaryOperator.PLUS: "SUM",
    BinaryOperator.MINUS: "SUBTRACT",
    BinaryOperator.MULTIPLY: "MULTIPLY",
    BinaryOperator.DIVIDE: "DIVIDE",
    BinaryOperator.POWER: "POWER",
    UnaryOperator.FACTORIAL: "FACTORIAL",
}


def format_number(value: float) -> str:
    """1.0 -> '1', 2.5 -> '2.5'"""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def to_functional_notation(expression: Expression) -> str:
    """E.g. 2 + 3 * 4 -> SUM(2, MULTIPLY(3, 4))"""
    if isinstance(expression, NumberNode):
        return format_number(expression.value)
    elif isinstance(expression, BinaryNode):
        left = to_functional_notation(expression.left)
        right = to_functional_notation(expression.right)
        return f"{FUNCTIONAL_NAMES[expression.operator]}({left}, {right})"
    elif isinstance(expression, UnaryNode):
        return f"{FUNCTIONAL_NAMES[expression.operator]}({to_functional_notation(expression.operand)})"
    elif isinstance(expression, FunctionNode):
        return f"{expression.name}({to_functional_notation(expression.argument)})"
    else:
        raise TypeError(f"Unexpected expression type: {expression!r}")


def to_dict(expression: Expression) -> dict[str, Any]:
    """Plain nested dicts ready for json.dumps"""
    if isinstance(expression, NumberNode):
        return {"type": "NumberNode", "value": expression.value}
    elif isinstance(expression, BinaryNode):
        return {
            "type": "BinaryNode",
            "left": to_dict(expression.left),
            "operator": expression.operator.name,
            "right": to_dict(expression.right),
        }
    elif isinstance(expression, UnaryNode):
        return {"type": "UnaryNode", "operator": expression.operator.name, "operand": to_dict(expression.operand)}
    elif isinstance(expression, FunctionNode):
        return {"type": "FunctionNode", "name": expression.name.name, "argument": to_dict(expression.argument)}
    else:
        raise TypeError(f"Unexpected expression type: {expression!r}")

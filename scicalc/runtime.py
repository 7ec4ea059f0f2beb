import math
from dataclasses import dataclass
from typing import Callable

from scicalc.builtins import BUILTIN_FUNCS
from scicalc.parser import BinaryNode, BinaryOperator, Expression, FunctionNode, NumberNode, UnaryNode, UnaryOperator
from scicalc.utils import CalculatorError


@dataclass
class CalcRuntimeError(CalculatorError):
    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


def interpret(expression: Expression) -> float:
    try:
        return evaluate_expression(expression)
    except RecursionError:
        raise CalcRuntimeError("Expression is nested too deeply") from None


def evaluate_expression(expression: Expression) -> float:
    if isinstance(expression, NumberNode):
        return expression.value
    elif isinstance(expression, BinaryNode):
        left_res = evaluate_expression(expression.left)
        right_res = evaluate_expression(expression.right)
        impl = binary_impls.get(expression.operator)
        if impl is None:
            raise CalcRuntimeError(f"Unknown binary operator: {expression.operator}")
        result = impl(left_res, right_res)
        if math.isinf(result) and math.isfinite(left_res) and math.isfinite(right_res):
            raise CalcRuntimeError(f"{expression.operator} overflow for {left_res} and {right_res}")
        return result
    elif isinstance(expression, UnaryNode):
        operand = evaluate_expression(expression.operand)
        if expression.operator is UnaryOperator.FACTORIAL:
            return factorial(operand)
        else:
            raise CalcRuntimeError(f"Unknown unary operator: {expression.operator}")
    elif isinstance(expression, FunctionNode):
        arg = evaluate_expression(expression.argument)
        if expression.name not in BUILTIN_FUNCS:
            raise CalcRuntimeError(f"Unknown function: {expression.name}")
        try:
            return BUILTIN_FUNCS[expression.name](arg)
        except ValueError:
            raise CalcRuntimeError(f"{expression.name} is not defined for {arg}") from None
    else:
        raise CalcRuntimeError(f"Unknown node type: {type(expression).__name__}")


def divide(a: float, b: float) -> float:
    if b == 0:
        raise CalcRuntimeError("Division by zero")
    return a / b


def power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except ValueError:
        raise CalcRuntimeError(f"Power is not defined for {a} and {b}") from None
    except OverflowError:
        raise CalcRuntimeError(f"Power overflow for {a} and {b}") from None


def factorial(operand: float) -> float:
    if operand < 0:
        raise CalcRuntimeError("Factorial is not defined for negative numbers")
    if not float(operand).is_integer():
        raise CalcRuntimeError("Factorial is only defined for integers")
    result = 1.0
    for i in range(2, int(operand) + 1):
        result *= i
        if math.isinf(result):
            raise CalcRuntimeError(f"Factorial overflow for {operand}")
    return result


binary_impls: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.PLUS: lambda a, b: a + b,
    BinaryOperator.MINUS: lambda a, b: a - b,
    BinaryOperator.MULTIPLY: lambda a, b: a * b,
    BinaryOperator.DIVIDE: divide,
    BinaryOperator.POWER: power,
}

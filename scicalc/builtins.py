import math
from typing import Callable

from scicalc.parser import FunctionName

BuiltinFunc = Callable[[float], float]

BUILTIN_FUNCS: dict[FunctionName, BuiltinFunc] = dict()


def register_builtin_func(name: FunctionName):
    def decorator(fn: BuiltinFunc) -> BuiltinFunc:
        BUILTIN_FUNCS[name] = fn
        return fn

    return decorator


# arguments are taken in radians as is, "sin(30)" is the sine of 30 radians
@register_builtin_func(FunctionName.SIN)
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_builtin_func(FunctionName.COS)
def cos_(arg: float) -> float:
    return math.cos(arg)

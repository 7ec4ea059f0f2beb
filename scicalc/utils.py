import enum
from dataclasses import dataclass


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass
class CalculatorError(Exception):
    """Common base for the tokenizer, parser and runtime errors"""

    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


def format_caret(text: str, idx: int, context: int = 10) -> list[str]:
    """Two lines: a window of text around idx and a caret under idx"""
    print_start_idx = max(0, idx - context)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(text), idx + context)
    print_ellipsis_post = print_end_idx < len(text)
    return [
        ("..." if print_ellipsis_pre else "")
        + f"{text[print_start_idx:print_end_idx]}"
        + ("..." if print_ellipsis_post else ""),
        " " * (idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
    ]

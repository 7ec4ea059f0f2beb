import enum
import logging
from dataclasses import dataclass
from typing import Optional

from scicalc.utils import CalculatorError, PrintableEnum, format_caret

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(CalculatorError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *format_caret(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()
    POWER = enum.auto()
    FACTORIAL = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    literal: Optional[float] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_digit(s: str) -> bool:
    return "0" <= s <= "9"


def _is_alpha(s: str) -> bool:
    return s.isascii() and s.isalpha()


def _is_alnum(s: str) -> bool:
    return _is_digit(s) or _is_alpha(s)


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "!": TokenType.FACTORIAL,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

KEYWORDS = {
    "sin": TokenType.SIN,
    "cos": TokenType.COS,
}

WHITESPACE = " \t\r\n"

# a "-" directly after one of these (or at the very start) signs the number that follows it
SIGN_ALLOWED_AFTER = {
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
    TokenType.LPAREN,
}


def _starts_signed_number(code: str, i: int, tokens: list[Token]) -> bool:
    if i + 1 >= len(code) or not _is_digit(code[i + 1]):
        return False
    return not tokens or tokens[-1].type in SIGN_ALLOWED_AFTER


def _number_end_idx(code: str, i: int) -> int:
    """Index right after the number literal starting at i (which may be a sign)"""
    j = i + 1
    while j < len(code) and _is_digit(code[j]):
        j += 1
    if j + 1 < len(code) and code[j] == "." and _is_digit(code[j + 1]):
        j += 1
        while j < len(code) and _is_digit(code[j]):
            j += 1
    return j


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        c = code[i]
        if c in WHITESPACE:
            i += 1
        elif _is_digit(c) or (c == "-" and _starts_signed_number(code, i, tokens)):
            number_end_idx = _number_end_idx(code, i)
            lexeme = code[i:number_end_idx]
            tokens.append(Token(type=TokenType.NUMBER, lexeme=lexeme, literal=float(lexeme)))
            i = number_end_idx
        elif c in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[c], lexeme=c))
            i += 1
        elif _is_alpha(c):
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and _is_alnum(code[ident_end_idx]):
                ident_end_idx += 1
            ident = code[i:ident_end_idx]
            if ident not in KEYWORDS:
                raise TokenizerError(f"Unexpected identifier: {ident!r}", code=code, error_char_idx=i)
            tokens.append(Token(type=KEYWORDS[ident], lexeme=ident))
            i = ident_end_idx
        else:
            raise TokenizerError(f"Unexpected character: {c!r}", code=code, error_char_idx=i)

    tokens.append(Token(type=TokenType.EOF, lexeme=""))
    logger.debug("Tokenized %r into %d tokens", code, len(tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    """Source text with whitespace removed; EOF has an empty lexeme"""
    return "".join(t.lexeme for t in tokens)

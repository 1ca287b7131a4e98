"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenType(Enum):
    """Every lexical category of the language; the value is its display form."""

    KEYWORD_INT = "KEYWORD(int)"
    KEYWORD_VOID = "KEYWORD(void)"
    KEYWORD_IF = "KEYWORD(if)"
    KEYWORD_ELSE = "KEYWORD(else)"
    KEYWORD_WHILE = "KEYWORD(while)"
    KEYWORD_RETURN = "KEYWORD(return)"
    KEYWORD_INPUT = "KEYWORD(input)"
    KEYWORD_OUTPUT = "KEYWORD(output)"

    OP_PLUS = "OP(+)"
    OP_MINUS = "OP(-)"
    OP_MULTIPLY = "OP(*)"
    OP_DIVIDE = "OP(/)"
    OP_ASSIGN = "OP(=)"
    OP_EQUAL = "OP(==)"
    OP_NOT_EQUAL = "OP(!=)"
    OP_LESS = "OP(<)"
    OP_LESS_EQUAL = "OP(<=)"
    OP_GREATER = "OP(>)"
    OP_GREATER_EQUAL = "OP(>=)"

    DELIM_LPAREN = "DELIM(()"
    DELIM_RPAREN = "DELIM())"
    DELIM_LBRACE = "DELIM({)"
    DELIM_RBRACE = "DELIM(})"
    DELIM_LBRACKET = "DELIM([)"
    DELIM_RBRACKET = "DELIM(])"
    DELIM_SEMICOLON = "DELIM(;)"
    DELIM_COMMA = "DELIM(,)"

    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical unit with its lexeme and 1-based source position."""

    type: TokenType
    value: str
    line: int
    column: int
    literal: Any = None

    def __str__(self) -> str:
        literal_repr = ""
        if self.type is TokenType.NUMBER:
            if isinstance(self.literal, int) and not isinstance(self.literal, bool):
                literal_repr = f" (literal: {self.literal})"
            else:
                literal_repr = " (literal: CAST_ERROR)"
        return (
            f"Token: {self.type}({self.value}){literal_repr}"
            f" at line {self.line}, col {self.column}"
        )
"""Hand-written scanner turning source text into a list of tokens."""

from __future__ import annotations

from cminlex.tokens import Token, TokenType

_INT_MAX = 2**31 - 1

KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.KEYWORD_INT,
    "void": TokenType.KEYWORD_VOID,
    "if": TokenType.KEYWORD_IF,
    "else": TokenType.KEYWORD_ELSE,
    "while": TokenType.KEYWORD_WHILE,
    "return": TokenType.KEYWORD_RETURN,
    "input": TokenType.KEYWORD_INPUT,
    "output": TokenType.KEYWORD_OUTPUT,
}

_SINGLE_CHAR: dict[str, TokenType] = {
    "(": TokenType.DELIM_LPAREN,
    ")": TokenType.DELIM_RPAREN,
    "{": TokenType.DELIM_LBRACE,
    "}": TokenType.DELIM_RBRACE,
    "[": TokenType.DELIM_LBRACKET,
    "]": TokenType.DELIM_RBRACKET,
    ";": TokenType.DELIM_SEMICOLON,
    ",": TokenType.DELIM_COMMA,
    "+": TokenType.OP_PLUS,
    "-": TokenType.OP_MINUS,
    "*": TokenType.OP_MULTIPLY,
    "/": TokenType.OP_DIVIDE,
}

# Operators that become a longer token when followed by '='.
_WITH_EQUALS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.OP_ASSIGN, TokenType.OP_EQUAL),
    "<": (TokenType.OP_LESS, TokenType.OP_LESS_EQUAL),
    ">": (TokenType.OP_GREATER, TokenType.OP_GREATER_EQUAL),
}


def _is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return len(c) == 1 and c.isascii() and c.isalpha()


class LexError(Exception):
    """A lexical problem found at a 1-based line and column."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
        self.message = message

    def __str__(self) -> str:
        return f"[Lexer Error] line {self.line}, col {self.column}: {self.message}"


class Lexer:
    """Scans a source string; problems are collected in ``errors`` and scanning goes on."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self.errors: list[LexError] = []
        self._reset()

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def tokenize(self) -> list[Token]:
        """Scan the whole source and return its tokens, ending with an EOF token."""
        self._reset()
        self.tokens = []
        self.errors = []
        while True:
            self._skip_whitespace_and_comments()
            if self._at_end():
                break
            self._start = self._pos
            self._token_column = self._column + 1
            self._scan_token()
        self.tokens.append(Token(TokenType.EOF, "", self._line, self._column + 1))
        return list(self.tokens)

    def _reset(self) -> None:
        self._pos = 0
        self._start = 0
        self._line = 1
        self._column = 0
        self._token_column = 1

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self.source[index] if index < len(self.source) else ""

    def _advance(self) -> str:
        c = self.source[self._pos]
        self._pos += 1
        self._column += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def _error(self, message: str) -> None:
        self.errors.append(LexError(self._line, self._token_column, message))

    def _add(self, token_type: TokenType, literal: object = None) -> None:
        lexeme = self.source[self._start:self._pos]
        self.tokens.append(
            Token(token_type, lexeme, self._line, self._token_column, literal)
        )

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            c = self._peek()
            if c in (" ", "\r", "\t"):
                self._advance()
            elif c == "\n":
                self._pos += 1
                self._line += 1
                self._column = 0
            elif c == "/" and self._peek(1) == "/":
                while not self._at_end() and self._peek() != "\n":
                    self._advance()
            else:
                return

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE_CHAR:
            self._add(_SINGLE_CHAR[c])
        elif c == "!":
            if self._match("="):
                self._add(TokenType.OP_NOT_EQUAL)
            else:
                self._error("Unexpected character '!' (expected '!=')")
        elif c in _WITH_EQUALS:
            plain, with_equals = _WITH_EQUALS[c]
            self._add(with_equals if self._match("=") else plain)
        elif _is_digit(c):
            self._read_number()
        elif _is_alpha(c) or c == "_":
            self._read_identifier_or_keyword()
        else:
            self._error(f"Unexpected character '{c}'")

    def _read_number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        text = self.source[self._start:self._pos]
        value = int(text)
        if value > _INT_MAX:
            self._error(f"Number literal '{text}' is too large.")
            value = 0
        self._add(TokenType.NUMBER, value)

    def _read_identifier_or_keyword(self) -> None:
        while _is_alpha(self._peek()) or _is_digit(self._peek()) or self._peek() == "_":
            self._advance()
        text = self.source[self._start:self._pos]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str) -> list[Token]:
    """Return the tokens of ``source``; lexical errors are skipped over."""
    return Lexer(source).tokenize()
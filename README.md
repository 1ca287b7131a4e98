# cminlex

A lexical analyser for C--, a small C-like language. It recognises:

- integer literals (decimal digits),
- identifiers (a letter or `_`, then letters, digits or `_`),
- the keywords `int void if else while return input output`,
- the operators `+ - * / = == != < <= > >=`,
- the delimiters `( ) { } [ ] ; ,`,
- `//` line comments, spaces, tabs, carriage returns and newlines, which are skipped.

## Command line

Tokenize a file and print one token per line:

```
cminlex program.cm
```

With no argument, `cminlex` shows a `> ` prompt and tokenizes each line
read from standard input until end of input.

Exit status: `0` on success, `64` when given more than one argument, `65`
if the file had lexical errors, `66` if the file could not be opened.
Lexical errors are written to standard error as
`[Lexer Error] line L, col C: message`; scanning carries on past them and
the offending character is dropped. At the prompt, errors are reported but
do not end the session.

Sample output for `x = 10;`:

```
Token: IDENTIFIER(x) at line 1, col 1
Token: OP(=)(=) at line 1, col 3
Token: NUMBER(10) (literal: 10) at line 1, col 5
Token: DELIM(;)(;) at line 1, col 7
Token: EOF() at line 1, col 8
```

## Library

```python
from cminlex.lexer import Lexer, tokenize
from cminlex.tokens import TokenType

tokens = tokenize("int x;")
assert tokens[0].type is TokenType.KEYWORD_INT
assert tokens[-1].type is TokenType.EOF

lexer = Lexer("int ! x;")
for token in lexer.tokenize():
    print(token)
if lexer.had_error:
    for error in lexer.errors:
        print(error)   # [Lexer Error] line 1, col 5: Unexpected character '!' (expected '!=')
```

- `cminlex.tokens.TokenType` is an enum of every token kind; `str()` of a
  member gives its display form, such as `KEYWORD(int)` or `OP(<=)`.
- `cminlex.tokens.Token` is a frozen dataclass with `type`, the lexeme
  `value`, the 1-based `line` and `column` where it starts, and `literal`
  (the integer for `NUMBER` tokens, otherwise `None`). `str()` gives the
  line format shown above.
- `cminlex.lexer.Lexer(source).tokenize()` returns the token list, always
  ending with an `EOF` token. Problems found are kept in `errors` as
  `LexError` objects (with `line`, `column` and `message`), and
  `had_error` tells whether there were any.
- `cminlex.lexer.tokenize(source)` is a shortcut that returns the tokens
  and discards the errors.
- Number literals above 2147483647 are reported as too large and get the
  literal `0`.
- `cminlex.cli` holds `run`, `run_file`, `run_prompt` and `main`, which
  take optional streams so they can be driven from code.

## What it does not do

This package stops at tokens. There is no parser, no semantic checking and
no code generation; `cminlex` does not compile or run C-- programs.

## Tests

```
pip install -e .[test]
pytest
```
"""Command line front end: lex a file, or lines typed at a prompt, and print the tokens."""

from __future__ import annotations

import sys
from typing import TextIO

from cminlex.lexer import Lexer

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def run(source: str, out: TextIO | None = None, err: TextIO | None = None) -> bool:
    """Lex ``source``, report errors to ``err`` and tokens to ``out``; return whether errors occurred."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    lexer = Lexer(source)
    tokens = lexer.tokenize()
    for error in lexer.errors:
        print(error, file=err)
    for token in tokens:
        print(token, file=out)
    return lexer.had_error


def run_file(path: str, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Lex the file at ``path`` and return the exit status."""
    err = err if err is not None else sys.stderr
    try:
        with open(path, encoding="utf-8") as handle:
            source = handle.read()
    except OSError:
        print(f"Error: Could not open file '{path}'", file=err)
        return EX_NOINPUT
    return EX_DATAERR if run(source, out, err) else 0


def run_prompt(
    stdin: TextIO | None = None, out: TextIO | None = None, err: TextIO | None = None
) -> int:
    """Lex each line read from ``stdin`` until it ends."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        out.write("> ")
        out.flush()
        line = stdin.readline()
        if not line:
            break
        run(line.rstrip("\n"), out, err)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Usage: cminlex [script_file]", file=sys.stderr)
        return EX_USAGE
    if args:
        return run_file(args[0])
    return run_prompt()


if __name__ == "__main__":
    raise SystemExit(main())
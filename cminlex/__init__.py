"""Lexical analysis for the C-- language: token types, a lexer and a command line tool."""

__version__ = "0.1.0"
__all__ = ["cli", "lexer", "tokens"]
"""Lexer — разбиение арифметических выражений с величинами на лексемы."""

from src.lexer.stack import StackEntry, build_token_stack
from src.lexer.tokenizer import MATCHERS, LexError, LexerConfig, Matcher, tokenize

__all__ = [
    "LexError",
    "LexerConfig",
    "MATCHERS",
    "Matcher",
    "StackEntry",
    "build_token_stack",
    "tokenize",
]

"""Monkey lexer — token model and single-pass scanner."""

from monkey.lexer.tokens import KEYWORDS, Token, TokenType, lookup_ident
from monkey.lexer.lexer import Lexer, tokenize

__all__ = ["KEYWORDS", "Token", "TokenType", "lookup_ident", "Lexer", "tokenize"]

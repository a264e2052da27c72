"""Monkey lexer — hand-written scanner producing one token per call.

Design decisions:
- Cursor is an explicit offset into the source; it never moves backwards.
- Only `=` and `!` need lookahead (one character, to spot `==` / `!=`).
- Unknown characters become ILLEGAL tokens; scanning never raises.
- Identifiers are letters and underscores only unless
  `allow_digits_in_identifiers` is set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from monkey.lexer.tokens import Token, TokenType, lookup_ident

logger = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# First character -> (type alone, type when followed by "=")
LOOKAHEAD_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.ASSIGN, TokenType.EQUALS),
    "!": (TokenType.BANG, TokenType.NOT_EQUALS),
}


class Lexer:
    """Scans Monkey source text into `Token` objects, one per call.

    Usage::

        lexer = Lexer("let five = 5;")
        tok = lexer.next_token()
        while tok.type is not TokenType.EOF:
            ...
            tok = lexer.next_token()

    or simply ``list(Lexer(source))`` / ``Lexer(source).tokenize()``.
    """

    def __init__(self, source: str, *, allow_digits_in_identifiers: bool = False) -> None:
        self.source = source
        self.allow_digits_in_identifiers = allow_digits_in_identifiers
        self.pos = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token, or EOF once input is exhausted."""
        self._skip_whitespace()

        if self._at_end():
            return Token(TokenType.EOF)

        ch = self._peek()

        if ch in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[ch])

        if ch in LOOKAHEAD_TOKENS:
            alone, with_equals = LOOKAHEAD_TOKENS[ch]
            self._advance()
            if self._peek() == "=":
                self._advance()
                return Token(with_equals)
            return Token(alone)

        if is_letter(ch):
            return lookup_ident(self._read_identifier())

        if is_digit(ch):
            return Token(TokenType.INTEGER, self._read_number())

        logger.debug("illegal character %r at offset %d", ch, self.pos)
        self._advance()
        return Token(TokenType.ILLEGAL)

    def tokenize(self) -> list[Token]:
        """Drain the remaining input and return the tokens, ending with EOF."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Lexeme readers
    # ------------------------------------------------------------------

    def _read_identifier(self) -> str:
        start = self.pos
        self._advance()
        while not self._at_end() and self._is_identifier_char(self._peek()):
            self._advance()
        return self.source[start:self.pos]

    def _read_number(self) -> str:
        start = self.pos
        while not self._at_end() and is_digit(self._peek()):
            self._advance()
        return self.source[start:self.pos]

    def _is_identifier_char(self, ch: str) -> bool:
        if is_letter(ch):
            return True
        return self.allow_digits_in_identifiers and is_digit(ch)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str | None:
        """Return the current character without consuming it, or None at end."""
        if self._at_end():
            return None
        return self.source[self.pos]

    def _advance(self) -> None:
        self.pos += 1

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and is_whitespace(self.source[self.pos]):
            self._advance()


def is_letter(ch: str) -> bool:
    """ASCII letter or underscore."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


# str.isspace() also accepts the information separators, which are not Unicode White_Space
NON_WHITESPACE_SEPARATORS = "\x1c\x1d\x1e\x1f"


def is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in NON_WHITESPACE_SEPARATORS


def tokenize(source: str, **options) -> list[Token]:
    """Scan a whole string with a fresh lexer."""
    return Lexer(source, **options).tokenize()

"""Token types and Token dataclass for the Monkey lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the Monkey lexer can produce."""

    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers & literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Operators
    ASSIGN = auto()         # =
    PLUS = auto()
    MINUS = auto()
    BANG = auto()           # !
    ASTERISK = auto()
    SLASH = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    EQUALS = auto()         # ==
    NOT_EQUALS = auto()     # !=

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


# Token types whose literal is the scanned lexeme
PAYLOAD_TYPES: frozenset[TokenType] = frozenset({TokenType.IDENTIFIER, TokenType.INTEGER})

# Map keyword strings to token types
KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    Only IDENTIFIER and INTEGER tokens carry a literal, and they always do.
    Every other type has an empty literal, so two tokens of a bare type
    always compare equal.
    """

    type: TokenType
    literal: str = ""

    def __post_init__(self) -> None:
        if self.type in PAYLOAD_TYPES:
            if not self.literal:
                raise ValueError(f"{self.type.name} token requires a literal")
            if self.type is TokenType.INTEGER and not _is_ascii_digits(self.literal):
                raise ValueError(f"INTEGER literal must be ASCII digits, got {self.literal!r}")
        elif self.literal:
            raise ValueError(f"{self.type.name} token carries no literal, got {self.literal!r}")

    def __repr__(self) -> str:
        if self.type in PAYLOAD_TYPES:
            return f"Token({self.type.name}, {self.literal!r})"
        return f"Token({self.type.name})"


def lookup_ident(word: str) -> Token:
    """Resolve an identifier-shaped lexeme to a keyword or IDENTIFIER token."""
    token_type = KEYWORDS.get(word)
    if token_type is not None:
        return Token(token_type)
    return Token(TokenType.IDENTIFIER, word)


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()

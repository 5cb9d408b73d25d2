"""
Token Definitions
=================

This module defines the lexical vocabulary of the scripting language:
the closed set of token types, the immutable token record produced by
the scanner, and the reserved-word table.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; * /
- Comparison/assignment: ! != = == > >= < <=
- Logical: && || (also reserved as keyword spellings)
- Literals: strings, numbers, true, false, NULL
- Keywords: class, else, fnc, for, if, println, return, super, this, var, while
- Identifiers: names starting with a letter or underscore

Example
-------
>>> from scriptlex.tokens import lookup_keyword, TokenType
>>> lookup_keyword("fnc") is TokenType.FNC
True
>>> lookup_keyword("Fnc") is None
True
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the scripting language.

    Keywords get their own types so a parser never has to compare
    identifier text.
    """

    # === Single-character Punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    STAR = auto()           # *
    SLASH = auto()          # /

    # === Comparison and Assignment ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Logical Operators ===
    AND = auto()            # &&
    OR = auto()             # ||

    # === Literals ===
    STRING = auto()         # "..."
    NUMBER = auto()         # 12, 12.5
    TRUE = auto()           # true
    FALSE = auto()          # false
    NULL = auto()           # NULL

    # === Identifiers and Keywords ===
    IDENTIFIER = auto()
    CLASS = auto()          # class
    ELSE = auto()           # else
    FNC = auto()            # fnc
    FOR = auto()            # for
    IF = auto()             # if
    PRINTLN = auto()        # println
    RETURN = auto()         # return
    SUPER = auto()          # super
    THIS = auto()           # this
    VAR = auto()            # var
    WHILE = auto()          # while

    # === Sentinel ===
    EOF = auto()            # End of input


# =============================================================================
# Keyword Table
# =============================================================================

# "&&" and "||" can never come out of the identifier scanner, but they are
# reserved spellings all the same.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "&&": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fnc": TokenType.FNC,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "NULL": TokenType.NULL,
    "||": TokenType.OR,
    "println": TokenType.PRINTLN,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


def lookup_keyword(text: str) -> Optional[TokenType]:
    """Return the keyword type spelled exactly by text, or None."""
    return KEYWORDS.get(text)


_LITERAL_TYPES = frozenset({
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NULL,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from source text.

    Attributes:
        type: The TokenType classification
        lexeme: The exact source text the token was scanned from
            (empty only for EOF)
        literal: Decoded value; str for STRING, float for NUMBER,
            None for everything else
        line: Line the token starts on (1-indexed)

    The classification field is named ``type`` rather than ``kind``, in
    line with the TokenType enum it holds.
    """
    type: TokenType
    lexeme: str
    literal: str | float | None
    line: int

    def __str__(self) -> str:
        """Format as 'TYPE lexeme literal', one token per output line."""
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"

    @property
    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in _KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        """Return True if this token denotes a literal value."""
        return self.type in _LITERAL_TYPES

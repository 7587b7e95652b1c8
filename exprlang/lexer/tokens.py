"""
Token definitions for the exprlang lexer.

This module defines every token kind the language supports:
- Literals (decimal integers)
- Identifiers and the keywords reserved out of them
- Arithmetic, assignment, comparison and logical operators
- Grouping punctuation

Tokens form a closed tagged union: the `type` field is the discriminant and
only NUMBER and IDENTIFIER carry a payload in `value`.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in exprlang.

    Organized by category for clarity.
    """

    # ========================================================================
    # Literals and names
    # ========================================================================
    NUMBER = auto()                 # 42
    IDENTIFIER = auto()             # x, total2

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELSE = auto()                   # else

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Assignment
    ASSIGN = auto()                 # =

    # Comparison
    EQUALS = auto()                 # ==
    SMALLER_THAN = auto()           # <
    GREATER_THAN = auto()           # >
    SMALLER_EQUALS = auto()         # <=
    GREATER_EQUALS = auto()         # >=

    # Logical
    NOT = auto()                    # !
    AND = auto()                    # &&
    OR = auto()                     # ||

    # ========================================================================
    # Punctuation
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    CURLY_L = auto()                # {
    CURLY_R = auto()                # }


TokenValue = Union[int, str, None]


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `value` holds the decoded integer for NUMBER and the name for IDENTIFIER;
    it is None for every other kind.
    """
    type: TokenType
    value: TokenValue = None

    def __post_init__(self):
        if self.type == TokenType.NUMBER:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"NUMBER token requires an int value, got {self.value!r}")
        elif self.type == TokenType.IDENTIFIER:
            if not isinstance(self.value, str) or not self.value:
                raise TypeError(f"IDENTIFIER token requires a name, got {self.value!r}")
        elif self.value is not None:
            raise TypeError(f"{self.type.name} token carries no value, got {self.value!r}")

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenType.NUMBER, value)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenType.IDENTIFIER, name)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @property
    def lexeme(self) -> str:
        """Source text this token stands for."""
        if self.type == TokenType.NUMBER:
            return str(self.value)
        if self.type == TokenType.IDENTIFIER:
            return self.value
        return TOKEN_SPELLINGS[self.type]

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator (punctuation excluded)."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword and operator recognition

KEYWORDS = {
    "if": TokenType.IF,
    "else": TokenType.ELSE,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.CURLY_L,
    "}": TokenType.CURLY_R,
    "!": TokenType.NOT,
}

# first char -> (second char, paired type, type when alone or None if a lone
# first char is not a token)
TWO_CHAR_TOKENS = {
    "=": ("=", TokenType.EQUALS, TokenType.ASSIGN),
    "<": ("=", TokenType.SMALLER_EQUALS, TokenType.SMALLER_THAN),
    ">": ("=", TokenType.GREATER_EQUALS, TokenType.GREATER_THAN),
    "&": ("&", TokenType.AND, None),
    "|": ("|", TokenType.OR, None),
}

OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUALS,
    "<": TokenType.SMALLER_THAN,
    ">": TokenType.GREATER_THAN,
    "<=": TokenType.SMALLER_EQUALS,
    ">=": TokenType.GREATER_EQUALS,
    "!": TokenType.NOT,
    "&&": TokenType.AND,
    "||": TokenType.OR,
}

PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.CURLY_L,
    "}": TokenType.CURLY_R,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())
OPERATOR_TYPES = frozenset(OPERATORS.values())

TOKEN_SPELLINGS = {
    token_type: spelling
    for table in (KEYWORDS, OPERATORS, PUNCTUATION)
    for spelling, token_type in table.items()
}


def lookup_keyword(name: str) -> Optional[TokenType]:
    """Return the keyword type for a fully accumulated name, if reserved."""
    return KEYWORDS.get(name)

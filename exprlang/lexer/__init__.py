"""
exprlang Lexer Package

Implements the lexical analyzer (tokenizer) for exprlang: arithmetic,
assignment, grouping, if/else keywords, comparisons and boolean operators.

Key Features:
- Maximal-munch recognition of two-character operators (==, <=, >=, &&, ||)
- Keyword resolution after greedy name accumulation, so "ifx" stays a name
- Pure single-character lookahead, the cursor never moves backwards
- Configurable handling of unrecognized characters and integer overflow
"""

from .tokens import Token, TokenType, KEYWORDS
from .config import LexerConfig, UnexpectedCharacterPolicy, OverflowPolicy
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, LexerError, LexerWarning, UnexpectedCharacterError, NumberOverflowError
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LexerConfig",
    "UnexpectedCharacterPolicy",
    "OverflowPolicy",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
    "UnexpectedCharacterError",
    "NumberOverflowError",
    "tokenize_string",
    "tokenize_file",
]

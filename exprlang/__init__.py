"""
exprlang

Front end for a small expression/statement language. Currently ships the
lexer only; tokens are produced in source order for a downstream parser.

Architecture:
    exprlang/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # exprlex token dump command

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerConfig, LexerError, tokenize_string

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerConfig",
    "LexerError",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]

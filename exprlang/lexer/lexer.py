"""
exprlang Lexer - turns source text into tokens

One token is resolved per step from the current cursor position. Numbers
and names are accumulated greedily, and two-character operators are
disambiguated with a single character of lookahead. Nothing is ever
un-consumed.
"""

import logging
from typing import Iterator, List, Optional, Union

from .tokens import Token, TokenType, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, lookup_keyword
from .config import LexerConfig
from .errors import (
    LexerError, LexerWarning, UnexpectedCharacterError, NumberOverflowError,
    create_truncation_warning
)

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
IDENTIFIER_START = frozenset("abcdefghijklmnopqrstuvwxyz")
IDENTIFIER_CONTINUE = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
WHITESPACE = " "


class Lexer:
    """
    exprlang lexical analyzer.

    Converts a source string into a list of tokens. A Lexer is built for one
    input and driven to completion; it is not meant to be reused.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            config: Error and overflow policies, defaults to LexerConfig()
        """
        self.source = source
        self.config = config or LexerConfig()
        self.pos = 0
        self.warnings: List[LexerWarning] = []
        self._stopped = False

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining source.

        Returns:
            Tokens in source order (no EOF marker)

        Raises:
            UnexpectedCharacterError: On an unrecognized character, unless
                the config truncates instead
            NumberOverflowError: On an out-of-range literal under the
                ERROR overflow policy
        """
        tokens = list(self)
        logger.debug("Tokenized %d characters into %d tokens", self.pos, len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Optional[Token]:
        """Extract one token, or None once the input is exhausted."""
        if self._stopped:
            return None

        self._skip_whitespace()

        current_char = self.peek()
        if current_char is None:
            return None

        if current_char in DIGITS:
            return self._tokenize_number()

        if current_char in IDENTIFIER_START:
            return self._tokenize_identifier_or_keyword()

        if current_char in SINGLE_CHAR_TOKENS:
            self.consume()
            return Token(SINGLE_CHAR_TOKENS[current_char])

        if current_char in TWO_CHAR_TOKENS:
            second_char, paired_type, single_type = TWO_CHAR_TOKENS[current_char]
            if self.peek(1) == second_char:
                self.consume()
                self.consume()
                return Token(paired_type)
            if single_type is not None:
                self.consume()
                return Token(single_type)

        return self._unexpected_character(current_char)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Look at a character ahead of the cursor without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return None

    def consume(self) -> Optional[str]:
        """Advance past the current character and return it."""
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self):
        while self.peek() == WHITESPACE:
            self.consume()

    def _tokenize_number(self) -> Token:
        start_pos = self.pos
        value = 0

        while self.peek() is not None and self.peek() in DIGITS:
            value = value * 10 + int(self.consume())

        checked = self.config.apply_overflow(value)
        if checked is None:
            raise NumberOverflowError(
                self.source[start_pos:self.pos], start_pos, self.config.max_integer
            )
        if checked != value:
            logger.debug("Literal %s at offset %d adjusted to %d (%s)",
                         value, start_pos, checked, self.config.on_overflow.value)

        return Token.number(checked)

    def _tokenize_identifier_or_keyword(self) -> Token:
        start_pos = self.pos

        # First character is already validated as identifier start
        self.consume()
        while self.peek() is not None and self.peek() in IDENTIFIER_CONTINUE:
            self.consume()

        name = self.source[start_pos:self.pos]
        keyword = lookup_keyword(name)
        if keyword is not None:
            return Token(keyword)
        return Token.identifier(name)

    def _unexpected_character(self, char: str) -> None:
        if not self.config.truncates:
            raise UnexpectedCharacterError(char, self.pos, self._word_at_cursor())

        warning = create_truncation_warning(char, self.pos, len(self.source) - self.pos)
        self.warnings.append(warning)
        logger.warning("Stopped tokenizing at offset %d: unexpected character %r",
                       self.pos, char)
        self._stopped = True
        return None

    def _word_at_cursor(self) -> str:
        end = self.pos
        while end < len(self.source) and self.source[end] in IDENTIFIER_CONTINUE:
            end += 1
        return self.source[self.pos:end]

    @property
    def at_end(self) -> bool:
        """True once the whole source has been consumed."""
        return self.pos >= len(self.source)

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all recorded diagnostics (errors are raised, never recorded)."""
        return list(self.warnings)


def tokenize_string(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer configuration

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, config).tokenize()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None,
                  encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Lexer configuration
        encoding: Text encoding of the file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding=encoding, newline='') as f:
        source = f.read()

    logger.debug("Read %d characters from %s", len(source), filepath)
    return tokenize_string(source, config)

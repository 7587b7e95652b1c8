"""
Error handling for the exprlang lexer.

Provides error reporting with the offending character's offset, correction
suggestions, and warnings for conditions that do not stop tokenization.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    position: int
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.position}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def position(self) -> int:
        return self.diagnostic.position

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """Raised for a character that cannot start any token."""

    def __init__(self, character: str, position: int, word: Optional[str] = None):
        self.character = character
        suggestions = ErrorRecovery.suggest_operator_corrections(character)
        if word and not suggestions:
            suggestions = ErrorRecovery.suggest_keyword_corrections(word)

        if suggestions:
            help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
        elif character.isalpha() and character.isupper():
            help_text = "Identifiers must start with a lowercase letter."
        elif character.isprintable() and not character.isspace():
            help_text = f"The character '{character}' is not valid in exprlang source."
        else:
            help_text = (f"Character U+{ord(character):04X} is not allowed; "
                         "only single spaces separate tokens.")

        super().__init__(
            message=f"Unexpected character: {character!r}",
            position=position,
            code="L001",
            help_text=help_text,
            suggestions=suggestions
        )


class NumberOverflowError(LexerError):
    """Raised for an integer literal larger than the configured maximum."""

    def __init__(self, lexeme: str, position: int, limit: int):
        self.lexeme = lexeme
        self.limit = limit
        super().__init__(
            message=f"Number literal overflow: '{lexeme}'",
            position=position,
            code="L007",
            help_text=f"Integer literals may not exceed {limit}.",
            suggestions=["Use a smaller literal", "Configure a saturating or wrapping overflow policy"]
        )


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        position: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def position(self) -> int:
        return self.diagnostic.position

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Utilities for building correction suggestions.
    """

    @staticmethod
    def suggest_operator_corrections(invalid_op: str) -> List[str]:
        """Suggest operators one edit away from an invalid operator."""
        from .tokens import OPERATORS

        suggestions = []
        for operator in OPERATORS.keys():
            # A lone '&' or '|' is the usual typo for the doubled form
            if operator.startswith(invalid_op) and len(operator) == len(invalid_op) + 1:
                if operator[0] == operator[1]:
                    suggestions.append(operator)

        return suggestions[:3]

    @staticmethod
    def suggest_keyword_corrections(invalid_word: str) -> List[str]:
        """Suggest keywords for a misspelled (e.g. capitalized) word."""
        from .tokens import KEYWORDS

        suggestions = []
        for keyword in KEYWORDS.keys():
            if ErrorRecovery._edit_distance(invalid_word.lower(), keyword) <= 1:
                suggestions.append(keyword)

        return sorted(suggestions)

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L007": "Number literal overflow",
    "L011": "Tokenization stopped early",
}


def create_truncation_warning(character: str, position: int, remaining: int) -> LexerWarning:
    """Create the warning recorded when scanning stops at an unrecognized character."""
    return LexerWarning(
        message=f"Tokenization stopped at unexpected character {character!r}",
        position=position,
        code="L011",
        help_text=f"{remaining} character(s) were not tokenized.",
        suggestions=ErrorRecovery.suggest_operator_corrections(character)
    )

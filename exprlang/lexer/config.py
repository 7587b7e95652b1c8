"""
Lexer configuration.

Controls what the lexer does when it meets a character it cannot tokenize
and how it treats integer literals that exceed the configured range.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


# Largest value of a signed 64-bit integer
DEFAULT_MAX_INTEGER = 2 ** 63 - 1


class UnexpectedCharacterPolicy(Enum):
    """What to do with an unrecognized character"""
    RAISE = "raise"         # Fail with UnexpectedCharacterError
    TRUNCATE = "truncate"   # Stop scanning, keep tokens so far, record a warning


class OverflowPolicy(Enum):
    """How to handle integer literals larger than max_integer"""
    ERROR = "error"         # Fail with NumberOverflowError
    SATURATE = "saturate"   # Clamp to max_integer
    WRAP = "wrap"           # Reduce modulo max_integer + 1


@dataclass(frozen=True)
class LexerConfig:
    """Configuration parameters for the lexer"""

    on_unexpected: UnexpectedCharacterPolicy = UnexpectedCharacterPolicy.RAISE

    # None disables the range check entirely
    max_integer: Optional[int] = DEFAULT_MAX_INTEGER
    on_overflow: OverflowPolicy = OverflowPolicy.ERROR

    def __post_init__(self):
        if not isinstance(self.on_unexpected, UnexpectedCharacterPolicy):
            raise ValueError(f"Invalid unexpected-character policy: {self.on_unexpected!r}")
        if not isinstance(self.on_overflow, OverflowPolicy):
            raise ValueError(f"Invalid overflow policy: {self.on_overflow!r}")
        if self.max_integer is not None and self.max_integer <= 0:
            raise ValueError(f"max_integer must be positive, got {self.max_integer}")

    @property
    def truncates(self) -> bool:
        return self.on_unexpected == UnexpectedCharacterPolicy.TRUNCATE

    def apply_overflow(self, value: int) -> Optional[int]:
        """
        Bring a decoded literal into range.

        Returns None when the value is out of range and the policy is ERROR,
        leaving the caller to raise with source context.
        """
        if self.max_integer is None or value <= self.max_integer:
            return value
        if self.on_overflow == OverflowPolicy.SATURATE:
            return self.max_integer
        if self.on_overflow == OverflowPolicy.WRAP:
            return value % (self.max_integer + 1)
        return None

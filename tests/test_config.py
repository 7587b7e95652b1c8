"""
Lexer configuration tests.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprlang.lexer.config import (
    LexerConfig, UnexpectedCharacterPolicy, OverflowPolicy, DEFAULT_MAX_INTEGER
)


class TestLexerConfig(unittest.TestCase):

    def test_defaults(self):
        config = LexerConfig()
        self.assertEqual(config.on_unexpected, UnexpectedCharacterPolicy.RAISE)
        self.assertEqual(config.on_overflow, OverflowPolicy.ERROR)
        self.assertEqual(config.max_integer, DEFAULT_MAX_INTEGER)
        self.assertFalse(config.truncates)

    def test_validation(self):
        with self.assertRaises(ValueError):
            LexerConfig(max_integer=0)
        with self.assertRaises(ValueError):
            LexerConfig(max_integer=-5)
        with self.assertRaises(ValueError):
            LexerConfig(on_unexpected="truncate")
        with self.assertRaises(ValueError):
            LexerConfig(on_overflow="wrap")

    def test_apply_overflow(self):
        self.assertEqual(LexerConfig(max_integer=10).apply_overflow(10), 10)
        self.assertIsNone(LexerConfig(max_integer=10).apply_overflow(11))
        saturate = LexerConfig(max_integer=10, on_overflow=OverflowPolicy.SATURATE)
        self.assertEqual(saturate.apply_overflow(99), 10)
        wrap = LexerConfig(max_integer=10, on_overflow=OverflowPolicy.WRAP)
        self.assertEqual(wrap.apply_overflow(11), 0)
        self.assertEqual(wrap.apply_overflow(25), 3)
        self.assertEqual(LexerConfig(max_integer=None).apply_overflow(10 ** 30), 10 ** 30)

    def test_policies_from_strings(self):
        self.assertEqual(OverflowPolicy("saturate"), OverflowPolicy.SATURATE)
        self.assertEqual(UnexpectedCharacterPolicy("truncate"), UnexpectedCharacterPolicy.TRUNCATE)


if __name__ == '__main__':
    unittest.main()

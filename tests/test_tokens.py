"""
Token model tests.

Token is a closed tagged union, so the payload rules are
enforced at construction time.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprlang.lexer.tokens import (
    Token, TokenType, KEYWORDS, OPERATORS, TOKEN_SPELLINGS, lookup_keyword
)


class TestToken(unittest.TestCase):

    def test_payload_variants(self):
        self.assertEqual(Token.number(5), Token(TokenType.NUMBER, 5))
        self.assertEqual(Token.identifier("x"), Token(TokenType.IDENTIFIER, "x"))
        self.assertNotEqual(Token.number(5), Token.number(6))
        self.assertNotEqual(Token.identifier("x"), Token.identifier("y"))

    def test_marker_variants_have_no_value(self):
        self.assertIsNone(Token(TokenType.PLUS).value)
        self.assertEqual(Token(TokenType.PLUS), Token(TokenType.PLUS))

    def test_payload_rules_enforced(self):
        with self.assertRaises(TypeError):
            Token(TokenType.NUMBER)
        with self.assertRaises(TypeError):
            Token(TokenType.NUMBER, "10")
        with self.assertRaises(TypeError):
            Token(TokenType.NUMBER, True)
        with self.assertRaises(TypeError):
            Token(TokenType.IDENTIFIER, "")
        with self.assertRaises(TypeError):
            Token(TokenType.PLUS, "+")

    def test_frozen(self):
        token = Token.number(1)
        with self.assertRaises(AttributeError):
            token.value = 2

    def test_hashable(self):
        self.assertEqual(len({Token.number(1), Token.number(1), Token(TokenType.IF)}), 2)

    def test_str_and_repr(self):
        self.assertEqual(str(Token.number(10)), "NUMBER(10)")
        self.assertEqual(str(Token(TokenType.AND)), "AND")
        self.assertEqual(repr(Token.identifier("x")), "Token(IDENTIFIER, 'x')")
        self.assertEqual(repr(Token(TokenType.OR)), "Token(OR)")

    def test_lexeme(self):
        self.assertEqual(Token.number(42).lexeme, "42")
        self.assertEqual(Token.identifier("abc").lexeme, "abc")
        self.assertEqual(Token(TokenType.SMALLER_EQUALS).lexeme, "<=")
        self.assertEqual(Token(TokenType.CURLY_L).lexeme, "{")
        self.assertEqual(Token(TokenType.ELSE).lexeme, "else")

    def test_every_marker_has_a_spelling(self):
        for token_type in TokenType:
            if token_type in (TokenType.NUMBER, TokenType.IDENTIFIER):
                continue
            with self.subTest(token_type=token_type):
                self.assertIn(token_type, TOKEN_SPELLINGS)

    def test_classification(self):
        self.assertTrue(Token.number(1).is_literal)
        self.assertTrue(Token(TokenType.IF).is_keyword)
        self.assertFalse(Token.identifier("iff").is_keyword)
        self.assertTrue(Token(TokenType.AND).is_operator)
        self.assertFalse(Token(TokenType.LPAREN).is_operator)
        self.assertTrue(Token.identifier("a").is_identifier)


class TestTables(unittest.TestCase):

    def test_keyword_table(self):
        self.assertEqual(KEYWORDS, {"if": TokenType.IF, "else": TokenType.ELSE})
        self.assertEqual(lookup_keyword("if"), TokenType.IF)
        self.assertIsNone(lookup_keyword("ifx"))
        self.assertIsNone(lookup_keyword("i"))

    def test_operator_spellings_are_short(self):
        for spelling in OPERATORS:
            self.assertIn(len(spelling), (1, 2))


if __name__ == '__main__':
    unittest.main()

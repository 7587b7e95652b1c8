#!/usr/bin/env python3
"""
Main test runner for the exprlang lexer.

Runs a quick smoke pass over sample programs, then the unittest suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


SAMPLES = [
    ("arithmetic", "10 +2*(3-4)/5", 11),
    ("assignment", "total = total + 1", 5),
    ("branching", "if x <= 10 {y = 1} else {y = 2}", 15),
    ("logic", "if x < 10 && y > 20 || !(z == 30)", 15),
]


def run_smoke_tests() -> bool:
    """Tokenize the sample programs and check token counts."""

    print("🚀 exprlang Lexer Test Suite")
    print("=" * 60)

    try:
        from exprlang.lexer import Lexer, LexerError, UnexpectedCharacterError
        print("✅ Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    for name, source, expected_count in SAMPLES:
        print(f"  🔧 {name}: {source!r}")
        try:
            tokens = Lexer(source).tokenize()
        except LexerError as e:
            print(f"     ❌ Lexing failed:\n{e}")
            return False

        if len(tokens) != expected_count:
            print(f"     ❌ Expected {expected_count} tokens, got {len(tokens)}")
            return False
        print(f"     ✅ {len(tokens)} tokens: {' '.join(str(t) for t in tokens)}")

    # Test error handling
    print("  ❌ Testing error handling...")
    try:
        Lexer("x & y").tokenize()
        print("     ❌ Expected an unexpected-character error but got none")
        return False
    except UnexpectedCharacterError as e:
        print(f"     ✅ Caught expected error at offset {e.position}")

    print()
    return True


def run_unit_tests() -> bool:
    """Discover and run the unittest modules under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_tests() and run_unit_tests()
    if success:
        print("🎉 All tests PASSED!")
    sys.exit(0 if success else 1)

"""
exprlex - dump the tokens of an exprlang source.

Reads an inline expression, a file, or standard input and prints one token
per line (or a JSON array with --json).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .lexer import (
    Lexer, LexerConfig, LexerError, Token, UnexpectedCharacterPolicy, OverflowPolicy
)

logger = logging.getLogger(__name__)


def _strip_line_ending(text: str) -> str:
    # Editors terminate files with a newline; the language has no newline token
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprlex",
        description="Tokenize exprlang source and print the tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprlex --expr "if x < 10 && y > 20"      # Tokenize an inline expression
    exprlex program.ex                        # Tokenize a file
    echo "x = 1" | exprlex --json             # Read stdin, print JSON
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize (default: stdin)')
    parser.add_argument('-e', '--expr',
                        help='Tokenize this text instead of a file')

    # Lexer policies
    parser.add_argument('--truncate', action='store_true',
                        help='Stop at an unexpected character instead of failing')
    parser.add_argument('--max-integer', type=int, default=None,
                        help='Largest allowed integer literal (default: 2**63-1)')
    parser.add_argument('--unbounded', action='store_true',
                        help='Disable the integer range check')
    parser.add_argument('--overflow', choices=[p.value for p in OverflowPolicy],
                        default=OverflowPolicy.ERROR.value,
                        help='What to do with out-of-range literals')

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Print tokens as a JSON array')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def config_from_args(args: argparse.Namespace) -> LexerConfig:
    kwargs = {
        "on_unexpected": (UnexpectedCharacterPolicy.TRUNCATE if args.truncate
                          else UnexpectedCharacterPolicy.RAISE),
        "on_overflow": OverflowPolicy(args.overflow),
    }
    if args.unbounded:
        kwargs["max_integer"] = None
    elif args.max_integer is not None:
        kwargs["max_integer"] = args.max_integer
    return LexerConfig(**kwargs)


def _read_source(args: argparse.Namespace) -> str:
    if args.expr is not None:
        return args.expr
    if args.file:
        with open(args.file, 'r', encoding='utf-8', newline='') as f:
            return _strip_line_ending(f.read())
    return _strip_line_ending(sys.stdin.read())


def format_tokens(tokens: List[Token], as_json: bool = False) -> str:
    if as_json:
        return json.dumps([
            {"type": token.type.name, "value": token.value} for token in tokens
        ])
    return "\n".join(str(token) for token in tokens)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the exprlex command"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.expr is not None and args.file:
        parser.error("--expr and a source file are mutually exclusive")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        source = _read_source(args)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1

    lexer = Lexer(source, config)
    try:
        tokens = lexer.tokenize()
    except LexerError as e:
        sys.stderr.write(str(e))
        return 1

    if args.verbose:
        for warning in lexer.warnings:
            sys.stderr.write(str(warning))

    output = format_tokens(tokens, args.json)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

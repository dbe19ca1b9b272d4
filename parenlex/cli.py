"""
Command-line interface for parenlex.

Provides the main entry point for the parenlex tokenizer with subcommands
for dumping tokens and verifying that a file survives a round trip.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .frontend import Lexer, LexerError, Token, reconstruct
from .utils.settings import Settings

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="parenlex",
        description="parenlex: lossless tokenizer for Lisp-style source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m parenlex tokenize program.lisp
  python -m parenlex tokenize program.lisp --format json --positions
  cat program.lisp | python -m parenlex check -
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "input",
        type=str,
        help="Input file to tokenize ('-' for stdin)"
    )
    common.add_argument(
        "--encoding",
        default="utf-8",
        help="Input encoding (default: utf-8)"
    )
    common.add_argument(
        "--no-lines",
        action="store_true",
        help="Do not track line/column numbers"
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Tokenize command
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        parents=[common],
        help="Print the tokens of a file"
    )
    tokenize_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    tokenize_parser.add_argument(
        "--positions",
        action="store_true",
        help="Include line:column and offset in text output"
    )
    tokenize_parser.add_argument(
        "--no-numbers",
        action="store_true",
        help="Skip reclassifying numeric identifiers as NUMBER"
    )

    # Check command
    subparsers.add_parser(
        "check",
        parents=[common],
        help="Verify that the tokens reproduce the input exactly"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def read_input(name: str) -> bytes:
    """Read the raw bytes of a file, or of stdin for '-'."""
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def format_token(token: Token, positions: bool = False) -> str:
    """Format a token as one tab-separated line.

    Args:
        token: Token to format
        positions: Whether to include line:column and offset

    Returns:
        str: e.g. ``IDENTIFIER<TAB>"print"``
    """
    literal = json.dumps(token.literal)
    if positions:
        return f"{token.kind.value}\t{token.line}:{token.column}\t{token.offset}\t{literal}"
    return f"{token.kind.value}\t{literal}"


def tokens_to_json(tokens: List[Token]) -> str:
    """Serialize tokens as an indented JSON array.

    Args:
        tokens: Tokens to serialize

    Returns:
        str: One object per token with kind, literal, line, column and offset
    """
    return json.dumps(
        [
            {
                "kind": t.kind.value,
                "literal": t.literal,
                "line": t.line,
                "column": t.column,
                "offset": t.offset,
            }
            for t in tokens
        ],
        indent=2,
    )


def handle_tokenize(args: argparse.Namespace, lexer: Lexer, data: bytes) -> int:
    """Handle the tokenize command.

    Args:
        args: Parsed command-line arguments
        lexer: Configured lexer
        data: Raw input bytes

    Returns:
        int: Exit code (0 for success)
    """
    tokens = lexer.tokenize(data)
    if args.format == "json":
        print(tokens_to_json(tokens))
    else:
        for token in tokens:
            print(format_token(token, positions=args.positions))
    return 0


def handle_check(args: argparse.Namespace, lexer: Lexer, data: bytes) -> int:
    """Handle the check command.

    Args:
        args: Parsed command-line arguments
        lexer: Configured lexer
        data: Raw input bytes

    Returns:
        int: Exit code (0 if the round trip is exact, 1 otherwise)
    """
    tokens = lexer.tokenize(data)
    text = data.decode(lexer.settings.encoding)
    rebuilt = reconstruct(tokens)
    if rebuilt != text:
        mismatch = next(
            (i for i, (a, b) in enumerate(zip(rebuilt, text)) if a != b),
            min(len(rebuilt), len(text)),
        )
        print(f"[parenlex] Round trip mismatch at code point {mismatch}", file=sys.stderr)
        return 1
    print(f"[parenlex] OK: {len(tokens)} tokens")
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"parenlex version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        return handle_version(args)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        )

    try:
        settings = Settings(
            encoding=args.encoding,
            track_lines=not args.no_lines,
            reclassify_numbers=not getattr(args, "no_numbers", False),
        )
        data = read_input(args.input)
    except (LookupError, OSError) as e:
        print(f"[parenlex] Error: {e}", file=sys.stderr)
        return 1

    lexer = Lexer(settings)
    logger.debug(f"Tokenizing {args.input} ({len(data)} bytes)")

    try:
        if args.command == "tokenize":
            return handle_tokenize(args, lexer, data)
        elif args.command == "check":
            return handle_check(args, lexer, data)
    except LexerError as e:
        print(f"[parenlex] Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())

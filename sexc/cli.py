"""Command line entry point: tokenize a source file and print the tokens."""

from __future__ import annotations

import argparse
import sys

from sexc.common import read_file
from sexc.errors import LexerError
from sexc.lexer import Lexer


def main(argv: list[str] | None = None) -> int:
    """Read the file named on the command line and dump its tokens."""
    parser = argparse.ArgumentParser(prog="sexc", description="Tokenize a source file.")
    parser.add_argument("path", help="source file to tokenize")
    args = parser.parse_args(argv)

    try:
        source = read_file(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"sexc: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    try:
        tokens = Lexer(source).parse()
    except LexerError as exc:
        print(f"sexc: {exc}", file=sys.stderr)
        return 1

    for token in tokens:
        print(repr(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())
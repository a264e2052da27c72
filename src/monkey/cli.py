"""Monkey CLI entry point.

Usage:
    monkey repl [options]               Start the interactive token REPL
    monkey tokenize <file.mk> [options] Display the token stream of a file

Options:
    --allow-digits    Accept digits after the first identifier character
    --strict          Fail if the input contains illegal characters (tokenize)
    --verbose         Log debug output to stderr
    -h, --help        Show this message
    --version         Show the version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from monkey import repl
from monkey.lexer.lexer import Lexer
from monkey.lexer.tokens import TokenType

logger = logging.getLogger(__name__)

FLAGS = ("--allow-digits", "--strict", "--verbose")
HELP_FLAGS = ("--help", "-h")


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if any(a in HELP_FLAGS for a in args):
        print(__doc__.strip())
        return 0

    if args and args[0] == "--version":
        from monkey import __version__
        print(f"monkey {__version__}")
        return 0

    flags = {a for a in args if a in FLAGS}
    # A lone "-" is a positional argument
    unknown = [a for a in args if a.startswith("-") and a != "-" and a not in FLAGS]
    args = [a for a in args if a not in FLAGS]

    if unknown:
        print(f"Error: unknown option '{unknown[0]}'")
        return 1

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if "--verbose" in flags:
        _configure_logging()

    lexer_options = {"allow_digits_in_identifiers": "--allow-digits" in flags}

    if command == "repl":
        if len(args) > 1:
            print(f"Error: command 'repl' takes no arguments, got '{args[1]}'")
            return 1
        if "--strict" in flags:
            print("Error: option '--strict' only applies to 'tokenize'")
            return 1
        return _cmd_repl(lexer_options)

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    if len(args) > 2:
        print(f"Error: command '{command}' takes one file argument, got {len(args) - 1}")
        return 1

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filepath}: {e}")
        return 1
    logger.debug("read %d characters from %s", len(source), filepath)

    return _cmd_tokenize(source, strict="--strict" in flags, lexer_options=lexer_options)


def _cmd_repl(lexer_options: dict) -> int:
    """Run the interactive REPL on stdin/stdout."""
    print("Monkey token REPL. Type source lines; Ctrl+D to exit.")
    try:
        repl.start(sys.stdin, sys.stdout, **lexer_options)
    except KeyboardInterrupt:
        print("\nBye.")
    return 0


def _cmd_tokenize(source: str, *, strict: bool, lexer_options: dict) -> int:
    """Display the token stream."""
    tokens = Lexer(source, **lexer_options).tokenize()

    for tok in tokens:
        print(repr(tok))

    if strict:
        illegal = [i for i, tok in enumerate(tokens) if tok.type is TokenType.ILLEGAL]
        if illegal:
            print(f"Lexer error: illegal character at token {illegal[0]} "
                  f"({len(illegal)} illegal token(s) in total)")
            return 1
    return 0


def _configure_logging() -> None:
    root = logging.getLogger("monkey")
    root.setLevel(logging.DEBUG)
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    root.addHandler(handler)


if __name__ == "__main__":
    sys.exit(main())

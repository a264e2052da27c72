"""Interactive token REPL: read a line, print its tokens, repeat."""

from __future__ import annotations

from typing import TextIO

from monkey.lexer.lexer import Lexer
from monkey.lexer.tokens import TokenType

PROMPT = ">> "


def start(stdin: TextIO, stdout: TextIO, *, prompt: str = PROMPT, **lexer_options) -> None:
    """Run the read loop until `stdin` is exhausted.

    Each line gets its own `Lexer`; every token up to and including EOF
    is written to `stdout` in its debug form.
    """
    while True:
        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return

        lexer = Lexer(line, **lexer_options)
        while True:
            tok = lexer.next_token()
            stdout.write(f"{tok!r}\n")
            if tok.type is TokenType.EOF:
                break

"""Tests for the interactive token REPL."""

import io

from monkey.repl import PROMPT, start


def run_repl(text: str, **options) -> str:
    stdout = io.StringIO()
    start(io.StringIO(text), stdout, **options)
    return stdout.getvalue()


class TestRepl:
    def test_single_line(self):
        out = run_repl("let five = 5;\n")
        assert out.splitlines() == [
            ">> Token(LET)",
            "Token(IDENTIFIER, 'five')",
            "Token(ASSIGN)",
            "Token(INTEGER, '5')",
            "Token(SEMICOLON)",
            "Token(EOF)",
            ">> ",
        ]

    def test_empty_input_exits(self):
        assert run_repl("") == PROMPT + "\n"

    def test_blank_line_yields_eof_only(self):
        out = run_repl("\n")
        assert out.splitlines()[0] == ">> Token(EOF)"

    def test_fresh_lexer_per_line(self):
        out = run_repl("a\nb\n")
        lines = out.splitlines()
        assert lines[:4] == [
            ">> Token(IDENTIFIER, 'a')",
            "Token(EOF)",
            ">> Token(IDENTIFIER, 'b')",
            "Token(EOF)",
        ]

    def test_illegal_is_printed_and_loop_continues(self):
        out = run_repl("@\nx\n")
        assert "Token(ILLEGAL)" in out
        assert "Token(IDENTIFIER, 'x')" in out

    def test_last_line_without_newline(self):
        out = run_repl("if")
        assert ">> Token(IF)" in out

    def test_custom_prompt(self):
        out = run_repl("1\n", prompt="monkey> ")
        assert out.startswith("monkey> Token(INTEGER, '1')")

    def test_lexer_options_forwarded(self):
        out = run_repl("x1\n", allow_digits_in_identifiers=True)
        assert "Token(IDENTIFIER, 'x1')" in out
